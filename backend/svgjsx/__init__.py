"""svgjsx — SVG optimizer and framework component generator."""

__version__ = "0.1.0"
