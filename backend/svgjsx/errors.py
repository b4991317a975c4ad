"""Typed failures raised by the optimizer and component generators.

Callers translate these into protocol responses (HTTP status, CLI exit code).
"""

from __future__ import annotations


class SvgJsxError(Exception):
    """Base class for every error raised by svgjsx."""


class InvalidInputError(SvgJsxError):
    """Content does not start with ``<svg`` or ``<?xml``."""


class ContentTooLargeError(SvgJsxError):
    """Content exceeds the caller-supplied byte limit."""

    def __init__(self, message: str, size: int, max_size: int) -> None:
        super().__init__(message)
        self.size = size
        self.max_size = max_size


class MalformedSvgError(SvgJsxError):
    """No root ``<svg>...</svg>`` element could be found."""


class InvalidSvgContentError(SvgJsxError):
    """A generator could not extract the SVG structure it needs."""


class OptimizerError(SvgJsxError):
    """The minifier could not parse the document."""


class UnsupportedFrameworkError(SvgJsxError, ValueError):
    """No generator is registered for the requested framework."""
