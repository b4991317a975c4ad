"""Optimization orchestrator — validate, sanitize/scan, minify, camelCase, measure.

The single entry point used by the HTTP routes, the MCP tool surface and the
CLI. Collaborators are injected so callers (and tests) can swap them out.
"""

from __future__ import annotations

from typing import Callable, Protocol

from svgjsx.errors import InvalidInputError
from svgjsx.models.optimization import OptimizationMetrics, OptimizationResult
from svgjsx.svg.attributes import convert_attributes_to_camel_case
from svgjsx.svg.minifier import MinifyResult, minify
from svgjsx.svg.sanitizer import SanitizeResult, check_svg_security, sanitize_svg, validate_content_size

DEFAULT_FILENAME = "untitled.svg"


class Minifier(Protocol):
    def __call__(self, svg_text: str, multipass: bool = True) -> MinifyResult: ...


class SvgOptimizer:
    """Runs the optimize flow with the given collaborators."""

    def __init__(
        self,
        minifier: Minifier | None = None,
        sanitizer: Callable[[str], SanitizeResult] | None = None,
        scanner: Callable[[str], list[str]] | None = None,
    ) -> None:
        self.minifier = minifier or minify
        self.sanitizer = sanitizer or sanitize_svg
        self.scanner = scanner or check_svg_security

    def run(
        self,
        content: str,
        filename: str | None = None,
        camel_case: bool = True,
        sanitize: bool = False,
        max_size: int | None = None,
    ) -> OptimizationResult:
        trimmed = content.strip()
        if not trimmed.startswith("<svg") and not trimmed.startswith("<?xml"):
            raise InvalidInputError("Invalid SVG content: must start with <svg or <?xml")

        if max_size is not None:
            validate_content_size(trimmed, max_size)

        processed = trimmed
        if sanitize:
            sanitized = self.sanitizer(trimmed)
            processed = sanitized.sanitized
            warnings = list(sanitized.issues)
        else:
            warnings = self.scanner(trimmed)

        optimized = self.minifier(processed, multipass=True).data

        if camel_case:
            optimized = convert_attributes_to_camel_case(optimized)

        return OptimizationResult(
            success=True,
            filename=filename or DEFAULT_FILENAME,
            optimization=compute_metrics(trimmed, optimized),
            camel_case_applied=camel_case,
            sanitized=sanitize,
            security_warnings=warnings or None,
            result=optimized,
        )


def compute_metrics(original: str, optimized: str) -> OptimizationMetrics:
    """Size metrics over UTF-8 byte lengths. An empty original reports 0.0% / 0.000."""
    original_size = len(original.encode("utf-8"))
    optimized_size = len(optimized.encode("utf-8"))
    saved = original_size - optimized_size

    if original_size == 0:
        saved_percent, ratio = 0.0, 0.0
    else:
        saved_percent = saved / original_size * 100
        ratio = optimized_size / original_size

    return OptimizationMetrics(
        original_size=original_size,
        optimized_size=optimized_size,
        saved_bytes=saved,
        saved_percent=f"{saved_percent:.1f}%",
        ratio=f"{ratio:.3f}",
    )


_default_optimizer = SvgOptimizer()


def optimize_svg(
    content: str,
    filename: str | None = None,
    camel_case: bool = True,
    sanitize: bool = False,
    max_size: int | None = None,
) -> OptimizationResult:
    """Optimize SVG text with the default collaborators."""
    return _default_optimizer.run(
        content,
        filename=filename,
        camel_case=camel_case,
        sanitize=sanitize,
        max_size=max_size,
    )
