"""SVG lint checks — accessibility, best practices, deprecated elements, compatibility.

Pattern-based, like the rest of the svg package: no parsing, so it also works
on markup the minifier would reject.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field

Severity = Literal["error", "warning", "info"]


class ValidationIssue(BaseModel):
    severity: Severity
    code: str
    message: str
    suggestion: str | None = None


class ValidationSummary(BaseModel):
    errors: int = 0
    warnings: int = 0
    info: int = 0


class ValidationResult(BaseModel):
    valid: bool = Field(description="True when no issue has error severity")
    issues: list[ValidationIssue] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)


# (element, replacement or None)
DEPRECATED_ELEMENTS = [
    ("altGlyph", "text"),
    ("altGlyphDef", None),
    ("altGlyphItem", None),
    ("animateColor", "animate"),
    ("cursor", "CSS cursor"),
    ("font", "CSS @font-face"),
    ("font-face", "CSS @font-face"),
    ("font-face-format", "CSS @font-face"),
    ("font-face-name", "CSS @font-face"),
    ("font-face-src", "CSS @font-face"),
    ("font-face-uri", "CSS @font-face"),
    ("glyph", None),
    ("glyphRef", None),
    ("hkern", None),
    ("missing-glyph", None),
    ("tref", "text"),
    ("vkern", None),
]

SMIL_ELEMENTS = ["animate", "animateMotion", "animateTransform", "set"]

_TITLE_RE = re.compile(r"<title[^>]*>")
_DESC_RE = re.compile(r"<desc[^>]*>")
_SVG_TAG_RE = re.compile(r"<svg[^>]*>")
_INLINE_STYLE_RE = re.compile(r"""style\s*=\s*["'][^"']+["']""")
_EVENT_HANDLER_RE = re.compile(r"""\bon\w+\s*=\s*["'][^"']*["']""", re.IGNORECASE)
_EXTERNAL_HREF_RE = re.compile(r"""xlink:href\s*=\s*["']https?://""", re.IGNORECASE)
_HARDCODED_COLOR_RE = re.compile(r"""fill\s*=\s*["']#(?:000(?:000)?|fff(?:fff)?)["']""", re.IGNORECASE)


def _element_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{re.escape(name)}[\s>]", re.IGNORECASE)


def _has_svg_attr(content: str, attr: str) -> bool:
    return bool(re.search(rf"<svg[^>]*{attr}", content))


def validate_svg(content: str) -> ValidationResult:
    """Run every check; ``valid`` is False as soon as one error is found."""
    issues: list[ValidationIssue] = []
    content = content.strip()

    if not content:
        issues.append(ValidationIssue(severity="error", code="EMPTY_CONTENT", message="SVG content is empty"))
        return _result(issues)
    if "<svg" not in content and "<?xml" not in content:
        issues.append(ValidationIssue(severity="error", code="NOT_SVG", message="Content does not appear to be SVG"))
        return _result(issues)

    _check_accessibility(content, issues)
    _check_best_practices(content, issues)
    _check_deprecated_elements(content, issues)
    _check_compatibility(content, issues)
    return _result(issues)


def _result(issues: list[ValidationIssue]) -> ValidationResult:
    summary = ValidationSummary(
        errors=sum(1 for i in issues if i.severity == "error"),
        warnings=sum(1 for i in issues if i.severity == "warning"),
        info=sum(1 for i in issues if i.severity == "info"),
    )
    return ValidationResult(valid=summary.errors == 0, issues=issues, summary=summary)


def _check_accessibility(content: str, issues: list[ValidationIssue]) -> None:
    has_title = bool(_TITLE_RE.search(content))
    if not has_title:
        issues.append(ValidationIssue(
            severity="warning",
            code="MISSING_TITLE",
            message="SVG is missing a <title> element",
            suggestion="Add a <title> element for screen readers, e.g. <title>Icon description</title>",
        ))
    if not _DESC_RE.search(content):
        issues.append(ValidationIssue(
            severity="info",
            code="MISSING_DESC",
            message="SVG is missing a <desc> element",
            suggestion="Consider adding a <desc> element for a longer description of the SVG content",
        ))
    if not _has_svg_attr(content, "role="):
        issues.append(ValidationIssue(
            severity="info",
            code="MISSING_ROLE",
            message="SVG is missing a role attribute",
            suggestion='Add role="img" for images or role="graphics-document" for complex graphics',
        ))
    # aria-label also covers aria-labelledby
    if not has_title and not _has_svg_attr(content, "aria-label"):
        issues.append(ValidationIssue(
            severity="warning",
            code="NO_ACCESSIBLE_NAME",
            message="SVG has no accessible name",
            suggestion="Add aria-label, aria-labelledby, or a <title> element",
        ))


def _check_best_practices(content: str, issues: list[ValidationIssue]) -> None:
    if _INLINE_STYLE_RE.search(content):
        issues.append(ValidationIssue(
            severity="warning",
            code="INLINE_STYLES",
            message="SVG contains inline styles",
            suggestion="Prefer CSS classes or presentation attributes over inline styles",
        ))
    if _element_re("style").search(content):
        issues.append(ValidationIssue(
            severity="info",
            code="EMBEDDED_STYLES",
            message="SVG contains embedded <style> element",
            suggestion="Embedded styles increase file size; extract them to external CSS if reused",
        ))
    if re.search(r"<script[^>]*>", content):
        issues.append(ValidationIssue(
            severity="error",
            code="SCRIPT_ELEMENT",
            message="SVG contains <script> element",
            suggestion="Remove script elements; SVG scripts can execute JavaScript",
        ))
    if _EVENT_HANDLER_RE.search(content):
        issues.append(ValidationIssue(
            severity="error",
            code="EVENT_HANDLERS",
            message="SVG contains inline event handlers",
            suggestion="Remove inline event handlers (onclick, onload, etc.)",
        ))
    if _EXTERNAL_HREF_RE.search(content):
        issues.append(ValidationIssue(
            severity="warning",
            code="EXTERNAL_REFERENCE",
            message="SVG contains external resource references",
            suggestion="External references may not load in all contexts and can be a security concern",
        ))
    if _SVG_TAG_RE.search(content) and not _has_svg_attr(content, "viewBox"):
        issues.append(ValidationIssue(
            severity="warning",
            code="MISSING_VIEWBOX",
            message="SVG is missing viewBox attribute",
            suggestion='Add a viewBox for proper scaling, e.g. viewBox="0 0 24 24"',
        ))
    if _HARDCODED_COLOR_RE.search(content):
        issues.append(ValidationIssue(
            severity="info",
            code="HARDCODED_COLORS",
            message="SVG contains hardcoded black/white colors",
            suggestion='Consider fill="currentColor" for better theme compatibility',
        ))


def _check_deprecated_elements(content: str, issues: list[ValidationIssue]) -> None:
    for element, replacement in DEPRECATED_ELEMENTS:
        if not _element_re(element).search(content):
            continue
        issues.append(ValidationIssue(
            severity="warning",
            code="DEPRECATED_ELEMENT",
            message=f"SVG contains deprecated <{element}> element",
            suggestion=f"Use <{replacement}> instead" if replacement else f"Remove deprecated <{element}> element",
        ))


def _check_compatibility(content: str, issues: list[ValidationIssue]) -> None:
    if re.search(r"<foreignObject[^>]*>", content):
        issues.append(ValidationIssue(
            severity="info",
            code="FOREIGN_OBJECT",
            message="SVG uses <foreignObject> element",
            suggestion="foreignObject may not render consistently across browsers and contexts",
        ))
    smil = next((el for el in SMIL_ELEMENTS if _element_re(el).search(content)), None)
    if smil is not None:
        issues.append(ValidationIssue(
            severity="info",
            code="SMIL_ANIMATION",
            message=f"SVG uses SMIL animation (<{smil}>)",
            suggestion="Consider CSS animations for broader support",
        ))
    if re.search(r"<filter[^>]*>", content):
        issues.append(ValidationIssue(
            severity="info",
            code="FILTER_EFFECTS",
            message="SVG uses filter effects",
            suggestion="SVG filters can impact rendering performance, especially on mobile devices",
        ))
