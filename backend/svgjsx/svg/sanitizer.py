"""SVG sanitizer — strips script vectors before SVG reaches a browser.

Two levels:
- sanitize_svg(): removes dangerous elements (script, iframe, foreignObject, ...),
  on* event-handler attributes and javascript:/vbscript:/data: URLs.  Returns the
  cleaned text plus one issue line per kind of content removed.
- check_svg_security(): reports the same findings as warnings without touching
  the text.  Used when the caller did not ask for sanitization.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from svgjsx.errors import ContentTooLargeError

# ── Rules ─────────────────────────────────────────────────────────────────

DANGEROUS_ELEMENTS = (
    "script",
    "iframe",
    "object",
    "embed",
    "foreignObject",
    "applet",
    "frame",
    "frameset",
    "base",
    "link",
    "meta",
)

DANGEROUS_URL_SCHEMES = ("javascript:", "vbscript:", "data:text/html", "data:application/")

_EVENT_HANDLER_RE = re.compile(
    r"""\s(on[a-z]+)\s*=\s*(?:"[^"]*"|'[^']*')""",
    re.IGNORECASE,
)
_EVENT_HANDLER_NAME_RE = re.compile(r"\s(on[a-z]+)\s*=", re.IGNORECASE)


def _element_patterns(element: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    self_closing = re.compile(rf"<{element}\b[^>]*/>", re.IGNORECASE)
    paired = re.compile(rf"<{element}\b[^>]*>.*?</{element}\s*>", re.IGNORECASE | re.DOTALL)
    return self_closing, paired


_ELEMENT_RES = {el: _element_patterns(el) for el in DANGEROUS_ELEMENTS}
_ELEMENT_PRESENT_RES = {el: re.compile(rf"<{el}[\s/>]", re.IGNORECASE) for el in DANGEROUS_ELEMENTS}
_URL_ATTR_RES = {
    scheme: re.compile(
        rf"""\s*(?:xlink:href|href|src|action|formaction)\s*=\s*(?:"\s*{re.escape(scheme)}[^"]*"|'\s*{re.escape(scheme)}[^']*')""",
        re.IGNORECASE,
    )
    for scheme in DANGEROUS_URL_SCHEMES
}


@dataclass
class SanitizeResult:
    sanitized: str
    modified: bool = False
    issues: list[str] = field(default_factory=list)


# ── Sanitization ──────────────────────────────────────────────────────────


def sanitize_svg(
    svg: str,
    *,
    remove_scripts: bool = True,
    remove_event_handlers: bool = True,
    remove_dangerous_elements: bool = True,
    remove_dangerous_urls: bool = True,
) -> SanitizeResult:
    """Remove XSS vectors from SVG text."""
    issues: list[str] = []

    if remove_dangerous_elements or remove_scripts:
        for element in DANGEROUS_ELEMENTS:
            if element == "script" and not remove_scripts:
                continue
            if element != "script" and not remove_dangerous_elements:
                continue
            self_closing, paired = _ELEMENT_RES[element]
            if self_closing.search(svg) or paired.search(svg):
                issues.append(f"Removed <{element}> element(s)")
                svg = self_closing.sub("", svg)
                svg = paired.sub("", svg)

    if remove_event_handlers:
        handlers = _ordered_unique(m.lower() for m in _EVENT_HANDLER_RE.findall(svg))
        if handlers:
            svg = _EVENT_HANDLER_RE.sub("", svg)
            issues.extend(f"Removed {handler} attribute(s)" for handler in handlers)

    if remove_dangerous_urls:
        for scheme, pattern in _URL_ATTR_RES.items():
            if pattern.search(svg):
                issues.append(f"Removed {scheme} URL(s)")
                svg = pattern.sub("", svg)

    return SanitizeResult(sanitized=svg, modified=bool(issues), issues=issues)


def check_svg_security(svg: str) -> list[str]:
    """List potentially dangerous content without modifying the SVG."""
    warnings: list[str] = []

    for element, pattern in _ELEMENT_PRESENT_RES.items():
        if pattern.search(svg):
            warnings.append(f"Contains potentially dangerous <{element}> element")

    for handler in _ordered_unique(m.lower() for m in _EVENT_HANDLER_NAME_RE.findall(svg)):
        warnings.append(f"Contains event handler: {handler}")

    lowered = svg.lower()
    for scheme in DANGEROUS_URL_SCHEMES:
        if scheme in lowered:
            warnings.append(f"Contains dangerous URL scheme: {scheme}")

    return warnings


def _ordered_unique(items) -> list[str]:
    seen: dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return list(seen)


# ── Size limits ───────────────────────────────────────────────────────────


def validate_content_size(content: str, max_size: int = 1024 * 1024) -> None:
    """Raise ContentTooLargeError when the UTF-8 size of ``content`` exceeds ``max_size``."""
    size = len(content.encode("utf-8"))
    if size > max_size:
        raise ContentTooLargeError(
            f"SVG content too large ({format_bytes(size)}). Maximum size is {format_bytes(max_size)}.",
            size=size,
            max_size=max_size,
        )


def format_bytes(num_bytes: int) -> str:
    """Human-readable byte count: 0 B, 512 B, 1.5 KB, 1.0 MB."""
    if num_bytes == 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB"]
    size = float(num_bytes)
    i = 0
    while abs(size) >= 1024 and i < len(units) - 1:
        size /= 1024
        i += 1
    return f"{size:.{0 if i == 0 else 1}f} {units[i]}"
