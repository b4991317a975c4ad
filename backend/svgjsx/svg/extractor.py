"""Root-element extraction — the structure every component generator starts from.

Boundary matching only: the first ``<svg`` start tag supplies the attribute
text and the last ``</svg>`` closes it. Anything nested in between, including
inner ``<svg>`` elements, stays verbatim in ``inner_content``.
"""

from __future__ import annotations

import re

from svgjsx.errors import MalformedSvgError
from svgjsx.models.svg_document import ExtractedSvgStructure, SvgAttribute

_SVG_START_RE = re.compile(r"<svg(?=[\s/>])", re.IGNORECASE)
_SVG_OPEN_TAG_RE = re.compile(
    r"""<svg(?P<attrs>(?:\s+[^\s=/>"']+(?:\s*=\s*(?:"[^"]*"|'[^']*'|(?:[^\s"'>/]|/(?!>))+))?)*)\s*>""",
    re.IGNORECASE,
)
_SVG_CLOSE_RE = re.compile(r"</svg\s*>", re.IGNORECASE)
_ATTR_RE = re.compile(
    r"""(?P<name>[^\s=/>"']+)(?:\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>(?:[^\s"'>/]|/(?!>))+)))?"""
)


def extract_svg_structure(svg: str) -> ExtractedSvgStructure:
    """Split an SVG document into root attribute text and inner markup.

    Raises MalformedSvgError when there is no ``<svg`` start tag, when the
    first one is self-closing, or when no ``</svg>`` follows it.
    """
    start = _SVG_START_RE.search(svg)
    if start is None:
        raise MalformedSvgError("No <svg> root element found")

    open_tag = _SVG_OPEN_TAG_RE.match(svg, start.start())
    if open_tag is None:
        raise MalformedSvgError("Root <svg> element has no content (self-closing or unterminated tag)")

    close_tag = None
    for close_tag in _SVG_CLOSE_RE.finditer(svg, open_tag.end()):
        pass
    if close_tag is None:
        raise MalformedSvgError("Root <svg> element is missing its closing </svg> tag")

    attrs = open_tag.group("attrs").strip()
    return ExtractedSvgStructure(
        attributes=attrs,
        inner_content=svg[open_tag.end():close_tag.start()],
        attribute_list=split_attributes(attrs),
    )


def split_attributes(attr_text: str) -> list[SvgAttribute]:
    """Tokenize root attribute text into SvgAttribute items, in source order."""
    attrs: list[SvgAttribute] = []
    for m in _ATTR_RE.finditer(attr_text):
        if m.group("dq") is not None:
            value = m.group("dq")
        elif m.group("sq") is not None:
            value = m.group("sq")
        else:
            value = m.group("bare")
        attrs.append(SvgAttribute(name=m.group("name"), value=value, raw=m.group(0)))
    return attrs
