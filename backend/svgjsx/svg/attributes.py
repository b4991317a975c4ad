"""Attribute-name rewriting over SVG text — kebab-case → camelCase for JSX.

Not an XML parser: a single regex pass walks comments, CDATA sections and
start tags. Only start tags are touched, and inside a tag each attribute is
consumed as a whole ``name=value`` token so nothing inside a quoted value is
ever rewritten.
"""

from __future__ import annotations

import re
from typing import Callable

# One attribute token: leading whitespace, name, optional "= value"
_ATTR_TOKEN = r"""\s+[^\s=/>"']+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>]+))?"""

_MARKUP_RE = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<(?P<tag>[A-Za-z_][\w:.-]*)(?P<attrs>(?:" + _ATTR_TOKEN + r")*)(?P<end>\s*/?>)",
    re.DOTALL,
)

_ATTR_RE = re.compile(
    r"""(?P<space>\s+)(?P<name>[^\s=/>"']+)"""
    r"""(?:(?P<eq>\s*=\s*)(?P<value>"[^"]*"|'[^']*'|[^\s"'>]+))?"""
)

_KEBAB_NAME_RE = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)+$", re.IGNORECASE)

# fn(tag, name, quoted_value) -> (new_name, new_quoted_value)
AttributeRewriter = Callable[[str, str, "str | None"], "tuple[str, str | None]"]


def kebab_to_camel_case(name: str) -> str:
    """``stroke-width`` → ``strokeWidth``; names without hyphens are returned unchanged."""
    first, *rest = name.split("-")
    return first + "".join(seg[:1].upper() + seg[1:] for seg in rest)


def is_kebab_case(name: str) -> bool:
    return bool(_KEBAB_NAME_RE.match(name))


def rewrite_attributes(svg: str, fn: AttributeRewriter) -> str:
    """Apply ``fn`` to every attribute of every start tag in ``svg``.

    ``fn`` receives the tag name, the attribute name and the value including
    its quotes (``None`` for bare attributes) and returns the replacement pair.
    Comments, CDATA, text content and end tags pass through untouched.
    """

    def _rewrite_tag(match: re.Match[str]) -> str:
        tag = match.group("tag")
        if tag is None:
            return match.group(0)

        def _rewrite_attr(attr: re.Match[str]) -> str:
            name = attr.group("name")
            value = attr.group("value")
            new_name, new_value = fn(tag, name, value)
            if new_value is None:
                return f"{attr.group('space')}{new_name}"
            return f"{attr.group('space')}{new_name}{attr.group('eq') or '='}{new_value}"

        attrs = _ATTR_RE.sub(_rewrite_attr, match.group("attrs"))
        return f"<{tag}{attrs}{match.group('end')}"

    return _MARKUP_RE.sub(_rewrite_tag, svg)


def _camel_case_attr(tag: str, name: str, value: str | None) -> tuple[str, str | None]:
    if value is None or value[0] not in "\"'" or not is_kebab_case(name):
        return name, value
    return kebab_to_camel_case(name), value


def convert_attributes_to_camel_case(svg: str) -> str:
    """Rewrite every kebab-case attribute name with a quoted value to camelCase.

    Values, tag names and text are left verbatim. Idempotent: rewritten names
    contain no hyphen, so a second pass changes nothing.
    """
    return rewrite_attributes(svg, _camel_case_attr)
