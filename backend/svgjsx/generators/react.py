"""React function component (.tsx / .jsx)."""

from __future__ import annotations

import json
import re

from svgjsx.generators.context import ComponentContext, indent_markup
from svgjsx.generators.registry import Framework, generator
from svgjsx.models.component import GeneratedComponent
from svgjsx.svg.attributes import kebab_to_camel_case, rewrite_attributes

# Namespaced attribute names React spells in camelCase
JSX_NAMESPACED_ATTRS = {
    "xlink:href": "xlinkHref",
    "xlink:title": "xlinkTitle",
    "xlink:show": "xlinkShow",
    "xlink:role": "xlinkRole",
    "xlink:arcrole": "xlinkArcrole",
    "xlink:actuate": "xlinkActuate",
    "xlink:type": "xlinkType",
    "xml:space": "xmlSpace",
    "xml:lang": "xmlLang",
    "xml:base": "xmlBase",
    "xmlns:xlink": "xmlnsXlink",
}

_COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)
_STYLE_ELEMENT_RE = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.DOTALL | re.IGNORECASE)
_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)


def style_to_jsx(style: str) -> str:
    """``fill:red;stroke-width:2`` → ``{{ fill: "red", strokeWidth: "2" }}``."""
    entries = []
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop = prop.strip()
        if not sep or not prop:
            continue
        key = json.dumps(prop) if prop.startswith("--") else kebab_to_camel_case(prop.lower())
        entries.append(f"{key}: {json.dumps(value.strip())}")
    if not entries:
        return "{{}}"
    return "{{ " + ", ".join(entries) + " }}"


def jsx_attribute(tag: str, name: str, value: str | None) -> tuple[str, str | None]:
    if name == "class":
        return "className", value
    if name in JSX_NAMESPACED_ATTRS:
        return JSX_NAMESPACED_ATTRS[name], value
    if name == "style" and value is not None and value[:1] in "\"'":
        return name, style_to_jsx(value[1:-1])
    return name, value


def _template_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    return f"{{`{escaped}`}}"


def _style_element(match: re.Match[str]) -> str:
    css = _CDATA_RE.sub(lambda m: m.group(1), match.group(2)).strip()
    return f"{match.group(1)}{_template_literal(css)}{match.group(3)}"


def to_jsx_markup(markup: str) -> str:
    """SVG markup → JSX: attribute names, style objects, comments, <style> bodies."""
    markup = rewrite_attributes(markup, jsx_attribute)
    markup = _STYLE_ELEMENT_RE.sub(_style_element, markup)
    return _COMMENT_RE.sub(lambda m: "{/*" + m.group(1).replace("*/", "* /") + "*/}", markup)


def _size_param(name: str, default: str | None) -> str:
    return name if default is None else f"{name} = {json.dumps(default)}"


@generator(framework=Framework.REACT, description="React function component with SVGProps passthrough")
def generate_react(ctx: ComponentContext) -> GeneratedComponent:
    opts = ctx.options
    name = ctx.name
    props_name = f"{name}Props"

    lines: list[str] = []
    if opts.memoize:
        lines.append('import { memo } from "react";')
    if opts.typescript:
        lines.append('import type { SVGProps } from "react";')
    if lines:
        lines.append("")

    if ctx.typed_props:
        lines.extend([
            f"interface {props_name} extends SVGProps<SVGSVGElement> {{",
            "  title?: string;",
            "  width?: number | string;",
            "  height?: number | string;",
            "}",
            "",
        ])
        annotation = f": {props_name}"
    elif opts.typescript:
        annotation = ": SVGProps<SVGSVGElement> & { title?: string }"
    else:
        annotation = ""

    params = (
        f"{{ title, {_size_param('width', ctx.width)}, "
        f"{_size_param('height', ctx.height)}, ...props }}{annotation}"
    )
    if opts.memoize:
        lines.append(f"const {name} = memo(function {name}({params}) {{")
    else:
        lines.append(f"function {name}({params}) {{")

    lines.extend([
        "  return (",
        f"    <svg{ctx.attribute_text(jsx_attribute)} width={{width}} height={{height}} {{...props}}>",
        "      {title && <title>{title}</title>}",
    ])
    inner = indent_markup(to_jsx_markup(ctx.inner_content), "      ")
    if inner:
        lines.append(inner)
    lines.extend([
        "    </svg>",
        "  );",
        "});" if opts.memoize else "}",
        "",
        f"export default {name};" if opts.export_default else f"export {{ {name} }};",
        "",
    ])

    typescript = opts.typescript
    return GeneratedComponent(
        source_code="\n".join(lines),
        file_extension=".tsx" if typescript else ".jsx",
        language_tag="typescript" if typescript else "javascript",
    )
