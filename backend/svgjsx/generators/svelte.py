"""Svelte component (.svelte). The file is the component, so there is no script-level export."""

from __future__ import annotations

import json

from svgjsx.generators.context import ComponentContext, class_attribute, indent_markup
from svgjsx.generators.registry import Framework, generator
from svgjsx.models.component import GeneratedComponent


def _default(value: str | None) -> str:
    return "undefined" if value is None else json.dumps(value)


@generator(framework=Framework.SVELTE, description="Svelte component with $$restProps passthrough")
def generate_svelte(ctx: ComponentContext) -> GeneratedComponent:
    opts = ctx.options
    ts = opts.typescript

    lines = [
        "<!--",
        "  @component",
        f"  {ctx.name}: SVG icon. Accepts title, width and height; other attributes go to <svg>.",
        "-->",
        '<script lang="ts">' if ts else "<script>",
    ]
    if ctx.typed_props:
        lines.extend([
            '  import type { SVGAttributes } from "svelte/elements";',
            "",
            "  interface $$Props extends SVGAttributes<SVGSVGElement> {",
            "    title?: string;",
            "    width?: number | string;",
            "    height?: number | string;",
            "  }",
            "",
        ])

    title_type = ": string | undefined" if ts else ""
    size_type = ": number | string | undefined" if ts else ""
    lines.extend([
        f"  export let title{title_type} = undefined;",
        f"  export let width{size_type} = {_default(ctx.width)};",
        f"  export let height{size_type} = {_default(ctx.height)};",
        "</script>",
        "",
        f"<svg{ctx.attribute_text(class_attribute)} {{width}} {{height}} {{...$$restProps}}>",
        "  {#if title}<title>{title}</title>{/if}",
    ])
    inner = indent_markup(ctx.inner_content, "  ")
    if inner:
        lines.append(inner)
    lines.extend(["</svg>", ""])

    return GeneratedComponent(
        source_code="\n".join(lines),
        file_extension=".svelte",
        language_tag="svelte",
    )
