"""Vue single-file component (.vue) using defineComponent."""

from __future__ import annotations

import json

from svgjsx.generators.context import ComponentContext, class_attribute, indent_markup
from svgjsx.generators.registry import Framework, generator
from svgjsx.models.component import GeneratedComponent


def _default(value: str | None) -> str:
    return "undefined" if value is None else json.dumps(value)


@generator(framework=Framework.VUE, description="Vue single-file component with size props")
def generate_vue(ctx: ComponentContext) -> GeneratedComponent:
    opts = ctx.options
    name = ctx.name
    props_name = f"{name}Props"

    lines = [
        "<template>",
        f'  <svg{ctx.attribute_text(class_attribute)} :width="width" :height="height">',
        '    <title v-if="title">{{ title }}</title>',
    ]
    inner = indent_markup(ctx.inner_content, "    ")
    if inner:
        lines.append(inner)
    lines.extend([
        "  </svg>",
        "</template>",
        "",
        '<script lang="ts">' if opts.typescript else "<script>",
        'import { defineComponent } from "vue";',
    ])

    if ctx.typed_props:
        lines.extend([
            'import type { PropType } from "vue";',
            "",
            f"interface {props_name} {{",
            "  title?: string;",
            "  width?: number | string;",
            "  height?: number | string;",
            "}",
        ])
    typed_as = props_name if ctx.typed_props else None

    def prop_type(base: str, prop: str) -> str:
        return base if typed_as is None else f'{base} as PropType<{typed_as}["{prop}"]>'

    lines.extend([
        "",
        "export default defineComponent({",
        f"  name: {json.dumps(name)},",
        "  props: {",
        f"    title: {{ type: {prop_type('String', 'title')}, default: undefined }},",
        f"    width: {{ type: {prop_type('[String, Number]', 'width')}, default: {_default(ctx.width)} }},",
        f"    height: {{ type: {prop_type('[String, Number]', 'height')}, default: {_default(ctx.height)} }},",
        "  },",
        "});",
        "</script>",
        "",
    ])

    return GeneratedComponent(
        source_code="\n".join(lines),
        file_extension=".vue",
        language_tag="vue",
    )
