"""Custom element (.ts / .js) rendering the SVG into an open shadow root."""

from __future__ import annotations

import json

from svgjsx.generators.context import ComponentContext, class_attribute, indent_markup
from svgjsx.generators.naming import to_custom_element_name
from svgjsx.generators.registry import Framework, generator
from svgjsx.models.component import GeneratedComponent

HOST_STYLE = ":host{display:inline-block;line-height:0}svg{display:block}"


def escape_template_literal(text: str) -> str:
    """Make ``text`` safe inside a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


@generator(framework=Framework.WEB_COMPONENT, description="Custom element with observed width/height/title")
def generate_web_component(ctx: ComponentContext) -> GeneratedComponent:
    opts = ctx.options
    ts = opts.typescript
    name = ctx.name
    tag = to_custom_element_name(name)
    attrs_name = f"{name}Attributes"

    def t(annotation: str) -> str:
        return annotation if ts else ""

    lines = [
        "/**",
        f" * {name}: SVG icon custom element.",
        " *",
        " * Usage:",
        f' *   <{tag} width="32" height="32" title="{name}"></{tag}>',
        " */",
    ]
    if ctx.typed_props:
        lines.extend([
            f"interface {attrs_name} {{",
            "  width: string | null;",
            "  height: string | null;",
            "  title?: string;",
            "}",
            "",
        ])

    defaults_type = f": {attrs_name}" if ctx.typed_props else t(": { width: string | null; height: string | null }")
    width = "null" if ctx.width is None else json.dumps(ctx.width)
    height = "null" if ctx.height is None else json.dumps(ctx.height)
    inner = indent_markup(escape_template_literal(ctx.inner_content), "  ")

    lines.extend([
        f"const DEFAULTS{defaults_type} = {{ width: {width}, height: {height} }};",
        "",
        f"const SVG_ATTRIBUTES = `{escape_template_literal(ctx.attribute_text(class_attribute))}`;",
        "",
        "const SVG_CONTENT = `" + (f"\n{inner}\n" if inner else "") + "`;",
        "",
        f"function escapeHtml(value{t(': string')}){t(': string')} {{",
        "  return value",
        '    .replace(/&/g, "&amp;")',
        '    .replace(/</g, "&lt;")',
        '    .replace(/>/g, "&gt;")',
        '    .replace(/"/g, "&quot;");',
        "}",
        "",
        f"class {name} extends HTMLElement {{",
        f"  static get observedAttributes(){t(': string[]')} {{",
        '    return ["width", "height", "title"];',
        "  }",
        "",
        "  constructor() {",
        "    super();",
        '    this.attachShadow({ mode: "open" });',
        "  }",
        "",
        f"  get width(){t(': string | null')} {{",
        '    return this.getAttribute("width") ?? DEFAULTS.width;',
        "  }",
        "",
        f"  set width(value{t(': string | null')}) {{",
        '    this.reflect("width", value);',
        "  }",
        "",
        f"  get height(){t(': string | null')} {{",
        '    return this.getAttribute("height") ?? DEFAULTS.height;',
        "  }",
        "",
        f"  set height(value{t(': string | null')}) {{",
        '    this.reflect("height", value);',
        "  }",
        "",
        f"  connectedCallback(){t(': void')} {{",
        "    this.render();",
        "  }",
        "",
        f"  attributeChangedCallback(){t(': void')} {{",
        "    this.render();",
        "  }",
        "",
        f"  {t('private ')}reflect(name{t(': string')}, value{t(': string | null')}){t(': void')} {{",
        "    if (value === null) {",
        "      this.removeAttribute(name);",
        "    } else {",
        "      this.setAttribute(name, value);",
        "    }",
        "  }",
        "",
        f"  {t('private ')}render(){t(': void')} {{",
        "    if (!this.shadowRoot) {",
        "      return;",
        "    }",
        '    const title = this.getAttribute("title");',
        "    const width = this.width;",
        "    const height = this.height;",
        "    const size =",
        '      (width !== null ? ` width="${escapeHtml(width)}"` : "") +',
        '      (height !== null ? ` height="${escapeHtml(height)}"` : "");',
        "    this.shadowRoot.innerHTML =",
        f"      `<style>{HOST_STYLE}</style>` +",
        "      `<svg${SVG_ATTRIBUTES}${size}>` +",
        '      (title ? `<title>${escapeHtml(title)}</title>` : "") +',
        "      SVG_CONTENT +",
        '      "</svg>";',
        "  }",
        "}",
        "",
        f"if (!customElements.get({json.dumps(tag)})) {{",
        f"  customElements.define({json.dumps(tag)}, {name});",
        "}",
        "",
        f"export default {name};" if opts.export_default else f"export {{ {name} }};",
        "",
    ])

    return GeneratedComponent(
        source_code="\n".join(lines),
        file_extension=".ts" if ts else ".js",
        language_tag="typescript" if ts else "javascript",
    )
