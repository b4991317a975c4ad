"""Tests for the React generator."""

import pytest

from tests.conftest import SMILEY_SVG, XLINK_SVG

from svgjsx.errors import InvalidSvgContentError
from svgjsx.generators import generate_component
from svgjsx.generators.react import style_to_jsx
from svgjsx.models.component import GenerationOptions

ARROW_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24"><path d="M0 0h24"/></svg>'


def test_default_options_full_output():
    component = generate_component("react", ARROW_SVG, "arrow-right.svg")
    assert component.file_extension == ".tsx"
    assert component.language_tag == "typescript"
    assert component.source_code == (
        'import { memo } from "react";\n'
        'import type { SVGProps } from "react";\n'
        "\n"
        "interface ArrowRightProps extends SVGProps<SVGSVGElement> {\n"
        "  title?: string;\n"
        "  width?: number | string;\n"
        "  height?: number | string;\n"
        "}\n"
        "\n"
        "const ArrowRight = memo(function ArrowRight("
        '{ title, width = "24", height = "24", ...props }: ArrowRightProps) {\n'
        "  return (\n"
        '    <svg viewBox="0 0 24 24" width={width} height={height} {...props}>\n'
        "      {title && <title>{title}</title>}\n"
        '      <path d="M0 0h24"/>\n'
        "    </svg>\n"
        "  );\n"
        "});\n"
        "\n"
        "export default ArrowRight;\n"
    )


def test_plain_javascript():
    options = GenerationOptions(typescript=False, memoize=False, export_default=False)
    component = generate_component("react", ARROW_SVG, "arrow.svg", options)
    code = component.source_code
    assert component.file_extension == ".jsx"
    assert component.language_tag == "javascript"
    assert "import" not in code
    assert "interface" not in code
    assert 'function Arrow({ title, width = "24", height = "24", ...props }) {' in code
    assert code.endswith("}\n\nexport { Arrow };\n")


def test_typescript_without_interface():
    options = GenerationOptions(include_props_interface=False)
    code = generate_component("react", ARROW_SVG, "arrow.svg", options).source_code
    assert "interface" not in code
    assert "...props }: SVGProps<SVGSVGElement> & { title?: string }) {" in code


def test_size_overrides_and_missing_size():
    options = GenerationOptions(width="32")
    code = generate_component("react", '<svg viewBox="0 0 1 1"><g/></svg>', "x.svg", options).source_code
    assert '{ title, width = "32", height, ...props }' in code


def test_xmlns_width_height_removed_from_static_attrs():
    code = generate_component("react", SMILEY_SVG, "smiley.svg").source_code
    svg_line = next(line for line in code.splitlines() if line.strip().startswith("<svg"))
    assert "xmlns=" not in svg_line
    assert 'width="24"' not in svg_line
    assert 'stroke-width="2"' in svg_line


def test_inner_content_indented_and_preserved():
    code = generate_component("react", SMILEY_SVG, "smiley.svg").source_code
    assert '      <circle cx="8" cy="9" r="1"/>\n' in code
    assert '      <path d="M8 14s1.5 2 4 2 4-2 4-2"/>\n' in code


def test_jsx_attribute_conversion():
    code = generate_component("react", XLINK_SVG, "dot.svg").source_code
    assert 'className="icon"' in code
    assert 'xmlnsXlink="http://www.w3.org/1999/xlink"' in code
    assert 'xlinkHref="#dot"' in code
    assert 'style={{ fill: "red", strokeLinecap: "round" }}' in code
    assert "class=" not in code


def test_style_element_and_comment_become_jsx():
    svg = "<svg><!-- note --><style>.a{fill:red}</style><g/></svg>"
    code = generate_component("react", svg, "x.svg").source_code
    assert "{/* note */}" in code
    assert "<style>{`.a{fill:red}`}</style>" in code


def test_style_to_jsx():
    assert style_to_jsx("fill:red; stroke-width: 2") == '{{ fill: "red", strokeWidth: "2" }}'
    assert style_to_jsx("--brand: #f00") == '{{ "--brand": "#f00" }}'
    assert style_to_jsx("-webkit-transform: none") == '{{ WebkitTransform: "none" }}'
    assert style_to_jsx("font-family:'Open Sans'") == '{{ fontFamily: "\'Open Sans\'" }}'
    assert style_to_jsx(";") == "{{}}"


def test_explicit_component_name():
    options = GenerationOptions(component_name="CloseIcon")
    code = generate_component("react", ARROW_SVG, "whatever.svg", options).source_code
    assert "export default CloseIcon;" in code
    assert code.count("export ") == 1


def test_deterministic():
    first = generate_component("react", SMILEY_SVG, "smiley.svg").source_code
    assert generate_component("react", SMILEY_SVG, "smiley.svg").source_code == first


def test_invalid_svg():
    with pytest.raises(InvalidSvgContentError):
        generate_component("react", "<svg/>", "x.svg")
