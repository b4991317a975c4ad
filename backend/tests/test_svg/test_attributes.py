"""Tests for kebab-case → camelCase attribute rewriting."""

from tests.conftest import CIRCLE_SVG, SMILEY_SVG

from svgjsx.svg.attributes import (
    convert_attributes_to_camel_case,
    is_kebab_case,
    kebab_to_camel_case,
    rewrite_attributes,
)


def test_kebab_to_camel_case():
    assert kebab_to_camel_case("stroke-width") == "strokeWidth"
    assert kebab_to_camel_case("stroke-dash-array") == "strokeDashArray"
    assert kebab_to_camel_case("fill") == "fill"


def test_is_kebab_case():
    assert is_kebab_case("stroke-width")
    assert is_kebab_case("aria-label")
    assert not is_kebab_case("fill")
    assert not is_kebab_case("xlink:href")
    assert not is_kebab_case("-webkit")


def test_converts_root_and_child_attributes():
    out = convert_attributes_to_camel_case(CIRCLE_SVG)
    assert 'strokeWidth="2"' in out
    assert 'strokeLinecap="round"' in out
    assert 'strokeLinejoin="round"' in out
    assert "stroke-width" not in out


def test_leaves_values_untouched():
    svg = '<svg><path stroke-width="2" data-x="a-b-c" d="M0 0l-1-1"/></svg>'
    out = convert_attributes_to_camel_case(svg)
    assert out == '<svg><path strokeWidth="2" dataX="a-b-c" d="M0 0l-1-1"/></svg>'


def test_nested_quotes_in_style_not_rewritten():
    svg = """<svg><text style="font-family:'Open Sans'; font-size: 12px" font-weight="bold">x</text></svg>"""
    out = convert_attributes_to_camel_case(svg)
    assert """style="font-family:'Open Sans'; font-size: 12px\"""" in out
    assert 'fontWeight="bold"' in out


def test_attribute_like_text_inside_value_not_rewritten():
    svg = '''<svg><g title='stroke-width="2"' fill-rule="evenodd"/></svg>'''
    out = convert_attributes_to_camel_case(svg)
    assert '''title='stroke-width="2"\'''' in out
    assert 'fillRule="evenodd"' in out


def test_namespaced_attributes_untouched():
    svg = '<svg xmlns:xlink="x" xmlns:inkscape="i"><use xlink:href="#a" inkscape:export-xdpi="96"/></svg>'
    assert convert_attributes_to_camel_case(svg) == svg


def test_text_comments_and_cdata_untouched():
    svg = (
        "<svg><!-- stroke-width=\"2\" --><style><![CDATA[.a{stroke-width: 2}]]></style>"
        '<text>font-size="3"</text></svg>'
    )
    assert convert_attributes_to_camel_case(svg) == svg


def test_unquoted_values_untouched():
    svg = "<svg><path stroke-width=2/></svg>"
    assert convert_attributes_to_camel_case(svg) == svg


def test_idempotent():
    once = convert_attributes_to_camel_case(SMILEY_SVG)
    assert convert_attributes_to_camel_case(once) == once


def test_rewrite_attributes_passes_quoted_value():
    seen = []

    def record(tag, name, value):
        seen.append((tag, name, value))
        return name, value

    svg = """<svg a="1"><rect b='2' c/></svg>"""
    assert rewrite_attributes(svg, record) == svg
    assert seen == [("svg", "a", '"1"'), ("rect", "b", "'2'"), ("rect", "c", None)]
