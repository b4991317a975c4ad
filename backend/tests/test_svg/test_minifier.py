"""Tests for the lxml minifier."""

import pytest

from tests.conftest import CIRCLE_SVG, INKSCAPE_SVG

from svgjsx.errors import OptimizerError
from svgjsx.svg.minifier import SvgMinifier, format_number, minify


def test_minify_circle():
    result = minify(CIRCLE_SVG)
    assert result.data == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
        'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
        'stroke-linejoin="round"><circle cx="12" cy="12" r="10"/></svg>'
    )
    assert result.passes >= 1


def test_minify_editor_export():
    out = minify(INKSCAPE_SVG).data
    assert out == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">'
        '<rect x="10" y="10.123" width="80" height="80" fill="#4ECDC4"/></svg>'
    )


def test_keeps_referenced_defs():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
        '<defs><linearGradient id="g"><stop offset="0"/></linearGradient>'
        '<linearGradient id="unused"/></defs>'
        '<rect width="10" height="10" fill="url(#g)" id="box"/></svg>'
    )
    out = minify(svg).data
    assert 'id="g"' in out
    assert 'id="unused"' not in out
    assert 'id="box"' not in out


def test_keeps_defs_child_with_referenced_descendant():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1 1">'
        '<defs><g><linearGradient id="a"><stop offset="0"/></linearGradient></g></defs>'
        '<rect width="1" height="1" fill="url(#a)"/></svg>'
    )
    out = minify(svg).data
    assert '<linearGradient id="a"><stop offset="0"/></linearGradient>' in out
    assert 'fill="url(#a)"' in out


def test_ids_kept_when_style_element_present():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg"><style>#a{fill:red}</style>'
        '<rect id="a" width="1" height="1"/></svg>'
    )
    assert 'id="a"' in minify(svg).data


def test_default_attr_kept_when_ancestor_overrides():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg"><g opacity="0.5">'
        '<rect opacity="1" width="1" height="1"/></g></svg>'
    )
    assert 'opacity="1"' in minify(svg).data


def test_default_attr_kept_when_ancestor_style_overrides():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg"><g style="stroke-linecap:round">'
        '<path d="M0 0h1" stroke-linecap="butt"/></g></svg>'
    )
    assert 'stroke-linecap="butt"' in minify(svg).data


def test_default_attr_removed_without_override():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0h1" stroke-linecap="butt"/></svg>'
    assert minify(svg).data == '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0h1"/></svg>'


def test_path_data_compacted():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M 10.00001 , 20.5 L 30 -40 Z"/></svg>'
    assert 'd="M10 20.5L30-40Z"' in minify(svg).data


def test_style_declarations_compacted():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><rect style=" fill : red ; stroke : blue ; "/></svg>'
    assert 'style="fill:red;stroke:blue"' in minify(svg).data


def test_precision_is_configurable():
    svg = '<svg xmlns="http://www.w3.org/2000/svg"><circle r="1.23456"/></svg>'
    assert 'r="1.2"' in SvgMinifier(precision=1)(svg).data


def test_single_pass():
    assert SvgMinifier()(CIRCLE_SVG, multipass=False).passes == 1


def test_unparseable_input():
    with pytest.raises(OptimizerError):
        minify("<svg><path></svg>")


def test_non_svg_root():
    with pytest.raises(OptimizerError):
        minify("<html></html>")


def test_format_number():
    assert format_number("1.50000", 3) == "1.5"
    assert format_number("24", 3) == "24"
    assert format_number("0.0001", 3) == "0"
    assert format_number("-0.0001", 3) == "0"
    assert format_number("2.71828", 2) == "2.72"
