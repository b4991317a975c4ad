"""Tests for component name derivation."""

import pytest

from svgjsx.generators.naming import derive_component_name, to_custom_element_name, to_kebab_case


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("my-icon.svg", "MyIcon"),
        ("arrow_right.svg", "ArrowRight"),
        ("chevron down.svg", "ChevronDown"),
        ("3d-box.svg", "Icon3dBox"),
        ("", "Icon"),
        ("---.svg", "Icon"),
        ("icons/social/github.svg", "Github"),
        ("logo.min.svg", "Logomin"),
        ("ça-va.svg", "AVa"),
        ("@scope-icon.svg", "ScopeIcon"),
        (".svg", "Icon"),
        ("archive.tar.gz", "Archivetar"),
    ],
)
def test_derive_component_name(filename, expected):
    assert derive_component_name(filename) == expected


@pytest.mark.parametrize("filename", ["", "___", "123", "日本.svg", "a b c", ".svg", "-x-"])
def test_derived_name_is_always_an_identifier(filename):
    name = derive_component_name(filename)
    assert name.isidentifier()
    assert name[0].isascii() and name[0].isalpha()


def test_to_kebab_case():
    assert to_kebab_case("MyIcon") == "my-icon"
    assert to_kebab_case("SVGIcon") == "svg-icon"
    assert to_kebab_case("Icon3dBox") == "icon3d-box"


def test_to_custom_element_name():
    assert to_custom_element_name("ArrowRight") == "arrow-right"
    assert to_custom_element_name("Github") == "svg-github"
