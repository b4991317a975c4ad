"""Component naming — filename → PascalCase identifier, PascalCase → custom-element tag."""

from __future__ import annotations

import os
import re

NAME_PREFIX = "Icon"

_EXTENSION_RE = re.compile(r"\.[^.]+$")
_SEPARATOR_RE = re.compile(r"[-_\s]+(.)?")
_INVALID_CHARS_RE = re.compile(r"[^A-Za-z0-9]")


def derive_component_name(filename: str) -> str:
    """Convert a filename into a PascalCase component name.

    ``my-icon.svg`` → ``MyIcon``, ``3d-box.svg`` → ``Icon3dBox``, ``""`` and ``.svg`` → ``Icon``.
    Never fails; the result always starts with an ASCII letter.
    """
    stem = _EXTENSION_RE.sub("", os.path.basename(filename))
    name = _SEPARATOR_RE.sub(lambda m: (m.group(1) or "").upper(), stem)
    name = _INVALID_CHARS_RE.sub("", name)
    name = name[:1].upper() + name[1:]

    if not name or not name[0].isalpha():
        return f"{NAME_PREFIX}{name}"
    return name


def to_kebab_case(name: str) -> str:
    """``MyIcon`` → ``my-icon``, ``SVGIcon`` → ``svg-icon``."""
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name)
    name = re.sub(r"([A-Z])([A-Z][a-z])", r"\1-\2", name)
    return name.lower()


def to_custom_element_name(name: str) -> str:
    """Custom element names must contain a hyphen."""
    tag = to_kebab_case(name)
    return tag if "-" in tag else f"svg-{tag}"
