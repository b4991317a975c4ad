"""SVG minifier — lxml tree cleanup passes, repeated until the output is stable.

Each pass:
- drops <metadata>, editor (Inkscape/Sodipodi/Illustrator/Sketch) elements and attributes
- prunes unreferenced <defs> children and unused ids
- removes presentation attributes equal to their default when no ancestor sets them
- unwraps attribute-less <g> and drops empty containers
- rounds numbers in geometry attributes and compacts path data / style declarations

Comments, processing instructions, the XML declaration and blank text nodes
are removed at parse time.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from lxml import etree

from svgjsx.errors import OptimizerError

logger = logging.getLogger(__name__)

MAX_PASSES = 10

EDITOR_NAMESPACES = {
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://ns.adobe.com/SaveForWeb/1.0/",
    "http://ns.adobe.com/Extensibility/1.0/",
    "http://www.bohemiancoding.com/sketch/ns",
}

PRESENTATION_DEFAULTS = {
    "opacity": "1",
    "fill-opacity": "1",
    "stroke-opacity": "1",
    "stroke-dasharray": "none",
    "stroke-dashoffset": "0",
    "stroke-linecap": "butt",
    "stroke-linejoin": "miter",
    "stroke-miterlimit": "4",
    "fill-rule": "nonzero",
    "clip-rule": "nonzero",
}

# Attributes holding numbers / numeric lists
NUMERIC_ATTRS = {
    "x", "y", "x1", "y1", "x2", "y2", "dx", "dy",
    "width", "height", "r", "rx", "ry", "cx", "cy", "fx", "fy",
    "opacity", "fill-opacity", "stroke-opacity", "stroke-width", "stroke-miterlimit",
    "stroke-dashoffset", "stroke-dasharray", "offset", "stdDeviation",
    "points", "viewBox", "transform", "gradientTransform", "patternTransform",
}

CONTAINER_TAGS = {"g", "defs", "symbol", "mask", "clipPath", "pattern", "marker"}
# Content whose ids may be referenced from outside attribute values
_ID_SENSITIVE_TAGS = {"style", "script", "animate", "animateMotion", "animateTransform", "set"}

_XML_DECL_RE = re.compile(r"^\s*<\?xml[^>]*\?>")
_NUM_TOKEN_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")
_URL_REF_RE = re.compile(r"url\(\s*['\"]?#([^)'\"\s]+)")
_HASH_REF_RE = re.compile(r"^\s*#([A-Za-z_][\w.:-]*)\s*$")
_ARC_CMD_RE = re.compile(r"[Aa]")


@dataclass
class MinifyResult:
    data: str
    passes: int = 0


class SvgMinifier:
    """Callable minifier: ``minifier(svg_text, multipass=True) -> MinifyResult``."""

    def __init__(self, precision: int = 3) -> None:
        self.precision = precision

    def __call__(self, svg_text: str, multipass: bool = True) -> MinifyResult:
        root = _parse(svg_text)
        output = etree.tostring(root, encoding="unicode")

        passes = 0
        for _ in range(MAX_PASSES if multipass else 1):
            passes += 1
            self._run_pass(root)
            current = etree.tostring(root, encoding="unicode")
            if current == output:
                break
            output = current

        logger.debug("Minified SVG in %d pass(es): %d → %d chars", passes, len(svg_text), len(output))
        return MinifyResult(data=output, passes=passes)

    def _run_pass(self, root: etree._Element) -> None:
        _remove_editor_content(root)
        if root.get("version") is not None:
            del root.attrib["version"]

        if not any(_localname(el) in _ID_SENSITIVE_TAGS for el in root.iter(tag=etree.Element)):
            used_ids = _collect_used_ids(root)
            _prune_unused_defs(root, used_ids)
            _strip_unused_ids(root, used_ids)

        for el in root.iter(tag=etree.Element):
            _remove_default_attrs(el)
            _round_numeric_attrs(el, self.precision)
            _compact_style(el)

        _collapse_groups(root)
        etree.cleanup_namespaces(root)


_default_minifier = SvgMinifier()


def minify(svg_text: str, multipass: bool = True) -> MinifyResult:
    """Minify with the default precision."""
    return _default_minifier(svg_text, multipass=multipass)


# ── Parsing ───────────────────────────────────────────────────────────────


def _parse(svg_text: str) -> etree._Element:
    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(_XML_DECL_RE.sub("", svg_text, count=1), parser)
    except etree.XMLSyntaxError as e:
        raise OptimizerError(f"Unable to parse SVG: {e}") from e

    if _localname(root) != "svg":
        raise OptimizerError(f"Root element is <{_localname(root)}>, expected <svg>")
    return root


def _localname(el: etree._Element) -> str:
    return etree.QName(el).localname


def _namespace(name: str) -> str | None:
    return name[1:].split("}", 1)[0] if name.startswith("{") else None


# ── Cleaning passes ───────────────────────────────────────────────────────


def _remove_editor_content(root: etree._Element) -> None:
    for el in list(root.iter(tag=etree.Element)):
        if el is root:
            continue
        if _localname(el) == "metadata" or _namespace(el.tag) in EDITOR_NAMESPACES:
            parent = el.getparent()
            if parent is not None:
                parent.remove(el)

    for el in root.iter(tag=etree.Element):
        for attr in [a for a in el.attrib if _namespace(a) in EDITOR_NAMESPACES]:
            del el.attrib[attr]


def _collect_used_ids(root: etree._Element) -> set[str]:
    used: set[str] = set()
    for el in root.iter(tag=etree.Element):
        for name, value in el.attrib.items():
            used.update(_URL_REF_RE.findall(value))
            local = etree.QName(name).localname
            if local == "href":
                m = _HASH_REF_RE.match(value)
                if m:
                    used.add(m.group(1))
            elif local in ("aria-labelledby", "aria-describedby"):
                used.update(value.split())
    return used


def _prune_unused_defs(root: etree._Element, used_ids: set[str]) -> None:
    for defs in [el for el in root.iter(tag=etree.Element) if _localname(el) == "defs"]:
        for child in list(defs):
            # A referenced id anywhere in the subtree keeps the whole child
            if not any(d.get("id") in used_ids for d in child.iter(tag=etree.Element)):
                defs.remove(child)


def _strip_unused_ids(root: etree._Element, used_ids: set[str]) -> None:
    for el in root.iter(tag=etree.Element):
        eid = el.get("id")
        if eid is not None and eid not in used_ids and el is not root:
            del el.attrib["id"]


def _remove_default_attrs(el: etree._Element) -> None:
    for attr, default in PRESENTATION_DEFAULTS.items():
        if el.get(attr) != default:
            continue
        if any(_sets_property(ancestor, attr) for ancestor in el.iterancestors()):
            continue
        del el.attrib[attr]


def _sets_property(el: etree._Element, prop: str) -> bool:
    if el.get(prop) is not None:
        return True
    style = el.get("style") or ""
    return any(decl.split(":", 1)[0].strip() == prop for decl in style.split(";") if ":" in decl)


def _round_numeric_attrs(el: etree._Element, precision: int) -> None:
    for name, value in list(el.attrib.items()):
        local = etree.QName(name).localname
        if local == "d":
            el.set(name, _compact_path(value, precision))
        elif local in NUMERIC_ATTRS:
            rounded = _NUM_TOKEN_RE.sub(lambda m: format_number(m.group(0), precision), value)
            el.set(name, " ".join(rounded.split()))


def _compact_style(el: etree._Element) -> None:
    style = el.get("style")
    if style is None:
        return
    decls = []
    for decl in style.split(";"):
        if ":" not in decl:
            continue
        prop, val = decl.split(":", 1)
        decls.append(f"{prop.strip()}:{val.strip()}")
    if decls:
        el.set("style", ";".join(decls))
    else:
        del el.attrib["style"]


def _collapse_groups(root: etree._Element) -> None:
    # Deepest first so nested empty groups disappear in one pass
    for el in reversed(list(root.iter(tag=etree.Element))):
        if el is root or _localname(el) not in CONTAINER_TAGS:
            continue
        parent = el.getparent()
        if parent is None or (el.tail and el.tail.strip()):
            continue
        has_text = bool(el.text and el.text.strip())
        if len(el) == 0 and not has_text and el.get("id") is None:
            parent.remove(el)
        elif _localname(el) == "g" and not el.attrib and not has_text:
            idx = parent.index(el)
            for child in reversed(list(el)):
                parent.insert(idx, child)
            parent.remove(el)


# ── Number formatting ─────────────────────────────────────────────────────


def format_number(token: str, precision: int) -> str:
    """Round a numeric token, dropping trailing zeros: '1.50000' → '1.5', '24' → '24'."""
    text = f"{round(float(token), precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def _compact_path(d: str, precision: int) -> str:
    # Arc flags may be written without separators ("a1 1 0 011 1"), so leave numbers alone there
    if not _ARC_CMD_RE.search(d):
        d = _NUM_TOKEN_RE.sub(lambda m: format_number(m.group(0), precision), d)
    d = re.sub(r"[\s,]+", " ", d).strip()
    d = re.sub(r"\s*([A-Za-z])\s*", r"\1", d)
    return re.sub(r" (?=-)", "", d)
