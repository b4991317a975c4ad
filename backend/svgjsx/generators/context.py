"""ComponentContext — everything a framework generator needs, derived once per call."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgjsx.errors import InvalidSvgContentError, MalformedSvgError
from svgjsx.generators.naming import derive_component_name
from svgjsx.models.component import GenerationOptions
from svgjsx.models.svg_document import SvgAttribute
from svgjsx.svg.attributes import AttributeRewriter, rewrite_attributes
from svgjsx.svg.extractor import extract_svg_structure

# Root attributes the generators manage themselves
_MANAGED_ATTRS = {"xmlns", "width", "height"}


@dataclass(frozen=True)
class ComponentContext:
    name: str
    inner_content: str
    # Root attributes minus xmlns/width/height, in source order
    attributes: list[SvgAttribute] = field(default_factory=list)
    # Default size: caller override, else the SVG's literal value
    width: str | None = None
    height: str | None = None
    options: GenerationOptions = field(default_factory=GenerationOptions)

    @property
    def typed_props(self) -> bool:
        return self.options.typescript and self.options.include_props_interface

    def attribute_text(self, rewriter: AttributeRewriter | None = None) -> str:
        """Static root attributes joined with single spaces, leading space included."""
        text = " ".join(a.raw for a in self.attributes)
        if not text:
            return ""
        if rewriter is not None:
            text = rewrite_attributes(f"<svg {text}>", rewriter)[len("<svg "):-1]
        return f" {text}"


def build_context(svg_text: str, filename: str, options: GenerationOptions | None = None) -> ComponentContext:
    """Extract the root element and resolve name and size defaults.

    Raises InvalidSvgContentError when no root <svg> element can be found.
    """
    options = options or GenerationOptions()
    try:
        structure = extract_svg_structure(svg_text)
    except MalformedSvgError as e:
        raise InvalidSvgContentError(f"Invalid SVG content: {e}") from e

    return ComponentContext(
        name=options.component_name or derive_component_name(filename),
        inner_content=structure.inner_content,
        attributes=[a for a in structure.attribute_list if a.name not in _MANAGED_ATTRS],
        width=options.width if options.width is not None else structure.get("width"),
        height=options.height if options.height is not None else structure.get("height"),
        options=options,
    )


def indent_markup(markup: str, prefix: str) -> str:
    """Re-indent markup: strip each line, drop blank lines, prefix the rest."""
    return "\n".join(f"{prefix}{line.strip()}" for line in markup.strip().splitlines() if line.strip())


def class_attribute(tag: str, name: str, value: str | None) -> tuple[str, str | None]:
    """Non-JSX frameworks use plain ``class``."""
    return ("class" if name == "className" else name), value
