"""Framework component generators.

Importing this package registers every generator with the registry.
"""

from __future__ import annotations

from svgjsx.generators import react, svelte, vue, web_component  # noqa: F401  (registration)
from svgjsx.generators.context import ComponentContext, build_context
from svgjsx.generators.naming import derive_component_name, to_custom_element_name, to_kebab_case
from svgjsx.generators.registry import Framework, get_registry
from svgjsx.models.component import GeneratedComponent, GenerationOptions


def generate_component(
    framework: Framework | str,
    svg_text: str,
    filename: str = "",
    options: GenerationOptions | None = None,
) -> GeneratedComponent:
    """Turn optimized SVG text into component source for ``framework``.

    Raises UnsupportedFrameworkError for an unknown framework and
    InvalidSvgContentError when the SVG has no root element.
    """
    spec = get_registry().get(framework)
    return spec.fn(build_context(svg_text, filename, options))


__all__ = [
    "ComponentContext",
    "Framework",
    "build_context",
    "derive_component_name",
    "generate_component",
    "get_registry",
    "to_custom_element_name",
    "to_kebab_case",
]
