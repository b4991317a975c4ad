"""Generator registry — every framework generator is a function registered via decorator.

Usage:
    @generator(framework=Framework.REACT, description="React function component")
    def generate_react(ctx: ComponentContext) -> GeneratedComponent:
        ...

Adding a framework = creating one module with the decorator and importing it
in ``svgjsx.generators``. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from svgjsx.errors import UnsupportedFrameworkError

if TYPE_CHECKING:
    from svgjsx.generators.context import ComponentContext
    from svgjsx.models.component import GeneratedComponent

logger = logging.getLogger(__name__)


class Framework(str, enum.Enum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    WEB_COMPONENT = "web-component"


@dataclass
class GeneratorSpec:
    framework: Framework
    fn: Callable[["ComponentContext"], "GeneratedComponent"]
    description: str = ""


class GeneratorRegistry:
    """Lookup table from framework to generator."""

    def __init__(self) -> None:
        self._generators: dict[Framework, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.framework in self._generators:
            raise ValueError(f"Duplicate generator for framework: {spec.framework.value}")
        self._generators[spec.framework] = spec
        logger.debug("Registered generator %s", spec.framework.value)

    def get(self, framework: Framework | str) -> GeneratorSpec:
        try:
            key = Framework(framework)
        except ValueError:
            raise UnsupportedFrameworkError(
                f"Unsupported framework {framework!r}; expected one of: "
                + ", ".join(f.value for f in Framework)
            ) from None
        if key not in self._generators:
            raise UnsupportedFrameworkError(f"No generator registered for {key.value!r}")
        return self._generators[key]

    def all(self) -> list[GeneratorSpec]:
        order = list(Framework)
        return sorted(self._generators.values(), key=lambda s: order.index(s.framework))

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(*, framework: Framework, description: str = ""):
    """Decorator to register a generator function."""

    def decorator(fn: Callable[["ComponentContext"], "GeneratedComponent"]):
        _registry.register(GeneratorSpec(framework=framework, fn=fn, description=description))
        return fn

    return decorator
