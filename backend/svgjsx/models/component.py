"""Component generation options and output."""

from __future__ import annotations

import keyword

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    component_name: str | None = Field(
        default=None,
        description="Component identifier; derived from the filename when omitted",
    )
    typescript: bool = Field(default=True, description="Emit type annotations")
    memoize: bool = Field(default=True, description="Wrap in memo() where the framework supports it")
    include_props_interface: bool = Field(default=True, description="Emit a typed props declaration")
    export_default: bool = Field(default=True, description="Default export instead of a named export")
    width: str | None = Field(default=None, description="Default width, overrides the SVG's own")
    height: str | None = Field(default=None, description="Default height, overrides the SVG's own")

    @field_validator("component_name")
    @classmethod
    def _check_identifier(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not value.isidentifier() or not value.isascii() or keyword.iskeyword(value):
            raise ValueError(f"component_name must be a valid identifier, got {value!r}")
        return value


class GeneratedComponent(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_code: str
    file_extension: str  # ".tsx", ".vue", ...
    language_tag: str  # syntax highlighting hint
