"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgjsx.models.component import GenerationOptions


class OptimizeRequest(BaseModel):
    content: str = Field(..., description="Raw SVG code")
    filename: str | None = Field(default=None, description="Echoed back in the result")
    camel_case: bool = Field(default=True, description="Rewrite kebab-case attributes to camelCase")
    sanitize: bool | None = Field(default=None, description="Strip dangerous content; server default when omitted")


class BatchItem(BaseModel):
    content: str = Field(..., description="Raw SVG code")
    filename: str | None = None


class BatchOptimizeRequest(BaseModel):
    items: list[BatchItem] = Field(..., min_length=1, description="SVGs to optimize")
    camel_case: bool = True
    sanitize: bool | None = None


class ComponentRequest(BaseModel):
    content: str = Field(..., description="Raw SVG code")
    filename: str = Field(default="icon.svg", description="Used to derive the component name")
    optimize: bool = Field(default=True, description="Optimize the SVG before generating")
    options: GenerationOptions = Field(default_factory=GenerationOptions)


class ValidateRequest(BaseModel):
    content: str = Field(..., description="Raw SVG code")
