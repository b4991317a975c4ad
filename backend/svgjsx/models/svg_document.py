"""Extracted SVG structure model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SvgAttribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None  # unquoted value, None for bare attributes
    raw: str  # token exactly as written, e.g. 'viewBox="0 0 24 24"'


class ExtractedSvgStructure(BaseModel):
    """Root ``<svg>`` attribute text and everything between its tags."""

    model_config = ConfigDict(frozen=True)

    attributes: str = ""
    inner_content: str = ""
    attribute_list: list[SvgAttribute] = Field(default_factory=list)

    def get(self, name: str) -> str | None:
        for attr in self.attribute_list:
            if attr.name == name:
                return attr.value
        return None
