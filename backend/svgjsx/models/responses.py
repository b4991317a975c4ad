"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from svgjsx.models.optimization import OptimizationResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators: list[str] = Field(default_factory=list)


class BatchFailure(BaseModel):
    success: bool = False
    filename: str
    error: str


class BatchOptimizeResponse(BaseModel):
    success: bool = True
    total: int
    successful: int
    failed: int
    results: list[OptimizationResult | BatchFailure] = Field(default_factory=list)


class ComponentResponse(BaseModel):
    framework: str
    component_name: str
    source_code: str
    file_extension: str
    language_tag: str
    optimization: OptimizationResult | None = None


class CacheStatsResponse(BaseModel):
    hits: int
    misses: int
    size: int
    max_size: int
    hit_rate: str


class CacheClearResponse(BaseModel):
    success: bool = True
    message: str = "Cache cleared"


class McpTool(BaseModel):
    name: str
    description: str
    method: str = "POST"
    endpoint: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class McpDescriptor(BaseModel):
    name: str
    version: str
    description: str
    tools: list[McpTool] = Field(default_factory=list)
