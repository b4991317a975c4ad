"""Optimization result model — what a single optimize call returns."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OptimizationMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_size: int
    optimized_size: int
    saved_bytes: int  # negative when the output grew
    saved_percent: str  # e.g. "12.5%"
    ratio: str  # e.g. "0.875"


class OptimizationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool = True
    filename: str = "untitled.svg"
    optimization: OptimizationMetrics
    camel_case_applied: bool = True
    sanitized: bool = False
    security_warnings: list[str] | None = None  # None when nothing was found
    result: str
