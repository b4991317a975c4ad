"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from svgjsx.config import Settings, settings
from svgjsx.engine.cache import OptimizationCache
from svgjsx.engine.optimizer import SvgOptimizer


def get_settings() -> Settings:
    return settings


def get_cache(request: Request) -> OptimizationCache:
    return request.app.state.cache


def get_optimizer(request: Request) -> SvgOptimizer:
    return request.app.state.optimizer
