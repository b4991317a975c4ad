"""GET /api/cache/stats, DELETE /api/cache."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from svgjsx.dependencies import get_cache
from svgjsx.engine.cache import OptimizationCache
from svgjsx.models.responses import CacheClearResponse, CacheStatsResponse

router = APIRouter()


@router.get("/cache/stats", response_model=CacheStatsResponse)
def cache_stats(cache: OptimizationCache = Depends(get_cache)) -> CacheStatsResponse:
    return CacheStatsResponse(**asdict(cache.stats()))


@router.delete("/cache", response_model=CacheClearResponse)
def clear_cache(cache: OptimizationCache = Depends(get_cache)) -> CacheClearResponse:
    cache.clear()
    return CacheClearResponse()
