"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgjsx.api import cache, components, health, mcp, optimize, validate

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(optimize.router)
api_router.include_router(components.router)
api_router.include_router(validate.router)
api_router.include_router(cache.router)
api_router.include_router(mcp.router)
