"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svgjsx import __version__
from svgjsx.generators import get_registry
from svgjsx.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        generators=[spec.framework.value for spec in get_registry().all()],
    )
