"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgjsx import __version__
from svgjsx.config import settings
from svgjsx.engine.cache import OptimizationCache
from svgjsx.engine.optimizer import SvgOptimizer
from svgjsx.errors import (
    ContentTooLargeError,
    InvalidInputError,
    InvalidSvgContentError,
    MalformedSvgError,
    OptimizerError,
    SvgJsxError,
    UnsupportedFrameworkError,
)
from svgjsx.svg.minifier import SvgMinifier

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgjsx_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

# Most specific first; the base class catches anything else
ERROR_STATUS: list[tuple[type[SvgJsxError], int]] = [
    (InvalidInputError, 400),
    (UnsupportedFrameworkError, 400),
    (ContentTooLargeError, 413),
    (MalformedSvgError, 422),
    (InvalidSvgContentError, 422),
    (OptimizerError, 422),
    (SvgJsxError, 400),
]


def status_for(exc: SvgJsxError) -> int:
    return next(status for cls, status in ERROR_STATUS if isinstance(exc, cls))


async def svgjsx_error_handler(request: Request, exc: SvgJsxError) -> JSONResponse:
    status = status_for(exc)
    logger.warning("%s %s -> %d %s: %s", request.method, request.url.path, status, type(exc).__name__, exc)
    return JSONResponse(status_code=status, content={"success": False, "error": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgjsx",
        description="SVG optimizer and React/Vue/Svelte/Web Component generator",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.cache = OptimizationCache(settings.cache_max_entries)
    app.state.optimizer = SvgOptimizer(minifier=SvgMinifier(precision=settings.minify_precision))
    app.add_exception_handler(SvgJsxError, svgjsx_error_handler)

    from svgjsx.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
