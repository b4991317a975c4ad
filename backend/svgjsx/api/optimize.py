"""POST /api/optimize and /api/optimize/batch — cached SVG optimization."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from svgjsx.config import Settings
from svgjsx.dependencies import get_cache, get_optimizer, get_settings
from svgjsx.engine.cache import OptimizationCache
from svgjsx.engine.optimizer import DEFAULT_FILENAME, SvgOptimizer
from svgjsx.errors import InvalidInputError, SvgJsxError
from svgjsx.models.optimization import OptimizationResult
from svgjsx.models.requests import BatchOptimizeRequest, OptimizeRequest
from svgjsx.models.responses import BatchFailure, BatchOptimizeResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def optimize_cached(
    content: str,
    filename: str | None,
    *,
    camel_case: bool,
    sanitize: bool,
    cache: OptimizationCache,
    optimizer: SvgOptimizer,
    max_size: int,
) -> OptimizationResult:
    """Optimize through the result cache. The filename is not part of the key."""
    options = {"camel_case": camel_case, "sanitize": sanitize}
    entry = cache.get(content, options)
    if entry is not None:
        logger.debug("Cache hit for %s", filename or DEFAULT_FILENAME)
        return entry.result.model_copy(update={"filename": filename or DEFAULT_FILENAME})

    result = optimizer.run(
        content,
        filename=filename,
        camel_case=camel_case,
        sanitize=sanitize,
        max_size=max_size,
    )
    cache.set(content, options, result)
    logger.info(
        "Optimized %s: %d -> %d bytes (%s)",
        result.filename,
        result.optimization.original_size,
        result.optimization.optimized_size,
        result.optimization.saved_percent,
    )
    return result


def _resolve_sanitize(requested: bool | None, cfg: Settings) -> bool:
    return cfg.sanitize_by_default if requested is None else requested


@router.post("/optimize", response_model=OptimizationResult, response_model_exclude_none=True)
def optimize(
    req: OptimizeRequest,
    cache: OptimizationCache = Depends(get_cache),
    optimizer: SvgOptimizer = Depends(get_optimizer),
    cfg: Settings = Depends(get_settings),
) -> OptimizationResult:
    return optimize_cached(
        req.content,
        req.filename,
        camel_case=req.camel_case,
        sanitize=_resolve_sanitize(req.sanitize, cfg),
        cache=cache,
        optimizer=optimizer,
        max_size=cfg.max_content_size,
    )


@router.post("/optimize/batch", response_model=BatchOptimizeResponse, response_model_exclude_none=True)
def optimize_batch(
    req: BatchOptimizeRequest,
    cache: OptimizationCache = Depends(get_cache),
    optimizer: SvgOptimizer = Depends(get_optimizer),
    cfg: Settings = Depends(get_settings),
) -> BatchOptimizeResponse:
    if len(req.items) > cfg.batch_max_items:
        raise InvalidInputError(f"Too many items: {len(req.items)}. Maximum batch size is {cfg.batch_max_items}.")

    sanitize = _resolve_sanitize(req.sanitize, cfg)
    results: list[OptimizationResult | BatchFailure] = []
    for item in req.items:
        filename = item.filename or DEFAULT_FILENAME
        try:
            results.append(optimize_cached(
                item.content,
                filename,
                camel_case=req.camel_case,
                sanitize=sanitize,
                cache=cache,
                optimizer=optimizer,
                max_size=cfg.max_content_size,
            ))
        except SvgJsxError as e:
            logger.warning("Batch item %s failed: %s", filename, e)
            results.append(BatchFailure(filename=filename, error=str(e)))

    successful = sum(1 for r in results if r.success)
    return BatchOptimizeResponse(
        success=True,
        total=len(results),
        successful=successful,
        failed=len(results) - successful,
        results=results,
    )
