"""POST /api/components/{framework} — optimize, then generate framework source."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from svgjsx.api.optimize import optimize_cached
from svgjsx.config import Settings
from svgjsx.dependencies import get_cache, get_optimizer, get_settings
from svgjsx.engine.cache import OptimizationCache
from svgjsx.engine.optimizer import SvgOptimizer
from svgjsx.generators import Framework, derive_component_name, generate_component, get_registry
from svgjsx.models.requests import ComponentRequest
from svgjsx.models.responses import ComponentResponse
from svgjsx.svg.sanitizer import validate_content_size

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/components/{framework}", response_model=ComponentResponse, response_model_exclude_none=True)
def generate(
    framework: str,
    req: ComponentRequest,
    cache: OptimizationCache = Depends(get_cache),
    optimizer: SvgOptimizer = Depends(get_optimizer),
    cfg: Settings = Depends(get_settings),
) -> ComponentResponse:
    # Fail on an unknown framework before doing any optimization work
    target = get_registry().get(framework).framework

    optimization = None
    svg = req.content
    if req.optimize:
        optimization = optimize_cached(
            req.content,
            req.filename,
            # JSX wants camelCase attributes; the other templates keep SVG names
            camel_case=target is Framework.REACT,
            sanitize=cfg.sanitize_by_default,
            cache=cache,
            optimizer=optimizer,
            max_size=cfg.max_content_size,
        )
        svg = optimization.result
    else:
        validate_content_size(svg, cfg.max_content_size)

    component = generate_component(target, svg, req.filename, req.options)
    name = req.options.component_name or derive_component_name(req.filename)
    logger.info("Generated %s component %s (%d chars)", target.value, name, len(component.source_code))

    return ComponentResponse(
        framework=target.value,
        component_name=name,
        source_code=component.source_code,
        file_extension=component.file_extension,
        language_tag=component.language_tag,
        optimization=optimization,
    )
