"""POST /api/validate — lint an SVG without changing it."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgjsx.config import Settings
from svgjsx.dependencies import get_settings
from svgjsx.models.requests import ValidateRequest
from svgjsx.svg.sanitizer import validate_content_size
from svgjsx.svg.validator import ValidationResult, validate_svg

router = APIRouter()


@router.post("/validate", response_model=ValidationResult, response_model_exclude_none=True)
def validate(req: ValidateRequest, cfg: Settings = Depends(get_settings)) -> ValidationResult:
    validate_content_size(req.content, cfg.max_content_size)
    return validate_svg(req.content)
