"""GET /api/mcp — tool descriptor for MCP clients."""

from __future__ import annotations

from fastapi import APIRouter

from svgjsx import __version__
from svgjsx.generators import Framework
from svgjsx.models.responses import McpDescriptor, McpTool

router = APIRouter()

_CAMEL_CASE_PARAM = {"type": "boolean", "required": False, "default": True}
_SANITIZE_PARAM = {"type": "boolean", "required": False}

TOOLS = [
    McpTool(
        name="optimize_svg",
        description="Optimize an SVG and optionally convert attributes to camelCase for JSX",
        endpoint="/api/optimize",
        parameters={
            "content": {"type": "string", "required": True},
            "filename": {"type": "string", "required": False},
            "camel_case": _CAMEL_CASE_PARAM,
            "sanitize": _SANITIZE_PARAM,
        },
    ),
    McpTool(
        name="optimize_svg_batch",
        description="Optimize multiple SVGs in a single request",
        endpoint="/api/optimize/batch",
        parameters={
            "items": {"type": "array", "required": True},
            "camel_case": _CAMEL_CASE_PARAM,
            "sanitize": _SANITIZE_PARAM,
        },
    ),
    McpTool(
        name="generate_component",
        description="Generate a framework component from an SVG",
        endpoint="/api/components/{framework}",
        parameters={
            "framework": {"type": "string", "required": True, "enum": [f.value for f in Framework]},
            "content": {"type": "string", "required": True},
            "filename": {"type": "string", "required": False},
            "optimize": {"type": "boolean", "required": False, "default": True},
            "options": {"type": "object", "required": False},
        },
    ),
    McpTool(
        name="validate_svg",
        description="Check an SVG for accessibility, security and compatibility issues",
        endpoint="/api/validate",
        parameters={"content": {"type": "string", "required": True}},
    ),
]


@router.get("/mcp", response_model=McpDescriptor)
async def mcp_descriptor() -> McpDescriptor:
    return McpDescriptor(
        name="svgjsx",
        version=__version__,
        description="SVG optimization with JSX camelCase conversion and framework component generation",
        tools=TOOLS,
    )
