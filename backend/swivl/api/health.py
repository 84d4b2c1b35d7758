"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from swivl.config import Settings
from swivl.dependencies import get_settings
from swivl.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        llm_configured=bool(settings.anthropic_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from swivl.llm.prompts import get_all_templates

    return get_all_templates()
