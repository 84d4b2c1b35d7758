"""POST /api/blend, /api/blend/preset, /api/prompt/preview — creativity triangle."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from swivl.dependencies import get_sessions
from swivl.engine.blend import PRESETS, BlendController, blend_description
from swivl.engine.prompt import compile_prompt
from swivl.models.requests import BlendRequest, PresetRequest, PromptPreviewRequest
from swivl.models.responses import BlendResponse, PromptPreviewResponse
from swivl.services.sessions import SessionRegistry

router = APIRouter()


def _controller_for(session_id: str | None, registry: SessionRegistry) -> BlendController:
    if session_id is None:
        return BlendController()
    controller = registry.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return controller.blend


def _response(blend: BlendController) -> BlendResponse:
    weights = blend.weights
    return BlendResponse(
        x=blend.position.x,
        y=blend.position.y,
        weights=weights.as_dict(),
        description=blend_description(weights),
    )


@router.post("/blend", response_model=BlendResponse)
async def move_blend(
    req: BlendRequest,
    registry: SessionRegistry = Depends(get_sessions),
) -> BlendResponse:
    """Clamp a pointer position into the triangle and return its weights."""
    blend = _controller_for(req.session_id, registry)
    blend.move_to(req.x, req.y)
    return _response(blend)


@router.post("/blend/preset", response_model=BlendResponse)
async def apply_preset(
    req: PresetRequest,
    registry: SessionRegistry = Depends(get_sessions),
) -> BlendResponse:
    if req.preset not in PRESETS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown preset '{req.preset}', expected one of {sorted(PRESETS)}",
        )
    blend = _controller_for(req.session_id, registry)
    blend.apply_preset(req.preset)
    return _response(blend)


@router.post("/prompt/preview", response_model=PromptPreviewResponse)
async def preview_prompt(req: PromptPreviewRequest) -> PromptPreviewResponse:
    """Show the exact prompt a generation at this blend position would send."""
    blend = BlendController()
    weights = blend.move_to(req.x, req.y)
    return PromptPreviewResponse(
        prompt=compile_prompt(req.subject, weights, req.count),
        weights=weights.as_dict(),
    )
