"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from swivl.models.idea import CanvasPlacement, IdeaCard


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    llm_configured: bool = False


class BlendResponse(BaseModel):
    x: float
    y: float
    weights: dict[str, float]
    description: str


class PromptPreviewResponse(BaseModel):
    prompt: str
    weights: dict[str, float]


class IdeasResponse(BaseModel):
    ideas: list[IdeaCard] = Field(default_factory=list)
    count: int = 0


class SavedResponse(BaseModel):
    ideas: list[IdeaCard] = Field(default_factory=list)
    canvas: list[CanvasPlacement] = Field(default_factory=list)


class SessionResponse(BaseModel):
    session_id: str
    weights: dict[str, float]


class StackResponse(BaseModel):
    session_id: str
    visible: list[IdeaCard] = Field(default_factory=list)
    remaining: int = 0
    needs_refill: bool = False


class SwipeResponse(BaseModel):
    direction: str
    action: str
    card: IdeaCard | None = None
    explored: list[IdeaCard] = Field(default_factory=list)
    refilled: int = 0
    remaining: int = 0
