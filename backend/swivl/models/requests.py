"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from swivl.engine.gesture import SwipeDirection
from swivl.models.idea import IdeaSource


class BlendRequest(BaseModel):
    x: float = Field(..., description="Pointer x in triangle space (0-100)")
    y: float = Field(..., description="Pointer y in triangle space (0-100)")
    session_id: str | None = Field(None, description="Also move this session's blend")


class PresetRequest(BaseModel):
    preset: str = Field(..., description="One of wild, quick, deep, mix")
    session_id: str | None = None


class PromptPreviewRequest(BaseModel):
    subject: str = Field("", description="User's creative subject")
    x: float = 50.0
    y: float = 50.0
    count: int = Field(5, ge=1, le=10)


class GenerateRequest(BaseModel):
    prompt: str = Field("", description="Text prompt or voice transcript")
    source: IdeaSource = IdeaSource.TEXT
    x: float | None = Field(None, description="Blend position x; defaults to the session's or centre")
    y: float | None = None
    count: int | None = Field(None, ge=1, le=10, description="Defaults to the configured idea count")
    image_base64: str | None = Field(None, description="Photo or sketch, base64 without data: prefix")
    media_type: str = "image/jpeg"
    session_id: str | None = Field(None, description="Append generated cards to this session's stack")


class ExploreRequest(BaseModel):
    count: int = Field(3, ge=1, le=10)
    session_id: str | None = None


class CanvasRequest(BaseModel):
    x: float = 0.0
    y: float = 0.0
    note: str = Field("", description="Free-text annotation")


class GestureSampleIn(BaseModel):
    x: float
    y: float
    t: float = Field(..., description="Timestamp in milliseconds")


class GestureRequest(BaseModel):
    samples: list[GestureSampleIn] = Field(..., description="Pointer path, first = down, last = up")
    pointer_id: int = 0


class SwipeRequest(BaseModel):
    direction: SwipeDirection
