"""Idea card and canvas placement models."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class IdeaSource(str, enum.Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    DRAWING = "drawing"
    EXPLORATION = "exploration"


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class IdeaCard(BaseModel):
    id: str = Field(default_factory=_new_id)
    title: str
    description: str
    source: IdeaSource = IdeaSource.TEXT
    source_content: str | None = None
    parent_idea_id: str | None = Field(
        default=None,
        description="Card this one was explored from",
    )
    is_saved: bool = False
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_now)


class CanvasPlacement(BaseModel):
    """Where a saved idea sits on the freeform canvas, plus its annotation."""

    idea_id: str
    x: float = 0.0
    y: float = 0.0
    note: str = ""
