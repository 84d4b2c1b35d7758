"""Task → model selection. Cheap model for text ideas, mid-tier for vision."""

from __future__ import annotations

from swivl.config import settings

_TASK_MODEL_MAP = {
    "text": "cheap",
    "audio": "cheap",
    "explore": "cheap",
    "image": "mid",
    "drawing": "mid",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "mid":
        return settings.model_mid
    return settings.model_cheap
