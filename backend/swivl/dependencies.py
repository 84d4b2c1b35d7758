"""FastAPI dependency injection."""

from __future__ import annotations

from swivl.config import Settings, settings
from swivl.services.sessions import SessionRegistry, get_session_registry
from swivl.storage.idea_store import IdeaStore, get_idea_store


def get_settings() -> Settings:
    return settings


def get_store() -> IdeaStore:
    return get_idea_store()


def get_sessions() -> SessionRegistry:
    return get_session_registry()
