"""In-memory registry of card stack sessions."""

from __future__ import annotations

import logging
import threading
import uuid

from swivl.engine.card_stack import CardStackController

logger = logging.getLogger(__name__)


class SessionRegistry:
    def __init__(self) -> None:
        self._sessions: dict[str, CardStackController] = {}
        self._lock = threading.Lock()

    def create(self) -> CardStackController:
        session_id = str(uuid.uuid4())
        controller = CardStackController(session_id)
        with self._lock:
            self._sessions[session_id] = controller
        logger.info("Created session %s", session_id)
        return controller

    def get(self, session_id: str) -> CardStackController | None:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry
