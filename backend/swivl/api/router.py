"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from swivl.api import blend, health, ideas, sessions

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(blend.router)
api_router.include_router(ideas.router)
api_router.include_router(sessions.router)
