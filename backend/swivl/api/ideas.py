"""/api/ideas — generate, browse, save, explore and place idea cards."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from swivl.config import settings
from swivl.dependencies import get_sessions, get_store
from swivl.engine.blend import BlendController, BlendWeights
from swivl.engine.card_stack import CardStackController
from swivl.models.idea import CanvasPlacement, IdeaCard, IdeaSource
from swivl.models.requests import CanvasRequest, ExploreRequest, GenerateRequest
from swivl.models.responses import IdeasResponse, SavedResponse
from swivl.services.sessions import SessionRegistry
from swivl.storage.idea_store import IdeaStore

router = APIRouter(prefix="/ideas")

_VISUAL_SOURCES = {IdeaSource.IMAGE, IdeaSource.DRAWING}


def _session_or_404(session_id: str | None, registry: SessionRegistry) -> CardStackController | None:
    if session_id is None:
        return None
    controller = registry.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return controller


def _idea_or_404(idea_id: str, store: IdeaStore) -> IdeaCard:
    card = store.get_idea(idea_id)
    if card is None:
        raise HTTPException(status_code=404, detail=f"Unknown idea '{idea_id}'")
    return card


def _weights_for(req: GenerateRequest, controller: CardStackController | None) -> BlendWeights:
    if req.x is not None and req.y is not None:
        return BlendController().move_to(req.x, req.y)
    if controller is not None:
        return controller.blend.weights
    return BlendController().weights


def _ideas(cards: list[IdeaCard]) -> IdeasResponse:
    return IdeasResponse(ideas=cards, count=len(cards))


@router.post("/generate", response_model=IdeasResponse)
async def generate(
    req: GenerateRequest,
    store: IdeaStore = Depends(get_store),
    registry: SessionRegistry = Depends(get_sessions),
) -> IdeasResponse:
    """Generate cards from a prompt, photo, sketch or voice transcript."""
    from swivl.services.generation import generate_ideas

    if req.source in _VISUAL_SOURCES:
        if not req.image_base64:
            raise HTTPException(status_code=400, detail=f"{req.source.value} ideas need image_base64")
    elif not req.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")

    controller = _session_or_404(req.session_id, registry)
    weights = _weights_for(req, controller)

    cards = await generate_ideas(
        req.prompt,
        req.source,
        weights,
        store,
        count=req.count or settings.default_idea_count,
        image_base64=req.image_base64,
        media_type=req.media_type,
    )
    if controller is not None:
        controller.enqueue(cards)
    return _ideas(cards)


@router.get("/random", response_model=IdeasResponse)
async def random_ideas(
    count: int = Query(3, ge=1, le=50),
    exclude: str = Query("", description="Comma-separated idea ids to skip"),
    store: IdeaStore = Depends(get_store),
) -> IdeasResponse:
    exclude_ids = [i for i in exclude.split(",") if i]
    return _ideas(store.random_ideas(count, exclude_ids))


@router.get("/saved", response_model=SavedResponse)
async def saved_ideas(store: IdeaStore = Depends(get_store)) -> SavedResponse:
    return SavedResponse(ideas=store.saved_ideas(), canvas=store.canvas())


@router.get("/{idea_id}", response_model=IdeaCard)
async def get_idea(idea_id: str, store: IdeaStore = Depends(get_store)) -> IdeaCard:
    return _idea_or_404(idea_id, store)


@router.delete("/{idea_id}")
async def delete_idea(idea_id: str, store: IdeaStore = Depends(get_store)) -> dict[str, str]:
    if not store.delete_idea(idea_id):
        raise HTTPException(status_code=404, detail=f"Unknown idea '{idea_id}'")
    return {"status": "deleted", "id": idea_id}


@router.post("/{idea_id}/save", response_model=IdeaCard)
async def save_idea(idea_id: str, store: IdeaStore = Depends(get_store)) -> IdeaCard:
    card = store.save_idea(idea_id)
    if card is None:
        raise HTTPException(status_code=404, detail=f"Unknown idea '{idea_id}'")
    return card


@router.delete("/{idea_id}/save")
async def unsave_idea(idea_id: str, store: IdeaStore = Depends(get_store)) -> dict[str, str]:
    _idea_or_404(idea_id, store)
    removed = store.unsave_idea(idea_id)
    return {"status": "removed" if removed else "not_saved", "id": idea_id}


@router.get("/{idea_id}/chain", response_model=IdeasResponse)
async def idea_chain(idea_id: str, store: IdeaStore = Depends(get_store)) -> IdeasResponse:
    """Cards explored directly from this one, oldest first."""
    _idea_or_404(idea_id, store)
    return _ideas(store.idea_chain(idea_id))


@router.post("/{idea_id}/explore", response_model=IdeasResponse)
async def explore(
    idea_id: str,
    req: ExploreRequest | None = None,
    store: IdeaStore = Depends(get_store),
    registry: SessionRegistry = Depends(get_sessions),
) -> IdeasResponse:
    from swivl.services.generation import explore_idea

    req = req or ExploreRequest()
    parent = _idea_or_404(idea_id, store)
    controller = _session_or_404(req.session_id, registry)

    cards = await explore_idea(parent, store, count=req.count)
    if controller is not None:
        controller.enqueue(cards)
    return _ideas(cards)


@router.put("/{idea_id}/canvas", response_model=CanvasPlacement)
async def place_on_canvas(
    idea_id: str,
    req: CanvasRequest,
    store: IdeaStore = Depends(get_store),
) -> CanvasPlacement:
    _idea_or_404(idea_id, store)
    placement = store.place_on_canvas(idea_id, req.x, req.y, req.note)
    if placement is None:
        raise HTTPException(status_code=400, detail="Only saved ideas can be placed on the canvas")
    return placement


@router.get("/{idea_id}/illustration")
async def illustration(idea_id: str, store: IdeaStore = Depends(get_store)) -> Response:
    from swivl.engine.illustration import generate_illustration

    card = _idea_or_404(idea_id, store)
    svg = generate_illustration(card.title, title=card.title)
    return Response(content=svg, media_type="image/svg+xml")
