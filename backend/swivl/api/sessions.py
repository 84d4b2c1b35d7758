"""/api/sessions — card stack sessions driven by gestures or explicit swipes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from swivl.config import settings
from swivl.dependencies import get_sessions, get_store
from swivl.engine.card_stack import CardAction, CardStackController, SwipeOutcome
from swivl.engine.gesture import GestureSample
from swivl.models.requests import GestureRequest, SwipeRequest
from swivl.models.responses import SessionResponse, StackResponse, SwipeResponse
from swivl.services.sessions import SessionRegistry
from swivl.storage.idea_store import IdeaStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions")

# Swipe-up appends this many related ideas behind the current stack
_EXPLORE_COUNT = 1


def _session_or_404(session_id: str, registry: SessionRegistry) -> CardStackController:
    controller = registry.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return controller


def _stack(controller: CardStackController) -> StackResponse:
    return StackResponse(
        session_id=controller.session_id,
        visible=controller.visible(),
        remaining=controller.queue.remaining_count(),
        needs_refill=controller.queue.should_refill(),
    )


async def _apply(
    controller: CardStackController,
    outcome: SwipeOutcome,
    store: IdeaStore,
) -> SwipeResponse:
    """Run the side effects of a resolved swipe: save, explore, refill."""
    from swivl.services.generation import explore_idea, refill_ideas

    explored = []
    card = outcome.card
    if card is not None and outcome.action in (CardAction.SAVE, CardAction.EXPLORE):
        card = store.save_idea(card.id) or card
    if card is not None and outcome.action is CardAction.EXPLORE:
        explored = await explore_idea(card, store, count=_EXPLORE_COUNT)
        controller.enqueue(explored)

    refilled = 0
    if controller.queue.should_refill():
        fresh = refill_ideas(store, settings.refill_batch_size, controller.queue.ids())
        controller.enqueue(fresh)
        refilled = len(fresh)
        if refilled:
            logger.debug("Session %s refilled with %d ideas", controller.session_id, refilled)

    controller.queue.compact()

    return SwipeResponse(
        direction=outcome.direction.value,
        action=outcome.action.value,
        card=card,
        explored=explored,
        refilled=refilled,
        remaining=controller.queue.remaining_count(),
    )


@router.post("", response_model=SessionResponse)
async def create_session(
    registry: SessionRegistry = Depends(get_sessions),
) -> SessionResponse:
    controller = registry.create()
    return SessionResponse(
        session_id=controller.session_id,
        weights=controller.blend.weights.as_dict(),
    )


@router.delete("/{session_id}")
async def close_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_sessions),
) -> dict[str, str]:
    if not registry.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return {"status": "closed", "session_id": session_id}


@router.get("/{session_id}/stack", response_model=StackResponse)
async def get_stack(
    session_id: str,
    registry: SessionRegistry = Depends(get_sessions),
) -> StackResponse:
    return _stack(_session_or_404(session_id, registry))


@router.post("/{session_id}/gesture", response_model=SwipeResponse)
async def gesture(
    session_id: str,
    req: GestureRequest,
    registry: SessionRegistry = Depends(get_sessions),
    store: IdeaStore = Depends(get_store),
) -> SwipeResponse:
    """Classify a recorded pointer path and act on the front card."""
    controller = _session_or_404(session_id, registry)
    samples = [GestureSample(s.x, s.y, s.t) for s in req.samples]
    outcome = controller.replay(samples, req.pointer_id)
    return await _apply(controller, outcome, store)


@router.post("/{session_id}/swipe", response_model=SwipeResponse)
async def swipe(
    session_id: str,
    req: SwipeRequest,
    registry: SessionRegistry = Depends(get_sessions),
    store: IdeaStore = Depends(get_store),
) -> SwipeResponse:
    """Act on the front card with an already-resolved direction (buttons, keys)."""
    controller = _session_or_404(session_id, registry)
    outcome = controller.swipe(req.direction)
    return await _apply(controller, outcome, store)
