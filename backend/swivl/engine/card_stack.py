"""Per-session card stack controller.

Owns the blend position, the card queue and two gesture classifiers (general
swipe + vertical-only). Pointer events go to both classifiers; on release the
vertical-only result wins when it fired, otherwise the general one is used,
so a single physical gesture yields at most one action.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from swivl.engine.blend import BlendController
from swivl.engine.card_queue import CardQueue
from swivl.engine.gesture import (
    SWIPE_CONFIG,
    VERTICAL_SWIPE_CONFIG,
    DragFeedback,
    GestureClassifier,
    GestureResolution,
    GestureSample,
    SwipeDirection,
)

if TYPE_CHECKING:
    from swivl.models.idea import IdeaCard

logger = logging.getLogger(__name__)


class CardAction(str, enum.Enum):
    NONE = "none"
    DISMISS = "dismiss"
    SAVE = "save"
    EXPLORE = "explore"  # save, then generate related ideas


_ACTIONS = {
    SwipeDirection.LEFT: CardAction.DISMISS,
    SwipeDirection.RIGHT: CardAction.SAVE,
    SwipeDirection.UP: CardAction.EXPLORE,
}


@dataclass
class SwipeOutcome:
    direction: SwipeDirection
    action: CardAction
    card: IdeaCard | None = None
    needs_refill: bool = False
    remaining: int = 0


class CardStackController:
    def __init__(self, session_id: str, visible_count: int = 3) -> None:
        self.session_id = session_id
        self.visible_count = visible_count
        self.blend = BlendController()
        self.queue = CardQueue()
        self.swipe_classifier = GestureClassifier(SWIPE_CONFIG)
        self.vertical_classifier = GestureClassifier(VERTICAL_SWIPE_CONFIG)

    def front(self) -> IdeaCard | None:
        return self.queue.consume_front()

    def visible(self) -> list[IdeaCard]:
        return self.queue.visible(self.visible_count)

    def enqueue(self, cards: list[IdeaCard]) -> None:
        self.queue.enqueue(cards)

    # -- pointer events ---------------------------------------------------

    def pointer_down(self, x: float, y: float, t: float, pointer_id: int = 0) -> None:
        self.swipe_classifier.start(x, y, t, pointer_id)
        self.vertical_classifier.start(x, y, t, pointer_id)

    def pointer_move(self, x: float, y: float, t: float, pointer_id: int = 0) -> DragFeedback | None:
        self.vertical_classifier.move(x, y, t, pointer_id)
        return self.swipe_classifier.move(x, y, t, pointer_id)

    def pointer_up(self, x: float, y: float, t: float, pointer_id: int = 0) -> SwipeOutcome | None:
        """Resolve the gesture and act on the front card. None = ignored pointer."""
        general = self.swipe_classifier.end(x, y, t, pointer_id)
        strict = self.vertical_classifier.end(x, y, t, pointer_id)
        if general is None and strict is None:
            return None
        return self.swipe(_pick(general, strict))

    def replay(self, samples: list[GestureSample], pointer_id: int = 0) -> SwipeOutcome:
        """Feed a recorded path through both classifiers."""
        if not samples:
            self.swipe_classifier.cancel()
            self.vertical_classifier.cancel()
            return self.swipe(SwipeDirection.NONE)

        first, *rest = samples
        self.pointer_down(first.x, first.y, first.t, pointer_id)
        for s in rest[:-1]:
            self.pointer_move(s.x, s.y, s.t, pointer_id)
        last = rest[-1] if rest else first
        outcome = self.pointer_up(last.x, last.y, last.t, pointer_id)
        return outcome or self.swipe(SwipeDirection.NONE)

    # -- actions ----------------------------------------------------------

    def swipe(self, direction: SwipeDirection) -> SwipeOutcome:
        """Apply a resolved direction to the front card and advance past it."""
        action = _ACTIONS.get(direction, CardAction.NONE)
        card = self.queue.consume_front()
        if action is CardAction.NONE or card is None:
            return SwipeOutcome(
                direction=direction,
                action=CardAction.NONE,
                card=None,
                needs_refill=self.queue.should_refill(),
                remaining=self.queue.remaining_count(),
            )

        self.queue.advance()
        logger.info("Session %s: %s card %s", self.session_id, action.value, card.id)
        return SwipeOutcome(
            direction=direction,
            action=action,
            card=card,
            needs_refill=self.queue.should_refill(),
            remaining=self.queue.remaining_count(),
        )


def _pick(general: GestureResolution | None, strict: GestureResolution | None) -> SwipeDirection:
    if strict is not None and strict.direction is not SwipeDirection.NONE:
        return strict.direction
    if general is not None:
        return general.direction
    return SwipeDirection.NONE
