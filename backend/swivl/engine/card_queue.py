"""FIFO card queue with a read cursor and low-water-mark refill signal."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swivl.models.idea import IdeaCard

logger = logging.getLogger(__name__)

LOW_WATER_MARK = 2


class CardQueue:
    """Append-only card sequence; the card at the cursor is the interactive one.

    Consumption never removes storage, it only moves the cursor. New batches
    always land at the tail so the current front never changes under a user
    mid-swipe.
    """

    def __init__(self, low_water_mark: int = LOW_WATER_MARK) -> None:
        self._cards: list[IdeaCard] = []
        # Every id ever enqueued, in arrival order; survives compaction
        self._seen: dict[str, None] = {}
        self._cursor = 0
        self._low_water_mark = low_water_mark
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cursor(self) -> int:
        return self._cursor

    def enqueue(self, cards: list[IdeaCard]) -> None:
        """Append in arrival order. No de-duplication."""
        if not cards:
            return
        with self._lock:
            self._cards.extend(cards)
            for card in cards:
                self._seen[card.id] = None
        logger.debug("Enqueued %d cards (%d remaining)", len(cards), self.remaining_count())

    def consume_front(self) -> IdeaCard | None:
        """Current front card, or None when nothing is left."""
        with self._lock:
            if self._cursor >= len(self._cards):
                return None
            return self._cards[self._cursor]

    def advance(self) -> None:
        with self._lock:
            if self._cursor < len(self._cards):
                self._cursor += 1

    def remaining_count(self) -> int:
        with self._lock:
            return len(self._cards) - self._cursor

    def should_refill(self) -> bool:
        return self.remaining_count() <= self._low_water_mark

    def visible(self, n: int = 3) -> list[IdeaCard]:
        """Front-most unconsumed cards, top of the stack first."""
        with self._lock:
            return list(self._cards[self._cursor:self._cursor + n])

    def ids(self) -> list[str]:
        """Ids of every card this queue has held, including compacted ones."""
        with self._lock:
            return list(self._seen)

    def compact(self) -> int:
        """Drop consumed entries. Returns how many were evicted."""
        with self._lock:
            evicted = self._cursor
            del self._cards[:self._cursor]
            self._cursor = 0
        if evicted:
            logger.debug("Compacted queue, evicted %d consumed cards", evicted)
        return evicted
