"""Pointer/touch gesture classifier — one configurable swipe state machine.

States: IDLE → TRACKING → {RESOLVED | CANCELLED} → IDLE.

The same class backs both the general card swipe (all four directions) and
the stricter vertical-only swipe used alongside horizontal carousels; they
differ only in their GestureConfig. Coordinates follow screen convention:
dy < 0 means the pointer moved up.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class SwipeDirection(str, enum.Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class GestureState(enum.Enum):
    IDLE = "idle"
    TRACKING = "tracking"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class GestureConfig:
    # Release classification
    horizontal_threshold: float = 50.0
    up_threshold: float = 20.0
    down_threshold: float = 30.0

    # Slow, short movement = tap, not swipe
    tap_timeout_ms: float = 500.0
    tap_max_dx: float = 50.0
    tap_max_dy: float = 20.0

    # Vertical-biased drag feedback
    horizontal_lock_threshold: float = 30.0
    activation_threshold: float = 10.0
    max_drag_offset: float = 80.0

    # Vertical-only mode: near-pure vertical travel beyond vertical_threshold
    vertical_only: bool = False
    vertical_threshold: float = 60.0


SWIPE_CONFIG = GestureConfig()
VERTICAL_SWIPE_CONFIG = GestureConfig(vertical_only=True)


@dataclass(frozen=True)
class GestureSample:
    x: float
    y: float
    t: float  # milliseconds


@dataclass(frozen=True)
class DragFeedback:
    dx: float
    dy: float
    vertical_biased: bool
    offset: float  # upward drag-follow offset, 0..max_drag_offset


@dataclass(frozen=True)
class GestureResolution:
    direction: SwipeDirection
    dx: float = 0.0
    dy: float = 0.0
    elapsed_ms: float = 0.0
    cancelled: bool = False


class GestureClassifier:
    """Tracks one gesture at a time; first active pointer wins."""

    def __init__(self, config: GestureConfig = SWIPE_CONFIG) -> None:
        self.config = config
        self._state = GestureState.IDLE
        self._last_outcome = GestureState.IDLE
        self._pointer_id: int | None = None
        self._samples: list[GestureSample] = []
        self._vertical_biased = False

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def last_outcome(self) -> GestureState:
        """RESOLVED or CANCELLED for the most recent finished gesture."""
        return self._last_outcome

    @property
    def samples(self) -> tuple[GestureSample, ...]:
        return tuple(self._samples)

    @property
    def vertical_biased(self) -> bool:
        return self._vertical_biased

    def start(self, x: float, y: float, t: float, pointer_id: int = 0) -> bool:
        """Begin tracking. Returns False if another pointer already owns the gesture."""
        if self._state is GestureState.TRACKING:
            return False
        self._state = GestureState.TRACKING
        self._pointer_id = pointer_id
        self._samples = [GestureSample(x, y, t)]
        self._vertical_biased = False
        return True

    def move(self, x: float, y: float, t: float, pointer_id: int = 0) -> DragFeedback | None:
        if self._state is not GestureState.TRACKING or pointer_id != self._pointer_id:
            return None
        self._samples.append(GestureSample(x, y, t))

        origin = self._samples[0]
        dx = x - origin.x
        dy = y - origin.y
        cfg = self.config
        if abs(dx) < cfg.horizontal_lock_threshold and abs(dy) > cfg.activation_threshold:
            self._vertical_biased = True

        offset = 0.0
        if self._vertical_biased:
            offset = min(cfg.max_drag_offset, max(0.0, -dy))
        return DragFeedback(dx=dx, dy=dy, vertical_biased=self._vertical_biased, offset=offset)

    def end(self, x: float, y: float, t: float, pointer_id: int = 0) -> GestureResolution | None:
        """Resolve the gesture. None means the event belonged to an ignored pointer."""
        if self._state is GestureState.TRACKING and pointer_id != self._pointer_id:
            return None
        if not self._samples:
            return self._finish(GestureState.CANCELLED, GestureResolution(SwipeDirection.NONE, cancelled=True))

        origin = self._samples[0]
        dx = x - origin.x
        dy = y - origin.y
        elapsed = t - origin.t
        direction = self.classify(dx, dy, elapsed, self._vertical_biased)
        logger.debug("Gesture resolved %s (dx=%.1f dy=%.1f %.0fms)", direction.value, dx, dy, elapsed)
        return self._finish(
            GestureState.RESOLVED,
            GestureResolution(direction=direction, dx=dx, dy=dy, elapsed_ms=elapsed),
        )

    def cancel(self) -> GestureResolution:
        return self._finish(GestureState.CANCELLED, GestureResolution(SwipeDirection.NONE, cancelled=True))

    def classify(
        self,
        dx: float,
        dy: float,
        elapsed_ms: float,
        vertical_biased: bool = False,
    ) -> SwipeDirection:
        """Map end-of-gesture deltas to a direction. Pure; order matters."""
        cfg = self.config

        if elapsed_ms > cfg.tap_timeout_ms and abs(dx) < cfg.tap_max_dx and abs(dy) < cfg.tap_max_dy:
            return SwipeDirection.NONE

        if cfg.vertical_only:
            if abs(dx) < cfg.horizontal_lock_threshold and abs(dy) > cfg.vertical_threshold:
                return SwipeDirection.UP if dy < 0 else SwipeDirection.DOWN
            return SwipeDirection.NONE

        if dy < -cfg.up_threshold:
            return SwipeDirection.UP
        if dy > cfg.down_threshold and abs(dy) > abs(dx):
            return SwipeDirection.DOWN
        if not vertical_biased and abs(dx) > abs(dy) and abs(dx) > cfg.horizontal_threshold:
            return SwipeDirection.LEFT if dx < 0 else SwipeDirection.RIGHT
        return SwipeDirection.NONE

    def replay(self, samples: list[GestureSample], pointer_id: int = 0) -> GestureResolution:
        """Run a recorded path through start/move/end."""
        if not samples:
            return self.cancel()
        first, *rest = samples
        if not self.start(first.x, first.y, first.t, pointer_id):
            return GestureResolution(SwipeDirection.NONE, cancelled=True)
        for s in rest[:-1]:
            self.move(s.x, s.y, s.t, pointer_id)
        last = rest[-1] if rest else first
        return self.end(last.x, last.y, last.t, pointer_id)

    def _finish(self, outcome: GestureState, resolution: GestureResolution) -> GestureResolution:
        self._last_outcome = outcome
        self._state = GestureState.IDLE
        self._pointer_id = None
        self._samples = []
        self._vertical_biased = False
        return resolution
