"""Creativity triangle — 2D position to wild/actionable/deep blend weights.

Coordinates live in a normalized 0-100 space (origin top-left, y grows
downward). The visible triangle and the weight anchors are slightly
different: anchors sit just outside the drawn corners so that a marker
pinned to a corner still leaves a little weight on the other two axes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

Point = tuple[float, float]

# Drawn triangle: wild top-center, actionable bottom-left, deep bottom-right.
TRIANGLE_VERTICES: tuple[Point, Point, Point] = ((50.0, 20.0), (20.0, 80.0), (80.0, 80.0))

# Weight anchors, same order as TRIANGLE_VERTICES.
WEIGHT_ANCHORS: tuple[Point, Point, Point] = ((50.0, 15.0), (15.0, 85.0), (85.0, 85.0))

# Distance at which an anchor stops contributing. Bounds the 0-100 space.
MAX_DISTANCE = 100.0

PRESETS: dict[str, Point] = {
    "wild": WEIGHT_ANCHORS[0],
    "quick": WEIGHT_ANCHORS[1],
    "deep": WEIGHT_ANCHORS[2],
    "mix": (50.0, 50.0),
}


@dataclass(frozen=True)
class BlendWeights:
    """Three non-negative weights summing to 1."""

    wild: float
    actionable: float
    deep: float

    def as_dict(self) -> dict[str, float]:
        return {"wild": self.wild, "actionable": self.actionable, "deep": self.deep}

    @classmethod
    def even(cls) -> BlendWeights:
        third = 1.0 / 3.0
        return cls(third, third, third)


@dataclass(frozen=True)
class TrianglePosition:
    x: float
    y: float


def compute_weights(
    position: TrianglePosition | Point,
    vertices: tuple[Point, Point, Point] = WEIGHT_ANCHORS,
    max_distance: float = MAX_DISTANCE,
) -> BlendWeights:
    """Inverse-distance blend: closer anchor = higher weight, normalized to 1."""
    px, py = _xy(position)
    anchors = np.asarray(vertices, dtype=np.float64)
    distances = np.hypot(anchors[:, 0] - px, anchors[:, 1] - py)
    raw = np.maximum(0.0, max_distance - distances) / max_distance

    total = float(np.sum(raw))
    if total <= 0.0:
        return BlendWeights.even()

    wild, actionable, deep = (float(w) for w in raw / total)
    return BlendWeights(wild=wild, actionable=actionable, deep=deep)


def is_inside_triangle(x: float, y: float, v1: Point, v2: Point, v3: Point) -> bool:
    """Barycentric sign test. Points on an edge count as inside."""
    (x1, y1), (x2, y2), (x3, y3) = v1, v2, v3
    denom = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if denom == 0:
        return False
    a = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / denom
    b = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / denom
    c = 1.0 - a - b
    return a >= 0 and b >= 0 and c >= 0


def closest_point_on_segment(x: float, y: float, a: Point, b: Point) -> Point:
    """Project (x, y) onto segment a-b, clamping the parameter to [0, 1]."""
    ax, ay = a
    cx, cy = b[0] - ax, b[1] - ay
    len_sq = cx * cx + cy * cy
    if len_sq == 0:
        # Degenerate edge: a single point
        return a
    t = ((x - ax) * cx + (y - ay) * cy) / len_sq
    t = min(1.0, max(0.0, t))
    return (ax + t * cx, ay + t * cy)


def clamp_to_triangle(
    x: float,
    y: float,
    vertices: tuple[Point, Point, Point] = TRIANGLE_VERTICES,
) -> TrianglePosition:
    """Identity inside the triangle, else the nearest point on its boundary."""
    if is_inside_triangle(x, y, *vertices):
        return TrianglePosition(x, y)

    best = vertices[0]
    best_dist = float("inf")
    for i in range(3):
        px, py = closest_point_on_segment(x, y, vertices[i], vertices[(i + 1) % 3])
        dist = (x - px) ** 2 + (y - py) ** 2
        if dist < best_dist:
            best_dist = dist
            best = (px, py)
    return TrianglePosition(best[0], best[1])


def blend_description(weights: BlendWeights) -> str:
    """Short human label for a blend, e.g. "Wild + Deep"."""
    if weights.wild > 0.6:
        return "Experimental & Surreal"
    if weights.actionable > 0.6:
        return "Quick & Practical"
    if weights.deep > 0.6:
        return "Substantial & Meaningful"

    parts = []
    if weights.wild > 0.2:
        parts.append("Wild")
    if weights.actionable > 0.2:
        parts.append("Quick")
    if weights.deep > 0.2:
        parts.append("Deep")
    return " + ".join(parts)


class BlendController:
    """Owns the marker position for one session; weights are derived on read."""

    def __init__(self, position: TrianglePosition | None = None) -> None:
        start = position or TrianglePosition(*PRESETS["mix"])
        self._position = clamp_to_triangle(start.x, start.y)

    @property
    def position(self) -> TrianglePosition:
        return self._position

    @property
    def weights(self) -> BlendWeights:
        return compute_weights(self._position)

    def move_to(self, x: float, y: float) -> BlendWeights:
        self._position = clamp_to_triangle(x, y)
        return self.weights

    def apply_preset(self, name: str) -> BlendWeights:
        if name not in PRESETS:
            raise KeyError(f"Unknown blend preset: {name}")
        px, py = PRESETS[name]
        logger.debug("Applying blend preset %s", name)
        return self.move_to(px, py)


def _xy(position: TrianglePosition | Point) -> Point:
    if isinstance(position, TrianglePosition):
        return (position.x, position.y)
    return (float(position[0]), float(position[1]))
