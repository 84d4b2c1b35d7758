"""Deterministic hand-drawn illustrations keyed by text.

Every jitter value derives from `seeded_random(hash_string(text), index)`,
so the same text always yields byte-identical SVG. No I/O, no global RNG.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from swivl.svg.serializer import serialize_svg

Element = dict[str, Any]

_STROKE = "#333"
_SCENE_COUNT = 6


def hash_string(text: str) -> int:
    """Polynomial hash h = h*31 + unit over UTF-16 code units, 32-bit signed wrap."""
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def seeded_random(seed: int, index: int) -> float:
    """frac(sin(seed*9.549 + index*7.317) * 10000), in [0, 1)."""
    v = math.sin(seed * 9.549 + index * 7.317) * 10000
    return v - math.floor(v)


def sketchy_offset(seed: int, index: int, spread: float = 2.0) -> float:
    """Jitter in [-spread/2, spread/2)."""
    return seeded_random(seed, index) * spread - spread / 2


def _f(v: float) -> str:
    return f"{v:.2f}"


def sketchy_line(
    x1: float, y1: float, x2: float, y2: float, seed: int, width: str = "2",
) -> Element:
    """Quadratic path with a jittered midpoint and endpoints."""
    mx = (x1 + x2) / 2 + sketchy_offset(seed, 1, 3)
    my = (y1 + y2) / 2 + sketchy_offset(seed, 2, 3)
    sx = x1 + sketchy_offset(seed, 3, 1)
    sy = y1 + sketchy_offset(seed, 4, 1)
    ex = x2 + sketchy_offset(seed, 5, 1)
    ey = y2 + sketchy_offset(seed, 6, 1)
    return {
        "tag": "path",
        "d": f"M {_f(sx)} {_f(sy)} Q {_f(mx)} {_f(my)} {_f(ex)} {_f(ey)}",
        "fill": "none",
        "stroke": _STROKE,
        "stroke-width": width,
        "stroke-linecap": "round",
    }


def sketchy_circle(
    cx: float, cy: float, r: float, seed: int, width: str = "2", fill: str = "none",
) -> Element:
    """Octagon with wobbly radius standing in for a circle."""
    points = []
    for i in range(8):
        angle = i / 8 * 2 * math.pi
        radius = r + sketchy_offset(seed, i, r * 0.1)
        x = cx + math.cos(angle) * radius + sketchy_offset(seed, i + 10, 1)
        y = cy + math.sin(angle) * radius + sketchy_offset(seed, i + 20, 1)
        points.append(f"{_f(x)},{_f(y)}")
    return {
        "tag": "polygon",
        "points": " ".join(points),
        "fill": fill,
        "stroke": _STROKE,
        "stroke-width": width,
        "stroke-linecap": "round",
        "stroke-linejoin": "round",
    }


def _sketchy_box(
    x1: float, y1: float, x2: float, y2: float, seed: int, width: str = "2",
) -> list[Element]:
    corners = [(x1, y1), (x1, y2), (x2, y2), (x2, y1)]
    return [
        sketchy_line(*corners[i], *corners[(i + 1) % 4], seed + i, width)
        for i in range(4)
    ]


def _dot(x: float, y: float, r: float, seed: int, index: int, jitter: float, opacity: str = "") -> Element:
    dot = {
        "tag": "circle",
        "cx": _f(x + sketchy_offset(seed, index, jitter)),
        "cy": _f(y + sketchy_offset(seed, index + 1, jitter)),
        "r": str(r),
        "fill": _STROKE,
    }
    if opacity:
        dot["opacity"] = opacity
    return dot


def _head(
    hx: float, hy: float, r: float, seed: int, circle_seed: int, index: int, width: str = "2",
) -> list[Element]:
    """Head outline, two eyes and a smile."""
    eye_dx = r / 4
    eye_y = hy - r * 0.3
    eye_r = 1.2 if r >= 8 else 1
    mouth_y = hy + r * 0.3
    smile = {
        "tag": "path",
        "d": (
            f"M {_f(hx - r * 0.35 + sketchy_offset(seed, index + 4, 1))} "
            f"{_f(mouth_y + sketchy_offset(seed, index + 5, 1))} "
            f"Q {_f(hx)} {_f(mouth_y + r * 0.35)} "
            f"{_f(hx + r * 0.35 + sketchy_offset(seed, index + 6, 1))} "
            f"{_f(mouth_y + sketchy_offset(seed, index + 7, 1))}"
        ),
        "fill": "none",
        "stroke": _STROKE,
        "stroke-width": "1.5",
        "stroke-linecap": "round",
    }
    return [
        sketchy_circle(hx, hy, r, seed + circle_seed, width),
        _dot(hx - eye_dx, eye_y, eye_r, seed, index, 0.5),
        _dot(hx + eye_dx, eye_y, eye_r, seed, index + 2, 0.5),
        smile,
    ]


def _wavy(x1: float, y: float, x2: float, bend: float) -> Element:
    return {
        "tag": "path",
        "d": f"M {_f(x1)} {_f(y)} Q {_f((x1 + x2) / 2)} {_f(y + bend)} {_f(x2)} {_f(y)}",
        "fill": "none",
        "stroke": _STROKE,
        "stroke-width": "1.2",
        "stroke-linecap": "round",
    }


def _reader(x: float, y: float, seed: int) -> list[Element]:
    parts = _head(x - 20, y - 40, 8, seed, 100, 10, "2.5")
    parts += _sketchy_box(x - 25, y - 32, x - 15, y - 12, seed + 200, "2.5")
    parts += [
        sketchy_line(x - 25, y - 25, x - 35, y - 20, seed + 300),
        sketchy_line(x - 15, y - 25, x - 5, y - 20, seed + 301),
    ]
    parts += _sketchy_box(x - 30, y - 25, x - 10, y - 10, seed + 400)
    parts += [
        sketchy_line(x - 20, y - 25, x - 20, y - 10, seed + 404, "1"),
        sketchy_line(x - 22, y - 12, x - 22, y + 5, seed + 500, "2.5"),
        sketchy_line(x - 18, y - 12, x - 18, y + 5, seed + 501, "2.5"),
        _dot(x - 30, y - 15, 0.8, seed, 30, 2, "0.3"),
        _dot(x - 12, y - 8, 0.6, seed, 32, 2, "0.3"),
    ]
    return parts


def _clock(x: float, y: float, seed: int) -> list[Element]:
    parts = [
        sketchy_circle(x, y - 5, 35, seed + 1000, "2.5"),
        sketchy_line(x, y - 35, x, y - 30, seed + 1100),
        sketchy_line(x + 30, y - 5, x + 25, y - 5, seed + 1101),
        sketchy_line(x, y + 25, x, y + 20, seed + 1102),
        sketchy_line(x - 30, y - 5, x - 25, y - 5, seed + 1103),
        sketchy_line(x, y - 5, x - 8, y - 15, seed + 1200, "3"),
        sketchy_line(x, y - 5, x + 12, y - 5, seed + 1201, "3"),
    ]
    for side, base, idx in ((-1, 1300, 40), (1, 1500, 50)):
        px = x + side * 50
        parts += _head(px, y - 20, 6, seed, base, idx)
        parts += [
            sketchy_line(px, y - 14, px, y + 5, seed + base + 100),
            sketchy_line(px, y - 10, px - side * 10, y - 15, seed + base + 101),
        ]
    parts += [
        _dot(x - 15, y - 35, 1, seed, 60, 3, "0.4"),
        _dot(x + 20, y + 15, 0.8, seed, 62, 3, "0.4"),
    ]
    return parts


def _pencil(x: float, y: float, seed: int) -> list[Element]:
    parts = [
        sketchy_line(x - 5, y - 45, x - 5, y + 15, seed + 2000, "2.5"),
        sketchy_line(x + 5, y - 45, x + 5, y + 15, seed + 2001, "2.5"),
        sketchy_line(x - 5, y - 45, x + 5, y - 45, seed + 2002, "2.5"),
        sketchy_line(x - 5, y + 15, x, y + 25, seed + 2003, "2.5"),
        sketchy_line(x, y + 25, x + 5, y + 15, seed + 2004, "2.5"),
    ]
    parts += _sketchy_box(x - 6, y - 50, x + 6, y - 42, seed + 2100)
    parts += [
        sketchy_line(x - 5, y - 30, x + 5, y - 30, seed + 2200, "1.5"),
        sketchy_line(x - 5, y - 20, x + 5, y - 20, seed + 2201, "1.5"),
    ]
    parts += _head(x - 25, y - 15, 6, seed, 2300, 70)
    parts += [
        sketchy_line(x - 25, y - 9, x - 25, y + 8, seed + 2400),
        sketchy_line(x - 25, y - 5, x - 15, y - 10, seed + 2401),
    ]
    parts += _sketchy_box(x + 15, y - 10, x + 40, y + 10, seed + 2500, "1.5")
    parts += [
        _wavy(x + 18, y - 6, x + 35, 1),
        _wavy(x + 18, y - 2, x + 32, -1),
        _wavy(x + 18, y + 2, x + 38, -1),
        _dot(x - 8, y - 35, 0.8, seed, 80, 2, "0.5"),
        _dot(x + 25, y - 20, 0.6, seed, 82, 2, "0.5"),
    ]
    return parts


def _speaker(x: float, y: float, seed: int) -> list[Element]:
    parts = _head(x - 30, y - 25, 8, seed, 3000, 90)
    parts += [
        sketchy_line(x - 30, y - 17, x - 30, y + 5, seed + 3100),
        sketchy_line(x - 30, y - 10, x - 10, y - 20, seed + 3200, "2.5"),
        sketchy_circle(x + 10, y - 30, 20, seed + 3300),
        sketchy_line(x - 8, y - 25, x - 5, y - 20, seed + 3400, "1.5"),
        sketchy_line(x - 5, y - 20, x - 12, y - 22, seed + 3401, "1.5"),
        sketchy_line(x - 12, y - 22, x - 8, y - 25, seed + 3402, "1.5"),
        _wavy(x - 5, y - 33, x + 15, 1),
        _wavy(x + 5, y - 30, x + 25, -1),
        _wavy(x - 2, y - 27, x + 18, 1),
        _dot(x + 35, y - 35, 0.8, seed, 100, 2, "0.4"),
        _dot(x - 15, y - 40, 0.6, seed, 102, 2, "0.4"),
    ]
    return parts


def _hiker(x: float, y: float, seed: int) -> list[Element]:
    parts = _head(x - 10, y - 35, 6, seed, 4000, 110)
    parts += [
        sketchy_line(x - 10, y - 29, x - 10, y - 10, seed + 4100),
        sketchy_line(x - 10, y - 20, x - 25, y + 5, seed + 4200, "3"),
    ]
    parts += _sketchy_box(x - 7, y - 25, x - 1, y - 17, seed + 4300, "1.5")
    parts += [
        sketchy_line(x - 12, y - 10, x - 12, y + 5, seed + 4400),
        sketchy_line(x - 8, y - 10, x - 5, y + 5, seed + 4401),
        sketchy_line(x + 10, y + 10, x + 25, y - 15, seed + 4500, "1.5"),
        sketchy_line(x + 25, y - 15, x + 40, y + 10, seed + 4501, "1.5"),
        sketchy_line(x + 20, y + 10, x + 35, y - 25, seed + 4502, "1.5"),
        sketchy_line(x + 35, y - 25, x + 50, y + 10, seed + 4503, "1.5"),
        _dot(x + 5, y - 5, 0.8, seed, 120, 3, "0.3"),
        _dot(x + 45, y - 10, 0.6, seed, 122, 3, "0.3"),
    ]
    return parts


def _celebration(x: float, y: float, seed: int) -> list[Element]:
    parts = _head(x, y - 30, 8, seed, 5000, 130, "2.5")
    parts += [
        sketchy_line(x, y - 22, x, y + 5, seed + 5100, "2.5"),
        sketchy_line(x, y - 15, x - 20, y - 35, seed + 5200, "3"),
        sketchy_line(x, y - 15, x + 20, y - 35, seed + 5201, "3"),
        sketchy_line(x - 3, y + 5, x - 8, y + 20, seed + 5300, "2.5"),
        sketchy_line(x + 3, y + 5, x + 8, y + 20, seed + 5301, "2.5"),
        sketchy_circle(x - 25, y - 40, 2, seed + 5400, "1.5"),
        sketchy_circle(x + 25, y - 40, 2, seed + 5401, "1.5"),
        sketchy_line(x - 15, y - 45, x - 18, y - 40, seed + 5500, "1.5"),
        sketchy_line(x + 15, y - 45, x + 18, y - 40, seed + 5501, "1.5"),
        _dot(x - 30, y - 25, 1, seed, 140, 3, "0.6"),
        _dot(x + 32, y - 30, 0.8, seed, 142, 3, "0.6"),
        _dot(x - 10, y - 50, 0.6, seed, 144, 2, "0.6"),
        _dot(x + 15, y - 48, 0.8, seed, 146, 2, "0.6"),
    ]
    return parts


SCENES: tuple[Callable[[float, float, int], list[Element]], ...] = (
    _reader,
    _clock,
    _pencil,
    _speaker,
    _hiker,
    _celebration,
)


def scene_index(seed_text: str) -> int:
    return hash_string(seed_text) % _SCENE_COUNT


def generate_illustration(seed_text: str, width: int = 300, height: int = 150, title: str = "") -> str:
    """Render the scene picked by the text hash as SVG markup.

    `title` only labels the image for screen readers; the drawing depends on
    `seed_text` alone.
    """
    seed = hash_string(seed_text)
    scene = SCENES[seed % _SCENE_COUNT]
    group = {"tag": "g", "children": scene(width / 2, height / 2, seed)}
    return serialize_svg([group], canvas_w=width, canvas_h=height, title=title)
