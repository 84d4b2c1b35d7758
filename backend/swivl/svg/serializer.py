"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 300,
    canvas_h: float = 150,
    title: str = "",
) -> str:
    """Generate SVG markup. Element dicts carry a "tag" key, optional
    "children" (nested element dicts) and attributes for everything else."""
    lines = [
        f'<svg viewBox="0 0 {canvas_w} {canvas_h}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        _write_element(elem, lines, depth=1)

    lines.append("</svg>")
    return "\n".join(lines)


def _write_element(elem: dict[str, Any], lines: list[str], depth: int) -> None:
    indent = "  " * depth
    tag = elem.get("tag", "path")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
    attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
    opening = f"{tag} {attr_str}" if attr_str else tag

    children = elem.get("children") or []
    if not children:
        lines.append(f"{indent}<{opening} />")
        return

    lines.append(f"{indent}<{opening}>")
    for child in children:
        _write_element(child, lines, depth + 1)
    lines.append(f"{indent}</{tag}>")
