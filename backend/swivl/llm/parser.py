"""Parse numbered TITLE / IDEA / HOOK blocks out of a model response."""

from __future__ import annotations

import json
import logging
import re

logger = logging.getLogger(__name__)

_FIELD_RE = re.compile(
    r"^\s*(?:\d+[.)]\s*)?\**\s*(TITLE|IDEA|HOOK)\s*\**\s*:\s*\**\s*(.*?)\s*\**\s*$",
    re.IGNORECASE,
)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def parse_ideas(text: str, limit: int | None = None) -> list[dict[str, str]]:
    """Return [{"title", "description"}] pairs. Description = IDEA + " - " + HOOK.

    Falls back to a JSON {"ideas": [...]} payload if no labelled blocks are
    found. Blocks missing a TITLE or IDEA are dropped.
    """
    ideas = _parse_labelled(text)
    if not ideas:
        ideas = _parse_json(text)
    if limit is not None:
        ideas = ideas[:limit]
    logger.debug("Parsed %d ideas from %d chars", len(ideas), len(text))
    return ideas


def _parse_labelled(text: str) -> list[dict[str, str]]:
    blocks: list[dict[str, str]] = []
    current: dict[str, str] = {}

    for line in text.splitlines():
        m = _FIELD_RE.match(line)
        if not m:
            continue
        label = m.group(1).upper()
        value = m.group(2).strip()
        if label == "TITLE" and current:
            blocks.append(current)
            current = {}
        current[label] = value
    if current:
        blocks.append(current)

    ideas = []
    for block in blocks:
        title = block.get("TITLE", "")
        idea = block.get("IDEA", "")
        if not title or not idea:
            continue
        hook = block.get("HOOK", "")
        description = f"{idea} - {hook}" if hook else idea
        ideas.append({"title": title, "description": description})
    return ideas


def _parse_json(text: str) -> list[dict[str, str]]:
    m = _FENCE_RE.search(text)
    raw = m.group(1) if m else text
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return []

    items = data.get("ideas", []) if isinstance(data, dict) else data
    if not isinstance(items, list):
        return []
    ideas = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = str(item.get("title", "")).strip()
        description = str(item.get("description", "")).strip()
        if title and description:
            ideas.append({"title": title, "description": description})
    return ideas
