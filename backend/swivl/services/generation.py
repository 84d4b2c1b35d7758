"""Idea generation — blend prompt → LLM → parsed cards, with template fallback."""

from __future__ import annotations

import logging

from swivl.engine.blend import BlendWeights
from swivl.engine.prompt import compile_explore_prompt, compile_prompt
from swivl.llm import fallbacks
from swivl.llm.client import get_completion
from swivl.llm.parser import parse_ideas
from swivl.models.idea import IdeaCard, IdeaSource
from swivl.storage.idea_store import IdeaStore

logger = logging.getLogger(__name__)

# Sources that carry an image the model has to look at
_VISUAL_SOURCES = {IdeaSource.IMAGE, IdeaSource.DRAWING}

_IMAGE_SUBJECT = "the uploaded image"
_DRAWING_SUBJECT = "the attached sketch"


async def generate_ideas(
    prompt: str,
    source: IdeaSource,
    weights: BlendWeights,
    store: IdeaStore,
    count: int = 5,
    image_base64: str | None = None,
    media_type: str = "image/jpeg",
) -> list[IdeaCard]:
    """Generate `count` cards for a prompt and persist them.

    Image and drawing sources need `image_base64`; the text prompt is then
    optional and only sharpens the subject. Falls back to templates when the
    model is unconfigured, errors, or returns nothing parseable.
    """
    subject = prompt.strip() or _default_subject(source)
    compiled = compile_prompt(subject, weights, count)

    raw: list[dict[str, str]] = []
    try:
        text = await get_completion(
            compiled,
            task=source.value,
            image_base64=image_base64 if source in _VISUAL_SOURCES else None,
            media_type=media_type,
        )
        raw = parse_ideas(text, limit=count)
    except Exception as e:
        logger.warning("Idea generation failed for %s prompt: %s", source.value, e)

    metadata = {"type": "generated", "blend": weights.as_dict()}
    if not raw:
        raw = _fallbacks_for(source, subject, count)
        metadata = {"type": "fallback", "blend": weights.as_dict()}
        logger.info("Using %d fallback ideas for %s prompt", len(raw), source.value)

    cards = [
        IdeaCard(
            title=item["title"],
            description=item["description"],
            source=source,
            source_content=prompt or None,
            metadata=dict(metadata),
        )
        for item in raw
    ]
    return store.create_ideas(cards)


async def explore_idea(
    parent: IdeaCard,
    store: IdeaStore,
    count: int = 3,
) -> list[IdeaCard]:
    """Generate related cards for `parent`, linked back through parent_idea_id."""
    compiled = compile_explore_prompt(parent, count)

    raw: list[dict[str, str]] = []
    try:
        text = await get_completion(compiled, task="explore")
        raw = parse_ideas(text, limit=count)
    except Exception as e:
        logger.warning("Exploration of %s failed: %s", parent.id, e)

    kind = "exploration"
    if not raw:
        raw = fallbacks.explore_fallbacks(parent.title, count)
        kind = "fallback"

    cards = [
        IdeaCard(
            title=item["title"],
            description=item["description"],
            source=IdeaSource.EXPLORATION,
            source_content=parent.title,
            parent_idea_id=parent.id,
            metadata={"type": kind, "parent_title": parent.title},
        )
        for item in raw
    ]
    logger.info("Explored %s into %d ideas", parent.id, len(cards))
    return store.create_ideas(cards)


def refill_ideas(store: IdeaStore, count: int, exclude_ids: list[str]) -> list[IdeaCard]:
    """Random stored cards for topping up a stack, skipping what it already holds."""
    return store.random_ideas(count, exclude_ids)


def _default_subject(source: IdeaSource) -> str:
    if source is IdeaSource.IMAGE:
        return _IMAGE_SUBJECT
    if source is IdeaSource.DRAWING:
        return _DRAWING_SUBJECT
    return ""


def _fallbacks_for(source: IdeaSource, subject: str, count: int) -> list[dict[str, str]]:
    if source in _VISUAL_SOURCES:
        return fallbacks.image_fallbacks(count)
    return fallbacks.text_fallbacks(subject, count)
