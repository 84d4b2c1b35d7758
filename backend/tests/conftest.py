"""Shared test fixtures."""

from __future__ import annotations

import pytest

from swivl.models.idea import IdeaCard, IdeaSource
from swivl.storage.idea_store import IdeaStore


# A model response in the requested numbered format
SAMPLE_COMPLETION = """1. TITLE: Daily Chord Victory
IDEA: Learn one new chord each morning and play a song that uses it
HOOK: Tiny daily wins create instant musical satisfaction

2. TITLE: Kitchen Percussion Jam
IDEA: Record a rhythm using only pots, pans and wooden spoons
HOOK: Turns an ordinary room into an instrument

3. TITLE: Year of Melodies
IDEA: Compose one short melody a week and arrange them into an album in December
HOOK: Fifty-two small pieces add up to something you can be proud of
"""


def make_card(title: str = "Card", **kwargs) -> IdeaCard:
    kwargs.setdefault("description", f"{title} description")
    return IdeaCard(title=title, **kwargs)


def make_cards(*titles: str) -> list[IdeaCard]:
    return [make_card(t) for t in titles]


@pytest.fixture
def store(tmp_path) -> IdeaStore:
    return IdeaStore(tmp_path / "data")


@pytest.fixture
def stored_cards(store) -> list[IdeaCard]:
    cards = [
        make_card("Moonlit Clay", source=IdeaSource.TEXT, source_content="pottery"),
        make_card("Five Minute Glaze", source=IdeaSource.TEXT, source_content="pottery"),
        make_card("Kiln Diary", source=IdeaSource.TEXT, source_content="pottery"),
        make_card("Studio Map", source=IdeaSource.IMAGE),
    ]
    return store.create_ideas(cards)


@pytest.fixture
def no_api_key(monkeypatch):
    """Force the LLM client into its unconfigured path."""
    from swivl.config import settings

    monkeypatch.setattr(settings, "anthropic_api_key", "")
