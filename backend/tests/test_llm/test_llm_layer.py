"""Tests for the LLM layer that run without network access."""

from __future__ import annotations

import asyncio

from swivl.config import settings
from swivl.llm import fallbacks
from swivl.llm.client import get_completion
from swivl.llm.model_router import get_model_for_task
from swivl.llm.parser import parse_ideas
from swivl.llm.prompts import get_all_templates, get_prompt_template
from tests.conftest import SAMPLE_COMPLETION


class TestParser:
    def test_numbered_blocks(self):
        ideas = parse_ideas(SAMPLE_COMPLETION)
        assert [i["title"] for i in ideas] == [
            "Daily Chord Victory",
            "Kitchen Percussion Jam",
            "Year of Melodies",
        ]
        assert ideas[0]["description"] == (
            "Learn one new chord each morning and play a song that uses it"
            " - Tiny daily wins create instant musical satisfaction"
        )

    def test_limit(self):
        assert len(parse_ideas(SAMPLE_COMPLETION, limit=2)) == 2

    def test_markdown_labels(self):
        text = "**TITLE:** Clay Moon\n**IDEA:** Sculpt the moon phases\n**HOOK:** Slow and calm"
        ideas = parse_ideas(text)
        assert ideas == [{"title": "Clay Moon", "description": "Sculpt the moon phases - Slow and calm"}]

    def test_missing_hook(self):
        ideas = parse_ideas("TITLE: Bare\nIDEA: Just the idea")
        assert ideas[0]["description"] == "Just the idea"

    def test_block_without_idea_dropped(self):
        text = "1. TITLE: Lonely\n2. TITLE: Whole\nIDEA: Complete thought\nHOOK: Fine"
        ideas = parse_ideas(text)
        assert [i["title"] for i in ideas] == ["Whole"]

    def test_json_fallback(self):
        text = '```json\n{"ideas": [{"title": "A", "description": "B"}]}\n```'
        assert parse_ideas(text) == [{"title": "A", "description": "B"}]

    def test_garbage(self):
        assert parse_ideas("I'm sorry, I can't help with that.") == []
        assert parse_ideas("") == []


class TestFallbacks:
    def test_text_fallbacks_mention_topic(self):
        ideas = fallbacks.text_fallbacks("Pottery", 3)
        assert len(ideas) == 3
        assert len({i["title"] for i in ideas}) == 3
        assert all("pottery" in i["description"] for i in ideas)

    def test_count_capped_by_templates(self):
        assert len(fallbacks.text_fallbacks("x", 50)) == 8
        assert len(fallbacks.image_fallbacks(50)) == 6

    def test_explore_fallbacks_reference_parent(self):
        ideas = fallbacks.explore_fallbacks("Kiln Diary", 2)
        assert len(ideas) == 2
        assert all('"Kiln Diary"' in i["description"] for i in ideas)


class TestRouting:
    def test_vision_tasks_use_mid_model(self):
        assert get_model_for_task("image") == settings.model_mid
        assert get_model_for_task("drawing") == settings.model_mid

    def test_text_tasks_use_cheap_model(self):
        assert get_model_for_task("text") == settings.model_cheap
        assert get_model_for_task("explore") == settings.model_cheap
        assert get_model_for_task("unknown") == settings.model_cheap

    def test_templates(self):
        templates = get_all_templates()
        assert set(templates) == {"text", "image", "drawing", "audio", "explore"}
        assert get_prompt_template("nope") == templates["text"]
        assert all("TITLE / IDEA / HOOK" in t for t in templates.values())


def test_completion_without_api_key(no_api_key):
    assert asyncio.run(get_completion("anything")) == ""
