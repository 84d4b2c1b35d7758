"""Tests for deterministic sketch illustrations."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from swivl.engine.illustration import (
    SCENES,
    generate_illustration,
    hash_string,
    scene_index,
    seeded_random,
    sketchy_circle,
    sketchy_line,
    sketchy_offset,
)

_SVG_NS = "{http://www.w3.org/2000/svg}"


class TestHash:
    def test_known_values(self):
        assert hash_string("") == 0
        assert hash_string("a") == 97
        assert hash_string("ab") == 97 * 31 + 98

    def test_wraps_to_32_bits(self):
        h = hash_string("a fairly long idea title that overflows thirty two bits")
        assert 0 <= h <= 2 ** 31

    def test_utf16_code_units(self):
        # One astral character = two UTF-16 code units (surrogate pair)
        assert hash_string("\U0001F600") == 0xD83D * 31 + 0xDE00


class TestSeededRandom:
    def test_range(self):
        for i in range(50):
            v = seeded_random(12345, i)
            assert 0 <= v < 1

    def test_deterministic(self):
        assert seeded_random(7, 3) == seeded_random(7, 3)

    def test_offset_spread(self):
        for i in range(20):
            assert -1.5 <= sketchy_offset(99, i, 3) < 1.5


class TestElements:
    def test_line_is_quadratic_path(self):
        el = sketchy_line(0, 0, 10, 10, seed=5)
        assert el["tag"] == "path"
        assert el["d"].startswith("M ")
        assert " Q " in el["d"]

    def test_circle_is_polygon(self):
        el = sketchy_circle(50, 50, 10, seed=5)
        assert len(el["points"].split()) == 8


class TestGenerateIllustration:
    def test_same_text_same_svg(self):
        assert generate_illustration("Kiln Diary") == generate_illustration("Kiln Diary")

    def test_different_text_different_svg(self):
        assert generate_illustration("same text") != generate_illustration("different text")

    def test_batch_of_texts_all_distinct(self):
        texts = [f"idea number {i}" for i in range(200)]
        assert len({generate_illustration(t) for t in texts}) == len(texts)

    def test_title_labels_image(self):
        root = ET.fromstring(generate_illustration("Kiln Diary", title="Kiln & Diary"))
        assert root.find(f"{_SVG_NS}title").text == "Kiln & Diary"

    def test_title_does_not_change_drawing(self):
        plain = generate_illustration("Kiln Diary")
        titled = generate_illustration("Kiln Diary", title="Kiln Diary")
        assert "<title>" not in plain
        assert titled.replace("  <title>Kiln Diary</title>\n", "") == plain

    def test_well_formed_svg(self):
        root = ET.fromstring(generate_illustration("Moonlit Clay"))
        assert root.tag == f"{_SVG_NS}svg"
        assert root.get("viewBox") == "0 0 300 150"

    def test_custom_size(self):
        root = ET.fromstring(generate_illustration("x", width=200, height=100))
        assert root.get("viewBox") == "0 0 200 100"

    @pytest.mark.parametrize("text", ["", "a", "pottery", "Daily Chord Victory", "été"])
    def test_every_scene_renders(self, text):
        svg = generate_illustration(text)
        assert "<g>" in svg
        assert 0 <= scene_index(text) < len(SCENES)

    def test_all_six_scenes_reachable(self):
        seen = {scene_index(f"idea {i}") for i in range(200)}
        assert seen == set(range(6))
