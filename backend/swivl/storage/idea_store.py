"""Idea store — JSONL card log + saved-collection file.

Cards are appended to ideas.jsonl as they are generated and the file is
rewritten on the rare mutations (save flag flips, deletes). The saved
collection keeps ids in save order plus canvas placements for each saved
idea. Everything is held in memory after the first load.
"""

from __future__ import annotations

import json
import logging
import random
import threading
from pathlib import Path

from swivl.models.idea import CanvasPlacement, IdeaCard

logger = logging.getLogger(__name__)

# Default data directory
_DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class IdeaStore:
    """File-backed idea persistence. Single get/set/list operations only."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir or _DEFAULT_DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.ideas_file = self.data_dir / "ideas.jsonl"
        self.saved_file = self.data_dir / "saved.json"
        self._ideas: dict[str, IdeaCard] | None = None
        self._saved: list[str] | None = None
        self._canvas: dict[str, CanvasPlacement] | None = None
        self._lock = threading.RLock()

    # -- ideas --------------------------------------------------------------

    def create_idea(self, card: IdeaCard) -> IdeaCard:
        """Append a new card."""
        with self._lock:
            ideas = self._load_ideas()
            ideas[card.id] = card
            with open(self.ideas_file, "a", encoding="utf-8") as f:
                f.write(card.model_dump_json() + "\n")
        logger.debug("Stored idea %s (%s)", card.id, card.source.value)
        return card

    def create_ideas(self, cards: list[IdeaCard]) -> list[IdeaCard]:
        return [self.create_idea(c) for c in cards]

    def get_idea(self, idea_id: str) -> IdeaCard | None:
        with self._lock:
            return self._load_ideas().get(idea_id)

    def list_ideas(self) -> list[IdeaCard]:
        with self._lock:
            return list(self._load_ideas().values())

    def random_ideas(self, count: int, exclude_ids: list[str] | None = None) -> list[IdeaCard]:
        """Uniform sample of stored ideas, skipping excluded ids."""
        excluded = set(exclude_ids or [])
        with self._lock:
            pool = [c for c in self._load_ideas().values() if c.id not in excluded]
        if count >= len(pool):
            random.shuffle(pool)
            return pool
        return random.sample(pool, count)

    def idea_chain(self, parent_idea_id: str) -> list[IdeaCard]:
        """Ideas explored directly from `parent_idea_id`, oldest first."""
        with self._lock:
            children = [c for c in self._load_ideas().values() if c.parent_idea_id == parent_idea_id]
        return sorted(children, key=lambda c: c.created_at)

    def delete_idea(self, idea_id: str) -> bool:
        with self._lock:
            ideas = self._load_ideas()
            if ideas.pop(idea_id, None) is None:
                return False
            self._save_ideas(ideas)
            saved = self._load_saved()
            if idea_id in saved:
                saved.remove(idea_id)
                self._load_canvas().pop(idea_id, None)
                self._save_saved()
        logger.info("Deleted idea %s", idea_id)
        return True

    # -- saved collection ---------------------------------------------------

    def save_idea(self, idea_id: str) -> IdeaCard | None:
        """Flag an idea as saved and add it to the collection. Idempotent."""
        with self._lock:
            ideas = self._load_ideas()
            card = ideas.get(idea_id)
            if card is None:
                return None
            saved = self._load_saved()
            if idea_id not in saved:
                saved.append(idea_id)
                self._save_saved()
            if not card.is_saved:
                card = card.model_copy(update={"is_saved": True})
                ideas[idea_id] = card
                self._save_ideas(ideas)
        return card

    def unsave_idea(self, idea_id: str) -> bool:
        with self._lock:
            saved = self._load_saved()
            if idea_id not in saved:
                return False
            saved.remove(idea_id)
            self._load_canvas().pop(idea_id, None)
            self._save_saved()

            ideas = self._load_ideas()
            card = ideas.get(idea_id)
            if card is not None and card.is_saved:
                ideas[idea_id] = card.model_copy(update={"is_saved": False})
                self._save_ideas(ideas)
        return True

    def saved_ideas(self) -> list[IdeaCard]:
        """Saved ideas in the order they were saved."""
        with self._lock:
            ideas = self._load_ideas()
            return [ideas[i] for i in self._load_saved() if i in ideas]

    def saved_ids(self) -> list[str]:
        with self._lock:
            return list(self._load_saved())

    # -- canvas -------------------------------------------------------------

    def place_on_canvas(self, idea_id: str, x: float, y: float, note: str = "") -> CanvasPlacement | None:
        """Position/annotate a saved idea. None if it is not in the collection."""
        with self._lock:
            if idea_id not in self._load_saved():
                return None
            placement = CanvasPlacement(idea_id=idea_id, x=x, y=y, note=note)
            self._load_canvas()[idea_id] = placement
            self._save_saved()
        return placement

    def canvas(self) -> list[CanvasPlacement]:
        with self._lock:
            canvas = self._load_canvas()
            return [canvas[i] for i in self._load_saved() if i in canvas]

    # -- files --------------------------------------------------------------

    def _load_ideas(self) -> dict[str, IdeaCard]:
        if self._ideas is not None:
            return self._ideas
        ideas: dict[str, IdeaCard] = {}
        if self.ideas_file.exists():
            with open(self.ideas_file, encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        card = IdeaCard.model_validate_json(line)
                        ideas[card.id] = card
        self._ideas = ideas
        return ideas

    def _save_ideas(self, ideas: dict[str, IdeaCard]) -> None:
        with open(self.ideas_file, "w", encoding="utf-8") as f:
            for card in ideas.values():
                f.write(card.model_dump_json() + "\n")

    def _load_saved(self) -> list[str]:
        if self._saved is None:
            self._read_saved_file()
        return self._saved  # type: ignore[return-value]

    def _load_canvas(self) -> dict[str, CanvasPlacement]:
        if self._canvas is None:
            self._read_saved_file()
        return self._canvas  # type: ignore[return-value]

    def _read_saved_file(self) -> None:
        data: dict = {}
        if self.saved_file.exists():
            with open(self.saved_file, encoding="utf-8") as f:
                data = json.load(f)
        self._saved = list(data.get("saved", []))
        self._canvas = {
            p["idea_id"]: CanvasPlacement(**p) for p in data.get("canvas", [])
        }

    def _save_saved(self) -> None:
        data = {
            "saved": self._load_saved(),
            "canvas": [p.model_dump() for p in self._load_canvas().values()],
        }
        with open(self.saved_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


# Singleton
_store: IdeaStore | None = None


def get_idea_store() -> IdeaStore:
    """Get or create the global IdeaStore singleton."""
    global _store
    if _store is None:
        from swivl.config import settings

        data_dir = Path(settings.swivl_data_dir) if settings.swivl_data_dir else None
        _store = IdeaStore(data_dir)
    return _store
