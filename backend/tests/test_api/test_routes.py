"""Tests for API endpoints (no LLM calls — fallback ideas only)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from swivl.config import Settings
from swivl.dependencies import get_sessions, get_settings, get_store
from swivl.main import app
from swivl.services.sessions import SessionRegistry


@pytest.fixture
def client(store, no_api_key):
    registry = SessionRegistry()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_sessions] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


def _generate(client, prompt="pottery", count=3, **extra):
    response = client.post("/api/ideas/generate", json={"prompt": prompt, "count": count, **extra})
    assert response.status_code == 200
    return response.json()["ideas"]


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["llm_configured"] is False


def test_health_reads_injected_settings(client):
    app.dependency_overrides[get_settings] = lambda: Settings(anthropic_api_key="sk-test")
    assert client.get("/api/health").json()["llm_configured"] is True


def test_prompts(client):
    data = client.get("/api/prompts").json()
    assert "explore" in data


class TestBlend:
    def test_move_clamps(self, client):
        data = client.post("/api/blend", json={"x": 50, "y": 95}).json()
        assert (data["x"], data["y"]) == (50, 80)
        assert sum(data["weights"].values()) == pytest.approx(1.0)

    def test_preset(self, client):
        data = client.post("/api/blend/preset", json={"preset": "wild"}).json()
        assert data["description"] == "Experimental & Surreal"
        assert (data["x"], data["y"]) == (50, 20)
        assert data["weights"]["wild"] > data["weights"]["deep"]

    def test_unknown_preset(self, client):
        response = client.post("/api/blend/preset", json={"preset": "chaos"})
        assert response.status_code == 400

    def test_session_blend(self, client):
        session_id = client.post("/api/sessions").json()["session_id"]
        client.post("/api/blend/preset", json={"preset": "deep", "session_id": session_id})
        before = client.post("/api/sessions").json()["weights"]
        ideas = _generate(client, session_id=session_id)
        assert ideas[0]["metadata"]["blend"] != before

    def test_unknown_session(self, client):
        response = client.post("/api/blend", json={"x": 50, "y": 50, "session_id": "nope"})
        assert response.status_code == 404

    def test_prompt_preview(self, client):
        data = client.post("/api/prompt/preview", json={"subject": "pottery", "x": 50, "y": 20, "count": 4}).json()
        assert '"pottery"' in data["prompt"]
        assert "Generate 4 compelling" in data["prompt"]


class TestIdeas:
    def test_generate_text(self, client, store):
        ideas = _generate(client)
        assert len(ideas) == 3
        assert ideas[0]["source"] == "text"
        assert store.get_idea(ideas[0]["id"]) is not None

    def test_generate_requires_prompt(self, client):
        response = client.post("/api/ideas/generate", json={"prompt": "  "})
        assert response.status_code == 400

    def test_image_requires_image(self, client):
        response = client.post("/api/ideas/generate", json={"source": "image"})
        assert response.status_code == 400

    def test_generate_image(self, client):
        response = client.post(
            "/api/ideas/generate", json={"source": "drawing", "image_base64": "aGk=", "count": 2}
        )
        assert response.status_code == 200
        assert response.json()["count"] == 2

    def test_get_and_404(self, client):
        idea = _generate(client, count=1)[0]
        assert client.get(f"/api/ideas/{idea['id']}").json()["title"] == idea["title"]
        assert client.get("/api/ideas/missing").status_code == 404

    def test_save_flow(self, client):
        idea = _generate(client, count=1)[0]
        saved = client.post(f"/api/ideas/{idea['id']}/save").json()
        assert saved["is_saved"] is True

        collection = client.get("/api/ideas/saved").json()
        assert [i["id"] for i in collection["ideas"]] == [idea["id"]]

        placement = client.put(f"/api/ideas/{idea['id']}/canvas", json={"x": 10, "y": 20, "note": "first"}).json()
        assert placement["note"] == "first"
        assert client.get("/api/ideas/saved").json()["canvas"][0]["x"] == 10

        assert client.delete(f"/api/ideas/{idea['id']}/save").json()["status"] == "removed"
        assert client.get("/api/ideas/saved").json()["ideas"] == []

    def test_canvas_requires_saved(self, client):
        idea = _generate(client, count=1)[0]
        response = client.put(f"/api/ideas/{idea['id']}/canvas", json={"x": 1, "y": 1})
        assert response.status_code == 400

    def test_save_unknown(self, client):
        assert client.post("/api/ideas/missing/save").status_code == 404

    def test_delete(self, client):
        idea = _generate(client, count=1)[0]
        assert client.delete(f"/api/ideas/{idea['id']}").status_code == 200
        assert client.delete(f"/api/ideas/{idea['id']}").status_code == 404

    def test_random_excludes(self, client):
        ideas = _generate(client, count=3)
        exclude = ",".join(i["id"] for i in ideas[:2])
        data = client.get(f"/api/ideas/random?count=5&exclude={exclude}").json()
        assert [i["id"] for i in data["ideas"]] == [ideas[2]["id"]]

    def test_explore_and_chain(self, client):
        parent = _generate(client, count=1)[0]
        children = client.post(f"/api/ideas/{parent['id']}/explore", json={"count": 2}).json()["ideas"]
        assert len(children) == 2
        assert all(c["parent_idea_id"] == parent["id"] for c in children)
        chain = client.get(f"/api/ideas/{parent['id']}/chain").json()
        assert chain["count"] == 2

    def test_explore_without_body(self, client):
        parent = _generate(client, count=1)[0]
        response = client.post(f"/api/ideas/{parent['id']}/explore")
        assert response.status_code == 200
        assert response.json()["count"] == 3

    def test_illustration(self, client):
        idea = _generate(client, count=1)[0]
        response = client.get(f"/api/ideas/{idea['id']}/illustration")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")
        assert response.text == client.get(f"/api/ideas/{idea['id']}/illustration").text


class TestSessions:
    def _session_with_cards(self, client, count=5) -> tuple[str, list[dict]]:
        session_id = client.post("/api/sessions").json()["session_id"]
        ideas = _generate(client, count=count, session_id=session_id)
        return session_id, ideas

    def test_stack(self, client):
        session_id, ideas = self._session_with_cards(client)
        stack = client.get(f"/api/sessions/{session_id}/stack").json()
        assert [c["id"] for c in stack["visible"]] == [i["id"] for i in ideas[:3]]
        assert stack["remaining"] == 5
        assert stack["needs_refill"] is False

    def test_unknown_session(self, client):
        assert client.get("/api/sessions/nope/stack").status_code == 404
        assert client.post("/api/sessions/nope/swipe", json={"direction": "left"}).status_code == 404

    def test_swipe_right_saves(self, client, store):
        session_id, ideas = self._session_with_cards(client)
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "right"}).json()
        assert data["action"] == "save"
        assert data["card"]["id"] == ideas[0]["id"]
        assert data["card"]["is_saved"] is True
        assert store.saved_ids() == [ideas[0]["id"]]

    def test_swipe_left_dismisses(self, client, store):
        session_id, ideas = self._session_with_cards(client)
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"}).json()
        assert data["action"] == "dismiss"
        assert store.saved_ids() == []
        stack = client.get(f"/api/sessions/{session_id}/stack").json()
        assert stack["visible"][0]["id"] == ideas[1]["id"]

    def test_swipe_up_saves_and_explores(self, client, store):
        session_id, ideas = self._session_with_cards(client)
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "up"}).json()
        assert data["action"] == "explore"
        assert len(data["explored"]) == 1
        assert data["explored"][0]["parent_idea_id"] == ideas[0]["id"]
        assert store.saved_ids() == [ideas[0]["id"]]
        assert data["remaining"] == 5

    def test_swipe_down_is_noop(self, client):
        session_id, _ = self._session_with_cards(client)
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "down"}).json()
        assert data["action"] == "none"
        assert data["remaining"] == 5

    def test_gesture_path(self, client):
        session_id, ideas = self._session_with_cards(client)
        samples = [{"x": 100, "y": 100, "t": 0}, {"x": 120, "y": 100, "t": 40}, {"x": 30, "y": 104, "t": 120}]
        data = client.post(f"/api/sessions/{session_id}/gesture", json={"samples": samples}).json()
        assert data["direction"] == "left"
        assert data["action"] == "dismiss"
        assert data["card"]["id"] == ideas[0]["id"]

    def test_refill_from_store(self, client):
        # Ideas outside the session's stack are the refill pool
        _generate(client, count=3)
        session_id, _ = self._session_with_cards(client, count=3)
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"}).json()
        assert data["refilled"] == 3
        assert data["remaining"] == 5

    def test_swipes_compact_the_stack(self, client):
        session_id, ideas = self._session_with_cards(client, count=3)
        controller = app.dependency_overrides[get_sessions]().get(session_id)

        client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"})
        assert controller.queue.cursor == 0
        assert len(controller.queue) == 2

        # The dismissed card is gone from the stack but never comes back as a refill
        data = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"}).json()
        assert data["refilled"] == 0
        assert data["remaining"] == 1
        assert ideas[0]["id"] in controller.queue.ids()

    def test_close_session(self, client):
        session_id = client.post("/api/sessions").json()["session_id"]
        assert client.delete(f"/api/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/sessions/{session_id}/stack").status_code == 404


def test_generate_uses_configured_default_count(client):
    response = client.post("/api/ideas/generate", json={"prompt": "pottery"})
    assert response.json()["count"] == 5
