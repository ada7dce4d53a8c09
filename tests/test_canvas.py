"""Tests for the Canvas to-do client."""

import pytest
import requests

from city_sim.tasks import canvas
from city_sim.tasks.canvas import CanvasClient, CanvasError, parse_todo_item, top_tasks


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


TODO = [
    {
        "context_name": "CSE 101",
        "assignment": {"name": "Essay", "due_at": "2026-10-21T06:59:00Z", "points_possible": 20},
    },
    {"context_name": "MATH 19A", "quiz": {"title": "Quiz 3"}},
    {"context_name": "PHYS 5", "assignment": {}},
    {"context_name": "HIST 10", "assignment": {"name": "Reading", "points_possible": 5}},
]


class TestParsing:
    def test_assignment(self):
        task = parse_todo_item(TODO[0])
        assert task.name == "Essay"
        assert task.due == "2026-10-21"
        assert task.points == 20
        assert task.course == "CSE 101"

    def test_quiz_fallback(self):
        task = parse_todo_item(TODO[1])
        assert task.name == "Quiz 3"
        assert task.due == "No Date"
        assert task.points == 0

    def test_unnamed(self):
        assert parse_todo_item(TODO[2]).name == "Unnamed Task"

    def test_top_three(self):
        tasks = [parse_todo_item(item) for item in TODO]
        assert [t.name for t in top_tasks(tasks)] == ["Essay", "Quiz 3", "Unnamed Task"]


class TestClient:
    def test_fetch_sends_bearer_token(self, monkeypatch):
        calls = {}

        def fake_get(url, headers=None, timeout=None):
            calls.update(url=url, headers=headers, timeout=timeout)
            return FakeResponse(TODO)

        monkeypatch.setattr(canvas.requests, "get", fake_get)
        tasks = CanvasClient("secret", base_url="https://canvas.example.edu/", timeout=5).fetch_todo()
        assert len(tasks) == 4
        assert calls["url"] == "https://canvas.example.edu/api/v1/todo"
        assert calls["headers"]["Authorization"] == "Bearer secret"
        assert calls["timeout"] == 5

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(canvas.requests, "get", lambda *a, **kw: FakeResponse([], status_code=401))
        with pytest.raises(CanvasError):
            CanvasClient("bad").fetch_todo()

    def test_network_error(self, monkeypatch):
        def boom(*args, **kwargs):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(canvas.requests, "get", boom)
        with pytest.raises(CanvasError):
            CanvasClient("token").fetch_todo()

    def test_bad_json(self, monkeypatch):
        monkeypatch.setattr(canvas.requests, "get", lambda *a, **kw: FakeResponse(ValueError("nope")))
        with pytest.raises(CanvasError):
            CanvasClient("token").fetch_todo()

    def test_non_list_payload(self, monkeypatch):
        monkeypatch.setattr(canvas.requests, "get", lambda *a, **kw: FakeResponse({"errors": []}))
        with pytest.raises(CanvasError):
            CanvasClient("token").fetch_todo()
