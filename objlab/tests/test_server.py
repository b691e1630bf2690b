"""Tests for server.py"""

import json

import pytest
from fastapi.testclient import TestClient

from objlab import demo, server
from objlab.config import VERSION


@pytest.fixture
def client():
    return TestClient(server.app)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == VERSION


def test_demo_entries(client):
    resp = client.get("/api/demo")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    titles = [e["title"] for e in body["entries"]]
    assert "Average Score" in titles
    assert body["entries"][-1]["event_type"] == "DEMO_COMPLETE"
    assert body["entry_count"] == len([e for e in body["entries"] if e["event_type"] == "ENTRY"])


def test_demo_error_reported_once(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(demo, "average", broken)
    body = client.get("/api/demo").json()
    assert body["status"] == "error"
    failures = [e for e in body["entries"] if e["title"] == "Demo Failed"]
    assert len(failures) == 1
    assert failures[0]["event_type"] == "DEMO_ERROR"
    assert failures[0]["content"] == "RuntimeError: boom"
    assert body["entries"][-1] == failures[0]
    assert all(e["event_type"] != "DEMO_COMPLETE" for e in body["entries"])


def test_stream(client):
    resp = client.get("/api/demo/stream")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    frames = [f for f in resp.text.split("\n\n") if f.startswith("data: ")]
    payloads = [json.loads(f[len("data: "):]) for f in frames]
    assert payloads[0]["event_type"] == "SECTION_START"
    assert payloads[-1] == {"event_type": "STREAM_END"}
