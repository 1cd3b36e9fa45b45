"""Tests for the local HTTP message channel."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from mailalias.dispatcher import Dispatcher
from mailalias.server import create_app


@pytest.fixture
def api(config, store, session, client):
    return TestClient(create_app(Dispatcher(config, store, session, client)))


def test_health_reports_lock_state_without_key(api, store):
    asyncio.run(store.set("locked", True))
    api.post("/message", json={"type": "SET_SESSION_KEY", "apiKey": "secret"})

    resp = api.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["locked"] is True
    assert body["unlocked"] is True
    assert "secret" not in resp.text


def test_message_roundtrip(api, store):
    asyncio.run(store.set("apiKey", "k"))
    resp = api.post("/message", json={"type": "GET_DOMAINS"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "items": ["example.com", "mail.test"]}


def test_failures_are_envelopes(api):
    resp = api.post("/message", json={"type": "LIST_ALIASES"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": False, "error": "API-Key not set."}


def test_non_json_body(api):
    resp = api.post("/message", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.json() == {"ok": False, "error": "Invalid message"}
