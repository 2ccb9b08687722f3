"""Tests for router endpoints (chat, health, capabilities, cache, sessions)."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from ingres_bot.app import create_app
from ingres_bot.config.constants import INVALID_INPUT_PROMPT, Intent
from ingres_bot.config.intent_patterns import INTENT_PATTERNS
from ingres_bot.config.settings import Settings


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


# ==========================================
#  HEALTH
# ==========================================


def test_health(client, settings):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == settings.app_version
    assert body["intent_types"] == len(Intent)
    assert body["active_requests"] == 0
    assert body["sessions"] == 0
    assert body["uptime_seconds"] >= 0


def test_health_reports_cache_and_sessions(client):
    client.post("/api/chat", json={"message": "Which areas are critical?", "session_id": "s1"})
    body = client.get("/api/health").json()
    assert body["cache_size"] == 1
    assert body["sessions"] == 1


# ==========================================
#  CHAT
# ==========================================


def test_chat_greeting(client):
    response = client.post("/api/chat", json={"message": "Hello"})
    assert response.status_code == 200
    body = response.json()
    assert body["intent"] == "greeting"
    assert body["status"] == "completed"
    assert body["message"].startswith("Namaste!")
    assert body["confidence"] >= 0.8
    assert body["session_id"] is None


def test_chat_empty_message_is_rejected_not_error(client):
    response = client.post("/api/chat", json={"message": "", "session_id": "s1"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "rejected"
    assert body["intent"] == "error"
    assert body["confidence"] == 0.0
    assert body["requires_clarification"] is True
    assert body["message"] == INVALID_INPUT_PROMPT


def test_chat_missing_message_is_rejected(client):
    response = client.post("/api/chat", json={})
    assert response.status_code == 200
    assert response.json()["status"] == "rejected"


def test_chat_location_answer_uses_dataset(client):
    body = client.post("/api/chat", json={"message": "Show me Punjab data", "session_id": "s1"}).json()
    assert body["intent"] == "query_location"
    assert body["location"] == "punjab"
    assert "Ajnala" in body["message"]


def test_chat_second_call_served_from_cache(client):
    payload = {"message": "Which areas are critical?", "session_id": "s1"}
    first = client.post("/api/chat", json=payload).json()
    second = client.post("/api/chat", json=payload).json()
    assert first["from_cache"] is False
    assert second["from_cache"] is True
    assert second["intent"] == "critical_areas"


def test_chat_unclear_query(client):
    body = client.post("/api/chat", json={"message": "xyzzy plugh", "session_id": "s1"}).json()
    assert body["intent"] == "unknown"
    assert body["requires_clarification"] is True
    assert body["clarification_question"]


def test_chat_internal_error(client):
    with patch.object(client.app.state.engine, "process_query", side_effect=RuntimeError("boom")):
        response = client.post("/api/chat", json={"message": "Hello"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


# ==========================================
#  CACHE
# ==========================================


def test_cache_stats(client):
    client.post("/api/chat", json={"message": "Which areas are critical?", "session_id": "s1"})
    response = client.get("/api/cache/stats")
    assert response.status_code == 200
    body = response.json()
    assert body["enabled"] is True
    assert body["stats"]["size"] == 1


def test_cache_clear(client):
    client.post("/api/chat", json={"message": "Which areas are critical?", "session_id": "s1"})
    response = client.delete("/api/cache")
    assert response.status_code == 200
    assert response.json()["status"] == "success"
    assert client.get("/api/cache/stats").json()["stats"]["size"] == 0


def test_cache_sweep(client):
    response = client.post("/api/cache/sweep")
    assert response.status_code == 200
    assert response.json() == {"removed": 0, "status": "success"}


def test_cache_endpoints_when_disabled():
    with TestClient(create_app(Settings(cache_enabled=False))) as client:
        assert client.get("/api/cache/stats").json()["enabled"] is False
        assert client.delete("/api/cache").json()["status"] == "skipped"
        assert client.post("/api/cache/sweep").json()["status"] == "skipped"


# ==========================================
#  SESSIONS
# ==========================================


def test_get_session(client):
    client.post("/api/chat", json={"message": "Show me Punjab data", "session_id": "s1"})
    response = client.get("/api/sessions/s1")
    assert response.status_code == 200
    body = response.json()
    assert body["query_count"] == 1
    assert body["last_intent"] == "query_location"
    assert body["last_location"] == "punjab"
    assert body["history"] == ["Show me Punjab data"]


def test_get_missing_session(client):
    assert client.get("/api/sessions/nope").status_code == 404


def test_delete_session(client):
    client.post("/api/chat", json={"message": "Hello", "session_id": "s1"})
    assert client.delete("/api/sessions/s1").status_code == 200
    assert client.delete("/api/sessions/s1").status_code == 404
    assert client.get("/api/sessions/s1").status_code == 404


def test_chat_has_data_flag(client):
    with_data = client.post("/api/chat", json={"message": "Show me Punjab data"}).json()
    without_data = client.post("/api/chat", json={"message": "Hello"}).json()
    rejected = client.post("/api/chat", json={"message": ""}).json()
    assert with_data["has_data"] is True
    assert without_data["has_data"] is False
    assert rejected["has_data"] is False


def test_capabilities(client):
    response = client.get("/api/capabilities")
    assert response.status_code == 200
    body = response.json()
    assert body["total_intents"] == len(Intent)
    assert body["pattern_count"] == len(INTENT_PATTERNS)
    assert body["states_with_data"] > 0
    assert "Historical trend analysis" in body["capabilities"]
