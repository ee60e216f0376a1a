"""Endpoint tests for the Script Agent."""
from unittest.mock import patch

from agents.script_agent.config import settings
from agents.script_agent.gemini_client import ScriptClientError


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["agent"] == "Script Agent"
    assert "api_key_configured" in body


def test_generate_script_success(client, fake_script_client):
    response = client.post("/script-generation", json={"topic": "Why cats are amazing"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "script": "Did you know cats sleep 16 hours a day? Follow for more!",
        "topic": "Why cats are amazing",
        "model": "gemini-2.5-flash",
        "cost": "FREE",
    }
    fake_script_client.generate_script.assert_awaited_once_with("Why cats are amazing")


def test_generate_script_vendor_error_passed_through(client, fake_script_client):
    fake_script_client.generate_script.side_effect = ScriptClientError("Quota exceeded for model")

    response = client.post("/script-generation", json={"topic": "coffee"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Quota exceeded for model"}


def test_generate_script_missing_api_key(client, no_api_key):
    with patch("agents.script_agent.main.GeminiScriptClient") as client_cls:
        response = client.post("/script-generation", json={"topic": "coffee"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "API key not configured"}
    client_cls.assert_not_called()


def test_generate_script_blank_topic_rejected(client, fake_script_client):
    response = client.post("/script-generation", json={"topic": "   "})

    assert response.status_code == 422
    assert response.json()["success"] is False
    fake_script_client.generate_script.assert_not_called()


def test_generate_script_missing_topic_rejected(client, fake_script_client):
    response = client.post("/script-generation", json={})

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_dependency_builds_client_from_settings():
    from agents.script_agent.main import get_script_client

    with patch.object(settings, "GEMINI_API_KEY", "test-key"), \
            patch("agents.script_agent.main.GeminiScriptClient") as client_cls:
        get_script_client()

    client_cls.assert_called_once_with(api_key="test-key", model=settings.GEMINI_MODEL, timeout=settings.TIMEOUT)
