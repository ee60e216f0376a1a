"""Pytest fixtures for Script Agent tests."""
import os
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../..')))

from agents.script_agent.config import settings
from agents.script_agent.main import app, get_script_client


@pytest.fixture
def client():
    """TestClient with dependency overrides cleared after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fake_script_client():
    """Stand-in for GeminiScriptClient installed through a dependency override."""
    fake = MagicMock()
    fake.model = "gemini-2.5-flash"
    fake.generate_script = AsyncMock(return_value="Did you know cats sleep 16 hours a day? Follow for more!")
    app.dependency_overrides[get_script_client] = lambda: fake
    return fake


@pytest.fixture
def no_api_key():
    with patch.object(settings, "GEMINI_API_KEY", None):
        yield


@pytest.fixture
def genai_client():
    """A fake google-genai client whose async generate_content is mockable."""
    fake = MagicMock()
    fake.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="  A great script.  "))
    return fake
