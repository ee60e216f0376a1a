"""Pytest fixtures for Voice Agent tests."""
import os
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../..')))

from agents.voice_agent.config import settings
from agents.voice_agent.main import app, get_tts_client


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_tts_client():
    """
    Replace the ElevenLabs client to avoid real synthesis calls
    """
    fake = MagicMock()
    fake.output_format = "mp3_44100_128"
    fake.synthesize = AsyncMock(return_value=b"mock audio bytes")
    app.dependency_overrides[get_tts_client] = lambda: fake
    return fake


@pytest.fixture
def no_api_key():
    with patch.object(settings, "ELEVENLABS_API_KEY", None):
        yield
