"""Pytest fixtures for Image Agent tests."""
import os
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../..')))

from agents.image_agent.config import settings
from agents.image_agent.main import app, get_unsplash_client


def _unsplash_photo(photo_id: str, **overrides):
    """One photo as returned by the Unsplash search endpoint."""
    photo = {
        "id": photo_id,
        "width": 4000,
        "height": 6000,
        "description": f"Description of {photo_id}",
        "alt_description": f"Alt of {photo_id}",
        "urls": {
            "regular": f"https://images.unsplash.com/{photo_id}?w=1080",
            "full": f"https://images.unsplash.com/{photo_id}",
            "thumb": f"https://images.unsplash.com/{photo_id}?w=200",
        },
        "links": {"download": f"https://unsplash.com/photos/{photo_id}/download"},
        "user": {"name": "Jane Doe", "links": {"html": "https://unsplash.com/@jane"}},
        "tags": [{"title": "cat"}, {"title": "pet"}],
    }
    photo.update(overrides)
    return photo


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_unsplash_client():
    fake = MagicMock()
    fake.search = AsyncMock()
    app.dependency_overrides[get_unsplash_client] = lambda: fake
    return fake


@pytest.fixture
def with_api_key():
    with patch.object(settings, "UNSPLASH_API_KEY", "unsplash-test"):
        yield


@pytest.fixture
def no_api_key():
    with patch.object(settings, "UNSPLASH_API_KEY", None):
        yield


@pytest.fixture
def unsplash_photo():
    return _unsplash_photo
