"""Pytest fixtures for orchestrator tests."""
import asyncio
import os
import sys
from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from orchestrator.main import app
from orchestrator.models import GenerationRequest, RenderRequest, StepResult
from orchestrator.render import RenderBoundary


class FakeAgentClient:
    """
    In-memory agent client. Each step answers with the configured StepResult
    and every call is recorded as ``(method, args)``.
    """

    def __init__(
        self,
        results: Optional[Dict[str, StepResult]] = None,
        gates: Optional[Dict[str, asyncio.Event]] = None,
        exit_gate: Optional[asyncio.Event] = None,
    ):
        self.results = {
            "generate_script": StepResult.success("Cats are amazing. Follow for more!"),
            "generate_voice": StepResult.success("SUQzBAAAAAAA"),
            "search_images": StepResult.success(["https://img/1", "https://img/2"]),
        }
        self.results.update(results or {})
        self.gates = gates or {}
        self.exit_gate = exit_gate
        self.calls: List[Tuple[str, tuple]] = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        if self.exit_gate is not None:
            await self.exit_gate.wait()
        self.closed = True

    async def _answer(self, method: str, *args) -> StepResult:
        self.calls.append((method, args))
        gate = self.gates.get(method)
        if gate is not None:
            await gate.wait()
        return self.results[method]

    async def generate_script(self, topic):
        return await self._answer("generate_script", topic)

    async def generate_voice(self, script, voice_id=None):
        return await self._answer("generate_voice", script, voice_id)

    async def search_images(self, query, count, orientation):
        return await self._answer("search_images", query, count, orientation)

    @property
    def methods_called(self) -> List[str]:
        return [name for name, _ in self.calls]


class FakeRenderBoundary(RenderBoundary):
    def __init__(self, result: Optional[StepResult] = None, gate: Optional[asyncio.Event] = None):
        self.result = result or StepResult.success("https://cdn.example.com/videos/final.mp4")
        self.gate = gate
        self.requests: List[RenderRequest] = []

    async def render(self, request: RenderRequest) -> StepResult:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        return self.result


@pytest.fixture
def fake_client():
    return FakeAgentClient()


@pytest.fixture
def fake_render():
    return FakeRenderBoundary()


@pytest.fixture
def request_cats():
    return GenerationRequest(topic="Why cats are amazing", image_count=4, aspect_ratio="9:16")


@pytest.fixture
def test_client():
    """Create a TestClient for the orchestrator FastAPI app."""
    return TestClient(app)


@pytest.fixture
def make_client():
    """Factory for FakeAgentClient instances with custom results or gates."""
    return FakeAgentClient


@pytest.fixture
def make_render():
    return FakeRenderBoundary
