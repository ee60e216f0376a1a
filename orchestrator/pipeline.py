# orchestrator/pipeline.py

"""Sequences the script, voice, image and render steps of one video run."""
import logging
from typing import Any, AsyncContextManager, Callable, Optional

from orchestrator import state as transitions
from orchestrator.client import AgentClient
from orchestrator.config import settings
from orchestrator.models import GenerationRequest, RenderRequest, StepResult
from orchestrator.render import HttpRenderBoundary, RenderBoundary
from orchestrator.state import (
    IMAGE_STEP,
    RENDER_STEP,
    SCRIPT_STEP,
    VOICE_STEP,
    Phase,
    PipelineState,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[PipelineState], Any]


class InvalidTopicError(ValueError):
    """The topic is empty or whitespace only."""


class InvalidTransitionError(RuntimeError):
    """The requested operation is not allowed from the current phase."""


def default_client_factory() -> AgentClient:
    return AgentClient.from_settings(settings)


class Orchestrator:
    """
    Owns the PipelineState of one user session and drives runs through it.

    Steps run strictly one after another and the first failure ends the run.
    ``reset()`` abandons whatever run is active: results that arrive for an
    abandoned run are dropped and its remaining steps never start.

    Args:
        client_factory: returns a fresh agent client (an async context
            manager) for each run.
        render_boundary: performs the final render step.
        preview_before_render: stop in the preview phase after images and
            wait for ``render()``.
        on_update: called with every new state.
    """

    def __init__(
        self,
        client_factory: Callable[[], AsyncContextManager[Any]] = default_client_factory,
        render_boundary: Optional[RenderBoundary] = None,
        preview_before_render: bool = settings.PREVIEW_BEFORE_RENDER,
        on_update: Optional[StateListener] = None,
    ):
        self._client_factory = client_factory
        self._render_boundary = render_boundary or HttpRenderBoundary.from_settings(settings)
        self.preview_before_render = preview_before_render
        self.on_update = on_update
        self._state = transitions.initial_state()
        self._request: Optional[GenerationRequest] = None
        self._run_token = 0
        self._rendering_token: Optional[int] = None

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def request(self) -> Optional[GenerationRequest]:
        return self._request

    def _commit(self, token: int, new_state: PipelineState) -> bool:
        """Publish ``new_state`` if ``token`` still names the active run."""
        if token != self._run_token:
            logger.info(f"Discarding result of abandoned run {token} (active run is {self._run_token})")
            return False
        self._state = new_state
        self._notify(new_state)
        return True

    def _notify(self, new_state: PipelineState) -> None:
        if self.on_update is None:
            return
        try:
            self.on_update(new_state)
        except Exception:
            logger.exception("State listener raised; continuing run")

    def _settle(self, token: int, step: str, result: StepResult, on_success: Callable[[PipelineState], PipelineState]) -> bool:
        """Apply one step's result. True means the run may continue."""
        if result.ok:
            logger.info(f"Step '{step}' succeeded in {result.latency_ms}ms")
            return self._commit(token, on_success(self._state))
        logger.warning(f"Step '{step}' failed after {result.latency_ms}ms: {result.message}")
        self._commit(token, transitions.failed(self._state, step, result.message or "Unknown error"))
        return False

    def reset(self) -> PipelineState:
        """Return to a clean input state from any phase."""
        self._run_token += 1
        self._request = None
        self._rendering_token = None
        self._state = transitions.initial_state()
        self._notify(self._state)
        return self._state

    async def run(self, request: GenerationRequest) -> PipelineState:
        """Run the pipeline for ``request`` and return the state it ends in."""
        if not request.topic.strip():
            raise InvalidTopicError("Please enter a topic")
        if self._state.phase != Phase.INPUT:
            raise InvalidTransitionError(f"Cannot start a run from the '{self._state.phase.value}' phase")

        self._run_token += 1
        token = self._run_token
        self._request = request
        preview = self.preview_before_render
        self._commit(token, transitions.begin_generation())
        logger.info(f"Run {token} started for topic '{request.topic[:50]}'")

        async with self._client_factory() as client:
            logger.info(f"Run {token}: step '{SCRIPT_STEP}'")
            result = await client.generate_script(request.topic)
            if not self._settle(token, SCRIPT_STEP, result, lambda s: transitions.script_ready(s, result.payload)):
                return self._state

            logger.info(f"Run {token}: step '{VOICE_STEP}'")
            result = await client.generate_voice(self._state.script, request.voice_id)
            if not self._settle(token, VOICE_STEP, result, lambda s: transitions.audio_ready(s, result.payload)):
                return self._state

            logger.info(f"Run {token}: step '{IMAGE_STEP}'")
            result = await client.search_images(request.topic, request.image_count, request.orientation)
            if not self._settle(token, IMAGE_STEP, result, lambda s: transitions.images_ready(s, result.payload, preview)):
                return self._state

        # Closing the client suspends; the run may have been reset meanwhile.
        if token != self._run_token:
            logger.info(f"Run {token} was abandoned before rendering")
            return self._state
        if preview:
            logger.info(f"Run {token} waiting in preview for render")
            return self._state
        return await self._render(token, self._render_request(request))

    async def render(self) -> PipelineState:
        """Continue a run parked in the preview phase through the render step.

        Raises:
            InvalidTransitionError: outside the preview phase, or while a
                render for this run is already in flight.
        """
        if self._state.phase != Phase.PREVIEW:
            raise InvalidTransitionError(f"Cannot render from the '{self._state.phase.value}' phase")
        token = self._run_token
        if self._rendering_token == token:
            raise InvalidTransitionError("A render is already in progress for this run")
        render_request = self._render_request(self._request)
        self._commit(token, transitions.render_started(self._state))
        return await self._render(token, render_request)

    def _render_request(self, request: GenerationRequest) -> RenderRequest:
        current = self._state
        return RenderRequest(
            script=current.script,
            audio_base64=current.audio,
            images=current.images or [],
            aspect_ratio=request.aspect_ratio,
            format=request.format,
        )

    async def _render(self, token: int, render_request: RenderRequest) -> PipelineState:
        if token != self._run_token:
            return self._state
        logger.info(f"Run {token}: step '{RENDER_STEP}'")
        self._rendering_token = token
        try:
            result = await self._render_boundary.render(render_request)
        finally:
            if self._rendering_token == token:
                self._rendering_token = None
        self._settle(token, RENDER_STEP, result, lambda s: transitions.completed(s, result.payload))
        return self._state
