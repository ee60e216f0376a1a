# orchestrator/render.py

"""Boundary to the external video render service."""
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from tenacity import AsyncRetrying, RetryError, retry_if_result, stop_after_delay, wait_fixed

from orchestrator.config import Settings, settings as default_settings
from orchestrator.models import RenderRequest, StepResult

logger = logging.getLogger(__name__)

SUCCEEDED = "succeeded"
FAILED = "failed"


class RenderServiceError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RenderBoundary(ABC):
    """Turns script, audio and images into a final video reference."""

    @abstractmethod
    async def render(self, request: RenderRequest) -> StepResult:
        """Return a StepResult whose payload is the artifact reference."""


def _job_finished(body: Dict[str, Any]) -> bool:
    return body.get("status") in (SUCCEEDED, FAILED)


class HttpRenderBoundary(RenderBoundary):
    """
    Render service reached over HTTP.

    ``POST {base}/renders`` either answers with ``{"artifactRef": ...}`` straight
    away or with ``{"jobId": ...}``, in which case ``GET {base}/renders/{jobId}``
    is polled until the job reports ``succeeded`` or ``failed`` or the deadline
    passes.
    """

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 60.0,
        poll_interval: float = 2.0,
        deadline: float = 600.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.deadline = deadline
        self._transport = transport

    @classmethod
    def from_settings(cls, config: Settings = default_settings, **kwargs: Any) -> "HttpRenderBoundary":
        return cls(
            base_url=config.RENDER_SERVICE_URL,
            timeout=config.RENDER_TIMEOUT,
            poll_interval=config.RENDER_POLL_INTERVAL,
            deadline=config.RENDER_DEADLINE,
            **kwargs,
        )

    async def render(self, request: RenderRequest) -> StepResult:
        if not self.base_url:
            logger.error("RENDER_SERVICE_URL is not set; cannot render")
            return StepResult.failure("Render service not configured")

        start_time = time.perf_counter()

        def elapsed() -> int:
            return int((time.perf_counter() - start_time) * 1000)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"{self.base_url}/renders", json=request.model_dump(by_alias=True))
                body = self._decode(response)
                if body.get("artifactRef"):
                    return StepResult.success(body["artifactRef"], elapsed())
                job_id = body.get("jobId")
                if not job_id:
                    return StepResult.failure("Render service returned neither artifactRef nor jobId", elapsed())
                logger.info(f"Render job {job_id} accepted; polling for completion")
                body = await self._wait_for_job(client, job_id)
        except RenderServiceError as e:
            logger.error(f"Render failed after {elapsed()}ms: {e.message}")
            return StepResult.failure(e.message, elapsed())
        except RetryError:
            logger.error(f"Render job did not finish within {self.deadline:g} seconds")
            return StepResult.failure(f"Render timed out after {self.deadline:g} seconds", elapsed())
        except httpx.TimeoutException:
            return StepResult.failure(f"Render service timed out after {self.timeout:g} seconds", elapsed())
        except httpx.HTTPError as e:
            logger.error(f"Render service network error: {e}")
            return StepResult.failure(f"Render service unavailable: {e}", elapsed())

        if body.get("status") == FAILED:
            return StepResult.failure(body.get("error") or "Render job failed", elapsed())
        if not body.get("artifactRef"):
            return StepResult.failure("Render job finished without an artifactRef", elapsed())
        return StepResult.success(body["artifactRef"], elapsed())

    async def _wait_for_job(self, client: httpx.AsyncClient, job_id: str) -> Dict[str, Any]:
        retrying = AsyncRetrying(
            retry=retry_if_result(lambda body: not _job_finished(body)),
            wait=wait_fixed(self.poll_interval),
            stop=stop_after_delay(self.deadline),
        )
        return await retrying(self._fetch_job, client, job_id)

    async def _fetch_job(self, client: httpx.AsyncClient, job_id: str) -> Dict[str, Any]:
        response = await client.get(f"{self.base_url}/renders/{job_id}")
        body = self._decode(response)
        logger.debug(f"Render job {job_id} status: {body.get('status')}")
        return body

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            body = None
        if not response.is_success:
            message = body.get("error") if isinstance(body, dict) else None
            raise RenderServiceError(message or f"Render service error: {response.status_code}")
        if not isinstance(body, dict):
            raise RenderServiceError("Invalid response from render service")
        return body
