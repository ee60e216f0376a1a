# orchestrator/client.py

"""HTTP client for calling the provider proxy services."""
import json
import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple

import httpx

from orchestrator.config import Settings, settings as default_settings
from orchestrator.models import StepResult

logger = logging.getLogger(__name__)


class AgentClient:
    """Client for the script, voice and image agents.

    Each instance owns its own connection pool and is meant to live for one
    run; use it as an async context manager so the pool is closed afterwards.
    """

    def __init__(
        self,
        script_url: str,
        voice_url: str,
        image_url: str,
        script_timeout: float = 45.0,
        voice_timeout: float = 90.0,
        image_timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.script_url = script_url.rstrip("/")
        self.voice_url = voice_url.rstrip("/")
        self.image_url = image_url.rstrip("/")
        self.script_timeout = script_timeout
        self.voice_timeout = voice_timeout
        self.image_timeout = image_timeout
        self.client = httpx.AsyncClient(transport=transport)

    @classmethod
    def from_settings(cls, config: Settings = default_settings, **kwargs: Any) -> "AgentClient":
        return cls(
            script_url=config.SCRIPT_AGENT_URL,
            voice_url=config.VOICE_AGENT_URL,
            image_url=config.IMAGE_AGENT_URL,
            script_timeout=config.SCRIPT_TIMEOUT,
            voice_timeout=config.VOICE_TIMEOUT,
            image_timeout=config.IMAGE_TIMEOUT,
            **kwargs,
        )

    async def __aenter__(self) -> "AgentClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _execute_agent_call(
        self,
        agent_name: str,
        method: str,
        url: str,
        request_timeout: float,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Execute one agent call and always return ``(latency_ms, body)``.

        Transport problems and undecodable bodies come back as
        ``{"success": False, "error": ...}`` instead of raising. The agent's own
        ``error`` text is preserved when it sends one.
        """
        start_time = time.perf_counter()

        def elapsed() -> int:
            return int((time.perf_counter() - start_time) * 1000)

        try:
            response = await self.client.request(method, url, json=json_data, timeout=request_timeout)
        except httpx.TimeoutException as e:
            logger.error(f"{agent_name} timed out after {elapsed()}ms for URL {url}: {e}")
            return elapsed(), {"success": False, "error": f"{agent_name} timed out after {request_timeout:g} seconds"}
        except httpx.RequestError as e:
            logger.error(f"{agent_name} network error after {elapsed()}ms for URL {url}: {e}")
            return elapsed(), {"success": False, "error": f"{agent_name} service unavailable"}

        latency_ms = elapsed()
        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"{agent_name} JSON decode error after {latency_ms}ms for URL {url}: {e}")
            if response.is_success:
                return latency_ms, {"success": False, "error": f"Invalid response from {agent_name}"}
            return latency_ms, {"success": False, "error": f"{agent_name} service error: {response.status_code}"}

        if not isinstance(body, dict):
            return latency_ms, {"success": False, "error": f"Invalid response from {agent_name}"}

        if not response.is_success:
            logger.error(f"{agent_name} HTTP error {response.status_code} after {latency_ms}ms for URL {url}: {body}")
            message = body.get("error") or f"{agent_name} service error: {response.status_code}"
            return latency_ms, {"success": False, "error": message}

        return latency_ms, body

    @staticmethod
    def _to_step_result(
        agent_name: str,
        latency_ms: int,
        body: Dict[str, Any],
        extract: Callable[[Dict[str, Any]], Any],
    ) -> StepResult:
        if not body.get("success", False):
            return StepResult.failure(body.get("error") or f"{agent_name} call reported failure.", latency_ms)
        try:
            payload = extract(body)
        except (KeyError, TypeError) as e:
            logger.error(f"{agent_name} response missing expected field: {e}")
            return StepResult.failure(f"Invalid response from {agent_name}", latency_ms)
        return StepResult.success(payload, latency_ms)

    async def generate_script(self, topic: str) -> StepResult:
        latency_ms, body = await self._execute_agent_call(
            "Script Agent", "POST", f"{self.script_url}/script-generation",
            self.script_timeout, json_data={"topic": topic},
        )
        return self._to_step_result("Script Agent", latency_ms, body, lambda b: b["script"])

    async def generate_voice(self, script: str, voice_id: Optional[str] = None) -> StepResult:
        request_data: Dict[str, Any] = {"script": script}
        if voice_id:
            request_data["voiceId"] = voice_id
        latency_ms, body = await self._execute_agent_call(
            "Voice Agent", "POST", f"{self.voice_url}/voice-generation",
            self.voice_timeout, json_data=request_data,
        )
        return self._to_step_result("Voice Agent", latency_ms, body, lambda b: b["audio"])

    async def search_images(self, query: str, count: int, orientation: str) -> StepResult:
        """Payload is the list of regular-size image URLs, in result order."""
        latency_ms, body = await self._execute_agent_call(
            "Image Agent", "POST", f"{self.image_url}/image-search",
            self.image_timeout, json_data={"query": query, "count": count, "orientation": orientation},
        )
        return self._to_step_result(
            "Image Agent", latency_ms, body,
            lambda b: [image["url"] for image in b["images"]],
        )

    async def get_image_service_info(self) -> StepResult:
        latency_ms, body = await self._execute_agent_call(
            "Image Agent", "GET", f"{self.image_url}/image-search", self.image_timeout,
        )
        return self._to_step_result("Image Agent", latency_ms, body, lambda b: b)
