"""ElevenLabs text-to-speech client for the Voice Agent."""
import json
import logging
from typing import Any, Dict

import httpx

from agents.common import ProxyError
from .config import settings

logger = logging.getLogger(__name__)


class VoiceClientError(ProxyError):
    """Exception raised by the ElevenLabs client."""
    pass


def _vendor_error_message(status_code: int, body: bytes) -> str:
    """Pull the human readable message out of an ElevenLabs error body."""
    text = body.decode("utf-8", errors="ignore")
    try:
        payload = json.loads(text)
    except ValueError:
        return text or f"ElevenLabs API error: {status_code}"
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, dict):
        return detail.get("message") or json.dumps(detail)
    if isinstance(detail, str):
        return detail
    return text


class ElevenLabsClient:
    """Streams speech from ElevenLabs and collects it into one payload."""

    def __init__(
        self,
        api_key: str,
        base_url: str = settings.ELEVENLABS_BASE_URL,
        model_id: str = settings.MODEL_ID,
        output_format: str = settings.OUTPUT_FORMAT,
        timeout: int = settings.TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model_id = model_id
        self.output_format = output_format
        self.timeout = timeout

    def _payload(self, text: str) -> Dict[str, Any]:
        return {
            "text": text,
            "model_id": self.model_id,
            "voice_settings": {
                "stability": settings.STABILITY,
                "similarity_boost": settings.SIMILARITY_BOOST,
                "use_speaker_boost": settings.USE_SPEAKER_BOOST,
                "speed": settings.SPEED,
            },
        }

    async def synthesize(self, text: str, voice_id: str) -> bytes:
        url = f"{self.base_url}/v1/text-to-speech/{voice_id}/stream"
        headers = {"xi-api-key": self.api_key, "Content-Type": "application/json"}
        chunks = []
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                async with client.stream(
                    "POST", url,
                    headers=headers,
                    params={"output_format": self.output_format},
                    json=self._payload(text),
                ) as resp:
                    if resp.status_code >= 400:
                        body = await resp.aread()
                        message = _vendor_error_message(resp.status_code, body)
                        logger.error(f"ElevenLabs API Error {resp.status_code}: {message}")
                        raise VoiceClientError(message)
                    async for chunk in resp.aiter_bytes():
                        if chunk:
                            chunks.append(chunk)
        except VoiceClientError:
            raise
        except httpx.TimeoutException:
            raise VoiceClientError(f"ElevenLabs request timed out after {self.timeout} seconds")
        except httpx.HTTPError as e:
            logger.error(f"ElevenLabs network error: {e}")
            raise VoiceClientError(f"ElevenLabs request failed: {e}") from e

        audio = b"".join(chunks)
        if not audio:
            raise VoiceClientError("ElevenLabs returned no audio")
        logger.info(f"Synthesized {len(audio)} bytes of audio with voice {voice_id}")
        return audio
