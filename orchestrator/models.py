# orchestrator/models.py

"""Pydantic models for the Orchestrator."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AspectRatio = Literal["1:1", "3:4", "4:3", "9:16", "16:9"]
VideoFormat = Literal["short", "square", "landscape"]

DEFAULT_VOICE_ID = "JBFqnCBsd6RMkjVDRZzb"

ORIENTATION_BY_ASPECT_RATIO: Dict[str, str] = {
    "9:16": "portrait",
    "3:4": "portrait",
    "1:1": "squarish",
    "16:9": "landscape",
    "4:3": "landscape",
}


class GenerationRequest(BaseModel):
    """One user request for a video. Immutable once built."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    topic: str
    # Passed through as-is; the image agent clamps it.
    image_count: int = 4
    aspect_ratio: AspectRatio = "9:16"
    voice_id: str = DEFAULT_VOICE_ID
    format: VideoFormat = "short"

    @property
    def orientation(self) -> str:
        return ORIENTATION_BY_ASPECT_RATIO[self.aspect_ratio]


class StepResult(BaseModel):
    """Outcome of one pipeline step: a payload on success, a message on failure."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    payload: Any = None
    message: Optional[str] = None
    latency_ms: int = 0

    @classmethod
    def success(cls, payload: Any, latency_ms: int = 0) -> "StepResult":
        return cls(ok=True, payload=payload, latency_ms=latency_ms)

    @classmethod
    def failure(cls, message: str, latency_ms: int = 0) -> "StepResult":
        return cls(ok=False, message=message, latency_ms=latency_ms)


class RenderRequest(BaseModel):
    """Body sent to the render service."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    script: str
    audio_base64: str
    images: List[str] = Field(default_factory=list)
    aspect_ratio: AspectRatio
    format: VideoFormat
