# orchestrator/state.py

"""Pipeline state and the transitions between its phases.

Every transition takes a state and returns a new one; states are frozen and
never modified in place.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Phase(str, Enum):
    INPUT = "input"
    GENERATING = "generating"
    PREVIEW = "preview"
    COMPLETE = "complete"
    FAILED = "failed"


SCRIPT_STEP = "script"
VOICE_STEP = "voice"
IMAGE_STEP = "image"
RENDER_STEP = "render"

STEP_MESSAGES = {
    SCRIPT_STEP: "Generating script...",
    VOICE_STEP: "Generating voice...",
    IMAGE_STEP: "Finding images...",
    RENDER_STEP: "Rendering video...",
}

PROGRESS_AFTER = {
    SCRIPT_STEP: 25,
    VOICE_STEP: 50,
    IMAGE_STEP: 80,
    RENDER_STEP: 100,
}


class ErrorInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    step_label: str
    message: str


class PipelineState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.INPUT
    progress: int = Field(default=0, ge=0, le=100)
    current_step_label: str = ""
    script: Optional[str] = None
    audio: Optional[str] = None
    images: Optional[List[str]] = None
    final_artifact_ref: Optional[str] = None
    error: Optional[ErrorInfo] = None

    @model_validator(mode="after")
    def check_phase_fields(self) -> "PipelineState":
        if self.phase == Phase.COMPLETE and not self.final_artifact_ref:
            raise ValueError("a complete state needs a final artifact reference")
        if self.phase == Phase.FAILED and self.error is None:
            raise ValueError("a failed state needs an error")
        return self


def initial_state() -> PipelineState:
    return PipelineState()


def begin_generation() -> PipelineState:
    """Fresh generating state; nothing from an earlier run carries over."""
    return PipelineState(
        phase=Phase.GENERATING,
        progress=0,
        current_step_label=STEP_MESSAGES[SCRIPT_STEP],
    )


def script_ready(state: PipelineState, script: str) -> PipelineState:
    return state.model_copy(update={
        "script": script,
        "progress": PROGRESS_AFTER[SCRIPT_STEP],
        "current_step_label": STEP_MESSAGES[VOICE_STEP],
    })


def audio_ready(state: PipelineState, audio: str) -> PipelineState:
    return state.model_copy(update={
        "audio": audio,
        "progress": PROGRESS_AFTER[VOICE_STEP],
        "current_step_label": STEP_MESSAGES[IMAGE_STEP],
    })


def images_ready(state: PipelineState, images: List[str], preview: bool = False) -> PipelineState:
    """Store the image URLs; with ``preview`` the run parks in the preview phase."""
    return state.model_copy(update={
        "images": list(images),
        "progress": PROGRESS_AFTER[IMAGE_STEP],
        "phase": Phase.PREVIEW if preview else state.phase,
        "current_step_label": "Ready to render" if preview else STEP_MESSAGES[RENDER_STEP],
    })


def render_started(state: PipelineState) -> PipelineState:
    return state.model_copy(update={"current_step_label": STEP_MESSAGES[RENDER_STEP]})


def completed(state: PipelineState, artifact_ref: str) -> PipelineState:
    # Rebuilt through the constructor so the phase invariants are validated.
    return PipelineState(**{
        **state.model_dump(),
        "phase": Phase.COMPLETE,
        "progress": PROGRESS_AFTER[RENDER_STEP],
        "current_step_label": "Complete",
        "final_artifact_ref": artifact_ref,
    })


def failed(state: PipelineState, step_label: str, message: str) -> PipelineState:
    """Record the failing step; artifacts collected so far are kept."""
    return PipelineState(**{
        **state.model_dump(),
        "phase": Phase.FAILED,
        "error": ErrorInfo(step_label=step_label, message=message),
    })
