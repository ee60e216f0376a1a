# streamlit_app/presentation.py

"""Maps a PipelineState onto what the UI shows. No Streamlit imports here."""
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from orchestrator.state import IMAGE_STEP, PROGRESS_AFTER, RENDER_STEP, SCRIPT_STEP, VOICE_STEP, Phase, PipelineState

IMAGE_COUNT_OPTIONS: List[Tuple[int, str]] = [
    (2, "2 Images"),
    (4, "4 Images"),
    (6, "6 Images"),
    (8, "8 Images"),
]

ASPECT_RATIO_OPTIONS: List[Tuple[str, str]] = [
    ("9:16", "TikTok (9:16)"),
    ("1:1", "Instagram (1:1)"),
    ("16:9", "YouTube (16:9)"),
]

VOICE_OPTIONS: List[Tuple[str, str]] = [
    ("JBFqnCBsd6RMkjVDRZzb", "Sarah (Friendly)"),
    ("pNInz6obpgDQGcFmaJgB", "Adam (Professional)"),
    ("yoZ06aMxZJJ28mfd3POQ", "Josh (Casual)"),
]

FORMAT_OPTIONS: List[Tuple[str, str]] = [
    ("short", "Short (30-60s)"),
    ("square", "Square (1:1)"),
    ("landscape", "Landscape (16:9)"),
]

STEP_TITLES = {
    SCRIPT_STEP: "Script generation",
    VOICE_STEP: "Voice generation",
    IMAGE_STEP: "Image search",
    RENDER_STEP: "Video rendering",
}

# Actions the UI may offer
GENERATE = "generate"
RESET = "reset"
RESTART = "restart"
RENDER = "render"
DOWNLOAD = "download"


class PhaseView(BaseModel):
    model_config = ConfigDict(frozen=True)

    view: str
    progress: int = 0
    status_text: str = ""
    error_text: Optional[str] = None
    actions: List[str] = Field(default_factory=list)
    script: Optional[str] = None
    audio: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    artifact_ref: Optional[str] = None


def error_text(step_label: str, message: str) -> str:
    title = STEP_TITLES.get(step_label, step_label.capitalize())
    return f"{title} failed: {message}"


def present(state: PipelineState) -> PhaseView:
    """Project a state onto one of the input, generating, preview or complete views.

    A failed run is shown on the generating screen with the error and a
    restart as the only way forward.
    """
    if state.phase == Phase.INPUT:
        return PhaseView(view="input", actions=[GENERATE, RESET])

    if state.phase == Phase.FAILED:
        return PhaseView(
            view="generating",
            progress=state.progress,
            status_text=state.current_step_label,
            error_text=error_text(state.error.step_label, state.error.message),
            actions=[RESTART],
        )

    if state.phase == Phase.GENERATING:
        return PhaseView(view="generating", progress=state.progress, status_text=state.current_step_label)

    if state.phase == Phase.PREVIEW:
        return PhaseView(
            view="preview",
            progress=state.progress,
            status_text=state.current_step_label,
            actions=[RESTART, RENDER],
            script=state.script,
            audio=state.audio,
            images=state.images or [],
        )

    return PhaseView(
        view="complete",
        progress=state.progress,
        status_text=state.current_step_label,
        actions=[RESTART, DOWNLOAD],
        script=state.script,
        audio=state.audio,
        images=state.images or [],
        artifact_ref=state.final_artifact_ref,
    )


PIPELINE_STEPS = (SCRIPT_STEP, VOICE_STEP, IMAGE_STEP, RENDER_STEP)


def step_checklist(view: PhaseView) -> List[Tuple[str, bool, Optional[str]]]:
    """Rows for the progress checklist: finished steps, then the one running.

    The running step carries the current status text. A failed run shows
    only the finished steps.
    """
    rows: List[Tuple[str, bool, Optional[str]]] = []
    for step in PIPELINE_STEPS:
        if view.progress >= PROGRESS_AFTER[step]:
            rows.append((STEP_TITLES[step], True, None))
            continue
        if view.error_text is None:
            rows.append((STEP_TITLES[step], False, view.status_text or None))
        break
    return rows
