"""Tests for the state-to-view projection."""
import pytest

from orchestrator import state as transitions
from orchestrator.state import Phase
from streamlit_app.presentation import (
    ASPECT_RATIO_OPTIONS,
    DOWNLOAD,
    FORMAT_OPTIONS,
    GENERATE,
    IMAGE_COUNT_OPTIONS,
    RENDER,
    RESET,
    RESTART,
    VOICE_OPTIONS,
    error_text,
    step_checklist,
    present,
)


def generating_at(step: str):
    state = transitions.begin_generation()
    if step in ("voice", "image", "render"):
        state = transitions.script_ready(state, "script")
    if step in ("image", "render"):
        state = transitions.audio_ready(state, "audio")
    if step == "render":
        state = transitions.images_ready(state, ["https://img/1"])
    return state


def test_input_view():
    view = present(transitions.initial_state())

    assert view.view == "input"
    assert view.actions == [GENERATE, RESET]
    assert view.error_text is None


def test_generating_view():
    view = present(generating_at("voice"))

    assert view.view == "generating"
    assert view.progress == 25
    assert view.status_text == "Generating voice..."
    assert view.actions == []


@pytest.mark.parametrize(
    "step, expected",
    [
        ("script", "Script generation failed: Quota exceeded"),
        ("voice", "Voice generation failed: Quota exceeded"),
        ("image", "Image search failed: Quota exceeded"),
        ("render", "Video rendering failed: Quota exceeded"),
    ],
)
def test_failed_shows_generating_view_with_error(step, expected):
    state = transitions.failed(generating_at(step), step, "Quota exceeded")

    view = present(state)

    assert view.view == "generating"
    assert view.error_text == expected
    assert view.actions == [RESTART]


def test_preview_view():
    state = transitions.images_ready(generating_at("image"), ["https://img/1", "https://img/2"], preview=True)

    view = present(state)

    assert view.view == "preview"
    assert view.script == "script"
    assert view.audio == "audio"
    assert view.images == ["https://img/1", "https://img/2"]
    assert RENDER in view.actions


def test_complete_view():
    state = transitions.completed(generating_at("render"), "https://cdn/final.mp4")

    view = present(state)

    assert state.phase == Phase.COMPLETE
    assert view.view == "complete"
    assert view.progress == 100
    assert view.artifact_ref == "https://cdn/final.mp4"
    assert view.actions == [RESTART, DOWNLOAD]


def test_error_text_unknown_step():
    assert error_text("upload", "nope") == "Upload failed: nope"


def test_form_options():
    assert [value for value, _ in IMAGE_COUNT_OPTIONS] == [2, 4, 6, 8]
    assert [value for value, _ in ASPECT_RATIO_OPTIONS] == ["9:16", "1:1", "16:9"]
    assert VOICE_OPTIONS[0] == ("JBFqnCBsd6RMkjVDRZzb", "Sarah (Friendly)")
    assert [value for value, _ in FORMAT_OPTIONS] == ["short", "square", "landscape"]


def test_checklist_shows_running_step_with_status():
    rows = step_checklist(present(generating_at("image")))

    assert rows == [
        ("Script generation", True, None),
        ("Voice generation", True, None),
        ("Image search", False, "Finding images..."),
    ]


def test_checklist_at_start_shows_first_step_running():
    rows = step_checklist(present(generating_at("script")))

    assert rows == [("Script generation", False, "Generating script...")]


def test_checklist_for_failed_run_shows_finished_steps_only():
    state = transitions.failed(generating_at("image"), "image", "Quota exceeded")

    rows = step_checklist(present(state))

    assert rows == [("Script generation", True, None), ("Voice generation", True, None)]
