# streamlit_app/app.py

import asyncio

import streamlit as st
from dotenv import load_dotenv

from orchestrator.models import GenerationRequest
from orchestrator.pipeline import InvalidTopicError, Orchestrator
from orchestrator.state import PipelineState

from streamlit_app.components import render_audio_player, render_card, render_image_gallery, show_progress_step
from streamlit_app.presentation import (
    ASPECT_RATIO_OPTIONS,
    FORMAT_OPTIONS,
    IMAGE_COUNT_OPTIONS,
    RENDER,
    VOICE_OPTIONS,
    PhaseView,
    present,
    step_checklist,
)

load_dotenv()

st.set_page_config(page_title="AI TikTok Video Generator", page_icon="🎬", layout="centered")


def initialize_session_state():
    defaults = {
        "orchestrator": None,
        "form_error": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state.orchestrator is None:
        st.session_state.orchestrator = Orchestrator()


def _label_for(options, value):
    return dict(options)[value]


def restart():
    st.session_state.orchestrator.reset()
    st.session_state.form_error = None


def drive(coro_factory):
    """Run one orchestrator coroutine, streaming progress into the page."""
    progress_bar = st.progress(0)
    status = st.empty()

    def on_update(state: PipelineState):
        progress_bar.progress(state.progress)
        status.text(state.current_step_label)

    orchestrator: Orchestrator = st.session_state.orchestrator
    orchestrator.on_update = on_update
    try:
        asyncio.run(coro_factory())
    except BaseException:
        # A rerun or stop interrupts the coroutine; the abandoned run must not write state.
        orchestrator.reset()
        raise
    finally:
        orchestrator.on_update = None
    st.rerun()


def render_input_view():
    st.title("🎬 AI TikTok Video Generator")

    with st.form("generation_form"):
        topic = st.text_input(
            "Video Topic *",
            placeholder="e.g., Why cats are amazing, Best coffee brewing methods, Travel tips for beginners",
        )
        col1, col2 = st.columns(2)
        image_count = col1.selectbox(
            "Number of Images", [v for v, _ in IMAGE_COUNT_OPTIONS], index=1,
            format_func=lambda v: _label_for(IMAGE_COUNT_OPTIONS, v),
        )
        aspect_ratio = col2.selectbox(
            "Aspect Ratio", [v for v, _ in ASPECT_RATIO_OPTIONS],
            format_func=lambda v: _label_for(ASPECT_RATIO_OPTIONS, v),
        )
        col3, col4 = st.columns(2)
        voice_id = col3.selectbox(
            "Voice Style", [v for v, _ in VOICE_OPTIONS],
            format_func=lambda v: _label_for(VOICE_OPTIONS, v),
        )
        video_format = col4.selectbox(
            "Video Format", [v for v, _ in FORMAT_OPTIONS],
            format_func=lambda v: _label_for(FORMAT_OPTIONS, v),
        )

        if st.session_state.form_error:
            st.error(st.session_state.form_error)

        submit_col, reset_col = st.columns([3, 1])
        submitted = submit_col.form_submit_button("🎬 Generate Video (FREE!)", use_container_width=True)
        reset_clicked = reset_col.form_submit_button("Reset", use_container_width=True)

    st.caption("✨ Using AI-powered script generation, voice synthesis, and stock images")

    if reset_clicked:
        restart()
        st.rerun()

    if submitted:
        request = GenerationRequest(
            topic=topic,
            image_count=image_count,
            aspect_ratio=aspect_ratio,
            voice_id=voice_id,
            format=video_format,
        )
        # Validate before any progress UI is drawn.
        if not request.topic.strip():
            st.session_state.form_error = "Please enter a topic"
            st.rerun()
        st.session_state.form_error = None
        try:
            drive(lambda: st.session_state.orchestrator.run(request))
        except InvalidTopicError as e:
            st.session_state.form_error = str(e)
            st.rerun()


def render_generating_view(view: PhaseView):
    st.header("Creating Your Video...")
    st.progress(view.progress)
    st.text(view.status_text)
    st.caption(f"{view.progress}% complete")

    for title, is_complete, details in step_checklist(view):
        show_progress_step(title, is_complete=is_complete, details=details)

    if view.error_text:
        render_card("Something went wrong", view.error_text, card_type="error")
        if st.button("Try Again"):
            restart()
            st.rerun()
    elif st.button("Cancel"):
        restart()
        st.rerun()


def render_preview_view(view: PhaseView):
    st.header("Preview Your Content")
    left, right = st.columns(2)
    with left:
        st.subheader("Generated Script")
        st.write(view.script)
        st.subheader("Generated Audio")
        render_audio_player(view.audio)
    with right:
        st.subheader("Selected Images")
        render_image_gallery(view.images, columns=2)

    back_col, render_col = st.columns(2)
    if back_col.button("Back to Edit"):
        restart()
        st.rerun()
    if RENDER in view.actions and render_col.button("Generate Final Video", type="primary"):
        drive(lambda: st.session_state.orchestrator.render())


def render_complete_view(view: PhaseView):
    st.header("🎉 Video Complete!")
    if view.artifact_ref and view.artifact_ref.startswith(("http://", "https://")):
        st.video(view.artifact_ref)
        st.link_button("Download Video", view.artifact_ref)
    else:
        st.code(view.artifact_ref or "")
    with st.expander("Script"):
        st.write(view.script)
    if st.button("Create Another Video"):
        restart()
        st.rerun()


def main():
    initialize_session_state()
    view = present(st.session_state.orchestrator.state)

    if view.view == "generating":
        render_generating_view(view)
    elif view.view == "preview":
        render_preview_view(view)
    elif view.view == "complete":
        render_complete_view(view)
    else:
        render_input_view()


if __name__ == "__main__":
    main()
