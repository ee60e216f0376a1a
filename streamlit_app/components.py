# streamlit_app/components.py

import base64
import binascii
from typing import List, Optional

import streamlit as st


def render_card(title: str, content: str, card_type: str = "default"):
    """
    Renders a bordered card with a title and body text.
    card_type can be "default", "success", "warning", "error".
    """
    with st.container(border=True):
        st.markdown(f"**{title}**")
        if card_type == "error":
            st.error(content)
        elif card_type == "warning":
            st.warning(content)
        elif card_type == "success":
            st.success(content)
        else:
            st.write(content)


def render_audio_player(audio_b64: Optional[str], format_type: str = "audio/mp3"):
    """Decode base64 audio and render a player for it."""
    if not audio_b64:
        st.caption("No audio available.")
        return
    try:
        audio_bytes = base64.b64decode(audio_b64)
    except (binascii.Error, ValueError) as e:
        st.warning(f"Could not decode audio: {e}")
        return
    st.audio(audio_bytes, format=format_type, start_time=0)


def render_image_gallery(images: List[str], columns: int = 4):
    if not images:
        st.caption("No images were found for this topic.")
        return
    cols = st.columns(min(columns, len(images)))
    for i, url in enumerate(images):
        with cols[i % len(cols)]:
            st.image(url)


def show_progress_step(step_name: str, is_complete: bool = True, details: Optional[str] = None):
    icon = "✅" if is_complete else "⏳"
    suffix = f" ({details})" if details else ""
    st.markdown(f"{icon} {step_name}{suffix}")
