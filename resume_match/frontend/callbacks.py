# In resume_match/frontend/callbacks.py
import asyncio

import streamlit as st

from resume_match.config.logging_config import get_logger
from resume_match.core.state_manager import StateManager
from resume_match.error_handling.exceptions import UnsupportedFileTypeError
from resume_match.models.data_models import InputMode

logger = get_logger(__name__)


def widget_key(slot_key: str, widget: str) -> str:
    """Session state key of a widget belonging to a document slot."""
    return f"{slot_key}_{widget}"


def handle_mode_change(slot_key: str):
    """Sync the Text/Image toggle into the slot."""
    slot = st.session_state[slot_key]
    slot.set_mode(InputMode(st.session_state[widget_key(slot_key, "mode")]))


def handle_text_change(slot_key: str):
    """Store edited text; this drops any uploaded image for the slot."""
    slot = st.session_state[slot_key]
    slot.set_text(st.session_state.get(widget_key(slot_key, "text"), ""))


def handle_file_upload(slot_key: str):
    """Read the uploaded file into the slot, warning on non-image files."""
    slot = st.session_state[slot_key]
    uploaded = st.session_state.get(widget_key(slot_key, "file"))
    if uploaded is None:
        return

    try:
        slot.select_file(uploaded.name, uploaded.type, uploaded.getvalue())
    except UnsupportedFileTypeError as e:
        # Existing input and preview stay as they were.
        st.session_state[widget_key(slot_key, "warning")] = e.message


def handle_clear_image(slot_key: str):
    """Remove the uploaded image from a slot."""
    st.session_state[slot_key].clear_image()


def handle_analyze():
    """Run one analysis for the captured documents."""
    state_manager = StateManager()
    controller = state_manager.controller
    if controller.is_loading:
        return

    logger.info("Analysis triggered")
    with st.spinner("Analyzing Compatibility..."):
        asyncio.run(
            controller.run_analysis(
                state_manager.resume.data, state_manager.job_description.data
            )
        )


def handle_reset():
    """Clear the last result so a new analysis can be run."""
    StateManager().controller.reset()
    logger.info("Analysis reset")
