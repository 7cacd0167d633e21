# In resume_match/frontend/ui_components.py
import streamlit as st

from resume_match.config.logging_config import get_logger
from resume_match.constants.ui_constants import UIConstants
from resume_match.core.app_controller import AnalysisController
from resume_match.core.input_capture import DocumentSlot
from resume_match.frontend.callbacks import (
    handle_analyze,
    handle_clear_image,
    handle_file_upload,
    handle_mode_change,
    handle_reset,
    handle_text_change,
    widget_key,
)
from resume_match.frontend.presentation import build_gauge_figure, build_result_view
from resume_match.models.data_models import AnalysisResult, InputMode

logger = get_logger(__name__)


def display_header():
    """Renders the page title and tagline."""
    st.title("🎯 ResumeMatch AI")
    st.markdown(
        "### Beat the Applicant Tracking System.\n"
        "Upload your resume and the job description. The AI analyzes the match "
        "percentage and gives you personalized tips to get more interviews."
    )
    st.divider()


def display_input_section(title: str, slot_key: str, slot: DocumentSlot, placeholder: str):
    """Renders one document capture panel with a Text/Image toggle."""
    with st.container(border=True):
        st.subheader(title)
        mode = st.radio(
            "Input mode",
            options=[InputMode.TEXT.value, InputMode.IMAGE.value],
            format_func=lambda value: value.title(),
            index=0 if slot.mode == InputMode.TEXT else 1,
            horizontal=True,
            key=widget_key(slot_key, "mode"),
            on_change=handle_mode_change,
            args=(slot_key,),
            label_visibility="collapsed",
        )

        if mode == InputMode.TEXT.value:
            _seed_text_widget(slot_key, slot)
            st.text_area(
                title,
                height=300,
                key=widget_key(slot_key, "text"),
                placeholder=placeholder,
                on_change=handle_text_change,
                args=(slot_key,),
                label_visibility="collapsed",
            )
        else:
            _display_image_panel(slot_key, slot)


def _seed_text_widget(slot_key: str, slot: DocumentSlot):
    # Streamlit drops widget state while the text area is hidden (Image mode).
    text_key = widget_key(slot_key, "text")
    if text_key not in st.session_state:
        st.session_state[text_key] = "" if slot.preview else slot.text


def _display_image_panel(slot_key: str, slot: DocumentSlot):
    warning = st.session_state.pop(widget_key(slot_key, "warning"), None)
    if warning:
        st.warning(warning)

    if slot.preview:
        st.image(slot.preview, caption=slot.data.file_name, width="stretch")
        st.button(
            "✖ Remove image",
            key=widget_key(slot_key, "clear"),
            on_click=handle_clear_image,
            args=(slot_key,),
        )
    else:
        st.caption(", ".join(t.upper() for t in UIConstants.IMAGE_UPLOAD_TYPES))

    st.file_uploader(
        "Change Image" if slot.preview else "Select Image",
        key=widget_key(slot_key, "file"),
        on_change=handle_file_upload,
        args=(slot_key,),
        help=f"Images only ({', '.join(UIConstants.IMAGE_UPLOAD_TYPES)}). "
        "Paste PDF or Word documents as text.",
    )


def display_analyze_controls(controller: AnalysisController):
    """Renders the trigger button and the current error, if any."""
    st.button(
        "✨ Check Matching Score",
        type="primary",
        width="stretch",
        disabled=controller.is_loading,
        on_click=handle_analyze,
    )
    if controller.error:
        st.error(controller.error)


def display_results(result: AnalysisResult):
    """Renders the match report for a result."""
    view = build_result_view(result)

    header_col, reset_col = st.columns([4, 1])
    with header_col:
        st.header("Analysis Results")
    with reset_col:
        st.button("🔄 Run New Analysis", on_click=handle_reset, width="stretch")

    with st.container(border=True):
        gauge_col, summary_col = st.columns([1, 2])
        with gauge_col:
            st.plotly_chart(build_gauge_figure(view), width="stretch")
        with summary_col:
            st.markdown(
                f"<span style='color:{view.band.color};font-weight:700;"
                f"text-transform:uppercase'>{view.title}</span>",
                unsafe_allow_html=True,
            )
            st.subheader("Match Analysis Summary")
            st.markdown(f"*\"{view.summary}\"*")

    matching_col, missing_col = st.columns(2)
    with matching_col:
        with st.container(border=True):
            st.markdown("#### ✅ Matching Skills")
            _display_skill_list(view.matching_skills, view.matching_placeholder, ":green")
    with missing_col:
        with st.container(border=True):
            st.markdown("#### ❌ Missing Key Skills")
            _display_skill_list(view.missing_skills, view.missing_placeholder, ":red")

    with st.container(border=True):
        st.markdown("#### 🛡️ How to Improve & Tailor")
        for number, tip in view.numbered_tips:
            st.markdown(f"**{number}.** {tip}")


def _display_skill_list(skills, placeholder: str, color: str):
    if not skills:
        st.caption(placeholder)
        return
    st.markdown(" ".join(f"{color}-background[{skill}]" for skill in skills))
