"""UI management module for the Streamlit application.

This module provides a UIManager class that handles page layout and delegates
to the component renderers, keeping presentation separate from the analysis
workflow in ``resume_match.core``.
"""

from typing import Optional

import streamlit as st

from resume_match.config.logging_config import get_logger
from resume_match.core.state_manager import (
    JOB_DESCRIPTION_SLOT_KEY,
    RESUME_SLOT_KEY,
    StateManager,
)
from resume_match.error_handling.boundaries import error_boundary
from resume_match.error_handling.exceptions import ConfigurationError
from resume_match.frontend.ui_components import (
    display_analyze_controls,
    display_header,
    display_input_section,
    display_results,
)

logger = get_logger(__name__)


class UIManager:
    """Handles all UI rendering for one page run."""

    def __init__(
        self,
        state_manager: StateManager,
        startup_error: Optional[ConfigurationError] = None,
    ):
        """Initialize the UIManager.

        Args:
            state_manager: The StateManager instance for state access
            startup_error: Configuration problem to show instead of allowing
                analysis, if any
        """
        self.state = state_manager
        self.startup_error = startup_error

    def render_configuration_warning(self):
        if self.startup_error is not None:
            st.warning(f"⚠️ {self.startup_error.message}")

    def render_inputs(self):
        """Render the resume and job description panels side by side."""
        resume_col, jd_col = st.columns(2)
        with resume_col:
            display_input_section(
                "📄 My Resume",
                RESUME_SLOT_KEY,
                self.state.resume,
                "Paste your resume text here, or upload an image of your resume...",
            )
        with jd_col:
            display_input_section(
                "👥 Job Description",
                JOB_DESCRIPTION_SLOT_KEY,
                self.state.job_description,
                "Paste the Job Description (JD) here to compare...",
            )

    def render_results(self):
        result = self.state.controller.result
        if result is None:
            return
        st.divider()
        with error_boundary("results", fallback_message="Could not display the analysis results"):
            display_results(result)

    def render_full_ui(self):
        """Render the complete page."""
        display_header()
        self.render_configuration_warning()
        self.render_inputs()
        display_analyze_controls(self.state.controller)
        self.render_results()
