#!/usr/bin/env python3
"""
Main launcher for the ResumeMatch AI Streamlit application.

Run with ``streamlit run app.py``. Configuration is read once from the
environment (and ``.env``) and the Gemini-backed analyzer is built from it
explicitly; a missing API key is reported on the page instead of failing.
"""
from typing import Optional, Tuple

import streamlit as st

from resume_match.config.logging_config import get_logger, setup_logging
from resume_match.config.settings import get_config
from resume_match.core.state_manager import StateManager
from resume_match.error_handling.boundaries import safe_streamlit_component
from resume_match.error_handling.exceptions import ConfigurationError
from resume_match.error_handling.models import ErrorSeverity
from resume_match.frontend.ui_manager import UIManager
from resume_match.services.analysis_service import (
    GeminiResumeAnalyzer,
    create_resume_analyzer,
)

config = get_config()

# Page configuration - MUST be first Streamlit command
st.set_page_config(
    page_title=config.ui.page_title,
    page_icon=config.ui.page_icon,
    layout=config.ui.layout,
)

setup_logging()
logger = get_logger(__name__)


@st.cache_resource(show_spinner=False)
def build_analyzer() -> Tuple[Optional[GeminiResumeAnalyzer], Optional[ConfigurationError]]:
    try:
        return create_resume_analyzer(config), None
    except ConfigurationError as e:
        logger.warning("Analyzer unavailable: %s", e.message)
        return None, e


@safe_streamlit_component(
    component_name="main_app",
    severity=ErrorSeverity.HIGH,
    fallback_message="The application failed to render",
)
def main():
    """Main application entry point."""
    analyzer, startup_error = build_analyzer()
    state_manager = StateManager(analyzer_factory=lambda: analyzer)
    UIManager(state_manager, startup_error=startup_error).render_full_ui()


if __name__ == "__main__":
    main()
