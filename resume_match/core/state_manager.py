"""Per-session objects kept in ``st.session_state``.

Each browser session owns two ``DocumentSlot`` objects and one
``AnalysisController``. They are created on the first script run and reused
on every rerun after that.
"""

from typing import Any, Callable, Optional

import streamlit as st

from resume_match.config.logging_config import get_logger
from resume_match.core.app_controller import AnalysisController
from resume_match.core.input_capture import DocumentSlot
from resume_match.services.analysis_service import ResumeAnalyzerInterface

logger = get_logger(__name__)

RESUME_SLOT_KEY = "resume_slot"
JOB_DESCRIPTION_SLOT_KEY = "job_description_slot"
CONTROLLER_KEY = "analysis_controller"


class StateManager:
    """Typed access to the session's slots and controller."""

    def __init__(
        self,
        analyzer_factory: Optional[Callable[[], Optional[ResumeAnalyzerInterface]]] = None,
    ):
        """
        Args:
            analyzer_factory: Called once per session, when its controller is
                created, to supply the analyzer
        """
        self._analyzer_factory = analyzer_factory
        self._initialize_state()

    def _initialize_state(self):
        """Create whichever session objects are missing."""
        if RESUME_SLOT_KEY not in st.session_state:
            st.session_state[RESUME_SLOT_KEY] = DocumentSlot("resume")
            logger.debug("Initialized session state key: %s", RESUME_SLOT_KEY)

        if JOB_DESCRIPTION_SLOT_KEY not in st.session_state:
            st.session_state[JOB_DESCRIPTION_SLOT_KEY] = DocumentSlot("job_description")
            logger.debug("Initialized session state key: %s", JOB_DESCRIPTION_SLOT_KEY)

        if CONTROLLER_KEY not in st.session_state:
            analyzer = self._analyzer_factory() if self._analyzer_factory else None
            st.session_state[CONTROLLER_KEY] = AnalysisController(analyzer)
            logger.debug("Initialized session state key: %s", CONTROLLER_KEY)

    def get(self, key: str, default: Any = None) -> Any:
        return st.session_state.get(key, default)

    @property
    def resume(self) -> DocumentSlot:
        """The resume capture slot."""
        return self.get(RESUME_SLOT_KEY)

    @property
    def job_description(self) -> DocumentSlot:
        """The job description capture slot."""
        return self.get(JOB_DESCRIPTION_SLOT_KEY)

    @property
    def controller(self) -> AnalysisController:
        """The analysis controller for this session."""
        return self.get(CONTROLLER_KEY)
