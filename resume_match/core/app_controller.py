"""Analysis workflow controller.

Drives one analysis at a time through the states
IDLE -> VALIDATING -> LOADING -> SUCCESS | ERROR, and back to IDLE on reset.
The controller owns the single result/error slot the UI renders from.
"""

from typing import Optional

from resume_match.config.logging_config import get_logger
from resume_match.constants.ui_constants import UIConstants
from resume_match.error_handling.exceptions import InputValidationError
from resume_match.models.data_models import AnalysisResult, AnalysisStatus, DocumentInput
from resume_match.services.analysis_service import ResumeAnalyzerInterface

logger = get_logger(__name__)


def validate_documents(resume: DocumentInput, job_description: DocumentInput) -> None:
    """Check that both documents carry text or an image.

    Raises:
        InputValidationError: Naming the first missing document
    """
    if not resume.has_content():
        raise InputValidationError(
            UIConstants.MISSING_RESUME_MESSAGE, missing_document="resume"
        )
    if not job_description.has_content():
        raise InputValidationError(
            UIConstants.MISSING_JOB_DESCRIPTION_MESSAGE,
            missing_document="job_description",
        )


class AnalysisController:
    """State machine around a ``ResumeAnalyzerInterface``."""

    def __init__(self, analyzer: Optional[ResumeAnalyzerInterface] = None):
        self.analyzer = analyzer
        self.status = AnalysisStatus.IDLE
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status == AnalysisStatus.LOADING

    async def run_analysis(
        self, resume: DocumentInput, job_description: DocumentInput
    ) -> Optional[AnalysisResult]:
        """Validate the inputs and run one analysis.

        Returns the new result, or ``None`` when validation or the analysis
        failed or another analysis is already in flight.
        """
        if self.is_loading:
            logger.info("Analysis already in progress; ignoring trigger")
            return None

        self.status = AnalysisStatus.VALIDATING
        try:
            validate_documents(resume, job_description)
        except InputValidationError as e:
            logger.info("Analysis input rejected: %s", e.missing_document)
            self.status = AnalysisStatus.ERROR
            self.error = e.message
            return None

        if self.analyzer is None:
            self.status = AnalysisStatus.ERROR
            self.error = UIConstants.GENERIC_ANALYSIS_ERROR
            logger.error("No analyzer configured")
            return None

        self.status = AnalysisStatus.LOADING
        self.error = None
        self.result = None

        try:
            result = await self.analyzer.analyze(resume, job_description)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # Any service failure, including provider transport/auth errors,
            # ends in the ERROR state with a displayable message.
            logger.error("Analysis failed: %s", e, exc_info=True)
            self.status = AnalysisStatus.ERROR
            self.error = str(e) or UIConstants.GENERIC_ANALYSIS_ERROR
            return None

        self.status = AnalysisStatus.SUCCESS
        self.result = result
        self.error = None
        return result

    def reset(self) -> None:
        """Clear the result and error. Captured inputs are not touched."""
        if self.is_loading:
            logger.info("Reset ignored while analysis is in progress")
            return
        self.status = AnalysisStatus.IDLE
        self.result = None
        self.error = None
