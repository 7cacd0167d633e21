"""Resume/job-description analysis backed by a hosted LLM.

The analyzer builds one multimodal request (instruction prompt followed by a
labeled resume segment and a labeled job-description segment), asks the model
for JSON constrained to a fixed schema, and validates the reply into an
``AnalysisResult``. It makes exactly one call per analysis: no retries, no
timeout and no partial results. Provider errors propagate unchanged.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from pydantic import ValidationError

from resume_match.config.logging_config import get_logger
from resume_match.config.settings import AppConfig
from resume_match.constants.config_constants import ConfigConstants
from resume_match.constants.ui_constants import UIConstants
from resume_match.error_handling.exceptions import (
    ConfigurationError,
    EmptyResponseError,
    LLMResponseParsingError,
)
from resume_match.models.data_models import AnalysisResult, DocumentInput
from resume_match.services.llm import GeminiClient, LLMClientInterface
from resume_match.services.llm.llm_client_interface import ContentPart
from resume_match.services.prompts import ANALYSIS_PROMPT, RESPONSE_SCHEMA, segment_header
from resume_match.utils.image_utils import split_data_uri
from resume_match.utils.json_utils import extract_json_from_response

logger = get_logger(__name__)


class ResumeAnalyzerInterface(ABC):
    """Anything that can analyze a resume/job-description pair."""

    @abstractmethod
    async def analyze(
        self, resume: DocumentInput, job_description: DocumentInput
    ) -> AnalysisResult:
        """Compare a resume with a job description.

        Callers validate that both documents have content beforehand.
        """
        raise NotImplementedError


def build_document_parts(label: str, document: DocumentInput) -> List[ContentPart]:
    """Build the labeled request segment for one document."""
    parts: List[ContentPart] = [segment_header(label)]
    if document.text:
        parts.append(document.text)
    if document.image:
        mime_type, data = split_data_uri(document.image)
        parts.append({"mime_type": mime_type, "data": data})
    return parts


def build_request_contents(
    resume: DocumentInput, job_description: DocumentInput
) -> List[ContentPart]:
    """Compose the full request: prompt, resume segment, job description segment."""
    return [
        ANALYSIS_PROMPT,
        *build_document_parts(UIConstants.RESUME_LABEL, resume),
        *build_document_parts(UIConstants.JOB_DESCRIPTION_LABEL, job_description),
    ]


def build_generation_config() -> Dict[str, Any]:
    return {
        "response_mime_type": ConfigConstants.RESPONSE_MIME_TYPE,
        "response_schema": RESPONSE_SCHEMA,
    }


def extract_response_text(response: Any) -> str:
    """Get the text of a Gemini response, or an empty string if it has none."""
    if response is None:
        return ""
    if isinstance(response, str):
        return response
    try:
        return response.text or ""
    except ValueError:
        # The quick accessor raises when the reply carries no text part
        # (for example a blocked prompt).
        return ""


def parse_analysis_result(raw_text: str) -> AnalysisResult:
    """Parse the model's JSON reply into an AnalysisResult.

    Raises:
        EmptyResponseError: If the reply is blank
        LLMResponseParsingError: If the reply is not JSON matching the schema
    """
    if not raw_text or not raw_text.strip():
        raise EmptyResponseError(UIConstants.NO_RESPONSE_MESSAGE)

    cleaned = extract_json_from_response(raw_text)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise LLMResponseParsingError(
            f"Analysis response is not valid JSON: {e.msg}",
            raw_response=raw_text,
            original_exception=e,
        ) from e

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise LLMResponseParsingError(
            f"Analysis response does not match the expected schema "
            f"({e.error_count()} validation errors)",
            raw_response=raw_text,
            original_exception=e,
        ) from e


class GeminiResumeAnalyzer(ResumeAnalyzerInterface):
    """Analyzer that delegates the comparison to a Gemini model."""

    def __init__(self, llm_client: LLMClientInterface):
        self._llm_client = llm_client

    @property
    def model_name(self) -> str:
        return self._llm_client.get_model_name()

    async def analyze(
        self, resume: DocumentInput, job_description: DocumentInput
    ) -> AnalysisResult:
        contents = build_request_contents(resume, job_description)
        logger.info(
            "Requesting analysis from %s (%d parts, resume_image=%s, jd_image=%s)",
            self.model_name,
            len(contents),
            bool(resume.image),
            bool(job_description.image),
        )

        response = await self._llm_client.generate_content(
            contents, generation_config=build_generation_config()
        )
        result = parse_analysis_result(extract_response_text(response))

        logger.info(
            "Analysis complete: match=%d%%, title=%r",
            result.match_percentage,
            result.job_title_detected,
        )
        return result


def create_resume_analyzer(config: AppConfig) -> GeminiResumeAnalyzer:
    """Build the production analyzer from explicit configuration.

    Raises:
        ConfigurationError: If no Gemini API key is configured
    """
    if not config.llm.has_api_key:
        raise ConfigurationError(
            "No Gemini API key configured. Set GEMINI_API_KEY in the environment or .env file.",
            config_key="GEMINI_API_KEY",
        )
    client = GeminiClient(api_key=config.llm.gemini_api_key, model_name=config.llm.model_name)
    return GeminiResumeAnalyzer(client)
