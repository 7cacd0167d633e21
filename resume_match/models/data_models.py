"""Core data models for documents, analysis results and UI state."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InputMode(str, Enum):
    """How a document is being captured."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"


class AnalysisStatus(str, Enum):
    """States of the analysis workflow."""

    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class ScoreBand(str, Enum):
    """Display tier for a match percentage."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def color(self) -> str:
        return _BAND_COLORS[self]


_BAND_COLORS = {
    ScoreBand.EXCELLENT: "#16a34a",
    ScoreBand.GOOD: "#2563eb",
    ScoreBand.FAIR: "#ca8a04",
    ScoreBand.POOR: "#dc2626",
}


class DocumentInput(BaseModel):
    """One user-supplied document, as pasted text and/or an uploaded image.

    ``image`` holds a base64 data URI (``data:image/png;base64,...``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = ""
    image: Optional[str] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")

    def has_content(self) -> bool:
        """True when the document carries non-blank text or an image."""
        return bool(self.text.strip()) or bool(self.image)


class AnalysisResult(BaseModel):
    """Structured comparison of a resume against a job description.

    Field aliases match the JSON keys the model is asked to return.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    match_percentage: int = Field(alias="matchPercentage", ge=0, le=100)
    summary: str
    matching_skills: List[str] = Field(alias="matchingSkills")
    missing_skills: List[str] = Field(alias="missingSkills")
    improvement_tips: List[str] = Field(alias="improvementTips")
    job_title_detected: str = Field(alias="jobTitleDetected")

    @field_validator("match_percentage", mode="before")
    @classmethod
    def round_fractional_score(cls, value):
        # The response schema declares a generic number.
        if isinstance(value, float):
            return round(value)
        return value
