"""Models module for the resume_match application."""

from resume_match.models.data_models import (
    AnalysisResult,
    AnalysisStatus,
    DocumentInput,
    InputMode,
    ScoreBand,
)

__all__ = [
    "AnalysisResult",
    "AnalysisStatus",
    "DocumentInput",
    "InputMode",
    "ScoreBand",
]
