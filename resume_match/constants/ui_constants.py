"""User-facing strings and display thresholds."""

from typing import Final, List


class UIConstants:
    """Constants for messages and score banding shown in the UI."""

    # Validation messages
    MISSING_RESUME_MESSAGE: Final[str] = "Please provide your resume (text or image)."
    MISSING_JOB_DESCRIPTION_MESSAGE: Final[str] = "Please provide a job description."
    GENERIC_ANALYSIS_ERROR: Final[str] = (
        "Something went wrong during analysis. Please try again."
    )
    NO_RESPONSE_MESSAGE: Final[str] = "No response from AI"
    UNSUPPORTED_FILE_MESSAGE: Final[str] = (
        "Note: For best results with non-image files like PDF/Word, please copy and "
        "paste the text into the text area. Direct PDF processing requires "
        "specialized parsers."
    )

    # Document labels
    RESUME_LABEL: Final[str] = "RESUME"
    JOB_DESCRIPTION_LABEL: Final[str] = "JOB DESCRIPTION"
    FILE_TEXT_PREFIX: Final[str] = "File: "

    # Score bands (lower bounds, inclusive)
    EXCELLENT_THRESHOLD: Final[int] = 80
    GOOD_THRESHOLD: Final[int] = 60
    FAIR_THRESHOLD: Final[int] = 40

    # Result placeholders
    DEFAULT_JOB_TITLE: Final[str] = "Candidate Profile"
    NO_MATCHING_SKILLS: Final[str] = "No significant matching skills identified."
    NO_MISSING_SKILLS: Final[str] = "You have all the required skills mentioned!"

    # Uploader hints
    IMAGE_UPLOAD_TYPES: Final[List[str]] = ["png", "jpg", "jpeg", "webp"]
