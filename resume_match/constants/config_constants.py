"""Default values behind every environment-overridable setting."""

from typing import Final


class ConfigConstants:
    """Fallbacks used by ``resume_match.config.settings`` when a variable is unset."""

    # Gemini
    DEFAULT_MODEL: Final[str] = "gemini-2.0-flash"
    RESPONSE_MIME_TYPE: Final[str] = "application/json"
    # Used when an image data URI carries no MIME type
    DEFAULT_IMAGE_MIME_TYPE: Final[str] = "image/jpeg"

    # Streamlit page
    DEFAULT_PAGE_TITLE: Final[str] = "ResumeMatch AI"
    DEFAULT_PAGE_ICON: Final[str] = "🎯"
    DEFAULT_LAYOUT: Final[str] = "wide"

    # Log output
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    DEFAULT_LOG_DIRECTORY: Final[str] = "instance/logs"
    DEFAULT_MAIN_LOG_FILE: Final[str] = "app.log"
    DEFAULT_ERROR_LOG_FILE: Final[str] = "error.log"

    DEFAULT_ENVIRONMENT: Final[str] = "development"
