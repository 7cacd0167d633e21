"""Error handling module for the resume_match application."""

from .exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
    EmptyResponseError,
    InputValidationError,
    LLMResponseParsingError,
    ResumeMatchError,
    UnsupportedFileTypeError,
)
# StreamlitErrorBoundary is imported from .boundaries directly
from .models import ErrorCategory, ErrorContext, ErrorSeverity

__all__ = [
    # Exceptions
    "CATCHABLE_EXCEPTIONS",
    "ConfigurationError",
    "EmptyResponseError",
    "InputValidationError",
    "LLMResponseParsingError",
    "ResumeMatchError",
    "UnsupportedFileTypeError",
    # Models
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
]
