"""Custom exception classes for the resume_match application.

This module defines a hierarchy of custom exceptions so that error-producing
code (input capture, the analysis client, startup) and error-handling code
(the controller and the Streamlit UI) share an explicit, type-based contract.
"""

from typing import Optional

from .models import USER_MESSAGES, ErrorCategory, ErrorContext, ErrorSeverity


class ResumeMatchError(Exception):
    """Base class for all application-specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.original_exception = original_exception

    @property
    def user_message(self) -> str:
        """Generic, category-level message suitable for display."""
        return USER_MESSAGES.get(self.category, USER_MESSAGES[ErrorCategory.UNKNOWN])


class InputValidationError(ValueError, ResumeMatchError):
    """Raised when a required document is missing before analysis."""

    def __init__(self, message: str, missing_document: Optional[str] = None, **kwargs):
        ValueError.__init__(self, message)
        ResumeMatchError.__init__(
            self,
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.missing_document = missing_document
        if missing_document:
            self.context.additional_data["missing_document"] = missing_document


class UnsupportedFileTypeError(ValueError, ResumeMatchError):
    """Raised when a non-image file is selected for upload."""

    def __init__(self, message: str, mime_type: Optional[str] = None, **kwargs):
        ValueError.__init__(self, message)
        ResumeMatchError.__init__(
            self,
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.mime_type = mime_type
        self.context.additional_data["mime_type"] = mime_type


class EmptyResponseError(ResumeMatchError):
    """Raised when the model returns no content."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.API_ERROR,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )


class LLMResponseParsingError(ValueError, ResumeMatchError):
    """Raised when the model reply is not JSON or does not fit the result schema."""

    def __init__(self, message: str, raw_response: str = "", **kwargs):
        full_message = message
        if raw_response:
            full_message += f". Raw response snippet: {raw_response[:200]}..."

        ValueError.__init__(self, full_message)
        ResumeMatchError.__init__(
            self,
            message=full_message,
            category=ErrorCategory.PARSING,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.raw_response = raw_response
        self.context.additional_data["response_length"] = len(raw_response)


class ConfigurationError(ResumeMatchError):
    """Raised at startup when a required setting (the API key) is missing."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        if config_key:
            self.context.additional_data["config_key"] = config_key


# Exceptions the UI catches and handles gracefully; system-level exceptions
# such as KeyboardInterrupt propagate.
CATCHABLE_EXCEPTIONS = (
    ResumeMatchError,
    ValueError,
    TypeError,
    KeyError,
    IOError,
    IndexError,
    AttributeError,
    ConnectionError,
)
