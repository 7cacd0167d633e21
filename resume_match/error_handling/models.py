"""Classification data attached to every ResumeMatch error."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4


class ErrorSeverity(str, Enum):
    """How prominently an error is shown in the UI."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Where in the analysis flow an error originated."""

    VALIDATION = "validation"
    API_ERROR = "api_error"
    PARSING = "parsing"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Identifiers and key/value details recorded alongside an error.

    ``additional_data`` carries the specifics (missing document, rejected
    MIME type, config key) so they show up in logs without being parsed
    back out of the message.
    """

    error_id: str = field(default_factory=lambda: uuid4().hex[:12])
    timestamp: datetime = field(default_factory=datetime.now)
    component: Optional[str] = None
    additional_data: Dict[str, Any] = field(default_factory=dict)


USER_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "Some input is missing or invalid. Check both documents and try again.",
    ErrorCategory.API_ERROR: "The AI service did not return a usable answer. Please try again.",
    ErrorCategory.PARSING: "The AI response could not be read. Please run the analysis again.",
    ErrorCategory.CONFIGURATION: "ResumeMatch is not fully configured. Check the Gemini API key.",
    ErrorCategory.UNKNOWN: "Something unexpected happened. Please try again.",
}
