"""Tests for the exception hierarchy and Streamlit error boundaries."""

from unittest.mock import MagicMock, patch

import pytest

from resume_match.error_handling.boundaries import (
    error_boundary,
    safe_streamlit_component,
)
from resume_match.error_handling.exceptions import (
    CATCHABLE_EXCEPTIONS,
    ConfigurationError,
    EmptyResponseError,
    InputValidationError,
    LLMResponseParsingError,
    ResumeMatchError,
    UnsupportedFileTypeError,
)
from resume_match.error_handling.models import (
    USER_MESSAGES,
    ErrorCategory,
    ErrorSeverity,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            InputValidationError("missing", missing_document="resume"),
            UnsupportedFileTypeError("bad file", mime_type="application/pdf"),
            LLMResponseParsingError("bad json", raw_response="{"),
        ],
    )
    def test_input_errors_are_value_errors(self, error):
        assert isinstance(error, ValueError)
        assert isinstance(error, ResumeMatchError)

    def test_categories(self):
        assert InputValidationError("x").category == ErrorCategory.VALIDATION
        assert EmptyResponseError("x").category == ErrorCategory.API_ERROR
        assert LLMResponseParsingError("x").category == ErrorCategory.PARSING
        assert ConfigurationError("x").category == ErrorCategory.CONFIGURATION

    def test_parsing_error_includes_truncated_snippet(self):
        raw = "x" * 500
        error = LLMResponseParsingError("Not JSON", raw_response=raw)

        assert error.message.startswith("Not JSON. Raw response snippet: ")
        assert "x" * 200 in error.message
        assert "x" * 201 not in error.message
        assert error.context.additional_data["response_length"] == 500

    def test_user_message_is_category_level(self):
        error = ConfigurationError("GEMINI_API_KEY unset", config_key="GEMINI_API_KEY")
        assert error.user_message == USER_MESSAGES[ErrorCategory.CONFIGURATION]

    def test_system_exits_are_not_catchable(self):
        assert not issubclass(KeyboardInterrupt, CATCHABLE_EXCEPTIONS)
        assert not issubclass(SystemExit, CATCHABLE_EXCEPTIONS)


class TestErrorBoundaries:
    @patch("resume_match.error_handling.boundaries.st", new_callable=MagicMock)
    def test_decorator_shows_error_and_returns_none(self, mock_st):
        @safe_streamlit_component("results", severity=ErrorSeverity.HIGH)
        def render():
            raise ConfigurationError("broken")

        assert render() is None
        mock_st.error.assert_called_once()
        assert USER_MESSAGES[ErrorCategory.CONFIGURATION] in mock_st.error.call_args[0][0]

    @patch("resume_match.error_handling.boundaries.st", new_callable=MagicMock)
    def test_decorator_passes_through_return_value(self, mock_st):
        @safe_streamlit_component("inputs")
        def render():
            return "rendered"

        assert render() == "rendered"
        mock_st.error.assert_not_called()
        mock_st.warning.assert_not_called()

    @patch("resume_match.error_handling.boundaries.st", new_callable=MagicMock)
    def test_context_manager_uses_warning_for_medium(self, mock_st):
        with error_boundary("inputs", fallback_message="Input panel failed"):
            raise KeyError("resume_slot")

        mock_st.warning.assert_called_once()
        assert "Input panel failed" in mock_st.warning.call_args[0][0]

    @patch("resume_match.error_handling.boundaries.st", new_callable=MagicMock)
    def test_keyboard_interrupt_propagates(self, mock_st):
        @safe_streamlit_component("inputs")
        def render():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            render()
