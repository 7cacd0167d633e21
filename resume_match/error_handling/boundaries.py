"""
Streamlit error boundaries.

A boundary wraps one piece of page rendering. If it raises one of
``CATCHABLE_EXCEPTIONS``, the failure is logged with its error id and a
message is drawn in its place, so the rest of the page still renders.
"""

import functools
import traceback
from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st

from .exceptions import CATCHABLE_EXCEPTIONS, ResumeMatchError
from .models import ErrorContext, ErrorSeverity
from ..config.logging_config import get_logger, log_error_with_context

logger = get_logger(__name__)


class StreamlitErrorBoundary:
    """Catches rendering errors for a named component and reports them on the page."""

    def __init__(
        self,
        component_name: str,
        show_error_details: bool = False,
        fallback_message: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    ):
        self.component_name = component_name
        self.show_error_details = show_error_details
        self.fallback_message = fallback_message or f"{component_name} could not be displayed"
        self.severity = severity

    def __call__(self, func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CATCHABLE_EXCEPTIONS as e:
                self.handle_error(e, func.__name__)
                return None

        return wrapper

    def handle_error(self, error: Exception, operation: str) -> str:
        """Log ``error`` and render a message for it. Returns the error id."""
        if isinstance(error, ResumeMatchError):
            error.context.component = error.context.component or self.component_name
            error_id = error.context.error_id
        else:
            error_id = ErrorContext(component=self.component_name).error_id

        log_error_with_context(
            logger, f"[{error_id}] {self.component_name}.{operation} failed", error
        )
        self._render(error, error_id)
        return error_id

    def _render(self, error: Exception, error_id: str):
        message = self.fallback_message
        if isinstance(error, ResumeMatchError):
            message = f"{message}: {error.user_message}"

        if self.severity in (ErrorSeverity.CRITICAL, ErrorSeverity.HIGH):
            st.error(f"❌ {message}")
            st.caption(f"Error ID: {error_id}. Refresh the page if this keeps happening.")
        elif self.severity == ErrorSeverity.MEDIUM:
            st.warning(f"⚠️ {message}")
        else:
            st.info(f"ℹ️ {message}")

        if self.show_error_details:
            with st.expander("Technical details"):
                st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


@contextmanager
def error_boundary(
    component_name: str,
    severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    show_details: bool = False,
    fallback_message: Optional[str] = None,
):
    """``with`` form of :class:`StreamlitErrorBoundary`."""
    boundary = StreamlitErrorBoundary(
        component_name=component_name,
        show_error_details=show_details,
        fallback_message=fallback_message,
        severity=severity,
    )
    try:
        yield boundary
    except CATCHABLE_EXCEPTIONS as e:
        boundary.handle_error(e, "render")


def safe_streamlit_component(
    component_name: str,
    severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    show_details: bool = False,
    fallback_message: Optional[str] = None,
):
    """Decorator form of :class:`StreamlitErrorBoundary`."""
    return StreamlitErrorBoundary(
        component_name=component_name,
        show_error_details=show_details,
        fallback_message=fallback_message,
        severity=severity,
    )
