"""Configuration module for the resume_match application."""

from .logging_config import get_logger, log_error_with_context, setup_logging
from .settings import AppConfig, get_config, reload_config

__all__ = [
    "AppConfig",
    "get_logger",
    "log_error_with_context",
    "setup_logging",
    "get_config",
    "reload_config",
]
