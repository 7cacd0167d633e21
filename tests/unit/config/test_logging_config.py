"""Unit tests for logging configuration functionality."""

import logging
import tempfile
from pathlib import Path
from unittest.mock import patch

from pythonjsonlogger import jsonlogger

from resume_match.config.logging_config import (
    _setup_development_logging,
    _setup_production_logging,
)


def _mock_config(log_directory):
    class MockLoggingConfig:
        main_log_file = "app.log"
        error_log_file = "error.log"

    MockLoggingConfig.log_directory = log_directory

    class MockConfig:
        logging = MockLoggingConfig()

    return MockConfig()


def _release_handlers(root_logger):
    # Close and remove all handlers to release file locks
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)


class TestLoggingConfig:
    """Unit tests for logging configuration functions."""

    def test_setup_production_logging_creates_file_handlers(self):
        """Production logging creates console, main file and error file handlers."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch("resume_match.config.logging_config.get_config") as mock_config:
                mock_config.return_value = _mock_config(temp_dir)

                root_logger = logging.getLogger()
                root_logger.handlers.clear()

                try:
                    _setup_production_logging(logging.INFO)

                    handler_types = [type(h).__name__ for h in root_logger.handlers]
                    assert len(handler_types) == 3
                    assert "StreamHandler" in handler_types
                    assert handler_types.count("FileHandler") == 2

                    assert (Path(temp_dir) / "error").exists()
                finally:
                    _release_handlers(root_logger)

    def test_setup_production_logging_handles_io_error(self):
        """Production logging falls back to console-only logging on IO errors."""
        with patch("resume_match.config.logging_config.get_config") as mock_config:
            mock_config.return_value = _mock_config("/nonexistent/readonly/path")

            with patch(
                "pathlib.Path.mkdir",
                side_effect=PermissionError("Mock permission error"),
            ):
                root_logger = logging.getLogger()
                root_logger.handlers.clear()

                try:
                    _setup_production_logging(logging.INFO)

                    handlers = root_logger.handlers
                    assert len(handlers) == 1
                    assert type(handlers[0]) is logging.StreamHandler
                finally:
                    _release_handlers(root_logger)

    def test_production_logging_uses_correct_formatters(self):
        """Console output is JSON; file output stays human-readable."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch("resume_match.config.logging_config.get_config") as mock_config:
                mock_config.return_value = _mock_config(temp_dir)

                root_logger = logging.getLogger()
                root_logger.handlers.clear()

                try:
                    _setup_production_logging(logging.INFO)

                    console_handlers = [
                        h for h in root_logger.handlers
                        if not isinstance(h, logging.FileHandler)
                    ]
                    file_handlers = [
                        h for h in root_logger.handlers
                        if isinstance(h, logging.FileHandler)
                    ]

                    assert len(console_handlers) == 1
                    assert isinstance(console_handlers[0].formatter, jsonlogger.JsonFormatter)
                    assert len(file_handlers) == 2
                    for handler in file_handlers:
                        assert not isinstance(handler.formatter, jsonlogger.JsonFormatter)
                finally:
                    _release_handlers(root_logger)

    def test_development_logging_error_file_only_takes_errors(self):
        """The error log handler is restricted to ERROR and above."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with patch("resume_match.config.logging_config.get_config") as mock_config:
                mock_config.return_value = _mock_config(temp_dir)

                root_logger = logging.getLogger()
                root_logger.handlers.clear()

                try:
                    _setup_development_logging(logging.DEBUG)

                    error_handlers = [
                        h for h in root_logger.handlers
                        if isinstance(h, logging.FileHandler)
                        and h.baseFilename.endswith("error.log")
                    ]
                    assert len(error_handlers) == 1
                    assert error_handlers[0].level == logging.ERROR
                    assert root_logger.level == logging.DEBUG
                finally:
                    _release_handlers(root_logger)
