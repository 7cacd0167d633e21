"""Root logger setup for ResumeMatch.

``APP_ENV`` picks the console format: readable text in development, one JSON
object per record in production (python-json-logger). Both environments also
write plain-text files under ``LOG_DIRECTORY``: every record to the main log
and ERROR and above to ``error/<error log>``. If the directory cannot be
created the app keeps running with console output only.
"""

import logging
from pathlib import Path

from pythonjsonlogger import jsonlogger

from .settings import get_config

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"

_logging_initialized = False


def setup_logging(log_level=None):
    """Configure the root logger once per process.

    Streamlit re-executes the app script on every interaction, so repeated
    calls are no-ops.
    """
    global _logging_initialized
    if _logging_initialized:
        return

    config = get_config()
    if log_level is None:
        log_level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    setup = _setup_production_logging if config.env.is_production else _setup_development_logging
    setup(log_level)
    _logging_initialized = True


def _reset_root_logger(log_level) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    return root_logger


def _add_file_handlers(root_logger: logging.Logger, formatter: logging.Formatter):
    settings = get_config().logging
    log_dir = Path(settings.log_directory)
    error_dir = log_dir / "error"
    error_dir.mkdir(parents=True, exist_ok=True)

    main_handler = logging.FileHandler(log_dir / settings.main_log_file, encoding="utf-8")
    main_handler.setFormatter(formatter)

    error_handler = logging.FileHandler(error_dir / settings.error_log_file, encoding="utf-8")
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    root_logger.addHandler(main_handler)
    root_logger.addHandler(error_handler)


def _configure(log_level, console_formatter: logging.Formatter, env_name: str):
    root_logger = _reset_root_logger(log_level)

    console = logging.StreamHandler()
    console.setFormatter(console_formatter)
    root_logger.addHandler(console)

    try:
        _add_file_handlers(root_logger, logging.Formatter(TEXT_FORMAT))
    except OSError as e:
        root_logger.warning("File logging disabled, console only: %s", e)
        return

    root_logger.info(
        "%s logging ready (level=%s, dir=%s)",
        env_name,
        logging.getLevelName(log_level),
        get_config().logging.log_directory,
    )


def _setup_development_logging(log_level=logging.INFO):
    _configure(log_level, logging.Formatter(TEXT_FORMAT), "Development")


def _setup_production_logging(log_level=logging.INFO):
    _configure(log_level, jsonlogger.JsonFormatter(JSON_FORMAT), "Production")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_error_with_context(logger, message, error=None):
    """Log at ERROR with traceback, tagging ResumeMatch errors with their id and category."""
    if error is None:
        logger.error(message, exc_info=True)
        return

    context = getattr(error, "context", None)
    category = getattr(error, "category", None)
    extra = {}
    if context is not None:
        extra["error_id"] = context.error_id
        extra.update(context.additional_data)
    if category is not None:
        extra["category"] = getattr(category, "value", category)
    logger.error("%s: %s", message, error, exc_info=True, extra=extra or None)
