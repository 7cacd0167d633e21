"""Environment-driven settings for ResumeMatch.

Every value comes from an environment variable (a ``.env`` file at the
project root is loaded first, without overriding variables that are already
set) with a default from ``ConfigConstants``. ``get_config()`` builds the
settings once; services receive the pieces they need as arguments.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from resume_match.constants.config_constants import ConfigConstants

_ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE)


def _env(name: str, default: str) -> Callable[[], str]:
    """Dataclass default factory reading ``name`` at construction time."""
    return lambda: os.getenv(name, default)


def _env_api_key() -> str:
    # API_KEY is the variable name older deployments used.
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")


@dataclass
class LLMConfig:
    """Gemini credentials and model selection."""

    gemini_api_key: str = field(default_factory=_env_api_key)
    model_name: str = field(default_factory=_env("GEMINI_MODEL", ConfigConstants.DEFAULT_MODEL))

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.strip())


@dataclass
class UIConfig:
    page_title: str = field(default_factory=_env("UI_PAGE_TITLE", ConfigConstants.DEFAULT_PAGE_TITLE))
    page_icon: str = field(default_factory=_env("UI_PAGE_ICON", ConfigConstants.DEFAULT_PAGE_ICON))
    layout: str = field(default_factory=_env("UI_LAYOUT", ConfigConstants.DEFAULT_LAYOUT))


@dataclass
class LoggingConfig:
    log_level: str = field(default_factory=_env("LOG_LEVEL", ConfigConstants.DEFAULT_LOG_LEVEL))
    log_directory: str = field(
        default_factory=_env("LOG_DIRECTORY", ConfigConstants.DEFAULT_LOG_DIRECTORY)
    )
    main_log_file: str = field(
        default_factory=_env("LOG_MAIN_FILE", ConfigConstants.DEFAULT_MAIN_LOG_FILE)
    )
    error_log_file: str = field(
        default_factory=_env("LOG_ERROR_FILE", ConfigConstants.DEFAULT_ERROR_LOG_FILE)
    )


@dataclass
class EnvironmentConfig:
    environment: str = field(
        default_factory=lambda: os.getenv("APP_ENV", ConfigConstants.DEFAULT_ENVIRONMENT).lower()
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@dataclass
class AppConfig:
    """All settings, grouped by concern."""

    llm: LLMConfig = field(default_factory=LLMConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    env: EnvironmentConfig = field(default_factory=EnvironmentConfig)

    def __post_init__(self):
        # Production defaults to WARNING unless LOG_LEVEL is set explicitly.
        if self.env.is_production and "LOG_LEVEL" not in os.environ:
            self.logging.log_level = "WARNING"


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the process-wide settings, building them on first use."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def reload_config() -> AppConfig:
    """Re-read the environment and replace the process-wide settings."""
    global _config
    _config = AppConfig()
    return _config
