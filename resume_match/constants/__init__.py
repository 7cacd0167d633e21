"""Constants package for centralized configuration values."""

from resume_match.constants.config_constants import ConfigConstants
from resume_match.constants.ui_constants import UIConstants

__all__ = ["ConfigConstants", "UIConstants"]
