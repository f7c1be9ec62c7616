"""
Utility modules for SkillMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Scoring constants and the experience-level vocabulary
"""

from skillmatch.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
)
from skillmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    EXPERIENCE_LEVELS,
    experience_level_rank,
)
from skillmatch.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "EXPERIENCE_LEVELS",
    "experience_level_rank",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
