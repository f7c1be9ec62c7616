"""
Configuration management for SkillMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from skillmatch.utils.constants import (
    DEFAULT_PROFICIENCY_LEVEL,
    DEFAULT_YEARS_EXPERIENCE,
    MAX_PROFICIENCY_LEVEL,
    MIN_PROFICIENCY_LEVEL,
)


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "skillmatch"


class MatchingSettings(BaseSettings):
    """Matching engine configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # Values assigned to every candidate skill until real per-skill data is wired in
    default_proficiency_level: int = Field(
        DEFAULT_PROFICIENCY_LEVEL, ge=MIN_PROFICIENCY_LEVEL, le=MAX_PROFICIENCY_LEVEL
    )
    default_years_experience: float = Field(DEFAULT_YEARS_EXPERIENCE, ge=0)

    # Read proficiency/years from the candidate's skills when they are present
    use_candidate_skill_values: bool = False


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "skillmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = False


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "SkillMatch"
    version: str = "0.1.0"
    description: str = "Candidate ranking engine for job requests and skill searches"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
