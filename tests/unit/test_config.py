"""
Tests for skillmatch.utils.config — settings defaults and environment overrides.
"""

import pytest
from pydantic import ValidationError

from skillmatch.utils.config import (
    AppSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)


class TestMatchingSettings:
    def test_defaults(self, monkeypatch):
        for var in ("MATCH_DEFAULT_PROFICIENCY_LEVEL", "MATCH_DEFAULT_YEARS_EXPERIENCE",
                    "MATCH_USE_CANDIDATE_SKILL_VALUES"):
            monkeypatch.delenv(var, raising=False)
        settings = MatchingSettings()
        assert settings.default_proficiency_level == 3
        assert settings.default_years_experience == 2.0
        assert settings.use_candidate_skill_values is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MATCH_DEFAULT_PROFICIENCY_LEVEL", "4")
        monkeypatch.setenv("MATCH_USE_CANDIDATE_SKILL_VALUES", "true")
        settings = MatchingSettings()
        assert settings.default_proficiency_level == 4
        assert settings.use_candidate_skill_values is True

    @pytest.mark.parametrize("level", [0, 6])
    def test_proficiency_bounds(self, level):
        with pytest.raises(ValidationError):
            MatchingSettings(default_proficiency_level=level)

    def test_negative_years_rejected(self):
        with pytest.raises(ValidationError):
            MatchingSettings(default_years_experience=-1)


class TestAppSettings:
    def test_testing_environment(self):
        assert AppSettings().environment == "testing"

    def test_nested_settings(self):
        settings = AppSettings()
        assert isinstance(settings.matching, MatchingSettings)
        assert settings.logging.console_output is False

    def test_get_settings_singleton(self):
        assert get_settings() is get_settings()

    def test_reload_settings(self):
        first = get_settings()
        reloaded = reload_settings()
        assert reloaded is not first
        assert get_settings() is reloaded
