"""
Application-wide constants for SkillMatch.

Scoring weights, bonuses and the experience-level vocabulary used by the
matching engine.
"""

from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "SkillMatch"
APP_DISPLAY_NAME: Final[str] = "SkillMatch Candidate Ranking Engine"
VERSION: Final[str] = "0.1.0"

SUPPORTED_INPUT_FORMATS: Final[tuple[str, ...]] = (".json",)


# =============================================================================
# Experience Levels
# =============================================================================

# Closed ordinal vocabulary; anything else counts as "no level"
EXPERIENCE_LEVELS: Final[dict[str, int]] = {
    "junior": 1,
    "mid": 2,
    "senior": 3,
    "staff": 4,
    "principal": 5,
}


def experience_level_rank(level: str | None) -> int:
    """Return the ordinal for an experience level, 0 when unknown or empty."""
    if not level:
        return 0
    return EXPERIENCE_LEVELS.get(level, 0)


# =============================================================================
# Candidate Skill Defaults
# =============================================================================

DEFAULT_PROFICIENCY_LEVEL: Final[int] = 3
DEFAULT_YEARS_EXPERIENCE: Final[float] = 2.0

MIN_PROFICIENCY_LEVEL: Final[int] = 1
MAX_PROFICIENCY_LEVEL: Final[int] = 5


# =============================================================================
# Scoring Constants
# =============================================================================

REQUIRED_SKILLS_WEIGHT: Final[float] = 3.0
PREFERRED_SKILLS_WEIGHT: Final[float] = 1.0

# Per matched skill: weight * base + proficiency * p + years * y
BASE_SKILL_SCORE_MULTIPLIER: Final[float] = 2.0
PROFICIENCY_BONUS_MULTIPLIER: Final[float] = 0.5
EXPERIENCE_BONUS_MULTIPLIER: Final[float] = 0.1

# Skill list total is scaled by base + bonus * coverage (0.5x .. 1.0x)
COVERAGE_BASE_MULTIPLIER: Final[float] = 0.5
COVERAGE_BONUS_MULTIPLIER: Final[float] = 0.5

DEPARTMENT_MATCH_BONUS: Final[float] = 2.0
EXPERIENCE_LEVEL_MATCH_BONUS: Final[float] = 1.5
EXPERIENCE_LEVEL_PARTIAL_MULTIPLIER: Final[float] = 1.0
LOCATION_MATCH_BONUS: Final[float] = 1.0
