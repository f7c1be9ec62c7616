"""
Candidate data models for SkillMatch.

Defines the employee records supplied by the data-access layer and scored by
the matching engine.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from skillmatch.utils.constants import MAX_PROFICIENCY_LEVEL, MIN_PROFICIENCY_LEVEL

from .base import EmbeddedModel


class CandidateSkill(EmbeddedModel):
    """Represents a single skill held by a candidate."""

    name: str
    proficiency_level: Optional[int] = Field(
        None, ge=MIN_PROFICIENCY_LEVEL, le=MAX_PROFICIENCY_LEVEL
    )
    years_experience: Optional[float] = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_skill_name(cls, v: str) -> str:
        """Skill names arrive canonical; only surrounding whitespace is removed."""
        v = v.strip()
        if not v:
            raise ValueError("Skill name must not be empty")
        return v


class Candidate(EmbeddedModel):
    """
    An employee considered for a requirement.

    Skills are unique by name; when a name repeats, the first entry wins.
    """

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None  # junior, mid, senior, staff, principal
    location: Optional[str] = None
    skills: list[CandidateSkill] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skill_names(cls, v: Any) -> Any:
        """Accept bare skill names alongside full skill objects."""
        if isinstance(v, (list, tuple, set, frozenset)):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    @field_validator("skills")
    @classmethod
    def unique_skill_names(cls, v: list[CandidateSkill]) -> list[CandidateSkill]:
        """Drop repeated skill names, keeping the first occurrence."""
        seen: set[str] = set()
        unique = []
        for skill in v:
            if skill.name in seen:
                continue
            seen.add(skill.name)
            unique.append(skill)
        return unique

    @property
    def skill_names(self) -> list[str]:
        """Get list of all skill names."""
        return [skill.name for skill in self.skills]
