"""
Requirement data models for SkillMatch.

A job request and an ad-hoc search query both reduce to a RequirementSpec,
which is the only shape the matching engine scores against.
"""

from typing import Optional

from pydantic import Field, field_validator

from .base import EmbeddedModel


def _clean_skill_names(names: list[str]) -> list[str]:
    """Strip surrounding whitespace and drop blank names."""
    return [n.strip() for n in names if n.strip()]


class RequirementSpec(EmbeddedModel):
    """Skills and soft attributes a candidate is scored against."""

    id: int = 0  # 0 for ad-hoc searches
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    department: Optional[str] = None
    experience_level: Optional[str] = None  # junior, mid, senior, staff, principal
    location: Optional[str] = None

    @field_validator("required_skills", "preferred_skills")
    @classmethod
    def strip_skill_names(cls, v: list[str]) -> list[str]:
        """Skill names are compared exactly, so only whitespace is removed."""
        return _clean_skill_names(v)

    @property
    def is_empty(self) -> bool:
        """True when no term of the score can be non-zero."""
        return not (
            self.required_skills
            or self.preferred_skills
            or self.department
            or self.experience_level
            or self.location
        )


class JobRequest(RequirementSpec):
    """
    A formal staffing request raised by a team.

    Scored directly, since every job request is a RequirementSpec.
    """

    title: str
    description: Optional[str] = None
    priority: Optional[str] = None  # e.g., "low", "medium", "high"
    status: Optional[str] = None  # e.g., "open", "in_progress", "closed"
    created_by: Optional[int] = None


class SearchQuery(EmbeddedModel):
    """Free-text/filtered search over candidates."""

    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    department: Optional[str] = None
    experience_level: Optional[str] = None
    location: Optional[str] = None
    min_match_score: float = 0.0  # 0 disables the cutoff

    @field_validator("required_skills", "preferred_skills")
    @classmethod
    def strip_skill_names(cls, v: list[str]) -> list[str]:
        return _clean_skill_names(v)

    def to_requirement(self) -> RequirementSpec:
        """Bridge the query into the requirement shape the engine scores."""
        return RequirementSpec(
            required_skills=list(self.required_skills),
            preferred_skills=list(self.preferred_skills),
            department=self.department,
            experience_level=self.experience_level,
            location=self.location,
        )
