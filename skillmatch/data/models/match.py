"""
Match data models for SkillMatch.

Defines the scored association between a requirement and a candidate.
"""

from pydantic import Field

from .base import EmbeddedModel
from .candidate import Candidate


class ScoreBreakdown(EmbeddedModel):
    """Breakdown of the match score by term."""

    required_score: float = 0.0
    preferred_score: float = 0.0
    department_bonus: float = 0.0
    experience_bonus: float = 0.0
    location_bonus: float = 0.0

    @property
    def skills_score(self) -> float:
        """Combined required and preferred skill score."""
        return self.required_score + self.preferred_score

    @property
    def total_score(self) -> float:
        """Calculate total score."""
        return (
            self.required_score
            + self.preferred_score
            + self.department_bonus
            + self.experience_bonus
            + self.location_bonus
        )


class Match(EmbeddedModel):
    """
    One candidate's result against one requirement.

    Only produced for candidates scoring above zero.
    """

    requirement_id: int
    candidate_id: int
    score: float = Field(..., ge=0)
    matching_skills: list[str] = Field(default_factory=list)  # required first, then preferred
    candidate: Candidate
    score_breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
