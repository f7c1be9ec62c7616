"""
Pydantic data models for SkillMatch.

This module provides all models consumed and produced by the matching engine.
"""

# Base models
from .base import EmbeddedModel

# Candidate models
from .candidate import Candidate, CandidateSkill

# Requirement models
from .requirement import JobRequest, RequirementSpec, SearchQuery

# Match models
from .match import Match, ScoreBreakdown

__all__ = [
    # Base
    "EmbeddedModel",
    # Candidate
    "Candidate",
    "CandidateSkill",
    # Requirement
    "JobRequest",
    "RequirementSpec",
    "SearchQuery",
    # Match
    "Match",
    "ScoreBreakdown",
]
