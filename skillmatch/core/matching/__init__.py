"""Candidate-requirement matching engine module."""

from .matching_engine import (
    MatchEngine,
    get_match_engine,
    rank_matches,
)

__all__ = [
    "MatchEngine",
    "get_match_engine",
    "rank_matches",
]
