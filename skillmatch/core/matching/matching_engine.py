"""
Candidate-Requirement matching engine.

Scores and ranks candidates against a requirement using weighted required
and preferred skill matching plus department, experience level and location
bonuses. The engine is stateless: it never mutates its inputs and holds only
configuration between calls.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from skillmatch.data.models import (
    Candidate,
    CandidateSkill,
    Match,
    RequirementSpec,
    ScoreBreakdown,
    SearchQuery,
)
from skillmatch.utils.config import MatchingSettings, get_settings
from skillmatch.utils.constants import (
    BASE_SKILL_SCORE_MULTIPLIER,
    COVERAGE_BASE_MULTIPLIER,
    COVERAGE_BONUS_MULTIPLIER,
    DEPARTMENT_MATCH_BONUS,
    EXPERIENCE_BONUS_MULTIPLIER,
    EXPERIENCE_LEVEL_MATCH_BONUS,
    EXPERIENCE_LEVEL_PARTIAL_MULTIPLIER,
    LOCATION_MATCH_BONUS,
    PREFERRED_SKILLS_WEIGHT,
    PROFICIENCY_BONUS_MULTIPLIER,
    REQUIRED_SKILLS_WEIGHT,
    experience_level_rank,
)
from skillmatch.utils.logger import get_logger

logger = get_logger(__name__)


def rank_matches(matches: Iterable[Match]) -> list[Match]:
    """
    Rank matches by score.

    Args:
        matches: Match results in any order

    Returns:
        Sorted list with highest scores first, ties by candidate id ascending
    """
    return sorted(matches, key=lambda m: (-m.score, m.candidate_id))


class MatchEngine:
    """
    Engine for scoring candidates against requirements.

    Score terms:
    - Required skills (weight 3.0) scaled by coverage
    - Preferred skills (weight 1.0) scaled by coverage
    - Department, experience level and location bonuses
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        """
        Initialize the matching engine.

        Args:
            settings: Optional matching settings, defaults to the app settings
        """
        self.settings = settings or get_settings().matching

    def find_matches(
        self,
        requirement: RequirementSpec,
        candidates: Sequence[Candidate],
    ) -> list[Match]:
        """
        Score every candidate against a requirement and rank the matches.

        Args:
            requirement: Job request or constructed search requirement
            candidates: Candidate records to score

        Returns:
            Matches for candidates scoring above zero, best first
        """
        if requirement.is_empty:
            logger.debug(f"Requirement {requirement.id} has no scoring terms, no matches")
            return []

        matches = []
        for candidate in candidates:
            score, matching_skills, breakdown = self.score_candidate(requirement, candidate)
            if score <= 0:
                continue

            matches.append(
                Match(
                    requirement_id=requirement.id,
                    candidate_id=candidate.id,
                    score=score,
                    matching_skills=matching_skills,
                    candidate=candidate,
                    score_breakdown=breakdown,
                )
            )

        logger.debug(
            f"Requirement {requirement.id}: {len(matches)} of {len(candidates)} candidates matched"
        )
        return rank_matches(matches)

    def search_candidates(
        self,
        query: SearchQuery,
        candidates: Sequence[Candidate],
    ) -> list[Match]:
        """
        Run an ad-hoc search with an optional minimum score cutoff.

        Args:
            query: Search criteria including min_match_score
            candidates: Candidate records to score

        Returns:
            Ranked matches scoring at least min_match_score
        """
        matches = self.find_matches(query.to_requirement(), candidates)

        if query.min_match_score > 0:
            before = len(matches)
            matches = [m for m in matches if m.score >= query.min_match_score]
            logger.debug(
                f"Min score {query.min_match_score} dropped {before - len(matches)} matches"
            )

        return matches

    def score_candidate(
        self,
        requirement: RequirementSpec,
        candidate: Candidate,
    ) -> tuple[float, list[str], ScoreBreakdown]:
        """
        Compute a candidate's score against a requirement.

        Returns:
            Tuple of total score, de-duplicated matching skills (required
            first, then preferred) and the per-term breakdown
        """
        skill_lookup = self._build_skill_lookup(candidate)
        matched: list[str] = []

        breakdown = ScoreBreakdown(
            required_score=self._score_skill_list(
                requirement.required_skills, skill_lookup, REQUIRED_SKILLS_WEIGHT, matched
            ),
            preferred_score=self._score_skill_list(
                requirement.preferred_skills, skill_lookup, PREFERRED_SKILLS_WEIGHT, matched
            ),
            department_bonus=self._department_bonus(requirement.department, candidate.department),
            experience_bonus=self._experience_bonus(requirement.experience_level, candidate.level),
            location_bonus=self._location_bonus(requirement.location, candidate.location),
        )

        # A skill listed as both required and preferred is reported once
        matching_skills = list(dict.fromkeys(matched))

        return breakdown.total_score, matching_skills, breakdown

    def _build_skill_lookup(self, candidate: Candidate) -> dict[str, CandidateSkill]:
        """Map skill name to the skill with proficiency and years filled in."""
        defaults = self.settings
        lookup = {}
        for skill in candidate.skills:
            proficiency = defaults.default_proficiency_level
            years = defaults.default_years_experience
            if defaults.use_candidate_skill_values:
                if skill.proficiency_level is not None:
                    proficiency = skill.proficiency_level
                if skill.years_experience is not None:
                    years = skill.years_experience

            lookup[skill.name] = CandidateSkill(
                name=skill.name,
                proficiency_level=proficiency,
                years_experience=years,
            )
        return lookup

    def _score_skill_list(
        self,
        skill_names: Sequence[str],
        skill_lookup: dict[str, CandidateSkill],
        weight: float,
        matching_skills: list[str],
    ) -> float:
        """Score one skill list, appending matched names to matching_skills."""
        if not skill_names:
            return 0.0

        total = 0.0
        matched_count = 0

        for name in skill_names:
            skill = skill_lookup.get(name)
            if skill is None:
                continue

            skill_score = weight * BASE_SKILL_SCORE_MULTIPLIER
            proficiency_bonus = skill.proficiency_level * PROFICIENCY_BONUS_MULTIPLIER
            experience_bonus = skill.years_experience * EXPERIENCE_BONUS_MULTIPLIER

            total += skill_score + proficiency_bonus + experience_bonus
            matched_count += 1
            matching_skills.append(name)

        coverage = matched_count / len(skill_names)
        return total * (COVERAGE_BASE_MULTIPLIER + COVERAGE_BONUS_MULTIPLIER * coverage)

    def _department_bonus(self, required: Optional[str], actual: Optional[str]) -> float:
        if not required or not actual:
            return 0.0
        return DEPARTMENT_MATCH_BONUS if required == actual else 0.0

    def _experience_bonus(self, required: Optional[str], actual: Optional[str]) -> float:
        """Full bonus when the candidate meets the level, partial credit below it."""
        required_rank = experience_level_rank(required)
        if required_rank == 0 or not actual:
            # Unknown requirement level is treated as no requirement
            return 0.0

        actual_rank = experience_level_rank(actual)
        if actual_rank >= required_rank:
            return EXPERIENCE_LEVEL_MATCH_BONUS
        return actual_rank / required_rank * EXPERIENCE_LEVEL_PARTIAL_MULTIPLIER

    def _location_bonus(self, required: Optional[str], actual: Optional[str]) -> float:
        if not required or not actual:
            return 0.0
        return LOCATION_MATCH_BONUS if required == actual else 0.0


# Singleton instance
_match_engine: Optional[MatchEngine] = None


def get_match_engine() -> MatchEngine:
    """
    Get the matching engine singleton instance.

    The engine is rebuilt when the settings were reloaded since it was created.
    """
    global _match_engine
    settings = get_settings().matching
    if _match_engine is None or _match_engine.settings is not settings:
        _match_engine = MatchEngine(settings)
    return _match_engine
