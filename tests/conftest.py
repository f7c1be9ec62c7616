"""
Shared test fixtures for the SkillMatch test suite.

Sets environment variables before any skillmatch imports so settings are
built for testing, then provides factory fixtures for the engine models.
"""

import os

# === Set environment BEFORE any skillmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

import json
from typing import Any, Optional

import pytest

from skillmatch.core.matching.matching_engine import MatchEngine
from skillmatch.data.models import (
    Candidate,
    JobRequest,
    RequirementSpec,
    SearchQuery,
)
from skillmatch.utils.config import MatchingSettings


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build Candidate models."""

    def _factory(
        id: int = 1,
        skills: Optional[list[Any]] = None,
        department: Optional[str] = "Engineering",
        level: Optional[str] = "senior",
        location: Optional[str] = "NY",
        name: Optional[str] = None,
        **kwargs,
    ) -> Candidate:
        if skills is None:
            skills = ["python"]
        return Candidate(
            id=id,
            name=name or f"Employee {id}",
            skills=skills,
            department=department,
            level=level,
            location=location,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_requirement():
    """Factory that returns a callable to build RequirementSpec models."""

    def _factory(
        id: int = 7,
        required_skills: Optional[list[str]] = None,
        preferred_skills: Optional[list[str]] = None,
        department: Optional[str] = "Engineering",
        experience_level: Optional[str] = "senior",
        location: Optional[str] = "NY",
    ) -> RequirementSpec:
        if required_skills is None:
            required_skills = ["python"]
        return RequirementSpec(
            id=id,
            required_skills=required_skills,
            preferred_skills=preferred_skills or [],
            department=department,
            experience_level=experience_level,
            location=location,
        )

    return _factory


@pytest.fixture
def empty_requirement():
    return RequirementSpec()


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_settings():
    return MatchingSettings(
        default_proficiency_level=3,
        default_years_experience=2.0,
        use_candidate_skill_values=False,
    )


@pytest.fixture
def matching_engine(matching_settings):
    return MatchEngine(settings=matching_settings)


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_candidates(make_candidate):
    return [
        make_candidate(id=1, name="Ada", skills=["python", "django", "postgresql"]),
        make_candidate(id=2, name="Grace", skills=["java", "spring"], level="mid", location="SF"),
        make_candidate(id=3, name="Linus", skills=["c", "linux"], department="Operations",
                       level="principal", location="Helsinki"),
        make_candidate(id=4, name="Guido", skills=["python"], department=None, level=None, location=None),
    ]


@pytest.fixture
def sample_job_request():
    return JobRequest(
        id=42,
        title="Backend Engineer",
        description="Build the staffing API",
        required_skills=["python", "postgresql"],
        preferred_skills=["django", "docker"],
        department="Engineering",
        experience_level="senior",
        location="NY",
        priority="high",
        status="open",
    )


@pytest.fixture
def sample_search_query():
    return SearchQuery(
        required_skills=["python"],
        preferred_skills=["django"],
        department="Engineering",
        experience_level="senior",
        location="NY",
        min_match_score=0.0,
    )


@pytest.fixture
def write_json(tmp_path):
    """Factory that writes a JSON document to a temporary file."""

    def _write(name: str, data: Any):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def candidates_file(write_json, sample_candidates):
    return write_json(
        "candidates.json",
        [c.model_dump(mode="json") for c in sample_candidates],
    )


@pytest.fixture
def job_request_file(write_json, sample_job_request):
    return write_json("job_request.json", sample_job_request.model_dump(mode="json"))
