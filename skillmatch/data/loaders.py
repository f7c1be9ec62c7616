"""
JSON document loaders.

Read candidate records, requirements and search queries from files so the
CLI can feed the matching engine without a database.
"""

import json
from pathlib import Path
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from skillmatch.data.models import Candidate, JobRequest, RequirementSpec, SearchQuery
from skillmatch.utils.constants import SUPPORTED_INPUT_FORMATS
from skillmatch.utils.logger import get_logger

logger = get_logger(__name__)

_candidate_list_adapter = TypeAdapter(list[Candidate])


class DataLoadError(ValueError):
    """Raised when an input document cannot be read or validated."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def _read_json(path: Union[str, Path]) -> Any:
    """Read and decode a JSON file."""
    path = Path(path)

    if path.suffix.lower() not in SUPPORTED_INPUT_FORMATS:
        raise DataLoadError(path, f"unsupported file format '{path.suffix}'")

    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise DataLoadError(path, "file not found") from None
    except json.JSONDecodeError as e:
        raise DataLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise DataLoadError(path, f"invalid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise DataLoadError(path, str(e)) from e


def load_candidates(path: Union[str, Path]) -> list[Candidate]:
    """
    Load candidate records from a JSON array.

    Args:
        path: Path to the JSON file

    Returns:
        List of validated candidates
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise DataLoadError(path, "expected a JSON array of candidates")

    try:
        candidates = _candidate_list_adapter.validate_python(data)
    except ValidationError as e:
        raise DataLoadError(path, str(e)) from e

    logger.info(f"Loaded {len(candidates)} candidates from {path}")
    return candidates


def load_requirement(path: Union[str, Path]) -> RequirementSpec:
    """
    Load a requirement from a JSON object.

    Documents carrying a "title" are read as job requests.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise DataLoadError(path, "expected a JSON object")

    model = JobRequest if "title" in data else RequirementSpec
    try:
        requirement = model.model_validate(data)
    except ValidationError as e:
        raise DataLoadError(path, str(e)) from e

    logger.info(f"Loaded {model.__name__} {requirement.id} from {path}")
    return requirement


def load_search_query(path: Union[str, Path]) -> SearchQuery:
    """Load a search query from a JSON object."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise DataLoadError(path, "expected a JSON object")

    try:
        return SearchQuery.model_validate(data)
    except ValidationError as e:
        raise DataLoadError(path, str(e)) from e
