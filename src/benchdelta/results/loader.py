"""Load benchmark runner output from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import ResultSet

logger = logging.getLogger(__name__)


class ResultsError(Exception):
    """Raised when a result file cannot be read or is malformed."""


def load_result_set(path: str | Path) -> ResultSet:
    """
    Load a result set from a benchmark JSON file.

    Args:
        path: Path to the JSON file written by the benchmark runner

    Returns:
        Parsed ResultSet

    Raises:
        ResultsError: If the file cannot be read, is not JSON, or fails validation
    """
    path = Path(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ResultsError(f"Result file not found: {path}") from e
    except OSError as e:
        raise ResultsError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ResultsError(f"Result file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ResultsError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ResultsError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        result_set = ResultSet.from_dict(data)
    except ValidationError as e:
        raise ResultsError(f"Invalid benchmark results in {path}: {e}") from e

    logger.debug(f"Loaded {len(result_set)} benchmarks from {path}")
    return result_set
