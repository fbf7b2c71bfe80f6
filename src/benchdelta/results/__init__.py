"""Benchmark result sets and loaders."""

from .loader import ResultsError, load_result_set
from .models import Benchmark, Measurement, ResultSet

__all__ = [
    "Benchmark",
    "Measurement",
    "ResultSet",
    "ResultsError",
    "load_result_set",
]
