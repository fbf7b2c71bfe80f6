"""Benchmark comparison with delta-method confidence intervals."""

from benchdelta.config import ReportConfig
from benchdelta.reporters import build_table, print_results
from benchdelta.results import Benchmark, Measurement, ResultSet, load_result_set
from benchdelta.stats import ChangeResult, Classification, classify_change, estimate_ratio

__version__ = "0.1.0"

__all__ = [
    "Benchmark",
    "ChangeResult",
    "Classification",
    "Measurement",
    "ReportConfig",
    "ResultSet",
    "build_table",
    "classify_change",
    "estimate_ratio",
    "load_result_set",
    "print_results",
]
