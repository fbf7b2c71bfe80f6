"""Report rendering for benchmark comparisons."""

from .console import build_rows, build_table, format_measurement, print_results
from .layout import ColumnLayout, resolve_layout
from .styles import CLASSIFICATION_STYLES, style_for

__all__ = [
    "CLASSIFICATION_STYLES",
    "ColumnLayout",
    "build_rows",
    "build_table",
    "format_measurement",
    "print_results",
    "resolve_layout",
    "style_for",
]
