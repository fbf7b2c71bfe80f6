"""Rich styles for comparison outcomes."""

from __future__ import annotations

from benchdelta.stats import Classification

CLASSIFICATION_STYLES: dict[Classification, str] = {
    Classification.IMPROVEMENT: "green",
    Classification.REGRESSION: "red",
    Classification.INCONCLUSIVE: "",
}

HEADER_STYLE = "bold white"
ENTRY_STYLE = "bright_black"
VALUE_STYLE = "white"


def style_for(classification: Classification) -> str:
    """Return the Rich style token for a classification."""
    return CLASSIFICATION_STYLES[classification]
