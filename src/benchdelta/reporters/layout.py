"""Which result sets are present in a report."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from benchdelta.results import ResultSet


class ColumnLayout(Enum):
    """Columns shown in the comparison table."""

    CONTROL_ONLY = "control_only"
    TEST_ONLY = "test_only"
    BOTH = "both"

    @property
    def has_control(self) -> bool:
        return self is not ColumnLayout.TEST_ONLY

    @property
    def has_test(self) -> bool:
        return self is not ColumnLayout.CONTROL_ONLY


def resolve_layout(control: ResultSet | None, test: ResultSet | None) -> ColumnLayout:
    """
    Pick the column layout from the result sets that are available.

    Args:
        control: Baseline (remote) results, if any
        test: Candidate (local) results, if any

    Returns:
        The matching ColumnLayout

    Raises:
        ValueError: If neither result set is given
    """
    match (control is not None, test is not None):
        case (True, True):
            return ColumnLayout.BOTH
        case (True, False):
            return ColumnLayout.CONTROL_ONLY
        case (False, True):
            return ColumnLayout.TEST_ONLY
        case _:
            raise ValueError("At least one of control or test results is required")
