"""Statistical comparison of benchmark measurements."""

from .ratio import ChangeResult, Classification, classify_change, estimate_ratio

__all__ = [
    "ChangeResult",
    "Classification",
    "classify_change",
    "estimate_ratio",
]
