"""Ratio-of-means comparison using the delta method."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

import numpy as np

# Two-sided 95% normal quantile
Z_95 = 1.96


class Classification(str, Enum):
    """Outcome of comparing a test measurement against its control."""

    IMPROVEMENT = "improvement"
    REGRESSION = "regression"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class ChangeResult:
    """Relative change between control and test, in percent."""

    label: str
    pct: float
    ci95: float
    classification: Classification

    def __iter__(self) -> Iterator[object]:
        return iter((self.label, self.pct, self.ci95, self.classification))

    @property
    def is_significant(self) -> bool:
        """Whether the 95% interval excludes zero."""
        return self.classification is not Classification.INCONCLUSIVE


def estimate_ratio(
    mean_control: float,
    mean_test: float,
    sem_control: float,
    sem_test: float,
) -> tuple[float, float]:
    """
    Estimate the relative change (test - control) / control and its spread.

    Both means are treated as noisy estimates of unknown true means. A
    first-order Taylor expansion of the ratio around the true means gives a
    bias-corrected estimate of the mean and an approximate variance.

    Inputs are not validated. A zero control mean yields nan/inf.

    Args:
        mean_control: Baseline mean (divisor, must be nonzero)
        mean_test: Candidate mean
        sem_control: Standard error of the baseline mean
        sem_test: Standard error of the candidate mean

    Returns:
        Tuple of (mean, std_dev) of the relative change
    """
    mc = np.float64(mean_control)
    mt = np.float64(mean_test)
    sc = np.float64(sem_control)
    st = np.float64(sem_test)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        mean = (mt - mc) / mc - (sc**2 * mt) / mc**3
        variance = (st / mc) ** 2 + (sc**2 * mt**2) / mc**4

    return float(mean), float(np.sqrt(variance))


_TENTH = Decimal("0.1")
# Wide enough for any finite float64
_ROUNDING = Context(prec=400, rounding=ROUND_HALF_UP)


def _round_tenth(value: float) -> float:
    """Round to one decimal place, ties away from zero."""
    if not np.isfinite(value):
        return value
    return float(Decimal(value).quantize(_TENTH, context=_ROUNDING))


def _format_label(pct: float, ci95: float) -> str:
    sign = "+" if pct >= 0 else ""
    text = f"{sign}{pct:.1f} %"
    if ci95 > 0:
        text += f" +- {ci95:.1f} %"
    return text


def classify_change(
    mean_control: float,
    mean_test: float,
    sem_control: float,
    sem_test: float,
) -> ChangeResult:
    """
    Classify the change from control to test at 95% confidence.

    Lower is better: a change whose whole interval lies below zero is an
    improvement, one entirely above zero is a regression.

    Args:
        mean_control: Baseline mean (must be nonzero)
        mean_test: Candidate mean
        sem_control: Standard error of the baseline mean
        sem_test: Standard error of the candidate mean

    Returns:
        ChangeResult with label, percent change, CI half-width and classification
    """
    mean, std_dev = estimate_ratio(mean_control, mean_test, sem_control, sem_test)

    # + 0.0 folds -0.0 into 0.0
    pct = _round_tenth(mean * 100) + 0.0
    ci95 = _round_tenth(100 * Z_95 * std_dev)

    if pct + ci95 < 0:
        classification = Classification.IMPROVEMENT
    elif pct - ci95 > 0:
        classification = Classification.REGRESSION
    else:
        classification = Classification.INCONCLUSIVE

    return ChangeResult(
        label=_format_label(pct, ci95),
        pct=pct,
        ci95=ci95,
        classification=classification,
    )
