"""Report configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """Labels and number formatting for the comparison table."""

    control_label: str = Field(
        default="Remote (Merge Base)",
        description="Header of the baseline column",
    )
    test_label: str = Field(
        default="Local (Current Branch)",
        description="Header of the candidate column",
    )
    diff_label: str = "Diff"
    unit: str = "ms"
    z_value: float = Field(
        default=1.96,
        gt=0,
        description="Multiplier applied to sem for the displayed intervals",
    )
    decimals: int = Field(default=2, ge=0)
    title: str | None = None
