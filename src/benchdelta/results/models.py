"""Benchmark result data model."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Measurement(BaseModel):
    """Mean timing of one benchmark entry with its standard error."""

    model_config = ConfigDict(frozen=True)

    entry: str
    mean: float
    sem: float = Field(default=0.0, ge=0)


class Benchmark(BaseModel):
    """Measurements of one benchmark, in the order they were taken."""

    model_config = ConfigDict(frozen=True)

    averages: tuple[Measurement, ...] = ()


class ResultSet(BaseModel):
    """All benchmarks from a single run, keyed by benchmark name."""

    model_config = ConfigDict(frozen=True)

    benchmarks: dict[str, Benchmark] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultSet:
        """Build a result set from parsed runner output."""
        return cls.model_validate(data)

    def benchmark_names(self) -> list[str]:
        """Return benchmark names in file order."""
        return list(self.benchmarks)

    def measurements(self, name: str) -> Sequence[Measurement]:
        """
        Get measurements for a benchmark.

        Args:
            name: Benchmark name

        Returns:
            Measurements in run order, empty if the benchmark is absent
        """
        benchmark = self.benchmarks.get(name)
        if benchmark is None:
            return ()
        return benchmark.averages

    def __len__(self) -> int:
        return len(self.benchmarks)
