"""
Aggregation engine for per-application resource totals.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .models import ApplicationStat


class ValidationError(ValueError):
    """Raised when a measurement cannot be folded into the totals."""


@dataclass
class TotalsSummary:
    """Distribution of total time across applications."""
    count: int
    sum: int
    mean: float
    median: float
    min: int
    max: int
    p95: float

    @classmethod
    def from_values(cls, values: list[int]) -> "TotalsSummary | None":
        """Compute the summary from per-application totals."""
        if not values:
            return None
        # Totals can outgrow int64; exact figures stay as Python ints
        arr = np.array(values, dtype=np.float64)
        return cls(
            count=len(values),
            sum=sum(values),
            mean=float(np.mean(arr)),
            median=float(np.median(arr)),
            min=min(values),
            max=max(values),
            p95=float(np.percentile(arr, 95)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "count": self.count,
            "sum": self.sum,
            "mean": round(self.mean, 2),
            "median": round(self.median, 2),
            "min": self.min,
            "max": self.max,
            "p95": round(self.p95, 2),
        }


class Statistics:
    """Accumulator mapping application names to their running totals."""

    COLUMNS = ["name", "cpu_time", "io_wait", "total_time"]

    def __init__(self):
        self._applications: dict[str, ApplicationStat] = {}

    def add(self, name: str, cpu_time: int, io_wait: int) -> ApplicationStat:
        """Fold one measurement into the entry for ``name``.

        The entry is created in its zero state the first time a name is seen.

        Raises:
            ValidationError: if either time is negative. Nothing is mutated.
        """
        if cpu_time < 0:
            raise ValidationError(f"cpu_time must be non-negative for {name!r}, got {cpu_time}")
        if io_wait < 0:
            raise ValidationError(f"io_wait must be non-negative for {name!r}, got {io_wait}")

        stat = self._applications.get(name)
        if stat is None:
            stat = self._applications[name] = ApplicationStat(name=name)
        stat.update(cpu_time, io_wait)
        return stat

    def values(self):
        """Live view of all accumulated stats, in no particular order."""
        return self._applications.values()

    def get(self, name: str) -> ApplicationStat | None:
        return self._applications.get(name)

    def merge(self, other: "Statistics") -> "Statistics":
        """Fold every entry of ``other`` into this accumulator."""
        for stat in other.values():
            self.add(stat.name, stat.cpu_time, stat.io_wait)
        return self

    def summary(self) -> TotalsSummary | None:
        return TotalsSummary.from_values([s.total_time for s in self.values()])

    def to_dataframe(self) -> pd.DataFrame:
        """One row per application, for export."""
        return pd.DataFrame([s.to_dict() for s in self.values()], columns=self.COLUMNS)

    def __len__(self) -> int:
        return len(self._applications)

    def __iter__(self) -> Iterator[ApplicationStat]:
        return iter(self._applications.values())

    def __contains__(self, name: object) -> bool:
        return name in self._applications

    def __repr__(self) -> str:
        return f"Statistics({len(self)} applications)"
