from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import math

from chart_highlight.errors import ChartDataError


@dataclass(frozen=True)
class Entry:
    """One data point. Stacked composites carry their sub-values in order."""

    x: float
    y: float
    stack_values: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.x) or not math.isfinite(self.y):
            raise ChartDataError(f"entry coordinates must be finite: ({self.x!r}, {self.y!r})")
        if self.stack_values is not None:
            values = tuple(float(v) for v in self.stack_values)
            object.__setattr__(self, "stack_values", values)
            if len(values) == 0:
                raise ChartDataError("stacked entry requires at least one value")
            if not all(math.isfinite(v) for v in values):
                raise ChartDataError("stacked entry values must be finite")
            total = math.fsum(values)
            if not math.isclose(self.y, total, rel_tol=1e-9, abs_tol=1e-12):
                raise ChartDataError(f"stacked entry y {self.y!r} does not match its sum {total!r}")

    @classmethod
    def stacked(cls, x: float, values: Sequence[float]) -> "Entry":
        vals = tuple(float(v) for v in values)
        return cls(x=float(x), y=math.fsum(vals), stack_values=vals)

    @property
    def is_stacked(self) -> bool:
        return self.stack_values is not None

    @property
    def positive_sum(self) -> float:
        if self.stack_values is None:
            return max(0.0, self.y)
        return float(sum(v for v in self.stack_values if v >= 0.0))

    @property
    def negative_sum(self) -> float:
        # Reported as a positive magnitude.
        if self.stack_values is None:
            return max(0.0, -self.y)
        return float(-sum(v for v in self.stack_values if v < 0.0))

    def stack_ranges(self) -> list[tuple[float, float]]:
        """Data-y span of every stacked segment, in sub-value order.

        Positive values stack upward from zero and negative values stack
        downward from zero, so segment k of an all-positive stack spans the
        partial sums before and after value k.
        """
        if self.stack_values is None:
            return []
        ranges: list[tuple[float, float]] = []
        pos = 0.0
        neg = 0.0
        for value in self.stack_values:
            if value < 0.0:
                ranges.append((neg, neg + value))
                neg += value
            else:
                ranges.append((pos, pos + value))
                pos += value
        return ranges
