from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

from chart_highlight.axis import AXIS_PRIMARY, AxisBinding, Rounding, validate_axis, validate_rounding
from chart_highlight.entries import Entry
from chart_highlight.errors import ChartDataError


class DataSet:
    """Read-only query view over entries ordered by x.

    Entries are stably sorted on construction, so entries sharing an x keep
    their insertion order. Lookups by x are binary searches over a float64
    copy of the x column.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        *,
        label: str | None = None,
        axis: AxisBinding = AXIS_PRIMARY,
        highlight_enabled: bool = True,
    ) -> None:
        items = list(entries)
        for i, entry in enumerate(items):
            if not isinstance(entry, Entry):
                raise ChartDataError(f"dataset item at index {i} is not an Entry: {type(entry)!r}")
        xs = np.asarray([e.x for e in items], dtype=np.float64)
        order = np.argsort(xs, kind="stable")
        self._entries: tuple[Entry, ...] = tuple(items[int(i)] for i in order)
        self._x = xs[order]
        self._label = label
        self._axis = validate_axis(axis)
        self._highlight_enabled = bool(highlight_enabled)

    def __repr__(self) -> str:
        return f"DataSet(label={self._label!r}, axis={self._axis!r}, entries={len(self._entries)})"

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def axis(self) -> AxisBinding:
        return self._axis

    @property
    def highlight_enabled(self) -> bool:
        return self._highlight_enabled

    @property
    def x_min(self) -> float:
        self._require_entries()
        return float(self._x[0])

    @property
    def x_max(self) -> float:
        self._require_entries()
        return float(self._x[-1])

    @property
    def y_min(self) -> float:
        self._require_entries()
        return min(-e.negative_sum if e.is_stacked else e.y for e in self._entries)

    @property
    def y_max(self) -> float:
        self._require_entries()
        return max(e.positive_sum if e.is_stacked else e.y for e in self._entries)

    @property
    def is_stacked(self) -> bool:
        return any(e.is_stacked for e in self._entries)

    def entry_index(self, x: float, rounding: Rounding = "closest") -> int:
        """Index of the entry matching ``x`` under ``rounding``, or -1."""
        validate_rounding(rounding)
        n = self._x.size
        if n == 0 or not np.isfinite(x):
            return -1
        up = int(np.searchsorted(self._x, x, side="left"))
        down = int(np.searchsorted(self._x, x, side="right")) - 1
        if rounding == "up":
            return up if up < n else -1
        if rounding == "down":
            return down
        if up >= n:
            return down
        if down < 0:
            return up
        if abs(self._x[up] - x) < abs(x - self._x[down]):
            return up
        return down

    def entry_for_x(self, x: float, rounding: Rounding = "closest") -> Entry | None:
        idx = self.entry_index(x, rounding)
        if idx < 0:
            return None
        return self._entries[idx]

    def entry_at_or_after(self, x: float) -> Entry | None:
        return self.entry_for_x(x, "up")

    def entry_at_or_before(self, x: float) -> Entry | None:
        return self.entry_for_x(x, "down")

    def entry_for_index(self, index: int) -> Entry | None:
        if index < 0 or index >= len(self._entries):
            return None
        return self._entries[index]

    def entries_for_x(self, x: float) -> list[Entry]:
        lo = int(np.searchsorted(self._x, x, side="left"))
        hi = int(np.searchsorted(self._x, x, side="right"))
        return list(self._entries[lo:hi])

    def _require_entries(self) -> None:
        if not self._entries:
            raise ChartDataError("dataset is empty")


class ChartData:
    """Ordered collection of datasets plotted on one chart."""

    def __init__(self, datasets: Sequence[DataSet] = ()) -> None:
        self._datasets: tuple[DataSet, ...] = tuple(datasets)

    def __iter__(self) -> Iterator[DataSet]:
        return iter(self._datasets)

    def __len__(self) -> int:
        return len(self._datasets)

    @property
    def datasets(self) -> tuple[DataSet, ...]:
        return self._datasets

    @property
    def dataset_count(self) -> int:
        return len(self._datasets)

    @property
    def entry_count(self) -> int:
        return sum(ds.entry_count for ds in self._datasets)

    @property
    def is_empty(self) -> bool:
        return self.entry_count == 0

    def get_dataset(self, index: int) -> DataSet | None:
        if index < 0 or index >= len(self._datasets):
            return None
        return self._datasets[index]
