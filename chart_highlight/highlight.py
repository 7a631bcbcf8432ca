from __future__ import annotations

from dataclasses import dataclass

from chart_highlight.axis import AXIS_PRIMARY, AxisBinding


@dataclass(frozen=True)
class Highlight:
    """A resolved selection in both data space and pixel space."""

    x: float
    y: float
    x_px: float
    y_px: float
    dataset_index: int
    axis: AxisBinding = AXIS_PRIMARY
    # -1 selects the whole entry.
    stack_index: int = -1

    def __post_init__(self) -> None:
        if self.dataset_index < 0:
            raise ValueError("dataset_index must be >= 0")
        if self.stack_index < -1:
            raise ValueError("stack_index must be >= -1")

    @property
    def is_stacked(self) -> bool:
        return self.stack_index >= 0
