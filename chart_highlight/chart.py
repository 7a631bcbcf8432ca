from __future__ import annotations

from typing import Iterable

import logging
import math

import numpy as np

from chart_highlight.axis import AXIS_BINDINGS, AxisBinding, validate_axis
from chart_highlight.config import (
    DEFAULT_MAX_HIGHLIGHT_DISTANCE,
    DEFAULT_PIE_PADDING,
    DEFAULT_PIE_ROTATION_ANGLE,
    DEFAULT_PLOT_GUTTERS,
    DEFAULT_Y_BUFFER_RATIO,
)
from chart_highlight.dataset import ChartData, DataSet
from chart_highlight.highlight import Highlight
from chart_highlight.highlighter import ChartHighlighter, bar_highlighter
from chart_highlight.provider import Highlighter
from chart_highlight.radial import PieHighlighter
from chart_highlight.scales import DataLimits, compute_limits, union_limits
from chart_highlight.transformer import Transformer


LOGGER = logging.getLogger(__name__)


class CartesianChart:
    """Selection context for axis-aligned charts with up to two y-axes."""

    def __init__(
        self,
        datasets: Iterable[DataSet] = (),
        *,
        width: int,
        height: int,
        max_highlight_distance: float = DEFAULT_MAX_HIGHLIGHT_DISTANCE,
        stacked: bool = False,
        gutters: tuple[int, int, int, int] = DEFAULT_PLOT_GUTTERS,
        y_buffer_ratio: float = DEFAULT_Y_BUFFER_RATIO,
        highlighter: Highlighter | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        if max_highlight_distance < 0:
            raise ValueError("max_highlight_distance must be >= 0")
        self.width = int(width)
        self.height = int(height)
        self.max_highlight_distance = float(max_highlight_distance)
        self.stacked = stacked
        self._gutters = gutters
        self._y_buffer_ratio = y_buffer_ratio
        self._data = ChartData(tuple(datasets))
        self._transformers: dict[AxisBinding, Transformer] = {}
        if highlighter is None:
            highlighter = bar_highlighter(self) if stacked else ChartHighlighter(self)
        self.highlighter: Highlighter = highlighter
        self._rebuild_transformers()

    @property
    def data(self) -> ChartData:
        return self._data

    def set_data(self, datasets: Iterable[DataSet]) -> "CartesianChart":
        self._data = ChartData(tuple(datasets))
        self._rebuild_transformers()
        return self

    def get_transformer(self, axis: AxisBinding) -> Transformer | None:
        return self._transformers.get(validate_axis(axis))

    def axis_limits(self, axis: AxisBinding) -> DataLimits | None:
        transformer = self.get_transformer(axis)
        return transformer.limits if transformer is not None else None

    def plot_viewport(self) -> tuple[int, int, int, int]:
        gl, gr, gt, gb = self._gutters
        left = min(gl, max(8, self.width // 4))
        right = min(gr, max(8, self.width // 8))
        top = min(gt, max(8, self.height // 5))
        bottom = min(gb, max(8, self.height // 4))
        width = self.width - left - right
        height = self.height - top - bottom
        if width <= 1 or height <= 1:
            raise ValueError("chart too small for plotting viewport")
        return left, top, width, height

    def get_highlight_by_touch_point(self, x: float, y: float) -> Highlight | None:
        if self._data.is_empty:
            LOGGER.debug("touch (%s, %s) ignored: chart has no data", x, y)
            return None
        return self.highlighter.get_highlight(x, y)

    def _rebuild_transformers(self) -> None:
        self._transformers = {}
        if self._data.is_empty:
            return
        rect = self.plot_viewport()
        per_axis: dict[AxisBinding, list[DataLimits]] = {axis: [] for axis in AXIS_BINDINGS}
        for dataset in self._data:
            if dataset.entry_count == 0:
                continue
            per_axis[dataset.axis].append(self._dataset_limits(dataset))
        populated = [lims for lims in per_axis.values() if lims]
        shared_x = union_limits(lim for lims in populated for lim in lims)
        for axis, lims in per_axis.items():
            if not lims:
                continue
            axis_lim = union_limits(lims)
            limits = DataLimits(xmin=shared_x.xmin, xmax=shared_x.xmax, ymin=axis_lim.ymin, ymax=axis_lim.ymax)
            self._transformers[axis] = Transformer(limits, rect)

    def _dataset_limits(self, dataset: DataSet) -> DataLimits:
        xs = np.asarray([e.x for e in dataset.entries], dtype=np.float64)
        if dataset.is_stacked:
            lows = np.asarray([-e.negative_sum for e in dataset.entries], dtype=np.float64)
            highs = np.asarray([e.positive_sum for e in dataset.entries], dtype=np.float64)
            return compute_limits(
                np.concatenate([xs, xs]),
                np.concatenate([lows, highs]),
                include_zero=True,
                y_buffer_ratio=self._y_buffer_ratio,
            )
        ys = np.asarray([e.y for e in dataset.entries], dtype=np.float64)
        return compute_limits(xs, ys, include_zero=self.stacked, y_buffer_ratio=self._y_buffer_ratio)


class PieChart:
    """Selection context for a single-dataset pie chart.

    Angles are in degrees, measured clockwise on screen from the positive
    x direction. The first sector starts at ``rotation_angle``.
    """

    def __init__(
        self,
        dataset: DataSet | None,
        *,
        width: int,
        height: int,
        rotation_angle: float = DEFAULT_PIE_ROTATION_ANGLE,
        padding: float = DEFAULT_PIE_PADDING,
        max_highlight_distance: float = DEFAULT_MAX_HIGHLIGHT_DISTANCE,
        highlighter: Highlighter | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        radius = min(width, height) / 2.0 - padding
        if radius <= 0:
            raise ValueError("pie radius must be > 0; reduce padding")
        self.width = int(width)
        self.height = int(height)
        self.rotation_angle = float(rotation_angle)
        self.max_highlight_distance = float(max_highlight_distance)
        self._radius = float(radius)
        self._center = ((float(width) - 1.0) / 2.0, (float(height) - 1.0) / 2.0)
        self._data = ChartData((dataset,)) if dataset is not None else None
        self.highlighter: Highlighter = highlighter if highlighter is not None else PieHighlighter(self)

    @property
    def data(self) -> ChartData | None:
        return self._data

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def center(self) -> tuple[float, float]:
        return self._center

    def drawn_angles(self) -> list[float]:
        """Cumulative end angle of each sector, relative to ``rotation_angle``."""
        dataset = self._data.get_dataset(0) if self._data is not None else None
        if dataset is None:
            return []
        values = np.abs(np.asarray([e.y for e in dataset.entries], dtype=np.float64))
        total = float(np.sum(values))
        if total <= 0.0:
            return []
        angles = (np.cumsum(values) / total * 360.0).tolist()
        # Close the circle exactly despite float drift.
        angles[-1] = 360.0
        return angles

    def distance_to_center(self, x: float, y: float) -> float:
        cx, cy = self._center
        return math.hypot(x - cx, y - cy)

    def angle_for_point(self, x: float, y: float) -> float:
        cx, cy = self._center
        return math.degrees(math.atan2(y - cy, x - cx)) % 360.0

    def index_for_angle(self, angle: float) -> int:
        if self._data is None or self._data.is_empty:
            return -1
        a = (angle - self.rotation_angle) % 360.0
        for i, end in enumerate(self.drawn_angles()):
            if a < end:
                return i
        return -1

    def get_highlight_by_touch_point(self, x: float, y: float) -> Highlight | None:
        if self._data is None or self._data.is_empty:
            LOGGER.debug("touch (%s, %s) ignored: pie chart has no data", x, y)
            return None
        return self.highlighter.get_highlight(x, y)
