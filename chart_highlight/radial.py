from __future__ import annotations

import logging

from chart_highlight.highlight import Highlight
from chart_highlight.provider import RadialDataProvider


LOGGER = logging.getLogger(__name__)


class PieHighlighter:
    """Index-driven selection for pie charts, which draw a single dataset."""

    def __init__(self, chart: RadialDataProvider) -> None:
        self.chart = chart

    def get_highlight(self, x: float, y: float) -> Highlight | None:
        if self.chart.distance_to_center(x, y) > self.chart.radius:
            return None
        angle = self.chart.angle_for_point(x, y)
        index = self.chart.index_for_angle(angle)
        if index < 0:
            return None
        return self.closest_highlight(index, x, y)

    def closest_highlight(self, index: int, x: float, y: float) -> Highlight | None:
        data = self.chart.data
        dataset = data.get_dataset(0) if data is not None else None
        if dataset is None:
            LOGGER.debug("pie chart has no dataset to highlight")
            return None
        entry = dataset.entry_for_index(index)
        if entry is None:
            return None
        # Pixel coordinates pass through; there is no x-axis to map onto.
        return Highlight(x=float(index), y=entry.y, x_px=x, y_px=y, dataset_index=0, axis=dataset.axis)
