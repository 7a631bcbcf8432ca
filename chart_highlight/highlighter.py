from __future__ import annotations

from typing import Callable, Sequence

import logging
import math

from chart_highlight.axis import AXIS_PRIMARY, AXIS_SECONDARY, AxisBinding, Rounding
from chart_highlight.dataset import DataSet
from chart_highlight.entries import Entry
from chart_highlight.highlight import Highlight
from chart_highlight.provider import CartesianDataProvider
from chart_highlight.transformer import Transformer


LOGGER = logging.getLogger(__name__)

CandidateBuilder = Callable[[DataSet, int, Entry, Transformer, float, float], list[Highlight]]


def entry_candidates(
    dataset: DataSet,
    dataset_index: int,
    entry: Entry,
    transformer: Transformer,
    x: float,
    y: float,
) -> list[Highlight]:
    px, py = transformer.pixel_for_value(entry.x, entry.y)
    return [Highlight(x=entry.x, y=entry.y, x_px=px, y_px=py, dataset_index=dataset_index, axis=dataset.axis)]


def stacked_entry_candidates(
    dataset: DataSet,
    dataset_index: int,
    entry: Entry,
    transformer: Transformer,
    x: float,
    y: float,
) -> list[Highlight]:
    """One candidate per stacked segment.

    The candidate's ``y`` is the segment's own sub-value, but its ``y_px``
    depends on the touch: it is the touch y clamped into the segment's pixel
    span, not the segment's top edge or midpoint. A touch inside segment k
    therefore sits at y-distance 0 from it. Callers drawing a marker at the
    segment should map ``stack_ranges()`` themselves rather than reuse
    ``y_px``.
    """
    if entry.stack_values is None:
        return entry_candidates(dataset, dataset_index, entry, transformer, x, y)
    px, _ = transformer.pixel_for_value(entry.x, entry.y)
    out: list[Highlight] = []
    for k, (start, end) in enumerate(entry.stack_ranges()):
        _, start_px = transformer.pixel_for_value(entry.x, start)
        _, end_px = transformer.pixel_for_value(entry.x, end)
        lo = min(start_px, end_px)
        hi = max(start_px, end_px)
        out.append(
            Highlight(
                x=entry.x,
                y=entry.stack_values[k],
                x_px=px,
                y_px=min(max(y, lo), hi),
                dataset_index=dataset_index,
                axis=dataset.axis,
                stack_index=k,
            )
        )
    return out


class ChartHighlighter:
    """Resolves a touch position on an axis-aligned chart to one highlight.

    Holds a non-owning reference to the chart and re-reads its data and
    transformers on every call.
    """

    def __init__(self, chart: CartesianDataProvider, candidate_builder: CandidateBuilder = entry_candidates) -> None:
        self.chart = chart
        self.candidate_builder = candidate_builder

    def get_highlight(self, x: float, y: float) -> Highlight | None:
        values = self.get_values_for_touch(x, y)
        if values is None:
            return None
        return self.get_highlight_for_x(values[0], x, y)

    def get_values_for_touch(self, x: float, y: float) -> tuple[float, float] | None:
        # x mapping is shared by both axes, so any transformer will do.
        transformer = self.chart.get_transformer(AXIS_PRIMARY) or self.chart.get_transformer(AXIS_SECONDARY)
        if transformer is None:
            LOGGER.debug("no transformer available for touch (%s, %s)", x, y)
            return None
        return transformer.value_for_touch_point(x, y)

    def get_highlight_for_x(self, x_value: float, x: float, y: float) -> Highlight | None:
        candidates = self.get_highlights(x_value, x, y)
        if not candidates:
            return None

        primary_dist = self.get_minimum_distance(candidates, y, AXIS_PRIMARY)
        secondary_dist = self.get_minimum_distance(candidates, y, AXIS_SECONDARY)
        axis = AXIS_SECONDARY if secondary_dist < primary_dist else AXIS_PRIMARY

        return self.closest_highlight_by_pixel(candidates, x, y, axis, self.chart.max_highlight_distance)

    def get_highlights(self, x_value: float, x: float, y: float) -> list[Highlight]:
        """Candidates closest to ``x_value``: up to two entries per dataset."""
        data = self.chart.data
        if data is None or data.is_empty:
            LOGGER.debug("chart has no data to highlight")
            return []

        out: list[Highlight] = []
        for i, dataset in enumerate(data):
            if not dataset.highlight_enabled:
                continue
            out.extend(self.build_highlights(dataset, i, x_value, "up", x, y))
            out.extend(self.build_highlights(dataset, i, x_value, "down", x, y))
        return out

    def build_highlights(
        self,
        dataset: DataSet,
        dataset_index: int,
        x_value: float,
        rounding: Rounding,
        x: float,
        y: float,
    ) -> list[Highlight]:
        entry = dataset.entry_for_x(x_value, rounding)
        if entry is None:
            return []
        transformer = self.chart.get_transformer(dataset.axis)
        if transformer is None:
            LOGGER.debug("no transformer for axis %s of dataset %d", dataset.axis, dataset_index)
            return []
        return self.candidate_builder(dataset, dataset_index, entry, transformer, x, y)

    def closest_highlight_by_pixel(
        self,
        candidates: Sequence[Highlight],
        x: float,
        y: float,
        axis: AxisBinding | None,
        max_distance: float,
    ) -> Highlight | None:
        distance = max_distance
        closest: Highlight | None = None
        for high in candidates:
            if axis is not None and high.axis != axis:
                continue
            d = math.hypot(x - high.x_px, y - high.y_px)
            if d < distance:
                closest = high
                distance = d
        return closest

    @staticmethod
    def get_minimum_distance(candidates: Sequence[Highlight], y: float, axis: AxisBinding) -> float:
        distance = math.inf
        for high in candidates:
            if high.axis != axis:
                continue
            distance = min(distance, abs(high.y_px - y))
        return distance


def bar_highlighter(chart: CartesianDataProvider) -> ChartHighlighter:
    return ChartHighlighter(chart, candidate_builder=stacked_entry_candidates)
