from __future__ import annotations

from typing import Protocol

from chart_highlight.axis import AxisBinding
from chart_highlight.dataset import ChartData
from chart_highlight.highlight import Highlight
from chart_highlight.transformer import Transformer


class Highlighter(Protocol):
    def get_highlight(self, x: float, y: float) -> Highlight | None: ...


class ChartDataProvider(Protocol):
    @property
    def data(self) -> ChartData | None: ...

    @property
    def max_highlight_distance(self) -> float: ...


class CartesianDataProvider(ChartDataProvider, Protocol):
    def get_transformer(self, axis: AxisBinding) -> Transformer | None: ...


class RadialDataProvider(ChartDataProvider, Protocol):
    @property
    def radius(self) -> float: ...

    def distance_to_center(self, x: float, y: float) -> float: ...

    def angle_for_point(self, x: float, y: float) -> float: ...

    def index_for_angle(self, angle: float) -> int: ...
