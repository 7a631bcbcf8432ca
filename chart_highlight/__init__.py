from chart_highlight.adapters import dataset_from_xy
from chart_highlight.axis import AXIS_PRIMARY, AXIS_SECONDARY, AxisBinding, Rounding
from chart_highlight.chart import CartesianChart, PieChart
from chart_highlight.dataset import ChartData, DataSet
from chart_highlight.entries import Entry
from chart_highlight.errors import ChartDataError
from chart_highlight.highlight import Highlight
from chart_highlight.highlighter import ChartHighlighter, bar_highlighter, entry_candidates, stacked_entry_candidates
from chart_highlight.provider import Highlighter
from chart_highlight.radial import PieHighlighter
from chart_highlight.scales import DataLimits
from chart_highlight.transformer import Transformer

__all__ = [
    "AXIS_PRIMARY",
    "AXIS_SECONDARY",
    "AxisBinding",
    "CartesianChart",
    "ChartData",
    "ChartDataError",
    "ChartHighlighter",
    "DataLimits",
    "DataSet",
    "Entry",
    "Highlight",
    "Highlighter",
    "PieChart",
    "PieHighlighter",
    "Rounding",
    "Transformer",
    "bar_highlighter",
    "dataset_from_xy",
    "entry_candidates",
    "stacked_entry_candidates",
]
