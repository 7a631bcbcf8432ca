from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart data cannot be turned into a queryable dataset."""
