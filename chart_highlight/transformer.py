from __future__ import annotations

import numpy as np

from chart_highlight.scales import DataLimits, PlotTransform, build_transform


class Transformer:
    """Maps data values of one axis binding to screen pixels and back.

    ``plot_rect`` is ``(x0, y0, width, height)`` in screen pixels with y
    growing downward. Unlike the raster path, nothing is rounded or clipped,
    so ``value_for_touch_point`` is the exact inverse of ``pixel_for_value``.
    """

    def __init__(self, limits: DataLimits, plot_rect: tuple[int, int, int, int]) -> None:
        x0, y0, width, height = plot_rect
        self._limits = limits
        self._plot_rect = (int(x0), int(y0), int(width), int(height))
        self._transform: PlotTransform = build_transform(limits, int(width), int(height))

    @property
    def limits(self) -> DataLimits:
        return self._limits

    @property
    def plot_rect(self) -> tuple[int, int, int, int]:
        return self._plot_rect

    def pixel_for_value(self, x: float, y: float) -> tuple[float, float]:
        x0, y0, _, height = self._plot_rect
        t = self._transform
        px = x0 + x * t.sx + t.tx
        py = y0 + (height - 1) - (y * t.sy + t.ty)
        return (float(px), float(py))

    def pixel_for_values(self, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        x0, y0, _, height = self._plot_rect
        t = self._transform
        xs = np.asarray(x, dtype=np.float64)
        ys = np.asarray(y, dtype=np.float64)
        return (x0 + xs * t.sx + t.tx, y0 + (height - 1) - (ys * t.sy + t.ty))

    def value_for_touch_point(self, x: float, y: float) -> tuple[float, float]:
        x0, y0, _, height = self._plot_rect
        t = self._transform
        vx = (x - x0 - t.tx) / t.sx
        vy = ((height - 1) - (y - y0) - t.ty) / t.sy
        return (float(vx), float(vy))
