from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from chart_highlight.config import DEFAULT_Y_BUFFER_RATIO


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class PlotTransform:
    sx: float
    tx: float
    sy: float
    ty: float


def compute_limits(
    x: np.ndarray,
    y: np.ndarray,
    *,
    include_zero: bool = False,
    y_buffer_ratio: float = DEFAULT_Y_BUFFER_RATIO,
) -> DataLimits:
    mask = np.isfinite(x) & np.isfinite(y)
    if not np.any(mask):
        raise ValueError("cannot compute limits without finite points")
    vx = x[mask]
    vy = y[mask]
    xmin = float(np.min(vx))
    xmax = float(np.max(vx))
    ymin = float(np.min(vy))
    ymax = float(np.max(vy))
    if include_zero:
        ymin = min(ymin, 0.0)
        ymax = max(ymax, 0.0)

    if ymin == ymax:
        delta = max(1.0, abs(ymin) * y_buffer_ratio)
        ymin -= delta
        ymax += delta
    else:
        span = ymax - ymin
        pad = span * y_buffer_ratio
        ymin -= pad
        ymax += pad

    if xmin == xmax:
        xmin -= 1.0
        xmax += 1.0

    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def union_limits(limits: Iterable[DataLimits]) -> DataLimits:
    items = list(limits)
    if not items:
        raise ValueError("union_limits requires at least one DataLimits")
    return DataLimits(
        xmin=min(lim.xmin for lim in items),
        xmax=max(lim.xmax for lim in items),
        ymin=min(lim.ymin for lim in items),
        ymax=max(lim.ymax for lim in items),
    )


def build_transform(limits: DataLimits, width: int, height: int) -> PlotTransform:
    if width <= 1 or height <= 1:
        raise ValueError("plot viewport width/height must be > 1")
    if limits.xmax == limits.xmin or limits.ymax == limits.ymin:
        raise ValueError("data limits must span a non-zero range")
    sx = (width - 1) / (limits.xmax - limits.xmin)
    tx = -limits.xmin * sx
    sy = (height - 1) / (limits.ymax - limits.ymin)
    ty = -limits.ymin * sy
    return PlotTransform(sx=sx, tx=tx, sy=sy, ty=ty)
