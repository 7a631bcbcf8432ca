from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np
import torch

from chart_highlight.axis import AXIS_PRIMARY, AxisBinding
from chart_highlight.dataset import DataSet
from chart_highlight.entries import Entry
from chart_highlight.errors import ChartDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def dataset_from_xy(
    y: Any = None,
    *,
    x: Any = None,
    stacks: Any = None,
    data: Any = None,
    label: str | None = None,
    axis: AxisBinding = AXIS_PRIMARY,
    highlight_enabled: bool = True,
) -> DataSet:
    if stacks is not None:
        stack_arr = _coerce_2d_numeric(stacks, label="stacks")
        y_arr = np.sum(stack_arr, axis=1)
    else:
        stack_arr = None
        y_values = _resolve_input(y=y, key="y", data=data)
        if y_values is None:
            raise ChartDataError("y input is required")
        y_arr = _coerce_1d_numeric(y_values, label="y")

    if y_arr.size == 0:
        raise ChartDataError("empty series")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_values = _resolve_input(y=x, key="x", data=data)
        x_arr = _coerce_1d_numeric(x_values, label="x")

    if x_arr.shape != y_arr.shape:
        raise ChartDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.any(mask):
        raise ChartDataError("series contains no finite points")

    entries: list[Entry] = []
    for i in np.flatnonzero(mask).tolist():
        if stack_arr is not None:
            entries.append(Entry.stacked(float(x_arr[i]), stack_arr[i].tolist()))
        else:
            entries.append(Entry(x=float(x_arr[i]), y=float(y_arr[i])))
    return DataSet(entries, label=label, axis=axis, highlight_enabled=highlight_enabled)


def _resolve_input(y: Any, key: str, data: Any) -> Any:
    if data is not None:
        if pd is None:
            raise ChartDataError("pandas is required when using `data=`")
        if not isinstance(data, pd.DataFrame):
            raise ChartDataError("`data` must be a pandas DataFrame")
        if isinstance(y, str):
            if y not in data.columns:
                raise ChartDataError(f"column not found: {y}")
            return data[y]
        if y is None:
            if key == "y":
                numeric_cols = [c for c in data.columns if _is_numeric_dtype(data[c])]
                if len(numeric_cols) != 1:
                    raise ChartDataError("when y is omitted, data must have exactly one numeric column")
                return data[numeric_cols[0]]
            return None
        return y
    return y


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_2d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        arr = value.detach().cpu().to(torch.float64).numpy()
    elif pd is not None and isinstance(value, pd.DataFrame):
        arr = value.to_numpy(dtype=np.float64)
    else:
        try:
            arr = np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} must be a rectangular numeric array") from exc
    if arr.ndim != 2:
        raise ChartDataError(f"{label} must be 2-D")
    if arr.shape[1] == 0:
        raise ChartDataError(f"{label} rows must hold at least one value")
    return arr


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise ChartDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
