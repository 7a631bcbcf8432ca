from __future__ import annotations

from typing import Literal


AxisBinding = Literal["primary", "secondary"]
Rounding = Literal["up", "down", "closest"]

AXIS_PRIMARY: AxisBinding = "primary"
AXIS_SECONDARY: AxisBinding = "secondary"
AXIS_BINDINGS: tuple[AxisBinding, ...] = (AXIS_PRIMARY, AXIS_SECONDARY)

_ROUNDINGS = {"up", "down", "closest"}


def validate_axis(axis: str) -> AxisBinding:
    if axis not in AXIS_BINDINGS:
        raise ValueError(f"unknown axis binding: {axis}")
    return axis  # type: ignore[return-value]


def validate_rounding(rounding: str) -> Rounding:
    if rounding not in _ROUNDINGS:
        raise ValueError(f"unknown rounding mode: {rounding}")
    return rounding  # type: ignore[return-value]
