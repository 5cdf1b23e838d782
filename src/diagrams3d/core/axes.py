from __future__ import annotations

from typing import Literal, Tuple

AXIS_ORDER: Tuple[str, ...] = ("x", "y", "z")

Axis = Literal["x", "y", "z"]


def axis_index(axis: Axis) -> int:
    if axis not in AXIS_ORDER:
        raise ValueError(f"axis must be one of {AXIS_ORDER}, got {axis!r}")
    return int(AXIS_ORDER.index(axis))


def axis_vector(axis: Axis) -> Tuple[float, float, float]:
    """Unit vector along ``axis``."""
    index = axis_index(axis)
    return tuple(1.0 if i == index else 0.0 for i in range(3))  # type: ignore[return-value]
