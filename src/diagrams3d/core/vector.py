from __future__ import annotations

import math
from typing import Iterable, Tuple, Union, cast

import numpy as np

Number = Union[int, float]
XYZ = Tuple[float, float, float]
Matrix3 = np.ndarray

ORIGIN: XYZ = (0.0, 0.0, 0.0)


def coerce_xyz(xyz: Iterable[Number]) -> XYZ:
    coords = tuple(float(value) for value in xyz)
    if len(coords) != 3:
        raise ValueError("xyz must contain exactly 3 coordinates")
    if not all(math.isfinite(value) for value in coords):
        raise ValueError("xyz coordinates must be finite real numbers")
    return cast(XYZ, coords)


def coerce_number(value: Number, label: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{label} must be a finite real number, got {number}")
    return number


def add(a: XYZ, b: XYZ) -> XYZ:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def midpoint(p0: XYZ, p1: XYZ) -> XYZ:
    return ((p0[0] + p1[0]) / 2.0, (p0[1] + p1[1]) / 2.0, (p0[2] + p1[2]) / 2.0)


def distance(p0: XYZ, p1: XYZ) -> float:
    return float(np.linalg.norm(np.subtract(p1, p0, dtype=float)))


def length_and_direction(p0: XYZ, p1: XYZ) -> Tuple[float, XYZ]:
    delta = np.subtract(p1, p0, dtype=float)
    length = float(np.linalg.norm(delta))
    if length <= 0.0:
        raise ValueError("zero length vector")
    unit = delta / length
    return length, (float(unit[0]), float(unit[1]), float(unit[2]))


def local_rotation_matrix(direction: XYZ) -> Matrix3:
    """
    Build a 3x3 rotation matrix whose local y axis aligns with ``direction``.

    Cylinders and cones are modelled along their local y axis, so this is the
    frame a renderer needs to stand a primitive up along a segment.
    The returned matrix R maps global vectors into local components:
    v_local = R @ v_global
    """

    y_local = _normalize(direction)
    if _norm(y_local) <= 0.0:
        raise ValueError("zero length direction")
    ref = (0.0, 0.0, 1.0)
    if abs(y_local[0]) < 1e-6 and abs(y_local[1]) < 1e-6:
        ref = (1.0, 0.0, 0.0)

    x_local = _normalize(_cross(y_local, ref))
    z_local = _cross(x_local, y_local)

    return np.array(
        [
            [x_local[0], x_local[1], x_local[2]],
            [y_local[0], y_local[1], y_local[2]],
            [z_local[0], z_local[1], z_local[2]],
        ],
        dtype=float,
    )


def _cross(a: XYZ, b: XYZ) -> XYZ:
    c = np.cross(a, b)
    return (float(c[0]), float(c[1]), float(c[2]))


def _norm(v: XYZ) -> float:
    return float(np.linalg.norm(v))


def _normalize(v: XYZ) -> XYZ:
    length = _norm(v)
    if length <= 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)
