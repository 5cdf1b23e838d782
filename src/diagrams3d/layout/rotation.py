"""
Chart and label orientation.

Rotation is tracked as two independent Euler triples (radians): one for the
whole chart group and one for the label group. Each call adds the signed angle
to a single component; calls are never composed as matrices, so rotating about
x then y is the same as y then x. Angles are not wrapped.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace

from diagrams3d.core.axes import Axis, axis_index
from diagrams3d.core.vector import ORIGIN, XYZ


@dataclass(frozen=True, slots=True)
class RotationState:
    chart: XYZ = ORIGIN
    labels: XYZ = ORIGIN


def degrees_to_radians(angle: float) -> float:
    return angle * math.pi / 180.0


def rotate(state: RotationState, angle: float, axis: Axis) -> RotationState:
    return replace(state, chart=_accumulate(state.chart, angle, axis))


def rotate_degrees(state: RotationState, angle: float, axis: Axis) -> RotationState:
    return rotate(state, degrees_to_radians(angle), axis)


def rotate_labels(state: RotationState, angle: float, axis: Axis) -> RotationState:
    return replace(state, labels=_accumulate(state.labels, angle, axis))


def rotate_labels_degrees(state: RotationState, angle: float, axis: Axis) -> RotationState:
    return rotate_labels(state, degrees_to_radians(angle), axis)


def _accumulate(euler: XYZ, angle: float, axis: Axis) -> XYZ:
    index = axis_index(axis)
    values = list(euler)
    values[index] += float(angle)
    return (values[0], values[1], values[2])
