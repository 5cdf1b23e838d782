from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

# Allow running directly from repo root without installation.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))

from diagrams3d import BarChart, LineChart, PieChart, RotationState
from diagrams3d.layout.rotation import (
    degrees_to_radians,
    rotate,
    rotate_degrees,
    rotate_labels,
    rotate_labels_degrees,
)


def _close(a, b) -> bool:
    return all(math.isclose(x, y, abs_tol=1e-12) for x, y in zip(a, b))


def test_starts_at_zero() -> None:
    state = RotationState()
    assert state.chart == (0.0, 0.0, 0.0)
    assert state.labels == (0.0, 0.0, 0.0)


def test_two_quarter_turns_equal_a_half_turn() -> None:
    twice = rotate_degrees(rotate_degrees(RotationState(), 90.0, "z"), 90.0, "z")
    once = rotate_degrees(RotationState(), 180.0, "z")

    assert _close(twice.chart, once.chart)
    assert twice.chart[:2] == (0.0, 0.0)
    assert math.isclose(twice.chart[2], math.pi)


def test_degrees_match_radians() -> None:
    assert math.isclose(degrees_to_radians(45.0), math.pi / 4.0)
    by_degrees = rotate_degrees(RotationState(), 30.0, "y")
    by_radians = rotate(RotationState(), math.pi / 6.0, "y")
    assert _close(by_degrees.chart, by_radians.chart)


def test_accumulation_is_componentwise() -> None:
    xy = rotate(rotate(RotationState(), 0.5, "x"), 0.25, "y")
    yx = rotate(rotate(RotationState(), 0.25, "y"), 0.5, "x")
    assert xy == yx
    assert xy.chart == (0.5, 0.25, 0.0)


def test_angles_are_not_wrapped() -> None:
    state = RotationState()
    for _ in range(5):
        state = rotate(state, math.pi, "x")
    assert math.isclose(state.chart[0], 5.0 * math.pi)


def test_label_rotation_is_independent() -> None:
    state = rotate_labels_degrees(RotationState(), -90.0, "z")
    assert state.chart == (0.0, 0.0, 0.0)
    assert math.isclose(state.labels[2], -math.pi / 2.0)

    state = rotate_labels(state, 1.0, "x")
    assert state.labels[0] == 1.0


def test_unknown_axis() -> None:
    with pytest.raises(ValueError):
        rotate(RotationState(), 1.0, "w")


def test_chart_rotation_reaches_layout() -> None:
    chart = BarChart.from_labeled([("a", 1.0), ("b", 2.0)])
    chart.rotate_degrees(90.0, "y")
    chart.rotate_text_degrees(-90.0, "z")

    layout = chart.layout()
    assert math.isclose(layout.orientation.chart[1], math.pi / 2.0)
    assert math.isclose(layout.orientation.labels[2], -math.pi / 2.0)
    # Geometry does not move; orientation is applied by the renderer.
    chart.reset_rotation()
    assert chart.layout().primitives == layout.primitives
    assert chart.layout().orientation == RotationState()


def test_charts_do_not_share_rotation() -> None:
    a = LineChart.from_values([1.0, 2.0])
    b = PieChart.from_values([1.0, 2.0])
    a.rotate(1.0, "x")
    b.rotate_text(2.0, "y")

    assert a.rotation.chart == (1.0, 0.0, 0.0)
    assert a.rotation.labels == (0.0, 0.0, 0.0)
    assert b.rotation.chart == (0.0, 0.0, 0.0)
    assert b.rotation.labels == (0.0, 2.0, 0.0)
