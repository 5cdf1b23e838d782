from __future__ import annotations

import math
import sys
from pathlib import Path

import pytest

# Allow running directly from repo root without installation.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))

from diagrams3d import BarChart, BarChartData, BarChartStyle, BarNode, LineChartStyle, relayout
from diagrams3d.layout import layout_bar_chart


def test_example_extents_and_offsets() -> None:
    """Values [1, 3, 5, 8] with the default style."""
    data = BarChartData.from_values([1, 3, 5, 8])
    assert data is not None

    assert data.total_width == 7.0
    assert data.total_height == 8.0
    assert data.x_offset == -3.0
    assert data.y_offset == -4.0
    assert data.total_length == 0.0
    assert data.bar_x(2) == 1.0
    assert data.bar_position(2) == (1.0, -1.5, -0.5)


@pytest.mark.parametrize("values", [[2.0], [1.0, 1.0], [4.0, 0.0, 9.5, 3.0, 1.0]])
@pytest.mark.parametrize("width,spacing", [(1.0, 1.0), (0.5, 0.25), (2.0, 0.0)])
def test_width_formula(values, width, spacing) -> None:
    style = BarChartStyle(node_width=width, node_spacing=spacing)
    data = BarChartData.from_values(values, style)
    count = len(values)

    assert math.isclose(data.total_width, count * width + (count - 1) * spacing)
    assert math.isclose(data.bar_x(0), -data.total_width / 2.0 + width / 2.0)
    # Last bar mirrors the first around the origin.
    assert math.isclose(data.bar_x(count - 1), -data.bar_x(0), abs_tol=1e-12)


def test_empty_series_yields_nothing() -> None:
    assert BarChartData.from_values([]) is None
    assert BarChartData.from_labeled([]) is None
    assert BarChart.from_values([]) is None
    with pytest.raises(ValueError):
        BarChartData(nodes=())


def test_depth_values_set_total_length_and_box_length() -> None:
    data = BarChartData.from_labeled_depths([("a", 2.0, 3.0), ("b", 4.0, 1.0)])
    assert data.total_length == 3.0

    layout = layout_bar_chart(data)
    boxes = layout.of_kind("box")
    assert [box.length for box in boxes] == [3.0, 1.0]
    assert boxes[0].position[2] == -1.5
    assert boxes[1].position[2] == -0.5
    # Depth present: X, Y and Z axes.
    assert len(layout.of_kind("cone")) == 3


def test_layout_boxes_axes_and_labels() -> None:
    data = BarChartData.from_labeled([("a", 1.0), ("b", 3.0), ("", 2.0)])
    layout = layout_bar_chart(data)

    boxes = layout.of_kind("box")
    assert len(boxes) == 3
    assert [box.height for box in boxes] == [1.0, 3.0, 2.0]
    assert all(box.width == 1.0 and box.length == 1.0 for box in boxes)
    assert boxes[1].position == (0.0, 0.0, -0.5)

    # Two axes, each a line, an arrowhead and a label in the chart group.
    assert len(layout.of_kind("cylinder")) == 2
    assert len(layout.of_kind("cone")) == 2
    assert [t.text for t in layout.of_kind("text")] == ["X", "Y"]

    # Empty labels are dropped; the rest sit under their bar.
    assert [label.text for label in layout.labels] == ["a", "b"]
    assert layout.labels[0].position == (data.bar_x(0), -3.0, 0.0)
    assert layout.labels[1].position == (data.bar_x(1), -3.0, 0.0)


def test_style_flows_into_boxes() -> None:
    style = BarChartStyle(node_width=0.5, node_spacing=0.25, chamfer_radius=0.1, node_color="#ff0000")
    data = BarChartData.from_nodes([BarNode(value=2.0), BarNode(value=4.0)], style)
    box = layout_bar_chart(data).of_kind("box")[0]

    assert box.width == 0.5
    assert box.chamfer_radius == 0.1
    assert box.color == (1.0, 0.0, 0.0, 1.0)


def test_relayout_with_new_style_rederives_extents() -> None:
    data = BarChartData.from_values([1, 3, 5, 8])
    style = BarChartStyle(node_width=2.0, node_spacing=0.5)

    restyled = data.with_style(style)
    assert restyled.total_width == 9.5
    assert data.total_width == 7.0

    assert relayout(data, style) == layout_bar_chart(restyled)


def test_layout_is_idempotent() -> None:
    data = BarChartData.from_labeled_depths([("a", 1.0, 2.0), ("b", 5.0, 1.0)])
    assert layout_bar_chart(data) == layout_bar_chart(data)


def test_equal_inputs_give_identical_derived_fields() -> None:
    a = BarChartData.from_values([0.1, 0.7, 2.3])
    b = BarChartData.from_values([0.1, 0.7, 2.3])
    assert (a.total_width, a.total_height, a.total_length, a.x_offset, a.y_offset) == (
        b.total_width,
        b.total_height,
        b.total_length,
        b.x_offset,
        b.y_offset,
    )
    assert a == b


def test_invalid_style_is_rejected() -> None:
    with pytest.raises(ValueError):
        BarChartData.from_values([1.0], BarChartStyle(node_width=0.0))
    with pytest.raises(ValueError):
        BarChartData.from_values([1.0], BarChartStyle(node_spacing=-1.0))


def test_non_finite_values_are_rejected() -> None:
    for bad in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(ValueError):
            BarNode(value=bad)
    with pytest.raises(ValueError):
        BarChartData.from_values([1.0, float("inf")])
    with pytest.raises(ValueError):
        BarNode(value=1.0, depth=float("inf"))


def test_chart_set_style() -> None:
    chart = BarChart.from_values([1, 2, 3])
    chart.set_style(BarChartStyle(node_width=3.0))

    assert chart.style.node_width == 3.0
    assert chart.layout().of_kind("box")[0].width == 3.0

    with pytest.raises(TypeError):
        chart.set_style(LineChartStyle())
