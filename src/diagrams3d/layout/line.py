from __future__ import annotations

from typing import List, Optional

from diagrams3d.core.primitives import Primitive, TextLabel
from diagrams3d.layout.axis import AxisGenerator
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout.rotation import RotationState
from diagrams3d.layout.shapes import make_label, segment_cylinder
from diagrams3d.model.line import LineChartData
from diagrams3d.style import LineChartStyle

LABEL_RISE = 1.0


def layout_line_chart(
    data: LineChartData,
    style: Optional[LineChartStyle] = None,
    rotation: Optional[RotationState] = None,
) -> ChartLayout:
    """
    Cylinders between consecutive points, then the axes.

    Coincident consecutive points produce no segment (a RuntimeWarning is
    emitted instead). Labeled points get a label one unit above the point.
    """
    if style is not None and style != data.style:
        data = data.with_style(style)
    style = data.style
    style.validate()

    positions = [data.rendered_position(i) for i in range(len(data.nodes))]

    primitives: List[Primitive] = []
    for index, (start, end) in enumerate(zip(positions, positions[1:])):
        segment = segment_cylinder(
            start, end, style.line_thickness, style.line_color, what=f"line segment {index}"
        )
        if segment is not None:
            primitives.append(segment)

    labels: List[TextLabel] = []
    for point, (x, y, z) in zip(data.nodes, positions):
        if point.label:
            labels.append(make_label(point.label, (x, y + LABEL_RISE, z), style))

    axes = AxisGenerator.from_style(style)
    primitives.extend(axes.primitives(data.total_width, data.total_height, data.total_length))

    return ChartLayout(
        kind="line",
        primitives=tuple(primitives),
        labels=tuple(labels),
        orientation=rotation or RotationState(),
    )
