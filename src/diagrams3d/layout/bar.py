from __future__ import annotations

from typing import List, Optional

from diagrams3d.core.primitives import Box, Primitive, TextLabel
from diagrams3d.layout.axis import AxisGenerator
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout.rotation import RotationState
from diagrams3d.layout.shapes import make_label
from diagrams3d.model.bar import BarChartData
from diagrams3d.style import BarChartStyle


def layout_bar_chart(
    data: BarChartData,
    style: Optional[BarChartStyle] = None,
    rotation: Optional[RotationState] = None,
) -> ChartLayout:
    """
    One box per bar, left to right, then the axes.

    Labels sit under their bar at ``y = -total_height``, on the base plane.
    """
    if style is not None and style != data.style:
        data = data.with_style(style)
    style = data.style
    style.validate()

    primitives: List[Primitive] = []
    labels: List[TextLabel] = []
    for index, node in enumerate(data.nodes):
        primitives.append(
            Box(
                position=data.bar_position(index),
                width=style.node_width,
                height=node.value,
                length=data.bar_length(index),
                chamfer_radius=style.chamfer_radius,
                color=style.node_color,
            )
        )
        if node.label:
            labels.append(make_label(node.label, (data.bar_x(index), -data.total_height, 0.0), style))

    axes = AxisGenerator.from_style(style)
    primitives.extend(axes.primitives(data.total_width, data.total_height, data.total_length))

    return ChartLayout(
        kind="bar",
        primitives=tuple(primitives),
        labels=tuple(labels),
        orientation=rotation or RotationState(),
    )
