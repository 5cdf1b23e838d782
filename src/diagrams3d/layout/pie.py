from __future__ import annotations

import math
from typing import List, Optional

from diagrams3d.core.primitives import Primitive, Sector, TextLabel
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout.rotation import RotationState
from diagrams3d.layout.shapes import make_label
from diagrams3d.model.pie import PieChartData
from diagrams3d.style import PieChartStyle

DEFAULT_SLICE_HEIGHT = 1.0


def layout_pie_chart(
    data: PieChartData,
    style: Optional[PieChartStyle] = None,
    rotation: Optional[RotationState] = None,
) -> ChartLayout:
    """One extruded sector per slice. Pie charts have no axes."""
    if style is not None and style != data.style:
        data = data.with_style(style)
    style = data.style
    style.validate()

    primitives: List[Primitive] = []
    labels: List[TextLabel] = []
    label_radius = style.radius * style.label_radius_factor
    for index, node in enumerate(data.nodes):
        start, end = data.slice_angles(index)
        depth = DEFAULT_SLICE_HEIGHT if node.height is None else node.height
        primitives.append(
            Sector(
                position=(0.0, 0.0, depth / 2.0),
                radius=style.radius,
                start_angle=start,
                end_angle=end,
                depth=depth,
                color=node.color,
            )
        )
        if node.label:
            mid = (start + end) / 2.0
            position = (label_radius * math.cos(mid), label_radius * math.sin(mid), 0.0)
            labels.append(make_label(node.label, position, style))

    return ChartLayout(
        kind="pie",
        primitives=tuple(primitives),
        labels=tuple(labels),
        orientation=rotation or RotationState(),
    )
