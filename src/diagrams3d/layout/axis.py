"""
Coordinate axes for bar and line charts.

All axes start at the chart-local corner ``(-w/2, -h/2, 0)``. X and Y run past
the chart by 20% of the width; Z (only drawn when the chart has depth) runs
30% past its length, toward -z. Each axis is a line, an arrowhead at the far
end and a text label next to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from diagrams3d.core.axes import Axis, axis_index
from diagrams3d.core.colors import BLACK, GREEN, ORANGE, RED, Color
from diagrams3d.core.primitives import Cone, Cylinder, Primitive, TextLabel
from diagrams3d.core.vector import XYZ, add
from diagrams3d.layout.shapes import segment_cylinder
from diagrams3d.style import AxisColors, ChartStyle

AXIS_OVERHANG = 0.2
DEPTH_OVERHANG = 0.3

X_LABEL_OFFSET: XYZ = (0.0, -1.0, 0.0)
Y_LABEL_OFFSET: XYZ = (-1.0, 0.0, 0.0)
Z_LABEL_OFFSET: XYZ = (-1.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class AxisDescriptor:
    axis: Axis
    start: XYZ
    end: XYZ
    line: Optional[Cylinder]
    arrow: Cone
    label: TextLabel

    def primitives(self) -> Tuple[Primitive, ...]:
        parts: List[Primitive] = []
        if self.line is not None:
            parts.append(self.line)
        parts.append(self.arrow)
        parts.append(self.label)
        return tuple(parts)


@dataclass(frozen=True)
class AxisGenerator:
    thickness: float = 0.1
    arrow_size: float = 0.5
    font_size: float = 1.0
    font_name: str = "system"
    colors: AxisColors = (RED, GREEN, ORANGE)
    label_color: Color = BLACK

    @classmethod
    def from_style(cls, style: ChartStyle) -> AxisGenerator:
        return cls(
            thickness=style.axis_thickness,
            arrow_size=style.axis_arrow_size,
            font_size=style.label_font_size,
            font_name=style.label_font_name,
            colors=style.axis_colors,
            label_color=style.label_color,
        )

    def axes(self, total_width: float, total_height: float, total_length: float = 0.0) -> Tuple[AxisDescriptor, ...]:
        overhang = total_width * AXIS_OVERHANG
        origin = (-total_width / 2.0, -total_height / 2.0, 0.0)

        axes = [
            self._axis("x", origin, (total_width / 2.0 + overhang, -total_height / 2.0, 0.0), X_LABEL_OFFSET),
            self._axis("y", origin, (-total_width / 2.0, total_height / 2.0 + overhang, 0.0), Y_LABEL_OFFSET),
        ]
        if total_length > 0:
            depth = -(total_length + total_length * DEPTH_OVERHANG)
            axes.append(self._axis("z", origin, (-total_width / 2.0, -total_height / 2.0, depth), Z_LABEL_OFFSET))
        return tuple(axes)

    def primitives(self, total_width: float, total_height: float, total_length: float = 0.0) -> Tuple[Primitive, ...]:
        parts: List[Primitive] = []
        for descriptor in self.axes(total_width, total_height, total_length):
            parts.extend(descriptor.primitives())
        return tuple(parts)

    def _axis(self, axis: Axis, start: XYZ, end: XYZ, label_offset: XYZ) -> AxisDescriptor:
        color = self.colors[axis_index(axis)]
        line = segment_cylinder(start, end, self.thickness / 2.0, color, what=f"{axis} axis")
        arrow = Cone(
            position=end,
            bottom_radius=self.thickness * 2.0,
            top_radius=0.0,
            height=self.arrow_size,
            direction=arrow_direction(end),
            color=color,
        )
        label = TextLabel(
            text=axis.upper(),
            position=add(end, label_offset),
            font_size=self.font_size,
            font_name=self.font_name,
            color=self.label_color,
        )
        return AxisDescriptor(axis=axis, start=start, end=end, line=line, arrow=arrow, label=label)


def arrow_direction(end: XYZ) -> XYZ:
    """
    Direction an arrowhead at ``end`` points along.

    Picks the coordinate with the largest value among (x, y, |z|): +x, +y or
    -z. Only valid for axis end points, which are each dominated by a single
    coordinate.
    """
    largest = max(end[0], end[1], abs(end[2]))
    if largest == end[0]:
        return (1.0, 0.0, 0.0)
    if largest == end[1]:
        return (0.0, 1.0, 0.0)
    return (0.0, 0.0, -1.0)
