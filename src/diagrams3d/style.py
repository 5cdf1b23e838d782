"""
Style option bags for the three chart families.

Styles are frozen values with fixed defaults. Swap a style by building a new
one (``dataclasses.replace`` works) and re-running the layout; nothing here
carries behaviour beyond validation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from diagrams3d.core.colors import BLACK, BLUE, GREEN, ORANGE, RED, Color, coerce_color

AxisColors = Tuple[Color, Color, Color]


@dataclass(frozen=True)
class ChartStyle:
    label_font_size: float = 1.0
    label_font_name: str = "system"
    label_color: Color = BLACK
    axis_colors: AxisColors = (RED, GREEN, ORANGE)
    axis_thickness: float = 0.1
    axis_arrow_size: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "label_color", coerce_color(self.label_color))
        colors = tuple(coerce_color(color) for color in self.axis_colors)
        if len(colors) != 3:
            raise ValueError("axis_colors must hold one color per axis (x, y, z)")
        object.__setattr__(self, "axis_colors", colors)

    def validate(self) -> None:
        if self.label_font_size <= 0.0:
            raise ValueError("label_font_size must be positive")
        if self.axis_thickness <= 0.0:
            raise ValueError("axis_thickness must be positive")
        if self.axis_arrow_size <= 0.0:
            raise ValueError("axis_arrow_size must be positive")


@dataclass(frozen=True)
class BarChartStyle(ChartStyle):
    node_width: float = 1.0
    node_spacing: float = 1.0
    node_color: Color = BLUE
    chamfer_radius: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "node_color", coerce_color(self.node_color))

    def validate(self) -> None:
        super().validate()
        if self.node_width <= 0.0:
            raise ValueError("node_width must be positive")
        if self.node_spacing < 0.0:
            raise ValueError("node_spacing must be non-negative")
        if self.chamfer_radius < 0.0:
            raise ValueError("chamfer_radius must be non-negative")


@dataclass(frozen=True)
class LineChartStyle(ChartStyle):
    line_color: Color = BLUE
    line_thickness: float = 0.05

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "line_color", coerce_color(self.line_color))

    def validate(self) -> None:
        super().validate()
        if self.line_thickness <= 0.0:
            raise ValueError("line_thickness must be positive")


@dataclass(frozen=True)
class PieChartStyle(ChartStyle):
    radius: float = 4.0
    label_radius_factor: float = 1.2

    def validate(self) -> None:
        super().validate()
        if self.radius <= 0.0:
            raise ValueError("radius must be positive")
        if self.label_radius_factor <= 0.0:
            raise ValueError("label_radius_factor must be positive")
