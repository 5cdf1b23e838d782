"""
diagrams3d - Renderer-agnostic 3D layout for bar, line and pie charts.

Raw series go in, positioned primitives come out:
- chart data models normalize series into centred extents and offsets
- layout functions turn data + style into boxes, cylinders, cones, sectors
  and text labels
- chart orchestrators add independent chart/label rotation on top

Rendering, cameras and fonts are left to whatever consumes the layout.
"""

from diagrams3d.chart import BarChart, Chart, LineChart, PieChart
from diagrams3d.core.axes import Axis
from diagrams3d.core.primitives import Box, Cone, Cylinder, Sector, TextLabel
from diagrams3d.layout import ChartLayout, RotationState, relayout
from diagrams3d.model.bar import BarChartData, BarNode
from diagrams3d.model.line import LineChartData, LinePoint
from diagrams3d.model.pie import PieChartData, PieSlice
from diagrams3d.style import BarChartStyle, ChartStyle, LineChartStyle, PieChartStyle

__all__ = [
    "Axis",
    "BarNode",
    "BarChartData",
    "LinePoint",
    "LineChartData",
    "PieSlice",
    "PieChartData",
    "ChartStyle",
    "BarChartStyle",
    "LineChartStyle",
    "PieChartStyle",
    "Box",
    "Cylinder",
    "Cone",
    "Sector",
    "TextLabel",
    "ChartLayout",
    "RotationState",
    "relayout",
    "Chart",
    "BarChart",
    "LineChart",
    "PieChart",
]
