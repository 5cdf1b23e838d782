from __future__ import annotations

from typing import Optional, Union

from diagrams3d.layout.axis import AxisDescriptor, AxisGenerator
from diagrams3d.layout.bar import layout_bar_chart
from diagrams3d.layout.line import layout_line_chart
from diagrams3d.layout.pie import layout_pie_chart
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout.rotation import RotationState
from diagrams3d.model.bar import BarChartData
from diagrams3d.model.line import LineChartData
from diagrams3d.model.pie import PieChartData
from diagrams3d.style import BarChartStyle, LineChartStyle, PieChartStyle

AnyChartData = Union[BarChartData, LineChartData, PieChartData]
AnyChartStyle = Union[BarChartStyle, LineChartStyle, PieChartStyle]


def relayout(
    data: AnyChartData,
    style: Optional[AnyChartStyle] = None,
    rotation: Optional[RotationState] = None,
) -> ChartLayout:
    """Lay out any chart. Pure: equal inputs give equal layouts."""
    if isinstance(data, BarChartData):
        _check_style(style, BarChartStyle)
        return layout_bar_chart(data, style, rotation)  # type: ignore[arg-type]
    if isinstance(data, LineChartData):
        _check_style(style, LineChartStyle)
        return layout_line_chart(data, style, rotation)  # type: ignore[arg-type]
    if isinstance(data, PieChartData):
        _check_style(style, PieChartStyle)
        return layout_pie_chart(data, style, rotation)  # type: ignore[arg-type]
    raise TypeError(f"unsupported chart data {type(data).__name__}")


def _check_style(style: Optional[AnyChartStyle], expected: type) -> None:
    if style is not None and not isinstance(style, expected):
        raise TypeError(f"expected {expected.__name__}, got {type(style).__name__}")


__all__ = [
    "relayout",
    "layout_bar_chart",
    "layout_line_chart",
    "layout_pie_chart",
    "ChartLayout",
    "RotationState",
    "AxisGenerator",
    "AxisDescriptor",
]
