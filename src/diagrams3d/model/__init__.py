from diagrams3d.model.bar import BarChartData, BarNode
from diagrams3d.model.base import ChartData, ChartDataWithExtents
from diagrams3d.model.line import LineChartData, LinePoint
from diagrams3d.model.pie import PieChartData, PieSlice

__all__ = [
    "ChartData",
    "ChartDataWithExtents",
    "BarNode",
    "BarChartData",
    "LinePoint",
    "LineChartData",
    "PieSlice",
    "PieChartData",
]
