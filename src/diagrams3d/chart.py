"""
Chart orchestrators.

A chart pairs one chart-data value with the accumulated rotation of its chart
and label groups. Layouts are rebuilt from scratch on every :meth:`layout`
call; replacing the style swaps the data for one re-derived against it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from diagrams3d.core.axes import Axis
from diagrams3d.layout import AnyChartData, AnyChartStyle, relayout
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout import rotation as rot
from diagrams3d.layout.rotation import RotationState
from diagrams3d.model.bar import BarChartData, BarNode
from diagrams3d.model.line import LineChartData, LinePoint
from diagrams3d.model.pie import PieChartData, PieSlice
from diagrams3d.style import BarChartStyle, LineChartStyle, PieChartStyle


@runtime_checkable
class Rotatable(Protocol):
    def rotate(self, angle: float, axis: Axis) -> None: ...

    def rotate_degrees(self, angle: float, axis: Axis) -> None: ...

    def rotate_text(self, angle: float, axis: Axis) -> None: ...

    def rotate_text_degrees(self, angle: float, axis: Axis) -> None: ...


@dataclass
class Chart:
    data: AnyChartData
    rotation: RotationState = field(default_factory=RotationState)

    @property
    def style(self) -> AnyChartStyle:
        return self.data.style

    def set_style(self, style: AnyChartStyle) -> None:
        if not isinstance(style, type(self.data.style)):
            raise TypeError(f"expected {type(self.data.style).__name__}, got {type(style).__name__}")
        self.data = self.data.with_style(style)  # type: ignore[arg-type]

    def layout(self) -> ChartLayout:
        return relayout(self.data, rotation=self.rotation)

    def rotate(self, angle: float, axis: Axis) -> None:
        """Rotate the whole chart by ``angle`` radians about ``axis``."""
        self.rotation = rot.rotate(self.rotation, angle, axis)

    def rotate_degrees(self, angle: float, axis: Axis) -> None:
        self.rotation = rot.rotate_degrees(self.rotation, angle, axis)

    def rotate_text(self, angle: float, axis: Axis) -> None:
        """Rotate only the data labels by ``angle`` radians about ``axis``."""
        self.rotation = rot.rotate_labels(self.rotation, angle, axis)

    def rotate_text_degrees(self, angle: float, axis: Axis) -> None:
        self.rotation = rot.rotate_labels_degrees(self.rotation, angle, axis)

    def reset_rotation(self) -> None:
        self.rotation = RotationState()


@dataclass
class BarChart(Chart):
    data: BarChartData

    @classmethod
    def from_values(cls, values: Iterable[float], style: Optional[BarChartStyle] = None) -> Optional[BarChart]:
        return _wrap(cls, BarChartData.from_values(values, style))

    @classmethod
    def from_labeled(
        cls, values: Iterable[Tuple[str, float]], style: Optional[BarChartStyle] = None
    ) -> Optional[BarChart]:
        return _wrap(cls, BarChartData.from_labeled(values, style))

    @classmethod
    def from_labeled_depths(
        cls, values: Iterable[Tuple[str, float, float]], style: Optional[BarChartStyle] = None
    ) -> Optional[BarChart]:
        return _wrap(cls, BarChartData.from_labeled_depths(values, style))

    @classmethod
    def from_nodes(cls, nodes: Sequence[BarNode], style: Optional[BarChartStyle] = None) -> Optional[BarChart]:
        return _wrap(cls, BarChartData.from_nodes(nodes, style))


@dataclass
class LineChart(Chart):
    data: LineChartData

    @classmethod
    def from_values(cls, values: Iterable[float], style: Optional[LineChartStyle] = None) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_values(values, style))

    @classmethod
    def from_pairs(
        cls, values: Iterable[Tuple[float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_pairs(values, style))

    @classmethod
    def from_triples(
        cls, values: Iterable[Tuple[float, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_triples(values, style))

    @classmethod
    def from_labeled_values(
        cls, values: Iterable[Tuple[str, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_labeled_values(values, style))

    @classmethod
    def from_labeled_pairs(
        cls, values: Iterable[Tuple[str, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_labeled_pairs(values, style))

    @classmethod
    def from_labeled_triples(
        cls, values: Iterable[Tuple[str, float, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_labeled_triples(values, style))

    @classmethod
    def from_points(cls, points: Sequence[LinePoint], style: Optional[LineChartStyle] = None) -> Optional[LineChart]:
        return _wrap(cls, LineChartData.from_points(points, style))


@dataclass
class PieChart(Chart):
    data: PieChartData

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChart]:
        return _wrap(cls, PieChartData.from_values(values, style, rng))

    @classmethod
    def from_value_heights(
        cls,
        values: Iterable[Tuple[float, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChart]:
        return _wrap(cls, PieChartData.from_value_heights(values, style, rng))

    @classmethod
    def from_labeled(
        cls,
        values: Iterable[Tuple[str, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChart]:
        return _wrap(cls, PieChartData.from_labeled(values, style, rng))

    @classmethod
    def from_labeled_heights(
        cls,
        values: Iterable[Tuple[str, float, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChart]:
        return _wrap(cls, PieChartData.from_labeled_heights(values, style, rng))

    @classmethod
    def from_slices(cls, slices: Sequence[PieSlice], style: Optional[PieChartStyle] = None) -> Optional[PieChart]:
        return _wrap(cls, PieChartData.from_slices(slices, style))


def _wrap(cls, data):
    return None if data is None else cls(data=data)
