from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from diagrams3d.core.vector import XYZ, coerce_number
from diagrams3d.model.base import ensure_nodes
from diagrams3d.style import LineChartStyle


@dataclass(frozen=True, slots=True)
class LinePoint:
    x: float
    y: float
    z: float = 0.0
    label: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, coerce_number(getattr(self, name), f"point {name}"))


@dataclass(frozen=True)
class LineChartData:
    """
    A polyline through 3D points.

    x and y are centred on their midpoints; z is anchored at its minimum so the
    chart starts at the base plane and grows away from the viewer.
    """

    nodes: Tuple[LinePoint, ...]
    style: LineChartStyle = field(default_factory=LineChartStyle)
    total_width: float = field(init=False)
    total_height: float = field(init=False)
    total_length: float = field(init=False)
    x_offset: float = field(init=False)
    y_offset: float = field(init=False)
    z_offset: float = field(init=False)

    def __post_init__(self) -> None:
        nodes = ensure_nodes(self.nodes, "line chart")
        if not all(isinstance(node, LinePoint) for node in nodes):
            raise TypeError("all nodes must be LinePoint instances")
        object.__setattr__(self, "nodes", nodes)
        self.style.validate()

        coords = np.array([(p.x, p.y, p.z) for p in nodes], dtype=float)
        mins = coords.min(axis=0)
        spans = coords.max(axis=0) - mins

        object.__setattr__(self, "total_width", float(spans[0]))
        object.__setattr__(self, "total_height", float(spans[1]))
        object.__setattr__(self, "total_length", float(spans[2]))
        object.__setattr__(self, "x_offset", float(spans[0] / 2.0 + mins[0]))
        object.__setattr__(self, "y_offset", float(spans[1] / 2.0 + mins[1]))
        object.__setattr__(self, "z_offset", float(mins[2]))

    @classmethod
    def from_values(cls, values: Iterable[float], style: Optional[LineChartStyle] = None) -> Optional[LineChartData]:
        """y values; x is the index."""
        return cls.from_points([LinePoint(x=i, y=y) for i, y in enumerate(values)], style)

    @classmethod
    def from_pairs(
        cls, values: Iterable[Tuple[float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        return cls.from_points([LinePoint(x=x, y=y) for x, y in values], style)

    @classmethod
    def from_triples(
        cls, values: Iterable[Tuple[float, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        return cls.from_points([LinePoint(x=x, y=y, z=z) for x, y, z in values], style)

    @classmethod
    def from_labeled_values(
        cls, values: Iterable[Tuple[str, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        points = [LinePoint(x=i, y=y, label=label) for i, (label, y) in enumerate(values)]
        return cls.from_points(points, style)

    @classmethod
    def from_labeled_pairs(
        cls, values: Iterable[Tuple[str, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        return cls.from_points([LinePoint(x=x, y=y, label=label) for label, x, y in values], style)

    @classmethod
    def from_labeled_triples(
        cls, values: Iterable[Tuple[str, float, float, float]], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        points = [LinePoint(x=x, y=y, z=z, label=label) for label, x, y, z in values]
        return cls.from_points(points, style)

    @classmethod
    def from_points(
        cls, points: Sequence[LinePoint], style: Optional[LineChartStyle] = None
    ) -> Optional[LineChartData]:
        """Build chart data, or return None when there are no points."""
        points = tuple(points)
        if not points:
            return None
        return cls(nodes=points, style=style or LineChartStyle())

    def with_style(self, style: LineChartStyle) -> LineChartData:
        return replace(self, style=style)

    def rendered_position(self, index: int) -> XYZ:
        """Offset-adjusted position of point ``index``; depth grows toward -z."""
        p = self.nodes[index]
        return (p.x - self.x_offset, p.y - self.y_offset, -p.z + self.z_offset)
