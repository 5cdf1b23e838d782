from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from diagrams3d.core.vector import XYZ, coerce_number
from diagrams3d.model.base import ensure_nodes
from diagrams3d.style import BarChartStyle


@dataclass(frozen=True, slots=True)
class BarNode:
    """
    One bar: its height ``value``, an optional label and an optional depth.

    Negative values are not rejected; they simply produce boxes below the base.
    """

    value: float
    label: Optional[str] = None
    depth: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", coerce_number(self.value, "bar value"))
        if self.depth is not None:
            object.__setattr__(self, "depth", coerce_number(self.depth, "bar depth"))


@dataclass(frozen=True)
class BarChartData:
    """
    Bars laid out left to right, centred on the origin.

    Extents and offsets are derived once from the nodes and the style's
    ``node_width``/``node_spacing``. Use :meth:`with_style` to re-derive them
    against another style.
    """

    nodes: Tuple[BarNode, ...]
    style: BarChartStyle = field(default_factory=BarChartStyle)
    total_width: float = field(init=False)
    total_height: float = field(init=False)
    total_length: float = field(init=False)
    x_offset: float = field(init=False)
    y_offset: float = field(init=False)

    def __post_init__(self) -> None:
        nodes = ensure_nodes(self.nodes, "bar chart")
        if not all(isinstance(node, BarNode) for node in nodes):
            raise TypeError("all nodes must be BarNode instances")
        object.__setattr__(self, "nodes", nodes)
        self.style.validate()

        count = len(nodes)
        width = self.style.node_width
        values = np.array([node.value for node in nodes], dtype=float)
        depths = [node.depth for node in nodes if node.depth is not None]

        total_height = float(values.max())
        total_width = count * width + (count - 1) * self.style.node_spacing
        object.__setattr__(self, "total_height", total_height)
        object.__setattr__(self, "total_width", float(total_width))
        object.__setattr__(self, "x_offset", -total_width / 2.0 + width / 2.0)
        object.__setattr__(self, "y_offset", -total_height / 2.0)
        object.__setattr__(self, "total_length", (max(depths) if depths else 0.0) * width)

    @classmethod
    def from_values(cls, values: Iterable[float], style: Optional[BarChartStyle] = None) -> Optional[BarChartData]:
        return cls.from_nodes([BarNode(value=value) for value in values], style)

    @classmethod
    def from_labeled(
        cls, values: Iterable[Tuple[str, float]], style: Optional[BarChartStyle] = None
    ) -> Optional[BarChartData]:
        return cls.from_nodes([BarNode(value=value, label=label) for label, value in values], style)

    @classmethod
    def from_labeled_depths(
        cls, values: Iterable[Tuple[str, float, float]], style: Optional[BarChartStyle] = None
    ) -> Optional[BarChartData]:
        nodes = [BarNode(value=value, label=label, depth=depth) for label, value, depth in values]
        return cls.from_nodes(nodes, style)

    @classmethod
    def from_nodes(cls, nodes: Sequence[BarNode], style: Optional[BarChartStyle] = None) -> Optional[BarChartData]:
        """Build chart data, or return None when there are no bars."""
        nodes = tuple(nodes)
        if not nodes:
            return None
        return cls(nodes=nodes, style=style or BarChartStyle())

    def with_style(self, style: BarChartStyle) -> BarChartData:
        return replace(self, style=style)

    def bar_x(self, index: int) -> float:
        return self.x_offset + index * (self.style.node_width + self.style.node_spacing)

    def bar_length(self, index: int) -> float:
        depth = self.nodes[index].depth
        return self.style.node_width if depth is None else depth

    def bar_position(self, index: int) -> XYZ:
        """Centre of bar ``index``; the box sits on the base and extends back from z=0."""
        node = self.nodes[index]
        return (self.bar_x(index), self.y_offset + node.value / 2.0, -self.bar_length(index) / 2.0)
