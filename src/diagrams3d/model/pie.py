from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from diagrams3d.core.colors import Color, coerce_color, random_color
from diagrams3d.core.vector import coerce_number
from diagrams3d.model.base import ensure_nodes
from diagrams3d.style import PieChartStyle

FULL_TURN = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class PieSlice:
    """
    One slice. The color is drawn once at construction, so re-running a
    layout never changes it; pass ``color`` (or an ``rng`` to the chart
    factories) for reproducible output.
    """

    value: float
    label: Optional[str] = None
    height: Optional[float] = None
    color: Color = field(default_factory=random_color)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", coerce_number(self.value, "slice value"))
        if self.height is not None:
            object.__setattr__(self, "height", coerce_number(self.height, "slice height"))
        object.__setattr__(self, "color", coerce_color(self.color))


@dataclass(frozen=True)
class PieChartData:
    """
    Slices in angular order, starting at angle 0 and turning counter-clockwise.

    ``angles`` holds the n+1 cumulative boundaries; slice ``i`` spans
    ``angles[i]`` to ``angles[i + 1]``. When every value is zero the circle is
    split evenly and a RuntimeWarning is emitted.
    """

    nodes: Tuple[PieSlice, ...]
    style: PieChartStyle = field(default_factory=PieChartStyle)
    total_value: float = field(init=False)
    angles: Tuple[float, ...] = field(init=False)
    total_height: float = field(init=False)

    def __post_init__(self) -> None:
        nodes = ensure_nodes(self.nodes, "pie chart")
        if not all(isinstance(node, PieSlice) for node in nodes):
            raise TypeError("all nodes must be PieSlice instances")
        object.__setattr__(self, "nodes", nodes)
        self.style.validate()

        values = np.array([s.value for s in nodes], dtype=float)
        total = sum(s.value for s in nodes)
        heights = [s.height for s in nodes if s.height is not None]

        object.__setattr__(self, "total_value", total)
        object.__setattr__(self, "angles", _cumulative_angles(values))
        object.__setattr__(self, "total_height", max(heights) if heights else 0.0)

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChartData]:
        return cls.from_slices([PieSlice(value=v, color=random_color(rng)) for v in values], style)

    @classmethod
    def from_value_heights(
        cls,
        values: Iterable[Tuple[float, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChartData]:
        slices = [PieSlice(value=v, height=h, color=random_color(rng)) for v, h in values]
        return cls.from_slices(slices, style)

    @classmethod
    def from_labeled(
        cls,
        values: Iterable[Tuple[str, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChartData]:
        slices = [PieSlice(value=v, label=label, color=random_color(rng)) for label, v in values]
        return cls.from_slices(slices, style)

    @classmethod
    def from_labeled_heights(
        cls,
        values: Iterable[Tuple[str, float, float]],
        style: Optional[PieChartStyle] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional[PieChartData]:
        slices = [
            PieSlice(value=v, label=label, height=h, color=random_color(rng)) for label, v, h in values
        ]
        return cls.from_slices(slices, style)

    @classmethod
    def from_slices(cls, slices: Sequence[PieSlice], style: Optional[PieChartStyle] = None) -> Optional[PieChartData]:
        """Build chart data, or return None when there are no slices."""
        slices = tuple(slices)
        if not slices:
            return None
        return cls(nodes=slices, style=style or PieChartStyle())

    def with_style(self, style: PieChartStyle) -> PieChartData:
        return replace(self, style=style)

    def slice_angles(self, index: int) -> Tuple[float, float]:
        return self.angles[index], self.angles[index + 1]


def _cumulative_angles(values: np.ndarray) -> Tuple[float, ...]:
    # Scaled by the largest magnitude; the raw sum can overflow.
    scale = float(np.abs(values).max())
    scaled = values / scale if scale > 0.0 else values
    scaled_total = float(scaled.sum())
    if scaled_total == 0.0:
        warnings.warn(
            f"Pie chart values sum to zero; splitting {len(values)} slices evenly.",
            RuntimeWarning,
        )
        fractions = np.full(len(values), 1.0 / len(values))
    else:
        fractions = scaled / scaled_total
    steps = FULL_TURN * fractions
    return (0.0,) + tuple(float(a) for a in np.cumsum(steps))
