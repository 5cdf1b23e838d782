from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

import numpy as np

from diagrams3d.core.primitives import Primitive, PrimitiveKind, TextLabel
from diagrams3d.core.vector import XYZ
from diagrams3d.layout.rotation import RotationState

ChartKind = Literal["bar", "line", "pie"]


@dataclass(frozen=True)
class ChartLayout:
    """
    Output of one layout pass, handed to a renderer.

    ``primitives`` is the chart group (geometry, axes and axis labels) and
    ``labels`` the data labels, kept apart so they can be rotated on their own.
    ``orientation`` carries both Euler triples.
    """

    kind: ChartKind
    primitives: Tuple[Primitive, ...]
    labels: Tuple[TextLabel, ...] = ()
    orientation: RotationState = field(default_factory=RotationState)

    def of_kind(self, kind: PrimitiveKind) -> Tuple[Primitive, ...]:
        return tuple(p for p in self.primitives if p.kind == kind)

    def bounds(self) -> Tuple[XYZ, XYZ]:
        """Min/max of every primitive position (centres, not surfaces)."""
        points = np.array([p.position for p in self.primitives + self.labels], dtype=float)
        if points.size == 0:
            raise ValueError("layout has no primitives")
        lo = points.min(axis=0)
        hi = points.max(axis=0)
        return (float(lo[0]), float(lo[1]), float(lo[2])), (float(hi[0]), float(hi[1]), float(hi[2]))
