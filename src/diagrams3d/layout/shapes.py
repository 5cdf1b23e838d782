from __future__ import annotations

import warnings
from typing import Optional

from diagrams3d.core.colors import Color
from diagrams3d.core.primitives import Cylinder, TextLabel
from diagrams3d.core.vector import XYZ, length_and_direction, midpoint
from diagrams3d.style import ChartStyle

# Below this a segment has no usable direction.
ZERO_LENGTH_TOL = 1e-12


def segment_cylinder(start: XYZ, end: XYZ, radius: float, color: Color, what: str = "segment") -> Optional[Cylinder]:
    """Cylinder spanning ``start`` to ``end``; None (with a warning) when they coincide."""
    delta = (end[0] - start[0], end[1] - start[1], end[2] - start[2])
    if max(abs(delta[0]), abs(delta[1]), abs(delta[2])) <= ZERO_LENGTH_TOL:
        warnings.warn(f"Skipping zero-length {what} at {start}.", RuntimeWarning)
        return None
    length, direction = length_and_direction(start, end)
    return Cylinder(
        position=midpoint(start, end),
        radius=radius,
        height=length,
        direction=direction,
        color=color,
    )


def make_label(text: str, position: XYZ, style: ChartStyle) -> TextLabel:
    return TextLabel(
        text=text,
        position=position,
        font_size=style.label_font_size,
        font_name=style.label_font_name,
        color=style.label_color,
    )
