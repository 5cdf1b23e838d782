"""
Renderer-agnostic primitive descriptions.

Every primitive is a frozen value: a position (the geometric centre, the same
convention SceneKit-like scene graphs use), its dimensions, an orientation
where one applies, and a display color. Cylinders and cones are modelled along
their local y axis; ``direction`` is the global unit vector that axis points
along. Boxes and sectors are axis aligned.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple, Union

import numpy as np

from .colors import BLACK, BLUE, Color
from .vector import XYZ, local_rotation_matrix

PrimitiveKind = Literal["box", "cylinder", "cone", "sector", "text"]

UP: XYZ = (0.0, 1.0, 0.0)


@dataclass(frozen=True, slots=True)
class Box:
    position: XYZ
    width: float
    height: float
    length: float
    chamfer_radius: float = 0.0
    color: Color = BLUE
    kind: Literal["box"] = "box"


@dataclass(frozen=True, slots=True)
class Cylinder:
    position: XYZ
    radius: float
    height: float
    direction: XYZ = UP
    color: Color = BLUE
    kind: Literal["cylinder"] = "cylinder"

    def rotation_matrix(self) -> np.ndarray:
        return local_rotation_matrix(self.direction)

    def endpoints(self) -> Tuple[XYZ, XYZ]:
        """Centres of the two caps, start first."""
        half = self.height / 2.0
        p, d = self.position, self.direction
        start = (p[0] - d[0] * half, p[1] - d[1] * half, p[2] - d[2] * half)
        end = (p[0] + d[0] * half, p[1] + d[1] * half, p[2] + d[2] * half)
        return start, end


@dataclass(frozen=True, slots=True)
class Cone:
    position: XYZ
    bottom_radius: float
    height: float
    top_radius: float = 0.0
    direction: XYZ = UP
    color: Color = BLUE
    kind: Literal["cone"] = "cone"

    def rotation_matrix(self) -> np.ndarray:
        return local_rotation_matrix(self.direction)


@dataclass(frozen=True, slots=True)
class Sector:
    """Circular sector in the xy plane extruded ``depth`` along z."""

    position: XYZ
    radius: float
    start_angle: float
    end_angle: float
    depth: float
    color: Color = BLUE
    double_sided: bool = True
    kind: Literal["sector"] = "sector"

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0


@dataclass(frozen=True, slots=True)
class TextLabel:
    """Text anchored (centred) at ``position``."""

    text: str
    position: XYZ
    font_size: float = 1.0
    font_name: str = "system"
    color: Color = BLACK
    extrusion_depth: float = 0.1
    kind: Literal["text"] = "text"


Primitive = Union[Box, Cylinder, Cone, Sector, TextLabel]

PRIMITIVE_TYPES = {
    "box": Box,
    "cylinder": Cylinder,
    "cone": Cone,
    "sector": Sector,
    "text": TextLabel,
}
