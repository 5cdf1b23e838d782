from .axes import AXIS_ORDER, Axis, axis_index, axis_vector
from .colors import BLACK, BLUE, GREEN, ORANGE, RED, Color, coerce_color, random_color, to_hex
from .primitives import PRIMITIVE_TYPES, Box, Cone, Cylinder, Primitive, Sector, TextLabel
from .vector import XYZ, coerce_xyz, distance, length_and_direction, local_rotation_matrix, midpoint

__all__ = [
    "AXIS_ORDER", "Axis", "axis_index", "axis_vector",
    "Color", "coerce_color", "random_color", "to_hex",
    "BLACK", "RED", "GREEN", "BLUE", "ORANGE",
    "Box",
    "Cylinder",
    "Cone",
    "Sector",
    "TextLabel",
    "Primitive",
    "PRIMITIVE_TYPES",
    "XYZ", "coerce_xyz", "distance", "length_and_direction", "local_rotation_matrix", "midpoint",
]
