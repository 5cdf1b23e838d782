from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union, cast

import numpy as np

Color = Tuple[float, float, float, float]
ColorLike = Union[str, Iterable[float]]

BLACK: Color = (0.0, 0.0, 0.0, 1.0)
RED: Color = (1.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)
ORANGE: Color = (1.0, 0.5, 0.0, 1.0)


def coerce_color(value: ColorLike) -> Color:
    """
    Normalize a color to an RGBA float tuple in [0, 1].

    Accepts "#rrggbb" / "#rrggbbaa" hex strings or 3/4 float components.
    """
    if isinstance(value, str):
        return _from_hex(value)
    components = tuple(float(c) for c in value)
    if len(components) == 3:
        components = components + (1.0,)
    if len(components) != 4:
        raise ValueError("color must have 3 or 4 components")
    if any(c != c or c < 0.0 or c > 1.0 for c in components):
        raise ValueError(f"color components must be in [0, 1], got {components}")
    return cast(Color, components)


def to_hex(color: Color) -> str:
    r, g, b, a = (int(round(c * 255)) for c in color)
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """Opaque color with uniformly random RGB channels."""
    gen = rng if rng is not None else np.random.default_rng()
    r, g, b = gen.uniform(0.0, 1.0, size=3)
    return (float(r), float(g), float(b), 1.0)


def _from_hex(text: str) -> Color:
    digits = text[1:] if text.startswith("#") else text
    if len(digits) not in (6, 8):
        raise ValueError(f"hex color must be #rrggbb or #rrggbbaa, got {text!r}")
    try:
        channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    except ValueError as exc:
        raise ValueError(f"invalid hex color {text!r}") from exc
    if len(channels) == 3:
        channels.append(1.0)
    return cast(Color, tuple(channels))
