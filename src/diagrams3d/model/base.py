from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ChartData(Protocol):
    """Anything that owns an ordered node sequence and a style."""

    @property
    def nodes(self) -> Sequence[Any]: ...

    @property
    def style(self) -> Any: ...


@runtime_checkable
class ChartDataWithExtents(ChartData, Protocol):
    """Chart data that also exposes axis extents and centering offsets."""

    @property
    def total_width(self) -> float: ...

    @property
    def total_height(self) -> float: ...

    @property
    def total_length(self) -> float: ...

    @property
    def x_offset(self) -> float: ...

    @property
    def y_offset(self) -> float: ...


def ensure_nodes(nodes: Sequence[Any], kind: str) -> tuple:
    values = tuple(nodes)
    if not values:
        raise ValueError(f"{kind} requires at least one node")
    return values
