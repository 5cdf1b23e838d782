"""
CSV series readers and primitive export.

Series files carry a header row. Recognised columns:

- bar: ``value`` (required), ``label``, ``depth``
- line: ``y`` (required), ``x`` (defaults to the row index), ``z``, ``label``
- pie: ``value`` (required), ``label``, ``height``

Blank cells count as missing. An empty file (header only) yields ``None``,
like every other chart-data factory.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from diagrams3d.core.colors import random_color, to_hex
from diagrams3d.core.primitives import Box, Cone, Cylinder, Primitive, Sector
from diagrams3d.layout.result import ChartLayout
from diagrams3d.model.bar import BarChartData, BarNode
from diagrams3d.model.line import LineChartData, LinePoint
from diagrams3d.model.pie import PieChartData, PieSlice
from diagrams3d.style import BarChartStyle, LineChartStyle, PieChartStyle

PRIMITIVE_COLUMNS = ["group", "kind", "x", "y", "z", "width", "height", "length", "radius", "color", "text"]


def read_bar_series(path: str, style: Optional[BarChartStyle] = None) -> Optional[BarChartData]:
    rows = _read_rows(path, required=("value",))
    nodes = [
        BarNode(value=float(row["value"]), label=row.get("label"), depth=_optional_float(row, "depth"))
        for row in rows
    ]
    return BarChartData.from_nodes(nodes, style)


def read_line_series(path: str, style: Optional[LineChartStyle] = None) -> Optional[LineChartData]:
    rows = _read_rows(path, required=("y",))
    points = []
    for index, row in enumerate(rows):
        x = _optional_float(row, "x")
        z = _optional_float(row, "z")
        points.append(
            LinePoint(
                x=float(index) if x is None else x,
                y=float(row["y"]),
                z=0.0 if z is None else z,
                label=row.get("label"),
            )
        )
    return LineChartData.from_points(points, style)


def read_pie_series(
    path: str,
    style: Optional[PieChartStyle] = None,
    rng: Optional[np.random.Generator] = None,
) -> Optional[PieChartData]:
    rows = _read_rows(path, required=("value",))
    slices = [
        PieSlice(
            value=float(row["value"]),
            label=row.get("label"),
            height=_optional_float(row, "height"),
            color=random_color(rng),
        )
        for row in rows
    ]
    return PieChartData.from_slices(slices, style)


def export_primitives(layout: ChartLayout, path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(PRIMITIVE_COLUMNS)
        for primitive in layout.primitives:
            writer.writerow(_primitive_row("chart", primitive))
        for label in layout.labels:
            writer.writerow(_primitive_row("labels", label))


def _primitive_row(group: str, p: Primitive) -> List[object]:
    width = height = length = radius = ""
    text = ""
    if isinstance(p, Box):
        width, height, length = p.width, p.height, p.length
    elif isinstance(p, Cylinder):
        height, radius = p.height, p.radius
    elif isinstance(p, Cone):
        height, radius = p.height, p.bottom_radius
    elif isinstance(p, Sector):
        length, radius = p.depth, p.radius
    else:
        text = p.text
    x, y, z = p.position
    return [group, p.kind, x, y, z, width, height, length, radius, to_hex(p.color), text]


def _read_rows(path: str, required: tuple) -> List[Dict[str, str]]:
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        columns = reader.fieldnames or []
        missing = [name for name in required if name not in columns]
        if missing:
            raise ValueError(f"{path}: missing column(s) {', '.join(missing)}")
        rows = []
        for row in reader:
            cleaned = {key: value.strip() for key, value in row.items() if key and value and value.strip()}
            if not cleaned:
                continue
            for name in required:
                if name not in cleaned:
                    raise ValueError(f"{path}: row {reader.line_num} has no {name}")
            rows.append(cleaned)
        return rows


def _optional_float(row: Dict[str, str], key: str) -> Optional[float]:
    return float(row[key]) if key in row else None
