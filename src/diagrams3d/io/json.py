from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict

from diagrams3d.core.primitives import PRIMITIVE_TYPES, Primitive, TextLabel
from diagrams3d.layout.result import ChartLayout
from diagrams3d.layout.rotation import RotationState
from diagrams3d.style import BarChartStyle, ChartStyle, LineChartStyle, PieChartStyle

SCHEMA_VERSION = "0.1.0"

STYLE_TYPES = {
    "chart": ChartStyle,
    "bar": BarChartStyle,
    "line": LineChartStyle,
    "pie": PieChartStyle,
}


def save_layout(layout: ChartLayout, path: str) -> None:
    _write_json(path, layout_to_dict(layout))


def load_layout(path: str) -> ChartLayout:
    return layout_from_dict(_read_json(path))


def save_style(style: ChartStyle, path: str) -> None:
    _write_json(path, style_to_dict(style))


def load_style(path: str) -> ChartStyle:
    return style_from_dict(_read_json(path))


def layout_to_dict(layout: ChartLayout) -> Dict[str, Any]:
    return {
        "schema": SCHEMA_VERSION,
        "kind": layout.kind,
        "orientation": {
            "chart": list(layout.orientation.chart),
            "labels": list(layout.orientation.labels),
        },
        "primitives": [primitive_to_dict(p) for p in layout.primitives],
        "labels": [primitive_to_dict(label) for label in layout.labels],
    }


def layout_from_dict(data: Dict[str, Any]) -> ChartLayout:
    if "kind" not in data or "primitives" not in data:
        raise ValueError("invalid layout json: missing kind or primitives")
    orientation_raw = data["orientation"] if "orientation" in data else {}
    orientation = RotationState(
        chart=_tuple(orientation_raw.get("chart", (0.0, 0.0, 0.0))),
        labels=_tuple(orientation_raw.get("labels", (0.0, 0.0, 0.0))),
    )
    labels = [primitive_from_dict(item) for item in data.get("labels", [])]
    if not all(isinstance(label, TextLabel) for label in labels):
        raise ValueError("invalid layout json: labels must all be text primitives")
    return ChartLayout(
        kind=data["kind"],
        primitives=tuple(primitive_from_dict(item) for item in data["primitives"]),
        labels=tuple(labels),  # type: ignore[arg-type]
        orientation=orientation,
    )


def primitive_to_dict(primitive: Primitive) -> Dict[str, Any]:
    return {key: _jsonable(value) for key, value in asdict(primitive).items()}


def primitive_from_dict(item: Dict[str, Any]) -> Primitive:
    if "kind" not in item:
        raise ValueError("primitive dict missing kind")
    if item["kind"] not in PRIMITIVE_TYPES:
        raise ValueError(f"unknown primitive kind {item['kind']}")
    cls = PRIMITIVE_TYPES[item["kind"]]
    names = {f.name for f in fields(cls)}
    unknown = set(item) - names
    if unknown:
        raise ValueError(f"unknown {item['kind']} fields: {sorted(unknown)}")
    return cls(**{key: _tuple(value) for key, value in item.items()})


def style_to_dict(style: ChartStyle) -> Dict[str, Any]:
    for name, cls in STYLE_TYPES.items():
        if type(style) is cls:
            data = {key: _jsonable(value) for key, value in asdict(style).items()}
            return {"schema": SCHEMA_VERSION, "type": name, **data}
    raise ValueError(f"unknown style type {type(style).__name__}")


def style_from_dict(data: Dict[str, Any]) -> ChartStyle:
    if "type" not in data:
        raise ValueError("invalid style json: missing type")
    if data["type"] not in STYLE_TYPES:
        raise ValueError(f"unknown style type {data['type']}")
    cls = STYLE_TYPES[data["type"]]
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names - {"schema", "type"}
    if unknown:
        raise ValueError(f"unknown {data['type']} style fields: {sorted(unknown)}")
    values = {key: _tuple(value) for key, value in data.items() if key in names}
    style = cls(**values)
    style.validate()
    return style


def _jsonable(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    return value


def _tuple(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_tuple(v) for v in value)
    return value


def _write_json(path: str, data: Dict[str, Any]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
