from __future__ import annotations

import csv
import json
import sys
from pathlib import Path

import numpy as np
import pytest

# Allow running directly from repo root without installation.
SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))

from diagrams3d import BarChart, BarChartStyle, LineChartStyle, PieChartData, PieChartStyle, relayout
from diagrams3d.io import (
    export_primitives,
    layout_from_dict,
    layout_to_dict,
    load_layout,
    load_style,
    read_bar_series,
    read_line_series,
    read_pie_series,
    save_layout,
    save_style,
    style_from_dict,
)


def _write(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_layout_json_round_trip(tmp_path: Path) -> None:
    chart = BarChart.from_labeled_depths([("a", 1.0, 2.0), ("b", 3.5, 1.0)])
    chart.rotate_degrees(30.0, "x")
    layout = chart.layout()

    target = tmp_path / "out" / "bar.json"
    save_layout(layout, str(target))
    loaded = load_layout(str(target))

    assert loaded == layout
    raw = json.loads(target.read_text(encoding="utf-8"))
    assert raw["schema"] == "0.1.0"
    assert raw["kind"] == "bar"
    assert raw["primitives"][0]["kind"] == "box"


def test_pie_layout_round_trip() -> None:
    data = PieChartData.from_labeled([("a", 1.0), ("b", 2.0)], rng=np.random.default_rng(3))
    layout = relayout(data)
    assert layout_from_dict(json.loads(json.dumps(layout_to_dict(layout)))) == layout


def test_layout_from_dict_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        layout_from_dict({"kind": "bar"})
    with pytest.raises(ValueError):
        layout_from_dict({"kind": "bar", "primitives": [{"kind": "sphere", "position": [0, 0, 0]}]})
    with pytest.raises(ValueError):
        layout_from_dict({"kind": "bar", "primitives": [{"position": [0, 0, 0]}]})


@pytest.mark.parametrize(
    "style",
    [
        BarChartStyle(node_width=2.0, node_color="#336699"),
        LineChartStyle(line_thickness=0.3, axis_colors=("#000000", "#ffffff", "#808080")),
        PieChartStyle(radius=6.0),
    ],
)
def test_style_json_round_trip(tmp_path: Path, style) -> None:
    target = tmp_path / "style.json"
    save_style(style, str(target))
    assert load_style(str(target)) == style


def test_style_from_dict_validates() -> None:
    with pytest.raises(ValueError):
        style_from_dict({"type": "pie", "radius": -1.0})
    with pytest.raises(ValueError):
        style_from_dict({"radius": 1.0})
    with pytest.raises(ValueError):
        style_from_dict({"type": "bar", "node_width": 1.0, "bar_colour": "#ff0000"})


def test_read_bar_series(tmp_path: Path) -> None:
    path = _write(tmp_path / "bars.csv", "label,value,depth\na,1,\nb,3,2\n,5,\n")
    data = read_bar_series(path)

    assert [n.value for n in data.nodes] == [1.0, 3.0, 5.0]
    assert [n.label for n in data.nodes] == ["a", "b", None]
    assert [n.depth for n in data.nodes] == [None, 2.0, None]
    assert data.total_length == 2.0


def test_read_line_series_defaults_x_to_index(tmp_path: Path) -> None:
    path = _write(tmp_path / "line.csv", "y,label\n4,start\n6,\n5,end\n")
    data = read_line_series(path)
    assert [(p.x, p.y, p.z) for p in data.nodes] == [(0.0, 4.0, 0.0), (1.0, 6.0, 0.0), (2.0, 5.0, 0.0)]
    assert data.nodes[2].label == "end"


def test_read_line_series_explicit_x_and_z(tmp_path: Path) -> None:
    path = _write(tmp_path / "line3d.csv", "x,y,z,label\n2,4,1,a\n5,6,,b\n")
    data = read_line_series(path)
    assert [(p.x, p.y, p.z) for p in data.nodes] == [(2.0, 4.0, 1.0), (5.0, 6.0, 0.0)]
    assert data.total_length == 1.0


def test_read_pie_series(tmp_path: Path) -> None:
    path = _write(tmp_path / "pie.csv", "label,value,height\nx,1,2\ny,3,\n")
    data = read_pie_series(path, rng=np.random.default_rng(0))
    assert data.total_value == 4.0
    assert data.total_height == 2.0


def test_empty_series_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "empty.csv", "value\n")
    assert read_bar_series(path) is None


def test_missing_required_column(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.csv", "label\na\n")
    with pytest.raises(ValueError):
        read_pie_series(path)


def test_export_primitives(tmp_path: Path) -> None:
    layout = BarChart.from_labeled([("a", 1.0), ("b", 2.0)]).layout()
    target = tmp_path / "prims.csv"
    export_primitives(layout, str(target))

    with open(target, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == len(layout.primitives) + len(layout.labels)
    assert rows[0]["kind"] == "box"
    assert rows[0]["color"] == "#0000ff"
    assert [r["text"] for r in rows if r["group"] == "labels"] == ["a", "b"]
