from diagrams3d.io.csv import export_primitives, read_bar_series, read_line_series, read_pie_series
from diagrams3d.io.json import (
    layout_from_dict,
    layout_to_dict,
    load_layout,
    load_style,
    save_layout,
    save_style,
    style_from_dict,
    style_to_dict,
)

__all__ = [
    "save_layout",
    "load_layout",
    "layout_to_dict",
    "layout_from_dict",
    "save_style",
    "load_style",
    "style_to_dict",
    "style_from_dict",
    "read_bar_series",
    "read_line_series",
    "read_pie_series",
    "export_primitives",
]
