"""
Bar Chart Example

Four labeled bars with the default style, exported to JSON for a renderer.
Demonstrates centering, axes and independent label rotation.
"""

from pathlib import Path

from diagrams3d import BarChart, BarChartStyle
from diagrams3d.io import save_layout

gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

# 1. Build the chart
chart = BarChart.from_labeled([("Q1", 1.0), ("Q2", 3.0), ("Q3", 5.0), ("Q4", 8.0)])

# 2. Inspect derived extents
data = chart.data
print("Bar Chart Layout:")
print(f"Total width:  {data.total_width:.2f}")
print(f"Total height: {data.total_height:.2f}")
print(f"First bar x:  {data.bar_x(0):.2f}")

# 3. Restyle and rotate
chart.set_style(BarChartStyle(node_width=0.8, node_spacing=0.4, chamfer_radius=0.05))
chart.rotate_degrees(-20.0, "y")
chart.rotate_text_degrees(-90.0, "z")

# 4. Lay out and export
layout = chart.layout()
for box in layout.of_kind("box"):
    print(f"  box at {tuple(round(c, 3) for c in box.position)} height={box.height}")

save_layout(layout, str(gallery_dir / "bar_chart.json"))
print(f"\nLayout saved to: {gallery_dir / 'bar_chart.json'}")
