"""
Line Chart Example

A labeled 3D polyline. Segments are cylinders between consecutive points;
the chart has depth so a Z axis is drawn too.
"""

from pathlib import Path

from diagrams3d import LineChartData, LineChartStyle, relayout
from diagrams3d.io import export_primitives

gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

data = LineChartData.from_labeled_triples([
    ("start", 0.0, 1.0, 0.0),
    ("peak", 2.0, 6.0, 1.5),
    ("dip", 4.0, 2.0, 3.0),
    ("end", 6.0, 4.0, 4.0),
])

layout = relayout(data, LineChartStyle(line_thickness=0.08, line_color="#cc3300"))

print("Line Chart Segments:")
for segment in layout.of_kind("cylinder")[:3]:
    print(f"  length={segment.height:.3f} direction={tuple(round(c, 3) for c in segment.direction)}")

export_primitives(layout, str(gallery_dir / "line_chart.csv"))
print(f"\nPrimitives saved to: {gallery_dir / 'line_chart.csv'}")
