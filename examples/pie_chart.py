"""
Pie Chart Example

Slices with their own extrusion heights. A seeded generator keeps the slice
colors reproducible between runs.
"""

import math

import numpy as np

from diagrams3d import PieChart, PieChartData

data = PieChartData.from_labeled_heights(
    [("Rent", 40.0, 2.0), ("Food", 25.0, 1.5), ("Travel", 20.0, 1.0), ("Other", 15.0, 0.5)],
    rng=np.random.default_rng(2024),
)
chart = PieChart(data=data)
chart.rotate_degrees(-60.0, "x")

layout = chart.layout()
print("Pie Chart Slices:")
for node, sector in zip(data.nodes, layout.of_kind("sector")):
    print(f"  {node.label:<7} {math.degrees(sector.sweep):6.1f} deg  depth={sector.depth}")
print(f"Tallest slice: {data.total_height}")
