"""Rendering package for sorted-chart.

This package contains the layout engine, the chart renderer and the image writer.
"""

from .layout_engine import LayoutEngine
from .chart_renderer import ChartRenderer
from .image_writer import ImageWriter

__all__ = [
    "LayoutEngine",
    "ChartRenderer",
    "ImageWriter",
]
