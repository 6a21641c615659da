"""Models package for sorted-chart.

This package contains the data types shared by the layout engine,
the renderer and the image writer.
"""
from .data_types import (
    BarGeometry,
    PlotGeometry,
    OutputArtifact,
    value_scale,
)

__all__ = [
    "BarGeometry",
    "PlotGeometry",
    "OutputArtifact",
    "value_scale",
]
