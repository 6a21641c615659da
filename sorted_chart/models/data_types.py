"""
Data types for sorted value charts.

Provides dataclasses for:
- BarGeometry: Pixel-space rectangle and marker anchor of one bar
- PlotGeometry: Full layout of one render (plot area, value range, bars, points)
- OutputArtifact: Encoded image bytes plus the absolute path they were written to
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def value_scale(min_value: float, max_value: float) -> float:
    """Factor applied to values before subtracting them.

    1.0 normally, 0.5 when max - min overflows to infinity.
    """
    return 1.0 if math.isfinite(max_value - min_value) else 0.5


@dataclass(frozen=True)
class BarGeometry:
    """One bar of the chart, in canvas pixel coordinates (float)."""

    x: float
    y_top: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        """Horizontal midpoint, where the marker is drawn."""
        return self.x + self.width / 2.0

    @property
    def y_bottom(self) -> float:
        """Plot-area floor the bar grows up from."""
        return self.y_top + self.height

    @property
    def marker(self) -> Tuple[float, float]:
        """Marker centre (center_x, y_top)."""
        return (self.center_x, self.y_top)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "x": self.x,
            "y_top": self.y_top,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class PlotGeometry:
    """Derived, read-only layout parameters for one render."""

    canvas_width: int
    canvas_height: int
    margin_left: int
    margin_right: int
    margin_top: int
    margin_bottom: int
    min_value: float
    max_value: float
    value_range: float  # max - min (may be inf), or 1.0 for a flat series
    gridline_count: int = 5
    points: List[Tuple[float, float]] = field(default_factory=list)
    bars: List[BarGeometry] = field(default_factory=list)

    @property
    def plot_width(self) -> int:
        """Canvas width minus left and right margins."""
        return self.canvas_width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> int:
        """Canvas height minus top and bottom margins."""
        return self.canvas_height - self.margin_top - self.margin_bottom

    @property
    def plot_floor(self) -> int:
        """Y coordinate of the x-axis (bottom of the plot area)."""
        return self.margin_top + self.plot_height

    @property
    def size(self) -> int:
        """Number of values laid out."""
        return len(self.bars)

    def gridlines(self) -> List[Tuple[int, float]]:
        """
        Horizontal gridlines from top to bottom.

        Label values use the raw max - min, so a flat series labels
        every line with its single value.

        Returns:
            List of (y_pixel, value) with value = max - t * (max - min) for
            evenly spaced fractions t in [0, 1].
        """
        scale = value_scale(self.min_value, self.max_value)
        span = self.max_value * scale - self.min_value * scale
        steps = self.gridline_count - 1
        lines = []
        for i in range(self.gridline_count):
            t = i / steps
            y = self.margin_top + int(t * self.plot_height)
            lines.append((y, (self.max_value * scale - t * span) / scale))
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (stored in the dataset manifest)."""
        return {
            "canvas": [self.canvas_width, self.canvas_height],
            "margins": {
                "left": self.margin_left,
                "right": self.margin_right,
                "top": self.margin_top,
                "bottom": self.margin_bottom,
            },
            "min": self.min_value,
            "max": self.max_value,
            "range": self.value_range,
            "bars": [bar.to_dict() for bar in self.bars],
        }


@dataclass(frozen=True)
class OutputArtifact:
    """Encoded image and the resolved absolute path it was written to."""

    data: bytes
    path: str

    @property
    def size_bytes(self) -> int:
        return len(self.data)
