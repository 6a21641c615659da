# sorted_chart/rendering/layout_engine.py
"""
Map a sorted value series onto pixel coordinates of a fixed canvas.

Pure math, no drawing: the result is a PlotGeometry the renderer consumes.
"""

import logging
from typing import Optional

import numpy as np

from sorted_chart.config import ChartLayoutConfig, DEFAULT_LAYOUT
from sorted_chart.errors import NoNumericDataError
from sorted_chart.models import BarGeometry, PlotGeometry, value_scale


logger = logging.getLogger(__name__)

FLAT_RANGE_EPSILON = float(np.finfo(np.float64).eps)


class LayoutEngine:
    """
    Computes plot geometry (points, bars, value range) for one render.

    Screen coordinates: y grows downward, so higher values map to
    smaller y inside the plot area.
    """

    def __init__(self, config: Optional[ChartLayoutConfig] = None):
        """
        Args:
            config: Canvas size, margins and bar fill ratio
        """
        self.config = config or DEFAULT_LAYOUT
        self.logger = logging.getLogger(__name__)

    def compute(self, sorted_values: np.ndarray) -> PlotGeometry:
        """
        Lay out a sorted series.

        Args:
            sorted_values: Ascending 1-D array, length >= 1

        Returns:
            PlotGeometry with one point and one bar per value

        Raises:
            NoNumericDataError: If the series is empty
        """
        ys = np.asarray(sorted_values, dtype=np.float64)
        n = ys.size
        if n == 0:
            raise NoNumericDataError("Cannot lay out an empty value series.")

        cfg = self.config
        plot_width = cfg.plot_width
        plot_height = cfg.plot_height

        min_value = float(ys[0])
        max_value = float(ys[-1])
        value_range = max_value - min_value
        # -1e308..1e308 overflows; halve every operand so differences stay finite
        scale = value_scale(min_value, max_value)
        span = max_value * scale - min_value * scale
        if abs(value_range) < FLAT_RANGE_EPSILON:
            # Flat series: every bar ends up with zero height on the floor
            value_range = span = 1.0

        # Index-to-x for points; n == 1 puts the only point on the left margin
        denom = max(1, n - 1)
        points = []
        for i, value in enumerate(ys):
            x = cfg.MARGIN_LEFT + (i / denom) * plot_width
            y = cfg.MARGIN_TOP + ((max_value * scale - value * scale) / span) * plot_height
            points.append((float(x), float(y)))

        slot_width = plot_width / n
        bar_width = max(cfg.MIN_BAR_WIDTH, slot_width * cfg.BAR_FILL_RATIO)
        bars = []
        for i, value in enumerate(ys):
            x = cfg.MARGIN_LEFT + i * slot_width + (slot_width - bar_width) / 2.0
            bar_height = ((value * scale - min_value * scale) / span) * plot_height
            y_top = cfg.MARGIN_TOP + (plot_height - bar_height)
            bars.append(BarGeometry(x=float(x), y_top=float(y_top),
                                    width=float(bar_width), height=float(bar_height)))

        self.logger.debug(
            f"Layout: n={n}, min={min_value}, max={max_value}, range={value_range}, "
            f"slot={slot_width:.2f}px, bar={bar_width:.2f}px"
        )

        return PlotGeometry(
            canvas_width=cfg.CANVAS_WIDTH,
            canvas_height=cfg.CANVAS_HEIGHT,
            margin_left=cfg.MARGIN_LEFT,
            margin_right=cfg.MARGIN_RIGHT,
            margin_top=cfg.MARGIN_TOP,
            margin_bottom=cfg.MARGIN_BOTTOM,
            min_value=min_value,
            max_value=max_value,
            value_range=value_range,
            gridline_count=cfg.GRIDLINE_COUNT,
            points=points,
            bars=bars,
        )
