# sorted_chart/rendering/chart_renderer.py
"""
Rasterize a PlotGeometry into an RGB canvas.

Draw order (later draws overlay earlier ones):
1. y-axis and x-axis rectangles
2. horizontal gridlines with value labels
3. bars, each followed by its top marker
4. bold title
"""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from sorted_chart.config import ChartLayoutConfig, DEFAULT_LAYOUT
from sorted_chart.models import PlotGeometry


logger = logging.getLogger(__name__)


def _px(value: float) -> int:
    """Round half up to the nearest pixel (numpy/Python round is half-even)."""
    return int(np.floor(value + 0.5))


class ChartRenderer:
    """
    Draws axes, gridlines, labels, bars, markers and title with OpenCV primitives.

    The canvas is an (H, W, 3) uint8 array in RGB order. Colours from the
    config are applied as-is, conversion to BGR happens at encode time.
    """

    def __init__(self, config: Optional[ChartLayoutConfig] = None):
        self.config = config or DEFAULT_LAYOUT
        self.logger = logging.getLogger(__name__)

    def new_canvas(self, geometry: PlotGeometry) -> np.ndarray:
        """Allocate a canvas filled with the background colour."""
        canvas = np.empty((geometry.canvas_height, geometry.canvas_width, 3), dtype=np.uint8)
        canvas[:, :] = self.config.BACKGROUND_COLOR
        return canvas

    def render(self, geometry: PlotGeometry, title: str) -> np.ndarray:
        """Create a fresh canvas and draw the full chart on it."""
        canvas = self.new_canvas(geometry)
        self.draw(canvas, geometry, title)
        return canvas

    def draw(self, canvas: np.ndarray, geometry: PlotGeometry, title: str) -> None:
        """
        Draw the chart onto ``canvas`` in place.

        Args:
            canvas: RGB array pre-filled with the background
            geometry: Layout computed by LayoutEngine
            title: Text drawn above the plot area

        Raises:
            ValueError: If the canvas shape does not match the geometry
        """
        expected = (geometry.canvas_height, geometry.canvas_width, 3)
        if canvas.shape != expected:
            raise ValueError(f"Canvas shape {canvas.shape} does not match geometry {expected}")

        self._draw_axes(canvas, geometry)
        self._draw_gridlines(canvas, geometry)
        self._draw_bars(canvas, geometry)
        self._draw_title(canvas, geometry, title)

        self.logger.debug(f"Rendered {geometry.size} bar(s) on {geometry.canvas_width}x{geometry.canvas_height}")

    # ==================== DRAWING STEPS ====================

    def _draw_axes(self, canvas: np.ndarray, geometry: PlotGeometry) -> None:
        cfg = self.config
        thickness = cfg.AXIS_THICKNESS
        # y-axis sits just left of the plot area
        self._fill_rect(canvas, geometry.margin_left - thickness, geometry.margin_top,
                        thickness, geometry.plot_height, cfg.AXIS_COLOR)
        # x-axis sits on the plot floor
        self._fill_rect(canvas, geometry.margin_left, geometry.plot_floor,
                        geometry.plot_width, thickness, cfg.AXIS_COLOR)

    def _draw_gridlines(self, canvas: np.ndarray, geometry: PlotGeometry) -> None:
        cfg = self.config
        for y, value in geometry.gridlines():
            self._fill_rect(canvas, geometry.margin_left, y, geometry.plot_width,
                            cfg.GRIDLINE_THICKNESS, cfg.GRIDLINE_COLOR)
            label = self.format_label(value)
            (_, text_h), _ = cv2.getTextSize(label, cfg.LABEL_FONT, cfg.LABEL_FONT_SCALE,
                                             cfg.LABEL_FONT_THICKNESS)
            # putText anchors at the baseline, shift down by half the glyph height
            origin = (cfg.LABEL_X, y + text_h // 2)
            cv2.putText(canvas, label, origin, cfg.LABEL_FONT, cfg.LABEL_FONT_SCALE,
                        cfg.LABEL_COLOR, cfg.LABEL_FONT_THICKNESS, cv2.LINE_AA)

    def _draw_bars(self, canvas: np.ndarray, geometry: PlotGeometry) -> None:
        cfg = self.config
        for bar in geometry.bars:
            self._fill_rect(canvas, bar.x, bar.y_top, bar.width, bar.height, cfg.BAR_COLOR)
            cx, cy = bar.marker
            cv2.circle(canvas, (_px(cx), _px(cy)), cfg.MARKER_RADIUS, cfg.MARKER_COLOR,
                       thickness=cv2.FILLED, lineType=cv2.LINE_AA)

    def _draw_title(self, canvas: np.ndarray, geometry: PlotGeometry, title: str) -> None:
        cfg = self.config
        (_, text_h), _ = cv2.getTextSize(title, cfg.TITLE_FONT, cfg.TITLE_FONT_SCALE,
                                         cfg.TITLE_FONT_THICKNESS)
        origin = (geometry.margin_left, cfg.TITLE_TOP + text_h)
        cv2.putText(canvas, title, origin, cfg.TITLE_FONT, cfg.TITLE_FONT_SCALE,
                    cfg.TITLE_COLOR, cfg.TITLE_FONT_THICKNESS, cv2.LINE_AA)

    # ==================== HELPERS ====================

    def format_label(self, value: float) -> str:
        """Format a gridline value with the configured significant digits."""
        return f"{value:.{self.config.LABEL_SIGNIFICANT_DIGITS}g}"

    @staticmethod
    def _fill_rect(canvas: np.ndarray, x: float, y: float, width: float, height: float,
                   color: Tuple[int, int, int]) -> None:
        """Fill the pixel rectangle covering [x, x+width) x [y, y+height)."""
        x0, y0 = _px(x), _px(y)
        x1, y1 = _px(x + width), _px(y + height)
        if x1 <= x0 or y1 <= y0:
            return
        cv2.rectangle(canvas, (x0, y0), (x1 - 1, y1 - 1), color, thickness=cv2.FILLED)
