"""
Layout configuration for sorted value charts.

Centralizes all magic numbers used by the layout engine and the renderer.
"""
from dataclasses import dataclass, replace
from typing import Tuple

import cv2


RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ChartLayoutConfig:
    """
    Configuration for chart layout and rendering.

    All values are absolute pixels unless otherwise noted.
    Colours are RGB tuples (the canvas is kept in RGB until encoding).
    """

    # ==================== Canvas ====================
    CANVAS_WIDTH: int = 1200
    CANVAS_HEIGHT: int = 600

    # ==================== Margins ====================
    # Space reserved outside the plot area for axes, labels and title
    MARGIN_LEFT: int = 60
    MARGIN_RIGHT: int = 20
    MARGIN_TOP: int = 50
    MARGIN_BOTTOM: int = 60

    # ==================== Axes & Gridlines ====================
    AXIS_THICKNESS: int = 2
    GRIDLINE_COUNT: int = 5  # t = 0, 0.25, 0.5, 0.75, 1.0
    GRIDLINE_THICKNESS: int = 1
    LABEL_X: int = 2  # Left edge of the value labels

    # ==================== Bars & Markers ====================
    BAR_FILL_RATIO: float = 0.8  # 80% bar, 20% gutter
    MIN_BAR_WIDTH: float = 1.0
    MARKER_RADIUS: int = 3

    # ==================== Fonts ====================
    # Hershey fonts are built into OpenCV, no font files needed.
    # Scale 0.4 renders roughly 10px tall glyphs.
    LABEL_FONT: int = cv2.FONT_HERSHEY_SIMPLEX
    LABEL_FONT_SCALE: float = 0.4
    LABEL_FONT_THICKNESS: int = 1
    LABEL_SIGNIFICANT_DIGITS: int = 4
    TITLE_FONT: int = cv2.FONT_HERSHEY_SIMPLEX
    TITLE_FONT_SCALE: float = 0.55
    TITLE_FONT_THICKNESS: int = 2  # Bold
    TITLE_TOP: int = 10

    # ==================== Colours (RGB) ====================
    BACKGROUND_COLOR: RGB = (255, 255, 255)  # White
    AXIS_COLOR: RGB = (0, 0, 0)  # Black
    GRIDLINE_COLOR: RGB = (211, 211, 211)  # Light gray
    LABEL_COLOR: RGB = (0, 0, 0)
    BAR_COLOR: RGB = (0, 0, 255)  # Blue
    MARKER_COLOR: RGB = (255, 0, 0)  # Red
    TITLE_COLOR: RGB = (0, 0, 0)

    # ==================== Output ====================
    DEFAULT_OUTPUT_PATH: str = "sorted_plot.png"
    SUPPORTED_IMAGE_FORMATS: tuple = ('.png', '.bmp', '.tif', '.tiff')

    def __post_init__(self) -> None:
        if self.MARGIN_LEFT + self.MARGIN_RIGHT > self.CANVAS_WIDTH:
            raise ValueError(
                f"Horizontal margins ({self.MARGIN_LEFT}+{self.MARGIN_RIGHT}) "
                f"exceed canvas width {self.CANVAS_WIDTH}"
            )
        if self.MARGIN_TOP + self.MARGIN_BOTTOM > self.CANVAS_HEIGHT:
            raise ValueError(
                f"Vertical margins ({self.MARGIN_TOP}+{self.MARGIN_BOTTOM}) "
                f"exceed canvas height {self.CANVAS_HEIGHT}"
            )
        if self.GRIDLINE_COUNT < 2:
            raise ValueError(f"GRIDLINE_COUNT must be >= 2, got {self.GRIDLINE_COUNT}")

    @property
    def plot_width(self) -> int:
        """Width of the plot area between the left and right margins."""
        return self.CANVAS_WIDTH - self.MARGIN_LEFT - self.MARGIN_RIGHT

    @property
    def plot_height(self) -> int:
        """Height of the plot area between the top and bottom margins."""
        return self.CANVAS_HEIGHT - self.MARGIN_TOP - self.MARGIN_BOTTOM

    def with_canvas(self, width: int, height: int) -> "ChartLayoutConfig":
        """Return a copy with a different canvas size (margins unchanged)."""
        return replace(self, CANVAS_WIDTH=width, CANVAS_HEIGHT=height)


# Default configuration instance
DEFAULT_LAYOUT = ChartLayoutConfig()
