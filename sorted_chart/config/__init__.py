"""Configuration module for sorted value charts."""

from .layout_config import ChartLayoutConfig, DEFAULT_LAYOUT

__all__ = ["ChartLayoutConfig", "DEFAULT_LAYOUT"]
