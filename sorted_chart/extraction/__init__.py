"""Extraction package for sorted-chart.

This package contains the CSV first-column extractor and the sorter.
"""

from .column_extractor import NumericColumnExtractor, sort_values

__all__ = [
    "NumericColumnExtractor",
    "sort_values",
]
