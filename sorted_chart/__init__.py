"""Sorted Chart - plot the sorted first column of a CSV file as a bar chart."""

from .errors import (
    ChartPipelineError,
    InputUnavailableError,
    NoNumericDataError,
    WriteFailureError,
)
from .pipeline import SortedPlotPipeline

__all__ = [
    "ChartPipelineError",
    "InputUnavailableError",
    "NoNumericDataError",
    "WriteFailureError",
    "SortedPlotPipeline",
]
