# sorted_chart/errors.py
"""
Exceptions raised by the sorted chart pipeline.
"""
from typing import Optional


# ==================== CUSTOM EXCEPTIONS ====================

class ChartPipelineError(Exception):
    """Base exception for sorted chart pipeline failures"""
    pass


class InputUnavailableError(ChartPipelineError):
    """Raised when the source CSV bytes cannot be obtained"""
    pass


class NoNumericDataError(ChartPipelineError):
    """Raised when the first CSV column holds no numeric value"""
    pass


class WriteFailureError(ChartPipelineError):
    """Raised when the image cannot be encoded or written"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
