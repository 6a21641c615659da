"""Storage package for sorted-chart.

This package contains the blob sources that supply raw CSV bytes.
"""

from .blob_source import BlobSource, LocalBlobSource, InMemoryBlobSource

__all__ = [
    "BlobSource",
    "LocalBlobSource",
    "InMemoryBlobSource",
]
