# sorted_chart/storage/blob_source.py
"""
Blob sources supply the raw CSV bytes for a named container/blob pair.

The pipeline only talks to the BlobSource interface; transports live in
subclasses.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from sorted_chart.errors import InputUnavailableError


logger = logging.getLogger(__name__)


# ==================== BASE SOURCE ====================


class BlobSource(ABC):
    """
    Abstract base class for blob sources.

    Subclasses implement ``exists`` and ``download``; callers use ``fetch``.
    """

    @abstractmethod
    def exists(self, container: str, blob_name: str) -> bool:
        """Return True if the blob can be downloaded."""
        pass

    @abstractmethod
    def download(self, container: str, blob_name: str) -> bytes:
        """Return the blob content. Called only after ``exists`` succeeded."""
        pass

    def fetch(self, container: str, blob_name: str) -> bytes:
        """
        Validate names, check existence and download.

        Raises:
            ValueError: If a name is blank
            InputUnavailableError: If the blob is missing or cannot be read
        """
        if not container or not container.strip():
            raise ValueError("container is required")
        if not blob_name or not blob_name.strip():
            raise ValueError("blob_name is required")

        if not self.exists(container, blob_name):
            raise InputUnavailableError(
                f"Blob '{blob_name}' not found in container '{container}'."
            )

        try:
            data = self.download(container, blob_name)
        except InputUnavailableError:
            raise
        except OSError as exc:
            raise InputUnavailableError(
                f"Failed to download blob '{blob_name}' from container '{container}': {exc}"
            ) from exc

        logger.debug(f"Fetched {len(data)} bytes from {container}/{blob_name}")
        return data


# ==================== IMPLEMENTATIONS ====================


class LocalBlobSource(BlobSource):
    """
    Containers are directories under ``root``, blobs are files inside them.

    An absolute container path ignores ``root``.
    """

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def _blob_path(self, container: str, blob_name: str) -> Path:
        return self.root / container / blob_name

    def exists(self, container: str, blob_name: str) -> bool:
        return self._blob_path(container, blob_name).is_file()

    def download(self, container: str, blob_name: str) -> bytes:
        return self._blob_path(container, blob_name).read_bytes()


class InMemoryBlobSource(BlobSource):
    """Dict-backed source keyed by (container, blob_name)."""

    def __init__(self, blobs: Optional[Dict[Tuple[str, str], bytes]] = None):
        self.blobs: Dict[Tuple[str, str], bytes] = dict(blobs or {})

    def put(self, container: str, blob_name: str, data: bytes) -> None:
        self.blobs[(container, blob_name)] = data

    def exists(self, container: str, blob_name: str) -> bool:
        return (container, blob_name) in self.blobs

    def download(self, container: str, blob_name: str) -> bytes:
        return self.blobs[(container, blob_name)]
