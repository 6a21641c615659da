"""Image encoding and writing for sorted-chart.

This module provides :class:`ImageWriter`, the boundary between the
rendered RGB canvas and the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from sorted_chart.config import ChartLayoutConfig, DEFAULT_LAYOUT
from sorted_chart.errors import WriteFailureError
from sorted_chart.models import OutputArtifact


logger = logging.getLogger(__name__)


class ImageWriter:
    """Encode canvases to lossless raster formats and write them to disk."""

    def __init__(self, config: Optional[ChartLayoutConfig] = None) -> None:
        self.config = config or DEFAULT_LAYOUT

    def encode(self, canvas: np.ndarray, suffix: str = ".png") -> bytes:
        """Encode an RGB canvas to image bytes.

        Parameters
        ----------
        canvas:
            RGB image array with shape (H, W, 3).
        suffix:
            Target format extension, one of the config's supported formats.

        Returns
        -------
        bytes
            Encoded image.

        Raises
        ------
        WriteFailureError
            If the format is not supported or OpenCV fails to encode.
        """
        suffix = suffix.lower()
        if suffix not in self.config.SUPPORTED_IMAGE_FORMATS:
            raise WriteFailureError(
                f"Unsupported image format: {suffix or '<none>'} "
                f"(supported: {', '.join(self.config.SUPPORTED_IMAGE_FORMATS)})"
            )
        try:
            image_bgr = cv2.cvtColor(canvas, cv2.COLOR_RGB2BGR)
            ok, buffer = cv2.imencode(suffix, image_bgr)
        except cv2.error as exc:
            raise WriteFailureError(f"Failed to encode image as {suffix}: {exc}") from exc
        if not ok:
            raise WriteFailureError(f"Failed to encode image as {suffix}")
        return buffer.tobytes()

    def save(self, canvas: np.ndarray, path: str | Path | None = None) -> OutputArtifact:
        """Encode ``canvas`` by the path's extension and write it.

        Parameters
        ----------
        canvas:
            RGB image array with shape (H, W, 3).
        path:
            Target file. Defaults to ``sorted_plot.png`` in the working directory.

        Returns
        -------
        OutputArtifact
            Encoded bytes and the resolved absolute path.

        Raises
        ------
        WriteFailureError
            If encoding or writing fails. ``path`` is attached to the error.
        """
        target = Path(path if path is not None else self.config.DEFAULT_OUTPUT_PATH)
        full_path = str(target.resolve())

        try:
            data = self.encode(canvas, target.suffix)
        except WriteFailureError as exc:
            raise WriteFailureError(f"{exc} [path: {full_path}]", path=full_path) from exc

        try:
            target.write_bytes(data)
        except OSError as exc:
            logger.error(f"Failed to write image to {full_path}: {exc}")
            raise WriteFailureError(f"Failed to write image '{full_path}': {exc}", path=full_path) from exc

        logger.info(f"Saved chart to {full_path} ({len(data)} bytes)")
        return OutputArtifact(data=data, path=full_path)

    def load(self, image_path: str | Path) -> np.ndarray:
        """Load an image from disk and convert it to RGB.

        Raises
        ------
        FileNotFoundError
            If the image cannot be loaded.
        """
        image_bgr = cv2.imread(str(image_path), cv2.IMREAD_COLOR)
        if image_bgr is None:
            raise FileNotFoundError(f"Could not load image: {image_path}")
        return cv2.cvtColor(image_bgr, cv2.COLOR_BGR2RGB)
