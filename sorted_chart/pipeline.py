"""Sorted value chart pipeline: parse -> sort -> layout -> render -> write."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from sorted_chart.config import ChartLayoutConfig, DEFAULT_LAYOUT
from sorted_chart.extraction import NumericColumnExtractor, sort_values
from sorted_chart.models import OutputArtifact, PlotGeometry
from sorted_chart.rendering import ChartRenderer, ImageWriter, LayoutEngine
from sorted_chart.storage import BlobSource, LocalBlobSource


logger = logging.getLogger(__name__)


class SortedPlotPipeline:
    """Render the sorted first CSV column of a blob as a bar chart image.

    Every call owns its own series, geometry and canvas, so one pipeline
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        source: BlobSource | None = None,
        config: ChartLayoutConfig | None = None,
        extractor: NumericColumnExtractor | None = None,
        layout: LayoutEngine | None = None,
        renderer: ChartRenderer | None = None,
        writer: ImageWriter | None = None,
    ) -> None:
        self.config = config or DEFAULT_LAYOUT
        self.source = source or LocalBlobSource()
        self.extractor = extractor or NumericColumnExtractor()
        self.layout = layout or LayoutEngine(self.config)
        self.renderer = renderer or ChartRenderer(self.config)
        self.writer = writer or ImageWriter(self.config)

    @staticmethod
    def make_title(source_name: str) -> str:
        return f"Sorted values from '{source_name}'"

    def compute_geometry(self, data: bytes) -> PlotGeometry:
        """Steps 1-3: extract, sort and lay out the series."""
        values = self.extractor.extract_bytes(data)
        sorted_series = sort_values(values)
        return self.layout.compute(sorted_series)

    def render_canvas(self, data: bytes, source_name: str) -> np.ndarray:
        """Main pipeline without I/O. Returns the RGB canvas."""
        geometry = self.compute_geometry(data)
        return self.renderer.render(geometry, self.make_title(source_name))

    def render_bytes(self, data: bytes, source_name: str, suffix: str = ".png") -> bytes:
        """Bytes in, encoded image bytes out."""
        return self.writer.encode(self.render_canvas(data, source_name), suffix)

    def plot_bytes(
        self,
        data: bytes,
        source_name: str,
        output_path: str | Path | None = None,
    ) -> OutputArtifact:
        """Render ``data`` and write the image. Nothing is written if parsing fails."""
        canvas = self.render_canvas(data, source_name)
        return self.writer.save(canvas, output_path)

    def plot_from_blob(
        self,
        container: str,
        blob_name: str,
        output_path: str | Path | None = None,
    ) -> str:
        """Fetch a CSV blob, plot its sorted first column and save the image.

        Parameters
        ----------
        container:
            Container holding the blob.
        blob_name:
            Name of the CSV blob; also used in the chart title.
        output_path:
            Target image path, ``sorted_plot.png`` when omitted.

        Returns
        -------
        str
            Absolute path of the saved image.

        Raises
        ------
        ValueError
            If ``container`` or ``blob_name`` is blank.
        InputUnavailableError
            If the blob does not exist or cannot be read.
        NoNumericDataError
            If the first column holds no numeric value.
        WriteFailureError
            If the image cannot be written.
        """
        logger.info(f"Plotting sorted values from {container}/{blob_name}")
        data = self.source.fetch(container, blob_name)
        artifact = self.plot_bytes(data, blob_name, output_path)
        return artifact.path
