"""Numeric first-column extraction and sorting for CSV text.

Only the first comma-separated field of every line is consulted. Lines
whose first field is not a plain decimal number (header rows, blank
fields, free text) are skipped silently. Accounting negatives such as
``(5)``, trailing signs and currency symbols count as text.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable

import numpy as np

from sorted_chart.errors import NoNumericDataError


logger = logging.getLogger(__name__)

# Invariant-culture decimal: optional sign, '.' as decimal point, optional exponent.
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_LINE_SPLIT_RE = re.compile(r"[\r\n]+")


class NumericColumnExtractor:
    """Extract the first CSV column as a series of finite floats."""

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8-sig") -> None:
        self.delimiter = delimiter
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    def extract_bytes(self, data: bytes) -> np.ndarray:
        """Decode raw CSV bytes and extract the numeric first column.

        Invalid byte sequences are replaced rather than rejected, the
        resulting text simply fails to parse as a number on that line.
        """
        text = data.decode(self.encoding, errors="replace")
        return self.extract_text(text)

    def extract_text(self, text: str) -> np.ndarray:
        """Parse CSV text into a value series.

        Parameters
        ----------
        text:
            Raw CSV content. Lines may end with ``\\n``, ``\\r\\n`` or ``\\r``.

        Returns
        -------
        np.ndarray
            1-D ``float64`` array in input order, length >= 1.

        Raises
        ------
        NoNumericDataError
            If no line has a numeric first field.
        """
        values: list[float] = []
        skipped = 0

        for line in self._split_lines(text):
            fields = line.split(self.delimiter)
            if not fields:
                continue
            value = self._parse_number(fields[0])
            if value is None:
                skipped += 1
                continue
            values.append(value)

        if skipped:
            self.logger.debug(f"Skipped {skipped} non-numeric line(s)")

        if not values:
            raise NoNumericDataError("No numeric values found in the first CSV column.")

        self.logger.debug(f"Extracted {len(values)} numeric value(s)")
        return np.asarray(values, dtype=np.float64)

    @staticmethod
    def _split_lines(text: str) -> Iterable[str]:
        return (line for line in _LINE_SPLIT_RE.split(text) if line)

    @staticmethod
    def _parse_number(field: str) -> float | None:
        """Parse a trimmed field as a finite float, or return None."""
        candidate = field.strip()
        if not _NUMBER_RE.match(candidate):
            return None
        value = float(candidate)
        # '1e999' matches the pattern but overflows
        if not math.isfinite(value):
            return None
        return value


def sort_values(values: np.ndarray) -> np.ndarray:
    """Return a new ascending copy of ``values``.

    Raises
    ------
    NoNumericDataError
        If ``values`` is empty.
    """
    series = np.asarray(values, dtype=np.float64)
    if series.size == 0:
        raise NoNumericDataError("Cannot sort an empty value series.")
    return np.sort(series, kind="stable")
