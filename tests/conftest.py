"""
Pytest fixtures for Sorted Chart tests.

Provides:
- CSV byte payloads for the documented end-to-end scenarios
- Layout / renderer / writer instances with the default configuration
- In-memory and on-disk blob sources
"""
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from sorted_chart.rendering import ChartRenderer, ImageWriter, LayoutEngine
from sorted_chart.storage import InMemoryBlobSource, LocalBlobSource


# ==================== CSV PAYLOADS ====================

@pytest.fixture
def scenario_a_bytes():
    """Three unsorted values, no header."""
    return b"10\n5\n20\n"


@pytest.fixture
def header_csv_bytes():
    """Header row followed by three values."""
    return b"value\n3\n1\n2\n"


@pytest.fixture
def header_only_bytes():
    """Header row and text rows only - nothing numeric in column 0."""
    return b"value,label\nabc,x\n,y\n"


@pytest.fixture
def sorted_scenario_a():
    """Scenario A after extraction and sorting."""
    return np.array([5.0, 10.0, 20.0])


# ==================== PIPELINE COMPONENTS ====================

@pytest.fixture
def layout_engine():
    return LayoutEngine()


@pytest.fixture
def renderer():
    return ChartRenderer()


@pytest.fixture
def writer():
    return ImageWriter()


# ==================== BLOB SOURCES ====================

@pytest.fixture
def memory_source(scenario_a_bytes, header_csv_bytes, header_only_bytes):
    """In-memory source with one blob per scenario in container 'data'."""
    source = InMemoryBlobSource()
    source.put("data", "scenario_a.csv", scenario_a_bytes)
    source.put("data", "with_header.csv", header_csv_bytes)
    source.put("data", "header_only.csv", header_only_bytes)
    source.put("data", "empty.csv", b"")
    return source


@pytest.fixture
def local_source(tmp_path, scenario_a_bytes):
    """
    LocalBlobSource rooted at tmp_path with container 'data'.

    Returns:
        (source, container_dir)
    """
    container_dir = tmp_path / "data"
    container_dir.mkdir()
    (container_dir / "scenario_a.csv").write_bytes(scenario_a_bytes)
    return LocalBlobSource(root=tmp_path), container_dir
