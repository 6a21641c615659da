"""
Synthetic CSV dataset generator for sorted-chart.

Usage (from the project root):
    python -m scripts.generate_dataset [num_files]

Writes random single-column CSV files and renders each one:
- CSV:    data/raw/csv/values_0001.csv, ...
- Images: data/plots/values_0001.png, ...
- JSON:   data/annotations/csv_plots.json (metadata plus plot geometry)
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from sorted_chart.errors import ChartPipelineError
from sorted_chart.pipeline import SortedPlotPipeline
from sorted_chart.storage import LocalBlobSource


PROJECT_ROOT = Path(__file__).resolve().parents[1]
CSV_DIR = PROJECT_ROOT / "data" / "raw" / "csv"
PLOT_DIR = PROJECT_ROOT / "data" / "plots"
ANNOTATION_DIR = PROJECT_ROOT / "data" / "annotations"
ANNOTATION_FILE = ANNOTATION_DIR / "csv_plots.json"


HEADERS = [
    "value",
    "sales",
    "score",
    "latency_ms",
    "temperature",
]

DISTRIBUTIONS = [
    "uniform",
    "normal",
    "exponential",
    "constant",
]


def _make_values(distribution: str, size: int) -> List[float]:
    """Draw ``size`` values from the named distribution."""
    if distribution == "uniform":
        values = np.random.uniform(low=-50.0, high=150.0, size=size)
    elif distribution == "normal":
        values = np.random.normal(loc=100.0, scale=25.0, size=size)
    elif distribution == "exponential":
        values = np.random.exponential(scale=30.0, size=size)
    else:
        values = np.full(size, round(random.uniform(1.0, 10.0), 2))
    return values.round(3).tolist()


def _generate_single_csv(
    index: int,
    total: int,
    pipeline: SortedPlotPipeline,
) -> Dict[str, Any]:
    """
    Write one CSV file, render it and return its metadata.

    May raise; the caller catches and reports.
    """
    size = random.randint(1, 60)
    header = random.choice(HEADERS)
    distribution = random.choice(DISTRIBUTIONS)
    with_header = bool(random.getrandbits(1))
    values = _make_values(distribution, size)

    csv_name = f"values_{index:04d}.csv"
    csv_path = CSV_DIR / csv_name
    lines = [f"{header},label"] if with_header else []
    lines.extend(f"{v},row{i}" for i, v in enumerate(values))
    csv_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    plot_path = PLOT_DIR / f"values_{index:04d}.png"
    pipeline.plot_from_blob(str(CSV_DIR), csv_name, plot_path)
    geometry = pipeline.compute_geometry(csv_path.read_bytes())

    metadata: Dict[str, Any] = {
        "csv": csv_path.relative_to(PROJECT_ROOT).as_posix(),
        "image": plot_path.relative_to(PROJECT_ROOT).as_posix(),
        "metadata": {
            "header": header if with_header else None,
            "distribution": distribution,
            "count": size,
            "sorted_values": sorted(values),
        },
        "geometry": geometry.to_dict(),
    }

    print(f"[{index}/{total}] Rendered {metadata['image']}", flush=True)

    return metadata


def generate_csv_dataset(num_files: int = 50) -> int:
    """Generate the whole dataset. Returns the number of failures."""
    CSV_DIR.mkdir(parents=True, exist_ok=True)
    PLOT_DIR.mkdir(parents=True, exist_ok=True)
    ANNOTATION_DIR.mkdir(parents=True, exist_ok=True)

    pipeline = SortedPlotPipeline(source=LocalBlobSource())
    annotations: List[Dict[str, Any]] = []
    errors: List[str] = []

    print(f"Generating {num_files} CSV files into {CSV_DIR} ...")

    for i in range(1, num_files + 1):
        try:
            annotations.append(_generate_single_csv(i, num_files, pipeline))
        except (ChartPipelineError, OSError) as exc:
            msg = f"Error generating file {i}: {exc}"
            errors.append(msg)
            print(msg, file=sys.stderr, flush=True)

    with ANNOTATION_FILE.open("w", encoding="utf-8") as f:
        json.dump(annotations, f, indent=2, ensure_ascii=False)
    print(f"\nSaved annotations to {ANNOTATION_FILE}")

    if errors:
        print(f"\nCompleted with {len(errors)} error(s). See stderr for details.")
    else:
        print("\nCompleted without errors.")
    return len(errors)


def main(argv: List[str] | None = None) -> int:
    """Entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    num_files = int(argv[0]) if argv else 50
    failures = generate_csv_dataset(num_files=num_files)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
