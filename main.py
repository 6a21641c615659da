"""
Sorted Chart - Sorted CSV Column Plot

Read the first column of a CSV file, sort it and render it as a bar chart image.

Usage:
    python main.py <csv_path> [--output sorted_plot.png] [--width 1200] [--height 600]

Examples:
    python main.py data/raw/csv/values_0001.csv
    python main.py values.csv -o plot.png
    python main.py values.csv --width 1600 --height 800 -v
"""
import argparse
import logging
import sys
from pathlib import Path

from sorted_chart.config import DEFAULT_LAYOUT
from sorted_chart.errors import ChartPipelineError
from sorted_chart.pipeline import SortedPlotPipeline
from sorted_chart.storage import LocalBlobSource


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Plot the sorted first column of a CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py values.csv                   # Write sorted_plot.png
  python main.py values.csv -o result.png     # Choose the output file
  python main.py values.csv --width 1600      # Wider canvas
        """
    )
    parser.add_argument(
        "csv",
        type=str,
        help="Path to a CSV file whose first column holds numbers"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=DEFAULT_LAYOUT.DEFAULT_OUTPUT_PATH,
        help=f"Output image path (default: {DEFAULT_LAYOUT.DEFAULT_OUTPUT_PATH})"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_LAYOUT.CANVAS_WIDTH,
        help=f"Canvas width in pixels (default: {DEFAULT_LAYOUT.CANVAS_WIDTH})"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_LAYOUT.CANVAS_HEIGHT,
        help=f"Canvas height in pixels (default: {DEFAULT_LAYOUT.CANVAS_HEIGHT})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    # Validate input file exists
    csv_path = Path(args.csv)
    if not csv_path.is_file():
        print(f"Error: CSV file not found: {args.csv}", file=sys.stderr)
        return 1

    # Validate output format
    supported_formats = DEFAULT_LAYOUT.SUPPORTED_IMAGE_FORMATS
    output_suffix = Path(args.output).suffix.lower()
    if output_suffix not in supported_formats:
        print(
            f"Error: Unsupported image format: {output_suffix or '<none>'}\n"
            f"Supported formats: {', '.join(supported_formats)}",
            file=sys.stderr
        )
        return 1

    try:
        config = DEFAULT_LAYOUT.with_canvas(args.width, args.height)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # The CSV's directory acts as the container, the file name as the blob
    container = str(csv_path.resolve().parent)
    pipeline = SortedPlotPipeline(source=LocalBlobSource(), config=config)
    try:
        full_path = pipeline.plot_from_blob(container, csv_path.name, args.output)
    except ChartPipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(full_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
