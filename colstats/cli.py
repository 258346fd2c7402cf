"""Command-line entry point: statistics for one or two columns of a file."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from .analysis import (
    create_predictions_dataframe,
    create_summary_dataframe,
    print_statistics,
    summarize_columns,
)
from .data_processing import header_names, load_column, load_columns, read_records
from .errors import ColumnStatsError, FieldNotFoundError
from .fields import DEFAULT_DELIMITER
from .output import DEFAULT_OUTPUT_DIR, save_data_to_csv
from .plotting import plot_regression
from .stats import FittedModel

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Descriptive statistics and linear regression for delimited text columns."
    )
    parser.add_argument("input", help="Path to the delimited text file.")
    parser.add_argument(
        "--x",
        required=True,
        help="Column for x: a 0-based index, or a header name with --header.",
    )
    parser.add_argument(
        "--y",
        default=None,
        help="Optional column for y; enables regression and correlation.",
    )
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Single-character field delimiter (default: {DEFAULT_DELIMITER!r}).",
    )
    parser.add_argument(
        "--header",
        action="store_true",
        help="Treat the first line as a header row.",
    )
    parser.add_argument(
        "--predict",
        type=float,
        nargs="+",
        default=None,
        metavar="X",
        help="x values to run through the fitted line (requires --y).",
    )
    parser.add_argument(
        "--outdir",
        default=None,
        help="Write statistical_summary.csv (and predictions.csv) here.",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Save a scatter plot with the fitted line (requires --y).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser


def resolve_column(column: str, records: List[str], has_header: bool, delimiter: str) -> int:
    """Turn a column argument into a 0-based index.

    Digits are taken as an index. Anything else is looked up among the header
    names, which requires ``has_header``.
    """
    if column.isdigit():
        return int(column)
    if not has_header:
        raise FieldNotFoundError(
            f"Column {column!r} is not an index and no header row was requested"
        )
    names = header_names(records, delimiter)
    if column not in names:
        raise FieldNotFoundError(f"Column {column!r} not found in header {names}")
    return names.index(column)


def run(args: argparse.Namespace) -> int:
    start_time = time.time()
    records = read_records(args.input)
    logging.info("Read %d records from %s", len(records), args.input)

    x_index = resolve_column(args.x, records, args.header, args.delimiter)
    x_label = args.x
    if args.y is None:
        xvalues = load_column(records, args.header, x_index, args.delimiter)
        yvalues = None
        y_label = "y"
    else:
        y_index = resolve_column(args.y, records, args.header, args.delimiter)
        y_label = args.y
        xvalues, yvalues = load_columns(
            records, args.header, x_index, y_index, args.delimiter
        )
    logging.info("Loaded %d rows", len(xvalues))

    summary = summarize_columns(xvalues, yvalues)
    summary_df = create_summary_dataframe(summary, x_label=x_label, y_label=y_label)
    print_statistics(summary_df)

    predictions_df = None
    if yvalues is not None:
        model = FittedModel(summary["slope"], summary["intercept"])
        if args.predict:
            predictions_df = create_predictions_dataframe(model, args.predict)
            print("\nPredictions")
            print(predictions_df.to_string(index=False))
        if args.plot:
            plot_regression(
                xvalues,
                yvalues,
                model,
                output_dir=args.outdir or DEFAULT_OUTPUT_DIR,
                x_label=x_label,
                y_label=y_label,
            )

    if args.outdir:
        save_data_to_csv(summary_df, predictions_df, output_dir=args.outdir)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    if len(args.delimiter) != 1:
        parser.error("--delimiter must be exactly one character")
    if (args.predict or args.plot) and args.y is None:
        parser.error("--predict and --plot require --y")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        return run(args)
    except ColumnStatsError as exc:
        logging.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
