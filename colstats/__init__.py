"""
A Python package for statistics over columns of delimited text.

Extracts numeric columns from single-character-delimited records and computes
mean, population standard deviation, least-squares regression and Pearson
correlation, all rounded to 4 decimals.

Modules:
    - fields: Locates the n-th field of a delimited record.
    - data_processing: Reads records and loads numeric columns.
    - stats: Single-pass statistics and the regression predictor.
    - analysis: Builds summary and prediction tables.
    - output: Saves tables to CSV.
    - plotting: Draws observations with the fitted line.
"""

__version__ = "1.0.0"

from .analysis import (
    create_predictions_dataframe,
    create_summary_dataframe,
    print_statistics,
    summarize_columns,
)
from .data_processing import load_column, load_columns, parse_number, read_records
from .errors import (
    ColumnStatsError,
    FieldNotFoundError,
    LengthMismatchError,
    ParseError,
    ResourceUnavailableError,
)
from .fields import count_fields, extract_field
from .output import save_data_to_csv
from .stats import (
    FittedModel,
    correlation,
    fit_line,
    mean,
    predict,
    regression_intercept,
    regression_slope,
    stddev,
)

__all__ = [
    # Fields and loading
    "extract_field",
    "count_fields",
    "read_records",
    "parse_number",
    "load_column",
    "load_columns",
    # Statistics
    "mean",
    "stddev",
    "regression_slope",
    "regression_intercept",
    "correlation",
    "predict",
    "fit_line",
    "FittedModel",
    # Reporting
    "summarize_columns",
    "create_summary_dataframe",
    "create_predictions_dataframe",
    "print_statistics",
    "save_data_to_csv",
    # Errors
    "ColumnStatsError",
    "FieldNotFoundError",
    "ParseError",
    "LengthMismatchError",
    "ResourceUnavailableError",
]
