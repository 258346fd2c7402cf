#!/usr/bin/env python3
"""
Main script for running column statistics from a checkout.
"""

# Pipeline overview:
# 1) Read the delimited text file into records, optionally dropping a header.
# 2) Extract the requested column(s) and parse every field as a finite float.
# 3) Compute mean and population standard deviation per column and, for two
#    columns, the regression slope/intercept and Pearson correlation.
# 4) Print the summary, then optionally export CSVs, predictions and a plot.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from colstats.cli import main

if __name__ == "__main__":
    sys.exit(main())
