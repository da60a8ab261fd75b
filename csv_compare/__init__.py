"""
CSV record comparison.

Compares the first data row of two tabular files field by field and
highlights the changed part of each differing value.

Usage:
    csv-compare before.csv after.csv
    csv-compare-tui before.csv after.csv

Components:
    - diff_engine: compare, diff_highlight, format_value
    - data_formats: CSV and Parquet record loaders
    - main: command line report
    - tui: Textual comparison viewer
"""
