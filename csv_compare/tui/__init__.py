"""
TUI CSV Comparison Viewer.

A Textual-based terminal UI showing the field-by-field comparison of two
records, with search, hide-empty filtering and highlighted differences.

Usage:
    csv-compare-tui before.csv after.csv
    python -m csv_compare.tui.app before.csv after.csv

Components:
    - CsvCompareApp: Main application class
    - ComparisonScreen: Result table with filters
    - FieldDetailModal: Full formatted values of one field
"""
