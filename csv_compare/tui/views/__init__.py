"""Screens for the CSV comparison viewer."""

from csv_compare.tui.views.comparison_screen import ComparisonScreen

__all__ = ["ComparisonScreen"]
