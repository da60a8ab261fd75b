"""TUI widgets for the CSV comparison viewer."""

from csv_compare.tui.widgets.field_detail_modal import FieldDetailModal

__all__ = [
    "FieldDetailModal",
]
