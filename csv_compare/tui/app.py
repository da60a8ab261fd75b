"""
Main Textual application for the CSV comparison viewer.

Loads the first data row of two files, compares them field by field and
shows the result table.

Supported Formats:
    - CSV (.csv): Header row plus data rows
    - Parquet (.parquet, .pq): Apache Parquet columnar format
"""

import argparse
import logging
import os
import sys

import pyarrow as pa
from textual.app import App
from textual.binding import Binding

from csv_compare.data_formats import load_first_record
from csv_compare.diff_engine import ComparisonEntry, compare, get_comparison_summary
from csv_compare.tui.views.comparison_screen import ComparisonScreen

logger = logging.getLogger(__name__)


class CsvCompareApp(App):
    """A Textual app for comparing the first record of two files."""

    TITLE = "CSV Compare"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, file1: str, file2: str):
        """Initialize the app with the two files to compare.

        Args:
            file1: Path to the first file.
            file2: Path to the second file.
        """
        super().__init__()
        self._file1 = file1
        self._file2 = file2
        self.entries: list[ComparisonEntry] = []

    def on_mount(self) -> None:
        """Load both records and push the comparison screen."""
        self.title = f"CSV Compare - {os.path.basename(self._file1)} ↔ {os.path.basename(self._file2)}"
        self._load_comparison()

    def _load_comparison(self) -> None:
        """Load and compare the records, reporting failures as notifications."""
        try:
            record1 = load_first_record(self._file1)
            record2 = load_first_record(self._file2)
        except (OSError, ValueError, pa.ArrowInvalid) as e:
            logger.debug("Loading failed: %s", e)
            self.notify(f"Error loading file: {e}", severity="error")
            self.entries = []
        else:
            self.entries = compare(record1, record2)
            summary = get_comparison_summary(self.entries)
            self.notify(
                f"Comparison complete: {summary.passed} passed, {summary.failed} failed"
            )

        self.push_screen(
            ComparisonScreen(
                self.entries,
                file1_label=os.path.basename(self._file1) or "File 1",
                file2_label=os.path.basename(self._file2) or "File 2",
            )
        )


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare the first data row of two CSV (or Parquet) files in a terminal UI."
    )
    parser.add_argument("file1", help="Path to the first file")
    parser.add_argument("file2", help="Path to the second file")
    args = parser.parse_args()

    for path in (args.file1, args.file2):
        if not os.path.exists(path):
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    app = CsvCompareApp(args.file1, args.file2)
    app.run()


if __name__ == "__main__":
    main()
