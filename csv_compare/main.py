"""
CSV Compare - Report field-by-field differences between two files.

Reads the first data row of each input (CSV or Parquet), compares the two
records by field name and prints PASS/FAIL per field, highlighting the
changed part of every differing value.

Supported Output Formats:
    - table: Rich terminal table (default)
    - json: Machine-readable result with diff spans
    - markdown: Pipe table with changes in bold

Usage:
    csv-compare before.csv after.csv
    csv-compare before.csv after.csv -f json -o report.json
    csv-compare before.csv after.csv --search addr --hide-empty
    python -m csv_compare.main before.csv after.csv -f markdown
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

import pyarrow as pa
from rich.console import Console
from rich.table import Table

from csv_compare.data_formats import load_first_record
from csv_compare.diff_engine import (
    ComparisonEntry,
    ComparisonSummary,
    compare,
    filter_entries,
    format_value,
    get_comparison_summary,
)
from csv_compare.rendering import (
    escape_markdown_cell,
    markdown_diff_cell,
    render_status,
    render_value2,
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json", "markdown")


def build_table(
    entries: Sequence[ComparisonEntry],
    file1_label: str = "File 1",
    file2_label: str = "File 2",
) -> Table:
    """Build a rich Table of comparison entries."""
    table = Table(show_lines=True)
    table.add_column("Field", style="bold")
    table.add_column(file1_label)
    table.add_column(file2_label)
    table.add_column("Status", justify="center")

    for entry in entries:
        table.add_row(
            entry.field,
            str(format_value(entry.value1)),
            render_value2(entry),
            render_status(entry.status),
        )
    return table


def format_summary(summary: ComparisonSummary) -> str:
    return f"{summary.total} fields compared: {summary.passed} passed, {summary.failed} failed"


def format_json(
    entries: Sequence[ComparisonEntry],
    file1: str,
    file2: str,
    pretty: bool = True,
) -> str:
    """Format comparison entries as a JSON document."""
    report = {
        "file1": file1,
        "file2": file2,
        "summary": get_comparison_summary(entries).to_dict(),
        "results": [entry.to_dict() for entry in entries],
    }
    indent = 2 if pretty else None
    return json.dumps(report, indent=indent, ensure_ascii=False)


def format_markdown(entries: Sequence[ComparisonEntry], file1: str, file2: str) -> str:
    """Format comparison entries as a Markdown report."""
    lines = [
        f"# Comparison: {os.path.basename(file1)} vs {os.path.basename(file2)}",
        "",
        "| Field | File 1 | File 2 | Status |",
        "|-------|--------|--------|--------|",
    ]

    for entry in entries:
        lines.append(
            f"| {escape_markdown_cell(entry.field)} | {escape_markdown_cell(entry.value1)} "
            f"| {markdown_diff_cell(entry)} | {entry.status.value} |"
        )

    lines.append("")
    lines.append(format_summary(get_comparison_summary(entries)))
    return "\n".join(lines)


def run_comparison(
    file1: str,
    file2: str,
    search: str = "",
    hide_empty: bool = False,
) -> list[ComparisonEntry]:
    """Load the first record of both files and compare them.

    Raises:
        FileNotFoundError: If either file does not exist.
        ValueError: If either file format is unsupported.
    """
    record1 = load_first_record(file1)
    record2 = load_first_record(file2)
    logger.debug("Loaded %d and %d fields", len(record1), len(record2))

    entries = compare(record1, record2)
    return filter_entries(entries, search=search, hide_empty=hide_empty)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Compare the first data row of two CSV (or Parquet) files field by field."
    )
    parser.add_argument("file1", help="Path to the first file")
    parser.add_argument("file2", help="Path to the second file")
    parser.add_argument(
        "-f", "--output-format",
        choices=OUTPUT_FORMATS,
        default="table",
        help="Output format (default: table)"
    )
    parser.add_argument(
        "-s", "--search",
        default="",
        help="Only show fields whose name contains this text (case-insensitive)"
    )
    parser.add_argument(
        "--hide-empty",
        action="store_true",
        help="Hide fields that are empty in both files"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Compact JSON output (no indentation)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    for path in (args.file1, args.file2):
        if not os.path.exists(path):
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)

    try:
        entries = run_comparison(
            args.file1,
            args.file2,
            search=args.search,
            hide_empty=args.hide_empty,
        )
    except (OSError, ValueError, pa.ArrowInvalid) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output_file = None
    output = sys.stdout
    if args.output:
        try:
            output_file = open(args.output, "w", encoding="utf-8")
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        output = output_file

    try:
        if args.output_format == "json":
            print(format_json(entries, args.file1, args.file2, not args.compact), file=output)
        elif args.output_format == "markdown":
            print(format_markdown(entries, args.file1, args.file2), file=output)
        else:
            console = Console(file=output)
            console.print(
                build_table(
                    entries,
                    file1_label=os.path.basename(args.file1),
                    file2_label=os.path.basename(args.file2),
                )
            )
            console.print(format_summary(get_comparison_summary(entries)))
    finally:
        if output_file:
            output_file.close()


if __name__ == "__main__":
    main()
