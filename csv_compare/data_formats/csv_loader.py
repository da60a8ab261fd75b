"""
CSV format record loader.

This module provides the CSVLoader class. The header row supplies the field
names and every cell is read as a plain string, so values such as "030" or
"1.50" reach the comparison untouched.

The first data row is always kept: missing trailing cells become "" and
cells beyond the header are dropped. Later rows whose width differs from the
header are skipped with a warning.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator

import pyarrow as pa
from pyarrow import csv as pacsv

from csv_compare.data_formats.base import DataLoader, Record

logger = logging.getLogger(__name__)


def _skip_invalid_row(row: pacsv.InvalidRow) -> str:
    """Skip rows whose column count does not match the header."""
    logger.warning(
        "Skipping CSV row %s: expected %d columns, got %d",
        row.number if row.number is not None else "?",
        row.expected_columns,
        row.actual_columns,
    )
    return "skip"


def _string_columns(names: list[str]) -> pacsv.ConvertOptions:
    return pacsv.ConvertOptions(
        column_types={name: pa.string() for name in names},
        strings_can_be_null=False,
    )


def dedupe_names(names: list[str]) -> list[str]:
    """Rename repeated header names to name_1, name_2, ...

    A generated name never collides with a name already in the header.

    Examples:
        >>> dedupe_names(["a", "a", "b"])
        ['a', 'a_1', 'b']
    """
    taken = set(names)
    seen: dict[str, int] = {}
    result = []
    for name in names:
        if name not in seen:
            seen[name] = 0
            result.append(name)
            continue

        count = seen[name]
        while True:
            count += 1
            candidate = f"{name}_{count}"
            if candidate not in taken:
                break
        seen[name] = count
        taken.add(candidate)
        logger.warning("Duplicate CSV column %r renamed to %r", name, candidate)
        result.append(candidate)
    return result


class CSVLoader(DataLoader):
    """Record loader for comma-separated files with a header row.

    Attributes:
        format_name: Returns 'csv'.
        supported_extensions: Returns ['.csv'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "csv"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".csv"]

    def _read_header(self, filename: str) -> tuple[list[str], bool]:
        """Read the header names and whether any data row follows.

        Ragged rows are skipped here without logging; load() reports them.
        """
        ragged: list[pacsv.InvalidRow] = []

        def note_ragged(row: pacsv.InvalidRow) -> str:
            ragged.append(row)
            return "skip"

        reader = pacsv.open_csv(
            filename,
            parse_options=pacsv.ParseOptions(ignore_empty_lines=True, invalid_row_handler=note_ragged),
        )
        try:
            names = dedupe_names(reader.schema.names)
            if ragged:
                return names, True
            for batch in reader:
                if batch.num_rows or ragged:
                    return names, True
            return names, bool(ragged)
        finally:
            reader.close()

    def _first_row_cells(self, filename: str) -> list[str]:
        """Read the cells of the first data row, whatever its width."""
        # With generated names the first row after the header sets the width
        read_options = pacsv.ReadOptions(skip_rows=1, autogenerate_column_names=True)
        parse_options = pacsv.ParseOptions(
            ignore_empty_lines=True, invalid_row_handler=lambda row: "skip"
        )

        sizing = pacsv.open_csv(filename, read_options=read_options, parse_options=parse_options)
        try:
            width = sizing.schema.names
        finally:
            sizing.close()

        reader = pacsv.open_csv(
            filename,
            read_options=read_options,
            parse_options=parse_options,
            convert_options=_string_columns(width),
        )
        try:
            for batch in reader:
                if batch.num_rows:
                    row = batch.slice(0, 1).to_pylist()[0]
                    return [row[name] for name in width]
            return []
        finally:
            reader.close()

    def load_first(self, filename: str) -> Record:
        """Load the first data row, aligned to the header.

        Missing trailing cells are filled with "" and extra cells dropped.

        Raises:
            FileNotFoundError: If the file does not exist.
            pyarrow.ArrowInvalid: If the file cannot be parsed as CSV.
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File not found: {filename}")

        if os.path.getsize(filename) == 0:
            logger.debug("CSV file %s is empty", filename)
            return {}

        names, has_rows = self._read_header(filename)
        if not has_rows:
            return {}

        cells = self._first_row_cells(filename)
        if len(cells) != len(names):
            logger.warning(
                "First CSV row of %s has %d columns, header has %d; aligning to header",
                filename,
                len(cells),
                len(names),
            )
        cells = cells[: len(names)] + [""] * (len(names) - len(cells))
        return dict(zip(names, cells))

    def load(self, filename: str) -> Iterator[Record]:
        """Lazily load data rows from a CSV file.

        Args:
            filename: Path to the CSV file.

        Yields:
            Each data row as a dictionary of strings. Empty cells are "".
            Rows whose width differs from the header are skipped.

        Raises:
            FileNotFoundError: If the file does not exist.
            pyarrow.ArrowInvalid: If the file cannot be parsed as CSV.

        Examples:
            >>> loader = CSVLoader()
            >>> for record in loader.load("people.csv"):
            ...     print(record["name"])
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File not found: {filename}")

        # Zero-byte files have no header; pyarrow rejects them outright
        if os.path.getsize(filename) == 0:
            logger.debug("CSV file %s is empty", filename)
            return

        logger.debug("Reading CSV %s", filename)
        names, has_rows = self._read_header(filename)
        if not has_rows:
            return

        reader = pacsv.open_csv(
            filename,
            read_options=pacsv.ReadOptions(column_names=names, skip_rows=1),
            parse_options=pacsv.ParseOptions(
                ignore_empty_lines=True, invalid_row_handler=_skip_invalid_row
            ),
            convert_options=_string_columns(names),
        )
        try:
            for batch in reader:
                yield from batch.to_pylist()
        finally:
            reader.close()

    def get_record_count(self, filename: str) -> int:
        """Count data rows, excluding the header and skipped rows."""
        return sum(1 for _ in self.load(filename))
