"""
Parquet format record loader.

This module provides the ParquetLoader class for reading rows from Apache
Parquet files as flat string records.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator

import pyarrow.parquet as pq

from csv_compare.data_formats.base import DataLoader, Record

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    """Convert a Parquet cell to the string a CSV export would hold.

    Nested lists and structs become compact JSON so they can be
    pretty-printed for display later.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def _row_to_record(row: dict[str, Any]) -> Record:
    return {key: _stringify(value) for key, value in row.items()}


class ParquetLoader(DataLoader):
    """Record loader for Apache Parquet format.

    Attributes:
        format_name: Returns 'parquet'.
        supported_extensions: Returns ['.parquet', '.pq'].
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "parquet"

    @property
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions."""
        return [".parquet", ".pq"]

    def load(self, filename: str) -> Iterator[Record]:
        """Lazily load rows from a Parquet file.

        Reads the file batch by batch and yields one record at a time.

        Raises:
            FileNotFoundError: If the file does not exist.
            pyarrow.ArrowInvalid: If the file is not a valid Parquet file.
        """
        logger.debug("Reading Parquet %s", filename)
        parquet_file = pq.ParquetFile(filename)
        for batch in parquet_file.iter_batches():
            for row in batch.to_pylist():
                yield _row_to_record(row)

    def get_record_count(self, filename: str) -> int:
        """Get the row count from Parquet metadata."""
        return pq.ParquetFile(filename).metadata.num_rows
