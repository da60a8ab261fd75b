"""
Format detection utilities for tabular files.

This module provides functions to detect file formats and get appropriate loaders.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csv_compare.data_formats.base import DataLoader


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".csv": "csv",
    ".parquet": "parquet",
    ".pq": "parquet",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["csv", "parquet"])


def detect_format(filename: str) -> str:
    """Detect file format from extension or content.

    Args:
        filename: Path to the file.

    Returns:
        Format name: "csv" or "parquet"

    Raises:
        ValueError: If the format cannot be determined or is unsupported.

    Examples:
        >>> detect_format("people.csv")
        'csv'
        >>> detect_format("people.PQ")
        'parquet'
    """
    extension = Path(filename).suffix.lower()

    if extension in EXTENSION_MAP:
        return EXTENSION_MAP[extension]

    # Parquet files carry magic bytes; CSV has no reliable signature
    path = Path(filename)
    if path.is_file():
        try:
            with open(filename, "rb") as f:
                if f.read(4) == b"PAR1":
                    return "parquet"
        except OSError:
            pass

    raise ValueError(
        f"Unsupported file format for '{filename}'. "
        f"Supported extensions: {', '.join(sorted(EXTENSION_MAP.keys()))}"
    )


def _loaders() -> dict[str, "DataLoader"]:
    # Import loaders here to avoid circular imports
    from csv_compare.data_formats.csv_loader import CSVLoader
    from csv_compare.data_formats.parquet_loader import ParquetLoader

    return {
        "csv": CSVLoader(),
        "parquet": ParquetLoader(),
    }


def get_loader(filename: str) -> "DataLoader":
    """Factory function to get appropriate loader for a file.

    Raises:
        ValueError: If the format cannot be determined or is unsupported.

    Examples:
        >>> loader = get_loader("people.csv")
        >>> loader.format_name
        'csv'
    """
    return _loaders()[detect_format(filename)]


def get_loader_for_format(format_name: str) -> "DataLoader":
    """Get a loader for a specific format name.

    Args:
        format_name: The format name ("csv" or "parquet").

    Returns:
        A DataLoader instance for the specified format.

    Raises:
        ValueError: If the format name is not supported.
    """
    if format_name not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format '{format_name}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    return _loaders()[format_name]


def load_first_record(filename: str) -> dict[str, str]:
    """Load the first data row of a CSV or Parquet file.

    Only the first row takes part in a comparison; later rows are ignored.

    Args:
        filename: Path to the file.

    Returns:
        The first record, or an empty dict if the file has no data rows.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported.
    """
    if not Path(filename).exists():
        raise FileNotFoundError(f"File not found: {filename}")

    return get_loader(filename).load_first(filename)
