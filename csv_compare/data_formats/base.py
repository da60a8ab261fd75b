"""
Abstract base class for record loaders.

This module defines the DataLoader interface that all format-specific
loaders must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

Record = dict[str, str]


class DataLoader(ABC):
    """Abstract base class for loading flat records from tabular files.

    All format-specific loaders (CSV, Parquet) must inherit from this class
    and implement all abstract methods. Every value a loader yields is a
    string.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'csv', 'parquet')."""
        pass

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """Return supported file extensions (e.g., ['.csv'])."""
        pass

    @abstractmethod
    def load(self, filename: str) -> Iterator[Record]:
        """Lazily load records from file.

        Args:
            filename: Path to the file.

        Yields:
            Each data row as a mapping of field name to string value.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        pass

    @abstractmethod
    def get_record_count(self, filename: str) -> int:
        """Get total number of data rows in the file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        pass

    def load_first(self, filename: str) -> Record:
        """Load the first data row of a file.

        Args:
            filename: Path to the file.

        Returns:
            The first record, or an empty dict if the file has no data rows.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        for record in self.load(filename):
            return record
        return {}
