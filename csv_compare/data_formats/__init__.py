"""
Data formats module for loading comparison records.

This module provides a unified interface for reading the first data row of
CSV and Parquet files as a flat record of strings.

Usage:
    from csv_compare.data_formats import load_first_record

    record = load_first_record("people.csv")
    print(record["name"])

    # Or pick a loader explicitly
    from csv_compare.data_formats import get_loader
    loader = get_loader("people.parquet")
    print(loader.get_record_count("people.parquet"))
"""

from csv_compare.data_formats.base import DataLoader, Record
from csv_compare.data_formats.csv_loader import CSVLoader
from csv_compare.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    get_loader,
    get_loader_for_format,
    load_first_record,
)
from csv_compare.data_formats.parquet_loader import ParquetLoader

__all__ = [
    # Base class
    "DataLoader",
    "Record",
    # Format detection
    "detect_format",
    "get_loader",
    "get_loader_for_format",
    "load_first_record",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Loaders
    "CSVLoader",
    "ParquetLoader",
]
