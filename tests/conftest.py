"""Pytest configuration and shared fixtures for csv_compare tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq
import pytest


@pytest.fixture
def record_alice() -> dict[str, str]:
    """Return the first record of the end-to-end example."""
    return {"name": "Alice", "age": "30"}


@pytest.fixture
def record_alicia() -> dict[str, str]:
    """Return the second record of the end-to-end example."""
    return {"name": "Alicia", "city": "NYC"}


@pytest.fixture
def csv_pair(tmp_path: Path) -> tuple[Path, Path]:
    """Write two small CSV files that differ in a few fields."""
    file1 = tmp_path / "before.csv"
    file2 = tmp_path / "after.csv"
    write_csv(file1, ["name", "age", "notes"], [["Alice", "30", ""], ["Bob", "40", ""]])
    write_csv(file2, ["name", "city", "notes"], [["Alicia", "NYC", ""]])
    return file1, file2


def write_csv(path: Path, header: list[str], rows: list[list[str]]) -> None:
    """Helper to write a simple CSV file (no quoting needed for test data)."""
    lines = [",".join(header)] + [",".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_parquet(path: Path, records: list[dict[str, Any]]) -> None:
    """Helper to write records to a Parquet file."""
    pq.write_table(pa.Table.from_pylist(records), path)
