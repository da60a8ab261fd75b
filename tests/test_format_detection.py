"""Tests for format detection in csv_compare/data_formats/format_detector.py."""

from __future__ import annotations

import pytest

from csv_compare.data_formats import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    CSVLoader,
    ParquetLoader,
    detect_format,
    get_loader,
    get_loader_for_format,
    load_first_record,
)

from conftest import write_csv, write_parquet


class TestDetectFormat:
    """Tests for detect_format() function."""

    def test_detect_csv_extension(self, tmp_path):
        filepath = tmp_path / "data.csv"
        filepath.write_text("a,b\n1,2\n")
        assert detect_format(str(filepath)) == "csv"

    def test_detect_parquet_extension(self, tmp_path):
        filepath = tmp_path / "data.parquet"
        filepath.write_bytes(b"PAR1")
        assert detect_format(str(filepath)) == "parquet"

    def test_detect_pq_extension(self, tmp_path):
        filepath = tmp_path / "data.pq"
        filepath.write_bytes(b"PAR1")
        assert detect_format(str(filepath)) == "parquet"

    def test_detect_uppercase_extension(self, tmp_path):
        filepath = tmp_path / "DATA.CSV"
        filepath.write_text("a\n1\n")
        assert detect_format(str(filepath)) == "csv"

    def test_detect_parquet_by_magic_bytes(self, tmp_path):
        filepath = tmp_path / "datafile"
        filepath.write_bytes(b"PAR1rest-of-file")
        assert detect_format(str(filepath)) == "parquet"

    def test_unknown_extension_raises(self, tmp_path):
        filepath = tmp_path / "data.xlsx"
        filepath.write_text("not a table")
        with pytest.raises(ValueError, match="Unsupported file format"):
            detect_format(str(filepath))

    def test_no_extension_text_raises(self, tmp_path):
        filepath = tmp_path / "datafile"
        filepath.write_text("a,b\n1,2\n")
        with pytest.raises(ValueError, match="Unsupported file format"):
            detect_format(str(filepath))

    def test_extension_map_matches_supported_formats(self):
        assert set(EXTENSION_MAP.values()) == SUPPORTED_FORMATS


class TestGetLoader:
    """Tests for get_loader() and get_loader_for_format()."""

    def test_get_loader_csv(self, tmp_path):
        filepath = tmp_path / "data.csv"
        filepath.write_text("a\n1\n")
        assert isinstance(get_loader(str(filepath)), CSVLoader)

    def test_get_loader_parquet(self, tmp_path):
        filepath = tmp_path / "data.parquet"
        filepath.write_bytes(b"PAR1")
        assert isinstance(get_loader(str(filepath)), ParquetLoader)

    def test_get_loader_unknown_raises(self, tmp_path):
        filepath = tmp_path / "data.xml"
        filepath.write_text("<root></root>")
        with pytest.raises(ValueError):
            get_loader(str(filepath))

    def test_get_loader_for_format(self):
        assert isinstance(get_loader_for_format("csv"), CSVLoader)
        assert isinstance(get_loader_for_format("parquet"), ParquetLoader)

    def test_get_loader_for_unknown_raises(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_loader_for_format("jsonl")


class TestLoadFirstRecord:
    """Tests for load_first_record() function."""

    def test_csv(self, tmp_path):
        filepath = tmp_path / "people.csv"
        write_csv(filepath, ["name", "age"], [["Alice", "30"], ["Bob", "40"]])
        assert load_first_record(str(filepath)) == {"name": "Alice", "age": "30"}

    def test_csv_short_first_row(self, tmp_path):
        """The first row is compared even when it is missing trailing cells."""
        filepath = tmp_path / "people.csv"
        filepath.write_text("name,age,city\nAlice,30\nBob,40,LA\n", encoding="utf-8")
        assert load_first_record(str(filepath)) == {"name": "Alice", "age": "30", "city": ""}

    def test_parquet(self, tmp_path):
        filepath = tmp_path / "people.parquet"
        write_parquet(filepath, [{"name": "Alice"}, {"name": "Bob"}])
        assert load_first_record(str(filepath)) == {"name": "Alice"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_first_record(str(tmp_path / "missing.csv"))

    def test_unsupported_format(self, tmp_path):
        filepath = tmp_path / "people.txt"
        filepath.write_text("name\nAlice\n")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_first_record(str(filepath))
