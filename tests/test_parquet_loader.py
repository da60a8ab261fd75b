"""Tests for ParquetLoader in csv_compare/data_formats/parquet_loader.py."""

from __future__ import annotations

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from csv_compare.data_formats import ParquetLoader

from conftest import write_parquet


class TestParquetLoaderProperties:
    """Tests for ParquetLoader properties."""

    def test_format_name(self):
        assert ParquetLoader().format_name == "parquet"

    def test_supported_extensions(self):
        loader = ParquetLoader()
        assert ".parquet" in loader.supported_extensions
        assert ".pq" in loader.supported_extensions


class TestParquetLoaderLoad:
    """Tests for ParquetLoader.load() and load_first()."""

    def test_values_stringified(self, tmp_path):
        """Scalars become the strings a CSV export would contain."""
        filepath = tmp_path / "people.parquet"
        write_parquet(filepath, [{"name": "Alice", "age": 30, "active": True, "score": 1.5}])

        record = ParquetLoader().load_first(str(filepath))
        assert record == {"name": "Alice", "age": "30", "active": "true", "score": "1.5"}

    def test_null_becomes_empty(self, tmp_path):
        filepath = tmp_path / "nulls.parquet"
        write_parquet(filepath, [{"name": None, "city": "NYC"}])

        assert ParquetLoader().load_first(str(filepath)) == {"name": "", "city": "NYC"}

    def test_nested_values_as_json(self, tmp_path):
        filepath = tmp_path / "nested.parquet"
        write_parquet(filepath, [{"tags": ["a", "b"], "meta": {"k": 1}}])

        record = ParquetLoader().load_first(str(filepath))
        assert record["tags"] == '["a","b"]'
        assert record["meta"] == '{"k":1}'

    def test_only_first_row_returned(self, tmp_path):
        filepath = tmp_path / "many.parquet"
        write_parquet(filepath, [{"id": "1"}, {"id": "2"}])

        assert ParquetLoader().load_first(str(filepath)) == {"id": "1"}
        assert [r["id"] for r in ParquetLoader().load(str(filepath))] == ["1", "2"]

    def test_empty_file_gives_empty_record(self, tmp_path):
        filepath = tmp_path / "empty.parquet"
        pq.write_table(pa.table({"id": pa.array([], type=pa.string())}), filepath)

        assert ParquetLoader().load_first(str(filepath)) == {}

    def test_record_count(self, tmp_path):
        filepath = tmp_path / "many.parquet"
        write_parquet(filepath, [{"id": str(i)} for i in range(5)])

        assert ParquetLoader().get_record_count(str(filepath)) == 5

    def test_invalid_file_raises(self, tmp_path):
        filepath = tmp_path / "bad.parquet"
        filepath.write_text("not parquet")

        with pytest.raises(pa.ArrowInvalid):
            ParquetLoader().load_first(str(filepath))
