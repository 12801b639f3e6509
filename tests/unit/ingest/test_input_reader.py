"""Unit tests for input reader module."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from core.config import PetroflowConfig
from core.errors import IngestError, MalformedRowError
from ingest.input_reader import read_source_rows
from tests.fixture_paths import fixture_path


def test_read_source_rows_reads_csv_rows(config: PetroflowConfig) -> None:
    """Reader should return one dict per CSV data line."""
    rows = read_source_rows(str(fixture_path("consumption_valid.csv")), config)

    assert len(rows) == 8


def test_read_source_rows_keeps_raw_header_text(config: PetroflowConfig) -> None:
    """Reader should leave header renaming to normalization."""
    rows = read_source_rows(str(fixture_path("consumption_valid.csv")), config)

    assert "Quantity (000 Metric Tonnes)" in rows[0]


def test_read_source_rows_reads_jsonl_and_skips_blank_lines(config: PetroflowConfig) -> None:
    """JSONL sources should produce one row per object."""
    rows = read_source_rows(str(fixture_path("consumption.jsonl")), config)

    assert [row["Products"] for row in rows] == ["HSD", "HSD", "MS"]


def test_read_source_rows_uses_configured_delimiter(config: PetroflowConfig) -> None:
    """Reader should split on the configured delimiter."""
    semicolon_config = replace(config, csv_delimiter=";")

    rows = read_source_rows(str(fixture_path("semicolon.csv")), semicolon_config)

    assert rows[0]["Products"] == "ATF"


def test_read_source_rows_raises_for_missing_path(
    tmp_path: Path,
    config: PetroflowConfig,
) -> None:
    """Reader should fail when source path is missing."""
    missing_path = tmp_path / "does-not-exist.csv"

    with pytest.raises(IngestError):
        read_source_rows(str(missing_path), config)


def test_read_source_rows_raises_for_unsupported_extension(
    tmp_path: Path,
    config: PetroflowConfig,
) -> None:
    """Reader should reject unsupported file types."""
    source_path = tmp_path / "consumption.xlsx"
    source_path.write_bytes(b"")

    with pytest.raises(IngestError):
        read_source_rows(str(source_path), config)


def test_read_source_rows_raises_for_invalid_jsonl(config: PetroflowConfig) -> None:
    """Reader should fail for malformed JSONL payloads."""
    with pytest.raises(IngestError):
        read_source_rows(str(fixture_path("bad_rows.jsonl")), config)


def test_read_source_rows_rejects_rows_with_extra_cells(config: PetroflowConfig) -> None:
    """An unquoted thousands separator should fail instead of shifting cells."""
    with pytest.raises(MalformedRowError) as error_info:
        read_source_rows(str(fixture_path("extra_cells.csv")), config)

    assert (error_info.value.row_number, error_info.value.raw_value) == (1, ["u1"])
