"""Unit tests for pipeline orchestration."""

from __future__ import annotations

from datetime import date

import pytest

from core.config import PetroflowConfig
from core.errors import DateDerivationError, IngestError, MalformedRowError
from ingest.pipeline import check_source, run_pipeline, run_pipeline_on_rows
from tests.dataset_builders import source_rows
from tests.fixture_paths import fixture_path


def test_run_pipeline_normalizes_bom_and_unit_headers(config: PetroflowConfig) -> None:
    """Raw export headers should load into derived records."""
    result = run_pipeline(str(fixture_path("consumption_valid.csv")), config)

    first_record = result.dataset.records[0]
    assert (first_record.category, first_record.period, first_record.quantity) == (
        "HSD",
        date(2022, 1, 1),
        100.0,
    )


def test_run_pipeline_keeps_raw_dataset_components(config: PetroflowConfig) -> None:
    """Raw dataset should keep month and year for callers that need them."""
    result = run_pipeline(str(fixture_path("consumption_valid.csv")), config)

    assert (result.raw_dataset.records[0].month, result.raw_dataset.records[0].year) == (
        "January",
        2022,
    )


def test_run_pipeline_reports_but_keeps_flagged_rows(config: PetroflowConfig) -> None:
    """Duplicate and incomplete rows should be reported and retained."""
    result = run_pipeline(str(fixture_path("consumption_dirty.csv")), config)

    assert result.cleaning_report.duplicate_count == 1
    assert len(result.cleaning_report.incomplete_records) == 2
    assert len(result.dataset.records) == 5


def test_run_pipeline_raises_for_malformed_quantity(config: PetroflowConfig) -> None:
    """Unparseable quantity should abort ingest."""
    with pytest.raises(MalformedRowError):
        run_pipeline(str(fixture_path("bad_quantity.csv")), config)


def test_run_pipeline_raises_for_misspelled_month(config: PetroflowConfig) -> None:
    """Misspelled month names should abort derivation with the row number."""
    with pytest.raises(DateDerivationError) as error_info:
        run_pipeline(str(fixture_path("bad_month.csv")), config)

    assert error_info.value.row_number == 2


def test_run_pipeline_raises_for_missing_columns(config: PetroflowConfig) -> None:
    """Sources lacking required columns should fail at ingest."""
    with pytest.raises(IngestError):
        run_pipeline(str(fixture_path("missing_columns.csv")), config)


def test_run_pipeline_on_rows_uses_memory_label() -> None:
    """In-memory runs should carry the given source label."""
    result = run_pipeline_on_rows(source_rows([("MS", 2021, "June", 8.0, "u1")]), "inline")

    assert result.dataset.source_uri == "inline"


def test_check_source_reports_rows_derivation_would_reject(config: PetroflowConfig) -> None:
    """Advisory checks should run without deriving periods."""
    report = check_source(str(fixture_path("missing_month.csv")), config)

    assert [(record.row_number, record.month) for record in report.incomplete_records] == [
        (1, None)
    ]
