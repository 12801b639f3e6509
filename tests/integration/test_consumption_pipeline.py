"""Integration tests for ingest, clean, derive and aggregate flows."""

from __future__ import annotations

import json
from datetime import date

from core.config import PetroflowConfig
from core.payloads import to_payload
from sdk.dataset_sdk import PetroflowClient
from tests.fixture_paths import fixture_path


def test_jsonl_source_matches_reference_totals(config: PetroflowConfig) -> None:
    """JSONL exports with aliased headers should aggregate like CSV."""
    handle = PetroflowClient(config).load(str(fixture_path("consumption.jsonl")))

    rows = handle.totals_by_category()

    assert [(row.category, row.total, row.average) for row in rows] == [
        ("HSD", 250.0, 125.0),
        ("MS", 50.0, 50.0),
    ]


def test_dirty_source_flows_through_every_stage(config: PetroflowConfig) -> None:
    """Advisory findings should not stop aggregation over flagged rows."""
    handle = PetroflowClient(config).load(str(fixture_path("consumption_dirty.csv")))

    report = handle.cleaning_report
    quality = handle.quality_report()
    totals = handle.totals_by_category()

    assert report.duplicate_count == 1
    assert [record.row_number for record in report.incomplete_records] == [3, 4]
    assert (quality.total_rows, quality.missing_products, quality.missing_quantities) == (5, 1, 1)
    assert [(row.category, row.total) for row in totals] == [("LPG", 85.0)]


def test_standard_report_serializes_to_json(config: PetroflowConfig) -> None:
    """The full report should serialize without custom encoders."""
    handle = PetroflowClient(config).load(str(fixture_path("consumption_valid.csv")))

    payload = json.loads(json.dumps(to_payload(handle.build_report())))

    assert payload["profile"]["earliest_period"] == "2022-01-01"
    assert payload["top_categories"][0]["category"] == "HSD"
    assert payload["comparison"][0]["totals"] == {"HSD": 100.0, "MS": 50.0, "SKO": 0.0}


def test_period_totals_cover_every_month(config: PetroflowConfig) -> None:
    """Compared periods should span every month in the dataset."""
    handle = PetroflowClient(config).load(str(fixture_path("consumption_valid.csv")))

    periods = [row.period for row in handle.compare_categories(["SKO"])]

    assert periods == [date(2022, 1, 1), date(2022, 2, 1), date(2022, 3, 1), date(2023, 1, 1)]
