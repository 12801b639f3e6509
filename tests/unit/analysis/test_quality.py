"""Unit tests for quality report and dataset profile."""

from __future__ import annotations

from datetime import date

from analysis.quality import find_quantity_matches, profile_dataset, quality_report
from core.types import Dataset
from tests.dataset_builders import build_dataset


def test_quality_report_counts_empty_category() -> None:
    """One row with an empty category string should count as missing."""
    dataset = build_dataset(
        [
            ("", 2022, "January", 10.0, "u1"),
            ("HSD", 2022, "January", 100.0, "u2"),
        ]
    )

    report = quality_report(dataset)

    assert (report.total_rows, report.missing_products) == (2, 1)


def test_quality_report_counts_missing_quantities() -> None:
    """Blank quantities should be counted, periods are always derived."""
    dataset = build_dataset(
        [
            ("HSD", 2022, "January", None, "u1"),
            ("HSD", 2022, "February", 5.0, "u2"),
        ]
    )

    report = quality_report(dataset)

    assert (report.missing_dates, report.missing_quantities) == (0, 1)


def test_profile_dataset_reports_ranges_and_categories() -> None:
    """Profile should cover categories, period range and quantity range."""
    dataset = build_dataset(
        [
            ("MS", 2022, "March", 23.24, "u1"),
            ("HSD", 2021, "July", 8217.12, "u2"),
            ("MS", 2023, "January", 400.0, "u3"),
        ]
    )

    profile = profile_dataset(dataset)

    assert profile.categories == ("MS", "HSD")
    assert (profile.earliest_period, profile.latest_period) == (
        date(2021, 7, 1),
        date(2023, 1, 1),
    )
    assert (profile.min_quantity, profile.max_quantity) == (23.24, 8217.12)


def test_profile_dataset_handles_empty_dataset() -> None:
    """An empty dataset should profile with None bounds."""
    profile = profile_dataset(Dataset(source_uri="<empty>", records=()))

    assert profile.record_count == 0 and profile.earliest_period is None


def test_find_quantity_matches_returns_extreme_rows() -> None:
    """Records with the requested quantities should be returned in order."""
    dataset = build_dataset(
        [
            ("MS", 2022, "March", 23.24, "u1"),
            ("HSD", 2021, "July", 8217.12, "u2"),
            ("MS", 2023, "January", 400.0, "u3"),
        ]
    )

    matches = find_quantity_matches(dataset, [8217.12, 23.24])

    assert [record.row_number for record in matches] == [1, 2]
