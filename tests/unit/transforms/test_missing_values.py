"""Unit tests for missing-value detection and the cleaning report."""

from __future__ import annotations

from tests.dataset_builders import build_raw_dataset
from transforms.cleaning_report import build_cleaning_report
from transforms.missing_values import detect_missing_values


def test_detect_missing_values_flags_any_absent_field() -> None:
    """Rows with any blank identifying field should be reported in order."""
    raw_dataset = build_raw_dataset(
        [
            ("HSD", 2022, "January", 100.0, "u1"),
            ("", 2022, "January", 10.0, "u2"),
            ("MS", None, "January", 10.0, "u3"),
            ("MS", 2022, "January", 10.0, None),
        ]
    )

    incomplete = detect_missing_values(raw_dataset.records)

    assert [record.row_number for record in incomplete] == [2, 3, 4]


def test_build_cleaning_report_is_clean_for_valid_rows() -> None:
    """A dataset without findings should produce an empty report."""
    raw_dataset = build_raw_dataset([("HSD", 2022, "January", 100.0, "u1")])

    report = build_cleaning_report(raw_dataset)

    assert report.is_clean and report.duplicate_count == 0


def test_build_cleaning_report_combines_both_checks() -> None:
    """The report should carry duplicates and incomplete rows together."""
    raw_dataset = build_raw_dataset(
        [
            ("LPG", 2021, "March", 30.0, "u1"),
            ("LPG", 2021, "March", 30.0, "u1"),
            ("LPG", 2021, "April", None, "u2"),
        ]
    )

    report = build_cleaning_report(raw_dataset)

    assert (report.duplicate_count, len(report.incomplete_records)) == (1, 1)
