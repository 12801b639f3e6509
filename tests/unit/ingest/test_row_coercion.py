"""Unit tests for row normalization and value coercion."""

from __future__ import annotations

import pytest

from core.errors import MalformedRowError
from ingest.row_coercion import normalize_rows
from tests.dataset_builders import build_raw_dataset, source_rows


def test_normalize_rows_preserves_source_order() -> None:
    """Normalized records should keep source row order and numbering."""
    raw_dataset = build_raw_dataset(
        [
            ("MS", 2022, "February", "40", "u2"),
            ("HSD", 2022, "January", "100.5", "u1"),
        ]
    )

    assert [(record.row_number, record.category) for record in raw_dataset.records] == [
        (1, "MS"),
        (2, "HSD"),
    ]


def test_normalize_rows_coerces_types() -> None:
    """Year should become int and quantity float."""
    record = build_raw_dataset([("HSD", "2022", " January ", "1,234.5", " u1 ")]).records[0]

    assert (record.year, record.month, record.quantity, record.source_label) == (
        2022,
        "January",
        1234.5,
        "u1",
    )


def test_normalize_rows_turns_blank_cells_into_none() -> None:
    """Blank cells should be None, never zero or empty text."""
    record = build_raw_dataset([("  ", 2022, "January", "", "u1")]).records[0]

    assert record.category is None and record.quantity is None


def test_normalize_rows_raises_for_non_numeric_quantity() -> None:
    """Unparseable quantities should raise a malformed row error."""
    with pytest.raises(MalformedRowError) as error_info:
        build_raw_dataset(
            [
                ("HSD", 2022, "January", "100", "u1"),
                ("HSD", 2022, "February", "n/a", "u2"),
            ]
        )

    assert (error_info.value.row_number, error_info.value.field_name) == (2, "quantity")


def test_normalize_rows_raises_for_negative_quantity() -> None:
    """Negative consumption should be rejected."""
    with pytest.raises(MalformedRowError):
        build_raw_dataset([("HSD", 2022, "January", -5.0, "u1")])


def test_normalize_rows_raises_for_fractional_year() -> None:
    """Years must be integers."""
    with pytest.raises(MalformedRowError) as error_info:
        build_raw_dataset([("HSD", "2022.5", "January", 5.0, "u1")])

    assert error_info.value.field_name == "year"


def test_normalize_rows_accepts_empty_input() -> None:
    """An empty source should normalize to an empty dataset."""
    raw_dataset = normalize_rows([], "empty.csv")

    assert raw_dataset.records == ()


def test_normalize_rows_drops_unknown_columns() -> None:
    """Extra source columns should not reach the records."""
    rows = source_rows([("HSD", 2022, "January", 10, "u1")])
    rows[0]["Remarks"] = "checked"

    record = normalize_rows(rows, "<test>").records[0]

    assert record.category == "HSD"
