"""Unit tests for month-over-month growth."""

from __future__ import annotations

from datetime import date

import pytest

from analysis.growth import growth_percent, month_over_month_growth
from core.errors import UndefinedGrowthError
from tests.dataset_builders import build_dataset


def test_month_over_month_growth_computes_percent_changes() -> None:
    """Totals 100, 150, 75 should yield +50.0 then -50.0."""
    dataset = build_dataset(
        [
            ("HSD", 2022, "January", 100.0, "u1"),
            ("HSD", 2022, "February", 150.0, "u2"),
            ("HSD", 2022, "March", 75.0, "u3"),
        ]
    )

    rows = month_over_month_growth(dataset)

    assert [row.growth_percent for row in rows] == [50.0, -50.0]


def test_month_over_month_growth_skips_first_period_per_category() -> None:
    """No row should be emitted for a category's first period."""
    dataset = build_dataset(
        [
            ("HSD", 2022, "February", 150.0, "u2"),
            ("HSD", 2022, "January", 100.0, "u1"),
            ("MS", 2022, "January", 40.0, "u3"),
        ]
    )

    rows = month_over_month_growth(dataset)

    assert [(row.category, row.period, row.previous_total) for row in rows] == [
        ("HSD", date(2022, 2, 1), 100.0),
    ]


def test_month_over_month_growth_rounds_to_two_decimals() -> None:
    """Growth should be rounded to two decimal places."""
    dataset = build_dataset(
        [
            ("MS", 2022, "January", 30.0, "u1"),
            ("MS", 2022, "February", 40.0, "u2"),
        ]
    )

    assert month_over_month_growth(dataset)[0].growth_percent == 33.33


def test_month_over_month_growth_raises_for_zero_baseline() -> None:
    """A zero previous total should raise instead of emitting infinity."""
    dataset = build_dataset(
        [
            ("SKO", 2022, "January", 0.0, "u1"),
            ("SKO", 2022, "February", 12.0, "u2"),
        ]
    )

    with pytest.raises(UndefinedGrowthError) as error_info:
        month_over_month_growth(dataset)

    assert (error_info.value.category, error_info.value.period) == ("SKO", date(2022, 2, 1))


def test_growth_percent_handles_decline_to_zero() -> None:
    """Dropping to zero is a -100 percent change."""
    assert growth_percent(0.0, 80.0) == -100.0
