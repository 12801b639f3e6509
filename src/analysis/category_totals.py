"""Category-level consumption totals."""

from __future__ import annotations

from analysis.grouping import aggregatable_records, sum_by_key
from core.types import CategoryPeriodTotal, CategoryTotal, Dataset


def totals_by_category(dataset: Dataset) -> list[CategoryTotal]:
    """Sum and average consumption per category.

    Args:
        dataset: Derived dataset.

    Returns:
        Rows sorted by total descending; equal totals keep the
        first-encountered category first.
    """
    sums = sum_by_key(aggregatable_records(dataset), lambda record: record.category or "")
    rows = [
        CategoryTotal(category=category, total=total, average=total / count, record_count=count)
        for category, (total, count) in sums.items()
    ]
    return sorted(rows, key=lambda row: row.total, reverse=True)


def totals_by_category_and_period(dataset: Dataset) -> list[CategoryPeriodTotal]:
    """Sum consumption per (category, period) in first-encountered order.

    Args:
        dataset: Derived dataset.

    Returns:
        One row per category and month.
    """
    sums = sum_by_key(
        aggregatable_records(dataset),
        lambda record: (record.category or "", record.period),
    )
    return [
        CategoryPeriodTotal(category=category, period=period, total=total)
        for (category, period), (total, _count) in sums.items()
    ]
