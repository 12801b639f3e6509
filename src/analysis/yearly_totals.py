"""Calendar-year consumption totals."""

from __future__ import annotations

from analysis.grouping import aggregatable_records, sum_by_key
from core.types import Dataset, YearlyTotal


def yearly_totals(dataset: Dataset) -> list[YearlyTotal]:
    """Sum consumption per (year, category).

    Args:
        dataset: Derived dataset.

    Returns:
        Rows ordered by year ascending, then total descending.
    """
    sums = sum_by_key(
        aggregatable_records(dataset),
        lambda record: (record.period.year, record.category or ""),
    )
    rows = [
        YearlyTotal(year=year, category=category, total=total)
        for (year, category), (total, _count) in sums.items()
    ]
    return sorted(rows, key=lambda row: (row.year, -row.total))
