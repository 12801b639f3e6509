"""Side-by-side category comparison."""

from __future__ import annotations

from typing import Iterable

from analysis.grouping import aggregatable_records, sum_by_key
from core.errors import AggregateError
from core.types import ComparisonRow, Dataset


def compare_categories(dataset: Dataset, categories: Iterable[str]) -> list[ComparisonRow]:
    """Pivot named category totals into one row per period.

    Every period present in the dataset gets a row. A named category
    with no consumption in a period is reported as 0.0.

    Args:
        dataset: Derived dataset.
        categories: Categories to compare, in output column order.

    Returns:
        Rows ordered by period ascending.

    Raises:
        AggregateError: If no category is named.
    """
    names = list(dict.fromkeys(categories))
    if not names:
        raise AggregateError("Category comparison needs at least one category name.")
    records = aggregatable_records(dataset)
    sums = sum_by_key(records, lambda record: (record.period, record.category or ""))
    periods = sorted({record.period for record in records})
    return [
        ComparisonRow(
            period=period,
            totals={name: sums.get((period, name), (0.0, 0))[0] for name in names},
        )
        for period in periods
    ]
