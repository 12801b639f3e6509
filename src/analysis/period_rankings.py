"""Peak and top-period rankings.

This module ranks monthly totals overall and inside each category
using rank assignment over grouped, stably sorted sequences.
"""

from __future__ import annotations

from analysis.category_totals import totals_by_category_and_period
from analysis.grouping import aggregatable_records, rank_groups, sum_by_key
from core.constants import DEFAULT_TOP_K
from core.errors import AggregateError
from core.types import CategoryPeriodTotal, Dataset, PeriodTotal, RankedPeriod


def period_totals(dataset: Dataset) -> list[PeriodTotal]:
    """Sum consumption across categories for each period, ascending."""
    sums = sum_by_key(aggregatable_records(dataset), lambda record: record.period)
    return [
        PeriodTotal(period=period, total=total)
        for period, (total, _count) in sorted(sums.items(), key=lambda item: item[0])
    ]


def peak_period_overall(dataset: Dataset) -> PeriodTotal | None:
    """Return the period with the highest total across all categories.

    Args:
        dataset: Derived dataset.

    Returns:
        Peak period row; the earliest period wins a tie. None when the
        dataset has no aggregatable records.
    """
    peak: PeriodTotal | None = None
    for row in period_totals(dataset):
        if peak is None or row.total > peak.total:
            peak = row
    return peak


def rank_periods_per_category(dataset: Dataset) -> dict[str, list[RankedPeriod]]:
    """Rank every period inside each category by total, descending.

    Args:
        dataset: Derived dataset.

    Returns:
        Ranked periods per category in first-encountered category order.
    """
    ranked_groups = rank_groups(
        totals_by_category_and_period(dataset),
        group_key=lambda row: row.category,
        metric=lambda row: row.total,
    )
    return {
        category: [_as_ranked(row, rank) for rank, row in ranked_rows]
        for category, ranked_rows in ranked_groups.items()
    }


def top_periods_per_category(dataset: Dataset, k: int = DEFAULT_TOP_K) -> list[RankedPeriod]:
    """Keep the ``k`` highest-usage periods of every category.

    Args:
        dataset: Derived dataset.
        k: Maximum periods per category.

    Returns:
        Rows ordered by category name, then rank.

    Raises:
        AggregateError: If k is smaller than one.
    """
    if k < 1:
        raise AggregateError(f"Top-period count must be >= 1, got {k}.")
    ranked = rank_periods_per_category(dataset)
    return [row for category in sorted(ranked) for row in ranked[category][:k]]


def peak_period_per_category(dataset: Dataset) -> list[RankedPeriod]:
    """Return the rank-1 period of every category, highest total first."""
    peaks = [rows[0] for rows in rank_periods_per_category(dataset).values()]
    return sorted(peaks, key=lambda row: row.total, reverse=True)


def category_trend(dataset: Dataset, category: str) -> list[PeriodTotal]:
    """Return one category's period totals ordered by usage, descending.

    An unknown category yields an empty list.
    """
    ranked = rank_periods_per_category(dataset).get(category, [])
    return [PeriodTotal(period=row.period, total=row.total) for row in ranked]


def _as_ranked(row: CategoryPeriodTotal, rank: int) -> RankedPeriod:
    return RankedPeriod(category=row.category, period=row.period, total=row.total, rank=rank)
