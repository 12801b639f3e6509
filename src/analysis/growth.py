"""Month-over-month growth per category.

Growth compares each period with the preceding observed period of the
same category. A category's first period has no baseline and yields
no row.
"""

from __future__ import annotations

from analysis.category_totals import totals_by_category_and_period
from core.constants import GROWTH_DECIMALS
from core.errors import UndefinedGrowthError
from core.types import CategoryPeriodTotal, Dataset, GrowthRow


def month_over_month_growth(dataset: Dataset) -> list[GrowthRow]:
    """Compute percentage change between consecutive periods.

    Args:
        dataset: Derived dataset.

    Returns:
        Rows grouped by first-encountered category, periods ascending.

    Raises:
        UndefinedGrowthError: If a previous period total is zero.
    """
    by_category: dict[str, list[CategoryPeriodTotal]] = {}
    for row in totals_by_category_and_period(dataset):
        by_category.setdefault(row.category, []).append(row)
    growth_rows: list[GrowthRow] = []
    for category, rows in by_category.items():
        ordered = sorted(rows, key=lambda row: row.period)
        for previous, current in zip(ordered, ordered[1:]):
            growth_rows.append(_build_growth_row(category, previous, current))
    return growth_rows


def growth_percent(current_total: float, previous_total: float) -> float:
    """Return the rounded percentage change from a non-zero baseline."""
    change = (current_total - previous_total) / previous_total * 100
    return round(change, GROWTH_DECIMALS)


def _build_growth_row(
    category: str,
    previous: CategoryPeriodTotal,
    current: CategoryPeriodTotal,
) -> GrowthRow:
    if previous.total == 0:
        raise UndefinedGrowthError(category, current.period)
    return GrowthRow(
        category=category,
        period=current.period,
        total=current.total,
        previous_total=previous.total,
        growth_percent=growth_percent(current.total, previous.total),
    )
