"""Dataset quality and profile summaries.

These summaries count every record, including rows that aggregations
skip for a missing category or quantity.
"""

from __future__ import annotations

from typing import Iterable

from core.types import Dataset, DatasetProfile, QualityReport, Record


def quality_report(dataset: Dataset) -> QualityReport:
    """Count rows with missing category, period or quantity.

    Args:
        dataset: Derived dataset.

    Returns:
        Single summary row.
    """
    records = dataset.records
    return QualityReport(
        total_rows=len(records),
        missing_products=sum(1 for record in records if not (record.category or "").strip()),
        missing_dates=sum(1 for record in records if record.period is None),
        missing_quantities=sum(1 for record in records if record.quantity is None),
    )


def profile_dataset(dataset: Dataset) -> DatasetProfile:
    """Summarize size, categories, date range and quantity range.

    Args:
        dataset: Derived dataset.

    Returns:
        Profile with None bounds for empty inputs.
    """
    records = dataset.records
    categories = dict.fromkeys(record.category for record in records if record.category)
    periods = [record.period for record in records]
    quantities = [record.quantity for record in records if record.quantity is not None]
    return DatasetProfile(
        record_count=len(records),
        categories=tuple(categories),
        earliest_period=min(periods) if periods else None,
        latest_period=max(periods) if periods else None,
        min_quantity=min(quantities) if quantities else None,
        max_quantity=max(quantities) if quantities else None,
    )


def find_quantity_matches(dataset: Dataset, quantities: Iterable[float]) -> list[Record]:
    """Return records whose quantity equals one of the given values.

    Used to inspect extreme readings, e.g. the profile's min and max.
    """
    targets = {float(value) for value in quantities}
    return [record for record in dataset.records if record.quantity in targets]
