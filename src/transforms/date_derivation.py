"""Period derivation transform.

This module combines month-name text and year into a first-of-month
date and projects the month and year fields away. The projection is
one-way: callers needing the components must keep the raw dataset.
"""

from __future__ import annotations

from datetime import date

from core.constants import MONTH_NAMES
from core.errors import DateDerivationError
from core.types import Dataset, RawDataset, RawRecord, Record

_MONTH_NUMBERS = {name: index for index, name in enumerate(MONTH_NAMES, 1)}


def derive_period(month: str | None, year: int | None) -> date | None:
    """Build the first day of a named month.

    Args:
        month: Full month name, any letter case.
        year: Calendar year.

    Returns:
        Month start date, or None when the pair cannot be parsed.
    """
    if month is None or year is None:
        return None
    month_number = _MONTH_NUMBERS.get(month.strip().lower())
    if month_number is None:
        return None
    try:
        return date(year, month_number, 1)
    except ValueError:
        return None


def derive_record(record: RawRecord) -> Record:
    """Derive one record's period and drop its month and year.

    Raises:
        DateDerivationError: If month and year do not form a date.
    """
    period = derive_period(record.month, record.year)
    if period is None:
        raise DateDerivationError(record.row_number, record.month, record.year)
    return Record(
        row_number=record.row_number,
        category=record.category,
        period=period,
        quantity=record.quantity,
        source_label=record.source_label,
    )


def derive_dataset(raw_dataset: RawDataset) -> Dataset:
    """Derive periods for every record of a raw dataset.

    Args:
        raw_dataset: Normalized source rows.

    Returns:
        New dataset without month and year fields.

    Raises:
        DateDerivationError: On the first record whose period cannot be derived.
    """
    return Dataset(
        source_uri=raw_dataset.source_uri,
        records=tuple(derive_record(record) for record in raw_dataset.records),
    )
