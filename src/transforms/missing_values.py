"""Missing-value detection for raw records."""

from __future__ import annotations

from typing import Iterable

from core.types import RawRecord


def detect_missing_values(records: Iterable[RawRecord]) -> list[RawRecord]:
    """Return records with any absent field, in source order.

    Args:
        records: Raw records to inspect.

    Returns:
        Records missing category, month, year, quantity or source label.
    """
    return [record for record in records if is_incomplete(record)]


def is_incomplete(record: RawRecord) -> bool:
    """Return whether any identifying field of a record is absent."""
    return any(
        value is None
        for value in (
            record.category,
            record.month,
            record.year,
            record.quantity,
            record.source_label,
        )
    )
