"""Duplicate row detection.

This module reports rows that repeat every identifying field. Rows are
never removed here; the caller decides what to do with each group.
"""

from __future__ import annotations

from typing import Iterable

from core.types import DuplicateGroup, RawRecord


def detect_duplicates(records: Iterable[RawRecord]) -> list[DuplicateGroup]:
    """Group rows sharing month, year, category, quantity and label.

    Args:
        records: Raw records in source order.

    Returns:
        One group per repeated key, ordered by first occurrence.
        Each group lists every occurrence after the first as an extra.
    """
    partitions: dict[tuple[object, ...], list[RawRecord]] = {}
    for record in records:
        partitions.setdefault(duplicate_key(record), []).append(record)
    return [
        DuplicateGroup(key=key, first=members[0], extras=tuple(members[1:]))
        for key, members in partitions.items()
        if len(members) > 1
    ]


def duplicate_key(record: RawRecord) -> tuple[object, ...]:
    """Build the identifying key for duplicate partitioning."""
    return (
        record.month,
        record.year,
        record.category,
        record.quantity,
        record.source_label,
    )
