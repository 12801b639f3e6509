"""Grouping and ranking primitives shared by aggregations.

This module selects the records usable for aggregation, sums values by
key in first-encountered order, and assigns per-group ranks with a
deterministic tie-break.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from core.errors import AggregateError
from core.logging_config import get_logger
from core.types import Dataset, Record

_LOGGER = get_logger(__name__)

RowT = TypeVar("RowT")
KeyT = TypeVar("KeyT", bound=Hashable)


def aggregatable_records(dataset: Dataset) -> list[Record]:
    """Return records carrying both a category and a quantity.

    Records missing either field stay visible through the advisory
    checks and the quality report but cannot contribute to a sum.

    Args:
        dataset: Derived dataset.

    Returns:
        Usable records in dataset order.
    """
    usable = [
        record
        for record in dataset.records
        if record.category and record.quantity is not None
    ]
    skipped_count = len(dataset.records) - len(usable)
    if skipped_count:
        _LOGGER.debug(
            "aggregate_records_skipped",
            source_uri=dataset.source_uri,
            skipped_count=skipped_count,
        )
    return usable


def sum_by_key(
    records: Iterable[Record],
    key: Callable[[Record], KeyT],
) -> dict[KeyT, tuple[float, int]]:
    """Sum quantities per key, keeping first-encountered key order.

    Args:
        records: Records with a quantity.
        key: Grouping key function.

    Returns:
        Mapping of key to (total, record count).
    """
    sums: dict[KeyT, tuple[float, int]] = {}
    for record in records:
        group_key = key(record)
        total, count = sums.get(group_key, (0.0, 0))
        sums[group_key] = (total + (record.quantity or 0.0), count + 1)
    return sums


def rank_groups(
    rows: Iterable[RowT],
    group_key: Callable[[RowT], KeyT],
    metric: Callable[[RowT], float],
) -> dict[KeyT, list[tuple[int, RowT]]]:
    """Assign one-based ranks inside each group by descending metric.

    Equal metrics keep their input order, so the first-encountered row
    wins a tie.

    Args:
        rows: Rows to rank.
        group_key: Partition key function.
        metric: Value ranked in descending order.

    Returns:
        Groups in first-encountered order, each a list of (rank, row).
    """
    groups: dict[KeyT, list[RowT]] = {}
    for row in rows:
        groups.setdefault(group_key(row), []).append(row)
    return {
        key: list(enumerate(sorted(members, key=metric, reverse=True), 1))
        for key, members in groups.items()
    }


def limit(rows: Sequence[RowT], count: int) -> list[RowT]:
    """Return the first ``count`` rows.

    Raises:
        AggregateError: If count is negative.
    """
    if count < 0:
        raise AggregateError(f"Row limit must be >= 0, got {count}.")
    return list(rows[:count])
