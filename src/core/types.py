"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
analysis and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping


@dataclass(frozen=True)
class RawRecord:
    """Normalized source row before date derivation.

    Attributes:
        row_number: One-based data row number; the header line is not counted.
        month: Month name text as provided by the source.
        year: Calendar year.
        category: Product or commodity name.
        quantity: Consumption in thousand metric tonnes.
        source_label: Free-text provenance tag, e.g. update marker.
    """

    row_number: int
    month: str | None
    year: int | None
    category: str | None
    quantity: float | None
    source_label: str | None


@dataclass(frozen=True)
class RawDataset:
    """Ordered, immutable collection of normalized source rows.

    Attributes:
        source_uri: Origin path of the rows.
        records: Records in source order.
    """

    source_uri: str
    records: tuple[RawRecord, ...]


@dataclass(frozen=True)
class Record:
    """Consumption observation keyed by category and month.

    Attributes:
        row_number: One-based data row number; the header line is not counted.
        category: Product or commodity name.
        period: First day of the observed month.
        quantity: Consumption in thousand metric tonnes.
        source_label: Free-text provenance tag.
    """

    row_number: int
    category: str | None
    period: date
    quantity: float | None
    source_label: str | None


@dataclass(frozen=True)
class Dataset:
    """Derived dataset consumed by the analysis layer.

    Attributes:
        source_uri: Origin path of the rows.
        records: Derived records in source order.
    """

    source_uri: str
    records: tuple[Record, ...]


@dataclass(frozen=True)
class DuplicateGroup:
    """Rows sharing every identifying field.

    Attributes:
        key: Shared (month, year, category, quantity, source_label) values.
        first: First occurrence in source order.
        extras: Every later occurrence.
    """

    key: tuple[object, ...]
    first: RawRecord
    extras: tuple[RawRecord, ...]


@dataclass(frozen=True)
class CleaningReport:
    """Advisory findings from the clean stage."""

    duplicate_groups: tuple[DuplicateGroup, ...]
    incomplete_records: tuple[RawRecord, ...]

    @property
    def duplicate_count(self) -> int:
        """Count extra duplicate rows across all groups."""
        return sum(len(group.extras) for group in self.duplicate_groups)

    @property
    def is_clean(self) -> bool:
        """Return whether neither check found anything."""
        return not self.duplicate_groups and not self.incomplete_records


@dataclass(frozen=True)
class CategoryTotal:
    """Total and mean consumption for one category."""

    category: str
    total: float
    average: float
    record_count: int


@dataclass(frozen=True)
class CategoryPeriodTotal:
    """Total consumption for one category in one period."""

    category: str
    period: date
    total: float


@dataclass(frozen=True)
class PeriodTotal:
    """Total consumption in one period."""

    period: date
    total: float


@dataclass(frozen=True)
class RankedPeriod:
    """Category period total with its rank inside the category.

    Attributes:
        category: Product name.
        period: Month start date.
        total: Summed consumption.
        rank: One-based rank by total, descending.
    """

    category: str
    period: date
    total: float
    rank: int


@dataclass(frozen=True)
class YearlyTotal:
    """Total consumption for one category in one calendar year."""

    year: int
    category: str
    total: float


@dataclass(frozen=True)
class GrowthRow:
    """Period-over-period change for one category.

    Attributes:
        category: Product name.
        period: Month start date of the current period.
        total: Current period total.
        previous_total: Total of the preceding observed period.
        growth_percent: Relative change in percent, two decimals.
    """

    category: str
    period: date
    total: float
    previous_total: float
    growth_percent: float


@dataclass(frozen=True)
class ComparisonRow:
    """Side-by-side category totals for one period."""

    period: date
    totals: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class QualityReport:
    """Final data quality counts over a derived dataset."""

    total_rows: int
    missing_products: int
    missing_dates: int
    missing_quantities: int


@dataclass(frozen=True)
class DatasetProfile:
    """Overview of a derived dataset.

    Attributes:
        record_count: Number of records.
        categories: Distinct categories in first-seen order.
        earliest_period: Earliest month, None when empty.
        latest_period: Latest month, None when empty.
        min_quantity: Smallest recorded quantity, None when absent.
        max_quantity: Largest recorded quantity, None when absent.
    """

    record_count: int
    categories: tuple[str, ...]
    earliest_period: date | None
    latest_period: date | None
    min_quantity: float | None
    max_quantity: float | None
