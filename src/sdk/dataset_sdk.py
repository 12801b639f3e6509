"""Python SDK for consumption dataset analysis.

This module exposes high-level APIs for loading a source through the
pipeline and running aggregations over the derived dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from analysis.category_totals import totals_by_category, totals_by_category_and_period
from analysis.comparison import compare_categories
from analysis.grouping import limit
from analysis.growth import month_over_month_growth
from analysis.period_rankings import (
    category_trend,
    peak_period_overall,
    peak_period_per_category,
    top_periods_per_category,
)
from analysis.quality import find_quantity_matches, profile_dataset, quality_report
from analysis.yearly_totals import yearly_totals
from core.config import PetroflowConfig
from core.plan_execution import execute_plan_file
from core.types import (
    CategoryPeriodTotal,
    CategoryTotal,
    CleaningReport,
    ComparisonRow,
    Dataset,
    DatasetProfile,
    GrowthRow,
    PeriodTotal,
    QualityReport,
    RankedPeriod,
    RawDataset,
    Record,
    YearlyTotal,
)
from ingest.pipeline import PipelineResult, check_source, run_pipeline, run_pipeline_on_rows


@dataclass(frozen=True)
class ConsumptionReport:
    """Standard analysis bundle for a reporting layer.

    Attributes:
        profile: Dataset overview.
        quality: Final quality counts.
        top_categories: Top-N categories by total usage.
        peak_period: Highest-usage month across categories.
        top_periods: Top-k months per category.
        category_peaks: Peak month per category.
        yearly: Yearly totals per category.
        growth: Month-over-month growth per category.
        comparison: Side-by-side totals for the configured categories.
    """

    profile: DatasetProfile
    quality: QualityReport
    top_categories: tuple[CategoryTotal, ...]
    peak_period: PeriodTotal | None
    top_periods: tuple[RankedPeriod, ...]
    category_peaks: tuple[RankedPeriod, ...]
    yearly: tuple[YearlyTotal, ...]
    growth: tuple[GrowthRow, ...]
    comparison: tuple[ComparisonRow, ...]


class PetroflowClient:
    """Primary SDK entry point."""

    def __init__(self, config: PetroflowConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or PetroflowConfig.from_env()

    @property
    def config(self) -> PetroflowConfig:
        """Return the runtime configuration."""
        return self._config

    def load(self, source_uri: str) -> "ConsumptionDataset":
        """Run the pipeline over a CSV or JSONL file.

        Args:
            source_uri: Local source path.

        Returns:
            Dataset handle.

        Raises:
            IngestError: If the source cannot be read or normalized.
            DateDerivationError: If a period cannot be derived.
        """
        return ConsumptionDataset(run_pipeline(source_uri, self._config), self._config)

    def load_rows(
        self,
        rows: Iterable[Mapping[str, object]],
        source_uri: str = "<memory>",
    ) -> "ConsumptionDataset":
        """Run the pipeline over in-memory rows keyed by header text."""
        return ConsumptionDataset(run_pipeline_on_rows(rows, source_uri), self._config)

    def check(self, source_uri: str) -> CleaningReport:
        """Report duplicate and incomplete rows without deriving periods.

        Args:
            source_uri: Local source path.

        Returns:
            Advisory cleaning report.
        """
        return check_source(source_uri, self._config)

    def run_plan(self, plan_file: str) -> tuple[str, ...]:
        """Execute a YAML analysis plan through the shared execution engine.

        Args:
            plan_file: Path to YAML plan file.

        Returns:
            Ordered JSON output lines, one per step.
        """
        return execute_plan_file(self, plan_file)


class ConsumptionDataset:
    """Handle over one pipeline run's outputs."""

    def __init__(self, result: PipelineResult, config: PetroflowConfig) -> None:
        self._result = result
        self._config = config

    @property
    def raw_dataset(self) -> RawDataset:
        """Normalized rows that still carry month and year."""
        return self._result.raw_dataset

    @property
    def dataset(self) -> Dataset:
        """Derived dataset used by every aggregation."""
        return self._result.dataset

    @property
    def cleaning_report(self) -> CleaningReport:
        """Advisory duplicate and missing-value findings."""
        return self._result.cleaning_report

    def profile(self) -> DatasetProfile:
        return profile_dataset(self.dataset)

    def quality_report(self) -> QualityReport:
        return quality_report(self.dataset)

    def totals_by_category(self, top_n: int | None = None) -> list[CategoryTotal]:
        """Return category totals, optionally limited to the top ``top_n``."""
        rows = totals_by_category(self.dataset)
        return rows if top_n is None else limit(rows, top_n)

    def totals_by_category_and_period(self) -> list[CategoryPeriodTotal]:
        return totals_by_category_and_period(self.dataset)

    def peak_period_overall(self) -> PeriodTotal | None:
        return peak_period_overall(self.dataset)

    def top_periods_per_category(self, k: int | None = None) -> list[RankedPeriod]:
        top_k = self._config.top_k if k is None else k
        return top_periods_per_category(self.dataset, top_k)

    def peak_period_per_category(self) -> list[RankedPeriod]:
        return peak_period_per_category(self.dataset)

    def category_trend(self, category: str) -> list[PeriodTotal]:
        return category_trend(self.dataset, category)

    def yearly_totals(self) -> list[YearlyTotal]:
        return yearly_totals(self.dataset)

    def month_over_month_growth(self) -> list[GrowthRow]:
        return month_over_month_growth(self.dataset)

    def compare_categories(self, categories: Sequence[str] | None = None) -> list[ComparisonRow]:
        names = self._config.compare_categories if categories is None else categories
        return compare_categories(self.dataset, names)

    def find_quantities(self, quantities: Iterable[float]) -> list[Record]:
        return find_quantity_matches(self.dataset, quantities)

    def build_report(self) -> ConsumptionReport:
        """Run the standard analyses with configured defaults.

        Raises:
            UndefinedGrowthError: If growth hits a zero baseline.
        """
        return ConsumptionReport(
            profile=self.profile(),
            quality=self.quality_report(),
            top_categories=tuple(self.totals_by_category(self._config.top_n)),
            peak_period=self.peak_period_overall(),
            top_periods=tuple(self.top_periods_per_category()),
            category_peaks=tuple(self.peak_period_per_category()),
            yearly=tuple(self.yearly_totals()),
            growth=tuple(self.month_over_month_growth()),
            comparison=tuple(self.compare_categories()),
        )
