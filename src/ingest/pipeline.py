"""Pipeline orchestration for consumption datasets.

This module runs ingest, clean and derive in order and hands the
derived dataset to the analysis layer. Any stage error aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from core.config import PetroflowConfig
from core.logging_config import get_logger
from core.types import CleaningReport, Dataset, RawDataset
from ingest.input_reader import read_source_rows
from ingest.row_coercion import normalize_rows
from transforms.cleaning_report import build_cleaning_report
from transforms.date_derivation import derive_dataset

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outputs of one pipeline run.

    Attributes:
        raw_dataset: Normalized rows, still carrying month and year.
        cleaning_report: Advisory duplicate and missing-value findings.
        dataset: Derived dataset for aggregation.
    """

    raw_dataset: RawDataset
    cleaning_report: CleaningReport
    dataset: Dataset


def run_pipeline(source_uri: str, config: PetroflowConfig) -> PipelineResult:
    """Read a source file and run every stage over its rows.

    Args:
        source_uri: Local CSV or JSONL path.
        config: Runtime configuration.

    Returns:
        Pipeline outputs.

    Raises:
        IngestError: If the source cannot be read or normalized.
        MalformedRowError: If a row value cannot be coerced.
        DateDerivationError: If a period cannot be derived.
    """
    rows = read_source_rows(source_uri, config)
    return run_pipeline_on_rows(rows, source_uri)


def check_source(source_uri: str, config: PetroflowConfig) -> CleaningReport:
    """Run only ingest and the advisory checks over a source file.

    Rows that would fail date derivation still show up as incomplete
    records here.

    Raises:
        IngestError: If the source cannot be read or normalized.
    """
    raw_dataset = normalize_rows(read_source_rows(source_uri, config), source_uri)
    return build_cleaning_report(raw_dataset)


def run_pipeline_on_rows(
    rows: Iterable[Mapping[str, object]],
    source_uri: str = "<memory>",
) -> PipelineResult:
    """Run normalize, clean and derive over in-memory rows.

    Args:
        rows: Raw rows keyed by source header text.
        source_uri: Label used in errors and logs.

    Returns:
        Pipeline outputs.
    """
    raw_dataset = normalize_rows(rows, source_uri)
    cleaning_report = build_cleaning_report(raw_dataset)
    dataset = derive_dataset(raw_dataset)
    _log_pipeline_completion(raw_dataset, cleaning_report, dataset)
    return PipelineResult(
        raw_dataset=raw_dataset,
        cleaning_report=cleaning_report,
        dataset=dataset,
    )


def _log_pipeline_completion(
    raw_dataset: RawDataset,
    cleaning_report: CleaningReport,
    dataset: Dataset,
) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "pipeline_completed",
        source_uri=raw_dataset.source_uri,
        input_count=len(raw_dataset.records),
        output_count=len(dataset.records),
        duplicate_count=cleaning_report.duplicate_count,
        incomplete_count=len(cleaning_report.incomplete_records),
    )
