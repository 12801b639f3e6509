"""Advisory clean stage.

This module runs duplicate and missing-value checks over a raw dataset.
Findings are returned and logged, never raised.
"""

from __future__ import annotations

from core.logging_config import get_logger
from core.types import CleaningReport, RawDataset
from transforms.duplicate_detection import detect_duplicates
from transforms.missing_values import detect_missing_values

_LOGGER = get_logger(__name__)


def build_cleaning_report(raw_dataset: RawDataset) -> CleaningReport:
    """Run both advisory checks over a raw dataset.

    Args:
        raw_dataset: Normalized source rows.

    Returns:
        Duplicate groups and incomplete records for caller review.
    """
    report = CleaningReport(
        duplicate_groups=tuple(detect_duplicates(raw_dataset.records)),
        incomplete_records=tuple(detect_missing_values(raw_dataset.records)),
    )
    if report.duplicate_groups:
        _LOGGER.warning(
            "duplicates_detected",
            source_uri=raw_dataset.source_uri,
            group_count=len(report.duplicate_groups),
            extra_row_numbers=[
                extra.row_number for group in report.duplicate_groups for extra in group.extras
            ],
        )
    if report.incomplete_records:
        _LOGGER.warning(
            "missing_values_detected",
            source_uri=raw_dataset.source_uri,
            row_numbers=[record.row_number for record in report.incomplete_records],
        )
    return report
