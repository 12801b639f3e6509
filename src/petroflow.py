"""Public SDK surface for Petroflow.

This module provides a stable import path for library users.
It re-exports the client, typed models and errors.
"""

from __future__ import annotations

from core.config import PetroflowConfig
from core.errors import (
    DateDerivationError,
    IngestError,
    MalformedRowError,
    PetroflowError,
    UndefinedGrowthError,
)
from core.payloads import dumps_payload, rows_to_payloads, to_payload
from core.types import (
    CategoryPeriodTotal,
    CategoryTotal,
    CleaningReport,
    ComparisonRow,
    Dataset,
    DatasetProfile,
    DuplicateGroup,
    GrowthRow,
    PeriodTotal,
    QualityReport,
    RankedPeriod,
    RawDataset,
    RawRecord,
    Record,
    YearlyTotal,
)
from sdk.dataset_sdk import ConsumptionDataset, ConsumptionReport, PetroflowClient

__all__ = [
    "CategoryPeriodTotal",
    "CategoryTotal",
    "CleaningReport",
    "ComparisonRow",
    "ConsumptionDataset",
    "ConsumptionReport",
    "Dataset",
    "DatasetProfile",
    "DateDerivationError",
    "DuplicateGroup",
    "GrowthRow",
    "IngestError",
    "MalformedRowError",
    "PeriodTotal",
    "PetroflowClient",
    "PetroflowConfig",
    "PetroflowError",
    "QualityReport",
    "RankedPeriod",
    "RawDataset",
    "RawRecord",
    "Record",
    "UndefinedGrowthError",
    "YearlyTotal",
    "dumps_payload",
    "rows_to_payloads",
    "to_payload",
]
