"""Petroflow exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class PetroflowError(Exception):
    """Base exception for all Petroflow failures."""


class ConfigError(PetroflowError):
    """Raised for invalid runtime configuration."""


class IngestError(PetroflowError):
    """Raised for source reading and header normalization failures."""


class MalformedRowError(IngestError):
    """Raised when a source row value cannot be coerced to its field type."""

    def __init__(self, row_number: int, field_name: str, raw_value: object, reason: str) -> None:
        self.row_number = row_number
        self.field_name = field_name
        self.raw_value = raw_value
        super().__init__(
            f"Malformed row {row_number}: field '{field_name}' has value {raw_value!r} "
            f"({reason}). Fix the source row and reload."
        )


class TransformError(PetroflowError):
    """Raised for clean and derive stage failures."""


class DateDerivationError(TransformError):
    """Raised when month and year cannot be combined into a calendar date."""

    def __init__(self, row_number: int, month: object, year: object) -> None:
        self.row_number = row_number
        self.month = month
        self.year = year
        super().__init__(
            f"Cannot derive period for row {row_number}: month={month!r}, year={year!r}. "
            "Month must be a full month name and year a valid integer."
        )


class AggregateError(PetroflowError):
    """Raised for invalid aggregation requests."""


class UndefinedGrowthError(AggregateError):
    """Raised when growth is computed against a zero baseline."""

    def __init__(self, category: str, period: object) -> None:
        self.category = category
        self.period = period
        super().__init__(
            f"Growth for category '{category}' at {period} is undefined: "
            "previous period total is zero."
        )


class PlanError(PetroflowError):
    """Raised for invalid or unsupported analysis plan files."""
