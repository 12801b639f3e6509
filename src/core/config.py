"""Runtime configuration model for Petroflow.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_COMPARE_CATEGORIES,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_TOP_K,
    DEFAULT_TOP_N,
)
from core.errors import ConfigError


@dataclass(frozen=True)
class PetroflowConfig:
    """Validated runtime configuration.

    Attributes:
        csv_delimiter: Single-character delimiter for CSV sources.
        encoding: Text encoding used to read source files.
        top_n: Default category count for top-N totals.
        top_k: Default period count per category for rankings.
        compare_categories: Default categories for comparison pivots.
    """

    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    encoding: str = DEFAULT_ENCODING
    top_n: int = DEFAULT_TOP_N
    top_k: int = DEFAULT_TOP_K
    compare_categories: tuple[str, ...] = DEFAULT_COMPARE_CATEGORIES

    @classmethod
    def from_env(cls) -> "PetroflowConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        delimiter = os.getenv("PETROFLOW_CSV_DELIMITER", DEFAULT_CSV_DELIMITER)
        if len(delimiter) != 1:
            raise ConfigError(
                "Invalid PETROFLOW_CSV_DELIMITER value: "
                f"expected a single character, got '{delimiter}'."
            )
        return cls(
            csv_delimiter=delimiter,
            encoding=os.getenv("PETROFLOW_ENCODING", DEFAULT_ENCODING),
            top_n=_parse_positive_int("PETROFLOW_TOP_N", DEFAULT_TOP_N),
            top_k=_parse_positive_int("PETROFLOW_TOP_K", DEFAULT_TOP_K),
            compare_categories=_parse_categories(os.getenv("PETROFLOW_COMPARE_CATEGORIES")),
        )


def _parse_positive_int(env_name: str, default_value: int) -> int:
    """Parse a positive integer environment value.

    Args:
        env_name: Environment variable name.
        default_value: Value used when the variable is unset.

    Returns:
        Parsed integer.

    Raises:
        ConfigError: If value is not a positive integer.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default_value
    try:
        parsed_value = int(raw_value)
    except ValueError as error:
        raise ConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a positive number."
        ) from error
    if parsed_value < 1:
        raise ConfigError(f"Invalid {env_name} value: expected >= 1, got {parsed_value}.")
    return parsed_value


def _parse_categories(raw_value: str | None) -> tuple[str, ...]:
    """Parse a comma-separated category list."""
    if raw_value is None:
        return DEFAULT_COMPARE_CATEGORIES
    categories = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    if not categories:
        raise ConfigError(
            "Invalid PETROFLOW_COMPARE_CATEGORIES value: expected at least one category."
        )
    return categories
