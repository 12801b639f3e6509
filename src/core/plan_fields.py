"""Type-safe field parsing helpers for plan execution.

This module centralizes primitive parsing so plan executors stay
concise and produce consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import PlanError


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a plan step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise PlanError(f"Plan field '{field_name}' must be a string when provided.")


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a plan step."""
    value = optional_string(args, field_name)
    if value is None:
        raise PlanError(f"Plan step is missing required field '{field_name}'.")
    return value


def optional_int(args: Mapping[str, object], field_name: str) -> int | None:
    """Read an optional integer field from a plan step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise PlanError(f"Plan field '{field_name}' must be an integer.")


def optional_string_list(args: Mapping[str, object], field_name: str) -> tuple[str, ...] | None:
    """Read an optional list of non-empty strings."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, list) and value and all(
        isinstance(item, str) and item.strip() for item in value
    ):
        return tuple(item.strip() for item in value)
    raise PlanError(f"Plan field '{field_name}' must be a non-empty list of strings.")


def required_number_list(args: Mapping[str, object], field_name: str) -> tuple[float, ...]:
    """Read a required non-empty list of numbers."""
    value = args.get(field_name)
    if isinstance(value, list) and value and all(
        isinstance(item, (int, float)) and not isinstance(item, bool) for item in value
    ):
        return tuple(float(item) for item in value)
    raise PlanError(f"Plan field '{field_name}' must be a non-empty list of numbers.")
