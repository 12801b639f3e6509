"""Typed analysis-plan parsing for declarative report runs.

This module loads and validates YAML plan files that list the
analyses to run over one or more consumption sources. CLI and SDK
execution consume the same validated plan object.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, cast

import yaml

from core.errors import PlanError

PlanCommand = Literal[
    "profile",
    "check",
    "quality-report",
    "totals-by-category",
    "totals-by-category-and-period",
    "peak-period-overall",
    "top-periods-per-category",
    "peak-period-per-category",
    "category-trend",
    "yearly-totals",
    "month-over-month-growth",
    "compare-categories",
    "find-quantities",
]
SUPPORTED_PLAN_COMMANDS: tuple[PlanCommand, ...] = (
    "profile",
    "check",
    "quality-report",
    "totals-by-category",
    "totals-by-category-and-period",
    "peak-period-overall",
    "top-periods-per-category",
    "peak-period-per-category",
    "category-trend",
    "yearly-totals",
    "month-over-month-growth",
    "compare-categories",
    "find-quantities",
)


@dataclass(frozen=True)
class PlanDefaults:
    """Default values applied to plan steps."""

    source: str | None = None


@dataclass(frozen=True)
class PlanStep:
    """One analysis step from a plan file."""

    command: PlanCommand
    args: Mapping[str, object]


@dataclass(frozen=True)
class AnalysisPlan:
    """Validated plan root object.

    Attributes:
        version: Plan schema version.
        defaults: Values shared by every step.
        steps: Ordered analysis steps.
        base_dir: Directory relative sources are resolved against.
    """

    version: int
    defaults: PlanDefaults
    steps: tuple[PlanStep, ...]
    base_dir: Path


def load_analysis_plan(plan_path: str) -> AnalysisPlan:
    """Load and validate a YAML analysis plan from disk.

    Args:
        plan_path: File path to the YAML plan.

    Returns:
        Fully validated plan.

    Raises:
        PlanError: If the file is invalid or schema checks fail.
    """
    plan_file = Path(plan_path).expanduser().resolve()
    payload = _load_yaml_payload(plan_file)
    root_mapping = _string_keyed(payload, "plan root")
    _validate_keys(root_mapping, {"version", "defaults", "steps"}, "plan root")
    return AnalysisPlan(
        version=_parse_version(root_mapping),
        defaults=_parse_defaults(root_mapping),
        steps=_parse_steps(root_mapping),
        base_dir=plan_file.parent,
    )


def _load_yaml_payload(plan_file: Path) -> object:
    if not plan_file.exists():
        raise PlanError(
            f"Plan file does not exist at {plan_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(plan_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise PlanError(
            f"Failed to read plan at {plan_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise PlanError(
            f"Failed to parse YAML plan at {plan_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise PlanError(f"Plan at {plan_file} is empty. Define 'version' and 'steps'.")
    return payload


def _string_keyed(value: object, context: str) -> dict[str, object]:
    if not isinstance(value, dict):
        raise PlanError(f"Invalid {context}: expected a mapping, got {type(value).__name__}.")
    bad_keys = [key for key in value if not isinstance(key, str)]
    if bad_keys:
        raise PlanError(f"Invalid {context}: field names must be strings, got {bad_keys[0]!r}.")
    return dict(value)


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if type(raw_version) is not int or raw_version != 1:
        raise PlanError(f"Unsupported plan version {raw_version!r}. Set version: 1.")
    return 1


def _parse_defaults(root_mapping: Mapping[str, object]) -> PlanDefaults:
    raw_defaults = root_mapping.get("defaults")
    if raw_defaults is None:
        return PlanDefaults()
    defaults_mapping = _string_keyed(raw_defaults, "plan defaults")
    _validate_keys(defaults_mapping, {"source"}, "plan defaults")
    raw_source = defaults_mapping.get("source")
    if raw_source is not None and not isinstance(raw_source, str):
        raise PlanError("Plan field 'source' must be a string when provided.")
    return PlanDefaults(source=(raw_source or "").strip() or None)


def _parse_steps(root_mapping: Mapping[str, object]) -> tuple[PlanStep, ...]:
    raw_steps = root_mapping.get("steps")
    if not isinstance(raw_steps, list) or not raw_steps:
        raise PlanError("Plan field 'steps' must be a non-empty list of analysis commands.")
    return tuple(_parse_step(step_value, number) for number, step_value in enumerate(raw_steps, 1))


def _parse_step(step_value: object, step_number: int) -> PlanStep:
    context = f"plan step #{step_number}"
    step_fields = _string_keyed(step_value, context)
    command = step_fields.pop("command", None)
    if command not in SUPPORTED_PLAN_COMMANDS:
        raise PlanError(
            f"Unsupported command {command!r} in {context}. "
            f"Use one of: {', '.join(SUPPORTED_PLAN_COMMANDS)}."
        )
    if "args" in step_fields:
        raise PlanError(f"Invalid {context}: write step fields inline, not under 'args'.")
    return PlanStep(command=cast(PlanCommand, command), args=step_fields)


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise PlanError(f"Invalid {context}: unknown fields {', '.join(unknown_keys)}.")
