"""Shared analysis-plan execution engine for CLI and SDK workflows.

This module maps validated plan steps to dataset handle operations so
every entry point runs one declarative path without drift.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

from core.analysis_plan import AnalysisPlan, PlanStep, load_analysis_plan
from core.errors import PlanError
from core.payloads import to_payload
from core.plan_fields import (
    optional_int,
    optional_string,
    optional_string_list,
    required_number_list,
    required_string,
)


class PlanClient(Protocol):
    """Client API contract required by plan execution."""

    def load(self, source_uri: str) -> Any: ...


@dataclass
class PlanExecutionContext:
    """In-memory context used to execute plan steps."""

    client: PlanClient
    plan: AnalysisPlan
    loaded_sources: dict[str, Any] = field(default_factory=dict)


_StepRunner = Callable[[Any, Mapping[str, object]], object]

_STEP_RUNNERS: dict[str, _StepRunner] = {
    "profile": lambda handle, args: handle.profile(),
    "check": lambda handle, args: handle.cleaning_report,
    "quality-report": lambda handle, args: handle.quality_report(),
    "totals-by-category": lambda handle, args: handle.totals_by_category(
        optional_int(args, "limit")
    ),
    "totals-by-category-and-period": lambda handle, args: handle.totals_by_category_and_period(),
    "peak-period-overall": lambda handle, args: handle.peak_period_overall(),
    "top-periods-per-category": lambda handle, args: handle.top_periods_per_category(
        optional_int(args, "k")
    ),
    "peak-period-per-category": lambda handle, args: handle.peak_period_per_category(),
    "category-trend": lambda handle, args: handle.category_trend(
        required_string(args, "category")
    ),
    "yearly-totals": lambda handle, args: handle.yearly_totals(),
    "month-over-month-growth": lambda handle, args: handle.month_over_month_growth(),
    "compare-categories": lambda handle, args: handle.compare_categories(
        optional_string_list(args, "categories")
    ),
    "find-quantities": lambda handle, args: handle.find_quantities(
        required_number_list(args, "quantities")
    ),
}

_STEP_FIELDS: dict[str, frozenset[str]] = {
    "totals-by-category": frozenset({"limit"}),
    "top-periods-per-category": frozenset({"k"}),
    "category-trend": frozenset({"category"}),
    "compare-categories": frozenset({"categories"}),
    "find-quantities": frozenset({"quantities"}),
}


def execute_plan_file(client: PlanClient, plan_file: str) -> tuple[str, ...]:
    """Load and execute a plan file, returning printable JSON lines."""
    return execute_plan(client, load_analysis_plan(plan_file))


def execute_plan(client: PlanClient, plan: AnalysisPlan) -> tuple[str, ...]:
    """Execute a parsed plan and return one JSON line per step.

    Args:
        client: SDK client used to load sources.
        plan: Validated analysis plan.

    Returns:
        Output lines in step order.

    Raises:
        PlanError: If a step is missing a source or has invalid fields.
        PetroflowError: If loading or aggregation fails.
    """
    context = PlanExecutionContext(client=client, plan=plan)
    output_lines: list[str] = []
    for step in plan.steps:
        source_uri, result = _execute_step(context, step)
        line = {"command": step.command, "source": source_uri, "result": to_payload(result)}
        output_lines.append(json.dumps(line, sort_keys=True))
    return tuple(output_lines)


def run_analysis(handle: Any, command: str, args: Mapping[str, object]) -> object:
    """Run one named analysis against a loaded dataset handle.

    Args:
        handle: Dataset handle returned by the client.
        command: Supported plan command name.
        args: Step fields for the command.

    Returns:
        Analysis result rows or report.

    Raises:
        PlanError: If the command is unknown or a field is invalid.
    """
    runner = _STEP_RUNNERS.get(command)
    if runner is None:
        raise PlanError(f"Unsupported analysis '{command}'.")
    return runner(handle, args)


def _execute_step(context: PlanExecutionContext, step: PlanStep) -> tuple[str, object]:
    _validate_step_fields(step)
    source_uri = _resolve_source(context, step)
    handle = context.loaded_sources.get(source_uri)
    if handle is None:
        handle = context.client.load(source_uri)
        context.loaded_sources[source_uri] = handle
    return source_uri, run_analysis(handle, step.command, step.args)


def _resolve_source(context: PlanExecutionContext, step: PlanStep) -> str:
    source = optional_string(step.args, "source") or context.plan.defaults.source
    if source is None:
        raise PlanError(
            f"Plan step '{step.command}' has no source. "
            "Set defaults.source or add 'source' to the step."
        )
    source_path = Path(source).expanduser()
    if not source_path.is_absolute():
        source_path = context.plan.base_dir / source_path
    return str(source_path)


def _validate_step_fields(step: PlanStep) -> None:
    allowed_fields = _STEP_FIELDS.get(step.command, frozenset()) | {"source"}
    unknown_fields = sorted(set(step.args) - allowed_fields)
    if unknown_fields:
        raise PlanError(
            f"Plan step '{step.command}' has unknown fields: {', '.join(unknown_fields)}."
        )
