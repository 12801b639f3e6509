"""Run-plan CLI command wiring.

This module registers the run-plan subcommand and delegates execution
to the shared plan engine used by CLI and SDK entry points.
"""

from __future__ import annotations

import argparse
from typing import Any

from sdk.dataset_sdk import PetroflowClient


def add_run_plan_command(subparsers: Any) -> None:
    """Register run-plan subcommand."""
    parser = subparsers.add_parser(
        "run-plan",
        help="Run a declarative YAML analysis plan",
    )
    parser.add_argument("plan_file", help="Path to YAML analysis plan")


def run_run_plan_command(client: PetroflowClient, args: argparse.Namespace) -> int:
    """Handle run-plan command invocation."""
    for line in client.run_plan(args.plan_file):
        print(line)
    return 0
