"""Analyze CLI command wiring.

This module registers the analyze subcommand, which runs one named
analysis through the same step runners as analysis plans.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.analysis_plan import SUPPORTED_PLAN_COMMANDS
from core.payloads import dumps_payload
from core.plan_execution import run_analysis
from sdk.dataset_sdk import PetroflowClient


def add_analyze_command(subparsers: Any) -> None:
    """Register analyze subcommand."""
    parser = subparsers.add_parser("analyze", help="Run one analysis over a source file")
    parser.add_argument("source", help="Source CSV or JSONL file")
    parser.add_argument("analysis", choices=SUPPORTED_PLAN_COMMANDS, help="Analysis name")
    parser.add_argument("--limit", type=int, help="Top-N limit for totals-by-category")
    parser.add_argument("--k", type=int, help="Periods per category for top-periods")
    parser.add_argument("--category", help="Category for category-trend")
    parser.add_argument(
        "--categories",
        nargs="+",
        help="Categories for compare-categories",
    )
    parser.add_argument(
        "--quantities",
        nargs="+",
        type=float,
        help="Quantities for find-quantities",
    )


def run_analyze_command(client: PetroflowClient, args: argparse.Namespace) -> int:
    """Handle analyze command invocation."""
    handle = client.load(args.source)
    step_args = {
        "limit": args.limit,
        "k": args.k,
        "category": args.category,
        "categories": args.categories,
        "quantities": args.quantities,
    }
    result = run_analysis(handle, args.analysis, step_args)
    print(dumps_payload(result))
    return 0
