"""Petroflow CLI entry points.

This module exposes commands for checking, profiling and analyzing
consumption sources. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Sequence

from cli.analyze_command import add_analyze_command, run_analyze_command
from cli.run_plan_command import add_run_plan_command, run_run_plan_command
from core.config import PetroflowConfig
from core.errors import ConfigError, PetroflowError
from core.payloads import dumps_payload
from sdk.dataset_sdk import PetroflowClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="petroflow",
        description="Petroleum consumption cleaning and trend analysis",
    )
    parser.add_argument("--delimiter", help="Override PETROFLOW_CSV_DELIMITER")
    parser.add_argument("--encoding", help="Override PETROFLOW_ENCODING")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_check_command(subparsers)
    _add_profile_command(subparsers)
    _add_report_command(subparsers)
    add_analyze_command(subparsers)
    add_run_plan_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Petroflow CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.delimiter, args.encoding)
        return _dispatch(parser, client, args)
    except PetroflowError as error:
        print(f"error={error}")
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: PetroflowClient,
    args: argparse.Namespace,
) -> int:
    if args.command == "check":
        return _run_check_command(client, args)
    if args.command == "profile":
        return _run_profile_command(client, args)
    if args.command == "report":
        return _run_report_command(client, args)
    if args.command == "analyze":
        return run_analyze_command(client, args)
    if args.command == "run-plan":
        return run_run_plan_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(delimiter: str | None, encoding: str | None) -> PetroflowClient:
    """Build SDK client with optional reader overrides.

    Args:
        delimiter: Optional CSV delimiter override.
        encoding: Optional source encoding override.

    Returns:
        Configured SDK client.
    """
    config = PetroflowConfig.from_env()
    if delimiter:
        if len(delimiter) != 1:
            raise ConfigError(f"Invalid --delimiter value '{delimiter}': expected one character.")
        config = replace(config, csv_delimiter=delimiter)
    if encoding:
        config = replace(config, encoding=encoding)
    return PetroflowClient(config)


def _run_check_command(client: PetroflowClient, args: argparse.Namespace) -> int:
    """Print advisory duplicate and missing-value findings.

    Findings never change the exit code.
    """
    report = client.check(args.source)
    print(f"duplicate_rows={report.duplicate_count}")
    print(f"incomplete_rows={len(report.incomplete_records)}")
    print(dumps_payload(report))
    return 0


def _run_profile_command(client: PetroflowClient, args: argparse.Namespace) -> int:
    """Print dataset profile and quality counts."""
    dataset = client.load(args.source)
    print(dumps_payload(dataset.profile()))
    print(dumps_payload(dataset.quality_report()))
    return 0


def _run_report_command(client: PetroflowClient, args: argparse.Namespace) -> int:
    """Print the standard analysis bundle as one JSON line."""
    dataset = client.load(args.source)
    print(dumps_payload(dataset.build_report()))
    return 0


def _add_check_command(subparsers: Any) -> None:
    """Register check subcommand."""
    parser = subparsers.add_parser("check", help="Report duplicate and incomplete rows")
    parser.add_argument("source", help="Source CSV or JSONL file")


def _add_profile_command(subparsers: Any) -> None:
    """Register profile subcommand."""
    parser = subparsers.add_parser("profile", help="Show dataset profile and quality counts")
    parser.add_argument("source", help="Source CSV or JSONL file")


def _add_report_command(subparsers: Any) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser("report", help="Run the standard analysis bundle")
    parser.add_argument("source", help="Source CSV or JSONL file")
