"""Source file readers for ingestion.

This module loads raw rows from local CSV or JSONL files. Rows keep
their source header text; renaming happens in header normalization.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from core.config import PetroflowConfig
from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import IngestError, MalformedRowError

_EXTRA_CELLS_KEY = "__extra_cells__"


def read_source_rows(source_uri: str, config: PetroflowConfig) -> list[dict[str, object]]:
    """Load raw rows from a local CSV or JSONL file.

    Args:
        source_uri: Local file path.
        config: Runtime configuration for delimiter and encoding.

    Returns:
        Ordered list of raw rows keyed by source header text.

    Raises:
        IngestError: If the source cannot be read.
    """
    source_path = Path(source_uri).expanduser()
    if not source_path.is_file():
        raise IngestError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing CSV or JSONL file."
        )
    suffix = source_path.suffix.lower()
    if suffix not in SUPPORTED_SOURCE_EXTENSIONS:
        raise IngestError(
            f"Unsupported source extension '{suffix}' for {source_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    try:
        if suffix == ".jsonl":
            return _read_jsonl_rows(source_path, config.encoding)
        return _read_csv_rows(source_path, config)
    except (OSError, UnicodeDecodeError, csv.Error) as error:
        raise IngestError(
            f"Failed to read source at {source_path}: {error}. "
            "Check file permissions, encoding and delimiter."
        ) from error


def _read_csv_rows(source_path: Path, config: PetroflowConfig) -> list[dict[str, object]]:
    """Read delimited rows with a header line.

    Args:
        source_path: Path to the CSV file.
        config: Runtime configuration.

    Returns:
        Rows keyed by header text.

    Raises:
        MalformedRowError: If a row has more cells than the header.
    """
    with source_path.open(encoding=config.encoding, newline="") as handle:
        reader = csv.DictReader(
            handle,
            delimiter=config.csv_delimiter,
            restkey=_EXTRA_CELLS_KEY,
        )
        rows: list[dict[str, object]] = []
        for row_number, row in enumerate(reader, 1):
            extra_cells = row.pop(_EXTRA_CELLS_KEY, None)
            if extra_cells:
                raise MalformedRowError(
                    row_number, "extra_cells", extra_cells, "row has more cells than the header"
                )
            rows.append(dict(row))
    return rows


def _read_jsonl_rows(source_path: Path, encoding: str) -> list[dict[str, object]]:
    """Read one JSON object per non-blank line.

    Args:
        source_path: Path to the JSONL file.
        encoding: Text encoding.

    Returns:
        Parsed row objects.

    Raises:
        IngestError: If a line is not a JSON object.
    """
    rows: list[dict[str, object]] = []
    for line_number, line in enumerate(source_path.read_text(encoding=encoding).splitlines(), 1):
        if not line.strip():
            continue
        rows.append(_parse_jsonl_line(source_path, line, line_number))
    return rows


def _parse_jsonl_line(source_path: Path, line: str, line_number: int) -> dict[str, object]:
    """Parse and validate a JSONL row.

    Raises:
        IngestError: If the line is invalid.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise IngestError(
            f"Failed to parse JSONL row at {source_path}:{line_number}: "
            f"{error.msg}. Fix the JSON syntax and reload."
        ) from error
    if not isinstance(payload, dict):
        raise IngestError(
            f"Invalid JSONL row at {source_path}:{line_number}: expected a JSON object."
        )
    return payload
