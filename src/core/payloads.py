"""JSON-safe payloads for analysis rows.

This module converts records, aggregate rows and reports into plain
dictionaries so reporting layers never handle dataclasses or dates.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any, Iterable, Mapping


def to_payload(value: Any) -> Any:
    """Convert a row, report or collection into JSON-safe values.

    Args:
        value: Dataclass instance, mapping, sequence or scalar.

    Returns:
        Nested dicts, lists and scalars with ISO-formatted dates.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {key: to_payload(item) for key, item in asdict(value).items()}
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


def rows_to_payloads(rows: Iterable[Any]) -> list[dict[str, Any]]:
    """Convert a row collection into a list of dictionaries."""
    return [to_payload(row) for row in rows]


def dumps_payload(value: Any) -> str:
    """Render any analysis output as one compact JSON line."""
    return json.dumps(to_payload(value), sort_keys=True)
