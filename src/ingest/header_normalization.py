"""Column header normalization.

This module maps raw header text onto canonical field names. Raw
exports carry byte-order marks, quoting and unit descriptions such as
``Quantity (000 Metric Tonnes)`` in their headers.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.constants import BYTE_ORDER_MARKS, HEADER_ALIASES, REQUIRED_FIELDS
from core.errors import IngestError

_UNIT_SUFFIX = re.compile(r"\s*\([^)]*\)\s*$")
_SEPARATORS = re.compile(r"[\s\-]+")


def normalize_header(raw_name: str) -> str | None:
    """Map one raw header onto its canonical field name.

    Args:
        raw_name: Header text as read from the source.

    Returns:
        Canonical field name, or None for unrecognized columns.
    """
    return HEADER_ALIASES.get(_clean_header_text(raw_name))


def build_header_mapping(raw_names: Iterable[str], source_uri: str) -> dict[str, str]:
    """Build a raw-to-canonical header mapping for a source.

    Args:
        raw_names: Header names in source order.
        source_uri: Source path for error context.

    Returns:
        Mapping from raw header to canonical field name.

    Raises:
        IngestError: If a field is missing or mapped twice.
    """
    mapping: dict[str, str] = {}
    for raw_name in raw_names:
        canonical_name = normalize_header(raw_name)
        if canonical_name is None:
            continue
        if canonical_name in mapping.values():
            raise IngestError(
                f"Ambiguous headers in {source_uri}: more than one column maps to "
                f"'{canonical_name}' (last seen {raw_name!r}). Remove the duplicate column."
            )
        mapping[raw_name] = canonical_name
    missing_fields = [name for name in REQUIRED_FIELDS if name not in mapping.values()]
    if missing_fields:
        raise IngestError(
            f"Source {source_uri} is missing required columns: {', '.join(missing_fields)}. "
            "Expected month, year, product, quantity and updated-date columns."
        )
    return mapping


def _clean_header_text(raw_name: str) -> str:
    """Strip encoding artifacts, quoting and units from header text."""
    text = raw_name
    for marker in BYTE_ORDER_MARKS:
        text = text.replace(marker, "")
    text = text.strip().strip("\"'`").strip()
    text = _UNIT_SUFFIX.sub("", text)
    return _SEPARATORS.sub("_", text.lower()).strip("_")
