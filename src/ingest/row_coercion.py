"""Row value coercion.

This module converts renamed source rows into typed raw records.
Blank cells become None; values that cannot be parsed fail loudly.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from core.constants import (
    CATEGORY_FIELD,
    MONTH_FIELD,
    QUANTITY_FIELD,
    SOURCE_LABEL_FIELD,
    YEAR_FIELD,
)
from core.errors import MalformedRowError
from core.types import RawDataset, RawRecord
from ingest.header_normalization import build_header_mapping


def normalize_rows(rows: Iterable[Mapping[str, object]], source_uri: str) -> RawDataset:
    """Rename headers and coerce values for every source row.

    Args:
        rows: Raw rows keyed by source header text.
        source_uri: Source path used for error context.

    Returns:
        Raw dataset preserving source row order.

    Raises:
        IngestError: If required columns are missing.
        MalformedRowError: If a value cannot be coerced.
    """
    row_list = list(rows)
    if not row_list:
        return RawDataset(source_uri=source_uri, records=())
    header_names: list[str] = []
    for row in row_list:
        header_names.extend(name for name in row if name not in header_names)
    mapping = build_header_mapping(header_names, source_uri)
    records = tuple(
        coerce_row({mapping[key]: value for key, value in row.items() if key in mapping}, index)
        for index, row in enumerate(row_list, 1)
    )
    return RawDataset(source_uri=source_uri, records=records)


def coerce_row(row: Mapping[str, object], row_number: int) -> RawRecord:
    """Coerce one canonical-keyed row into a raw record.

    Args:
        row: Row keyed by canonical field names.
        row_number: One-based row number.

    Returns:
        Typed raw record.

    Raises:
        MalformedRowError: If year or quantity cannot be parsed.
    """
    return RawRecord(
        row_number=row_number,
        month=_coerce_text(row.get(MONTH_FIELD)),
        year=_coerce_year(row.get(YEAR_FIELD), row_number),
        category=_coerce_text(row.get(CATEGORY_FIELD)),
        quantity=_coerce_quantity(row.get(QUANTITY_FIELD), row_number),
        source_label=_coerce_text(row.get(SOURCE_LABEL_FIELD)),
    )


def _coerce_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def _coerce_year(value: object, row_number: int) -> int | None:
    if isinstance(value, bool):
        raise MalformedRowError(row_number, YEAR_FIELD, value, "expected an integer year")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise MalformedRowError(row_number, YEAR_FIELD, value, "expected an integer year")
    text = _coerce_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError as error:
        raise MalformedRowError(
            row_number, YEAR_FIELD, value, "expected an integer year"
        ) from error


def _coerce_quantity(value: object, row_number: int) -> float | None:
    if isinstance(value, bool):
        raise MalformedRowError(row_number, QUANTITY_FIELD, value, "expected a number")
    if isinstance(value, (int, float)):
        quantity = float(value)
    else:
        text = _coerce_text(value)
        if text is None:
            return None
        try:
            quantity = float(text.replace(",", ""))
        except ValueError as error:
            raise MalformedRowError(
                row_number, QUANTITY_FIELD, value, "expected a number"
            ) from error
    if math.isnan(quantity) or math.isinf(quantity):
        raise MalformedRowError(row_number, QUANTITY_FIELD, value, "expected a finite number")
    if quantity < 0:
        raise MalformedRowError(row_number, QUANTITY_FIELD, value, "expected a non-negative number")
    return quantity
