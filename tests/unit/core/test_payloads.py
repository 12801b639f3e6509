"""Unit tests for JSON payload conversion."""

from __future__ import annotations

import json
from datetime import date

from core.payloads import dumps_payload, rows_to_payloads, to_payload
from core.types import ComparisonRow, PeriodTotal, RankedPeriod


def test_to_payload_formats_dates_as_iso_strings() -> None:
    """Dates inside rows should be rendered in ISO format."""
    payload = to_payload(PeriodTotal(period=date(2022, 1, 1), total=150.0))

    assert payload == {"period": "2022-01-01", "total": 150.0}


def test_rows_to_payloads_keeps_row_order() -> None:
    """Row collections should convert element-wise in order."""
    rows = [
        RankedPeriod(category="HSD", period=date(2022, 2, 1), total=150.0, rank=1),
        RankedPeriod(category="HSD", period=date(2022, 1, 1), total=100.0, rank=2),
    ]

    payloads = rows_to_payloads(rows)

    assert [payload["rank"] for payload in payloads] == [1, 2]


def test_dumps_payload_renders_nested_mappings() -> None:
    """Mapping fields should survive JSON rendering."""
    row = ComparisonRow(period=date(2022, 3, 1), totals={"HSD": 75.0, "MS": 0.0})

    assert json.loads(dumps_payload(row)) == {
        "period": "2022-03-01",
        "totals": {"HSD": 75.0, "MS": 0.0},
    }
