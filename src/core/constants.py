"""Core constants used across Petroflow modules.

This module centralizes field names, header aliases and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

MONTH_FIELD = "month"
YEAR_FIELD = "year"
CATEGORY_FIELD = "category"
QUANTITY_FIELD = "quantity"
SOURCE_LABEL_FIELD = "source_label"
REQUIRED_FIELDS = (MONTH_FIELD, YEAR_FIELD, CATEGORY_FIELD, QUANTITY_FIELD, SOURCE_LABEL_FIELD)

HEADER_ALIASES = {
    "month": MONTH_FIELD,
    "months": MONTH_FIELD,
    "year": YEAR_FIELD,
    "years": YEAR_FIELD,
    "product": CATEGORY_FIELD,
    "products": CATEGORY_FIELD,
    "category": CATEGORY_FIELD,
    "quantity": QUANTITY_FIELD,
    "qty": QUANTITY_FIELD,
    "updated_date": SOURCE_LABEL_FIELD,
    "updated": SOURCE_LABEL_FIELD,
    "source_label": SOURCE_LABEL_FIELD,
}
BYTE_ORDER_MARKS = ("\ufeff", "\u00ef\u00bb\u00bf")

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

SUPPORTED_SOURCE_EXTENSIONS = (".csv", ".jsonl")
DEFAULT_CSV_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"
DEFAULT_TOP_N = 5
DEFAULT_TOP_K = 5
DEFAULT_COMPARE_CATEGORIES = ("HSD", "MS", "SKO")
GROWTH_DECIMALS = 2
