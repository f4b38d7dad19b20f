"""Normalize and parse method ingredient mentions into structured records."""

from preplist.normalize.mentions import (
    MENTION_PATTERNS,
    normalize_mention,
    parse_mention,
)
from preplist.normalize.units import (
    FALLBACK_RECORD,
    IngredientRecord,
    Unit,
    format_quantity,
    parse_quantity,
)

__all__ = [
    "FALLBACK_RECORD",
    "IngredientRecord",
    "MENTION_PATTERNS",
    "Unit",
    "format_quantity",
    "normalize_mention",
    "parse_mention",
    "parse_quantity",
]
