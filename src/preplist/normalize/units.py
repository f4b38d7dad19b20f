"""Units, ingredient records and quantity helpers."""

import math
import re
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from preplist.logging_config import get_logger

logger = get_logger(__name__)


class Unit(str, Enum):
    """Closed set of units a method ingredient can be measured in."""

    ITEM = "ITEM"
    GRAMS = "GRAMS"
    LITRES = "LITRES"
    TABLESPOON = "TABLESPOON"
    TEASPOON = "TEASPOON"
    PINCH = "PINCH"


# =============================================================================
# Unit Tables
# =============================================================================

# Suffix written straight after the quantity. Spoons get a leading space.
UNIT_LABELS: dict[Unit, str] = {
    Unit.ITEM: "x",
    Unit.GRAMS: "g",
    Unit.LITRES: "l",
    Unit.TABLESPOON: " tbsp",
    Unit.TEASPOON: " tsp",
}

# Approximate bulk, biggest first. Pinch is deliberately unranked.
UNIT_BULK_ORDER: tuple[Unit, ...] = (
    Unit.ITEM,
    Unit.GRAMS,
    Unit.LITRES,
    Unit.TABLESPOON,
    Unit.TEASPOON,
)

# Units rendered without a leading numeral by default.
SPOON_UNITS: frozenset[Unit] = frozenset({Unit.TABLESPOON, Unit.TEASPOON, Unit.PINCH})

_unlabelled = set(Unit) - set(UNIT_LABELS) - {Unit.PINCH}
if _unlabelled:
    raise RuntimeError(f"Units without a display label: {sorted(u.value for u in _unlabelled)}")
_unranked = set(Unit) - set(UNIT_BULK_ORDER) - {Unit.PINCH}
if _unranked:
    raise RuntimeError(f"Units without a bulk rank: {sorted(u.value for u in _unranked)}")


# =============================================================================
# Ingredient Records
# =============================================================================


@dataclass(frozen=True)
class IngredientRecord:
    """A single parsed method ingredient."""

    name: str
    quantity: float
    unit: Unit

    def is_mergeable(self, other: "IngredientRecord") -> bool:
        """Records merge only when both name and unit match exactly."""
        return self.name == other.name and self.unit == other.unit

    def merged_with(self, other: "IngredientRecord") -> "IngredientRecord":
        """Return a new record with both quantities summed."""
        if not self.is_mergeable(other):
            raise ValueError(
                f"Cannot merge {self.name!r} ({self.unit.value}) "
                f"with {other.name!r} ({other.unit.value})"
            )
        return replace(self, quantity=self.quantity + other.quantity)


FALLBACK_RECORD = IngredientRecord(name="", quantity=1.0, unit=Unit.ITEM)


# =============================================================================
# Quantity Parsing and Formatting
# =============================================================================

_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")


def parse_quantity(quantity_str: str) -> float | None:
    """
    Parse a numeric literal into a float.

    Handles formats like:
    - "2"
    - "1.25"
    - "1/2"

    Returns None for malformed literals ("1.2.3"), zero denominators and
    values too large to hold as a finite float.
    """
    quantity_str = quantity_str.strip()

    frac_match = _FRACTION_RE.match(quantity_str)
    try:
        if frac_match:
            num = int(frac_match.group(1))
            denom = int(frac_match.group(2))
            if denom == 0:
                logger.debug(f"Zero denominator in quantity {quantity_str!r}")
                return None
            value = num / denom
        else:
            value = float(quantity_str)
    except ValueError:
        logger.debug(f"Malformed quantity {quantity_str!r}")
        return None
    except OverflowError:
        logger.debug(f"Quantity out of range {quantity_str[:20]!r}...")
        return None

    if not math.isfinite(value):
        logger.debug(f"Quantity out of range {quantity_str[:20]!r}...")
        return None
    return value


def format_quantity(value: float) -> str:
    """
    Render a quantity for display.

    Whole numbers lose their decimal point, a half becomes "1/2", and any
    other fraction is written as fixed-point decimal text with no exponent
    ("0.25", "0.00005").
    """
    if not math.isfinite(value):
        return repr(float(value))
    if value == int(value):
        return str(int(value))
    if value == 0.5:
        return "1/2"
    return format(Decimal(repr(float(value))), "f")
