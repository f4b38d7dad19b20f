"""Preparation list generation from method ingredient mentions."""

from collections.abc import Iterable
from functools import cmp_to_key

from preplist.config import SpoonStyle, get_settings
from preplist.logging_config import get_logger
from preplist.normalize.mentions import parse_mention
from preplist.normalize.units import (
    SPOON_UNITS,
    UNIT_BULK_ORDER,
    UNIT_LABELS,
    IngredientRecord,
    Unit,
    format_quantity,
)

logger = get_logger(__name__)

# Comparator results, as used by functools.cmp_to_key
BEFORE = -1
EQUAL = 0
AFTER = 1


def compare_ingredients(a: IngredientRecord, b: IngredientRecord) -> int:
    """
    Order ingredients so the bulkier ones come first.

    Records sharing a unit compare by quantity, larger first, except items
    where the smaller count comes first. Otherwise the unit's approximate
    bulk decides; units without a rank leave the order untouched.
    """
    if a.unit == b.unit:
        if a.quantity > b.quantity:
            result = BEFORE
        elif a.quantity < b.quantity:
            result = AFTER
        else:
            result = EQUAL

        if a.unit == Unit.ITEM:
            result = -result
        return result

    if a.unit not in UNIT_BULK_ORDER or b.unit not in UNIT_BULK_ORDER:
        return EQUAL

    a_index = UNIT_BULK_ORDER.index(a.unit)
    b_index = UNIT_BULK_ORDER.index(b.unit)
    if a_index < b_index:
        return BEFORE
    if a_index > b_index:
        return AFTER
    return EQUAL


def title_case(text: str) -> str:
    """Upper-case the first character, leaving the rest alone."""
    return text[:1].upper() + text[1:]


def format_ingredient(record: IngredientRecord, spoon_style: SpoonStyle = "name") -> str:
    """
    Render a record as a preparation list entry.

    Items, grams and litres keep their numeral ("6x eggs", "500g flour").
    With the default ``spoon_style`` of ``"name"``, spoon and pinch amounts
    render as the bare, title-cased name ("Salt"); ``"quantity"`` keeps the
    amount ("1/2 tsp salt", "A pinch of salt").
    """
    if record.unit in SPOON_UNITS and spoon_style == "name":
        rendered = record.name
    elif record.unit in UNIT_LABELS:
        label = UNIT_LABELS[record.unit]
        rendered = f"{format_quantity(record.quantity)}{label} {record.name}"
    elif record.unit == Unit.PINCH:
        # Pinch carries no meaningful count
        rendered = f"A pinch of {record.name}"
    else:
        rendered = record.name

    if not rendered[:1].isdigit():
        rendered = title_case(rendered)
    return rendered


class PrepListBuilder:
    """
    Builds a preparation list from the ingredients mentioned in a method:
    - Strips preparation instructions from each mention
    - Combines repeated mentions of the same ingredient and unit
    - Sorts by approximate bulk so big items are fetched first
    """

    def __init__(self, spoon_style: SpoonStyle | None = None):
        self.spoon_style: SpoonStyle = spoon_style or get_settings().spoon_style

    def parse(self, mentions: Iterable[str]) -> list[IngredientRecord]:
        """Parse, combine and sort mentions into records."""
        consolidated: dict[str, IngredientRecord] = {}
        mention_count = 0

        for mention in mentions:
            mention_count += 1
            record = parse_mention(mention)
            existing = consolidated.get(record.name)

            if existing is not None and existing.is_mergeable(record):
                consolidated[record.name] = existing.merged_with(record)
            else:
                if existing is not None:
                    logger.debug(
                        f"Unit mismatch for {record.name!r}: "
                        f"{existing.unit.value} replaced by {record.unit.value}"
                    )
                consolidated[record.name] = record

        records = sorted(consolidated.values(), key=cmp_to_key(compare_ingredients))

        logger.debug(
            f"Consolidated {mention_count} mentions into {len(records)} ingredients"
        )
        return records

    def build(self, mentions: Iterable[str]) -> list[str]:
        """Return the formatted preparation list for the given mentions."""
        return [format_ingredient(record, self.spoon_style) for record in self.parse(mentions)]


def consolidate_ingredients(
    mentions: Iterable[str],
    spoon_style: SpoonStyle | None = None,
) -> list[str]:
    """
    Return ingredient strings ordered for preparation, e.g. getting them out
    of the fridge and cupboards.

    Args:
        mentions: Raw method ingredient mentions, in document order.
        spoon_style: Override for the configured spoon rendering.

    Returns:
        One display string per distinct ingredient name.
    """
    return PrepListBuilder(spoon_style).build(mentions)
