"""Parsing of free-text method ingredient mentions.

A mention is the text a recipe author writes inside a method step, for
example ``"250g of lentils (green, red or mix), washed"``. Parsing happens in
two stages:

1. :func:`normalize_mention` drops the trailing preparation clause
   (``", washed"``) while keeping any parenthesised alternatives intact.
2. :func:`parse_mention` runs the normalized text through an ordered list of
   patterns. Every pattern that matches overwrites the result of the ones
   before it, so the list runs from the most general form to the most
   specific one.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from preplist.logging_config import get_logger
from preplist.normalize.units import FALLBACK_RECORD, IngredientRecord, Unit, parse_quantity

logger = get_logger(__name__)

_PARENS_RE = re.compile(r"\(.*?\)")

# Stands in for the parenthesised run while splitting on commas.
_PARENS_PLACEHOLDER = "\x00"


def normalize_mention(mention: str) -> str:
    """
    Strip method instructions from a mention.

    Examples:
        "Eggs, chopped" -> "Eggs"
        "250g of lentils (green, red or mix), washed"
            -> "250g of lentils (green, red or mix)"
    """
    parens = _PARENS_RE.search(mention)
    if parens:
        without_parens = _PARENS_RE.sub(_PARENS_PLACEHOLDER, mention, count=1)
        segments = without_parens.split(",")
        if len(segments) > 1:
            return ",".join(segments[:-1]).replace(_PARENS_PLACEHOLDER, parens.group(0), 1)
        return mention

    segments = mention.split(",")
    if len(segments) > 1:
        return ",".join(segments[:-1])
    return mention


# =============================================================================
# Mention Patterns
# =============================================================================


@dataclass(frozen=True)
class MentionPattern:
    """A textual form and how to turn its match into a record."""

    name: str
    regex: re.Pattern[str]
    build: Callable[[re.Match[str]], IngredientRecord | None]


def _counted(unit: Unit, quantity_group: int, name_group: int, divisor: float = 1.0):
    def build(match: re.Match[str]) -> IngredientRecord | None:
        quantity = parse_quantity(match.group(quantity_group))
        if quantity is None:
            return None
        return IngredientRecord(
            name=match.group(name_group),
            quantity=quantity / divisor,
            unit=unit,
        )

    return build


def _spoon_unit(token: str) -> Unit:
    return Unit.TEASPOON if token == "tsp" else Unit.TABLESPOON


def _build_range(match: re.Match[str]) -> IngredientRecord:
    # Take the upper bound as the quantity
    return IngredientRecord(name=match.group(3), quantity=float(match.group(2)), unit=Unit.ITEM)


def _build_single_of(match: re.Match[str]) -> IngredientRecord:
    return IngredientRecord(name=match.group(2), quantity=1.0, unit=Unit.ITEM)


def _build_spoon(match: re.Match[str]) -> IngredientRecord | None:
    quantity = parse_quantity(match.group(1))
    if quantity is None:
        return None
    unit = _spoon_unit(match.group(2))
    return IngredientRecord(name=match.group(4), quantity=quantity, unit=unit)


def _build_fractional_spoon(match: re.Match[str]) -> IngredientRecord | None:
    quantity = parse_quantity(f"{match.group(1)}/{match.group(2)}")
    if quantity is None:
        return None
    unit = _spoon_unit(match.group(3))
    return IngredientRecord(name=match.group(5), quantity=quantity, unit=unit)


def _build_pinch(match: re.Match[str]) -> IngredientRecord:
    return IngredientRecord(name=match.group(2), quantity=1.0, unit=Unit.PINCH)


def _build_few(match: re.Match[str]) -> IngredientRecord:
    # "a few" is taken to mean three
    return IngredientRecord(name=match.group(1), quantity=3.0, unit=Unit.ITEM)


# A decimal or an "a/b" fraction
_NUMBER = r"(\d+/\d+|[\d.]+)"

MENTION_PATTERNS: tuple[MentionPattern, ...] = (
    # "6x sausages", "2 onions"
    MentionPattern("count", re.compile(rf"^{_NUMBER}x? (.*)"), _counted(Unit.ITEM, 1, 2)),
    # "10-15 curry leaves"
    MentionPattern("range", re.compile(r"^(\d+)-(\d+) (.*)"), _build_range),
    # "500g plain flour", "250g of lentils"
    MentionPattern("grams", re.compile(rf"^{_NUMBER}g (of )?(.*)"), _counted(Unit.GRAMS, 1, 3)),
    # "1.25l stock"
    MentionPattern("litres", re.compile(rf"^{_NUMBER}l (.*)"), _counted(Unit.LITRES, 1, 2)),
    # "80ml milk"
    MentionPattern(
        "millilitres",
        re.compile(rf"^{_NUMBER}ml (of )?(.*)"),
        _counted(Unit.LITRES, 1, 3, divisor=1000),
    ),
    # "A chunk of ginger", "1 block of paneer"
    MentionPattern("single_of", re.compile(r"^(A|1) .* of (\w+)"), _build_single_of),
    # "1 tbsp of garam masala", "2tsp cumin"
    MentionPattern("spoon", re.compile(r"^([\d.]+) ?(tb?sp)s? (of )?(.*)"), _build_spoon),
    # "1/2 tsp salt"
    MentionPattern(
        "fractional_spoon",
        re.compile(r"^(\d+)/(\d+) ?(tb?sp)s? (of )?(.*)"),
        _build_fractional_spoon,
    ),
    # "Pinch of salt"
    MentionPattern("pinch", re.compile(r"^Pinch (of )?(.*)"), _build_pinch),
    # "A few black cardamom pods"
    MentionPattern("few", re.compile(r"^A few (.*)"), _build_few),
)


def parse_mention(mention: str) -> IngredientRecord:
    """
    Parse a method ingredient mention into a record.

    Never fails: text no pattern recognises yields a record with an empty
    name, a quantity of 1 and the item unit.
    """
    normalized = normalize_mention(mention)
    record = FALLBACK_RECORD
    matched: str | None = None

    for pattern in MENTION_PATTERNS:
        match = pattern.regex.match(normalized)
        if not match:
            continue
        candidate = pattern.build(match)
        if candidate is None:
            logger.debug(f"Pattern {pattern.name} rejected quantity in {normalized!r}")
            continue
        record = candidate
        matched = pattern.name

    if matched is None:
        logger.debug(f"No pattern matched mention {mention!r}")

    return record
