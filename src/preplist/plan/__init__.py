"""Preparation list consolidation and formatting."""

from preplist.plan.prep_list import (
    AFTER,
    BEFORE,
    EQUAL,
    PrepListBuilder,
    compare_ingredients,
    consolidate_ingredients,
    format_ingredient,
    title_case,
)

__all__ = [
    "AFTER",
    "BEFORE",
    "EQUAL",
    "PrepListBuilder",
    "compare_ingredients",
    "consolidate_ingredients",
    "format_ingredient",
    "title_case",
]
