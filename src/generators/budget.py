"""
Budget allocation and the budget optimizer helpers.
"""

import dataclasses
import math
from types import MappingProxyType

from models import BUDGET_CATEGORIES, BudgetBreakdown

BUDGET_SPLIT = MappingProxyType({
    "food": 0.40,
    "decorations": 0.15,
    "activities": 0.20,
    "venue": 0.15,
    "misc": 0.10,
})

# Highest share of the total a single category can be moved to
CATEGORY_CAPS = MappingProxyType({
    "food": 0.7,
    "venue": 0.6,
    "activities": 0.5,
    "decorations": 0.4,
    "misc": 0.3,
})

# (category, fraction of the initial amount, hint)
SAVINGS_HINTS = (
    (
        "food", 0.7,
        "Consider potluck-style food options or simpler menu items "
        "to reduce food costs.",
    ),
    (
        "venue", 0.7,
        "Look for free or low-cost venue options like public parks "
        "or hosting at home.",
    ),
    (
        "decorations", 0.6,
        "Use DIY decorations or reusable items to cut decoration costs.",
    ),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def allocate_budget(total: float) -> BudgetBreakdown:
    """
    Split a total budget with the fixed percentages.

    Each category is rounded on its own, so the parts may not add back
    up to the total (a budget of 5 allocates 6).

    Raises:
        ValueError: total is not a finite positive number
    """
    if not isinstance(total, (int, float)) or not math.isfinite(total) or total <= 0:
        raise ValueError(f"Budget must be a finite positive number, got {total!r}")

    return BudgetBreakdown(**{
        category: _round_half_up(total * share)
        for category, share in BUDGET_SPLIT.items()
    })


def category_cap(category: str, total: float) -> int:
    return _round_half_up(total * CATEGORY_CAPS[category])


def adjust_allocation(
    breakdown: BudgetBreakdown, category: str, amount: int, total: float
) -> BudgetBreakdown:
    """
    Return a copy of breakdown with one category set to amount.

    The amount is clamped between zero and the category's cap.
    """
    if category not in BUDGET_CATEGORIES:
        raise ValueError(f"Unknown budget category: {category}")
    amount = max(0, min(int(amount), category_cap(category, total)))
    return dataclasses.replace(breakdown, **{category: amount})


def savings_suggestions(
    current: BudgetBreakdown, initial: BudgetBreakdown
) -> list[str]:
    """Cost-saving hints for categories cut well below the initial split."""
    return [
        hint
        for category, fraction, hint in SAVINGS_HINTS
        if getattr(current, category) < getattr(initial, category) * fraction
    ]
