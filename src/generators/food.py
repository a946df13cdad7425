"""
Food suggestions by theme, adjusted for dietary restrictions and preferences.
"""

import logging
from types import MappingProxyType
from typing import Sequence

from generators.themes import lookup

logger = logging.getLogger(__name__)

THEME_FOODS = MappingProxyType({
    "Superhero": (
        "Hero sandwich bar",
        "Power-packed fruit skewers",
        "Superhero-decorated cupcakes",
        "Color-themed snacks",
    ),
    "Princess": (
        "Tea sandwiches",
        "Crown-shaped cookies",
        "Pink princess punch",
        "Jewel-toned fruit platter",
    ),
    "Sports": (
        "Stadium-style nachos and hot dogs",
        "Sports ball-shaped treats",
        "Energy snack mix",
        "Sports drink station",
    ),
    "Space": (
        "Planet-shaped cookies",
        "Star-shaped sandwiches",
        "Galaxy-colored popcorn",
        "Rocket fruit skewers",
    ),
    "Dinosaur": (
        "Dino nuggets",
        "Fossil cookies",
        "Prehistoric punch",
        "Veggie herbivore platter",
    ),
    "Gaming": (
        "Pixel-art fruit platter",
        "Power-up snack mix",
        "Game controller cookies",
        "Pizza power-ups",
    ),
    "Art": (
        "Colorful palette cookies",
        "Paint brush pretzel rods",
        "Rainbow fruit skewers",
        "Edible color mixing station",
    ),
    "Music": (
        "Musical note cookies",
        "Microphone-shaped cake pops",
        "Rockin' roll-up sandwiches",
        "Fruit drum kit display",
    ),
    "Animals": (
        "Animal cracker bar",
        "Animal-face cupcakes",
        "Jungle trail mix",
        "Safari veggie platter",
    ),
    "Ocean": (
        "Fish-shaped sandwiches",
        "Blue jello cups with gummy fish",
        "Seashell cookies",
        "Under-the-sea fruit display",
    ),
    "Magic": (
        "Magic wand pretzel rods",
        "Color-changing drinks",
        "Potion punch bowl",
        "Wizard hat cupcakes",
    ),
    "Science": (
        "Molecule cookies",
        "Test tube fruit cups",
        "Edible science experiments",
        "Element-labeled snacks",
    ),
})

DEFAULT_FOODS = (
    "Birthday cake",
    "Assorted finger foods",
    "Fruit platter",
    "Chips and dip",
)

# (restriction keyword, item keywords, prefix), applied in order
DIETARY_RULES = (
    ("vegetarian", ("meat",), "Vegetarian "),
    ("vegan", ("cheese", "cream"), "Vegan "),
    ("gluten", ("bread", "cookie"), "Gluten-free "),
)

MAX_CUSTOM_ITEMS = 2
KEPT_BASE_ITEMS = 3


def apply_dietary_rules(
    items: Sequence[str], dietary_restrictions: str
) -> list[str]:
    """
    Relabel items that clash with the given restrictions.

    Items are never dropped. An item matching a rule gets the rule's
    prefix, e.g. "Crown-shaped cookies" becomes
    "Gluten-free Crown-shaped cookies" under a gluten restriction.
    """
    adjusted = list(items)
    restrictions = (dietary_restrictions or "").lower()
    if not restrictions:
        return adjusted

    for restriction, keywords, prefix in DIETARY_RULES:
        if restriction not in restrictions:
            continue
        logger.debug(f"Applying '{restriction}' dietary rule")
        adjusted = [
            prefix + item
            if any(word in item.lower() for word in keywords)
            else item
            for item in adjusted
        ]
    return adjusted


def apply_preferences(
    items: Sequence[str], preferences: str, template: str
) -> list[str]:
    """
    Prepend up to two custom items built from comma-separated preferences.

    When preferences are given only the first three base items are kept,
    so the result holds at most five entries.
    """
    tokens = [
        token.strip()
        for token in (preferences or "").lower().split(",")
        if token.strip()
    ]
    if not tokens:
        return list(items)

    custom = [template.format(token) for token in tokens[:MAX_CUSTOM_ITEMS]]
    return custom + list(items[:KEPT_BASE_ITEMS])


def adjust_food(
    items: Sequence[str], dietary_restrictions: str, food_preferences: str
) -> list[str]:
    adjusted = apply_dietary_rules(items, dietary_restrictions)
    return apply_preferences(adjusted, food_preferences, "Custom {} dish")


def generate_food_ideas(
    theme: str, dietary_restrictions: str = "", food_preferences: str = ""
) -> list[str]:
    base = lookup(THEME_FOODS, theme, DEFAULT_FOODS)
    return adjust_food(base, dietary_restrictions, food_preferences)
