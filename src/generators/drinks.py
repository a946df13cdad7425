"""
Drink suggestions by theme, guest type and preferences.
"""

from types import MappingProxyType
from typing import Sequence

from generators.food import apply_preferences

KID_DRINKS = (
    "Fruit punch",
    "Themed color juice boxes",
    "Chocolate milk",
    "Flavored water station",
    "Smoothies",
)

ADULT_DRINKS = (
    "Signature cocktail",
    "Wine selection",
    "Craft beer bar",
    "Champagne toast",
    "Classic cocktails",
)

# theme -> (kid drinks, adult drinks)
THEME_DRINKS = MappingProxyType({
    "superhero": (
        ("Power punch", "Super strength smoothies", "Colorful hero juices"),
        ("Hero-themed cocktails", "Power potions", "Colorful mixed drinks"),
    ),
    "princess": (
        ("Royal tea", "Pink lemonade", "Fairy sparkle juice"),
        ("Princess cocktails", "Pink champagne", "Royal tea with liqueur"),
    ),
    "space": (
        ("Rocket fuel punch", "Galaxy lemonade", "Star sparkle water"),
        ("Cosmic cocktails", "Moon martinis", "Starlight sparklers"),
    ),
    "party": (
        ("Party punch", "Rainbow sodas", "Fizzy fruit drinks"),
        (
            "Party punch (with optional spirits)",
            "Specialty cocktails",
            "Champagne bar",
        ),
    ),
})


def base_drinks(theme: str, is_kid: bool) -> Sequence[str]:
    themed = THEME_DRINKS.get((theme or "").lower())
    if themed:
        return themed[0] if is_kid else themed[1]
    return KID_DRINKS if is_kid else ADULT_DRINKS


def adjust_drinks(items: Sequence[str], drink_preferences: str) -> list[str]:
    return apply_preferences(items, drink_preferences, "Custom {} drink")


def generate_drink_ideas(
    theme: str, is_kid: bool, drink_preferences: str = ""
) -> list[str]:
    return adjust_drinks(base_drinks(theme, is_kid), drink_preferences)
