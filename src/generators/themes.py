"""
Theme selection from free-text interests.
"""

import logging
import random
from typing import Mapping, Optional

from config import MAX_THEMES, THEME_SEED

logger = logging.getLogger(__name__)

THEMES = (
    "Superhero", "Princess", "Sports", "Space", "Dinosaur",
    "Gaming", "Art", "Music", "Animals", "Ocean", "Magic", "Science",
    "Wedding", "Corporate", "Graduation", "Party", "Formal", "Casual",
)


def select_themes(
    interests: str, rng: Optional[random.Random] = None
) -> list[str]:
    """
    Pick 1-3 themes whose names appear in the interests text.

    Matching is a plain case-insensitive substring test in vocabulary
    order, so "party" also matches "Art". When nothing matches, the
    vocabulary is shuffled and the first three are used.

    Args:
        interests: Free text describing what the guests are into
        rng: Random source for the fallback shuffle. Defaults to a
            generator seeded from THEME_SEED (random when unset).

    Returns:
        Ordered list of 1-3 theme names
    """
    text = (interests or "").lower()
    matches = [theme for theme in THEMES if theme.lower() in text]

    if matches:
        logger.debug(f"Themes matched from interests: {matches}")
        return matches[:MAX_THEMES]

    rng = rng or random.Random(THEME_SEED)
    shuffled = list(THEMES)
    rng.shuffle(shuffled)
    logger.debug(f"No theme matched, picked at random: {shuffled[:MAX_THEMES]}")
    return shuffled[:MAX_THEMES]


def lookup(
    table: Mapping[str, tuple[str, ...]],
    theme: str,
    default: tuple[str, ...],
) -> tuple[str, ...]:
    """Case-insensitive theme lookup with a fallback list."""
    key = (theme or "").lower()
    for name, items in table.items():
        if name.lower() == key:
            return items
    return default
