"""
Invitation background images.

There is no image model behind this; each theme maps to a fixed
stock image URL.
"""

import asyncio
import logging
from types import MappingProxyType
from typing import Optional

from config import GENERATION_DELAY

logger = logging.getLogger(__name__)

_ANIMALS_IMAGE = "https://img.freepik.com/free-vector/cute-animals-pattern-background-design_53876-115388.jpg"  # Noqa: E501

THEME_IMAGES = MappingProxyType({
    # Nature & animal themes
    "animal": _ANIMALS_IMAGE,
    "animals": _ANIMALS_IMAGE,
    "ocean": "https://img.freepik.com/free-vector/watercolor-abstract-blue-wave-background_23-2149098113.jpg",  # Noqa: E501

    # Fantasy themes
    "magic": "https://img.freepik.com/free-vector/gradient-galaxy-background_23-2149388138.jpg",  # Noqa: E501
    "superhero": "https://img.freepik.com/free-vector/hand-drawn-flat-design-superhero-background_23-2149379088.jpg",  # Noqa: E501
    "princess": "https://img.freepik.com/free-vector/hand-drawn-princess-background_23-2149707771.jpg",  # Noqa: E501
    "dinosaur": "https://img.freepik.com/free-vector/hand-drawn-dinosaur-background_23-2149363716.jpg",  # Noqa: E501
    "space": "https://img.freepik.com/free-vector/flat-design-galaxy-background_23-2149125624.jpg",  # Noqa: E501

    # Interest-based themes
    "sports": "https://img.freepik.com/free-vector/gradient-football-background_23-2149988782.jpg",  # Noqa: E501
    "gaming": "https://img.freepik.com/premium-vector/video-games-neon-background-with-colorful-controllers_23-2148238004.jpg",  # Noqa: E501
    "art": "https://img.freepik.com/free-vector/watercolor-stains-abstract-background_23-2149107181.jpg",  # Noqa: E501
    "music": "https://img.freepik.com/free-vector/colorful-music-background-flat-design_23-2147638584.jpg",  # Noqa: E501
    "science": "https://img.freepik.com/free-vector/realistic-science-background-with-molecules_23-2147844998.jpg",  # Noqa: E501

    # Event-specific themes
    "wedding": "https://img.freepik.com/free-vector/hand-drawn-wedding-background_23-2149650188.jpg",  # Noqa: E501
    "party": "https://img.freepik.com/free-vector/flat-design-birthday-background_23-2149046793.jpg",  # Noqa: E501
})

DEFAULT_IMAGE = THEME_IMAGES["party"]


def invitation_image_url(theme: str) -> str:
    return THEME_IMAGES.get((theme or "").lower(), DEFAULT_IMAGE)


async def generate_invitation_image(
    theme: str, delay: Optional[float] = None
) -> str:
    """
    Return the invitation image URL for a theme after the simulated delay.

    Args:
        theme: Party theme
        delay: Seconds to wait; defaults to GENERATION_DELAY

    Returns:
        Image URL, falling back to the generic party image
    """
    logger.info(f"Generating invitation image for theme: {theme}")
    await asyncio.sleep(GENERATION_DELAY if delay is None else delay)
    return invitation_image_url(theme)
