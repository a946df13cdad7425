"""
Plan content generators.

Each module maps a theme (plus guest details) to static suggestion
lists; services.generate_plan combines them into a full plan.
"""

from generators.themes import THEMES, select_themes
from generators.activities import generate_activities
from generators.food import generate_food_ideas, adjust_food
from generators.drinks import generate_drink_ideas, adjust_drinks
from generators.decorations import generate_decorations
from generators.venues import generate_venue_suggestions
from generators.invitation import generate_invitation_text
from generators.images import generate_invitation_image
from generators.budget import (
    allocate_budget,
    adjust_allocation,
    savings_suggestions,
)

__all__ = [
    "THEMES",
    "select_themes",
    "generate_activities",
    "generate_food_ideas",
    "adjust_food",
    "generate_drink_ideas",
    "adjust_drinks",
    "generate_decorations",
    "generate_venue_suggestions",
    "generate_invitation_text",
    "generate_invitation_image",
    "allocate_budget",
    "adjust_allocation",
    "savings_suggestions",
]
