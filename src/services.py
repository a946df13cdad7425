"""
Services for the Party Planner Bot.

Assembles party plans from the content generators:
- Theme selection from the guest's interests
- Per-theme activities, food, drinks, decorations and venues
- One shared budget split and one invitation for the first theme
"""

import asyncio
import logging
import random
from datetime import datetime
from typing import Optional

from config import GENERATION_DELAY
from exceptions import PlanGenerationError
from generators import (
    select_themes,
    generate_activities,
    generate_food_ideas,
    generate_drink_ideas,
    generate_decorations,
    generate_venue_suggestions,
    generate_invitation_text,
    allocate_budget,
)
from models import EventRequest, PartyPlanData, ThemePlan

logger = logging.getLogger(__name__)


def format_amount(amount: float) -> str:
    """Show whole amounts without decimals: 1000.0 -> '1000'."""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def build_theme_plan(request: EventRequest, theme: str) -> ThemePlan:
    """
    Build the plan variant for one theme.

    All variants share the requester's guest, host and location details.
    """
    event_type = request.event_type or "Event"

    return ThemePlan(
        title=f"{theme} {event_type} Experience",
        description=(
            f"A fun-filled {theme.lower()} themed {event_type.lower()} "
            f"perfect for {request.name or 'you'}, with activities and "
            "decorations that will create amazing memories."
        ),
        theme=theme,
        activities=tuple(
            generate_activities(theme, request.is_kid, request.age)
        ),
        food_ideas=tuple(generate_food_ideas(
            theme,
            request.dietary_restrictions,
            request.food_preferences
        )),
        drink_ideas=tuple(generate_drink_ideas(
            theme, request.is_kid, request.drink_preferences
        )),
        decorations=tuple(generate_decorations(theme)),
        venues=tuple(generate_venue_suggestions(
            theme, request.location, request.city
        )),
        estimated_cost=f"{request.currency} {format_amount(request.budget)}",
        host_name=request.host_name or "Host",
        location=f"{request.city or 'City'}, {request.country or 'Country'}",
        age=request.age
    )


def assemble_plan(
    request: EventRequest, rng: Optional[random.Random] = None
) -> PartyPlanData:
    """Synchronous core of generate_plan, without the simulated delay."""
    themes = select_themes(request.interests, rng)
    plans = tuple(build_theme_plan(request, theme) for theme in themes)

    budget_breakdown = allocate_budget(request.budget)

    invitation_text = generate_invitation_text(
        request.name or "Guest",
        request.host_name or "Host",
        request.event_type or "Event",
        plans[0].theme,
        request.date or datetime.now()
    )

    return PartyPlanData(
        plans=plans,
        invitation_text=invitation_text,
        budget_breakdown=budget_breakdown
    )


async def generate_plan(
    request: EventRequest,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None
) -> PartyPlanData:
    """
    Generate party plans for an event request.

    Args:
        request: Validated event request
        rng: Random source for the theme fallback
        delay: Simulated latency in seconds; defaults to GENERATION_DELAY

    Returns:
        PartyPlanData with 1-3 theme plans

    Raises:
        PlanGenerationError: any step failed; nothing partial is returned
    """
    logger.info(
        f"Generating party plan for {request.name!r} "
        f"({request.event_type or 'Event'}, {request.guests} guests, "
        f"{request.currency} {format_amount(request.budget)})"
    )

    await asyncio.sleep(GENERATION_DELAY if delay is None else delay)

    try:
        result = assemble_plan(request, rng)
    except Exception as e:
        logger.error(f"Error generating party plan: {e}")
        raise PlanGenerationError(str(e)) from e

    logger.info(
        f"Generated {len(result.plans)} plans: "
        f"{[plan.theme for plan in result.plans]}"
    )
    return result
