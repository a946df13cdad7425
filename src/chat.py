"""
Free-text chat processing.

Spots planning requests with simple keyword checks, pulls out a few
details with regular expressions and hands them to the plan generator.
"""

import logging
import random
import re
from datetime import datetime
from typing import Optional

from config import DEFAULT_CURRENCY
from models import (
    ChatReply,
    EventRequest,
    GuestType,
    LocationType,
    PartyPlanData
)
from services import generate_plan

logger = logging.getLogger(__name__)

PLANNING_TERMS = (
    "plan", "event", "party", "celebration", "organize", "arrange",
)

EVENT_TYPES = (
    "birthday", "wedding", "corporate", "baby shower",
    "anniversary", "graduation", "retirement",
)

DEFAULT_GUESTS = 20
DEFAULT_BUDGET = 500

_GUESTS_RE = re.compile(r"(\d+)\s*(guests|people)")
_BUDGET_RE = re.compile(r"(\d+)\s*(dollars|euros|budget)")

WELCOME_MESSAGE = """Hello! I'm your event planner assistant. I'll help you create an amazing event!

To get started, please tell me:
• What type of event are you planning? (birthday, wedding, corporate, etc.)
• Who is it for? (name, age if relevant)
• When will it take place? (date and time)
• How many guests do you expect?
• Do you have a specific theme or style in mind?
• Any food preferences or dietary restrictions?
• What's your approximate budget?
• Any special requests or must-have features?

The more details you share, the better I can help you plan!"""  # Noqa: E501

GUIDANCE_MESSAGE = """I'm your event planning assistant. To help you plan the perfect event, I need some key details:

• Event type (birthday, wedding, anniversary, corporate, etc.)
• Host information (who's organizing or who it's for)
• Date, time, and duration of the event
• Approximate number of guests and guest demographics
• Budget range and preferred currency
• Location (city, country, venue preferences)
• Theme ideas or special interests
• Food and drink preferences
• Any dietary restrictions
• Dress code expectations
• Transportation needs
• Entertainment preferences
• Special requirements (accessibility, photography, etc.)

The more details you provide, the better I can tailor my suggestions!"""  # Noqa: E501


def is_event_request(text: str) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in PLANNING_TERMS)


def extract_event_type(text: str) -> str:
    lowered = text.lower()
    for event_type in EVENT_TYPES:
        if event_type in lowered:
            return event_type
    return ""


def extract_guest_count(text: str) -> int:
    match = _GUESTS_RE.search(text.lower())
    return int(match.group(1)) if match else DEFAULT_GUESTS


def extract_budget(text: str) -> int:
    match = _BUDGET_RE.search(text.lower())
    return int(match.group(1)) if match else DEFAULT_BUDGET


def build_chat_request(text: str) -> EventRequest:
    """Turn a chat message into an event request with sensible defaults."""
    lowered = text.lower()
    event_type = extract_event_type(text)
    budget = extract_budget(text)
    is_kid = "kid" in lowered or "child" in lowered

    return EventRequest(
        name=event_type or "Event",
        event_type=event_type or "Event",
        interests=text,
        budget=budget if budget > 0 else DEFAULT_BUDGET,
        guests=extract_guest_count(text),
        location=LocationType.VENUE,
        guest_type=GuestType.CHILDREN if is_kid else GuestType.ADULTS,
        date=datetime.now(),
        currency=DEFAULT_CURRENCY,
        additional_details=text
    )


def format_plan_summary(result: PartyPlanData) -> str:
    """Chat-style summary of the first plan."""
    plan = result.plans[0]

    def bullets(items):
        return "\n".join(f"• {item}" for item in items)

    return (
        f"I've created an event plan based on a {plan.theme} theme! "
        "Here are some ideas:\n\n"
        f"Activities:\n{bullets(plan.activities)}\n\n"
        f"Food Ideas:\n{bullets(plan.food_ideas)}\n\n"
        f"Drink Suggestions:\n{bullets(plan.drink_ideas)}\n\n"
        f"Decoration Ideas:\n{bullets(plan.decorations)}\n\n"
        "I've also designed a custom invitation for this event!"
    )


def follow_up_question(event_type: str, text: str) -> str:
    lowered = text.lower()
    if not event_type:
        return (
            "\n\nCould you tell me what type of event this is "
            "(birthday, wedding, corporate, etc.)?"
        )
    if "theme" not in lowered and "style" not in lowered:
        return (
            "\n\nDo you have any specific theme or style preferences "
            "for this event?"
        )
    return (
        "\n\nWould you like to see the invitation I've designed, or would "
        "you like me to suggest any specific aspects of the event planning "
        "(venue, entertainment, etc.)?"
    )


async def process_user_message(
    text: str,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None
) -> ChatReply:
    """
    Answer a chat message, generating a plan when it asks for one.

    Args:
        text: The user's message
        rng: Random source for the theme fallback
        delay: Simulated latency passed on to generate_plan

    Returns:
        ChatReply with the response text and the plan (None for guidance)
    """
    if not is_event_request(text):
        logger.info("Chat message is not a planning request")
        return ChatReply(response=GUIDANCE_MESSAGE)

    request = build_chat_request(text)
    logger.info(
        f"Chat planning request: type={request.event_type}, "
        f"guests={request.guests}, budget={request.budget}"
    )

    result = await generate_plan(request, rng=rng, delay=delay)

    response = format_plan_summary(result)
    response += follow_up_question(extract_event_type(text), text)
    return ChatReply(response=response, plan=result)
