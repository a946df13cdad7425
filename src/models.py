"""
Data models for the Party Planner Bot.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from enum import Enum


class GuestType(Enum):
    """Who the event is for."""
    ADULTS = "adults"
    CHILDREN = "children"
    FAMILY = "family"
    TEENAGERS = "teenagers"
    MIXED = "mixed"
    SENIORS = "seniors"
    CORPORATE = "corporate"


class LocationType(Enum):
    """Kind of place the event is held at, used to key venue suggestions."""
    HOME = "home"
    OUTDOORS = "outdoors"
    VENUE = "venue"
    RESTAURANT = "restaurant"
    VIRTUAL = "virtual"
    OTHER = "other"


class BotState(Enum):
    """Machine states for the bot conversation flow."""
    IDLE = "idle"
    FILLING_FORM = "filling_form"
    CHATTING = "chatting"
    GENERATING = "generating"
    REVIEWING_PLANS = "reviewing_plans"
    ADJUSTING_BUDGET = "adjusting_budget"
    SELECTING_VENUE = "selecting_venue"


@dataclass(frozen=True)
class EventRequest:
    """Validated event parameters handed to the plan generator."""
    name: str                       # Who or what the event is for
    interests: str                  # Free text, drives theme selection
    budget: float                   # Total budget, > 0
    guests: int                     # Expected guest count, >= 0
    location: LocationType
    event_type: str = ""
    host_name: str = ""
    age: Optional[int] = None
    date: Optional[datetime] = None
    guest_type: GuestType = GuestType.ADULTS
    currency: str = "USD"
    city: str = ""
    country: str = ""
    dietary_restrictions: str = ""
    food_preferences: str = ""
    drink_preferences: str = ""
    additional_details: str = ""

    @property
    def is_kid(self) -> bool:
        return self.guest_type in (GuestType.CHILDREN, GuestType.FAMILY)


@dataclass(frozen=True)
class ThemePlan:
    """One fully assembled event plan for a single theme."""
    title: str
    description: str
    theme: str
    activities: tuple[str, ...]
    food_ideas: tuple[str, ...]
    drink_ideas: tuple[str, ...]
    decorations: tuple[str, ...]
    venues: tuple[str, ...]
    estimated_cost: str             # e.g. "USD 1000"
    host_name: str
    location: str                   # "City, Country"
    age: Optional[int] = None

    @property
    def currency(self) -> str:
        return self.estimated_cost.split(" ")[0]

    @property
    def city(self) -> str:
        return self.location.split(",")[0].strip()

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "theme": self.theme,
            "activities": list(self.activities),
            "foodIdeas": list(self.food_ideas),
            "drinkIdeas": list(self.drink_ideas),
            "decorations": list(self.decorations),
            "venues": list(self.venues),
            "estimatedCost": self.estimated_cost,
            "hostName": self.host_name,
            "location": self.location,
            "age": self.age,
        }


BUDGET_CATEGORIES = ("food", "decorations", "activities", "venue", "misc")


@dataclass(frozen=True)
class BudgetBreakdown:
    """Budget split across the five spending categories."""
    food: int
    decorations: int
    activities: int
    venue: int
    misc: int

    @property
    def total(self) -> int:
        return sum(self.as_dict().values())

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in BUDGET_CATEGORIES}


@dataclass(frozen=True)
class PartyPlanData:
    """Result of one generation call."""
    plans: tuple[ThemePlan, ...]    # 1-3 entries
    invitation_text: str
    budget_breakdown: BudgetBreakdown

    def to_dict(self) -> dict:
        return {
            "plans": [plan.to_dict() for plan in self.plans],
            "invitationText": self.invitation_text,
            "budgetBreakdown": self.budget_breakdown.as_dict(),
        }


@dataclass(frozen=True)
class VenueDetails:
    """Mock details for a suggested venue."""
    name: str
    address: str
    price: int
    capacity: int
    amenities: tuple[str, ...]
    contact_info: str
    availability: bool


@dataclass(frozen=True)
class Booking:
    """Confirmation of a (mock) venue booking."""
    reference: str
    venue: VenueDetails
    booked_at: datetime


@dataclass(frozen=True)
class ChatReply:
    """Response to a free-text chat message."""
    response: str
    plan: Optional[PartyPlanData] = None


@dataclass
class UserSession:
    """User session state for the conversation flow."""
    chat_id: int
    state: BotState = BotState.IDLE

    # Wizard progress
    form_step: int = 0
    form_data: dict[str, str] = field(default_factory=dict)

    # Generated results
    request: Optional[EventRequest] = None
    plan_data: Optional[PartyPlanData] = None
    selected_plan: int = 0

    # Budget optimizer (local copy, never fed back into generation)
    optimized_budget: Optional[BudgetBreakdown] = None
    draft_budget: Optional[BudgetBreakdown] = None

    # Venue booking
    venue_options: list[VenueDetails] = field(default_factory=list)
    selected_venue: Optional[int] = None
    booking: Optional[Booking] = None

    # Timestamps
    created_at: str = ""
    updated_at: str = ""
