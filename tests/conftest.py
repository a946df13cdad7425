"""
Shared fixtures for the Party Planner tests.
"""

import random
from datetime import datetime

import pytest

from models import EventRequest, GuestType, LocationType


@pytest.fixture
def sample_request():
    """The Austin space birthday used across the scenario tests."""
    return EventRequest(
        name="Alex",
        interests="space exploration",
        budget=1000,
        guests=15,
        location=LocationType.OUTDOORS,
        event_type="Birthday",
        host_name="Sam",
        age=8,
        date=datetime(2026, 11, 14, 15, 0),
        guest_type=GuestType.CHILDREN,
        currency="USD",
        city="Austin",
        country="USA",
    )


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def raw_answers():
    """Raw wizard answers as they arrive from chat."""
    return {
        "event_type": "Birthday",
        "name": "Alex",
        "age": "8",
        "host_name": "Sam",
        "date": "2026-11-14 15:00",
        "guests": "15",
        "guest_type": "children",
        "budget": "1000",
        "currency": "usd",
        "location": "outdoors",
        "city": "Austin",
        "country": "USA",
        "interests": "space exploration",
        "dietary_restrictions": "",
        "food_preferences": "",
        "drink_preferences": "",
        "additional_details": "",
    }
