"""
Tests for the mock venue booking.
"""

import random

import pytest

from booking import AMENITIES, book_venue, get_venue_details, list_venue_details
from exceptions import VenueUnavailableError
from models import VenueDetails


def make_venue(available=True):
    return VenueDetails(
        name="Local park in Austin",
        address="123 Main St, Austin",
        price=750,
        capacity=80,
        amenities=AMENITIES,
        contact_info="+1 (555) 123-4567",
        availability=available,
    )


class TestVenueDetails:

    def test_details_within_ranges(self):
        rng = random.Random(5)
        for _ in range(20):
            details = get_venue_details("Hall", "Austin", rng)
            assert 500 <= details.price < 1000
            assert 50 <= details.capacity < 100
            assert details.address == "123 Main St, Austin"

    def test_reproducible_with_seed(self):
        first = get_venue_details("Hall", "Austin", random.Random(9))
        second = get_venue_details("Hall", "Austin", random.Random(9))
        assert first == second

    @pytest.mark.asyncio
    async def test_one_entry_per_suggested_venue(self, sample_request):
        from services import generate_plan

        result = await generate_plan(sample_request, delay=0)
        plan = result.plans[0]
        venues = list_venue_details(plan, random.Random(1))

        assert [v.name for v in venues] == list(plan.venues)
        assert all(v.address.endswith("Austin") for v in venues)


class TestBookVenue:

    def test_book_available_venue(self):
        booking = book_venue(make_venue())
        assert len(booking.reference) == 8
        assert booking.reference == booking.reference.upper()
        assert booking.venue.name == "Local park in Austin"

    def test_refuses_unavailable_venue(self):
        with pytest.raises(VenueUnavailableError):
            book_venue(make_venue(available=False))
