"""
Mock venue details and booking.

Prices, capacity and availability are made up; no venue or payment
service is contacted.
"""

import logging
import random
import uuid
from datetime import datetime
from typing import Optional

from exceptions import VenueUnavailableError
from models import Booking, ThemePlan, VenueDetails

logger = logging.getLogger(__name__)

AMENITIES = (
    "Wi-Fi",
    "Sound System",
    "Catering Options",
    "Free Parking",
    "Wheelchair Accessible",
)
CONTACT_INFO = "+1 (555) 123-4567"
AVAILABILITY_RATE = 0.7


def get_venue_details(
    venue: str, city: str, rng: Optional[random.Random] = None
) -> VenueDetails:
    """
    Make up details for a suggested venue.

    Price is 500-999, capacity 50-99, and about 70% of venues are
    available.
    """
    rng = rng or random.Random()
    return VenueDetails(
        name=venue,
        address=f"123 Main St, {city}",
        price=rng.randrange(500, 1000),
        capacity=rng.randrange(50, 100),
        amenities=AMENITIES,
        contact_info=CONTACT_INFO,
        availability=rng.random() < AVAILABILITY_RATE
    )


def list_venue_details(
    plan: ThemePlan, rng: Optional[random.Random] = None
) -> list[VenueDetails]:
    rng = rng or random.Random()
    return [get_venue_details(venue, plan.city, rng) for venue in plan.venues]


def book_venue(venue: VenueDetails) -> Booking:
    """
    Book a venue.

    Raises:
        VenueUnavailableError: the venue is not available
    """
    if not venue.availability:
        logger.warning(f"Refused booking for unavailable venue: {venue.name}")
        raise VenueUnavailableError(f"{venue.name} is not available")

    booking = Booking(
        reference=uuid.uuid4().hex[:8].upper(),
        venue=venue,
        booked_at=datetime.now()
    )
    logger.info(f"Booked {venue.name} (ref {booking.reference})")
    return booking
