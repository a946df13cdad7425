"""
Venue suggestions by location type and theme.
"""

from types import MappingProxyType
from typing import Union

from models import LocationType

# location type -> theme (lower-case) or "default" -> venues.
# "{city}" is filled in at lookup time.
_LOCATION_VENUES = {
    "home": {
        "default": (
            "Living room transformed with themed decorations",
            "Backyard with canopy and lighting",
            "Garage converted to themed space",
            "Basement entertainment area",
        ),
    },
    "outdoors": {
        "default": (
            "Local park in {city}",
            "Public beach area with permit",
            "Botanical gardens",
            "Community sports field",
        ),
    },
    "venue": {
        "party": (
            "{city} Party Hall",
            "Local community center",
            "Hotel event space",
            "Restaurant private room",
        ),
        "wedding": (
            "Elegant hotel ballroom",
            "Historic mansion",
            "Scenic vineyard",
            "Boutique event space",
        ),
        "corporate": (
            "Conference center",
            "Hotel meeting rooms",
            "Co-working space event area",
            "Business center",
        ),
    },
    "restaurant": {
        "default": (
            "Trendy restaurant with private dining",
            "Sports bar with event space",
            "Family-friendly restaurant",
            "Themed restaurant matching event",
        ),
    },
}
LOCATION_VENUES = MappingProxyType({
    location: MappingProxyType(by_theme)
    for location, by_theme in _LOCATION_VENUES.items()
})

GENERIC_VENUES = (
    "Venue in {city}",
    "Local event space",
    "Community center",
    "Hotel event room",
)


def generate_venue_suggestions(
    theme: str,
    location: Union[LocationType, str],
    city: str = "",
) -> list[str]:
    """
    Suggest venues for a theme at the given kind of location.

    Looks up the location type, then the theme inside it, then that
    location's "default" entry. Anything else gets the generic list.
    """
    location_key = (
        location.value if isinstance(location, LocationType) else str(location)
    ).lower()
    city = city or "Local"

    by_theme = LOCATION_VENUES.get(location_key, {})
    venues = (
        by_theme.get((theme or "").lower())
        or by_theme.get("default")
        or GENERIC_VENUES
    )
    return [venue.format(city=city) for venue in venues]
