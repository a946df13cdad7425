"""
Invitation text generator.

Placeholders such as [Insert Location] are left in the text on purpose;
the host fills them in after copying or downloading the invitation.
"""

from datetime import datetime
from types import MappingProxyType

INVITATION_TEMPLATES = MappingProxyType({
    "superhero": """CALLING ALL SUPERHEROES!

Your presence is requested for a SUPER {event_type}!
{event_name}

Join us for epic adventures, heroic games, and super treats.
Don't forget your superhero costume!

DATE: {date}
TIME: {time}
LOCATION: [Insert Location]

RSVP to {host_name} by [Insert RSVP Date]

With great power comes great {event_type_lower} parties!""",

    "princess": """🌟 ROYAL INVITATION 🌟

By royal decree, you are cordially invited to
{event_name}
A Royal {event_type} Celebration!

There will be royal activities, magical moments, and delicious treats
fit for royalty!

DATE: {date}
TIME: {time}
CASTLE LOCATION: [Insert Location]

Please RSVP to the Royal Messenger ({host_name}) by [Insert RSVP Date]

Attire: Your most royal outfits are encouraged!""",

    "sports": """GAME ON! 🏆

{event_name}
A CHAMPIONSHIP {event_type_upper}!

Join our all-star lineup for games, competitions, and sports-themed fun!
Come dressed in your favorite sports gear and ready to play!

WHEN: {date} at {time}
WHERE: [Insert Location]

RSVP to Coach {host_name} by [Insert RSVP Date]

Don't miss this winning celebration!""",

    "space": """🚀 MISSION TO CELEBRATE 🚀

ATTENTION ALL ASTRONAUTS!
{event_name}
A Cosmic {event_type}!

Join us for an interstellar celebration with cosmic games,
space-themed treats, and out-of-this-world fun!

LAUNCH DATE: {date}
COUNTDOWN BEGINS: {time}
MISSION CONTROL: [Insert Location]

RSVP to Ground Control ({host_name}) at [Contact] by [Insert RSVP Date]

Space attire encouraged but not required!""",

    "dinosaur": """ROAR! You're invited to a DINO-MITE celebration!

{event_name}
A Prehistoric {event_type}!

Stomp on over for prehistoric fun, fossil hunting, and jurassic treats!

DATE: {date}
TIME: {time}
EXCAVATION SITE: [Insert Location]

RSVP to {host_name} by [Insert RSVP Date]

Dinosaur costumes and explorer gear welcome!""",
})

DEFAULT_TEMPLATE = """You're Invited!

Please join us to celebrate
{event_name}
A special {event_type}!

Hosted by: {host_name}

DATE: {date}
TIME: {time}
LOCATION: [Insert Location]

RSVP to {host_name} by [Insert RSVP Date]

We can't wait to celebrate with you!"""

# Fixed en-US names so output does not depend on the process locale
_WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)
_MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def format_event_date(date: datetime) -> str:
    """Format as e.g. 'Saturday, November 14, 2026'."""
    return (
        f"{_WEEKDAYS[date.weekday()]}, "
        f"{_MONTHS[date.month - 1]} {date.day}, {date.year}"
    )


def format_event_time(date: datetime) -> str:
    """Format as e.g. '3:00 PM'."""
    hour = date.hour % 12 or 12
    suffix = "AM" if date.hour < 12 else "PM"
    return f"{hour}:{date.minute:02d} {suffix}"


def generate_invitation_text(
    event_name: str,
    host_name: str,
    event_type: str,
    theme: str,
    date: datetime,
) -> str:
    """
    Render the invitation for a theme.

    Args:
        event_name: Name of the person or event being celebrated
        host_name: Who guests should RSVP to
        event_type: Birthday, Wedding, ...
        theme: Selected theme; five themes have their own template
        date: Event date and time

    Returns:
        Invitation text with location and RSVP placeholders left as-is
    """
    template = INVITATION_TEMPLATES.get((theme or "").lower(), DEFAULT_TEMPLATE)
    return template.format(
        event_name=event_name,
        host_name=host_name,
        event_type=event_type,
        event_type_lower=event_type.lower(),
        event_type_upper=event_type.upper(),
        date=format_event_date(date),
        time=format_event_time(date),
    )
