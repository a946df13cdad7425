"""
Activity suggestions by theme, guest type and age.
"""

from types import MappingProxyType
from typing import Optional

from generators.themes import lookup

THEME_ACTIVITIES = MappingProxyType({
    "Superhero": (
        "Superhero costume contest",
        "Superhero training obstacle course",
        "Create your own superhero identity cards",
        "Superhero movie marathon",
    ),
    "Princess": (
        "Royal makeover station",
        "Decorate tiaras and crowns",
        "Royal tea party",
        "Princess dance competition",
    ),
    "Sports": (
        "Mini tournament of favorite sport",
        "Sports-themed relay races",
        "Medal ceremony for winners",
        "Sports trivia game",
    ),
    "Space": (
        "Build and launch mini rockets",
        "Create alien crafts",
        "Space-themed scavenger hunt",
        "Glow-in-the-dark games",
    ),
    "Dinosaur": (
        "Dinosaur egg hunt",
        "Dino fossil excavation",
        "Create dinosaur crafts",
        "Dinosaur-themed games",
    ),
    "Gaming": (
        "Video game tournament",
        "Create a real-life version of a video game",
        "Gaming trivia contest",
        "Board game competition",
    ),
    "Art": (
        "Paint and sip (juice for kids)",
        "Collaborative mural creation",
        "Art contest with prizes",
        "Craft stations with different art styles",
    ),
    "Music": (
        "Karaoke contest",
        "Musical chairs",
        "Create a birthday song",
        "Dance competition",
    ),
    "Animals": (
        "Animal face painting",
        "Create animal masks",
        "Animal-themed games",
        "Mini petting zoo (if budget allows)",
    ),
    "Ocean": (
        "Underwater treasure hunt",
        "Create ocean crafts",
        "Water balloon games",
        "Mermaid/pirate makeovers",
    ),
    "Magic": (
        "Magic show (professional or DIY)",
        "Learn simple magic tricks",
        "Potion making (mixed drinks)",
        "Magic-themed scavenger hunt",
    ),
    "Science": (
        "Fun science experiments",
        "Create slime or other compounds",
        "Science trivia game",
        "Build and test simple machines",
    ),
    "Wedding": (
        "First dance and open dance floor",
        "Cocktail hour with live music",
        "Guest book and photo station",
        "Wine toast for the couple",
    ),
    "Corporate": (
        "Team-building challenge",
        "Networking cocktail reception",
        "Awards and recognition segment",
        "Keynote with Q&A",
    ),
    "Formal": (
        "Cocktail reception",
        "Wine pairing dinner",
        "Live string quartet",
        "Ballroom dancing",
    ),
    "Graduation": (
        "Cap decorating station",
        "Memory slideshow",
        "Advice cards for the graduate",
        "Photo booth with diploma props",
    ),
})

DEFAULT_ACTIVITIES = (
    "Birthday cake and presents",
    "Musical chairs",
    "Scavenger hunt",
    "Dance party",
)

# (upper age bound inclusive, activities); the last band is open-ended
AGE_BANDS = (
    (3, (
        "Sensory play stations",
        "Soft play area",
        "Bubble machine fun",
        "Music and movement time",
    )),
    (7, (
        "Treasure hunt",
        "Face painting",
        "Musical statues",
        "Simple craft station",
    )),
    (12, (
        "Scavenger hunt challenge",
        "DIY slime lab",
        "Relay races",
        "Karaoke contest",
    )),
    (19, (
        "Escape room challenge",
        "Photo booth with props",
        "Video game tournament",
        "DIY pizza making",
    )),
    (30, (
        "Themed trivia night",
        "Karaoke battle",
        "Lawn games tournament",
        "Cocktail mixing class",
    )),
    (50, (
        "Wine tasting",
        "Murder mystery dinner",
        "Live acoustic music",
        "Group cooking class",
    )),
    (None, (
        "Memory lane slideshow",
        "Live jazz band",
        "Card and board game tables",
        "Dancing to classic hits",
    )),
)

KID_SAFE_REPLACEMENT = "Juice bar with kid-friendly mocktails"
KID_EXTRA_ACTIVITIES = (
    "Face painting station",
    "Balloon animal artist",
)
_ADULT_KEYWORDS = ("cocktail", "wine")


def activities_for_age(age: int) -> tuple[str, ...]:
    """Return the fixed activity list for the age band containing age."""
    for upper, activities in AGE_BANDS:
        if upper is None or age <= upper:
            return activities
    return AGE_BANDS[-1][1]


def generate_activities(
    theme: str, is_kid: bool, age: Optional[int] = None
) -> list[str]:
    """
    Build the activity list for a plan.

    An explicit age wins over everything else and ignores the theme.
    Without one, the theme table is used, and for kids any drinking
    activity is swapped for a juice bar and two kid activities are added
    after the first three theme activities (five at most).
    """
    if age is not None:
        return list(activities_for_age(age))

    activities = list(lookup(THEME_ACTIVITIES, theme, DEFAULT_ACTIVITIES))

    if is_kid:
        activities = [
            KID_SAFE_REPLACEMENT
            if any(word in item.lower() for word in _ADULT_KEYWORDS)
            else item
            for item in activities[:3]
        ]
        activities.extend(KID_EXTRA_ACTIVITIES)

    return activities
