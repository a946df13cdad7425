"""
Downloadable plan reports and message chunking.
"""

import json
import textwrap

from config import CHUNK_LEN
from models import BudgetBreakdown, PartyPlanData, ThemePlan


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def format_plan_report(plan: ThemePlan, invitation_text: str) -> str:
    """
    Render one plan as the Markdown-like text report.

    Sections: Description, Theme, Activities, Food Ideas, Drink Ideas,
    Decorations, Venue Suggestions, Budget, Invitation.
    """
    return (
        f"# {plan.title}\n\n"
        f"## Description\n{plan.description}\n\n"
        f"## Theme\n{plan.theme}\n\n"
        f"## Activities\n{_bullets(plan.activities)}\n\n"
        f"## Food Ideas\n{_bullets(plan.food_ideas)}\n\n"
        f"## Drink Ideas\n{_bullets(plan.drink_ideas)}\n\n"
        f"## Decorations\n{_bullets(plan.decorations)}\n\n"
        f"## Venue Suggestions\n{_bullets(plan.venues)}\n\n"
        f"## Budget\nEstimated Cost: {plan.estimated_cost}\n\n"
        f"## Invitation\n{invitation_text}\n"
    )


def format_budget(breakdown: BudgetBreakdown, currency: str) -> str:
    labels = {
        "food": "Food & Beverages",
        "venue": "Venue",
        "activities": "Activities & Entertainment",
        "decorations": "Decorations",
        "misc": "Miscellaneous",
    }
    lines = [
        f"{labels[name]}: {currency} {amount}"
        for name, amount in breakdown.as_dict().items()
    ]
    lines.append(f"Total: {currency} {breakdown.total}")
    return "\n".join(lines)


def plan_to_json(data: PartyPlanData) -> str:
    """Raw JSON dump of the full result."""
    return json.dumps(data.to_dict(), indent=2, ensure_ascii=False)


def report_filename(plan: ThemePlan) -> str:
    return f"{plan.theme}_Event_Plan.txt"


def split_into_chunks(text: str, max_len: int = CHUNK_LEN) -> list[str]:
    """
    Split text into chunks not exceeding max_len,
    preferably at paragraph breaks.
    """
    if len(text) <= max_len:
        return [text]

    paragraphs = text.split("\n\n")
    chunks = []
    current = ""

    for p in paragraphs:
        candidate = (current + "\n\n" + p).strip() if current else p
        if len(candidate) <= max_len:
            current = candidate
        else:
            if current:
                chunks.append(current)

            if len(p) > max_len:
                wrapped = textwrap.wrap(
                    p,
                    width=max_len,
                    replace_whitespace=False,
                    drop_whitespace=False
                )
                chunks.extend(wrapped[:-1])
                current = wrapped[-1] if wrapped else ""
            else:
                current = p
    if current:
        chunks.append(current)
    return chunks
