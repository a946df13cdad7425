"""
Inline keyboard builders for the Party Planner Bot.
"""

from enum import Enum
from typing import Optional, Type

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models import BudgetBreakdown, PartyPlanData, VenueDetails

SECTIONS = {
    "activities": "🎯 Activities",
    "food": "🍕 Food",
    "drinks": "🥤 Drinks",
    "decorations": "🎈 Decor",
    "venues": "🏛️ Venues",
}

BUDGET_LABELS = {
    "food": "Food",
    "venue": "Venue",
    "activities": "Activities",
    "decorations": "Decor",
    "misc": "Misc",
}


def build_choice_keyboard(
    choices: Type[Enum], prefix: str, skippable: bool = False
) -> InlineKeyboardMarkup:
    """
    Build a two-column keyboard with one button per enum member.

    Args:
        choices: Enum whose values become the options
        prefix: Callback prefix, e.g. "gt" gives "gt_adults"
        skippable: Add a Skip button for optional questions

    Returns:
        InlineKeyboardMarkup with the options
    """
    buttons = [
        InlineKeyboardButton(
            member.value.capitalize(),
            callback_data=f"{prefix}_{member.value}"
        )
        for member in choices
    ]
    rows = [buttons[i:i + 2] for i in range(0, len(buttons), 2)]
    if skippable:
        rows.append([
            InlineKeyboardButton("⏭️ Skip", callback_data="form_skip")
        ])
    return InlineKeyboardMarkup(rows)


def build_skip_keyboard() -> InlineKeyboardMarkup:
    """Single Skip button for optional wizard questions."""
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("⏭️ Skip", callback_data="form_skip")
    ]])


def build_results_keyboard(
    plan_data: PartyPlanData, selected: int
) -> InlineKeyboardMarkup:
    """
    Build the results keyboard: one tab per theme plus plan actions.

    Args:
        plan_data: Generated plans
        selected: Index of the plan currently shown

    Returns:
        InlineKeyboardMarkup with tabs, sections and actions
    """
    tabs = [
        InlineKeyboardButton(
            f"{'✅ ' if i == selected else ''}{plan.theme}",
            callback_data=f"plan_{i}"
        )
        for i, plan in enumerate(plan_data.plans)
    ]

    section_buttons = [
        InlineKeyboardButton(label, callback_data=f"sec_{name}")
        for name, label in SECTIONS.items()
    ]

    return InlineKeyboardMarkup([
        tabs,
        section_buttons[:3],
        section_buttons[3:],
        [
            InlineKeyboardButton("💌 Invitation", callback_data="inv_text"),
            InlineKeyboardButton("🖼️ Invitation Image", callback_data="inv_img"),
        ],
        [
            InlineKeyboardButton("💰 Budget", callback_data="bud_open"),
            InlineKeyboardButton("📍 Book a Venue", callback_data="ven_open"),
        ],
        [
            InlineKeyboardButton("📄 Download Plan", callback_data="dl_txt"),
            InlineKeyboardButton("🧾 Download JSON", callback_data="dl_json"),
        ],
        [InlineKeyboardButton("🔄 Start Over", callback_data="restart")],
    ])


def build_budget_keyboard(
    breakdown: BudgetBreakdown, currency: str
) -> InlineKeyboardMarkup:
    """
    Build the budget slider keyboard.

    Each category gets a row of [-] [label amount] [+].
    """
    keyboard = []
    amounts = breakdown.as_dict()

    for name, label in BUDGET_LABELS.items():
        keyboard.append([
            InlineKeyboardButton("➖", callback_data=f"bud_dec_{name}"),
            InlineKeyboardButton(
                f"{label}: {currency} {amounts[name]}",
                callback_data="bud_noop"
            ),
            InlineKeyboardButton("➕", callback_data=f"bud_inc_{name}"),
        ])

    keyboard.append([
        InlineKeyboardButton("💾 Save Budget Plan", callback_data="bud_save"),
        InlineKeyboardButton("❌ Cancel", callback_data="bud_cancel"),
    ])
    return InlineKeyboardMarkup(keyboard)


def build_venue_keyboard(
    venues: list[VenueDetails], selected: Optional[int]
) -> InlineKeyboardMarkup:
    """
    Build venue selection keyboard.

    Unavailable venues are marked and cannot be selected.
    """
    keyboard = []

    for i, venue in enumerate(venues):
        if not venue.availability:
            icon = "🚫"
        elif i == selected:
            icon = "✅"
        else:
            icon = "⬜"
        keyboard.append([
            InlineKeyboardButton(
                f"{icon} {venue.name}", callback_data=f"ven_sel_{i}"
            )
        ])

    actions = []
    if selected is not None:
        actions.append(
            InlineKeyboardButton("📅 Book Venue", callback_data="ven_book")
        )
    actions.append(
        InlineKeyboardButton("⬅️ Back to Plans", callback_data="ven_back")
    )
    keyboard.append(actions)

    return InlineKeyboardMarkup(keyboard)
