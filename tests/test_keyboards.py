"""
Tests for inline keyboard builders.
"""

import dataclasses

from booking import AMENITIES
from generators import allocate_budget
from keyboards import (
    build_budget_keyboard,
    build_choice_keyboard,
    build_results_keyboard,
    build_venue_keyboard,
)
from models import LocationType, VenueDetails
from services import assemble_plan


def callbacks(markup):
    return [
        [button.callback_data for button in row]
        for row in markup.inline_keyboard
    ]


def test_choice_keyboard():
    rows = callbacks(build_choice_keyboard(LocationType, "loc", skippable=True))
    assert rows[0] == ["loc_home", "loc_outdoors"]
    assert rows[-1] == ["form_skip"]
    assert sum(len(row) for row in rows) == len(LocationType) + 1


def test_results_keyboard_marks_selected_tab(sample_request):
    request = dataclasses.replace(sample_request, interests="space and music")
    markup = build_results_keyboard(assemble_plan(request), selected=1)

    tabs = markup.inline_keyboard[0]
    assert [b.callback_data for b in tabs] == ["plan_0", "plan_1"]
    assert tabs[1].text == "✅ Music"
    assert tabs[0].text == "Space"

    flat = [data for row in callbacks(markup) for data in row]
    for action in ("sec_food", "inv_text", "bud_open", "ven_open", "dl_json", "restart"):
        assert action in flat


def test_budget_keyboard():
    rows = callbacks(build_budget_keyboard(allocate_budget(500), "USD"))
    assert rows[0] == ["bud_dec_food", "bud_noop", "bud_inc_food"]
    assert rows[-1] == ["bud_save", "bud_cancel"]


def test_venue_keyboard_icons():
    def venue(name, available):
        return VenueDetails(name, "addr", 600, 60, AMENITIES, "phone", available)

    venues = [venue("A", True), venue("B", False), venue("C", True)]

    markup = build_venue_keyboard(venues, selected=None)
    texts = [row[0].text for row in markup.inline_keyboard[:3]]
    assert texts == ["⬜ A", "🚫 B", "⬜ C"]
    assert callbacks(markup)[-1] == ["ven_back"]

    markup = build_venue_keyboard(venues, selected=2)
    assert markup.inline_keyboard[2][0].text == "✅ C"
    assert callbacks(markup)[-1] == ["ven_book", "ven_back"]
