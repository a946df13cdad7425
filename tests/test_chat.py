"""
Tests for free-text chat processing.
"""

import pytest

from chat import (
    GUIDANCE_MESSAGE,
    build_chat_request,
    extract_budget,
    extract_event_type,
    extract_guest_count,
    is_event_request,
    process_user_message,
)
from models import GuestType, LocationType


class TestExtraction:

    def test_is_event_request(self):
        assert is_event_request("Can you help me ORGANIZE something?")
        assert not is_event_request("hello there")

    def test_event_type(self):
        assert extract_event_type("A Baby Shower next week") == "baby shower"
        assert extract_event_type("just a get-together") == ""

    def test_guest_count(self):
        assert extract_guest_count("about 40 people") == 40
        assert extract_guest_count("30guests") == 30
        assert extract_guest_count("a few friends") == 20

    def test_budget(self):
        assert extract_budget("we have 750 dollars") == 750
        assert extract_budget("no idea") == 500

    def test_chat_request_defaults(self):
        request = build_chat_request("Plan a wedding for 80 guests")
        assert request.event_type == "wedding"
        assert request.name == "wedding"
        assert request.guests == 80
        assert request.budget == 500
        assert request.location == LocationType.VENUE
        assert request.guest_type == GuestType.ADULTS
        assert request.currency == "USD"

    def test_kids_switch_guest_type(self):
        request = build_chat_request("party for the kids")
        assert request.guest_type == GuestType.CHILDREN
        assert request.event_type == "Event"


class TestProcessUserMessage:

    @pytest.mark.asyncio
    async def test_guidance_for_non_planning_message(self):
        reply = await process_user_message("hello there", delay=0)
        assert reply.response == GUIDANCE_MESSAGE
        assert reply.plan is None

    @pytest.mark.asyncio
    async def test_planning_message_returns_plan(self):
        reply = await process_user_message(
            "Plan a birthday for 12 guests with 300 dollars, she loves dinosaurs",
            delay=0,
        )
        assert reply.plan is not None
        assert reply.plan.plans[0].theme == "Dinosaur"
        assert reply.plan.budget_breakdown.food == 120
        assert reply.response.startswith(
            "I've created an event plan based on a Dinosaur theme!"
        )
        assert "specific theme or style" in reply.response

    @pytest.mark.asyncio
    async def test_asks_for_event_type_when_missing(self):
        reply = await process_user_message("plan something with a space theme", delay=0)
        assert "what type of event" in reply.response

    @pytest.mark.asyncio
    async def test_offers_invitation_when_theme_given(self):
        reply = await process_user_message(
            "plan a wedding with a magic theme", delay=0
        )
        assert "invitation I've designed" in reply.response
