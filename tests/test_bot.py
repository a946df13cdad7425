"""
Tests for the Telegram handlers with mocked Telegram objects.
"""

import dataclasses
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import bot
import storage
from booking import AMENITIES
from exceptions import PlanGenerationError
from models import BotState, ChatReply, VenueDetails
from services import assemble_plan


@pytest.fixture(autouse=True)
def empty_store():
    storage._sessions.clear()
    yield
    storage._sessions.clear()


@pytest.fixture
def context():
    return MagicMock()


@pytest.fixture
def plan_data(sample_request):
    return assemble_plan(sample_request)


@pytest.fixture
def reviewing_session(sample_request, plan_data):
    """A session showing freshly generated plans."""
    session = storage.get_session(1)
    session.request = sample_request
    session.plan_data = plan_data
    session.state = BotState.REVIEWING_PLANS
    return session


def make_update(text="", chat_id=1):
    update = MagicMock()
    update.effective_chat.id = chat_id
    update.message.text = text
    status_msg = MagicMock()
    status_msg.delete = AsyncMock()
    update.message.reply_text = AsyncMock(return_value=status_msg)
    update.message.reply_document = AsyncMock()
    return update


def make_callback(data, chat_id=1):
    query = MagicMock()
    query.data = data
    query.message.chat_id = chat_id
    query.answer = AsyncMock()
    query.edit_message_text = AsyncMock()
    query.message.reply_text = AsyncMock()
    query.message.reply_document = AsyncMock()
    query.message.reply_photo = AsyncMock()
    update = MagicMock()
    update.callback_query = query
    return update


def sent_texts(mock):
    return [call.args[0] for call in mock.call_args_list]


def step_index(field):
    return next(i for i, step in enumerate(bot.FORM_STEPS) if step.field == field)


def venue(name, available):
    return VenueDetails(
        name, "123 Main St, Austin", 700, 60, AMENITIES, "phone", available
    )


class TestWizard:

    @pytest.mark.asyncio
    async def test_plan_starts_form(self, context):
        update = make_update()
        await bot.plan(update, context)

        session = storage.get_session(1)
        assert session.state == BotState.FILLING_FORM
        assert session.form_step == 0
        assert "Question 1/17" in sent_texts(update.message.reply_text)[-1]

    @pytest.mark.asyncio
    async def test_invalid_answer_is_asked_again(self, context):
        await bot.plan(make_update(), context)

        update = make_update("B")
        await bot.handle_text(update, context)

        texts = sent_texts(update.message.reply_text)
        assert texts[0] == "❌ Event type must be specified."
        assert "Question 1/17" in texts[1]
        assert storage.get_session(1).form_step == 0

    @pytest.mark.asyncio
    async def test_valid_answer_advances(self, context):
        await bot.plan(make_update(), context)

        update = make_update("  Birthday ")
        await bot.handle_text(update, context)

        session = storage.get_session(1)
        assert session.form_step == 1
        assert session.form_data["event_type"] == "Birthday"
        assert "Question 2/17" in sent_texts(update.message.reply_text)[-1]

    @pytest.mark.asyncio
    async def test_required_question_cannot_be_skipped(self, context):
        await bot.plan(make_update(), context)

        update = make_update("/skip")
        await bot.skip(update, context)

        assert "required" in sent_texts(update.message.reply_text)[0]
        assert storage.get_session(1).form_step == 0

    @pytest.mark.asyncio
    async def test_optional_question_can_be_skipped(self, context):
        await bot.plan(make_update(), context)
        session = storage.get_session(1)
        session.form_step = step_index("age")

        await bot.skip(make_update("/skip"), context)

        assert session.form_data["age"] == ""
        assert session.form_step == step_index("age") + 1

    @pytest.mark.asyncio
    async def test_choice_button_answers_question(self, context):
        await bot.plan(make_update(), context)
        session = storage.get_session(1)
        session.form_step = step_index("guest_type")

        await bot.handle_callback(make_callback("gt_children"), context)

        assert session.form_data["guest_type"] == "children"
        assert session.form_step == step_index("guest_type") + 1

    @pytest.mark.asyncio
    async def test_stale_choice_button_is_ignored(self, context):
        await bot.plan(make_update(), context)

        update = make_callback("loc_home")
        await bot.handle_callback(update, context)

        update.callback_query.answer.assert_awaited_once_with(
            "That question was already answered."
        )
        assert storage.get_session(1).form_step == 0

    @pytest.mark.asyncio
    async def test_last_answer_generates_plans(self, context, raw_answers, plan_data):
        session = storage.get_session(1)
        session.state = BotState.FILLING_FORM
        session.form_data = {
            k: v for k, v in raw_answers.items() if k != "additional_details"
        }
        session.form_step = len(bot.FORM_STEPS) - 1

        update = make_update("Bring sunscreen")
        with patch("bot.generate_plan", AsyncMock(return_value=plan_data)) as gen:
            await bot.handle_text(update, context)

        request = gen.await_args.args[0]
        assert request.city == "Austin"
        assert request.additional_details == "Bring sunscreen"
        assert session.state == BotState.REVIEWING_PLANS
        assert session.plan_data is plan_data
        last_call = update.message.reply_text.call_args
        assert "Space Birthday Experience" in last_call.args[0]
        assert last_call.kwargs["reply_markup"] is not None

    @pytest.mark.asyncio
    async def test_generation_failure_resets_state(self, context, raw_answers):
        session = storage.get_session(1)
        session.state = BotState.FILLING_FORM
        session.form_data = dict(raw_answers)
        session.form_step = len(bot.FORM_STEPS) - 1

        update = make_update("nothing else")
        failing = AsyncMock(side_effect=PlanGenerationError("boom"))
        with patch("bot.generate_plan", failing):
            await bot.handle_text(update, context)

        assert session.state == BotState.IDLE
        assert sent_texts(update.message.reply_text)[-1].startswith(
            "❌ Failed to generate event plans."
        )


class TestResults:

    @pytest.mark.asyncio
    async def test_switch_tab(self, context, sample_request):
        session = storage.get_session(1)
        session.request = sample_request
        session.plan_data = assemble_plan(
            dataclasses.replace(sample_request, interests="space and music")
        )
        session.state = BotState.REVIEWING_PLANS

        update = make_callback("plan_1")
        await bot.handle_callback(update, context)

        assert session.selected_plan == 1
        text = update.callback_query.edit_message_text.call_args.args[0]
        assert "Music Birthday Experience" in text

    @pytest.mark.asyncio
    async def test_section_shows_items(self, context, reviewing_session):
        update = make_callback("sec_venues")
        await bot.handle_callback(update, context)

        text = update.callback_query.edit_message_text.call_args.args[0]
        assert "Local park in Austin" in text

    @pytest.mark.asyncio
    async def test_json_download(self, context, reviewing_session):
        update = make_callback("dl_json")
        await bot.handle_callback(update, context)

        kwargs = update.callback_query.message.reply_document.call_args.kwargs
        assert kwargs["filename"] == "party_plan.json"
        assert b'"invitationText"' in kwargs["document"]

    @pytest.mark.asyncio
    async def test_text_download(self, context, reviewing_session):
        update = make_callback("dl_txt")
        await bot.handle_callback(update, context)

        kwargs = update.callback_query.message.reply_document.call_args.kwargs
        assert kwargs["filename"] == "Space_Event_Plan.txt"

    @pytest.mark.asyncio
    async def test_invitation_text(self, context, reviewing_session, plan_data):
        update = make_callback("inv_text")
        await bot.handle_callback(update, context)

        message = update.callback_query.message
        message.reply_text.assert_awaited_once_with(plan_data.invitation_text)
        assert message.reply_document.call_args.kwargs["filename"] == "invitation.txt"

    @pytest.mark.asyncio
    async def test_results_need_plans(self, context):
        update = make_callback("sec_food")
        await bot.handle_callback(update, context)

        update.callback_query.answer.assert_awaited_once_with(
            bot.START_OVER, show_alert=True
        )


class TestBudgetOptimizer:

    @pytest.mark.asyncio
    async def test_adjust_and_save(self, context, reviewing_session):
        session = reviewing_session

        await bot.handle_callback(make_callback("bud_open"), context)
        assert session.state == BotState.ADJUSTING_BUDGET
        assert session.draft_budget.food == 400

        await bot.handle_callback(make_callback("bud_inc_food"), context)
        await bot.handle_callback(make_callback("bud_dec_misc"), context)
        assert session.draft_budget.food == 410
        assert session.draft_budget.misc == 90

        await bot.handle_callback(make_callback("bud_save"), context)
        assert session.state == BotState.REVIEWING_PLANS
        assert session.optimized_budget.food == 410
        assert session.draft_budget is None
        # Generated plans are left untouched
        assert session.plan_data.budget_breakdown.food == 400

    @pytest.mark.asyncio
    async def test_cancel_discards_changes(self, context, reviewing_session):
        session = reviewing_session

        await bot.handle_callback(make_callback("bud_open"), context)
        await bot.handle_callback(make_callback("bud_inc_venue"), context)
        await bot.handle_callback(make_callback("bud_cancel"), context)

        assert session.optimized_budget is None
        assert session.state == BotState.REVIEWING_PLANS

    @pytest.mark.asyncio
    async def test_cap_reached(self, context, reviewing_session):
        session = reviewing_session
        await bot.handle_callback(make_callback("bud_open"), context)
        session.draft_budget = bot.adjust_allocation(
            session.draft_budget, "misc", 300, 1000
        )

        update = make_callback("bud_inc_misc")
        await bot.handle_callback(update, context)

        assert session.draft_budget.misc == 300
        update.callback_query.answer.assert_awaited_once_with(
            "That's as far as this one goes."
        )


class TestVenueBooking:

    @pytest.mark.asyncio
    async def test_select_and_book(self, context, reviewing_session):
        session = reviewing_session
        options = [venue("Park", True), venue("Hall", False)]

        with patch("bot.list_venue_details", return_value=options):
            await bot.handle_callback(make_callback("ven_open"), context)
        assert session.state == BotState.SELECTING_VENUE

        update = make_callback("ven_sel_1")
        await bot.handle_callback(update, context)
        assert session.selected_venue is None
        update.callback_query.answer.assert_awaited_once_with(
            "Sorry, this venue is not available.", show_alert=True
        )

        await bot.handle_callback(make_callback("ven_sel_0"), context)
        assert session.selected_venue == 0

        await bot.handle_callback(make_callback("ven_book"), context)
        assert session.booking.venue.name == "Park"
        assert session.state == BotState.REVIEWING_PLANS

    @pytest.mark.asyncio
    async def test_book_without_selection(self, context, reviewing_session):
        with patch("bot.list_venue_details", return_value=[venue("Park", True)]):
            await bot.handle_callback(make_callback("ven_open"), context)

        update = make_callback("ven_book")
        await bot.handle_callback(update, context)

        assert reviewing_session.booking is None
        update.callback_query.answer.assert_awaited_once_with(
            "Select a venue first.", show_alert=True
        )


class TestChatMode:

    @pytest.mark.asyncio
    async def test_chat_reply_with_plan(self, context, plan_data):
        await bot.chat_cmd(make_update("/chat"), context)
        session = storage.get_session(1)
        assert session.state == BotState.CHATTING

        reply = ChatReply(response="Here you go", plan=plan_data)
        update = make_update("plan a party")
        with patch("bot.process_user_message", AsyncMock(return_value=reply)):
            await bot.handle_text(update, context)

        assert session.plan_data is plan_data
        assert session.request is None
        last_call = update.message.reply_text.call_args
        assert last_call.args[0] == "Here you go"
        assert last_call.kwargs["reply_markup"] is not None

    @pytest.mark.asyncio
    async def test_chat_budget_returns_to_chat(self, context, plan_data):
        session = storage.get_session(1)
        session.state = BotState.CHATTING
        session.plan_data = plan_data

        await bot.handle_callback(make_callback("bud_open"), context)
        await bot.handle_callback(make_callback("bud_save"), context)

        assert session.state == BotState.CHATTING

    @pytest.mark.asyncio
    async def test_chat_failure(self, context):
        session = storage.get_session(1)
        session.state = BotState.CHATTING

        update = make_update("plan a party")
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        with patch("bot.process_user_message", failing):
            await bot.handle_text(update, context)

        assert sent_texts(update.message.reply_text)[-1] == (
            "❌ Failed to generate a response. Please try again."
        )


@pytest.mark.asyncio
async def test_cancel_clears_session(context, reviewing_session):
    await bot.cancel(make_update("/cancel"), context)
    assert storage.get_session(1).state == BotState.IDLE
    assert storage.get_session(1).plan_data is None
