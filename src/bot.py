"""
Party Planner Bot - Entry Point and Handlers.

A Telegram bot that helps plan parties and events.
Plans come from the local content generators; no external AI is called.
"""  # Noqa: E501

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type

from telegram import Update, Message
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
    MessageHandler,
    filters,
    ContextTypes
)
from telegram.helpers import escape_markdown

from config import (
    TELEGRAM_BOT_TOKEN,
    TELEGRAM_MAX_LEN,
    BUDGET_STEP,
    LOG_LEVEL
)
from booking import book_venue, list_venue_details
from chat import WELCOME_MESSAGE, process_user_message
from exceptions import RequestValidationError, VenueUnavailableError
from generators import (
    generate_invitation_image,
    adjust_allocation,
    savings_suggestions
)
from models import BotState, GuestType, LocationType, ThemePlan, UserSession
from reports import (
    format_budget,
    format_plan_report,
    plan_to_json,
    report_filename,
    split_into_chunks
)
from services import generate_plan
from storage import get_session, save_session, clear_session
from validation import build_event_request, is_optional, validate_field
from keyboards import (
    build_choice_keyboard,
    build_skip_keyboard,
    build_results_keyboard,
    build_budget_keyboard,
    build_venue_keyboard
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=LOG_LEVEL
)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormStep:
    """One question of the /plan wizard."""
    field: str
    prompt: str
    choices: Optional[Type[Enum]] = None
    prefix: str = ""


FORM_STEPS = (
    FormStep(
        "event_type",
        "🎉 What type of event are you planning?\n"
        "(e.g. Birthday, Wedding, Corporate)"
    ),
    FormStep(
        "name", "🙋 Who is the event for? (guest of honor or event name)"
    ),
    FormStep("age", "🎂 How old will they be?"),
    FormStep("host_name", "🏠 Who is hosting? (guests RSVP to them)"),
    FormStep("date", "📅 When is it? (e.g. 2026-11-14 15:00)"),
    FormStep("guests", "👥 How many guests do you expect?"),
    FormStep("guest_type", "🧑‍🤝‍🧑 Who are the guests?", GuestType, "gt"),
    FormStep("budget", "💵 What's your total budget? (numbers only)"),
    FormStep("currency", "💱 Which currency? (3-letter code, default USD)"),
    FormStep("location", "📍 Where will it take place?", LocationType, "loc"),
    FormStep("city", "🏙️ Which city?"),
    FormStep("country", "🌍 Which country?"),
    FormStep(
        "interests",
        "✨ What themes or interests should we include?\n"
        "(e.g. superheroes, space, music)"
    ),
    FormStep(
        "dietary_restrictions",
        "🥗 Any dietary restrictions? (e.g. vegetarian, vegan, gluten-free)"
    ),
    FormStep(
        "food_preferences", "🍕 Any food preferences? (comma-separated)"
    ),
    FormStep(
        "drink_preferences", "🥤 Any drink preferences? (comma-separated)"
    ),
    FormStep("additional_details", "📝 Anything else we should know?"),
)

START_OVER = "Please use /plan to start over."


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /start command - Welcome message.
    """
    await update.message.reply_text(
        "👋 Welcome to the Party Planner!\n\n"
        "I help you plan birthdays, weddings, corporate events and more: "
        "themes, activities, food, drinks, decorations, venues, a budget "
        "split and a ready-to-send invitation.\n\n"
        "🔹 /plan - Fill in a short form\n"
        "🔹 /chat - Just tell me about your event\n"
        "🔹 /help - See all commands\n\n"
        "Ready? Tap /plan to begin!"
    )


async def help_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /help command - Show available commands.
    """
    await update.message.reply_text(
        "📖 *Party Planner - Help*\n\n"
        "*Commands:*\n"
        "/start - Welcome message\n"
        "/plan - Start or restart the planning form\n"
        "/chat - Describe your event in your own words\n"
        "/skip - Skip an optional question\n"
        "/cancel - Stop and clear the current plan\n"
        "/help - Show this help message\n\n"
        "*How it works:*\n"
        "1️⃣ Answer a few questions about your event\n"
        "2️⃣ I suggest up to 3 themed plans\n"
        "3️⃣ Browse activities, food, drinks, decor and venues\n"
        "4️⃣ Tune the budget and book a venue\n"
        "5️⃣ Download the plan and invitation!\n\n"
        "💡 Tip: Use /plan anytime to start over.",
        parse_mode="Markdown"
    )


async def plan(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /plan command - Start or restart the planning form.

    This clears any existing session and restarts the wizard.
    """
    chat_id = update.effective_chat.id

    clear_session(chat_id)
    session = get_session(chat_id)

    await update.message.reply_text(
        "📝 Let's plan your event!\n\n"
        f"I'll ask {len(FORM_STEPS)} quick questions. "
        "Optional ones can be skipped with /skip."
    )

    await _start_form(update.message, session)


async def chat_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /chat command - Switch to free-text planning.
    """
    chat_id = update.effective_chat.id

    clear_session(chat_id)
    session = get_session(chat_id)
    session.state = BotState.CHATTING
    save_session(session)

    await update.message.reply_text(WELCOME_MESSAGE)
    logger.info(f"Chat {chat_id} switched to chat mode")


async def skip(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /skip command - Leave an optional wizard answer blank.
    """
    session = get_session(update.effective_chat.id)

    if session.state != BotState.FILLING_FORM:
        await update.message.reply_text("🤔 There's nothing to skip right now.")
        return

    step = FORM_STEPS[session.form_step]
    if not is_optional(step.field):
        await update.message.reply_text(
            "⚠️ This question is required, please answer it."
        )
        return

    session.form_data[step.field] = ""
    await _advance_form(update.message, session)


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /cancel command - Drop the session.
    """
    clear_session(update.effective_chat.id)
    await update.message.reply_text(
        "👋 Cancelled. Use /plan or /chat whenever you're ready."
    )


async def handle_callback(
    update: Update, context: ContextTypes.DEFAULT_TYPE
) -> None:
    """
    Handle inline buttons (callback queries).

    Callback data format:
    - gt_<guest type> / loc_<location> / form_skip - Wizard answers
    - plan_N - Switch to plan tab N
    - sec_<section> - Show a plan section
    - inv_text / inv_img - Invitation text / image
    - dl_txt / dl_json - Downloads
    - bud_open / bud_inc_X / bud_dec_X / bud_save / bud_cancel - Budget
    - ven_open / ven_sel_N / ven_book / ven_back - Venue booking
    - restart - Start the wizard again
    """
    query = update.callback_query

    chat_id = query.message.chat_id
    data = query.data
    session = get_session(chat_id)

    logger.info(
        f"Callback from {chat_id}: {data} "
        f"(state: {session.state.value})"
    )

    # Route to appropriate handler
    if data.startswith("gt_") or data.startswith("loc_"):
        await _handle_form_choice(query, session, data)
    elif data == "form_skip":
        await _handle_form_skip(query, session)
    elif data == "restart":
        await query.answer()
        clear_session(chat_id)
        await _start_form(query.message, get_session(chat_id))
        return
    elif data.startswith("bud_"):
        await _handle_budget_action(query, session, data)
    elif data.startswith("ven_"):
        await _handle_venue_action(query, session, data)
    elif data.startswith(("plan_", "sec_", "inv_", "dl_")):
        await _handle_results_action(query, session, data)
    else:
        await query.answer("Unknown action", show_alert=True)

    save_session(session)


async def handle_text(
    update: Update, context: ContextTypes.DEFAULT_TYPE
) -> None:
    """
    Handle text messages.
    Add handler AFTER command handlers to avoid conflicts.

    Used for:
    - Wizard answers (FILLING_FORM)
    - Free-text planning (CHATTING)
    """
    chat_id = update.effective_chat.id
    text = update.message.text
    session = get_session(chat_id)

    logger.info(
        f"Text from {chat_id}: {text[:40]}... (state: {session.state.value})"
    )

    if session.state == BotState.FILLING_FORM:
        await _handle_form_answer(update.message, session, text)
    elif session.state == BotState.CHATTING:
        await _handle_chat_message(update.message, session, text)
    elif session.state == BotState.IDLE:
        await update.message.reply_text(
            "👋 Hi! Use /plan to fill in the planning form, /chat to "
            "describe your event, or /help to see available commands."
        )
    elif session.state == BotState.GENERATING:
        await update.message.reply_text(
            "⏳ Still working on your plans, hang on a moment..."
        )
    elif session.state in (
        BotState.REVIEWING_PLANS,
        BotState.ADJUSTING_BUDGET,
        BotState.SELECTING_VENUE
    ):
        await update.message.reply_text(
            "👆 Please use the buttons above to browse your plans,\n"
            "or use /plan to start over."
        )
    else:
        await update.message.reply_text(
            f"🤔 I wasn't expecting text input right now.\n"
            f"Current state: {session.state.value}\n\n"
            "Use /plan to start over or /help for guidance."
        )

    save_session(session)


# === Wizard ===

async def _start_form(message: Message, session: UserSession) -> None:
    """
    Reset wizard progress and ask the first question.
    """
    session.state = BotState.FILLING_FORM
    session.form_step = 0
    session.form_data = {}
    save_session(session)

    await _ask_current_step(message, session)
    logger.info(f"Started planning form for chat {session.chat_id}")


async def _ask_current_step(message: Message, session: UserSession) -> None:
    step = FORM_STEPS[session.form_step]
    optional = is_optional(step.field)

    text = f"*Question {session.form_step + 1}/{len(FORM_STEPS)}*\n{step.prompt}"
    if optional:
        text += "\n\n(optional, tap Skip or send /skip)"

    if step.choices:
        keyboard = build_choice_keyboard(step.choices, step.prefix, optional)
    elif optional:
        keyboard = build_skip_keyboard()
    else:
        keyboard = None

    await message.reply_text(
        text,
        reply_markup=keyboard,
        parse_mode="Markdown"
    )


async def _handle_form_answer(
    message: Message, session: UserSession, text: str
) -> None:
    """
    Validate a typed answer and move on, or re-ask with the error.
    """
    step = FORM_STEPS[session.form_step]

    try:
        validate_field(step.field, text)
    except RequestValidationError as e:
        logger.info(f"Invalid answer for {step.field}: {e.message}")
        await message.reply_text(f"❌ {e.message}")
        await _ask_current_step(message, session)
        return

    session.form_data[step.field] = text.strip()
    await _advance_form(message, session)


async def _handle_form_choice(query, session: UserSession, data: str) -> None:
    """
    Handle a guest type / location button.
    """
    if session.state != BotState.FILLING_FORM:
        await query.answer(START_OVER, show_alert=True)
        return

    step = FORM_STEPS[session.form_step]
    prefix, _, value = data.partition("_")
    if prefix != step.prefix:
        await query.answer("That question was already answered.")
        return
    await query.answer()

    session.form_data[step.field] = value
    await query.edit_message_text(f"✅ {step.prompt}\n➡️ {value.capitalize()}")

    await _advance_form(query.message, session)


async def _handle_form_skip(query, session: UserSession) -> None:
    if session.state != BotState.FILLING_FORM:
        await query.answer(START_OVER, show_alert=True)
        return

    step = FORM_STEPS[session.form_step]
    if not is_optional(step.field):
        await query.answer("That question was already answered.")
        return
    await query.answer("Skipped")

    session.form_data[step.field] = ""
    await query.edit_message_text(f"⏭️ {step.prompt}\n➡️ Skipped")

    await _advance_form(query.message, session)


async def _advance_form(message: Message, session: UserSession) -> None:
    """
    Ask the next question, or build the request once all are answered.
    """
    session.form_step += 1
    save_session(session)

    if session.form_step < len(FORM_STEPS):
        await _ask_current_step(message, session)
        return

    try:
        session.request = build_event_request(session.form_data)
    except RequestValidationError as e:
        logger.warning(f"Form failed final validation on {e.field}: {e}")
        session.form_step = next(
            i for i, step in enumerate(FORM_STEPS) if step.field == e.field
        )
        save_session(session)
        await message.reply_text(f"❌ {e.message}")
        await _ask_current_step(message, session)
        return

    await _start_plan_generation(message, session)


# === Generation ===

async def _start_plan_generation(
    message: Message, session: UserSession
) -> None:
    """
    Generate plans and display the first one with the results keyboard.
    """
    session.state = BotState.GENERATING
    save_session(session)

    request = session.request
    status_msg = await message.reply_text(
        "⏳ *Generating your event plans...*\n\n"
        "I'm considering:\n"
        f"• Your interests: {escape_markdown(request.interests)}\n"
        f"• {request.guests} {request.guest_type.value} guests\n"
        f"• A budget of {request.currency} {request.budget:g}\n\n"
        "_This may take a moment..._",
        parse_mode="Markdown"
    )

    try:
        plan_data = await generate_plan(request)
    except Exception as e:
        logger.error(f"Error generating plans: {e}")
        session.state = BotState.IDLE
        save_session(session)

        await message.reply_text(
            "❌ Failed to generate event plans. Please try again with /plan."
        )
        return

    session.plan_data = plan_data
    session.selected_plan = 0
    session.optimized_budget = None
    session.state = BotState.REVIEWING_PLANS
    save_session(session)

    try:
        await status_msg.delete()
    except Exception as e:
        logger.debug(f"Could not delete status message: {e}")

    await message.reply_text(
        _format_plan_overview(session),
        reply_markup=build_results_keyboard(plan_data, 0),
        parse_mode="Markdown"
    )

    logger.info("Plans generated and sent successfully")


async def _handle_chat_message(
    message: Message, session: UserSession, text: str
) -> None:
    """
    Answer a free-text message; attach the results keyboard for a plan.
    """
    await message.reply_text("💭 Thinking...")

    try:
        reply = await process_user_message(text)
    except Exception as e:
        logger.error(f"Error generating chat response: {e}")
        await message.reply_text(
            "❌ Failed to generate a response. Please try again."
        )
        return

    keyboard = None
    if reply.plan:
        session.plan_data = reply.plan
        session.request = None
        session.selected_plan = 0
        session.optimized_budget = None
        save_session(session)
        keyboard = build_results_keyboard(reply.plan, 0)

    await _send_long_message(message, reply.response, keyboard)


# === Results ===

def _current_plan(session: UserSession) -> ThemePlan:
    return session.plan_data.plans[session.selected_plan]


def _results_state(session: UserSession) -> BotState:
    """Chat-originated plans go back to chat mode, form plans to review."""
    return BotState.CHATTING if session.request is None else BotState.REVIEWING_PLANS


def _format_plan_overview(session: UserSession, section: str = "") -> str:
    """Header for the selected plan, optionally followed by one section."""
    plan = _current_plan(session)
    count = len(session.plan_data.plans)
    budget = session.optimized_budget or session.plan_data.budget_breakdown

    text = (
        f"🎉 *{escape_markdown(plan.title)}* "
        f"({session.selected_plan + 1}/{count})\n\n"
        f"_{escape_markdown(plan.description)}_\n\n"
        f"📍 {escape_markdown(plan.location)}\n"
        f"🏠 Host: {escape_markdown(plan.host_name)}\n"
        f"💵 Estimated cost: {escape_markdown(plan.estimated_cost)}\n\n"
        f"*Budget*\n{escape_markdown(format_budget(budget, plan.currency))}"
    )

    if section:
        items = {
            "activities": ("🎯 Activities", plan.activities),
            "food": ("🍕 Food Ideas", plan.food_ideas),
            "drinks": ("🥤 Drink Ideas", plan.drink_ideas),
            "decorations": ("🎈 Decorations", plan.decorations),
            "venues": ("🏛️ Venue Suggestions", plan.venues),
        }
        title, entries = items[section]
        lines = "\n".join(f"• {escape_markdown(item)}" for item in entries)
        text += f"\n\n*{title}*\n{lines}"
    else:
        text += "\n\n👇 Tap a section to see the ideas."

    return text


async def _show_overview(query, session: UserSession, section: str = "") -> None:
    await query.edit_message_text(
        _format_plan_overview(session, section),
        reply_markup=build_results_keyboard(
            session.plan_data, session.selected_plan
        ),
        parse_mode="Markdown"
    )


async def _handle_results_action(
    query, session: UserSession, data: str
) -> None:
    """
    Handle plan tabs, sections, invitation and download buttons.
    """
    if session.plan_data is None or session.state not in (
        BotState.REVIEWING_PLANS, BotState.CHATTING
    ):
        await query.answer(START_OVER, show_alert=True)
        return

    if data.startswith("plan_"):
        index = int(data.split("_")[1])
        if index >= len(session.plan_data.plans):
            await query.answer("Unknown plan", show_alert=True)
            return
        await query.answer()
        session.selected_plan = index
        await _show_overview(query, session)

    elif data.startswith("sec_"):
        await query.answer()
        await _show_overview(query, session, data.split("_", 1)[1])

    elif data == "inv_text":
        await query.answer()
        await _send_invitation(query.message, session)

    elif data == "inv_img":
        await query.answer("🎨 Creating your invitation image...")
        await _send_invitation_image(query.message, session)

    elif data == "dl_txt":
        await query.answer()
        plan = _current_plan(session)
        report = format_plan_report(plan, session.plan_data.invitation_text)
        await query.message.reply_document(
            document=report.encode("utf-8"),
            filename=report_filename(plan),
            caption="📄 Event plan downloaded successfully!"
        )
        logger.info(f"Sent text report for {plan.theme}")

    elif data == "dl_json":
        await query.answer()
        await query.message.reply_document(
            document=plan_to_json(session.plan_data).encode("utf-8"),
            filename="party_plan.json",
            caption="🧾 Full plan data as JSON"
        )
        logger.info("Sent JSON plan dump")

    else:
        await query.answer("Unknown action", show_alert=True)


async def _send_invitation(message: Message, session: UserSession) -> None:
    invitation = session.plan_data.invitation_text
    await message.reply_text(invitation)
    await message.reply_document(
        document=invitation.encode("utf-8"),
        filename="invitation.txt",
        caption="💌 Fill in the [Insert ...] placeholders before sending!"
    )


async def _send_invitation_image(
    message: Message, session: UserSession
) -> None:
    theme = _current_plan(session).theme
    try:
        url = await generate_invitation_image(theme)
    except Exception as e:
        logger.error(f"Error generating invitation image: {e}")
        await message.reply_text(
            "❌ Failed to generate the invitation image. Please try again."
        )
        return

    await message.reply_photo(
        photo=url, caption=f"🖼️ {theme} invitation background"
    )


# === Budget optimizer ===

def _format_budget_message(session: UserSession) -> str:
    plan = _current_plan(session)
    initial = session.plan_data.budget_breakdown
    draft = session.draft_budget

    text = (
        f"💰 *Budget Optimizer for {escape_markdown(plan.title)}*\n\n"
        f"{escape_markdown(format_budget(draft, plan.currency))}\n\n"
        f"Total Budget: {escape_markdown(plan.estimated_cost)}\n\n"
        "*Cost-Saving Suggestions*\n"
    )
    suggestions = savings_suggestions(draft, initial)
    if suggestions:
        text += "\n".join(f"• {escape_markdown(s)}" for s in suggestions)
    else:
        text += "_Adjust the amounts to see budget optimization suggestions._"
    return text


async def _show_budget(query, session: UserSession) -> None:
    await query.edit_message_text(
        _format_budget_message(session),
        reply_markup=build_budget_keyboard(
            session.draft_budget, _current_plan(session).currency
        ),
        parse_mode="Markdown"
    )


async def _handle_budget_action(
    query, session: UserSession, data: str
) -> None:
    """
    Handle the budget optimizer buttons.

    Changes are kept on the session only; plans are not regenerated.
    """
    if data == "bud_open":
        if session.plan_data is None or session.state not in (
            BotState.REVIEWING_PLANS, BotState.CHATTING
        ):
            await query.answer(START_OVER, show_alert=True)
            return
        await query.answer()
        session.draft_budget = (
            session.optimized_budget or session.plan_data.budget_breakdown
        )
        session.state = BotState.ADJUSTING_BUDGET
        await _show_budget(query, session)
        return

    if session.state != BotState.ADJUSTING_BUDGET:
        await query.answer(START_OVER, show_alert=True)
        return

    if data == "bud_noop":
        await query.answer()

    elif data.startswith("bud_inc_") or data.startswith("bud_dec_"):
        _, action, category = data.split("_", 2)
        step = BUDGET_STEP if action == "inc" else -BUDGET_STEP
        current = getattr(session.draft_budget, category)
        updated = adjust_allocation(
            session.draft_budget,
            category,
            current + step,
            session.plan_data.budget_breakdown.total
        )
        if updated == session.draft_budget:
            await query.answer("That's as far as this one goes.")
            return
        await query.answer()
        session.draft_budget = updated
        await _show_budget(query, session)

    elif data == "bud_save":
        await query.answer("✅ Budget plan saved!")
        session.optimized_budget = session.draft_budget
        session.draft_budget = None
        session.state = _results_state(session)
        await _show_overview(query, session)
        logger.info(f"Saved optimized budget: {session.optimized_budget}")

    elif data == "bud_cancel":
        await query.answer()
        session.draft_budget = None
        session.state = _results_state(session)
        await _show_overview(query, session)

    else:
        await query.answer("Unknown action", show_alert=True)


# === Venue booking ===

def _format_venue_message(session: UserSession) -> str:
    plan = _current_plan(session)
    lines = [f"📍 *Venues for {escape_markdown(plan.title)}*\n"]

    for i, venue in enumerate(session.venue_options, start=1):
        status = "✅ Available" if venue.availability else "❌ Unavailable"
        lines.append(
            f"*{i}. {escape_markdown(venue.name)}*\n"
            f"🏠 {escape_markdown(venue.address)}\n"
            f"💵 {plan.currency} {venue.price} | 👥 Up to {venue.capacity}\n"
            f"{status}\n"
        )

    if session.selected_venue is not None:
        venue = session.venue_options[session.selected_venue]
        lines.append(
            f"*Selected Venue:* {escape_markdown(venue.name)}\n"
            f"Amenities: {escape_markdown(', '.join(venue.amenities))}\n"
            f"📞 {escape_markdown(venue.contact_info)}"
        )
    else:
        lines.append("👆 *Select an available venue to book it*")

    return "\n".join(lines)


async def _show_venues(query, session: UserSession) -> None:
    await query.edit_message_text(
        _format_venue_message(session),
        reply_markup=build_venue_keyboard(
            session.venue_options, session.selected_venue
        ),
        parse_mode="Markdown"
    )


async def _handle_venue_action(
    query, session: UserSession, data: str
) -> None:
    """
    Handle venue list, selection and (mock) booking buttons.
    """
    if data == "ven_open":
        if session.plan_data is None or session.state not in (
            BotState.REVIEWING_PLANS, BotState.CHATTING
        ):
            await query.answer(START_OVER, show_alert=True)
            return
        await query.answer()
        session.venue_options = list_venue_details(_current_plan(session))
        session.selected_venue = None
        session.state = BotState.SELECTING_VENUE
        await _show_venues(query, session)
        return

    if session.state != BotState.SELECTING_VENUE:
        await query.answer(START_OVER, show_alert=True)
        return

    if data.startswith("ven_sel_"):
        index = int(data.split("_")[2])
        venue = session.venue_options[index]
        if not venue.availability:
            await query.answer(
                "Sorry, this venue is not available.", show_alert=True
            )
            return
        await query.answer()
        session.selected_venue = index
        await _show_venues(query, session)

    elif data == "ven_book":
        if session.selected_venue is None:
            await query.answer("Select a venue first.", show_alert=True)
            return
        venue = session.venue_options[session.selected_venue]
        try:
            session.booking = book_venue(venue)
        except VenueUnavailableError:
            await query.answer(
                "Sorry, this venue is not available.", show_alert=True
            )
            return
        await query.answer("🎉 Venue booked!")

        session.state = _results_state(session)
        await query.edit_message_text(
            f"🎉 *Venue booked!*\n\n"
            f"🏛️ {escape_markdown(venue.name)}\n"
            f"🏠 {escape_markdown(venue.address)}\n"
            f"🔖 Reference: {session.booking.reference}\n\n"
            "_This is a demo booking; no payment was taken._",
            parse_mode="Markdown"
        )
        await query.message.reply_text(
            _format_plan_overview(session),
            reply_markup=build_results_keyboard(
                session.plan_data, session.selected_plan
            ),
            parse_mode="Markdown"
        )

    elif data == "ven_back":
        await query.answer()
        session.state = _results_state(session)
        await _show_overview(query, session)

    else:
        await query.answer("Unknown action", show_alert=True)


async def _send_long_message(message: Message, text: str, keyboard) -> None:
    """
    Send text to chat, chunking if necessary.
    The last chunk carries the keyboard.
    """
    if len(text) <= TELEGRAM_MAX_LEN - 100:
        await message.reply_text(text, reply_markup=keyboard)
        return

    chunks = split_into_chunks(text)
    for i, chunk in enumerate(chunks[:-1]):
        await message.reply_text(chunk)
        logger.info(f"Sent chunk {i+1}/{len(chunks)}")

    await message.reply_text(chunks[-1], reply_markup=keyboard)
    logger.info(f"Sent final chunk {len(chunks)}/{len(chunks)}")


async def error_handler(
    update: object, context: ContextTypes.DEFAULT_TYPE
) -> None:
    """Log errors."""
    logger.error(f"Update {update} caused error: {context.error}")


def main() -> None:
    if not TELEGRAM_BOT_TOKEN:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not set! "
            "Create a .env file with your bot token."
        )

    app = Application.builder().token(TELEGRAM_BOT_TOKEN).build()

    # Register handlers - order matters!
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("plan", plan))
    app.add_handler(CommandHandler("chat", chat_cmd))
    app.add_handler(CommandHandler("skip", skip))
    app.add_handler(CommandHandler("cancel", cancel))
    app.add_handler(CommandHandler("help", help_cmd))
    app.add_handler(CallbackQueryHandler(handle_callback))
    app.add_handler(
        MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text)
    )

    app.add_error_handler(error_handler)

    # Start polling
    logger.info("🤖 Party Planner Bot starting...")
    print("\n🤖 Bot is running! Press Ctrl+C to stop.\n")

    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
