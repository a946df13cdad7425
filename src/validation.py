"""
Form-level validation for event requests.

Raw answers arrive as strings (from the /plan wizard or a config dict)
and are turned into an EventRequest here, before the plan generator
ever sees them.
"""

import logging
import math
from datetime import datetime
from typing import Any, Callable, Mapping

from dateutil import parser as dateutil_parser

from config import DEFAULT_CURRENCY
from exceptions import RequestValidationError
from models import EventRequest, GuestType, LocationType

logger = logging.getLogger(__name__)


def _min_length(length: int, message: str) -> Callable[[str, str], str]:
    def validate(field: str, value: str) -> str:
        if len(value) < length:
            raise RequestValidationError(field, message)
        return value
    return validate


def _optional_text(field: str, value: str) -> str:
    return value


def _parse_age(field: str, value: str) -> int:
    try:
        age = int(value)
    except ValueError:
        raise RequestValidationError(field, "Age must be a whole number.")
    if age < 0 or age > 120:
        raise RequestValidationError(field, "Age must be between 0 and 120.")
    return age


def _parse_date(field: str, value: str) -> datetime:
    try:
        return dateutil_parser.parse(value)
    except (ValueError, OverflowError):
        raise RequestValidationError(
            field,
            "I couldn't understand that date. Try e.g. 2026-11-14 15:00.",
        )


def _parse_guests(field: str, value: str) -> int:
    message = "Number of guests must be a non-negative number."
    try:
        guests = int(value)
    except ValueError:
        raise RequestValidationError(field, message)
    if guests < 0:
        raise RequestValidationError(field, message)
    return guests


def _parse_budget(field: str, value: str) -> float:
    message = "Budget must be a positive number."
    try:
        budget = float(value.replace(",", ""))
    except ValueError:
        raise RequestValidationError(field, message)
    if not math.isfinite(budget) or budget <= 0:
        raise RequestValidationError(field, message)
    return budget


def _parse_currency(field: str, value: str) -> str:
    if len(value) != 3 or not value.isalpha():
        raise RequestValidationError(
            field, "Currency must be a 3-letter code such as USD."
        )
    return value.upper()


def _enum_parser(enum_cls, label: str):
    choices = ", ".join(member.value for member in enum_cls)

    def parse(field: str, value: str):
        try:
            return enum_cls(value.lower())
        except ValueError:
            raise RequestValidationError(
                field, f"{label} must be one of: {choices}."
            )
    return parse


# field -> (required, parser, default when blank)
FIELDS: Mapping[str, tuple[bool, Callable[[str, str], Any], Any]] = {
    "event_type": (
        True, _min_length(2, "Event type must be specified."), ""),
    "name": (
        True, _min_length(2, "Name must be at least 2 characters."), ""),
    "age": (False, _parse_age, None),
    "host_name": (False, _optional_text, ""),
    "date": (True, _parse_date, None),
    "guests": (True, _parse_guests, 0),
    "guest_type": (
        False, _enum_parser(GuestType, "Guest type"), GuestType.ADULTS),
    "budget": (True, _parse_budget, None),
    "currency": (False, _parse_currency, DEFAULT_CURRENCY),
    "location": (
        True, _enum_parser(LocationType, "Location"), LocationType.VENUE),
    "city": (False, _optional_text, ""),
    "country": (False, _optional_text, ""),
    "interests": (
        True,
        _min_length(
            3, "Please provide at least some interests or theme ideas."),
        "",
    ),
    "dietary_restrictions": (False, _optional_text, ""),
    "food_preferences": (False, _optional_text, ""),
    "drink_preferences": (False, _optional_text, ""),
    "additional_details": (False, _optional_text, ""),
}

_REQUIRED_MESSAGES = {
    "date": "Date must be specified.",
    "guests": "Number of guests must be a non-negative number.",
    "budget": "Budget must be a positive number.",
    "location": "Location must be specified.",
}


def is_optional(field: str) -> bool:
    return not FIELDS[field][0]


def validate_field(field: str, value: Any) -> Any:
    """
    Validate and convert a single raw answer.

    Args:
        field: EventRequest field name
        value: Raw answer, usually a string

    Returns:
        Converted value, or the field default for a blank optional answer

    Raises:
        RequestValidationError: the answer is missing or malformed
    """
    if field not in FIELDS:
        raise RequestValidationError(field, f"Unknown field: {field}")
    required, parse, default = FIELDS[field]

    text = "" if value is None else str(value).strip()
    if not text:
        if required:
            message = _REQUIRED_MESSAGES.get(field)
            if message:
                raise RequestValidationError(field, message)
            return parse(field, text)
        return default
    return parse(field, text)


def build_event_request(raw: Mapping[str, Any]) -> EventRequest:
    """
    Validate a full set of raw answers and build the request.

    Raises:
        RequestValidationError: on the first invalid field, in form order
    """
    values = {field: validate_field(field, raw.get(field)) for field in FIELDS}
    logger.debug(f"Validated event request fields: {sorted(values)}")
    return EventRequest(**values)
