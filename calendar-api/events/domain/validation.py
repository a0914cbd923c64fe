"""Stateless rule checks for incoming event payloads.

Validation runs before any store call and never touches storage. Each
function either returns a typed input or raises EventValidationError with
the messages for every failing field.
"""

from collections.abc import Mapping
from datetime import datetime, time, timezone
from typing import Any

from django.utils.dateparse import parse_date, parse_datetime

from events.domain.errors import EventValidationError
from events.domain.inputs import CreateEventInput, UpdateEventInput
from events.domain.value_objects import TITLE_MAX_LENGTH

_MISSING = object()


def validate_create(payload: Mapping[str, Any]) -> CreateEventInput:
    """Check a create payload: title, start and end are all required."""
    payload = _as_mapping(payload)
    errors: dict[str, list[str]] = {}
    title = _clean_title(payload, errors)
    start, end = _clean_range(payload, errors)
    if errors:
        raise EventValidationError(errors)
    return CreateEventInput(title=title, start=start, end=end)


def validate_update(payload: Mapping[str, Any]) -> UpdateEventInput:
    """Check an update payload: only start and end are accepted."""
    payload = _as_mapping(payload)
    errors: dict[str, list[str]] = {}
    start, end = _clean_range(payload, errors)
    if errors:
        raise EventValidationError(errors)
    return UpdateEventInput(start=start, end=end)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 date-time or date into an aware datetime.

    Returns None when the value cannot be read as a timestamp or has no
    UTC equivalent. Values without an offset are taken as UTC; bare dates
    mean midnight. The result is always expressed in UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime.combine(day, time.min) if day else None
        except ValueError:
            return None
        if parsed is None:
            return None
    else:
        return None

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        return None


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    # a JSON body may be a list or scalar
    return payload if isinstance(payload, Mapping) else {}


def _clean_title(payload: Mapping[str, Any], errors: dict[str, list[str]]) -> str:
    value = payload.get("title", _MISSING)
    if value is _MISSING or value is None or (isinstance(value, str) and not value.strip()):
        errors.setdefault("title", []).append("The title field is required.")
        return ""
    if not isinstance(value, str):
        errors.setdefault("title", []).append("The title field must be a string.")
        return ""
    value = value.strip()
    if len(value) > TITLE_MAX_LENGTH:
        errors.setdefault("title", []).append(
            f"The title field must not be greater than {TITLE_MAX_LENGTH} characters."
        )
    return value


def _clean_timestamp(
    payload: Mapping[str, Any], field: str, errors: dict[str, list[str]]
) -> datetime | None:
    value = payload.get(field, _MISSING)
    if value is _MISSING or value is None or value == "":
        errors.setdefault(field, []).append(f"The {field} field is required.")
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        errors.setdefault(field, []).append(f"The {field} field must be a valid date.")
    return parsed


def _clean_range(
    payload: Mapping[str, Any], errors: dict[str, list[str]]
) -> tuple[datetime | None, datetime | None]:
    start = _clean_timestamp(payload, "start", errors)
    end = _clean_timestamp(payload, "end", errors)
    if start is not None and end is not None and end < start:
        errors.setdefault("end", []).append(
            "The end field must be a date after or equal to start."
        )
    return start, end
