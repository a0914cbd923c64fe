from events.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    EventValidationError,
)
from events.domain.inputs import CreateEventInput, UpdateEventInput
from events.domain.models import Event
from events.domain.value_objects import EventId, TimeRange, Title

__all__ = [
    "Event",
    "EventId",
    "Title",
    "TimeRange",
    "CreateEventInput",
    "UpdateEventInput",
    "DomainError",
    "ErrorCode",
    "EventNotFoundError",
    "EventValidationError",
]
