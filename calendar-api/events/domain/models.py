"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of a calendar Event."""

    id: EventId
    title: str
    start: datetime
    end: datetime
    created_at: datetime
    updated_at: datetime
