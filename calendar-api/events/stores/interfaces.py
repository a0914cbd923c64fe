"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by start, then id."""
        ...

    @abstractmethod
    def insert_event(self, title: str, start: datetime, end: datetime) -> Event:
        """Persist a new event with a freshly assigned id and timestamps."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def update_event_times(
        self, event_id: EventId, start: datetime, end: datetime
    ) -> Event:
        """Move an event to a new time range and touch updated_at.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Remove an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...
