"""In-memory EventStore.

Keeps rows in a dict keyed by id. Each instance is independent, so tests get
isolation by constructing a fresh store.
"""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count

from events.domain import Event, EventId, EventNotFoundError
from events.stores.interfaces import EventStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed event store with sequential ids starting at 1."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._rows: dict[int, Event] = {}
        self._ids = count(1)
        self._clock = clock

    def list_events(self) -> list[Event]:
        return sorted(self._rows.values(), key=lambda event: (event.start, event.id.value))

    def insert_event(self, title: str, start: datetime, end: datetime) -> Event:
        now = self._clock()
        event = Event(
            id=EventId(next(self._ids)),
            title=title,
            start=start,
            end=end,
            created_at=now,
            updated_at=now,
        )
        self._rows[event.id.value] = event
        return event

    def get_event(self, event_id: EventId) -> Event | None:
        return self._rows.get(event_id.value)

    def update_event_times(
        self, event_id: EventId, start: datetime, end: datetime
    ) -> Event:
        current = self._rows.get(event_id.value)
        if current is None:
            raise EventNotFoundError(str(event_id))
        updated = replace(current, start=start, end=end, updated_at=self._clock())
        self._rows[event_id.value] = updated
        return updated

    def delete_event(self, event_id: EventId) -> None:
        if self._rows.pop(event_id.value, None) is None:
            raise EventNotFoundError(str(event_id))
