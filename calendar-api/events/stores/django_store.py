"""Django ORM implementation of the EventStore."""

from datetime import datetime

from events import models
from events.domain import Event, EventId, EventNotFoundError
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_domain(row) for row in models.Event.objects.order_by("start", "id")]

    def insert_event(self, title: str, start: datetime, end: datetime) -> Event:
        row = models.Event.objects.create(title=title, start=start, end=end)
        return _to_domain(row)

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def update_event_times(
        self, event_id: EventId, start: datetime, end: datetime
    ) -> Event:
        try:
            row = models.Event.objects.get(pk=event_id.value)
        except models.Event.DoesNotExist:
            raise EventNotFoundError(str(event_id)) from None
        row.start = start
        row.end = end
        row.save(update_fields=["start", "end", "updated_at"])
        return _to_domain(row)

    def delete_event(self, event_id: EventId) -> None:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        if not deleted:
            raise EventNotFoundError(str(event_id))


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        start=row.start,
        end=row.end,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
