"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate payloads before any write
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Event, EventId, EventNotFoundError, EventValidationError
from events.domain.validation import validate_create, validate_update
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for calendar event operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def create_event(self, payload: Mapping[str, Any]) -> Event:
        """Validate a payload and store it as a new event.

        Raises:
            EventValidationError: If title, start or end is missing or invalid.
        """
        try:
            data = validate_create(payload)
        except EventValidationError as exc:
            logger.warning("Rejected event create: fields=%s", sorted(exc.errors))
            raise
        event = self._store.insert_event(data.title, data.start, data.end)
        logger.info("Created event %s", event.id)
        return event

    def update_event(self, event_id: str, payload: Mapping[str, Any]) -> Event:
        """Move an existing event to the start/end given in the payload.

        Raises:
            EventValidationError: If start or end is missing or invalid.
            EventNotFoundError: If the event does not exist.
        """
        try:
            data = validate_update(payload)
        except EventValidationError as exc:
            logger.warning(
                "Rejected event %s update: fields=%s", event_id, sorted(exc.errors)
            )
            raise
        existing = self._require_event(event_id)
        event = self._store.update_event_times(existing.id, data.start, data.end)
        logger.info("Updated event %s", event.id)
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        existing = self._require_event(event_id)
        self._store.delete_event(existing.id)
        logger.info("Deleted event %s", existing.id)

    def _require_event(self, event_id: str) -> Event:
        try:
            parsed_id = EventId.from_string(str(event_id))
        except ValueError:
            logger.warning("Event id %r is malformed", event_id)
            raise EventNotFoundError(str(event_id)) from None
        event = self._store.get_event(parsed_id)
        if event is None:
            logger.warning("Event %s not found", parsed_id)
            raise EventNotFoundError(str(parsed_id))
        return event
