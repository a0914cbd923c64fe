"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.services.event_service import EventService
from events.stores.memory_store import InMemoryEventStore


class TickingClock:
    """Clock that moves forward one minute on every read."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock(datetime(2025, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def memory_store(clock) -> InMemoryEventStore:
    return InMemoryEventStore(clock=clock)


@pytest.fixture
def service(memory_store) -> EventService:
    return EventService(memory_store)


@pytest.fixture
def standup_payload() -> dict:
    return {
        "title": "Standup",
        "start": "2025-01-06T09:00:00Z",
        "end": "2025-01-06T09:30:00Z",
    }
