"""Cache keys for the events API.

List caching is active only while ``EVENTS_LIST_CACHE_TIMEOUT`` is positive.
"""

import logging

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

EVENT_LIST_CACHE_KEY = "events:list"


def list_cache_enabled() -> bool:
    return settings.EVENTS_LIST_CACHE_TIMEOUT > 0


def get_cached_event_list() -> list[dict] | None:
    if not list_cache_enabled():
        return None
    return cache.get(EVENT_LIST_CACHE_KEY)


def cache_event_list(data: list[dict]) -> None:
    if list_cache_enabled():
        cache.set(EVENT_LIST_CACHE_KEY, data, timeout=settings.EVENTS_LIST_CACHE_TIMEOUT)


def invalidate_event_list() -> None:
    logger.debug("Invalidating %s", EVENT_LIST_CACHE_KEY)
    cache.delete(EVENT_LIST_CACHE_KEY)
