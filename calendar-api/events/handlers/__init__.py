from events.handlers.pages import CalendarPageView, ServiceWorkerView, manifest
from events.handlers.views import EventDetailView, EventListView

__all__ = [
    "CalendarPageView",
    "ServiceWorkerView",
    "manifest",
    "EventListView",
    "EventDetailView",
]
