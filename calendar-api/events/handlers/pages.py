"""Views serving the calendar page and its offline support files."""

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.generic import TemplateView

FULLCALENDAR_URL = "https://cdn.jsdelivr.net/npm/fullcalendar@6.1.15/index.global.min.js"


class CalendarPageView(TemplateView):
    """Handler for GET / - the calendar single-page app."""

    template_name = "events/calendar.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["fullcalendar_url"] = FULLCALENDAR_URL
        return context


class ServiceWorkerView(TemplateView):
    """Handler for GET /service-worker.js

    Served from the site root so the worker's scope covers the whole app.
    """

    template_name = "events/service-worker.js"
    content_type = "application/javascript"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["cache_name"] = settings.CALENDAR_OFFLINE_CACHE_NAME
        context["precache_urls"] = ["/", "/manifest.json", FULLCALENDAR_URL]
        return context


def manifest(request: HttpRequest) -> JsonResponse:
    """Handler for GET /manifest.json"""
    return JsonResponse(
        {
            "name": "PWA Event Calendar",
            "short_name": "Calendar",
            "start_url": "/",
            "display": "standalone",
            "background_color": "#ffffff",
            "theme_color": "#4A90E2",
        },
        content_type="application/manifest+json",
    )
