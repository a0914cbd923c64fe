from django.contrib import admin
from django.urls import include, path

from events.handlers import CalendarPageView, ServiceWorkerView, manifest

urlpatterns = [
    path("", CalendarPageView.as_view(), name="calendar"),
    path("service-worker.js", ServiceWorkerView.as_view(), name="service-worker"),
    path("manifest.json", manifest, name="manifest"),
    path("admin/", admin.site.urls),
    path("api/", include("events.urls")),
]
