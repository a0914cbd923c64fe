from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "start", "end", "updated_at"]
    search_fields = ["title"]
    date_hierarchy = "start"
    readonly_fields = ["created_at", "updated_at"]
