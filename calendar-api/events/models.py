"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from events.domain.value_objects import TITLE_MAX_LENGTH


class Event(models.Model):
    """Persistence model for calendar events."""

    id = models.BigAutoField(primary_key=True)
    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    start = models.DateTimeField()
    end = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start", "id"]
        indexes = [
            models.Index(fields=["start"], name="event_start_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end__gte=models.F("start")),
                name="event_end_not_before_start",
            ),
        ]

    def __str__(self) -> str:
        return self.title
