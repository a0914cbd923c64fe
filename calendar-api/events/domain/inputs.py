"""Typed write inputs.

Each operation gets its own input type so the set of client-writable fields
is fixed by the type rather than filtered at runtime.
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import TimeRange, Title


@dataclass(frozen=True)
class CreateEventInput:
    """Fields a client may set when creating an event."""

    title: str
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        Title(self.title)
        TimeRange(self.start, self.end)


@dataclass(frozen=True)
class UpdateEventInput:
    """Fields a client may change on an existing event."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        TimeRange(self.start, self.end)
