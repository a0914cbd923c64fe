"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self

TITLE_MAX_LENGTH = 255


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not value.isascii() or not value.isdigit():
            raise ValueError(f"Invalid event id: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Title:
    """Non-blank event title of bounded length."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("Title cannot be blank")
        if len(self.value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")


@dataclass(frozen=True)
class TimeRange:
    """Start/end pair where end is never before start."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("TimeRange end cannot be before start")
