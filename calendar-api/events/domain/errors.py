"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class EventValidationError(DomainError):
    """Raised when a create or update payload breaks one or more field rules.

    ``errors`` maps each failing field to its messages.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="The given data was invalid",
        )
        self.errors = errors
