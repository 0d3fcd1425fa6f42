# File: notion_scheduler/core/exceptions.py
"""
Error kinds raised by the scheduler.

Fatal kinds (ConfigurationError, ConnectivityError) abort a run; transform
errors and per-event RemoteApiError values are isolated by the orchestrator.
"""

from enum import Enum
from typing import Optional


class SchedulerError(Exception):
    """Base class for every error raised by the scheduler."""


class ConfigurationError(SchedulerError):
    """A required setting is absent or invalid."""


class ConnectivityError(SchedulerError):
    """The connectivity check against the Notion databases failed."""

    def __init__(self, message: str, cause: Optional["RemoteApiError"] = None):
        super().__init__(message)
        self.cause = cause


class ApiErrorReason(Enum):
    """Sub-reason of a failed Notion API call."""
    NOT_FOUND = "object_not_found"
    UNAUTHORIZED = "unauthorized"
    RESTRICTED = "restricted_resource"
    VALIDATION = "validation_error"
    RATE_LIMITED = "rate_limited"
    OTHER = "other"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "ApiErrorReason":
        """Map a Notion error ``code`` to a reason, defaulting to OTHER."""
        for reason in cls:
            if reason.value == code:
                return reason
        return cls.OTHER


class RemoteApiError(SchedulerError):
    """A Notion API call (read or write) failed."""

    def __init__(
        self,
        message: str,
        reason: ApiErrorReason = ApiErrorReason.OTHER,
        status: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.status = status

    def describe(self) -> str:
        """Human-readable explanation of the failure."""
        if self.reason is ApiErrorReason.NOT_FOUND:
            return "Database or page not found. Check the database IDs in your .env"
        if self.reason is ApiErrorReason.UNAUTHORIZED:
            return "Invalid API token or missing permissions. Check NOTION_API_KEY"
        if self.reason is ApiErrorReason.RESTRICTED:
            return "The integration has no access to this resource. Share the database with your integration"
        if self.reason is ApiErrorReason.VALIDATION:
            return f"Validation error: {self.message}"
        if self.reason is ApiErrorReason.RATE_LIMITED:
            return "Rate limited by Notion. Try again later"
        return self.message or "Unknown Notion error"

    def __str__(self) -> str:
        return self.describe()


class TransformError(SchedulerError):
    """A template task could not be turned into a calendar event."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class InvalidWeekdayError(TransformError):
    """The day name is not one of the recognized English or Spanish spellings."""

    def __init__(self, value: Optional[str]):
        super().__init__(f"Invalid weekday: {value!r}", value)


class InvalidTimeFormatError(TransformError):
    """The time string is not a valid 24-hour HH:mm value."""

    def __init__(self, value: Optional[str]):
        super().__init__(f"Invalid time format (expected HH:mm): {value!r}", value)
