# File: notion_scheduler/models/results.py
"""
Result values passed back up the pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .calendar import CalendarEvent


class RunState(Enum):
    """States of one batch run."""
    IDLE = "idle"
    VERIFYING_CONNECTION = "verifying_connection"
    FETCHING_TEMPLATES = "fetching_templates"
    TRANSFORMING = "transforming"
    WRITING_EVENTS = "writing_events"
    DONE_SUCCESS = "done_success"
    DONE_FAILURE = "done_failure"


@dataclass
class EventError:
    """A task or event that could not be materialized."""
    event_name: str
    error_message: str

    def __str__(self) -> str:
        return f"{self.event_name}: {self.error_message}"

    def to_dict(self) -> dict:
        return {'event': self.event_name, 'error': self.error_message}


@dataclass
class BatchResult:
    """Outcome of writing a list of events."""
    created: List[str] = field(default_factory=list)
    failures: List[Tuple[CalendarEvent, Exception]] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


@dataclass
class RunResult:
    """Aggregate result of one batch run."""
    success: bool
    created_count: int = 0
    failed_count: int = 0
    errors: List[EventError] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    message: Optional[str] = None
    error: Optional[str] = None
    state: RunState = RunState.IDLE

    @property
    def exit_code(self) -> int:
        """0 for a completed run (even with per-event failures), 1 for a fatal abort."""
        return 0 if self.success else 1

    def to_dict(self) -> dict:
        return {
            'success': self.success,
            'created': self.created_count,
            'failed': self.failed_count,
            'duration': self.elapsed_seconds,
            'errors': [e.to_dict() for e in self.errors],
            'message': self.message,
            'error': self.error,
        }
