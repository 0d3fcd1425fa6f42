# notion_scheduler/models/tasks.py

from dataclasses import dataclass
from typing import Any, Optional

from .enums import Weekday
from notion_scheduler.core.exceptions import InvalidWeekdayError

DEFAULT_DURATION_MINUTES = 60


@dataclass
class TemplateTask:
    """One row of the weekly template database."""
    id: str
    name: str
    day: str
    time: str
    duration: int = DEFAULT_DURATION_MINUTES
    notes: str = ""

    @property
    def weekday(self) -> Weekday:
        """Canonical weekday (raises InvalidWeekdayError for unknown names)."""
        return Weekday.from_name(self.day)

    def sort_key(self) -> int:
        """Monday-first position in the week; unrecognized days sort last."""
        try:
            return self.weekday.offset_from_monday
        except InvalidWeekdayError:
            return 7

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'day': self.day,
            'time': self.time,
            'duration': self.duration,
            'notes': self.notes,
        }


def normalize_duration(value: Any) -> int:
    """Positive whole minutes, falling back to the 60 minute default."""
    if value is None or isinstance(value, bool):
        return DEFAULT_DURATION_MINUTES
    try:
        minutes = int(float(value))
    except (TypeError, ValueError):
        return DEFAULT_DURATION_MINUTES
    return minutes if minutes > 0 else DEFAULT_DURATION_MINUTES


def template_task_from_dict(data: dict) -> TemplateTask:
    """Create TemplateTask from a raw dictionary, tolerating missing optional fields."""
    return TemplateTask(
        id=str(data.get('id') or ''),
        name=str(data.get('name') or ''),
        day=str(data.get('day') or ''),
        time=str(data.get('time') or ''),
        duration=normalize_duration(data.get('duration')),
        notes=str(data.get('notes') or ''),
    )


def describe_task(task: Optional[TemplateTask]) -> str:
    """Name used in log lines and error reports."""
    if task is None:
        return "<unknown>"
    return task.name or f"<untitled {task.id}>"
