from .enums import Weekday, WEEKDAY_SPELLINGS
from .tasks import TemplateTask, template_task_from_dict, normalize_duration, DEFAULT_DURATION_MINUTES
from .calendar import CalendarEvent, DateRange, format_utc_timestamp, DEFAULT_NOTES
from .results import RunState, EventError, BatchResult, RunResult

__all__ = [
    "Weekday",
    "WEEKDAY_SPELLINGS",
    "TemplateTask",
    "template_task_from_dict",
    "normalize_duration",
    "DEFAULT_DURATION_MINUTES",
    "CalendarEvent",
    "DateRange",
    "format_utc_timestamp",
    "DEFAULT_NOTES",
    "RunState",
    "EventError",
    "BatchResult",
    "RunResult",
]
