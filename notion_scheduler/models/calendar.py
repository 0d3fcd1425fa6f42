# File: notion_scheduler/models/calendar.py

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

import pytz

NOTION_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"
DEFAULT_NOTES = "Generated automatically from template"


def format_utc_timestamp(instant: datetime) -> str:
    """Serialize an aware datetime as a UTC ISO 8601 string with a Z suffix."""
    if instant.tzinfo is None:
        raise ValueError(f"Expected a timezone-aware datetime, got {instant!r}")
    return instant.astimezone(pytz.utc).strftime(NOTION_TIMESTAMP_FORMAT)


@dataclass
class DateRange:
    """Start/end pair in the shape Notion's date property expects."""
    start: datetime
    end: datetime
    time_zone: str

    def __post_init__(self):
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("DateRange requires timezone-aware datetimes")

    def to_notion(self) -> dict:
        return {
            'start': format_utc_timestamp(self.start),
            'end': format_utc_timestamp(self.end),
            'time_zone': self.time_zone,
        }


@dataclass
class CalendarEvent:
    """A dated event derived from a template task."""
    name: str
    date_range: DateRange
    notes: str = DEFAULT_NOTES
    source_task_id: Optional[str] = None

    def __post_init__(self):
        """Validate event data."""
        if self.date_range.end <= self.date_range.start:
            raise ValueError(f"Event end time must be after start time: {self.name}")
        if not self.notes:
            self.notes = DEFAULT_NOTES

    @property
    def start(self) -> datetime:
        return self.date_range.start

    @property
    def end(self) -> datetime:
        return self.date_range.end

    def duration(self) -> timedelta:
        return self.date_range.end - self.date_range.start

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int(self.duration().total_seconds() / 60)
