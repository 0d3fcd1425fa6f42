# File: notion_scheduler/processors/event_processor.py
"""
Turns template tasks into dated calendar events for the upcoming week.
"""

import datetime
from typing import List, Tuple

from notion_scheduler.core.config_manager import Config
from notion_scheduler.core.exceptions import TransformError
from notion_scheduler.models.calendar import CalendarEvent, DEFAULT_NOTES
from notion_scheduler.models.results import EventError
from notion_scheduler.models.tasks import TemplateTask, describe_task
from notion_scheduler.utils.date_utils import (
    add_duration,
    combine_date_and_time,
    next_weekday_date,
    to_external_date_range,
)
from notion_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventProcessor:
    """Applies the date transform to template tasks."""

    def __init__(self, config: Config):
        self.config = config

    def transform_task(self, task: TemplateTask, reference: datetime.datetime) -> CalendarEvent:
        """
        Build the event for ``task`` in the week after ``reference``.

        Raises:
            InvalidWeekdayError: Unknown day name
            InvalidTimeFormatError: Time is not HH:mm
        """
        tz = self.config.tz
        day_date = next_weekday_date(reference, task.day, tz)
        start = combine_date_and_time(day_date, task.time, tz)
        end = add_duration(start, task.duration)

        return CalendarEvent(
            name=task.name,
            date_range=to_external_date_range(start, end, self.config.timezone),
            notes=task.notes or DEFAULT_NOTES,
            source_task_id=task.id,
        )

    def transform_tasks(
        self,
        tasks: List[TemplateTask],
        reference: datetime.datetime
    ) -> Tuple[List[CalendarEvent], List[EventError]]:
        """
        Transform every task independently.

        Returns:
            Tuple of (events, errors); a failing task only adds to errors
        """
        events: List[CalendarEvent] = []
        errors: List[EventError] = []

        for task in tasks:
            try:
                events.append(self.transform_task(task, reference))
            except TransformError as e:
                logger.error(f"Error transforming task '{describe_task(task)}': {e}")
                errors.append(EventError(event_name=describe_task(task), error_message=str(e)))

        logger.info(f"{len(events)} events prepared, {len(errors)} transform errors")
        return events, errors
