# File: notion_scheduler/utils/date_utils.py
"""
Date helpers for turning "weekday + HH:mm + duration" into dated ranges.

Weeks are anchored on Monday. Instants are timezone-aware datetimes
localized with pytz in the configured timezone.
"""

import datetime
import re
from typing import Dict, Optional, Union

import pytz

from notion_scheduler.core.exceptions import InvalidTimeFormatError
from notion_scheduler.models.calendar import DateRange
from notion_scheduler.models.enums import Weekday

TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")

TimezoneLike = Union[str, datetime.tzinfo]


def _resolve_tz(timezone: Optional[TimezoneLike]) -> Optional[datetime.tzinfo]:
    if timezone is None or isinstance(timezone, datetime.tzinfo):
        return timezone
    return pytz.timezone(timezone)


def _local_date(
    reference: Union[datetime.date, datetime.datetime],
    timezone: Optional[TimezoneLike] = None
) -> datetime.date:
    """Calendar date of ``reference`` as seen in ``timezone``."""
    if isinstance(reference, datetime.datetime):
        tz = _resolve_tz(timezone)
        if tz is not None and reference.tzinfo is not None:
            reference = reference.astimezone(tz)
        return reference.date()
    return reference


def next_week_start(
    reference: Union[datetime.date, datetime.datetime],
    timezone: Optional[TimezoneLike] = None
) -> datetime.date:
    """Monday of the week after the one containing ``reference``."""
    today = _local_date(reference, timezone)
    this_monday = today - datetime.timedelta(days=today.weekday())
    return this_monday + datetime.timedelta(days=7)


def next_week_end(
    reference: Union[datetime.date, datetime.datetime],
    timezone: Optional[TimezoneLike] = None
) -> datetime.date:
    """Sunday closing the upcoming week."""
    return next_week_start(reference, timezone) + datetime.timedelta(days=6)


def next_weekday_date(
    reference: Union[datetime.date, datetime.datetime],
    weekday_name: str,
    timezone: Optional[TimezoneLike] = None
) -> datetime.date:
    """
    Date of ``weekday_name`` within the week after the one containing ``reference``.

    Args:
        reference: Reference instant or date (usually "now")
        weekday_name: English or Spanish day name, case-sensitive
        timezone: Zone in which the reference's calendar date is taken

    Returns:
        A date between next week's Monday and Sunday, inclusive

    Raises:
        InvalidWeekdayError: If the day name is not recognized
    """
    weekday = Weekday.from_name(weekday_name)
    monday = next_week_start(reference, timezone)
    return monday + datetime.timedelta(days=weekday.offset_from_monday)


def next_week_dates(
    reference: Union[datetime.date, datetime.datetime],
    timezone: Optional[TimezoneLike] = None
) -> Dict[Weekday, datetime.date]:
    """All seven dates of the upcoming week, keyed by canonical weekday."""
    monday = next_week_start(reference, timezone)
    return {
        day: monday + datetime.timedelta(days=day.offset_from_monday)
        for day in sorted(Weekday, key=lambda d: d.offset_from_monday)
    }


def parse_time(time_string: str) -> datetime.time:
    """Parse a 24-hour ``HH:mm`` string."""
    match = TIME_PATTERN.fullmatch(time_string) if isinstance(time_string, str) else None
    if not match:
        raise InvalidTimeFormatError(time_string)

    hour, minute = int(match.group(1)), int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTimeFormatError(time_string)

    return datetime.time(hour, minute)


def combine_date_and_time(
    calendar_date: datetime.date,
    time_string: str,
    timezone: TimezoneLike
) -> datetime.datetime:
    """
    Wall-clock ``time_string`` on ``calendar_date`` in ``timezone``.

    Seconds and microseconds are zero.

    Raises:
        InvalidTimeFormatError: If the time is not a valid HH:mm value
    """
    wall_time = parse_time(time_string)
    naive = datetime.datetime.combine(calendar_date, wall_time)
    tz = _resolve_tz(timezone)

    if hasattr(tz, "localize"):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def add_duration(instant: datetime.datetime, minutes: int) -> datetime.datetime:
    """Add ``minutes`` minutes. The UTC offset of ``instant`` is kept across DST changes."""
    return instant + datetime.timedelta(minutes=minutes)


def to_external_date_range(
    start: datetime.datetime,
    end: datetime.datetime,
    time_zone: str
) -> DateRange:
    """
    Package start/end for Notion's date property.

    Notion reads the digits of the serialized timestamps as local time in
    ``time_zone``, so each instant is shifted to UTC by its real offset in
    that zone. Naive datetimes are taken as wall clock in ``time_zone``.
    """
    tz = pytz.timezone(time_zone)

    def _aware(value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            return tz.localize(value)
        return value

    return DateRange(
        start=_aware(start).astimezone(pytz.utc),
        end=_aware(end).astimezone(pytz.utc),
        time_zone=time_zone,
    )
