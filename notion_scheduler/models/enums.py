# File: notion_scheduler/models/enums.py

from enum import Enum
from typing import Dict, Tuple

from notion_scheduler.core.exceptions import InvalidWeekdayError


class Weekday(Enum):
    """Canonical weekday. Values follow the Sunday=0 ... Saturday=6 convention."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """
        Resolve an English or Spanish day name (exact, case-sensitive).

        Raises:
            InvalidWeekdayError: If the name is not one of the 14 spellings
        """
        try:
            return _SPELLING_LOOKUP[name]
        except (KeyError, TypeError):
            raise InvalidWeekdayError(name) from None

    @property
    def offset_from_monday(self) -> int:
        """Days after Monday within a Monday-anchored week (Monday=0, Sunday=6)."""
        return (self.value - 1 + 7) % 7


WEEKDAY_SPELLINGS: Dict[Weekday, Tuple[str, str]] = {
    Weekday.MONDAY: ("Monday", "Lunes"),
    Weekday.TUESDAY: ("Tuesday", "Martes"),
    Weekday.WEDNESDAY: ("Wednesday", "Miércoles"),
    Weekday.THURSDAY: ("Thursday", "Jueves"),
    Weekday.FRIDAY: ("Friday", "Viernes"),
    Weekday.SATURDAY: ("Saturday", "Sábado"),
    Weekday.SUNDAY: ("Sunday", "Domingo"),
}

_SPELLING_LOOKUP: Dict[str, Weekday] = {
    spelling: day
    for day, spellings in WEEKDAY_SPELLINGS.items()
    for spelling in spellings
}
