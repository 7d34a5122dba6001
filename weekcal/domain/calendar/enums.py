"""
Calendar Enumerations

Weekdays and week-numbering rules shared by the calendar value objects
and the configuration layer.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.weekday()`` (0=Monday, 6=Sunday)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: "Weekday | int | str") -> "Weekday":
        """Resolve a weekday from an enum member, its number or its name."""
        if isinstance(value, str) and not value.strip().isdigit():
            return cls[value.strip().upper()]
        return cls(int(value))


class WeekRule(str, Enum):
    """Policy anchoring week 1 of a year."""

    FIRST_DAY = "first_day"  # week containing January 1
    FIRST_FULL_WEEK = "first_full_week"
    FIRST_FOUR_DAY_WEEK = "first_four_day_week"  # ISO 8601 with Monday

    @property
    def min_days_in_first_week(self) -> int:
        """Days of the new year the first week must hold to count as week 1."""
        return _MIN_DAYS[self]

    @classmethod
    def parse(cls, value: "WeekRule | str") -> "WeekRule":
        """Resolve a rule from an enum member, its value or its name."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls[normalized.upper()]


_MIN_DAYS = {
    WeekRule.FIRST_DAY: 1,
    WeekRule.FIRST_FULL_WEEK: 7,
    WeekRule.FIRST_FOUR_DAY_WEEK: 4,
}
