"""
Week Convention Value Object

Bundles the first day of the week, the rule anchoring week 1 and the
day-counting calendar. All week-of-year arithmetic is defined here so that
calendar weeks only carry (year, week) plus their convention.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from weekcal.core.config import get_settings
from weekcal.domain.shared.exceptions import InvalidConventionError

from ..enums import Weekday, WeekRule
from .gregorian import GregorianCalendar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekConvention:
    """
    Week-numbering convention.

    Every day belongs to exactly one (year, week) pair. Days before week 1
    of their calendar year belong to the last week of the previous year,
    and days on or after week 1 of the next year belong to that year.
    """

    first_day_of_week: Weekday
    week_rule: WeekRule
    calendar: GregorianCalendar = field(default_factory=GregorianCalendar)

    def __post_init__(self):
        if not isinstance(self.calendar, GregorianCalendar):
            raise InvalidConventionError("calendar", self.calendar)
        if self.week_rule is None:
            raise InvalidConventionError("week_rule", self.week_rule)
        if self.first_day_of_week is None:
            raise InvalidConventionError("first_day_of_week", self.first_day_of_week)

        try:
            week_rule = WeekRule.parse(self.week_rule)
        except (KeyError, ValueError):
            raise InvalidConventionError("week_rule", self.week_rule) from None
        try:
            first_day_of_week = Weekday.parse(self.first_day_of_week)
        except (KeyError, ValueError, TypeError):
            raise InvalidConventionError(
                "first_day_of_week", self.first_day_of_week
            ) from None

        object.__setattr__(self, "week_rule", week_rule)
        object.__setattr__(self, "first_day_of_week", first_day_of_week)

    def __str__(self) -> str:
        """Return human-readable convention."""
        return (
            f"{self.first_day_of_week.name.title()}-first, "
            f"{self.week_rule.value} ({self.calendar})"
        )

    @classmethod
    def iso(cls) -> "WeekConvention":
        """Factory method for the ISO 8601 convention."""
        return cls(Weekday.MONDAY, WeekRule.FIRST_FOUR_DAY_WEEK)

    @classmethod
    def current(cls) -> "WeekConvention":
        """Build the process-wide default convention from the settings."""
        settings = get_settings()
        convention = cls(settings.FIRST_DAY_OF_WEEK, settings.WEEK_RULE)
        logger.debug("Resolved default week convention: %s", convention)
        return convention

    def first_week_start(self, year: int) -> int:
        """
        Get the day ordinal on which week 1 of year starts.

        The first occurrence of the start weekday opens week 1 unless the
        partial week before it holds enough days of the new year to count
        as week 1 itself.
        """
        new_year = self.calendar.new_year_ordinal(year)
        lead = (self.first_day_of_week - self.calendar.weekday_of(new_year)) % 7
        first_occurrence = new_year + lead
        if lead >= self.week_rule.min_days_in_first_week:
            return first_occurrence - 7
        return first_occurrence

    def weeks_in_year(self, year: int) -> int:
        """Get the number of weeks the convention assigns to year."""
        return (self.first_week_start(year + 1) - self.first_week_start(year)) // 7

    def year_and_week(self, value: date | datetime) -> tuple[int, int]:
        """
        Get the week-numbering year and week containing a date.

        Args:
            value: Date or datetime (the date part is used)

        Returns:
            (year, week) tuple, week starting at 1
        """
        if isinstance(value, datetime):
            value = value.date()

        ordinal = value.toordinal()
        year = value.year
        start = self.first_week_start(year)
        if ordinal < start:
            year -= 1
            start = self.first_week_start(year)
        else:
            next_start = self.first_week_start(year + 1)
            if ordinal >= next_start:
                year += 1
                start = next_start

        return year, (ordinal - start) // 7 + 1

    def week_of_year(self, value: date | datetime) -> int:
        """Get the week number of a date."""
        return self.year_and_week(value)[1]
