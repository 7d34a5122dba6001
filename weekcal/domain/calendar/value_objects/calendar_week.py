"""
Calendar Week Value Object

Immutable "week W of year Y" under a week convention, with boundary dates,
week arithmetic, ordering and equality.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from weekcal.domain.shared.exceptions import OutOfRangeError

from .week_convention import WeekConvention
from .weekday import first_occurrence

logger = logging.getLogger(__name__)

_HASH_MULTIPLIER = 397


@dataclass(frozen=True, eq=False)
class CalendarWeek:
    """
    Represents a calendar week in a specific year.

    ``year`` is the week-numbering year, which differs from the calendar
    year for days that the convention assigns to an adjacent year's week
    (2017-01-01 is in week 52 of 2016 under ISO 8601).

    Ordering compares (year, week) only. Equality additionally requires
    equal conventions, so weeks from different conventions can be neither
    less, greater nor equal.
    """

    year: int
    week: int
    convention: WeekConvention = field(default_factory=WeekConvention.current)

    def __post_init__(self):
        if self.convention is None:
            object.__setattr__(self, "convention", WeekConvention.current())

        for name in ("year", "week"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer, got {type(value)}")

        calendar = self.convention.calendar
        if not calendar.supports_year(self.year):
            logger.debug("Rejected year %s outside %s", self.year, calendar)
            raise OutOfRangeError(
                "year",
                self.year,
                f"must be between {calendar.min_year} and {calendar.max_year}",
            )

        max_week = self.convention.weeks_in_year(self.year)
        if self.week < 1 or self.week > max_week:
            logger.debug(
                "Rejected week %s of %s, convention allows 1..%s",
                self.week,
                self.year,
                max_week,
            )
            raise OutOfRangeError(
                "week", self.week, f"must be between 1 and {max_week} for {self.year}"
            )

        start = self.convention.first_week_start(self.year) + (self.week - 1) * 7
        if not (
            calendar.contains_ordinal(start) and calendar.contains_ordinal(start + 6)
        ):
            logger.debug(
                "Rejected week %s of %s outside %s", self.week, self.year, calendar
            )
            raise OutOfRangeError(
                "week", self.week, f"week {self.week} of {self.year} exceeds {calendar}"
            )

    @classmethod
    def from_date(
        cls, value: date | datetime, convention: WeekConvention | None = None
    ) -> "CalendarWeek":
        """
        Create the calendar week containing a date.

        Args:
            value: Date or datetime to use
            convention: Convention for calculation, defaults to the current one

        Returns:
            CalendarWeek containing value
        """
        convention = convention or WeekConvention.current()
        year, week = convention.year_and_week(value)
        return cls(year, week, convention)

    @classmethod
    def today(cls, convention: WeekConvention | None = None) -> "CalendarWeek":
        """Factory method for the week containing today's date."""
        return cls.from_date(date.today(), convention)

    def __str__(self) -> str:
        """Return week in YYYY-Www form."""
        return f"{self.year:04d}-W{self.week:02d}"

    @property
    def first_day(self) -> date:
        """Get the first day of the week."""
        anchor = first_occurrence(self.convention.first_day_of_week, self.year)
        anchor_week = self.convention.week_of_year(anchor)

        # anchor is the second week when the partial week before it is week 1
        if anchor_week <= 1:
            offset = self.week - 1
        else:
            offset = self.week - anchor_week
        return anchor + timedelta(weeks=offset)

    @property
    def last_day(self) -> date:
        """Get the last day of the week."""
        return self.first_day + timedelta(days=6)

    @property
    def weeks_in_year(self) -> int:
        """Get the number of weeks in this week's year."""
        return self.convention.weeks_in_year(self.year)

    def days(self) -> tuple[date, ...]:
        """Get the seven dates of the week in order."""
        first_day = self.first_day
        return tuple(first_day + timedelta(days=offset) for offset in range(7))

    def add_weeks(self, weeks: int) -> "CalendarWeek":
        """
        Add an amount of weeks.

        Accepts negative values and handles year breaks by re-deriving the
        week from the shifted first day.
        """
        return CalendarWeek.from_date(
            self.first_day + timedelta(weeks=weeks), self.convention
        )

    def contains(self, value: date | datetime) -> bool:
        """Check if a date lies between first_day and last_day (inclusive)."""
        if isinstance(value, datetime):
            value = value.date()
        return self.first_day <= value <= self.last_day

    def __contains__(self, value: date | datetime) -> bool:
        return self.contains(value)

    def _shift(self, span: timedelta) -> "CalendarWeek":
        moment = datetime.combine(self.first_day, time.min) + span
        return CalendarWeek.from_date(moment, self.convention)

    def __add__(self, other: timedelta) -> "CalendarWeek":
        """Get the week containing first_day shifted forward by a timedelta."""
        if not isinstance(other, timedelta):
            return NotImplemented
        return self._shift(other)

    __radd__ = __add__

    def __sub__(self, other: timedelta) -> "CalendarWeek":
        """Get the week containing first_day shifted back by a timedelta."""
        if not isinstance(other, timedelta):
            return NotImplemented
        return self._shift(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return (
            self.convention == other.convention
            and self.year == other.year
            and self.week == other.week
        )

    def __hash__(self) -> int:
        result = hash(self.convention)
        result = (result * _HASH_MULTIPLIER) ^ self.year
        result = (result * _HASH_MULTIPLIER) ^ self.week
        return result

    def __lt__(self, other: "CalendarWeek") -> bool:
        """Compare weeks by year, then week."""
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return (self.year, self.week) < (other.year, other.week)

    def __le__(self, other: "CalendarWeek") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return (self.year, self.week) <= (other.year, other.week)

    def __gt__(self, other: "CalendarWeek") -> bool:
        """Greater than comparison."""
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return (self.year, self.week) > (other.year, other.week)

    def __ge__(self, other: "CalendarWeek") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, CalendarWeek):
            return NotImplemented
        return (self.year, self.week) >= (other.year, other.week)
