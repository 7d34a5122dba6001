"""
Gregorian Calendar Value Object

Proleptic Gregorian day counting over a bounded date range. Days are handled
as ordinals (``date.toordinal()``) so that week boundaries just outside the
range can still be computed and compared.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GregorianCalendar:
    """
    Day-counting calendar used by a week convention.

    Bounds default to the range of ``datetime.date``. Ordinal 1 is
    0001-01-01, a Monday.
    """

    min_date: date = date.min
    max_date: date = date.max

    def __post_init__(self):
        if self.max_date < self.min_date:
            raise ValueError("Calendar max_date must not be before min_date")

    def __str__(self) -> str:
        """Return human-readable calendar range."""
        return f"Gregorian ({self.min_date} to {self.max_date})"

    @property
    def min_year(self) -> int:
        """First year of the supported range."""
        return self.min_date.year

    @property
    def max_year(self) -> int:
        """Last year of the supported range."""
        return self.max_date.year

    def supports_year(self, year: int) -> bool:
        """Check if year lies within the supported range."""
        return self.min_year <= year <= self.max_year

    def contains_ordinal(self, ordinal: int) -> bool:
        """Check if a day ordinal maps to a date inside the range."""
        return self.min_date.toordinal() <= ordinal <= self.max_date.toordinal()

    @staticmethod
    def new_year_ordinal(year: int) -> int:
        """Ordinal of January 1 of year, for any integer year."""
        y = year - 1
        return y * 365 + y // 4 - y // 100 + y // 400 + 1

    @staticmethod
    def weekday_of(ordinal: int) -> int:
        """Weekday of a day ordinal (0=Monday, 6=Sunday)."""
        return (ordinal + 6) % 7

