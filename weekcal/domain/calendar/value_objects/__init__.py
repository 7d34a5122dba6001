"""Value objects for the calendar-week domain."""

from ..enums import Weekday, WeekRule
from .calendar_week import CalendarWeek
from .gregorian import GregorianCalendar
from .week_convention import WeekConvention
from .weekday import first_occurrence

__all__ = [
    # Enums
    "Weekday",
    "WeekRule",
    # Value objects
    "CalendarWeek",
    "GregorianCalendar",
    "WeekConvention",
    # Helpers
    "first_occurrence",
]
