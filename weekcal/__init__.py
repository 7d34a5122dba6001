"""Calendar weeks under configurable week-numbering conventions."""

from weekcal.core.config import Settings, get_settings
from weekcal.domain.calendar.value_objects import (
    CalendarWeek,
    GregorianCalendar,
    WeekConvention,
    Weekday,
    WeekRule,
    first_occurrence,
)
from weekcal.domain.shared.exceptions import (
    DomainError,
    ErrorType,
    InvalidConventionError,
    OutOfRangeError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarWeek",
    "DomainError",
    "ErrorType",
    "GregorianCalendar",
    "InvalidConventionError",
    "OutOfRangeError",
    "Settings",
    "ValidationError",
    "WeekConvention",
    "WeekRule",
    "Weekday",
    "first_occurrence",
    "get_settings",
]
