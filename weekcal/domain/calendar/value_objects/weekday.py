"""Weekday helpers."""

from datetime import date, timedelta

from ..enums import Weekday


def first_occurrence(weekday: Weekday | int, year: int) -> date:
    """
    Get the first date in year that falls on weekday.

    Args:
        weekday: Weekday to find (0=Monday, 6=Sunday)
        year: Year to search in

    Returns:
        First date on or after January 1 of year matching weekday
    """
    new_year = date(year, 1, 1)
    days_offset = (int(weekday) - new_year.weekday()) % 7
    return new_year + timedelta(days=days_offset)
