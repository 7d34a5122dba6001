import os
from collections.abc import Generator
from pathlib import Path

import pytest

from weekcal.domain.calendar.value_objects import WeekConvention, Weekday, WeekRule


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run without WEEKCAL_* variables or a .env file in the working directory."""
    for name in list(os.environ):
        if name.upper().startswith("WEEKCAL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def iso_convention() -> WeekConvention:
    return WeekConvention.iso()


@pytest.fixture
def us_convention() -> WeekConvention:
    """Sunday-first weeks, week 1 contains January 1."""
    return WeekConvention(Weekday.SUNDAY, WeekRule.FIRST_DAY)


@pytest.fixture
def full_week_convention() -> WeekConvention:
    """Monday-first weeks, week 1 is the first full week."""
    return WeekConvention(Weekday.MONDAY, WeekRule.FIRST_FULL_WEEK)
