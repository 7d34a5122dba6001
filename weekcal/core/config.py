"""
Configuration for the default week convention.

Settings are read from ``WEEKCAL_*`` environment variables and an optional
``.env`` file every time ``get_settings()`` is called.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weekcal.domain.calendar.enums import Weekday, WeekRule


def parse_weekday(v: Any) -> Weekday:
    try:
        return Weekday.parse(v)
    except KeyError:
        raise ValueError(f"Unknown weekday: {v!r}") from None


def parse_week_rule(v: Any) -> WeekRule:
    try:
        return WeekRule.parse(v)
    except KeyError:
        raise ValueError(f"Unknown week rule: {v!r}") from None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEEKCAL_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    FIRST_DAY_OF_WEEK: Annotated[Weekday, BeforeValidator(parse_weekday)] = (
        Weekday.MONDAY
    )
    WEEK_RULE: Annotated[WeekRule, BeforeValidator(parse_week_rule)] = (
        WeekRule.FIRST_FOUR_DAY_WEEK
    )


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
