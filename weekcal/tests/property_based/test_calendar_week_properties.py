"""
Property-Based Testing for CalendarWeek

Using Hypothesis to check the week invariants across all weekday / week rule
combinations and the full date range.
"""

from datetime import date, timedelta

from hypothesis import given, settings, strategies as st

from weekcal.domain.calendar.value_objects import (
    CalendarWeek,
    WeekConvention,
    Weekday,
    WeekRule,
)

# keeps every generated week inside the representable date range
MIN_DATE = date(2, 1, 1)
MAX_DATE = date(9998, 12, 1)


conventions = st.builds(
    WeekConvention, st.sampled_from(Weekday), st.sampled_from(WeekRule)
)
dates = st.dates(min_value=MIN_DATE, max_value=MAX_DATE)


@st.composite
def calendar_weeks(draw):
    """Generate valid weeks from explicit (year, week) pairs."""
    convention = draw(conventions)
    year = draw(st.integers(min_value=3, max_value=9997))
    week = draw(st.integers(min_value=1, max_value=convention.weeks_in_year(year)))
    return CalendarWeek(year, week, convention)


class TestCalendarWeekProperties:
    """Property-based tests for CalendarWeek."""

    @given(calendar_week=calendar_weeks())
    @settings(max_examples=300, deadline=None)
    def test_explicit_pair_is_stored_verbatim(self, calendar_week):
        """Test year and week pass through construction unchanged."""
        rebuilt = CalendarWeek(
            calendar_week.year, calendar_week.week, calendar_week.convention
        )

        assert rebuilt.year == calendar_week.year
        assert rebuilt.week == calendar_week.week

    @given(value=dates, convention=conventions)
    @settings(max_examples=500, deadline=None)
    def test_week_of_date_contains_date(self, value, convention):
        """Test every date lies in the week built from it."""
        calendar_week = CalendarWeek.from_date(value, convention)

        assert calendar_week.contains(value)
        assert calendar_week.convention == convention

    @given(calendar_week=calendar_weeks())
    @settings(max_examples=300, deadline=None)
    def test_boundaries(self, calendar_week):
        """Test weeks span seven days starting on the convention's weekday."""
        first_day = calendar_week.first_day

        assert calendar_week.last_day == first_day + timedelta(days=6)
        assert first_day.weekday() == calendar_week.convention.first_day_of_week

    @given(calendar_week=calendar_weeks())
    @settings(max_examples=300, deadline=None)
    def test_boundary_round_trip(self, calendar_week):
        """Test the first and last day map back to the same week."""
        convention = calendar_week.convention

        assert CalendarWeek.from_date(calendar_week.first_day, convention) == calendar_week
        assert CalendarWeek.from_date(calendar_week.last_day, convention) == calendar_week

    @given(calendar_week=calendar_weeks(), weeks=st.integers(min_value=-60, max_value=60))
    @settings(max_examples=300, deadline=None)
    def test_add_weeks_moves_first_day(self, calendar_week, weeks):
        """Test add_weeks shifts the first day by whole weeks."""
        shifted = calendar_week.add_weeks(weeks)

        assert shifted.first_day == calendar_week.first_day + timedelta(weeks=weeks)
        assert shifted.convention == calendar_week.convention
        if weeks > 0:
            assert shifted > calendar_week
        elif weeks < 0:
            assert shifted < calendar_week
        else:
            assert shifted == calendar_week

    @given(calendar_week=calendar_weeks(), days=st.integers(min_value=-400, max_value=400))
    @settings(max_examples=300, deadline=None)
    def test_timedelta_arithmetic(self, calendar_week, days):
        """Test adding and subtracting spans lands on the shifted day's week."""
        span = timedelta(days=days)
        target = calendar_week.first_day + span

        assert (calendar_week + span).contains(target)
        assert calendar_week - span == calendar_week + (-span)

    @given(value=dates)
    @settings(max_examples=500, deadline=None)
    def test_iso_convention_matches_isocalendar(self, value):
        """Test the ISO convention agrees with date.isocalendar()."""
        iso_year, iso_week, _ = value.isocalendar()

        calendar_week = CalendarWeek.from_date(value, WeekConvention.iso())

        assert (calendar_week.year, calendar_week.week) == (iso_year, iso_week)

    @given(year=st.integers(min_value=2, max_value=9998), convention=conventions)
    @settings(max_examples=300, deadline=None)
    def test_weeks_in_year(self, year, convention):
        """Test years hold 52 or 53 weeks and the next year follows the last."""
        weeks = convention.weeks_in_year(year)
        last_week = CalendarWeek(year, weeks, convention)

        assert weeks in (52, 53)
        assert last_week.add_weeks(1) == CalendarWeek(year + 1, 1, convention)

    @given(first=calendar_weeks(), second=calendar_weeks())
    @settings(max_examples=300, deadline=None)
    def test_ordering_and_equality(self, first, second):
        """Test ordering follows (year, week) and equality implies equal hashes."""
        key_first = (first.year, first.week)
        key_second = (second.year, second.week)

        assert (first < second) == (key_first < key_second)
        assert (first >= second) == (key_first >= key_second)
        if first == second:
            assert hash(first) == hash(second)
            assert key_first == key_second
        if first.convention != second.convention:
            assert first != second
