# File: tests/unit/test_date_utils.py
"""
Unit tests for calendar date utilities.
"""

import pytest
from datetime import date, timedelta
from src.models import Occurrence
from src.utils.date_utils import (
    format_date,
    format_month,
    format_week,
    get_days_in_month,
    get_events_for_day,
    get_month_range,
    get_week_dates,
    get_weeks_at_month,
    is_date_in_range,
)


# ==================== Week Tests ====================

class TestGetWeekDates:
    """Tests for get_week_dates."""

    def test_week_runs_sunday_to_saturday(self):
        week = get_week_dates(date(2024, 7, 3))  # Wednesday

        assert week[0] == date(2024, 6, 30)
        assert week[-1] == date(2024, 7, 6)
        assert [d.weekday() for d in week] == [6, 0, 1, 2, 3, 4, 5]

    def test_week_of_sunday_starts_on_that_sunday(self):
        assert get_week_dates(date(2024, 7, 7))[0] == date(2024, 7, 7)

    def test_week_of_saturday_ends_on_that_saturday(self):
        assert get_week_dates(date(2024, 7, 6))[-1] == date(2024, 7, 6)

    def test_week_across_year_boundary(self):
        week = get_week_dates(date(2024, 12, 31))

        assert week[0] == date(2024, 12, 29)
        assert week[-1] == date(2025, 1, 4)

    def test_week_dates_are_consecutive(self):
        week = get_week_dates(date(2024, 2, 28))

        assert len(week) == 7
        assert all(b - a == timedelta(days=1) for a, b in zip(week, week[1:]))


# ==================== Month Grid Tests ====================

class TestGetWeeksAtMonth:
    """Tests for get_weeks_at_month."""

    @pytest.mark.parametrize("target, days", [
        (date(2024, 7, 15), 31),
        (date(2024, 2, 10), 29),
        (date(2023, 2, 10), 28),
        (date(2015, 2, 1), 28),
        (date(2024, 9, 30), 30),
        (date(2024, 12, 1), 31),
    ])
    def test_every_day_appears_exactly_once(self, target, days):
        weeks = get_weeks_at_month(target)
        slots = [day for week in weeks for day in week if day is not None]

        assert slots == list(range(1, days + 1))
        assert all(len(week) == 7 for week in weeks)

    def test_july_2024_grid(self):
        weeks = get_weeks_at_month(date(2024, 7, 1))

        assert len(weeks) == 5
        assert weeks[0] == [None, 1, 2, 3, 4, 5, 6]
        assert weeks[-1] == [28, 29, 30, 31, None, None, None]

    def test_leap_february_grid(self):
        weeks = get_weeks_at_month(date(2024, 2, 1))

        assert weeks[0] == [None, None, None, None, 1, 2, 3]
        assert weeks[-1] == [25, 26, 27, 28, 29, None, None]

    def test_february_starting_sunday_fills_four_rows(self):
        weeks = get_weeks_at_month(date(2015, 2, 14))

        assert len(weeks) == 4
        assert weeks[0] == [1, 2, 3, 4, 5, 6, 7]
        assert weeks[-1] == [22, 23, 24, 25, 26, 27, 28]


class TestMonthHelpers:
    """Tests for month length and range helpers."""

    @pytest.mark.parametrize("year, month, expected", [
        (2024, 1, 31),
        (2024, 2, 29),
        (2023, 2, 28),
        (1900, 2, 28),
        (2000, 2, 29),
        (2024, 4, 30),
        (2024, 12, 31),
    ])
    def test_get_days_in_month(self, year, month, expected):
        assert get_days_in_month(year, month) == expected

    def test_get_month_range(self):
        assert get_month_range(date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_is_date_in_range_is_inclusive(self):
        start, end = date(2024, 7, 1), date(2024, 7, 31)

        assert is_date_in_range(start, start, end) is True
        assert is_date_in_range(end, start, end) is True
        assert is_date_in_range(date(2024, 8, 1), start, end) is False


# ==================== Day Lookup Tests ====================

class TestGetEventsForDay:
    """Tests for get_events_for_day."""

    def test_returns_events_landing_on_day(self, team_meeting, weekly_standup):
        occurrences = [
            Occurrence(team_meeting, date(2024, 7, 1)),
            Occurrence(weekly_standup, date(2024, 7, 1)),
            Occurrence(weekly_standup, date(2024, 7, 8)),
        ]

        assert get_events_for_day(occurrences, 1) == [team_meeting, weekly_standup]
        assert get_events_for_day(occurrences, 8) == [weekly_standup]
        assert get_events_for_day(occurrences, 2) == []


# ==================== Formatting Tests ====================

class TestFormatting:
    """Tests for labels and date keys."""

    def test_format_month(self):
        assert format_month(date(2024, 7, 10)) == "2024년 7월"

    def test_format_date(self):
        assert format_date(date(2024, 7, 10)) == "2024-07-10"
        assert format_date(date(2024, 7, 10), 5) == "2024-07-05"

    @pytest.mark.parametrize("target, expected", [
        (date(2024, 7, 1), "2024년 7월 1주"),
        (date(2024, 7, 17), "2024년 7월 3주"),
        (date(2024, 7, 31), "2024년 8월 1주"),
        (date(2024, 12, 31), "2025년 1월 1주"),
    ])
    def test_format_week(self, target, expected):
        assert format_week(target) == expected
