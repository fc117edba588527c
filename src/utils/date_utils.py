# File: src/utils/date_utils.py
"""
Calendar arithmetic for the week and month grids.
All functions are pure; weeks run Sunday to Saturday.
"""

import calendar
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from src.models import Event, Occurrence

# calendar.Calendar numbers weekdays Monday=0, so 6 starts rows on Sunday
_SUNDAY_FIRST = calendar.Calendar(firstweekday=6)


def _day_of_week(target: date) -> int:
    """Weekday index with Sunday=0 ... Saturday=6."""
    return (target.weekday() + 1) % 7


def get_days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    return calendar.monthrange(year, month)[1]


def get_month_range(target: date) -> Tuple[date, date]:
    """First and last date of the month containing `target`."""
    first = target.replace(day=1)
    last = target.replace(day=get_days_in_month(target.year, target.month))
    return first, last


def get_week_dates(target: date) -> List[date]:
    """The 7 dates, Sunday through Saturday, of the week containing `target`."""
    sunday = target - timedelta(days=_day_of_week(target))
    return [sunday + timedelta(days=offset) for offset in range(7)]


def get_weeks_at_month(target: date) -> List[List[Optional[int]]]:
    """
    Month grid as rows of 7 day-of-month numbers.

    Slots before day 1 and after the last day are None, so every row has
    exactly 7 slots and every day of the month appears once.

    Example:
        >>> get_weeks_at_month(date(2024, 7, 1))[0]
        [None, 1, 2, 3, 4, 5, 6]
    """
    return [
        [day or None for day in week]
        for week in _SUNDAY_FIRST.monthdayscalendar(target.year, target.month)
    ]


def get_events_for_day(occurrences: Iterable[Occurrence], day: int) -> List[Event]:
    """Events with an occurrence on day-of-month `day`.

    The caller passes the occurrences of a single month (see
    expand_events); only the day number is compared.
    """
    return [occurrence.event for occurrence in occurrences if occurrence.date.day == day]


def format_date(target: date, day: Optional[int] = None) -> str:
    """ISO date key (YYYY-MM-DD), optionally for another day of the same month."""
    if day is not None:
        target = target.replace(day=day)
    return target.isoformat()


def format_month(target: date) -> str:
    return f"{target.year}년 {target.month}월"


def format_week(target: date) -> str:
    """
    Week label such as '2024년 7월 1주'.

    A week belongs to the month of its Thursday, and week 1 of a month is
    the week holding that month's first Thursday. This moves the last days
    of December into week 1 of January when that Thursday is in January.
    """
    thursday = target + timedelta(days=4 - _day_of_week(target))
    first_of_month = thursday.replace(day=1)
    first_thursday = first_of_month + timedelta(days=(4 - _day_of_week(first_of_month)) % 7)
    week_number = (thursday - first_thursday).days // 7 + 1
    return f"{thursday.year}년 {thursday.month}월 {week_number}주"


def is_date_in_range(target: date, range_start: date, range_end: date) -> bool:
    """Inclusive on both ends."""
    return range_start <= target <= range_end
