# File: src/services/calendar_view.py
"""
Calendar view state: which grid is shown, which date it is anchored on,
and the data each grid needs (dates, labels, occurrences, holidays).
"""

from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from src.models import CalendarView, Event, Occurrence
from src.processors.recurrence_expander import expand_events
from src.utils.date_utils import (
    format_month,
    format_week,
    get_days_in_month,
    get_month_range,
    get_week_dates,
    get_weeks_at_month,
)


def shift_month(target: date, months: int) -> date:
    """Same day in another month, moved back to the last day when it does not exist."""
    month_index = target.month - 1 + months
    year = target.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(target.day, get_days_in_month(year, month)))


@dataclass(frozen=True)
class CalendarViewState:
    """Grid type and anchor date. Navigation returns a new state."""
    view: CalendarView = CalendarView.MONTH
    current_date: Optional[date] = None

    def __post_init__(self):
        """Convert string view names and default to today."""
        if isinstance(self.view, str):
            object.__setattr__(self, 'view', CalendarView(self.view))
        if self.current_date is None:
            object.__setattr__(self, 'current_date', date.today())

    def navigate(self, direction: str) -> 'CalendarViewState':
        """
        Move one week or one month back ('prev') or forward ('next').

        Raises:
            ValueError: For any other direction
        """
        if direction not in ("prev", "next"):
            raise ValueError(f"Unknown direction: {direction}")

        step = -1 if direction == "prev" else 1

        if self.view == CalendarView.WEEK:
            return replace(self, current_date=self.current_date + timedelta(days=7 * step))

        return replace(self, current_date=shift_month(self.current_date, step))

    def with_view(self, view: CalendarView) -> 'CalendarViewState':
        return replace(self, view=view)

    def visible_range(self) -> Tuple[date, date]:
        """First and last date shown by the current grid."""
        if self.view == CalendarView.WEEK:
            week_dates = get_week_dates(self.current_date)
            return week_dates[0], week_dates[-1]
        return get_month_range(self.current_date)

    def label(self) -> str:
        if self.view == CalendarView.WEEK:
            return format_week(self.current_date)
        return format_month(self.current_date)

    def week_dates(self) -> List[date]:
        return get_week_dates(self.current_date)

    def month_weeks(self) -> List[List[Optional[int]]]:
        return get_weeks_at_month(self.current_date)

    def occurrences(self, events: Iterable[Event]) -> List[Occurrence]:
        """Occurrences of `events` inside the visible range."""
        range_start, range_end = self.visible_range()
        return expand_events(events, range_start, range_end)

    def holidays(self, holiday_table: Dict[str, str]) -> Dict[str, str]:
        """Holidays inside the visible range, keyed by ISO date."""
        range_start, range_end = self.visible_range()
        return {
            key: name for key, name in holiday_table.items()
            if range_start.isoformat() <= key <= range_end.isoformat()
        }
