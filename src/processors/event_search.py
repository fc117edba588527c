# File: src/processors/event_search.py
"""
Search and view filtering for the event list.
"""

from datetime import date
from typing import Iterable, List

from src.models import Event, CalendarView
from src.processors.recurrence_expander import expand
from src.utils.date_utils import get_month_range, get_week_dates


def _contains_term(target: str, term: str) -> bool:
    return term.lower() in (target or "").lower()


def search_events(events: Iterable[Event], term: str) -> List[Event]:
    """Case-insensitive match on title, description or location. A blank term matches all."""
    term = (term or "").strip()
    if not term:
        return list(events)

    return [
        event for event in events
        if _contains_term(event.title, term)
        or _contains_term(event.description, term)
        or _contains_term(event.location, term)
    ]


def filter_events_by_date_range(events: Iterable[Event], range_start: date, range_end: date) -> List[Event]:
    """Events with at least one occurrence in the range, in input order."""
    return [event for event in events if expand(event, range_start, range_end)]


def get_filtered_events(
    events: Iterable[Event],
    search_term: str,
    current_date: date,
    view: CalendarView
) -> List[Event]:
    """Events matching the search term that show up in the current week or month."""
    searched = search_events(events, search_term)

    if view == CalendarView.WEEK:
        week_dates = get_week_dates(current_date)
        return filter_events_by_date_range(searched, week_dates[0], week_dates[-1])

    if view == CalendarView.MONTH:
        month_start, month_end = get_month_range(current_date)
        return filter_events_by_date_range(searched, month_start, month_end)

    return searched
