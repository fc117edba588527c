# File: src/processors/recurrence_expander.py
"""
Recurrence expansion module.
Turns an event's repeat rule into the concrete dates it lands on within a range.

Monthly and yearly rules never clamp: a rule based on the 31st has no
occurrence in a 30-day month, and a Feb 29 rule only lands in leap years.
This is the RFC 5545 behaviour of dateutil's rrule, which does the walking.
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Iterable, List

from dateutil.rrule import rrule, DAILY, WEEKLY, MONTHLY, YEARLY

from src.models import Event, Occurrence, RepeatType
from src.utils.date_utils import is_date_in_range
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

_FREQUENCIES = {
    RepeatType.DAILY: DAILY,
    RepeatType.WEEKLY: WEEKLY,
    RepeatType.MONTHLY: MONTHLY,
    RepeatType.YEARLY: YEARLY,
}

# Fixed-length steps in days, used to jump straight to the visible range
_STEP_DAYS = {
    RepeatType.DAILY: 1,
    RepeatType.WEEKLY: 7,
}


def _midnight(value: date) -> datetime:
    return datetime.combine(value, time.min)


def expand(event: Event, range_start: date, range_end: date) -> List[date]:
    """
    Dates on which `event` occurs between range_start and range_end (inclusive).

    The range end is always applied, so rules without an end date still
    terminate. The result is ascending and free of duplicates, and the same
    arguments always give the same list.

    Args:
        event: Event whose repeat rule is expanded
        range_start: First visible date
        range_end: Last visible date

    Returns:
        Ascending list of occurrence dates
    """
    if range_start > range_end:
        return []

    rule = event.repeat
    base = event.date

    if not rule.is_repeating:
        return [base] if is_date_in_range(base, range_start, range_end) else []

    limit = range_end if rule.end_date is None else min(rule.end_date, range_end)

    if rule.interval < 1:
        logger.warning(
            f"Invalid repeat interval {rule.interval} for '{event.title}', "
            f"only the base date is used"
        )
        return [base] if is_date_in_range(base, range_start, limit) else []

    if limit < base or limit < range_start:
        return []

    dtstart = base
    step_days = _STEP_DAYS.get(rule.type)
    if step_days is not None and range_start > base:
        # Skip whole intervals that end before the range
        step = step_days * rule.interval
        skipped = math.ceil((range_start - base).days / step)
        dtstart = base + timedelta(days=skipped * step)

    recurrence = rrule(
        _FREQUENCIES[rule.type],
        dtstart=_midnight(dtstart),
        interval=rule.interval,
        until=_midnight(limit),
    )
    dates = [
        occurrence.date()
        for occurrence in recurrence.between(_midnight(range_start), _midnight(limit), inc=True)
    ]

    logger.debug(
        f"Expanded '{event.title}' ({rule.type.value}/{rule.interval}) "
        f"to {len(dates)} dates in {range_start}..{range_end}"
    )
    return dates


def expand_occurrences(event: Event, range_start: date, range_end: date) -> List[Occurrence]:
    """Occurrences of a single event within the range."""
    return [Occurrence(event, day) for day in expand(event, range_start, range_end)]


def expand_events(events: Iterable[Event], range_start: date, range_end: date) -> List[Occurrence]:
    """
    Occurrences of many events within the range.

    Ordered by date, then start time; ties keep the input order.
    """
    occurrences = [
        occurrence
        for event in events
        for occurrence in expand_occurrences(event, range_start, range_end)
    ]
    occurrences.sort(key=lambda o: (o.date, o.event.start_time))
    return occurrences
