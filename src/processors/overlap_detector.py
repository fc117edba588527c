# File: src/processors/overlap_detector.py
"""
Overlap detection module.
Finds existing events that collide with an event about to be saved.
The result is advisory: the caller decides whether to block or ask the user.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from src.core.config_manager import Config
from src.models import Event
from src.processors.recurrence_expander import expand
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def times_overlap(first: Event, second: Event) -> bool:
    """Half-open [start, end) overlap of the wall-clock ranges; touching ends do not overlap."""
    return first.start_time < second.end_time and second.start_time < first.end_time


def is_overlapping(first: Event, second: Event) -> bool:
    """Overlap of two events on their base dates only."""
    return first.date == second.date and times_overlap(first, second)


def comparison_window(
    candidate: Event,
    horizon_days: int = Config.OVERLAP_HORIZON_DAYS
) -> Tuple[date, date]:
    """
    Dates on which the candidate is compared against existing events.

    A single event is compared on its own date. A repeating one from its
    date to its rule end date, or for `horizon_days` when it has none.
    """
    if not candidate.is_repeating:
        return candidate.date, candidate.date

    end_date = candidate.repeat.end_date
    if end_date is None:
        return candidate.date, candidate.date + timedelta(days=horizon_days)

    return candidate.date, max(candidate.date, end_date)


def find_overlapping_events(
    candidate: Event,
    events: Iterable[Event],
    range_start: Optional[date] = None,
    range_end: Optional[date] = None,
    horizon_days: int = Config.OVERLAP_HORIZON_DAYS
) -> List[Event]:
    """
    Existing events sharing a date and a time range with the candidate.

    Every occurrence of both sides inside the comparison window is checked,
    so repeating events collide on any shared date, not just the base date.
    The candidate's own identity is skipped, which keeps an edited event
    from colliding with its previous version.

    Args:
        candidate: Event being created or edited
        events: Current event collection (not modified)
        range_start: Override for the start of the comparison window
        range_end: Override for the end of the comparison window
        horizon_days: Window length for repeating candidates without an end date

    Returns:
        Overlapping events in input order, each listed once
    """
    default_start, default_end = comparison_window(candidate, horizon_days)
    range_start = range_start or default_start
    range_end = range_end or default_end

    candidate_dates = set(expand(candidate, range_start, range_end))
    if not candidate_dates:
        logger.debug(f"'{candidate.title}' has no occurrence in {range_start}..{range_end}")
        return []

    first_date, last_date = min(candidate_dates), max(candidate_dates)
    overlapping: List[Event] = []

    for event in events:
        if candidate.id is not None and event.id == candidate.id:
            continue

        if not times_overlap(candidate, event):
            continue

        shared = candidate_dates.intersection(expand(event, first_date, last_date))
        if shared:
            logger.debug(
                f"'{candidate.title}' overlaps '{event.title}' on {min(shared).isoformat()}"
            )
            overlapping.append(event)

    if overlapping:
        logger.info(f"Found {len(overlapping)} overlapping events for '{candidate.title}'")

    return overlapping
