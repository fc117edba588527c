# File: src/processors/notification_scheduler.py
"""
Notification scheduling module.
Decides on each timer tick which events are inside their lead-time window.

The set of already-notified event ids is passed in and returned rather
than kept in module state, so every tick is a pure function of
(events, now, notified_ids).
"""

from datetime import datetime, timedelta
from typing import AbstractSet, FrozenSet, Iterable, List, Tuple

from src.models import Event, Notification
from src.processors.recurrence_expander import expand
from src.utils.logger import setup_logger, LoggerMixin

logger = setup_logger(__name__)

NOTIFICATION_MESSAGE = "{minutes}분 전: {title} 일정이 시작됩니다"


def format_notification_message(event: Event) -> str:
    return NOTIFICATION_MESSAGE.format(minutes=event.notification_time, title=event.title)


def is_due(occurrence_start: datetime, lead_minutes: int, now: datetime) -> bool:
    """True while now is in [start - lead, start)."""
    return occurrence_start - timedelta(minutes=lead_minutes) <= now < occurrence_start


def check_notifications(
    events: Iterable[Event],
    now: datetime,
    notified_ids: AbstractSet[str] = frozenset()
) -> Tuple[List[Notification], FrozenSet[str]]:
    """
    Collect notifications that became due at `now`.

    An event is due when one of its occurrences starts within its lead
    time and its id has not been notified yet. Drafts without an id are
    never notified.

    Args:
        events: Current event collection
        now: Naive local wall-clock time of this tick
        notified_ids: Ids surfaced on earlier ticks (not modified)

    Returns:
        Tuple of (due notifications, notified ids including the new ones)
    """
    notified = set(notified_ids)
    due: List[Notification] = []

    for event in events:
        if event.id is None or event.id in notified:
            continue

        lead = timedelta(minutes=event.notification_time)
        for day in expand(event, now.date(), (now + lead).date()):
            if is_due(event.start_datetime(day), event.notification_time, now):
                due.append(Notification(event.id, format_notification_message(event)))
                notified.add(event.id)
                logger.debug(f"Notification due for '{event.title}' on {day.isoformat()}")
                break

    return due, frozenset(notified)


class NotificationCenter(LoggerMixin):
    """
    Notification state of one session.

    Threads the notified ids from tick to tick and keeps the list shown to
    the user. Dismissing hides a notification but never lets it surface
    again; only a new center (a new session) starts from scratch.
    """

    def __init__(self):
        self.notified_ids: FrozenSet[str] = frozenset()
        self.notifications: List[Notification] = []

    def tick(self, events: Iterable[Event], now: datetime) -> List[Notification]:
        """Run one scheduler pass and return the notifications it added."""
        due, self.notified_ids = check_notifications(events, now, self.notified_ids)

        if due:
            self.notifications.extend(due)
            self.logger.info(f"{len(due)} new notifications at {now.strftime('%H:%M:%S')}")

        return due

    def dismiss(self, index: int) -> None:
        """Remove a notification from the displayed list."""
        if not 0 <= index < len(self.notifications):
            self.logger.warning(f"No notification at index {index}")
            return

        dismissed = self.notifications.pop(index)
        self.logger.debug(f"Dismissed notification for event {dismissed.event_id}")

    def is_notified(self, event_id: str) -> bool:
        return event_id in self.notified_ids
