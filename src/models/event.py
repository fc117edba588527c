# File: src/models/event.py

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional
from .enums import RepeatType
from .common import parse_date, parse_time, format_time

@dataclass
class RepeatRule:
    """How an event recurs: every `interval` units until `end_date` (inclusive)."""
    type: RepeatType = RepeatType.NONE
    interval: int = 1
    end_date: Optional[date] = None

    def __post_init__(self):
        """Convert string fields coming from form or store records."""
        if isinstance(self.type, str):
            self.type = RepeatType(self.type.lower())

        if isinstance(self.end_date, str):
            self.end_date = parse_date(self.end_date)

        # bool is an int subclass, reject it explicitly
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise ValueError(f"Repeat interval must be an integer: {self.interval!r}")

    @property
    def is_repeating(self) -> bool:
        return self.type != RepeatType.NONE

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'interval': self.interval,
            'endDate': self.end_date.isoformat() if self.end_date else None,
        }


@dataclass
class Event:
    """A calendar event on a single day, optionally repeating."""
    title: str
    date: date
    start_time: time
    end_time: time
    description: str = ""
    location: str = ""
    category: str = ""
    repeat: RepeatRule = field(default_factory=RepeatRule)
    notification_time: int = 10  # minutes before start
    id: Optional[str] = None  # None until the store persists the event

    def __post_init__(self):
        """Convert string fields and validate the time range."""
        if isinstance(self.date, str):
            self.date = parse_date(self.date)
        if isinstance(self.start_time, str):
            self.start_time = parse_time(self.start_time)
        if isinstance(self.end_time, str):
            self.end_time = parse_time(self.end_time)
        if isinstance(self.repeat, dict):
            self.repeat = repeat_rule_from_dict(self.repeat)

        if self.date is None:
            raise ValueError(f"Event date is required: {self.title}")

        if self.end_time <= self.start_time:
            raise ValueError(f"Event end time must be after start time: {self.title}")

        if self.notification_time < 0:
            raise ValueError(f"Notification time cannot be negative: {self.title}")

    @property
    def is_repeating(self) -> bool:
        return self.repeat.is_repeating

    def start_datetime(self, on: Optional[date] = None) -> datetime:
        """Start of the event on `on` (defaults to the base date)."""
        return datetime.combine(on or self.date, self.start_time)

    def end_datetime(self, on: Optional[date] = None) -> datetime:
        return datetime.combine(on or self.date, self.end_time)

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end_datetime() - self.start_datetime()).total_seconds() / 60)

    def to_dict(self) -> dict:
        """Convert to the record format used by the event store."""
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date.isoformat(),
            'startTime': format_time(self.start_time),
            'endTime': format_time(self.end_time),
            'description': self.description,
            'location': self.location,
            'category': self.category,
            'repeat': self.repeat.to_dict(),
            'notificationTime': self.notification_time,
        }


def repeat_rule_from_dict(data: Optional[dict]) -> RepeatRule:
    """Create RepeatRule from a store record, accepting camelCase or snake_case keys."""
    if not data:
        return RepeatRule()

    return RepeatRule(
        type=str(data.get('type', 'none')),
        interval=int(data.get('interval', 1)),
        end_date=parse_date(data.get('endDate', data.get('end_date'))),
    )


def event_from_dict(data: dict) -> Event:
    """Create Event from a store record.

    Raises KeyError for a missing title/date/time and ValueError for values
    that do not parse.
    """
    raw_id = data.get('id')

    return Event(
        id=str(raw_id) if raw_id is not None else None,
        title=str(data['title']),
        date=parse_date(data['date']),
        start_time=parse_time(data['startTime'] if 'startTime' in data else data['start_time']),
        end_time=parse_time(data['endTime'] if 'endTime' in data else data['end_time']),
        description=str(data.get('description') or ''),
        location=str(data.get('location') or ''),
        category=str(data.get('category') or ''),
        repeat=repeat_rule_from_dict(data.get('repeat')),
        notification_time=int(data.get('notificationTime', data.get('notification_time', 10))),
    )
