# File: src/models/occurrence.py

from dataclasses import dataclass
from datetime import date, datetime
from .event import Event

@dataclass(frozen=True)
class Occurrence:
    """One concrete date of an event. Derived for display and conflict checks, never stored."""
    event: Event
    date: date

    def __hash__(self):
        # Event is mutable and unhashable; key on its identity fields instead
        return hash((self.event.id, self.event.title, self.date))

    @property
    def start(self) -> datetime:
        return self.event.start_datetime(self.date)

    @property
    def end(self) -> datetime:
        return self.event.end_datetime(self.date)

    def overlaps_with(self, other: 'Occurrence') -> bool:
        """Check if this occurrence overlaps with another (half-open ranges)."""
        return self.start < other.end and other.start < self.end
