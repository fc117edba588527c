# File: src/models/api.py
"""
Result types returned by the scheduling engine.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from .enums import SubmissionStatus
from .event import Event

@dataclass(frozen=True)
class TimeValidationResult:
    """Per-field messages for a start/end pair. None means the field is valid."""
    start_error: Optional[str] = None
    end_error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return not self.start_error and not self.end_error


@dataclass(frozen=True)
class Notification:
    """A due notification, keyed by the identity of the event it announces."""
    event_id: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SubmissionResult:
    """Outcome of checking an event form before saving."""
    status: SubmissionStatus
    event: Optional[Event] = None
    message: Optional[str] = None
    overlapping_events: List[Event] = field(default_factory=list)

    def is_ready(self) -> bool:
        """Check if the event can be saved without asking the user."""
        return self.status == SubmissionStatus.READY

    def needs_confirmation(self) -> bool:
        return self.status == SubmissionStatus.OVERLAP
