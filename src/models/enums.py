# File: src/models/enums.py

from enum import Enum

class RepeatType(Enum):
    """Recurrence unit of a repeat rule."""
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class CalendarView(Enum):
    """Visible grid of the calendar."""
    WEEK = "week"
    MONTH = "month"


class SubmissionStatus(Enum):
    """Outcome of checking a form before it is saved."""
    READY = "ready"
    MISSING_FIELDS = "missing_fields"  # title, date or times left blank
    INVALID_TIME = "invalid_time"      # start not before end
    OVERLAP = "overlap"                # save needs user confirmation
