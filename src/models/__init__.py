from .enums import RepeatType, CalendarView, SubmissionStatus
from .common import parse_date, parse_time, format_time
from .event import Event, RepeatRule, event_from_dict, repeat_rule_from_dict
from .occurrence import Occurrence
from .forms import EventForm
from .config import NotificationOption, CalendarConfig
from .api import TimeValidationResult, Notification, SubmissionResult

__all__ = [
    "RepeatType",
    "CalendarView",
    "SubmissionStatus",
    "parse_date",
    "parse_time",
    "format_time",
    "Event",
    "RepeatRule",
    "event_from_dict",
    "repeat_rule_from_dict",
    "Occurrence",
    "EventForm",
    "NotificationOption",
    "CalendarConfig",
    "TimeValidationResult",
    "Notification",
    "SubmissionResult"
]
