# File: src/core/event_planner.py
"""
Event submission workflow.

Turns form input into an Event and decides whether it can be saved:
required fields first, then the time range, then overlaps with the
existing collection. Persisting the event is left to the caller.
"""

from typing import List, Optional

from src.core.config_manager import Config
from src.models import (
    CalendarConfig,
    Event,
    EventForm,
    RepeatRule,
    RepeatType,
    SubmissionResult,
    SubmissionStatus,
    parse_date,
    format_time,
)
from src.processors.overlap_detector import find_overlapping_events
from src.processors.time_validator import validate_time_range
from src.utils.logger import LoggerMixin

MISSING_FIELDS_MESSAGE = "필수 정보를 모두 입력해주세요."
INVALID_TIME_MESSAGE = "시간 설정을 확인해주세요."
OVERLAP_MESSAGE = "다음 일정과 겹칩니다. 계속 진행하시겠습니까?"


class EventPlanner(LoggerMixin):
    """
    Checks event forms against the current collection.

    The category and lead-time menus come from CalendarConfig and are only
    offered to the form; any non-empty category and any non-negative lead
    time is accepted here.
    """

    def __init__(self, calendar_config: Optional[CalendarConfig] = None):
        self.calendar_config = calendar_config or CalendarConfig(
            overlap_horizon_days=Config.OVERLAP_HORIZON_DAYS,
            notification_interval_seconds=Config.NOTIFICATION_INTERVAL_SECONDS,
        )

    def new_form(self) -> EventForm:
        """Blank form with the configured default lead time."""
        return EventForm(notification_time=self.calendar_config.default_notification_time)

    def build_event(self, form: EventForm) -> Event:
        """
        Create an Event from form input.

        A form that is not marked repeating always gets a 'none' rule, and a
        blank repeat end date means the rule has no end.

        Raises:
            ValueError: If the date or times do not parse, or end is not after start
        """
        repeat_type = RepeatType(form.repeat_type) if form.is_repeating else RepeatType.NONE

        return Event(
            id=form.editing_id,
            title=form.title.strip(),
            date=parse_date(form.date),
            start_time=form.start_time,
            end_time=form.end_time,
            description=form.description,
            location=form.location,
            category=form.category,
            repeat=RepeatRule(
                type=repeat_type,
                interval=int(form.repeat_interval),
                end_date=parse_date(form.repeat_end_date),
            ),
            notification_time=int(form.notification_time),
        )

    def prepare_submission(self, form: EventForm, events: List[Event]) -> SubmissionResult:
        """
        Decide whether a form can be saved.

        Args:
            form: Current form state
            events: Existing event collection (not modified)

        Returns:
            SubmissionResult; status OVERLAP carries the colliding events so
            the caller can ask the user before saving anyway
        """
        missing = form.missing_fields()
        if missing:
            self.logger.info(f"Submission blocked, missing fields: {', '.join(missing)}")
            return SubmissionResult(SubmissionStatus.MISSING_FIELDS, message=MISSING_FIELDS_MESSAGE)

        validation = validate_time_range(form.start_time, form.end_time)
        if not validation.is_valid:
            self.logger.info(f"Submission blocked: {validation.start_error}")
            return SubmissionResult(SubmissionStatus.INVALID_TIME, message=INVALID_TIME_MESSAGE)

        event = self.build_event(form)

        overlapping = find_overlapping_events(
            event, events, horizon_days=self.calendar_config.overlap_horizon_days
        )
        if overlapping:
            self.logger.warning(
                f"'{event.title}' overlaps {len(overlapping)} events: "
                f"{', '.join(e.title for e in overlapping)}"
            )
            return SubmissionResult(
                SubmissionStatus.OVERLAP,
                event=event,
                message=OVERLAP_MESSAGE,
                overlapping_events=overlapping,
            )

        self.logger.info(f"'{event.title}' is ready to be saved")
        return SubmissionResult(SubmissionStatus.READY, event=event)

    def form_from_event(self, event: Event) -> EventForm:
        """Fill the form for editing an existing event."""
        return EventForm(
            title=event.title,
            date=event.date.isoformat(),
            start_time=format_time(event.start_time),
            end_time=format_time(event.end_time),
            description=event.description,
            location=event.location,
            category=event.category,
            is_repeating=event.is_repeating,
            repeat_type=event.repeat.type.value if event.is_repeating else "daily",
            repeat_interval=event.repeat.interval,
            repeat_end_date=event.repeat.end_date.isoformat() if event.repeat.end_date else "",
            notification_time=event.notification_time,
            editing_id=event.id,
        )

