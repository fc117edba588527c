# File: src/processors/time_validator.py
"""
Start/end time validation for the event form.
Runs on every change of either field and again on submit.
"""

from datetime import datetime, time
from typing import Optional

from src.core.config_manager import Config
from src.models.api import TimeValidationResult

MISSING_TIME_MESSAGE = "시작 시간과 종료 시간을 모두 입력해주세요."
INVALID_FORMAT_MESSAGE = "시간 형식이 올바르지 않습니다. (HH:MM)"
START_AFTER_END_MESSAGE = "시작 시간은 종료 시간보다 빨라야 합니다."
END_BEFORE_START_MESSAGE = "종료 시간은 시작 시간보다 늦어야 합니다."


def _parse(value: str) -> Optional[time]:
    try:
        return datetime.strptime(value, Config.TIME_FORMAT).time()
    except ValueError:
        return None


def validate_time_range(start: Optional[str], end: Optional[str]) -> TimeValidationResult:
    """
    Check a start/end pair independently of the date.

    Both fields get a message when either value is blank or malformed,
    or when start is not strictly before end.

    Example:
        >>> validate_time_range("10:00", "11:00").is_valid
        True
        >>> validate_time_range("11:00", "10:00").start_error
        '시작 시간은 종료 시간보다 빨라야 합니다.'
    """
    start = (start or "").strip()
    end = (end or "").strip()

    if not start or not end:
        return TimeValidationResult(MISSING_TIME_MESSAGE, MISSING_TIME_MESSAGE)

    start_value, end_value = _parse(start), _parse(end)
    if start_value is None or end_value is None:
        return TimeValidationResult(INVALID_FORMAT_MESSAGE, INVALID_FORMAT_MESSAGE)

    if start_value >= end_value:
        return TimeValidationResult(START_AFTER_END_MESSAGE, END_BEFORE_START_MESSAGE)

    return TimeValidationResult()
