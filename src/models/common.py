# File: src/models/common.py

from datetime import date, datetime, time
from typing import Optional, Union

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse an ISO 'YYYY-MM-DD' string. Dates pass through, blanks give None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_time(value: Union[str, time]) -> time:
    """Parse a wall-clock 'HH:MM' string (seconds are accepted and kept)."""
    if isinstance(value, time):
        return value
    clean_str = value.strip()
    # <input type="time"> sends HH:MM, stored records sometimes carry seconds
    if clean_str.count(":") == 2:
        return datetime.strptime(clean_str, "%H:%M:%S").time()
    return datetime.strptime(clean_str, TIME_FORMAT).time()


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)
