# File: src/models/forms.py

from dataclasses import dataclass
from typing import Optional

@dataclass
class EventForm:
    """Raw state of the add/edit form. Every value is kept as typed by the user."""
    title: str = ""
    date: str = ""         # YYYY-MM-DD
    start_time: str = ""   # HH:MM
    end_time: str = ""     # HH:MM
    description: str = ""
    location: str = ""
    category: str = ""
    is_repeating: bool = False
    repeat_type: str = "daily"
    repeat_interval: int = 1
    repeat_end_date: str = ""
    notification_time: int = 10
    editing_id: Optional[str] = None

    def missing_fields(self) -> list:
        """Names of required fields left blank."""
        required = {
            'title': self.title,
            'date': self.date,
            'start_time': self.start_time,
            'end_time': self.end_time,
        }
        return [name for name, value in required.items() if not str(value).strip()]
