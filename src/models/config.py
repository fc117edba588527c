# File: src/models/config.py
"""
Data models for calendar configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass
class NotificationOption:
    """One entry of the lead-time menu (e.g. 10 -> '10분 전')."""
    value: int
    label: str

    def __post_init__(self):
        """Accept numeric strings from hand-edited config files."""
        if isinstance(self.value, str):
            self.value = int(self.value)


@dataclass
class CalendarConfig:
    """Menus and lookup tables supplied to the engine from outside."""
    categories: List[str] = field(default_factory=list)
    notification_options: List[NotificationOption] = field(default_factory=list)
    default_notification_time: int = 10
    holidays: Dict[str, str] = field(default_factory=dict)  # "YYYY-MM-DD" -> name
    overlap_horizon_days: int = 365
    notification_interval_seconds: float = 1.0

    def notification_label(self, minutes: int) -> Optional[str]:
        """Menu label for a lead time, or None when it is not on the menu."""
        for option in self.notification_options:
            if option.value == minutes:
                return option.label
        return None

    @classmethod
    def from_dict(cls, data: dict) -> 'CalendarConfig':
        """Create CalendarConfig from dictionary (e.g., loaded from JSON)."""
        options = [NotificationOption(**o) for o in data.get('notification_options', [])]

        return cls(
            categories=list(data.get('categories', [])),
            notification_options=options,
            default_notification_time=int(data.get('default_notification_time', 10)),
            holidays=dict(data.get('holidays', {})),
            overlap_horizon_days=int(data.get('overlap_horizon_days', 365)),
            notification_interval_seconds=float(data.get('notification_interval_seconds', 1.0)),
        )
