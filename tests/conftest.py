# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events, forms and configuration for all tests.
"""

import json
import os
import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ.setdefault("LOG_DIR", "")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.models import (
    CalendarConfig, Event, EventForm, RepeatRule, RepeatType
)


# ==================== Configuration Fixtures ====================

@pytest.fixture
def sample_config():
    """Sample calendar configuration as stored in config.json."""
    return {
        'categories': ['업무', '개인', '가족', '기타'],
        'notification_options': [
            {'value': 1, 'label': '1분 전'},
            {'value': 10, 'label': '10분 전'},
            {'value': 60, 'label': '1시간 전'},
            {'value': 120, 'label': '2시간 전'},
            {'value': 1440, 'label': '1일 전'},
        ],
        'default_notification_time': 10,
        'overlap_horizon_days': 365,
        'notification_interval_seconds': 1,
        'holidays': {
            '2024-08-15': '광복절',
            '2024-09-16': '추석',
            '2024-09-17': '추석',
            '2024-09-18': '추석',
            '2024-10-03': '개천절',
        },
    }


@pytest.fixture
def calendar_config(sample_config):
    """Typed calendar configuration."""
    return CalendarConfig.from_dict(sample_config)


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Write the sample configuration to a temporary config.json."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_file = config_dir / "config.json"
    config_file.write_text(json.dumps(sample_config, ensure_ascii=False), encoding='utf-8')
    return config_file


# ==================== Event Fixtures ====================

@pytest.fixture
def create_test_event():
    """Factory fixture for creating test events."""
    def _create(
        title: str = "Test Event",
        event_date: str = "2024-07-01",
        start: str = "10:00",
        end: str = "11:00",
        event_id: str = None,
        repeat_type: RepeatType = RepeatType.NONE,
        interval: int = 1,
        end_date: str = None,
        notification_time: int = 10,
        **kwargs
    ) -> Event:
        """Create a test event with given parameters."""
        return Event(
            id=event_id,
            title=title,
            date=event_date,
            start_time=start,
            end_time=end,
            repeat=RepeatRule(type=repeat_type, interval=interval, end_date=end_date),
            notification_time=notification_time,
            **kwargs
        )

    return _create


@pytest.fixture
def team_meeting(create_test_event):
    """A single event on 2024-07-01 from 10:00 to 11:00."""
    return create_test_event(
        title="Team Meeting",
        event_id="1",
        description="Weekly sync",
        location="Room A",
        category="업무",
    )


@pytest.fixture
def weekly_standup(create_test_event):
    """A Monday standup repeating weekly from 2024-07-01 until the end of August."""
    return create_test_event(
        title="Standup",
        event_id="2",
        start="09:00",
        end="09:30",
        repeat_type=RepeatType.WEEKLY,
        end_date="2024-08-31",
        location="Online",
    )


@pytest.fixture
def month_end_report(create_test_event):
    """A report due on the 31st of every month, without an end date."""
    return create_test_event(
        title="Month-end Report",
        event_id="3",
        event_date="2024-01-31",
        start="17:00",
        end="18:00",
        repeat_type=RepeatType.MONTHLY,
    )


@pytest.fixture
def sample_events(team_meeting, weekly_standup, month_end_report):
    """Collection of sample events."""
    return [team_meeting, weekly_standup, month_end_report]


# ==================== Form Fixtures ====================

@pytest.fixture
def filled_form():
    """A complete form for a new single event."""
    return EventForm(
        title="Design Review",
        date="2024-07-02",
        start_time="14:00",
        end_time="15:00",
        description="Review the new layout",
        location="Room B",
        category="업무",
        notification_time=10,
    )


# ==================== Date/Time Fixtures ====================

@pytest.fixture
def july_first():
    """Monday, 2024-07-01."""
    return date(2024, 7, 1)


@pytest.fixture
def tick_time():
    """Factory for tick timestamps on 2024-07-01."""
    def _at(hour: int, minute: int, second: int = 0) -> datetime:
        return datetime(2024, 7, 1, hour, minute, second)

    return _at


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
