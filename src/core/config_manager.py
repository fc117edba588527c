# File: src/core/config_manager.py
"""
Centralized configuration management for the event scheduling engine.
Loads settings from environment variables and config files.
"""

import os
import json
from datetime import datetime
from pathlib import Path

import pytz
from dotenv import load_dotenv

from src.models.common import TIME_FORMAT
from src.models.config import CalendarConfig
from src.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from src/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"
    DATA_DIR = BASE_DIR / "data"

    # Files
    CONFIG_FILE = Path(os.getenv("CALENDAR_CONFIG_FILE", str(CONFIG_DIR / "config.json")))
    EVENTS_FILE = Path(os.getenv("EVENTS_FILE", str(DATA_DIR / "events.json")))

    # Wall clock used for the notification tick. Event times themselves are naive.
    TIMEZONE = os.getenv("TIMEZONE", "Asia/Seoul")

    # Engine Settings
    OVERLAP_HORIZON_DAYS = 365
    NOTIFICATION_INTERVAL_SECONDS = 1.0
    TIME_FORMAT = TIME_FORMAT

    @classmethod
    def load_calendar_config(cls) -> CalendarConfig:
        """Load categories, lead-time menu and holidays from the JSON file."""
        if not cls.CONFIG_FILE.exists():
            raise FileNotFoundError(f"Config file not found: {cls.CONFIG_FILE}")

        with open(cls.CONFIG_FILE, 'r', encoding='utf-8') as f:
            data = json.load(f)

        data.setdefault('overlap_horizon_days', cls.OVERLAP_HORIZON_DAYS)
        data.setdefault('notification_interval_seconds', cls.NOTIFICATION_INTERVAL_SECONDS)
        calendar_config = CalendarConfig.from_dict(data)

        logger.debug(
            f"Loaded {len(calendar_config.categories)} categories, "
            f"{len(calendar_config.holidays)} holidays from {cls.CONFIG_FILE}"
        )
        return calendar_config

    @classmethod
    def now(cls) -> datetime:
        """Current wall-clock time in the configured timezone, as a naive datetime."""
        return datetime.now(pytz.timezone(cls.TIMEZONE)).replace(tzinfo=None)

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        if not cls.CONFIG_FILE.exists():
            errors.append(f"config.json not found at {cls.CONFIG_FILE}")

        try:
            pytz.timezone(cls.TIMEZONE)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown TIMEZONE: {cls.TIMEZONE}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
