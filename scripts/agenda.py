"""
Agenda entry point.
Prints the current week or month of an event file together with the
notifications due right now. With --watch it keeps ticking like the
calendar UI does.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.config_manager import Config
from src.models import CalendarView, Event, event_from_dict, parse_date
from src.processors.event_search import get_filtered_events
from src.processors.notification_scheduler import NotificationCenter
from src.services.calendar_view import CalendarViewState
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def load_events(path: Path) -> List[Event]:
    """Read events from a JSON file holding a list or {"events": [...]}; bad records are skipped."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    records = data.get('events', []) if isinstance(data, dict) else data
    events: List[Event] = []

    for index, record in enumerate(records):
        try:
            events.append(event_from_dict(record))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping event record {index}: {e}")

    logger.info(f"Loaded {len(events)} of {len(records)} events from {path}")
    return events


def print_agenda(state: CalendarViewState, events: List[Event], search_term: str, holiday_table: dict) -> None:
    """Print the events of the visible range grouped by date."""
    visible = get_filtered_events(events, search_term, state.current_date, state.view)
    holidays = state.holidays(holiday_table)
    range_start, range_end = state.visible_range()

    print(f"\n📅 {state.label()}  ({range_start.isoformat()} ~ {range_end.isoformat()})")
    print("-" * 60)

    for key, name in sorted(holidays.items()):
        print(f"  {key}  🎌 {name}")

    occurrences = state.occurrences(visible)
    if not occurrences:
        print("  검색 결과가 없습니다.")
        return

    for occurrence in occurrences:
        event = occurrence.event
        repeat = f" 🔁 {event.repeat.type.value}" if event.is_repeating else ""
        print(
            f"  {occurrence.date.isoformat()}  "
            f"{occurrence.start.strftime('%H:%M')}-{occurrence.end.strftime('%H:%M')}  "
            f"{event.title}{repeat}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the calendar agenda and due notifications.")
    parser.add_argument("--events", type=Path, default=Config.EVENTS_FILE, help="Event JSON file")
    parser.add_argument("--date", type=parse_date, default=None, help="Anchor date (YYYY-MM-DD)")
    parser.add_argument(
        "--view",
        choices=[v.value for v in CalendarView],
        default=CalendarView.MONTH.value,
        help="Grid to show"
    )
    parser.add_argument("--search", default="", help="Filter on title, description or location")
    parser.add_argument("--watch", action="store_true", help="Keep checking notifications")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        calendar_config = Config.load_calendar_config()
        events = load_events(args.events)
        anchor = args.date or Config.now().date()
        state = CalendarViewState(view=CalendarView(args.view), current_date=anchor)

        print_agenda(state, events, args.search, calendar_config.holidays)

        center = NotificationCenter()
        while True:
            for notification in center.tick(events, Config.now()):
                print(f"🔔 {notification.message}")

            if not args.watch:
                return 0
            time.sleep(calendar_config.notification_interval_seconds)

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Agenda interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
