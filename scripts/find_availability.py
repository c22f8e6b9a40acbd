"""Show staff availability from a schedule workbook as a table or JSON.

The first sheet of the workbook holds the service records, the optional
second sheet the staff list. Without a staff sheet the roster is derived
from the names in the schedule.

Run with: python scripts/find_availability.py data/schedule.xlsx
Date:     python scripts/find_availability.py data/schedule.xlsx --date 2023-12-15
Buffer:   python scripts/find_availability.py data/schedule.xlsx --buffer 15
Weekly:   python scripts/find_availability.py data/schedule.xlsx --week
Window:   python scripts/find_availability.py data/schedule.xlsx --window-start 09:00 --window-end 11:00
JSON:     python scripts/find_availability.py data/schedule.xlsx --week --json

Defaults for buffer and day boundaries come from the environment / .env
(BUFFER_MINUTES, DAY_START, DAY_END, CORE_DAY_END).

Exit codes:
  0 = success (table or JSON on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys
from datetime import date

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.availability.config import get_config  # noqa: E402
from src.availability.daily import compute_daily  # noqa: E402
from src.availability.errors import AvailabilityError  # noqa: E402
from src.availability.filters import filter_available  # noqa: E402
from src.availability.loader import load_schedule  # noqa: E402
from src.availability.logging import setup_logging  # noqa: E402
from src.availability.models import (  # noqa: E402
    DailyAvailability,
    TimeInterval,
    TimeWindow,
    WeeklyAvailability,
)
from src.availability.reader import read_workbook, split_tables  # noqa: E402
from src.availability.weekly import compute_week  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Show staff availability from a schedule workbook.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("workbook", help="Path to the .xlsx schedule export.")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Date to show (YYYY-MM-DD). Default: earliest date in the data.",
    )
    parser.add_argument(
        "--buffer",
        type=int,
        default=None,
        help="Buffer minutes around each busy interval (default: BUFFER_MINUTES or 30).",
    )
    parser.add_argument(
        "--week",
        action="store_true",
        help="Show the Monday-Sunday week containing --date instead of one day.",
    )
    parser.add_argument(
        "--window-start",
        default=None,
        help="Only list staff free for the whole window starting at HH:MM.",
    )
    parser.add_argument(
        "--window-end",
        default=None,
        help="End of the requested window (HH:MM).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of a table.",
    )
    return parser.parse_args()


def _span(interval: TimeInterval) -> str:
    return f"{interval.start:%H:%M}-{interval.end:%H:%M}"


def _spans(intervals: list[TimeInterval]) -> str:
    return ", ".join(_span(i) for i in intervals) or "-"


def _format_table(headers: list[str], rows: list[list[str]]) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)) for row in rows]
    return "\n".join([header_line, separator, *row_lines])


def _daily_table(results: list[DailyAvailability]) -> str:
    """Columns: Staff | Busy | Blocked | Free"""
    if not results:
        return "(no staff available)"
    rows = [
        [d.staff.name, _spans(d.busy_raw), _spans(d.blocked), _spans(d.free)]
        for d in results
    ]
    return _format_table(["Staff", "Busy", "Blocked (buffered)", "Free"], rows)


def _weekly_table(results: list[WeeklyAvailability]) -> str:
    """Columns: Staff | one column per day holding the day tier."""
    if not results:
        return "(no staff)"
    days = list(results[0].days.keys())
    headers = ["Staff", *(d[5:] for d in days)]
    rows = [[w.staff.name, *(w.tiers[d].value for d in days)] for w in results]
    return _format_table(headers, rows)


def main(args: argparse.Namespace) -> None:
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    buffer_minutes = config.buffer_minutes if args.buffer is None else args.buffer
    if buffer_minutes < 0:
        raise AvailabilityError("--buffer must be 0 or more")
    working_day = config.working_day()

    window = None
    if args.window_start or args.window_end:
        try:
            window = TimeWindow(start=args.window_start, end=args.window_end)
        except ValidationError:
            raise AvailabilityError("--window-start and --window-end must both be HH:MM") from None

    schedule_rows, staff_rows = split_tables(read_workbook(args.workbook))
    loaded = load_schedule(schedule_rows, staff_rows)
    _log(
        f"find_availability: {len(loaded.records)} records, {len(loaded.staff)} staff "
        f"(data range: {loaded.date_range_hint or 'unknown'})"
    )

    target = args.date or loaded.default_date or date.today()

    if args.week:
        weeks = compute_week(
            target,
            loaded.records,
            loaded.staff,
            buffer_minutes,
            working_day,
            free_hours=config.free_tier_hours,
            moderate_hours=config.moderate_tier_hours,
        )
        if args.json:
            print(json.dumps([w.model_dump(mode="json") for w in weeks], indent=2, ensure_ascii=False))
        else:
            print(_weekly_table(weeks))
        return

    daily = compute_daily(target, loaded.records, loaded.staff, buffer_minutes, working_day)
    if window is not None:
        daily = filter_available(daily, window)
        _log(f"  {len(daily)} staff free {window.start:%H:%M}-{window.end:%H:%M} on {target}")

    if args.json:
        print(json.dumps([d.model_dump(mode="json") for d in daily], indent=2, ensure_ascii=False))
    else:
        print(_daily_table(daily))


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except AvailabilityError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
