"""Time-range parsing for free-form schedule cells.

Cells come in many shapes: "09:00~10:30", "09:00 - 10:30", "11:00～ 12:00",
"15:00/16:00", "Start 13:00 End 14:00". Rather than knowing each separator,
the parser takes the first two HH:MM occurrences in the text as start and
end and ignores everything else.
"""

import re
from datetime import date, datetime, timedelta
from typing import Any

from src.availability.models import ParseFailure, TimeInterval

# 1-2 digit hour, colon, exactly 2 digit minute; ASCII digits only
HHMM_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def find_clock_times(text: str) -> list[tuple[int, int]]:
    """All (hour, minute) pairs in `text`, left to right, non-overlapping."""
    return [(int(h), int(m)) for h, m in HHMM_RE.findall(text)]


def is_time_range_value(value: Any) -> bool:
    """True if `value` is a string holding at least two HH:MM occurrences."""
    if not isinstance(value, str):
        return False
    return len(HHMM_RE.findall(value)) >= 2


def _at(day: date, hour: int, minute: int) -> datetime:
    # Out-of-range fields roll over (25:00 is 01:00 the next day) like a
    # wall-clock setter would; only arithmetic overflow is an error.
    return datetime.combine(day, datetime.min.time()) + timedelta(hours=hour, minutes=minute)


def try_parse_time_range(value: Any, on: date) -> TimeInterval | ParseFailure:
    """Parse a cell into an interval on `on`, or explain why it can't be.

    Args:
        value: Raw cell value, expected to be a string.
        on: Reference calendar date the clock times are applied to.

    Returns:
        TimeInterval with seconds zeroed, or a ParseFailure. The interval is
        returned even when end <= start; callers decide whether to keep it.
    """
    if not isinstance(value, str):
        return ParseFailure(reason="not_text", value=value)

    times = find_clock_times(value)
    if len(times) < 2:
        return ParseFailure(reason="missing_times", value=value)

    (start_h, start_m), (end_h, end_m) = times[0], times[1]
    try:
        start = _at(on, start_h, start_m)
        end = _at(on, end_h, end_m)
    except OverflowError:
        return ParseFailure(reason="invalid_instant", value=value)

    return TimeInterval(start=start, end=end)


def parse_time_range(value: Any, on: date) -> TimeInterval | None:
    """Like try_parse_time_range, but None instead of a ParseFailure."""
    result = try_parse_time_range(value, on)
    return result if isinstance(result, TimeInterval) else None
