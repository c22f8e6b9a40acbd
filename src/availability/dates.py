"""Interpretation of service-date cells.

Spreadsheet readers hand dates over as datetime objects, ISO-ish strings
("2023-12-15", "2023/12/15", "2023-12-15 (Fri)") or raw Excel serial numbers.
None of these ever raise here: an unreadable date is simply no date.
"""

import math
from datetime import date, datetime
from typing import Any

from dateutil import parser as dateparser
from openpyxl.utils.datetime import from_excel

from src.availability.rows import has_value

# Two unrelated fallbacks: a string that parses differently against each is
# missing its year, month or day (or names only a weekday).
_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 2))


def _parse_full_date(text: str) -> date | None:
    """Parse a date string that fully spells out year, month and day."""
    try:
        first, second = (dateparser.parse(text.strip(), default=d) for d in _DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


def to_date(value: Any) -> date | None:
    """Best-effort conversion of a cell value to a calendar date."""
    if not has_value(value) or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isinf(value):
            return None
        try:
            converted = from_excel(value)
        except (ValueError, OverflowError, TypeError):
            return None
        return converted.date() if isinstance(converted, datetime) else None
    if isinstance(value, str):
        return _parse_full_date(value)
    return None


def matches_date(value: Any, target: date) -> bool:
    """True if a service-date cell falls on `target`.

    Strings are first checked for the literal "YYYY-MM-DD" text, then parsed.
    """
    if not has_value(value):
        return False
    if isinstance(value, str) and target.isoformat() in value:
        return True
    parsed = to_date(value)
    return parsed == target


def coerce_target(value: date | datetime | str | None) -> date | None:
    """Accept a selected date as a date object or "YYYY-MM-DD" string."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None
