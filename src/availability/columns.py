"""Column detection for unlabeled schedule exports.

Care agencies export schedules with their own headers ("服務日期",
"照服員姓名", "服務時間起迄", "Service Date", ...). The detector maps those onto
three roles: date, time range and staff name.

Rules are data: each role has an ordered tuple of ColumnRule entries
(include keywords, exclude keywords). A rule matches the first column, in
header order, whose name contains any include keyword and no exclude keyword.
The time column additionally has to prove itself by content: see
detect_time_column().
"""

from collections.abc import Sequence
from typing import NamedTuple

from src.availability.errors import ColumnDetectionError
from src.availability.logging import get_logger
from src.availability.models import DetectedColumns
from src.availability.rows import Row, has_value
from src.availability.timerange import is_time_range_value

log = get_logger(__name__)


class ColumnRule(NamedTuple):
    include: tuple[str, ...]
    exclude: tuple[str, ...] = ()

    def matches(self, column: str) -> bool:
        return any(kw in column for kw in self.include) and not any(
            ex in column for ex in self.exclude
        )


DATE_RULES: tuple[ColumnRule, ...] = (
    ColumnRule(("服務日期", "日期", "Date")),
)

# Caregiver role names first. Generic "name" columns often hold the client's
# name instead, so those are only a fallback and skip client/family columns.
STAFF_RULES: tuple[ColumnRule, ...] = (
    ColumnRule(("居服員", "照服員", "服務人員", "服務員"), ("編號", "ID")),
    ColumnRule(("姓名", "Staff", "Name"), ("編號", "ID", "家屬", "案主", "受照顧者")),
)

# Columns worth inspecting by content for time ranges
TIME_CANDIDATE_KEYWORDS: tuple[str, ...] = ("時間", "Time", "起迄", "區間", "排班")

# Name-only fallback when no candidate holds time-range values. Approved
# hours, totals and durations are numbers, never ranges.
TIME_FALLBACK_RULES: tuple[ColumnRule, ...] = (
    ColumnRule(("起迄", "起訖", "區間", "Range", "Start")),
    ColumnRule(("服務時間", "Time"), ("核定", "總", "數", "Total", "Count", "Duration")),
    ColumnRule(("時間",), ("核定", "總", "數")),
)

CONTENT_SCAN_ROWS = 10
VALIDATION_SAMPLE_ROWS = 50
MIN_VALIDATION_SAMPLE = 5
REJECT_BELOW_RATIO = 0.2
SWITCH_ABOVE_RATIO = 0.5


def find_column(columns: Sequence[str], rules: Sequence[ColumnRule]) -> str | None:
    """First column matching the first rule that matches anything."""
    for rule in rules:
        for column in columns:
            if rule.matches(column):
                return column
    return None


def _non_empty(rows: Sequence[Row], column: str) -> list[Row]:
    return [row for row in rows if has_value(row.get(column))]


def _range_ratio(rows: Sequence[Row], column: str) -> tuple[int, int]:
    """(time-range matches, non-empty cells) for `column` over `rows`."""
    sample = _non_empty(rows, column)
    valid = sum(1 for row in sample if is_time_range_value(row[column]))
    return valid, len(sample)


def _time_column_by_content(columns: Sequence[str], rows: Sequence[Row]) -> str | None:
    candidates = [c for c in columns if any(kw in c for kw in TIME_CANDIDATE_KEYWORDS)]
    head = rows[:CONTENT_SCAN_ROWS]
    for candidate in candidates:
        if any(is_time_range_value(row[candidate]) for row in _non_empty(head, candidate)):
            return candidate
    return None


def _revalidate_time_column(column: str, columns: Sequence[str], rows: Sequence[Row]) -> str:
    """Swap `column` for a better one if its values mostly aren't time ranges.

    This can still land on the wrong column when some free-text column
    happens to hold two clock times in most rows.
    """
    sample = rows[:VALIDATION_SAMPLE_ROWS]
    valid, total = _range_ratio(sample, column)
    if not (valid < total * REJECT_BELOW_RATIO and total > MIN_VALIDATION_SAMPLE):
        return column

    log.warning("time_column_rejected", column=column, valid=valid, sampled=total)
    for other in columns:
        other_valid, other_total = _range_ratio(sample, other)
        if other_valid > other_total * SWITCH_ABOVE_RATIO:
            log.info("time_column_switched", previous=column, column=other)
            return other
    return column


def detect_time_column(columns: Sequence[str], rows: Sequence[Row]) -> str | None:
    """Pick the time-range column.

    1. First keyword candidate with a time-range value in its first rows.
    2. Otherwise by name alone, via TIME_FALLBACK_RULES.
    3. Re-validate the pick over a larger sample and switch columns when
       it clearly doesn't hold time ranges.
    """
    column = _time_column_by_content(columns, rows)
    if column is None:
        column = find_column(columns, TIME_FALLBACK_RULES)
    if column is None:
        return None
    return _revalidate_time_column(column, columns, rows)


def detect_columns(rows: Sequence[Row]) -> DetectedColumns:
    """Detect date, time and staff columns in normalized schedule rows.

    Column names come from the first row. Values are only inspected for the
    time column.

    Args:
        rows: Schedule rows with trimmed keys (see rows.normalize_rows).

    Returns:
        DetectedColumns with the chosen column name per role.

    Raises:
        ColumnDetectionError: If any of the three roles cannot be resolved.
    """
    columns = list(rows[0].keys()) if rows else []

    detected = {
        "date": find_column(columns, DATE_RULES),
        "time": detect_time_column(columns, rows) if rows else None,
        "staff": find_column(columns, STAFF_RULES),
    }
    if not all(detected.values()):
        raise ColumnDetectionError(detected)

    log.debug("columns_detected", **detected)
    return DetectedColumns(**detected)
