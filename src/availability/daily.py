"""Daily availability: busy -> buffered -> merged blocked -> free intervals.

For one date and each staff member:
  1. Select the schedule records on that date for that staff member.
  2. Parse each record's time range into a busy interval.
  3. Widen every busy interval by the buffer on both sides.
  4. Merge overlapping or touching buffered intervals into blocked time.
  5. The gaps between blocked intervals inside the working day are free.

Everything here is a pure function of its arguments. Bad records are
dropped, and a failure for one staff member never affects the others.
"""

from collections.abc import Sequence
from datetime import date, datetime

from src.availability.dates import coerce_target, matches_date
from src.availability.logging import get_logger
from src.availability.models import (
    BufferedInterval,
    DailyAvailability,
    ParseFailure,
    ScheduleRecord,
    Staff,
    TimeInterval,
    WorkingDay,
)
from src.availability.timerange import try_parse_time_range

log = get_logger(__name__)


def records_on(day: date, records: Sequence[ScheduleRecord]) -> list[ScheduleRecord]:
    """Records whose service date falls on `day`. Unreadable dates are skipped."""
    return [r for r in records if matches_date(r.service_date, day)]


def busy_result(record: ScheduleRecord, day: date) -> TimeInterval | ParseFailure:
    """One record's busy interval, or why it has none."""
    result = try_parse_time_range(record.time_range_text, day)
    if isinstance(result, TimeInterval) and result.end <= result.start:
        return ParseFailure(reason="non_positive_width", value=record.time_range_text)
    return result


def busy_intervals(day: date, records: Sequence[ScheduleRecord]) -> list[TimeInterval]:
    """Parse records into busy intervals, discarding the ones that fail."""
    busy: list[TimeInterval] = []
    for record in records:
        result = busy_result(record, day)
        if isinstance(result, ParseFailure):
            log.debug(
                "record_dropped",
                staff=record.staff_name,
                date=day.isoformat(),
                reason=result.reason,
                value=result.value,
            )
            continue
        busy.append(result)
    return busy


def buffer_intervals(
    intervals: Sequence[TimeInterval], buffer_minutes: int
) -> list[BufferedInterval]:
    """Widen each interval by `buffer_minutes` on both sides; negative counts as 0."""
    pad = max(0, buffer_minutes)
    return [BufferedInterval.around(interval, pad) for interval in intervals]


def merge_intervals(intervals: Sequence[TimeInterval]) -> list[TimeInterval]:
    """Merge overlapping intervals; touching intervals merge too.

    Returns plain TimeIntervals sorted by start, pairwise disjoint.
    """
    ordered = sorted(intervals, key=lambda i: i.start)
    if not ordered:
        return []

    merged: list[TimeInterval] = []
    current_start, current_end = ordered[0].start, ordered[0].end
    for nxt in ordered[1:]:
        if current_end >= nxt.start:
            current_end = max(current_end, nxt.end)
        else:
            merged.append(TimeInterval(start=current_start, end=current_end))
            current_start, current_end = nxt.start, nxt.end
    merged.append(TimeInterval(start=current_start, end=current_end))
    return merged


def free_intervals(
    blocked: Sequence[TimeInterval], day_start: datetime, day_end: datetime
) -> list[TimeInterval]:
    """Gaps between sorted, disjoint `blocked` intervals within [day_start, day_end)."""
    free: list[TimeInterval] = []
    cursor = day_start
    for block in blocked:
        if block.start > cursor:
            gap_end = min(block.start, day_end)
            if gap_end > cursor:
                free.append(TimeInterval(start=cursor, end=gap_end))
        cursor = max(cursor, block.end)

    if cursor < day_end:
        free.append(TimeInterval(start=cursor, end=day_end))
    return free


def staff_availability(
    staff: Staff,
    day: date,
    day_records: Sequence[ScheduleRecord],
    buffer_minutes: int,
    working_day: WorkingDay,
) -> DailyAvailability:
    """Availability of one staff member, given the records already on `day`."""
    own = [r for r in day_records if r.staff_name == staff.name]
    busy = busy_intervals(day, own)
    blocked = merge_intervals(buffer_intervals(busy, buffer_minutes))
    day_start, day_end = working_day.bounds(day)

    return DailyAvailability(
        staff=staff,
        day=day,
        busy_raw=busy,
        blocked=blocked,
        free=free_intervals(blocked, day_start, day_end),
        is_fully_free=not busy,
    )


def compute_daily(
    target: date | str | None,
    records: Sequence[ScheduleRecord] | None,
    staff_list: Sequence[Staff],
    buffer_minutes: int = 30,
    working_day: WorkingDay | None = None,
) -> list[DailyAvailability]:
    """Availability of every staff member on one date.

    Args:
        target: Date to compute, as a date or "YYYY-MM-DD" string.
        records: Canonical schedule records.
        staff_list: Staff to compute for; one result per staff member.
        buffer_minutes: Padding added before and after each busy interval;
            negative values are treated as 0.
        working_day: Day boundaries, default 07:00-22:00.

    Returns:
        DailyAvailability per staff member, in staff_list order. Staff whose
        computation fails are left out; a missing date or missing records
        yields an empty list. Never raises.
    """
    day = coerce_target(target)
    if day is None or records is None:
        return []
    working_day = working_day or WorkingDay()

    try:
        day_records = records_on(day, records)
        results: list[DailyAvailability] = []
        for staff in staff_list:
            try:
                results.append(
                    staff_availability(staff, day, day_records, buffer_minutes, working_day)
                )
            except Exception:
                log.warning(
                    "staff_availability_failed",
                    staff=getattr(staff, "name", None),
                    date=day.isoformat(),
                    exc_info=True,
                )
        return results
    except Exception:
        log.error("availability_calc_failed", date=day.isoformat(), exc_info=True)
        return []
