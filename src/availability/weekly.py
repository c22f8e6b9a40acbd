"""Weekly view: seven daily computations re-pivoted by staff member."""

from collections.abc import Sequence
from datetime import date, timedelta

from src.availability.daily import compute_daily
from src.availability.dates import coerce_target
from src.availability.models import (
    DailyAvailability,
    DayTier,
    ScheduleRecord,
    Staff,
    WeeklyAvailability,
    WorkingDay,
)

FREE_TIER_HOURS = 6
MODERATE_TIER_HOURS = 2


def week_dates(anchor: date) -> list[date]:
    """Monday-to-Sunday dates of the week containing `anchor`."""
    monday = anchor - timedelta(days=anchor.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def core_free_minutes(daily: DailyAvailability, working_day: WorkingDay) -> float:
    """Free minutes with every free interval cut off at the core end (19:00)."""
    total = 0.0
    for interval in daily.free:
        cutoff = working_day.core_cutoff(interval.start.date())
        end = min(interval.end, cutoff)
        if end > interval.start:
            total += (end - interval.start).total_seconds() / 60
    return total


def classify_day(
    daily: DailyAvailability,
    working_day: WorkingDay,
    free_hours: float = FREE_TIER_HOURS,
    moderate_hours: float = MODERATE_TIER_HOURS,
) -> DayTier:
    """Classify one staff-day as blank, free, moderate or busy.

    A day without any busy record is blank (no shifts), not free.
    """
    if not daily.busy_raw:
        return DayTier.BLANK

    hours = core_free_minutes(daily, working_day) / 60
    if hours >= free_hours:
        return DayTier.FREE
    if hours >= moderate_hours:
        return DayTier.MODERATE
    return DayTier.BUSY


def compute_week(
    anchor: date | str | None,
    records: Sequence[ScheduleRecord] | None,
    staff_list: Sequence[Staff],
    buffer_minutes: int = 30,
    working_day: WorkingDay | None = None,
    free_hours: float = FREE_TIER_HOURS,
    moderate_hours: float = MODERATE_TIER_HOURS,
) -> list[WeeklyAvailability]:
    """Availability for the Monday-starting week containing `anchor`.

    Args:
        anchor: Any date in the target week, as a date or "YYYY-MM-DD".
        records: Canonical schedule records.
        staff_list: Staff to compute for.
        buffer_minutes: Padding added before and after each busy interval.
        working_day: Day boundaries, default 07:00-22:00 with core end 19:00.
        free_hours: Core free hours at or above which a day is "free".
        moderate_hours: Core free hours at or above which a day is "moderate".

    Returns:
        One WeeklyAvailability per staff member, days keyed by ISO date. A
        staff member missing from a day's results gets an empty placeholder.
    """
    start = coerce_target(anchor)
    if start is None:
        return []
    working_day = working_day or WorkingDay()
    dates = week_dates(start)

    by_day: dict[date, dict[Staff, DailyAvailability]] = {}
    for day in dates:
        daily = compute_daily(day, records, staff_list, buffer_minutes, working_day)
        by_day[day] = {d.staff: d for d in daily}

    weeks: list[WeeklyAvailability] = []
    for staff in staff_list:
        days = {
            day.isoformat(): by_day[day].get(staff) or DailyAvailability.placeholder(staff, day)
            for day in dates
        }
        tiers = {
            iso: classify_day(daily, working_day, free_hours, moderate_hours)
            for iso, daily in days.items()
        }
        weeks.append(WeeklyAvailability(staff=staff, days=days, tiers=tiers))
    return weeks
