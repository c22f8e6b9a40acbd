"""Staff availability engine for care-service schedule exports.

Loads loosely structured schedule spreadsheets, detects the date/time/staff
columns, and computes per-staff free and blocked time for a day or a week.
"""

from src.availability.daily import compute_daily
from src.availability.errors import (
    AvailabilityError,
    ColumnDetectionError,
    EmptyScheduleError,
    ScheduleFormatError,
)
from src.availability.filters import filter_available
from src.availability.loader import load_schedule
from src.availability.models import (
    DailyAvailability,
    DayTier,
    LoadedSchedule,
    ScheduleRecord,
    Staff,
    TimeInterval,
    TimeWindow,
    WeeklyAvailability,
    WorkingDay,
)
from src.availability.weekly import compute_week

__all__ = [
    "load_schedule",
    "compute_daily",
    "compute_week",
    "filter_available",
    "AvailabilityError",
    "ScheduleFormatError",
    "EmptyScheduleError",
    "ColumnDetectionError",
    "DailyAvailability",
    "DayTier",
    "LoadedSchedule",
    "ScheduleRecord",
    "Staff",
    "TimeInterval",
    "TimeWindow",
    "WeeklyAvailability",
    "WorkingDay",
]
