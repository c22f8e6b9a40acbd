"""Pydantic models for schedule records and availability views.

All data structures use Pydantic v2. Interval and result models are frozen
value objects: the calculators build new ones on every run instead of
mutating earlier results.
"""

from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Staff(BaseModel):
    """A staff member. `name` is the join key against ScheduleRecord.staff_name."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class ScheduleRecord(BaseModel):
    """One schedule row mapped onto the three canonical fields.

    `service_date` is kept as the raw cell value (date, datetime, string or
    Excel serial number); it is only interpreted when matching a target day.
    """

    model_config = ConfigDict(frozen=True)

    service_date: Any = None
    time_range_text: str | None = None  # "09:30~11:00", None for non-text cells
    staff_name: str = ""
    columns: dict[str, Any] = Field(default_factory=dict)  # original trimmed row


class DetectedColumns(BaseModel):
    """Column names chosen for each canonical role."""

    model_config = ConfigDict(frozen=True)

    date: str
    time: str
    staff: str


class TimeInterval(BaseModel):
    """A wall-clock interval. start <= end is not enforced."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @property
    def minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60

    def contains(self, other: "TimeInterval") -> bool:
        return self.start <= other.start and self.end >= other.end


class BufferedInterval(TimeInterval):
    """A busy interval widened by the buffer, remembering the unwidened bounds."""

    original: TimeInterval

    @classmethod
    def around(cls, interval: TimeInterval, buffer_minutes: int) -> "BufferedInterval":
        pad = timedelta(minutes=buffer_minutes)
        return cls(start=interval.start - pad, end=interval.end + pad, original=interval)


class ParseFailure(BaseModel):
    """Why a record produced no busy interval. Logged, then discarded."""

    model_config = ConfigDict(frozen=True)

    reason: str  # "not_text", "missing_times", "invalid_instant", "non_positive_width"
    value: Any = None


class WorkingDay(BaseModel):
    """Clock boundaries availability is computed within.

    `start`/`end` bound the daily view; `core_end` is the earlier cut-off
    used only when classifying days in the weekly summary.
    """

    model_config = ConfigDict(frozen=True)

    start: time = time(7, 0)
    end: time = time(22, 0)
    core_end: time = time(19, 0)

    def bounds(self, on: date) -> tuple[datetime, datetime]:
        return datetime.combine(on, self.start), datetime.combine(on, self.end)

    def core_cutoff(self, on: date) -> datetime:
        return datetime.combine(on, self.core_end)


class TimeWindow(BaseModel):
    """A requested time-of-day window, e.g. 09:00-11:00."""

    model_config = ConfigDict(frozen=True)

    start: time
    end: time

    def on(self, day: date) -> TimeInterval:
        return TimeInterval(
            start=datetime.combine(day, self.start),
            end=datetime.combine(day, self.end),
        )


class DailyAvailability(BaseModel):
    """One staff member's busy, blocked and free time on one date."""

    model_config = ConfigDict(frozen=True)

    staff: Staff
    day: date
    busy_raw: list[TimeInterval] = Field(default_factory=list)
    blocked: list[TimeInterval] = Field(default_factory=list)
    free: list[TimeInterval] = Field(default_factory=list)
    is_fully_free: bool = True

    @classmethod
    def placeholder(cls, staff: Staff, day: date) -> "DailyAvailability":
        """Stand-in for a day the staff member is missing from."""
        return cls(staff=staff, day=day)

    @property
    def free_minutes(self) -> float:
        return sum(interval.minutes for interval in self.free)

    @property
    def blocked_minutes(self) -> float:
        return sum(interval.minutes for interval in self.blocked)


class DayTier(str, Enum):
    """Coarse busyness of one staff member on one day."""

    BLANK = "blank"  # no shifts at all
    FREE = "free"
    MODERATE = "moderate"
    BUSY = "busy"


class WeeklyAvailability(BaseModel):
    """Seven DailyAvailability entries for one staff member, keyed by ISO date."""

    model_config = ConfigDict(frozen=True)

    staff: Staff
    days: dict[str, DailyAvailability]
    tiers: dict[str, DayTier] = Field(default_factory=dict)


class LoadedSchedule(BaseModel):
    """Result of loading a schedule: canonical records plus derived roster."""

    model_config = ConfigDict(frozen=True)

    columns: DetectedColumns
    records: list[ScheduleRecord]
    staff: list[Staff]
    date_range: tuple[date, date] | None = None

    @property
    def date_range_hint(self) -> str:
        """Human-readable data range, e.g. "2023-12-01 ~ 2023-12-15"."""
        if self.date_range is None:
            return ""
        first, last = self.date_range
        return f"{first.isoformat()} ~ {last.isoformat()}"

    @property
    def default_date(self) -> date | None:
        """Earliest date in the data, the natural initial selection."""
        return self.date_range[0] if self.date_range else None
