"""Schedule loading: raw tables in, canonical records and roster out.

This is the only place fatal, user-facing errors are raised. Everything
downstream (daily/weekly calculators) swallows bad rows instead.
"""

from collections.abc import Sequence

from src.availability.columns import detect_columns
from src.availability.dates import to_date
from src.availability.errors import EmptyScheduleError
from src.availability.logging import get_logger
from src.availability.models import DetectedColumns, LoadedSchedule, ScheduleRecord
from src.availability.roster import build_roster
from src.availability.rows import RawRow, Row, cell_text, normalize_rows

log = get_logger(__name__)


def to_record(row: Row, columns: DetectedColumns) -> ScheduleRecord:
    time_value = row.get(columns.time)
    return ScheduleRecord(
        service_date=row.get(columns.date),
        time_range_text=time_value if isinstance(time_value, str) else None,
        staff_name=cell_text(row.get(columns.staff)),
        columns=row,
    )


def load_schedule(
    raw_schedule: Sequence[RawRow] | None,
    raw_staff: Sequence[RawRow] | None = None,
) -> LoadedSchedule:
    """Load a schedule table and optional staff table.

    Args:
        raw_schedule: Rows of the first sheet (column name -> cell value).
        raw_staff: Rows of the second sheet, if the file has one.

    Returns:
        LoadedSchedule with canonical records, roster and the data date range.

    Raises:
        EmptyScheduleError: If the schedule table has no rows.
        ColumnDetectionError: If date, time or staff column can't be found.
    """
    if not raw_schedule:
        raise EmptyScheduleError()

    rows = normalize_rows(raw_schedule)
    columns = detect_columns(rows)
    records = [to_record(row, columns) for row in rows]

    staff_rows = normalize_rows(raw_staff) if raw_staff else None
    staff = build_roster(staff_rows, records)

    dates = [d for d in (to_date(r.service_date) for r in records) if d is not None]
    date_range = (min(dates), max(dates)) if dates else None

    log.info(
        "schedule_loaded",
        records=len(records),
        staff=len(staff),
        date_column=columns.date,
        time_column=columns.time,
        staff_column=columns.staff,
        roster_source="staff_table" if staff_rows else "schedule",
    )
    return LoadedSchedule(
        columns=columns,
        records=records,
        staff=staff,
        date_range=date_range,
    )
