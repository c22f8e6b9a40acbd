"""Staff roster: from an explicit staff sheet, or derived from the schedule."""

from collections.abc import Sequence

from src.availability.columns import ColumnRule, find_column
from src.availability.models import ScheduleRecord, Staff
from src.availability.rows import Row, cell_text

NAME_RULES: tuple[ColumnRule, ...] = (ColumnRule(("姓名", "Name", "服務員", "照服員")),)
ID_RULES: tuple[ColumnRule, ...] = (ColumnRule(("員編", "ID", "編號")),)

DEFAULT_NAME_COLUMN = "姓名"
DEFAULT_ID_COLUMN = "員編"

UNKNOWN_ID = "Unknown"
UNKNOWN_NAME = "Unknown Name"


def roster_from_staff_table(rows: Sequence[Row]) -> list[Staff]:
    """Map staff-sheet rows to Staff, dropping rows without a name."""
    columns = list(rows[0].keys())
    name_column = find_column(columns, NAME_RULES) or DEFAULT_NAME_COLUMN
    id_column = find_column(columns, ID_RULES) or DEFAULT_ID_COLUMN

    staff = [
        Staff(
            id=cell_text(row.get(id_column)) or UNKNOWN_ID,
            name=cell_text(row.get(name_column)) or UNKNOWN_NAME,
        )
        for row in rows
    ]
    return [s for s in staff if s.name != UNKNOWN_NAME]


def roster_from_schedule(records: Sequence[ScheduleRecord]) -> list[Staff]:
    """One Staff per distinct staff name in the schedule, ids GEN-0, GEN-1, ..."""
    names = dict.fromkeys(r.staff_name for r in records if r.staff_name)
    return [Staff(id=f"GEN-{idx}", name=name) for idx, name in enumerate(names)]


def build_roster(
    staff_rows: Sequence[Row] | None,
    records: Sequence[ScheduleRecord],
) -> list[Staff]:
    """Build the staff list used by the calculators.

    Args:
        staff_rows: Normalized rows of the staff sheet, if the file has one.
        records: Canonical schedule records.

    Returns:
        Staff from the staff sheet when it has rows, else derived from records.
    """
    if staff_rows:
        return roster_from_staff_table(staff_rows)
    return roster_from_schedule(records)
