"""Workbook reader: .xlsx sheets to lists of rows keyed by header text.

The first worksheet is the schedule, the optional second one the staff
list. Cell values come back typed (datetime for date cells, numbers for
numeric cells) exactly as openpyxl reports them.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from src.availability.errors import WorkbookReadError
from src.availability.logging import get_logger
from src.availability.rows import Row, has_value

log = get_logger(__name__)


def _sheet_rows(values: Sequence[Sequence[Any]]) -> list[Row]:
    if not values:
        return []
    header = values[0]
    # Keep header positions so a blank header cell doesn't shift the others
    columns = [(idx, str(name)) for idx, name in enumerate(header) if has_value(name)]

    rows: list[Row] = []
    for raw in values[1:]:
        if not any(has_value(cell) for cell in raw):
            continue
        rows.append({name: raw[idx] if idx < len(raw) else None for idx, name in columns})
    return rows


def read_workbook(path: str | Path) -> list[list[Row]]:
    """Read every worksheet of an .xlsx file as a table of rows.

    Args:
        path: Workbook path.

    Returns:
        One list of rows per worksheet, in sheet order.

    Raises:
        WorkbookReadError: If the file is missing or not a readable workbook.
    """
    path = Path(path)
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (OSError, BadZipFile, InvalidFileException, KeyError) as exc:
        raise WorkbookReadError(f"Cannot read workbook {path}: {exc}") from exc

    try:
        tables = [_sheet_rows(list(ws.iter_rows(values_only=True))) for ws in wb.worksheets]
    finally:
        wb.close()

    log.debug("workbook_read", path=str(path), sheets=[len(t) for t in tables])
    return tables


def split_tables(tables: Sequence[list[Row]]) -> tuple[list[Row], list[Row] | None]:
    """(schedule rows, staff rows or None) from a workbook's tables."""
    schedule = tables[0] if tables else []
    staff = tables[1] if len(tables) > 1 and tables[1] else None
    return schedule, staff
