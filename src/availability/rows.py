"""Tabular row model: raw rows from a spreadsheet with trimmed column names."""

import math
from collections.abc import Iterable, Mapping
from typing import Any

RawRow = Mapping[str, Any]
Row = dict[str, Any]


def normalize_row(row: RawRow) -> Row:
    """Return a copy of `row` with leading/trailing whitespace stripped from keys.

    When two keys collapse onto the same trimmed name the later one wins.
    """
    return {str(key).strip(): value for key, value in row.items()}


def normalize_rows(rows: Iterable[RawRow]) -> list[Row]:
    return [normalize_row(row) for row in rows]


def has_value(value: Any) -> bool:
    """True for cells that hold something: not None, empty, zero, False or NaN."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    return True


def cell_text(value: Any) -> str:
    """Cell value as trimmed text; empty string for empty cells."""
    if not has_value(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()
