from datetime import date, datetime

import pytest

from src.availability.errors import ColumnDetectionError, EmptyScheduleError
from src.availability.loader import load_schedule


def test_empty_schedule():
    with pytest.raises(EmptyScheduleError):
        load_schedule([])
    with pytest.raises(EmptyScheduleError):
        load_schedule(None)


def test_loads_records_and_staff_table(loaded):
    assert loaded.columns.time == "服務時間"
    assert len(loaded.records) == 3
    assert [s.id for s in loaded.staff] == ["A001", "A002", "A003"]
    first = loaded.records[0]
    assert first.service_date == "2023-12-15"
    assert first.time_range_text == "09:00~10:00"
    assert first.staff_name == "王小明"


def test_header_whitespace_is_trimmed():
    loaded = load_schedule(
        [{" 服務日期 ": "2023-12-15", "服務時間 ": "09:00~10:00", " 服務人員": "王小明"}]
    )
    assert (loaded.columns.date, loaded.columns.time, loaded.columns.staff) == (
        "服務日期",
        "服務時間",
        "服務人員",
    )
    assert loaded.records[0].time_range_text == "09:00~10:00"


def test_original_columns_are_kept():
    loaded = load_schedule(
        [{"案號": "A123", "服務日期": "2023-12-01", "服務時間起迄": "08:00-10:00", "照服員姓名": "ExternalUser"}]
    )
    assert loaded.records[0].columns["案號"] == "A123"
    assert [s.name for s in loaded.staff] == ["ExternalUser"]
    assert loaded.staff[0].id == "GEN-0"


def test_non_text_time_cells_become_none():
    loaded = load_schedule(
        [
            {"服務日期": "2023-12-15", "服務時間": "09:00~10:00", "服務人員": "A"},
            {"服務日期": "2023-12-15", "服務時間": 1.5, "服務人員": "A"},
        ]
    )
    assert loaded.records[1].time_range_text is None


def test_date_range():
    loaded = load_schedule(
        [
            {"服務日期": datetime(2023, 12, 15), "服務時間": "09:00~10:00", "服務人員": "A"},
            {"服務日期": "2023/12/01", "服務時間": "09:00~10:00", "服務人員": "A"},
            {"服務日期": "unknown", "服務時間": "09:00~10:00", "服務人員": "A"},
        ]
    )
    assert loaded.date_range == (date(2023, 12, 1), date(2023, 12, 15))
    assert loaded.date_range_hint == "2023-12-01 ~ 2023-12-15"
    assert loaded.default_date == date(2023, 12, 1)


def test_no_parseable_dates():
    loaded = load_schedule([{"服務日期": "soon", "服務時間": "09:00~10:00", "服務人員": "A"}])
    assert loaded.date_range is None
    assert loaded.date_range_hint == ""
    assert loaded.default_date is None


def test_detection_failure_propagates():
    with pytest.raises(ColumnDetectionError) as exc_info:
        load_schedule([{"服務日期": "2023-12-15", "備註": "hello"}])
    assert exc_info.value.missing == ["time", "staff"]
