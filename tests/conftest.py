"""Shared fixtures: schedule tables in the shapes real exports come in."""

from datetime import date, datetime

import pytest

from src.availability.loader import load_schedule
from src.availability.models import LoadedSchedule

DAY = date(2023, 12, 15)


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


@pytest.fixture
def day() -> date:
    return DAY


@pytest.fixture
def schedule_rows() -> list[dict]:
    return [
        {"服務日期": "2023-12-15", "服務時間": "09:00~10:00", "服務人員": "王小明"},
        {"服務日期": "2023-12-15", "服務時間": "13:00~14:30", "服務人員": "王小明"},
        {"服務日期": "2023-12-15", "服務時間": "08:00~12:00", "服務人員": "李大華"},
    ]


@pytest.fixture
def staff_rows() -> list[dict]:
    return [
        {"員編": "A001", "姓名": "王小明"},
        {"員編": "A002", "姓名": "李大華"},
        {"員編": "A003", "姓名": "張小美"},
    ]


@pytest.fixture
def loaded(schedule_rows, staff_rows) -> LoadedSchedule:
    return load_schedule(schedule_rows, staff_rows)


@pytest.fixture
def complex_rows() -> list[dict]:
    return [
        {
            "服務項目": "居家服務",
            "核定服務時間": 1.5,
            "服務時間起迄": "09:30~11:00",
            "照服員姓名": "ComplexUser",
            "服務日期": "2023-12-05",
        }
    ]
