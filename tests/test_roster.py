import re

from src.availability.models import ScheduleRecord
from src.availability.roster import build_roster, roster_from_schedule, roster_from_staff_table


def _records(*names: str) -> list[ScheduleRecord]:
    return [ScheduleRecord(service_date="2023-12-15", staff_name=n) for n in names]


def test_derived_roster_dedupes_names():
    staff = roster_from_schedule(_records("王小明", "李大華", "王小明"))
    assert len(staff) == 2
    assert {s.name for s in staff} == {"王小明", "李大華"}
    assert all(re.fullmatch(r"GEN-\d+", s.id) for s in staff)
    assert len({s.id for s in staff}) == 2


def test_derived_roster_skips_blank_names():
    staff = roster_from_schedule(_records("", "王小明"))
    assert [s.name for s in staff] == ["王小明"]


def test_staff_table(staff_rows):
    staff = roster_from_staff_table(staff_rows)
    assert [(s.id, s.name) for s in staff] == [
        ("A001", "王小明"),
        ("A002", "李大華"),
        ("A003", "張小美"),
    ]


def test_staff_table_drops_nameless_rows():
    staff = roster_from_staff_table([{"員編": "A001", "姓名": "王小明"}, {"員編": "A002", "姓名": None}])
    assert [s.id for s in staff] == ["A001"]


def test_staff_table_english_headers_and_numeric_ids():
    staff = roster_from_staff_table([{"Employee ID": 1001.0, "Name": "Amy"}, {"Name": "Bo"}])
    assert [(s.id, s.name) for s in staff] == [("1001", "Amy"), ("Unknown", "Bo")]


def test_build_roster_prefers_staff_table(staff_rows):
    staff = build_roster(staff_rows, _records("Someone Else"))
    assert len(staff) == 3


def test_build_roster_falls_back_without_staff_rows():
    assert [s.name for s in build_roster(None, _records("A", "B"))] == ["A", "B"]
    assert [s.name for s in build_roster([], _records("A"))] == ["A"]
