import math

from src.availability.rows import cell_text, has_value, normalize_row, normalize_rows


def test_normalize_row_strips_keys_keeps_values():
    row = normalize_row({" 服務日期 ": " 2023-12-15 ", "Name\t": "Amy"})
    assert row == {"服務日期": " 2023-12-15 ", "Name": "Amy"}


def test_normalize_rows_returns_copies():
    source = [{" a": 1}]
    rows = normalize_rows(source)
    assert rows == [{"a": 1}]
    assert source == [{" a": 1}]


def test_has_value():
    assert has_value("x")
    assert has_value(1.5)
    assert not has_value(None)
    assert not has_value("")
    assert not has_value(0)
    assert not has_value(math.nan)


def test_cell_text():
    assert cell_text(" 王小明 ") == "王小明"
    assert cell_text(1001.0) == "1001"
    assert cell_text(None) == ""
