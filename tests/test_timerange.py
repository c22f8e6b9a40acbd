from datetime import date, datetime

import pytest

from src.availability.models import ParseFailure, TimeInterval
from src.availability.timerange import (
    find_clock_times,
    is_time_range_value,
    parse_time_range,
    try_parse_time_range,
)

D = date(2023, 12, 15)


@pytest.mark.parametrize(
    "text",
    [
        "9:05-17:30",
        "9:05~17:30",
        "9:05～17:30",
        "9:05/17:30",
        "Start 9:05 End 17:30",
        "9:05 - 17:30",
        "9:05～ 17:30",
    ],
)
def test_separator_independence(text):
    interval = parse_time_range(text, D)
    assert interval == TimeInterval(
        start=datetime(2023, 12, 15, 9, 5), end=datetime(2023, 12, 15, 17, 30)
    )


def test_extra_times_ignored():
    interval = parse_time_range("08:00~09:00 (10:00 backup)", D)
    assert interval.start == datetime(2023, 12, 15, 8, 0)
    assert interval.end == datetime(2023, 12, 15, 9, 0)


def test_seconds_are_zero():
    interval = parse_time_range("08:00:45~09:00:30", D)
    assert interval.start.second == 0
    assert interval.end.second == 0


def test_reversed_range_is_returned_as_is():
    interval = parse_time_range("10:00~09:00", D)
    assert interval.end < interval.start


def test_hours_past_midnight_roll_over():
    interval = parse_time_range("23:00~25:00", D)
    assert interval.end == datetime(2023, 12, 16, 1, 0)


@pytest.mark.parametrize(
    "value, reason",
    [
        (1.5, "not_text"),
        (None, "not_text"),
        ("09:00", "missing_times"),
        ("all day", "missing_times"),
    ],
)
def test_failures(value, reason):
    result = try_parse_time_range(value, D)
    assert isinstance(result, ParseFailure)
    assert result.reason == reason
    assert parse_time_range(value, D) is None


def test_overflow_is_a_failure():
    result = try_parse_time_range("23:00~25:00", date.max)
    assert isinstance(result, ParseFailure)
    assert result.reason == "invalid_instant"


def test_find_clock_times():
    assert find_clock_times("a 1:00 b 12:30 c") == [(1, 0), (12, 30)]


def test_is_time_range_value():
    assert is_time_range_value("a 1:00 b 2:00")
    assert not is_time_range_value("09:00")
    assert not is_time_range_value(1.5)
    assert not is_time_range_value(None)


def test_non_ascii_digits_are_not_clock_times():
    assert parse_time_range("０９:００~１０:３０", D) is None
    assert not is_time_range_value("٠٩:٠٠-١٠:٠٠")
    assert find_clock_times("０９:００") == []
