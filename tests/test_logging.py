import io
import json
import logging

import pytest

from src.availability.daily import compute_daily
from src.availability.logging import get_logger, setup_logging
from src.availability.models import ScheduleRecord, Staff


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    setup_logging()


def test_json_lines_go_to_given_stream(log_stream):
    setup_logging(json_output=True, log_level="DEBUG", stream=log_stream)
    get_logger("availability.test").warning("column_rejected", column="核定服務時間")

    event = json.loads(log_stream.getvalue().splitlines()[-1])
    assert event["event"] == "column_rejected"
    assert event["column"] == "核定服務時間"
    assert event["level"] == "warning"


def test_level_filters_debug_events(log_stream):
    setup_logging(json_output=True, log_level="WARNING", stream=log_stream)
    get_logger("availability.test").debug("record_dropped")
    assert log_stream.getvalue() == ""


def test_engine_modules_pick_up_reconfiguration(log_stream, day):
    setup_logging(json_output=True, log_level="DEBUG", stream=log_stream)
    records = [ScheduleRecord(service_date="2023-12-15", time_range_text="TBD", staff_name="A")]
    compute_daily(day, records, [Staff(id="1", name="A")], 30)

    events = [json.loads(line) for line in log_stream.getvalue().splitlines()]
    dropped = [e for e in events if e["event"] == "record_dropped"]
    assert dropped[0]["reason"] == "missing_times"
    assert dropped[0]["staff"] == "A"


def test_stdlib_logging_bridged_to_same_stream(log_stream):
    setup_logging(log_level="INFO", stream=log_stream)
    logging.getLogger("openpyxl").warning("Data Validation extension is not supported")
    assert "Data Validation" in log_stream.getvalue()


def test_unknown_level_falls_back_to_info(log_stream):
    setup_logging(json_output=True, log_level="chatty", stream=log_stream)
    log = get_logger("availability.test")
    log.debug("hidden")
    log.info("shown")
    assert [json.loads(line)["event"] for line in log_stream.getvalue().splitlines()] == ["shown"]
