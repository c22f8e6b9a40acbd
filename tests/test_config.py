from datetime import time

import pytest
from pydantic import ValidationError

from src.availability.config import AvailabilityConfig


def test_defaults(monkeypatch):
    for name in ("BUFFER_MINUTES", "DAY_START", "DAY_END", "CORE_DAY_END"):
        monkeypatch.delenv(name, raising=False)
    config = AvailabilityConfig(_env_file=None)
    assert config.buffer_minutes == 30
    working_day = config.working_day()
    assert (working_day.start, working_day.end, working_day.core_end) == (
        time(7),
        time(22),
        time(19),
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BUFFER_MINUTES", "15")
    monkeypatch.setenv("DAY_START", "08:00")
    monkeypatch.setenv("day_end", "20:30")
    config = AvailabilityConfig(_env_file=None)
    assert config.buffer_minutes == 15
    assert config.working_day().start == time(8)
    assert config.working_day().end == time(20, 30)


def test_negative_buffer_rejected(monkeypatch):
    monkeypatch.setenv("BUFFER_MINUTES", "-5")
    with pytest.raises(ValidationError):
        AvailabilityConfig(_env_file=None)
