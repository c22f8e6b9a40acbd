"""Find staff who are free for a whole requested window."""

from collections.abc import Sequence

from src.availability.models import DailyAvailability, TimeWindow


def is_available(daily: DailyAvailability, window: TimeWindow) -> bool:
    """True if one of the free intervals fully contains `window` on that day."""
    requested = window.on(daily.day)
    if requested.end <= requested.start:
        return False
    return any(free.contains(requested) for free in daily.free)


def filter_available(
    daily: Sequence[DailyAvailability], window: TimeWindow
) -> list[DailyAvailability]:
    return [d for d in daily if is_available(d, window)]
