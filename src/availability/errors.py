"""Error hierarchy for schedule loading.

Two tiers:
  - ScheduleFormatError and subclasses are fatal. They are raised while
    loading a schedule and carry a message meant for the end user.
  - Per-record problems (bad dates, unparseable time ranges) never raise.
    They surface as ParseFailure values (see models.py) and are dropped by
    the calculators.
"""


class AvailabilityError(Exception):
    """Base exception for all availability engine errors."""

    pass


class ScheduleFormatError(AvailabilityError):
    """The uploaded schedule cannot be used at all.

    Processing halts; no partial availability view is produced.
    """

    pass


class EmptyScheduleError(ScheduleFormatError):
    """The schedule table contains no rows."""

    def __init__(self, message: str = "Schedule table is empty or invalid") -> None:
        super().__init__(message)


class ColumnDetectionError(ScheduleFormatError):
    """One or more of the date/time/staff columns could not be identified.

    Attributes:
        missing: Roles that could not be resolved, a subset of
                 ("date", "time", "staff").
        detected: Role -> column name for every role, None where missing.
    """

    ROLE_LABELS = {"date": "Date", "time": "Time", "staff": "Staff"}

    def __init__(self, detected: dict[str, str | None]) -> None:
        self.detected = dict(detected)
        self.missing = [role for role, column in self.detected.items() if not column]
        lines = [
            f"  {self.ROLE_LABELS.get(role, role)}: {column or 'NOT FOUND'}"
            for role, column in self.detected.items()
        ]
        super().__init__(
            "Unrecognized file format. Required columns could not be found:\n"
            + "\n".join(lines)
        )


class WorkbookReadError(AvailabilityError):
    """The workbook file could not be opened or decoded."""

    pass
