"""Engine configuration loaded from environment variables.

The calculators never read this directly; callers turn it into explicit
arguments (buffer minutes, WorkingDay) so the engine stays a pure function
of its inputs.
"""

from datetime import time

from pydantic import Field
from pydantic_settings import BaseSettings

from src.availability.models import WorkingDay


class AvailabilityConfig(BaseSettings):
    """Availability configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Buffer added before and after every busy interval (travel/prep time)
    buffer_minutes: int = Field(
        default=30,
        ge=0,
        description="Minutes of padding on both sides of each busy interval",
    )

    # Working day boundaries
    day_start: time = Field(
        default=time(7, 0),
        description="Start of the working day availability is computed within",
    )
    day_end: time = Field(
        default=time(22, 0),
        description="End of the working day availability is computed within",
    )
    core_day_end: time = Field(
        default=time(19, 0),
        description="End of core hours, used only for weekly day classification",
    )

    # Weekly classification thresholds (core-hours free time)
    free_tier_hours: float = Field(
        default=6,
        description="Core free hours at or above which a day counts as free",
    )
    moderate_tier_hours: float = Field(
        default=2,
        description="Core free hours at or above which a day counts as moderate",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def working_day(self) -> WorkingDay:
        """Build the WorkingDay boundaries passed to the calculators."""
        return WorkingDay(
            start=self.day_start,
            end=self.day_end,
            core_end=self.core_day_end,
        )


# Singleton pattern
_config: AvailabilityConfig | None = None


def get_config() -> AvailabilityConfig:
    """Get the availability configuration singleton.

    Returns:
        AvailabilityConfig: Configuration instance
    """
    global _config
    if _config is None:
        _config = AvailabilityConfig()
    return _config
