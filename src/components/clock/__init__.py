"""
Clock component - current time, timezone lookup and conversion.
"""

from ._impl import (
    format_human,
    format_iso_utc,
    format_iso_zoned,
    format_offset,
    parse_wall_clock,
)
from .component import (
    run_convert,
    run_list_timezones,
    run_now,
    run_now_in_timezone,
)
from .models import (
    INVALID_DATE,
    ConvertInput,
    ConvertOutput,
    InvalidTimezone,
    MissingField,
    NowOutput,
    TimezoneListOutput,
    ZonedNowInput,
    ZonedNowOutput,
    ZonedView,
)
from .ports import ClockPort, TimezoneDatabasePort

__all__ = [
    # Entry points
    "run_now",
    "run_now_in_timezone",
    "run_list_timezones",
    "run_convert",
    # Input models
    "ZonedNowInput",
    "ConvertInput",
    # Output models
    "NowOutput",
    "ZonedNowOutput",
    "TimezoneListOutput",
    "ZonedView",
    "ConvertOutput",
    "INVALID_DATE",
    # Errors
    "InvalidTimezone",
    "MissingField",
    # Ports
    "ClockPort",
    "TimezoneDatabasePort",
    # Formatting helpers
    "format_human",
    "format_iso_utc",
    "format_iso_zoned",
    "format_offset",
    "parse_wall_clock",
]
