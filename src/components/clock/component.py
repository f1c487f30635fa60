"""
Clock component - current time, timezone lookup and conversion.

Answers questions about "now" and re-expresses wall-clock values between
IANA timezones. Every entry point is a pure function of its input, the
clock port and the timezone database.

Invariants:
- I1: A timezone is used only after it resolves in the database
- I2: Conversion input is local time in the source zone, never UTC
- I3: Unreadable conversion input yields the invalid-date sentinel, not an error
- I4: Converting within one zone preserves the instant
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from ._impl import (
    epoch_millis,
    format_human,
    format_iso_utc,
    format_iso_zoned,
    format_offset,
    parse_wall_clock,
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


def _require_zone(name: str | None, tz_db: TimezoneDatabasePort) -> ZoneInfo:
    """Resolve name in the database or raise InvalidTimezone."""
    if not name or tz_db.resolve(name) is None:
        raise InvalidTimezone()
    return tz_db.get_zone(name)


def _view(timezone: str, instant: datetime | None, zone: ZoneInfo) -> ZonedView:
    if instant is None:
        return ZonedView(timezone=timezone, datetime=INVALID_DATE, formatted=INVALID_DATE)

    local = instant.astimezone(zone)
    return ZonedView(
        timezone=timezone,
        datetime=format_iso_zoned(local),
        formatted=format_human(local, with_zone=True),
    )


# --- Component Entry Points ---


def run_now(*, clock: ClockPort) -> NowOutput:
    """
    Current instant.

    Returns:
        NowOutput with UTC ISO string, epoch milliseconds and a
        human-readable string in the host's local time.
    """
    now_utc = clock.now_utc()
    return NowOutput(
        datetime=format_iso_utc(now_utc),
        timestamp=epoch_millis(now_utc),
        formatted=format_human(now_utc.astimezone(clock.now_local().tzinfo)),
    )


def run_now_in_timezone(
    inp: ZonedNowInput,
    *,
    clock: ClockPort,
    tz_db: TimezoneDatabasePort,
) -> ZonedNowOutput:
    """
    Current instant expressed in a timezone.

    Raises:
        InvalidTimezone: If the timezone is not in the database
    """
    zone = _require_zone(inp.timezone, tz_db)
    local = clock.now_utc().astimezone(zone)

    return ZonedNowOutput(
        timezone=inp.timezone,
        datetime=format_iso_zoned(local),
        formatted=format_human(local, with_zone=True),
        offset=format_offset(local),
    )


def run_list_timezones(*, tz_db: TimezoneDatabasePort) -> TimezoneListOutput:
    """All timezone identifiers known to the database, sorted."""
    names = tuple(tz_db.names)
    return TimezoneListOutput(count=len(names), timezones=names)


def run_convert(
    inp: ConvertInput,
    *,
    tz_db: TimezoneDatabasePort,
) -> ConvertOutput:
    """
    Convert a wall-clock value from one timezone to another.

    The datetime string has no zone of its own; it is read as local time
    in the source zone. An unreadable string is not an error: both views
    carry the invalid-date sentinel.

    Raises:
        MissingField: If any of the three fields is absent or empty
        InvalidTimezone: If either timezone is not in the database
    """
    raw, from_name, to_name = inp.datetime, inp.from_timezone, inp.to_timezone
    if not raw or not from_name or not to_name:
        fields = (("datetime", raw), ("fromTimezone", from_name), ("toTimezone", to_name))
        raise MissingField(tuple(name for name, value in fields if not value))

    from_zone = _require_zone(from_name, tz_db)
    to_zone = _require_zone(to_name, tz_db)

    instant: datetime | None = None
    local = parse_wall_clock(raw, from_zone)
    if local is not None:
        try:
            instant = local.astimezone(UTC)
            # Both renderings must stay inside the representable range
            instant.astimezone(from_zone)
            instant.astimezone(to_zone)
        except OverflowError:
            instant = None

    return ConvertOutput(
        original=_view(from_name, instant, from_zone),
        converted=_view(to_name, instant, to_zone),
    )
