"""
Clock component formatting and parsing helpers.

Renderings:
- ISO UTC:   2026-01-05T10:30:00.000Z
- ISO zoned: 2026-01-05T05:30:00-05:00
- Human:     January 5, 2026 5:30:00 AM [EST]
- Offset:    -05:00

Parsing is lenient: anything that cannot be read as a date yields None
and the caller renders the invalid-date sentinel instead of failing.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Tried in order after ISO-8601
FALLBACK_FORMATS = (
    "%B %d, %Y %I:%M:%S %p",
    "%B %d, %Y %I:%M %p",
    "%B %d, %Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)


# --- Formatting ---


def format_offset(dt: datetime) -> str:
    """Format the UTC offset of an aware datetime as ±HH:MM."""
    offset = dt.utcoffset() or timedelta(0)
    total_minutes = round(offset.total_seconds() / 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_iso_utc(dt: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a Z suffix."""
    utc = dt.astimezone(UTC)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


def format_iso_zoned(dt: datetime) -> str:
    """ISO-8601 to the second with the numeric offset of dt's own zone."""
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f"{format_offset(dt)}"
    )


def zone_abbreviation(dt: datetime) -> str:
    """Zone abbreviation (EST, JST, ...), or the numeric offset if the zone has none."""
    return dt.tzname() or format_offset(dt)


def format_human(dt: datetime, with_zone: bool = False) -> str:
    """Format as "Month D, YYYY h:mm:ss AM", optionally followed by the zone abbreviation."""
    hour12 = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    text = (
        f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year:04d} "
        f"{hour12}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
    if with_zone:
        text = f"{text} {zone_abbreviation(dt)}"
    return text


def epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (dt - EPOCH) // timedelta(milliseconds=1)


# --- Parsing ---


def _parse_naive_or_aware(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_wall_clock(raw: str, zone: tzinfo) -> datetime | None:
    """
    Parse raw as a wall-clock value in zone.

    Naive values are localized to zone (fold=0: the earlier offset wins in
    DST overlaps). Values that carry their own offset keep their instant
    and are re-expressed in zone.

    Returns:
        Aware datetime in zone, or None if raw is not a readable date
    """
    text = raw.strip()
    if not text:
        return None

    parsed = _parse_naive_or_aware(text)
    if parsed is None:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)

    try:
        return parsed.astimezone(zone)
    except OverflowError:
        return None
