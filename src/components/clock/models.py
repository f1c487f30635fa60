"""
Clock component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ApiInputError

INVALID_DATE = "Invalid date"

# --- Error Types ---


class InvalidTimezone(ApiInputError):
    """Timezone identifier is not in the database."""

    code = "invalid_timezone"

    def __init__(self) -> None:
        super().__init__("Invalid timezone")


class MissingField(ApiInputError):
    """A required request field is absent."""

    code = "missing_field"

    def __init__(self, fields: tuple[str, ...] = ()) -> None:
        self.fields = fields
        super().__init__("Missing required fields")


# --- Input Models ---


@dataclass(frozen=True)
class ZonedNowInput:
    """Input for reading the current time in a timezone."""

    timezone: str


@dataclass(frozen=True)
class ConvertInput:
    """
    Input for converting a wall-clock value between timezones.

    Fields are None when the caller did not supply a usable string.
    """

    datetime: str | None = None
    from_timezone: str | None = None
    to_timezone: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class NowOutput:
    """Current instant, UTC based."""

    datetime: str
    timestamp: int
    formatted: str


@dataclass(frozen=True)
class ZonedNowOutput:
    """Current instant expressed in a timezone."""

    timezone: str
    datetime: str
    formatted: str
    offset: str


@dataclass(frozen=True)
class TimezoneListOutput:
    """All known timezone identifiers."""

    count: int
    timezones: tuple[str, ...]


@dataclass(frozen=True)
class ZonedView:
    """One rendering of an instant in a timezone."""

    timezone: str
    datetime: str
    formatted: str


@dataclass(frozen=True)
class ConvertOutput:
    """Same instant rendered in the source and target timezones."""

    original: ZonedView
    converted: ZonedView

