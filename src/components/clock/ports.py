"""
Clock component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class ClockPort(Protocol):
    """Port for reading the current time."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...

    def now_local(self) -> datetime:
        """Get current time in the host's local timezone."""
        ...


class TimezoneDatabasePort(Protocol):
    """Read-only timezone database."""

    @property
    def names(self) -> tuple[str, ...]:
        """All identifiers, sorted."""
        ...

    def resolve(self, name: str) -> str | None:
        """Canonical identifier for name, or None if unknown."""
        ...

    def get_zone(self, name: str) -> ZoneInfo:
        """ZoneInfo for a known identifier."""
        ...
