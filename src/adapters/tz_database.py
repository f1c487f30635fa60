"""
IANA Timezone Database Adapter.

Read-only snapshot of the zone identifiers known to the runtime's bundled
timezone database (``zoneinfo`` backed by the ``tzdata`` distribution).

Key behaviors:
- names: sorted, duplicate-free identifiers
- resolve: case-insensitive lookup returning the canonical spelling
- get_zone: ZoneInfo for a known identifier

The snapshot is loaded once per process and never mutated afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from zoneinfo import ZoneInfo, available_timezones

logger = logging.getLogger(__name__)


class TimezoneDatabase:
    """
    Immutable view over a set of IANA timezone identifiers.
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        """
        Initialize the snapshot.

        Args:
            names: Identifiers to expose (default: every zone the runtime knows)
        """
        if names is None:
            names = available_timezones()
        self._names = tuple(sorted(set(names)))
        self._canonical = {name.lower(): name for name in self._names}

    @property
    def names(self) -> tuple[str, ...]:
        """All identifiers, sorted."""
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def resolve(self, name: str) -> str | None:
        """
        Resolve an identifier to its canonical spelling.

        Matching is case-insensitive ("america/new_york" -> "America/New_York").

        Returns:
            Canonical identifier, or None if the zone is unknown
        """
        if not name:
            return None
        return self._canonical.get(name.lower())

    def get_zone(self, name: str) -> ZoneInfo:
        """
        Get the ZoneInfo for an identifier.

        Raises:
            KeyError: If the zone is unknown
        """
        canonical = self.resolve(name)
        if canonical is None:
            raise KeyError(name)
        return ZoneInfo(canonical)


@lru_cache(maxsize=1)
def get_timezone_database() -> TimezoneDatabase:
    """Get the process-wide timezone database snapshot."""
    database = TimezoneDatabase()
    logger.info("Timezone database loaded: %d zones", len(database))
    return database
