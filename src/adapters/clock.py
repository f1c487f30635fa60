from datetime import UTC, datetime


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def now_local(self) -> datetime:
        return datetime.now(UTC).astimezone()


class FrozenClock:
    """
    Clock that always returns the same instant.

    Useful for deterministic testing.
    """

    def __init__(self, frozen_utc: datetime) -> None:
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now_utc(self) -> datetime:
        return self._frozen_utc

    def now_local(self) -> datetime:
        return self._frozen_utc.astimezone()
