"""
Timestamp wrapper for epoch-second values reported by OpenSky.
"""

from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Any, Optional

from .units import is_json_number

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Instant used for arithmetic on an unset timestamp
ZERO_INSTANT = datetime.min.replace(tzinfo=timezone.utc)


@total_ordering
class Timestamp:
    """
    An absolute point in time, or the unset instant.

    OpenSky sends times as integer seconds since the Unix epoch and uses
    ``null`` when no time is known (e.g. no position report within the last
    15 seconds). The unset instant is distinct from every decoded value,
    including the epoch itself.
    """

    __slots__ = ("_dt",)

    def __init__(self, dt: Optional[datetime] = None):
        if dt is not None and dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        self._dt = dt

    @classmethod
    def from_epoch(cls, seconds: int) -> "Timestamp":
        """Raises ValueError when seconds lies outside the datetime range."""
        try:
            return cls(EPOCH + timedelta(seconds=int(seconds)))
        except OverflowError as e:
            raise ValueError(f"epoch seconds out of range: {seconds!r}") from e

    @classmethod
    def from_json(cls, raw: Any) -> "Timestamp":
        """Decode a JSON value; numbers are epoch seconds, anything else is unset.

        Numbers outside the datetime range (and NaN or infinity) are unset too.
        """
        if is_json_number(raw):
            try:
                return cls.from_epoch(int(raw))
            except (OverflowError, ValueError):
                return cls()
        return cls()

    @property
    def as_datetime(self) -> Optional[datetime]:
        return self._dt

    @property
    def is_set(self) -> bool:
        return self._dt is not None

    @property
    def epoch_seconds(self) -> Optional[int]:
        if self._dt is None:
            return None
        return int((self._dt - EPOCH).total_seconds())

    def _instant(self) -> datetime:
        return self._dt if self._dt is not None else ZERO_INSTANT

    def difference(self, other: "Timestamp") -> timedelta:
        """Absolute duration between two timestamps, independent of order."""
        return abs(self._instant() - other._instant())

    def __bool__(self) -> bool:
        return self.is_set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._instant() < other._instant()

    def __hash__(self) -> int:
        return hash(self._dt)

    def __repr__(self) -> str:
        if self._dt is None:
            return "Timestamp(unset)"
        return f"Timestamp({self._dt.isoformat()})"


Timestamp.UNSET = Timestamp()  # type: ignore[attr-defined]
