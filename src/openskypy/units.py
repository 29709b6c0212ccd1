"""
Unit wrapper types for state vector measurements.

OpenSky reports all values in SI units: degrees for angles, meters for
altitudes and meters per second for speeds. Each wrapper keeps the raw value
and offers conversions to the aviation units pilots and controllers use.

A value decoded with ``from_json`` that was not a JSON number carries the
sentinel ``-1.0``. The sentinel is not a physical reading; check ``is_set``
before converting, conversions do not validate.
"""

from dataclasses import dataclass
from typing import Any, Type, TypeVar

SENTINEL = -1.0

METERS_TO_FEET = 3.28084
MPS_TO_KNOTS = 1.94384
MPS_TO_FEET_PER_MINUTE = 196.85

W = TypeVar("W", bound="_UnitValue")


def is_json_number(raw: Any) -> bool:
    """Check whether a decoded JSON value is a number (bools excluded)."""
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


@dataclass(frozen=True)
class _UnitValue:
    value: float = 0.0

    @classmethod
    def from_json(cls: Type[W], raw: Any) -> W:
        """Build from a decoded JSON value, storing the sentinel for non-numbers."""
        if is_json_number(raw):
            try:
                return cls(float(raw))
            except OverflowError:
                return cls(SENTINEL)
        return cls(SENTINEL)

    @property
    def is_set(self) -> bool:
        return self.value != SENTINEL

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class Angle(_UnitValue):
    """Degree values such as longitude, latitude and true track."""


@dataclass(frozen=True)
class Altitude(_UnitValue):
    """Altitude in meters, barometric or geometric."""

    def to_feet(self) -> float:
        return self.value * METERS_TO_FEET


@dataclass(frozen=True)
class Speed(_UnitValue):
    """Speed in meters per second, such as ground speed or vertical rate."""

    def to_knots(self) -> float:
        return self.value * MPS_TO_KNOTS

    def to_feet_per_minute(self) -> float:
        return self.value * MPS_TO_FEET_PER_MINUTE
