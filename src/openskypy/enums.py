"""
Classification enumerations carried by state vectors.
"""

from enum import IntEnum


class PositionSource(IntEnum):
    """Origin of a state vector's position."""

    ADSB = 0
    ASTERIX = 1
    MLAT = 2
    FLARM = 3

    @classmethod
    def label(cls, value: int) -> str:
        """Human-readable label for any integer, valid or not."""
        return _POSITION_SOURCE_LABELS.get(value, INVALID_POSITION_SOURCE)

    def __str__(self) -> str:
        return self.label(self.value)


class Category(IntEnum):
    """ICAO aircraft (emitter) category, sent when ``extended=1`` is requested."""

    NO_INFORMATION = 0
    NO_ADSB_CATEGORY = 1
    LIGHT = 2
    SMALL = 3
    LARGE = 4
    HIGH_VORTEX_LARGE = 5
    HEAVY = 6
    HIGH_PERFORMANCE = 7
    ROTORCRAFT = 8
    GLIDER = 9
    LIGHTER_THAN_AIR = 10
    PARACHUTIST = 11
    ULTRALIGHT = 12
    RESERVED = 13
    UNMANNED = 14
    SPACE = 15
    EMERGENCY_VEHICLE = 16
    SERVICE_VEHICLE = 17
    POINT_OBSTACLE = 18
    CLUSTER_OBSTACLE = 19
    LINE_OBSTACLE = 20

    @classmethod
    def label(cls, value: int) -> str:
        """Human-readable label for any integer, valid or not."""
        return _CATEGORY_LABELS.get(value, INVALID_CATEGORY)

    def __str__(self) -> str:
        return self.label(self.value)


INVALID_POSITION_SOURCE = "Not a valid Position Source"
INVALID_CATEGORY = "Not a valid category"

_POSITION_SOURCE_LABELS = {
    PositionSource.ADSB: "ADS-B",
    PositionSource.ASTERIX: "ASTERIX",
    PositionSource.MLAT: "MLAT",
    PositionSource.FLARM: "FLARM",
}

_CATEGORY_LABELS = {
    Category.NO_INFORMATION: "N/A",
    Category.NO_ADSB_CATEGORY: "No ADS-B Emitter Category Information",
    Category.LIGHT: "Light (< 15500 lbs)",
    Category.SMALL: "Small (15500 to 75000 lbs)",
    Category.LARGE: "Large (75000 to 300000 lbs)",
    Category.HIGH_VORTEX_LARGE: "High Vortex Large (aircraft such as B-757)",
    Category.HEAVY: "Heavy (> 300000 lbs)",
    Category.HIGH_PERFORMANCE: "High Performance (> 5g acceleration and 400 kts)",
    Category.ROTORCRAFT: "Rotorcraft",
    Category.GLIDER: "Glider / sailplane",
    Category.LIGHTER_THAN_AIR: "Lighter-than-air",
    Category.PARACHUTIST: "Parachutist / Skydiver",
    Category.ULTRALIGHT: "Ultralight / hang-glider / paraglider",
    Category.RESERVED: "Reserved",
    Category.UNMANNED: "Unmanned Aerial Vehicle",
    Category.SPACE: "Space / Trans-atmospheric vehicle",
    Category.EMERGENCY_VEHICLE: "Surface Vehicle - Emergency Vehicle",
    Category.SERVICE_VEHICLE: "Surface Vehicle - Service Vehicle",
    Category.POINT_OBSTACLE: "Point Obstacle (includes tethered balloons)",
    Category.CLUSTER_OBSTACLE: "Cluster Obstacle",
    Category.LINE_OBSTACLE: "Line Obstacle",
}
