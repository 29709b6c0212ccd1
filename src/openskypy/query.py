"""
Request builders for the OpenSky REST API.

Each builder accumulates query parameters for one endpoint. Parameters may
repeat (several ``icao24`` or ``serials`` values), so they are kept as an
ordered list of ``(key, value)`` pairs which httpx encodes as repeated keys.

See https://openskynetwork.github.io/opensky-api/rest.html
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Tuple

from .exceptions import OpenSkyRequestError

logger = logging.getLogger(__name__)

BASE_URL = "https://opensky-network.org/api"


class Endpoints:
    """Endpoint paths relative to the API base URL."""

    ALL_STATES = "states/all"
    OWN_STATES = "states/own"
    FLIGHTS_WITHIN_INTERVAL = "flights/all"
    FLIGHTS_BY_AIRCRAFT = "flights/aircraft"
    ARRIVALS_BY_AIRPORT = "flights/arrival"
    DEPARTURES_BY_AIRPORT = "flights/departure"


# Maximum interval lengths accepted by the flights endpoints
FLIGHTS_INTERVAL_LIMIT = timedelta(hours=2)
AIRPORT_INTERVAL_LIMIT = timedelta(days=7)
AIRCRAFT_INTERVAL_LIMIT = timedelta(days=30)

ICAO24_LENGTH = 6
AIRPORT_ICAO_LENGTH = 4


class AirportRequestType(Enum):
    """Whether a flights-by-airport request asks for departures or arrivals."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"


@dataclass(frozen=True)
class BoundingBox:
    """Area in WGS84 coordinates (decimal degrees)."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


def format_degrees(value: float) -> str:
    return f"{value:.5f}"


def to_epoch(value: datetime) -> int:
    """Seconds since the Unix epoch; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def check_interval(begin: datetime, end: datetime, limit: timedelta) -> None:
    """
    Validate a [begin, end] time interval.

    Raises:
        OpenSkyRequestError: If end precedes begin or the interval exceeds limit
    """
    if to_epoch(end) < to_epoch(begin):
        raise OpenSkyRequestError("end must be AFTER begin")
    span = timedelta(seconds=to_epoch(end) - to_epoch(begin))
    if span > limit:
        raise OpenSkyRequestError(
            f"interval duration must not exceed {_describe(limit)}, got {span}"
        )


def _describe(limit: timedelta) -> str:
    if limit.days and not limit.seconds:
        return f"{limit.days} days"
    return f"{int(limit.total_seconds() // 3600)} hours"


class BaseRequest:
    """Ordered query parameters for a single endpoint."""

    endpoint = ""

    def __init__(self) -> None:
        self._params: List[Tuple[str, str]] = []

    def add(self, key: str, value: object) -> None:
        self._params.append((key, str(value)))

    @property
    def params(self) -> List[Tuple[str, str]]:
        return list(self._params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r}, params={self._params!r})"


def _warn_icao24_length(icao24: str) -> None:
    if len(icao24) != ICAO24_LENGTH:
        logger.warning(
            f"ICAO24 address '{icao24}' should be {ICAO24_LENGTH} characters long"
        )


class StateVectorRequest(BaseRequest):
    """Query for all state vectors, optionally filtered.

    Examples:
        request = StateVectorRequest().with_bounding_box(
            BoundingBox(45.8389, 47.8229, 5.9962, 10.5226)
        ).include_category()
    """

    endpoint = Endpoints.ALL_STATES

    def with_bounding_box(self, box: BoundingBox) -> "StateVectorRequest":
        self.add("lamin", format_degrees(box.lat_min))
        self.add("lomin", format_degrees(box.lon_min))
        self.add("lamax", format_degrees(box.lat_max))
        self.add("lomax", format_degrees(box.lon_max))
        return self

    def with_icao24(self, icao24: str) -> "StateVectorRequest":
        """Restrict to one transponder address; may be called repeatedly."""
        _warn_icao24_length(icao24)
        self.add("icao24", icao24.lower())
        return self

    def at_time(self, time: datetime) -> "StateVectorRequest":
        self.add("time", to_epoch(time))
        return self

    def include_category(self) -> "StateVectorRequest":
        self.add("extended", 1)
        return self


class OwnStateVectorsRequest(BaseRequest):
    """Query for state vectors seen by your own receivers (requires credentials)."""

    endpoint = Endpoints.OWN_STATES

    def with_sensors(self, *serials: int) -> "OwnStateVectorsRequest":
        for serial in serials:
            self.add("serials", int(serial))
        return self

    def with_icao24(self, icao24: str) -> "OwnStateVectorsRequest":
        _warn_icao24_length(icao24)
        self.add("icao24", icao24.lower())
        return self

    def at_time(self, time: datetime) -> "OwnStateVectorsRequest":
        self.add("time", to_epoch(time))
        return self


class FlightsWithinIntervalRequest(BaseRequest):
    """Flights within an interval of at most two hours."""

    endpoint = Endpoints.FLIGHTS_WITHIN_INTERVAL

    def __init__(self, begin: datetime, end: datetime):
        super().__init__()
        check_interval(begin, end, FLIGHTS_INTERVAL_LIMIT)
        self.add("begin", to_epoch(begin))
        self.add("end", to_epoch(end))


class FlightsByAirportRequest(BaseRequest):
    """Departures or arrivals at an airport within at most seven days."""

    def __init__(
        self,
        airport: str,
        begin: datetime,
        end: datetime,
        request_type: AirportRequestType,
    ):
        super().__init__()
        if len(airport) != AIRPORT_ICAO_LENGTH:
            raise OpenSkyRequestError(
                f"ICAO airport must be {AIRPORT_ICAO_LENGTH} characters long, got '{airport}'"
            )
        if not isinstance(request_type, AirportRequestType):
            raise OpenSkyRequestError(
                "must provide either DEPARTURE or ARRIVAL request type"
            )
        check_interval(begin, end, AIRPORT_INTERVAL_LIMIT)
        self.request_type = request_type
        self.add("airport", airport.upper())
        self.add("begin", to_epoch(begin))
        self.add("end", to_epoch(end))

    @property
    def endpoint(self) -> str:  # type: ignore[override]
        if self.request_type is AirportRequestType.ARRIVAL:
            return Endpoints.ARRIVALS_BY_AIRPORT
        return Endpoints.DEPARTURES_BY_AIRPORT


class FlightsByAircraftRequest(BaseRequest):
    """Flights of one aircraft within at most thirty days."""

    endpoint = Endpoints.FLIGHTS_BY_AIRCRAFT

    def __init__(self, icao24: str, begin: datetime, end: datetime):
        super().__init__()
        if len(icao24) != ICAO24_LENGTH:
            raise OpenSkyRequestError(
                f"icao24 address must be exactly {ICAO24_LENGTH} characters, got '{icao24}'"
            )
        check_interval(begin, end, AIRCRAFT_INTERVAL_LIMIT)
        self.add("icao24", icao24.lower())
        self.add("begin", to_epoch(begin))
        self.add("end", to_epoch(end))
