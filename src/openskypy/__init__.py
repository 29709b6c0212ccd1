"""
Python client for the OpenSky Network REST API.

Query live and historical aircraft state vectors and flights, decoded into
typed objects.
"""

try:
    from importlib import metadata

    __version__ = metadata.version(__name__)
except Exception:
    __version__ = "unknown"

from .client import OpenSkyClient
from .convenience import (
    get_flights_by_aircraft,
    get_flights_by_airport,
    get_flights_within_interval,
    get_own_state_vectors,
    get_state_vectors,
)
from .decode import (
    JsonKind,
    decode_flight,
    decode_flights,
    decode_state_vector,
    decode_state_vector_response,
    json_kind,
)
from .enums import Category, PositionSource
from .exceptions import (
    OpenSkyAuthenticationError,
    OpenSkyConnectionError,
    OpenSkyDecodeError,
    OpenSkyError,
    OpenSkyQueryError,
    OpenSkyRequestError,
    StateVectorDecodeError,
)
from .models import Flight, FlightsResponse, StateVector, StateVectorResponse
from .query import (
    AirportRequestType,
    BoundingBox,
    FlightsByAircraftRequest,
    FlightsByAirportRequest,
    FlightsWithinIntervalRequest,
    OwnStateVectorsRequest,
    StateVectorRequest,
    check_interval,
)
from .sync import (
    AsyncSyncBridge,
    get_flights_by_aircraft_sync,
    get_flights_by_airport_sync,
    get_flights_within_interval_sync,
    get_own_state_vectors_sync,
    get_state_vectors_sync,
)
from .timestamp import Timestamp
from .units import Altitude, Angle, Speed
from .utils import get_start_and_end_of_day

__all__ = [
    # Client
    "OpenSkyClient",
    # Convenience functions
    "get_state_vectors",
    "get_own_state_vectors",
    "get_flights_by_aircraft",
    "get_flights_by_airport",
    "get_flights_within_interval",
    # Sync wrappers
    "AsyncSyncBridge",
    "get_state_vectors_sync",
    "get_own_state_vectors_sync",
    "get_flights_by_aircraft_sync",
    "get_flights_by_airport_sync",
    "get_flights_within_interval_sync",
    # Decoding
    "JsonKind",
    "json_kind",
    "decode_state_vector",
    "decode_state_vector_response",
    "decode_flight",
    "decode_flights",
    # Models
    "StateVector",
    "StateVectorResponse",
    "Flight",
    "FlightsResponse",
    "Timestamp",
    "Angle",
    "Altitude",
    "Speed",
    "PositionSource",
    "Category",
    # Requests
    "AirportRequestType",
    "BoundingBox",
    "StateVectorRequest",
    "OwnStateVectorsRequest",
    "FlightsWithinIntervalRequest",
    "FlightsByAirportRequest",
    "FlightsByAircraftRequest",
    "check_interval",
    "get_start_and_end_of_day",
    # Exceptions
    "OpenSkyError",
    "OpenSkyConnectionError",
    "OpenSkyAuthenticationError",
    "OpenSkyQueryError",
    "OpenSkyDecodeError",
    "StateVectorDecodeError",
    "OpenSkyRequestError",
]
