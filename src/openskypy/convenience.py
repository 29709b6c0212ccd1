"""
High-level convenience functions for OpenSky data access.

Each function accepts an optional ``client``. When none is given a temporary
client is created with ``OpenSkyClient.from_env()`` (anonymous unless
OPENSKY_USERNAME and OPENSKY_PASSWORD are set) and closed afterwards. Every
function also has a ``.sync`` attribute for blocking use:

    >>> response = get_state_vectors.sync(include_category=True)
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

from .client import OpenSkyClient
from .models import Flight, StateVectorResponse
from .query import (
    AirportRequestType,
    BoundingBox,
    FlightsByAircraftRequest,
    FlightsByAirportRequest,
    FlightsWithinIntervalRequest,
    OwnStateVectorsRequest,
    StateVectorRequest,
)
from .utils import add_sync_version


@asynccontextmanager
async def _client_scope(
    client: Optional[OpenSkyClient],
) -> AsyncIterator[OpenSkyClient]:
    if client is not None:
        yield client
        return
    temp_client = OpenSkyClient.from_env()
    try:
        yield temp_client
    finally:
        await temp_client.close()


@add_sync_version
async def get_state_vectors(
    bounding_box: Optional[BoundingBox] = None,
    icao24: Optional[List[str]] = None,
    time: Optional[datetime] = None,
    include_category: bool = False,
    client: Optional[OpenSkyClient] = None,
) -> StateVectorResponse:
    """
    Get current (or historical) state vectors.

    Args:
        bounding_box: Only aircraft inside this area
        icao24: Only these transponder addresses
        time: Point in time to query; omitted means now
        include_category: Request the aircraft category (``extended=1``)
        client: Optional client instance

    Returns:
        StateVectorResponse in wire order
    """
    request = StateVectorRequest()
    if bounding_box is not None:
        request.with_bounding_box(bounding_box)
    for address in icao24 or []:
        request.with_icao24(address)
    if time is not None:
        request.at_time(time)
    if include_category:
        request.include_category()

    async with _client_scope(client) as active_client:
        return await active_client.request_state_vectors(request)


@add_sync_version
async def get_own_state_vectors(
    serials: Optional[List[int]] = None,
    icao24: Optional[List[str]] = None,
    time: Optional[datetime] = None,
    client: Optional[OpenSkyClient] = None,
) -> StateVectorResponse:
    """
    Get state vectors seen by your own receivers.

    Without an explicit client, credentials are read from OPENSKY_USERNAME
    and OPENSKY_PASSWORD.
    """
    request = OwnStateVectorsRequest()
    if serials:
        request.with_sensors(*serials)
    for address in icao24 or []:
        request.with_icao24(address)
    if time is not None:
        request.at_time(time)

    async with _client_scope(client) as active_client:
        return await active_client.request_own_state_vectors(request)


@add_sync_version
async def get_flights_by_aircraft(
    icao24: str,
    begin: datetime,
    end: datetime,
    client: Optional[OpenSkyClient] = None,
) -> List[Flight]:
    """Get flights of one aircraft within an interval of at most 30 days."""
    request = FlightsByAircraftRequest(icao24, begin, end)
    async with _client_scope(client) as active_client:
        return await active_client.request_flights_by_aircraft(request)


@add_sync_version
async def get_flights_by_airport(
    airport: str,
    begin: datetime,
    end: datetime,
    request_type: AirportRequestType,
    client: Optional[OpenSkyClient] = None,
) -> List[Flight]:
    """Get departures or arrivals at an airport within at most 7 days."""
    request = FlightsByAirportRequest(airport, begin, end, request_type)
    async with _client_scope(client) as active_client:
        return await active_client.request_flights_by_airport(request)


@add_sync_version
async def get_flights_within_interval(
    begin: datetime,
    end: datetime,
    client: Optional[OpenSkyClient] = None,
) -> List[Flight]:
    """Get all flights within an interval of at most 2 hours."""
    request = FlightsWithinIntervalRequest(begin, end)
    async with _client_scope(client) as active_client:
        return await active_client.request_flights_within_interval(request)
