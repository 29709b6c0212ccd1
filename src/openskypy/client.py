"""
OpenSky Network REST API client.
"""

import logging
import os
from typing import Any, List, Optional, Sequence, Tuple

import httpx

from .decode import decode_flights, decode_state_vector_response
from .exceptions import (
    OpenSkyAuthenticationError,
    OpenSkyConnectionError,
    OpenSkyQueryError,
    OpenSkyRequestError,
)
from .models import Flight, StateVectorResponse
from .query import (
    BASE_URL,
    FlightsByAircraftRequest,
    FlightsByAirportRequest,
    FlightsWithinIntervalRequest,
    OwnStateVectorsRequest,
    StateVectorRequest,
)

logger = logging.getLogger(__name__)

USERNAME_ENV = "OPENSKY_USERNAME"
PASSWORD_ENV = "OPENSKY_PASSWORD"


class OpenSkyClient:
    """
    Async client for the OpenSky Network REST API.

    Without credentials the client runs in anonymous mode and OpenSky's
    anonymous restrictions apply (reduced time resolution, no historical
    state vectors, no own-receiver queries).

    Examples:
        async with OpenSkyClient() as client:
            response = await client.request_state_vectors(
                StateVectorRequest().include_category()
            )
    """

    BASE_URL = BASE_URL

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 10.0,
        base_url: Optional[str] = None,
    ):
        self.username = username
        self.password = password
        self.timeout = timeout
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

        auth = httpx.BasicAuth(username, password) if self.is_registered else None
        self._client = httpx.AsyncClient(
            timeout=timeout,
            auth=auth,
            headers={
                "User-Agent": "openskypy/0.1.0",
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "OpenSkyClient":
        """Create a client with credentials from OPENSKY_USERNAME / OPENSKY_PASSWORD."""
        return cls(
            username=os.environ.get(USERNAME_ENV),
            password=os.environ.get(PASSWORD_ENV),
            **kwargs,
        )

    @property
    def is_registered(self) -> bool:
        return bool(self.username) and bool(self.password)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "OpenSkyClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _make_request(
        self, endpoint: str, params: Optional[Sequence[Tuple[str, str]]] = None
    ) -> bytes:
        """Make a GET request and return the raw response body."""
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"Requesting {url} with params {params}")

        try:
            response = await self._client.get(url, params=list(params or []))
            logger.debug(f"Response received with status {response.status_code}")
            response.raise_for_status()
            return response.content

        except httpx.TimeoutException as e:
            raise OpenSkyConnectionError(f"Request timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in (401, 403):
                raise OpenSkyAuthenticationError(
                    "Not allowed to make this request without (valid) username and password"
                ) from e
            elif status == 404:
                raise OpenSkyQueryError("No data found for this request") from e
            elif status == 429:
                raise OpenSkyConnectionError("Rate limit exceeded") from e
            elif status >= 500:
                raise OpenSkyConnectionError("OpenSky service temporarily unavailable") from e
            else:
                raise OpenSkyConnectionError(f"HTTP error {status}: {e}") from e
        except httpx.RequestError as e:
            raise OpenSkyConnectionError(f"Network error: {e}") from e

    async def request_state_vectors(
        self, request: Optional[StateVectorRequest] = None
    ) -> StateVectorResponse:
        """
        Retrieve state vectors for all (or the filtered set of) aircraft.

        Args:
            request: Optional filters; all current state vectors when omitted

        Returns:
            StateVectorResponse with the server time and the state vectors
        """
        request = request or StateVectorRequest()
        body = await self._make_request(request.endpoint, request.params)
        return decode_state_vector_response(body)

    async def request_own_state_vectors(
        self, request: Optional[OwnStateVectorsRequest] = None
    ) -> StateVectorResponse:
        """Retrieve state vectors seen by your own receivers."""
        if not self.is_registered:
            raise OpenSkyAuthenticationError(
                "Own state vectors are only available with username and password"
            )
        request = request or OwnStateVectorsRequest()
        body = await self._make_request(request.endpoint, request.params)
        return decode_state_vector_response(body)

    async def request_flights_by_aircraft(
        self, request: FlightsByAircraftRequest
    ) -> List[Flight]:
        body = await self._make_request(request.endpoint, request.params)
        return decode_flights(body)

    async def request_flights_within_interval(
        self, request: FlightsWithinIntervalRequest
    ) -> List[Flight]:
        body = await self._make_request(request.endpoint, request.params)
        return decode_flights(body)

    async def request_flights_by_airport(
        self, request: FlightsByAirportRequest
    ) -> List[Flight]:
        """Retrieve departures or arrivals, depending on the request type."""
        if not isinstance(request, FlightsByAirportRequest):
            raise OpenSkyRequestError(
                "must provide either DEPARTURE or ARRIVAL request type"
            )
        body = await self._make_request(request.endpoint, request.params)
        return decode_flights(body)
