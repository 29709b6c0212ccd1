"""
Tests for OpenSkyClient with a mocked HTTP transport.
"""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from openskypy.client import OpenSkyClient
from openskypy.exceptions import (
    OpenSkyAuthenticationError,
    OpenSkyConnectionError,
    OpenSkyDecodeError,
    OpenSkyQueryError,
)
from openskypy.query import (
    AirportRequestType,
    BoundingBox,
    FlightsByAircraftRequest,
    FlightsByAirportRequest,
    FlightsWithinIntervalRequest,
    OwnStateVectorsRequest,
    StateVectorRequest,
)

BEGIN = datetime(2023, 11, 14, tzinfo=timezone.utc)


def mock_http(content=b"", status_code=200):
    """AsyncMock standing in for httpx.AsyncClient with a canned response."""
    mock_response = Mock()
    mock_response.content = content
    mock_response.status_code = status_code
    if status_code >= 400:
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}", request=Mock(), response=mock_response
        )
    else:
        mock_response.raise_for_status.return_value = None

    mock_client = AsyncMock()
    mock_client.get.return_value = mock_response
    return mock_client


class TestOpenSkyClient:
    """Test OpenSkyClient configuration and requests."""

    @pytest.fixture
    def client(self):
        """Create an anonymous test client."""
        return OpenSkyClient(timeout=5)

    def test_init(self, client):
        """Test client initialization."""
        assert client.timeout == 5
        assert client.base_url == "https://opensky-network.org/api"
        assert not client.is_registered

    def test_registered_needs_both_credentials(self):
        assert OpenSkyClient(username="user", password="secret").is_registered
        assert not OpenSkyClient(username="user").is_registered
        assert not OpenSkyClient(password="secret").is_registered

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENSKY_USERNAME", "user")
        monkeypatch.setenv("OPENSKY_PASSWORD", "secret")
        client = OpenSkyClient.from_env(timeout=3)
        assert client.is_registered
        assert client.username == "user"
        assert client.timeout == 3

    def test_custom_base_url(self):
        client = OpenSkyClient(base_url="http://localhost:8080/api/")
        assert client.base_url == "http://localhost:8080/api"

    @pytest.mark.asyncio
    async def test_request_state_vectors(self, client, state_response_body):
        """Test a state vector request end to end."""
        client._client = mock_http(state_response_body)

        request = StateVectorRequest().with_bounding_box(
            BoundingBox(45.8389, 47.8229, 5.9962, 10.5226)
        )
        response = await client.request_state_vectors(request)

        assert response.time == 1700000000
        assert [s.icao24 for s in response.states] == ["3c6444", "4b1814"]

        call_args = client._client.get.call_args
        assert call_args[0][0] == "https://opensky-network.org/api/states/all"
        assert ("lamin", "45.83890") in call_args[1]["params"]

    @pytest.mark.asyncio
    async def test_request_state_vectors_without_request(self, client):
        client._client = mock_http(b'{"time": 1700000000, "states": null}')

        response = await client.request_state_vectors()

        assert len(response) == 0
        assert client._client.get.call_args[1]["params"] == []

    @pytest.mark.asyncio
    async def test_own_state_vectors_requires_credentials(self, client):
        client._client = mock_http()
        with pytest.raises(OpenSkyAuthenticationError):
            await client.request_own_state_vectors()
        client._client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_own_state_vectors(self, state_response_body):
        client = OpenSkyClient(username="user", password="secret")
        client._client = mock_http(state_response_body)

        response = await client.request_own_state_vectors(
            OwnStateVectorsRequest().with_sensors(1433)
        )

        assert len(response.states) == 2
        call_args = client._client.get.call_args
        assert call_args[0][0].endswith("/states/own")
        assert call_args[1]["params"] == [("serials", "1433")]

    @pytest.mark.asyncio
    async def test_flights_by_aircraft(self, client, flight_data):
        client._client = mock_http(json.dumps([flight_data]).encode())

        flights = await client.request_flights_by_aircraft(
            FlightsByAircraftRequest("3c66e5", BEGIN, BEGIN + timedelta(days=1))
        )

        assert len(flights) == 1
        assert flights[0].est_departure_airport == "EDDF"
        assert client._client.get.call_args[0][0].endswith("/flights/aircraft")

    @pytest.mark.asyncio
    async def test_flights_within_interval(self, client, flight_data):
        client._client = mock_http(json.dumps([flight_data, flight_data]).encode())

        flights = await client.request_flights_within_interval(
            FlightsWithinIntervalRequest(BEGIN, BEGIN + timedelta(hours=1))
        )

        assert len(flights) == 2
        assert client._client.get.call_args[0][0].endswith("/flights/all")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_type, path",
        [
            (AirportRequestType.ARRIVAL, "/flights/arrival"),
            (AirportRequestType.DEPARTURE, "/flights/departure"),
        ],
    )
    async def test_flights_by_airport(self, client, flight_data, request_type, path):
        client._client = mock_http(json.dumps([flight_data]).encode())

        await client.request_flights_by_airport(
            FlightsByAirportRequest("EDDF", BEGIN, BEGIN + timedelta(days=1), request_type)
        )

        assert client._client.get.call_args[0][0].endswith(path)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, error_class",
        [
            (401, OpenSkyAuthenticationError),
            (403, OpenSkyAuthenticationError),
            (404, OpenSkyQueryError),
            (429, OpenSkyConnectionError),
            (400, OpenSkyConnectionError),
            (503, OpenSkyConnectionError),
        ],
    )
    async def test_http_errors(self, client, status_code, error_class):
        """Test mapping of HTTP status codes to exceptions."""
        client._client = mock_http(status_code=status_code)

        with pytest.raises(error_class):
            await client.request_state_vectors()

    @pytest.mark.asyncio
    async def test_rate_limit_not_retried(self, client):
        client._client = mock_http(status_code=429)

        with pytest.raises(OpenSkyConnectionError, match="Rate limit"):
            await client.request_state_vectors()
        assert client._client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        client._client = AsyncMock()
        client._client.get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(OpenSkyConnectionError, match="timeout"):
            await client.request_state_vectors()

    @pytest.mark.asyncio
    async def test_network_error(self, client):
        client._client = AsyncMock()
        client._client.get.side_effect = httpx.ConnectError("refused")

        with pytest.raises(OpenSkyConnectionError, match="Network error"):
            await client.request_state_vectors()

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        client._client = mock_http(b"<html>maintenance</html>")

        with pytest.raises(OpenSkyDecodeError):
            await client.request_state_vectors()

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        async with OpenSkyClient() as client:
            client._client = AsyncMock()
        client._client.aclose.assert_awaited_once()
