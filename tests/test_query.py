"""
Tests for request builders and interval validation.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from openskypy.exceptions import OpenSkyRequestError
from openskypy.query import (
    AirportRequestType,
    BoundingBox,
    Endpoints,
    FlightsByAircraftRequest,
    FlightsByAirportRequest,
    FlightsWithinIntervalRequest,
    OwnStateVectorsRequest,
    StateVectorRequest,
    check_interval,
)
from openskypy.utils import get_start_and_end_of_day

BEGIN = datetime(2023, 11, 14, 0, 0, tzinfo=timezone.utc)


class TestCheckInterval:
    """Test time interval validation."""

    def test_valid_interval(self):
        check_interval(BEGIN, BEGIN + timedelta(hours=2), timedelta(hours=2))

    def test_end_before_begin(self):
        with pytest.raises(OpenSkyRequestError, match="AFTER"):
            check_interval(BEGIN, BEGIN - timedelta(seconds=1), timedelta(hours=2))

    def test_limit_exceeded_names_limit(self):
        with pytest.raises(OpenSkyRequestError, match="30 days"):
            check_interval(BEGIN, BEGIN + timedelta(days=31), timedelta(days=30))
        with pytest.raises(OpenSkyRequestError, match="2 hours"):
            check_interval(BEGIN, BEGIN + timedelta(hours=3), timedelta(hours=2))

    def test_request_error_is_value_error(self):
        with pytest.raises(ValueError):
            check_interval(BEGIN, BEGIN - timedelta(days=1), timedelta(days=1))


class TestStateVectorRequest:
    """Test the states/all request builder."""

    def test_empty(self):
        request = StateVectorRequest()
        assert request.endpoint == Endpoints.ALL_STATES
        assert request.params == []

    def test_bounding_box(self):
        request = StateVectorRequest().with_bounding_box(
            BoundingBox(49.96708, 50.252014, 19.5057256, 20.3726393)
        )
        assert request.params == [
            ("lamin", "49.96708"),
            ("lomin", "19.50573"),
            ("lamax", "50.25201"),
            ("lomax", "20.37264"),
        ]

    def test_chaining(self):
        request = (
            StateVectorRequest()
            .with_icao24("3C6444")
            .with_icao24("4b1814")
            .at_time(BEGIN)
            .include_category()
        )
        assert request.params == [
            ("icao24", "3c6444"),
            ("icao24", "4b1814"),
            ("time", str(int(BEGIN.timestamp()))),
            ("extended", "1"),
        ]

    def test_short_icao24_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="openskypy.query"):
            request = StateVectorRequest().with_icao24("abc")
        assert ("icao24", "abc") in request.params
        assert "should be 6 characters" in caplog.text

    def test_naive_time_is_utc(self):
        request = StateVectorRequest().at_time(datetime(1970, 1, 1, 0, 1))
        assert request.params == [("time", "60")]


class TestOwnStateVectorsRequest:
    """Test the states/own request builder."""

    def test_sensors(self):
        request = OwnStateVectorsRequest().with_sensors(1433, 2211).with_icao24("3c6444")
        assert request.endpoint == Endpoints.OWN_STATES
        assert request.params == [
            ("serials", "1433"),
            ("serials", "2211"),
            ("icao24", "3c6444"),
        ]


class TestFlightRequests:
    """Test the flights request builders."""

    def test_within_interval(self):
        request = FlightsWithinIntervalRequest(BEGIN, BEGIN + timedelta(hours=1))
        assert request.endpoint == Endpoints.FLIGHTS_WITHIN_INTERVAL
        assert request.params == [
            ("begin", "1699920000"),
            ("end", "1699923600"),
        ]

    def test_within_interval_too_long(self):
        with pytest.raises(OpenSkyRequestError):
            FlightsWithinIntervalRequest(BEGIN, BEGIN + timedelta(hours=2, seconds=1))

    @pytest.mark.parametrize(
        "request_type, endpoint",
        [
            (AirportRequestType.ARRIVAL, Endpoints.ARRIVALS_BY_AIRPORT),
            (AirportRequestType.DEPARTURE, Endpoints.DEPARTURES_BY_AIRPORT),
        ],
    )
    def test_by_airport(self, request_type, endpoint):
        request = FlightsByAirportRequest(
            "eddf", BEGIN, BEGIN + timedelta(days=1), request_type
        )
        assert request.endpoint == endpoint
        assert request.params[0] == ("airport", "EDDF")

    def test_by_airport_code_length(self):
        with pytest.raises(OpenSkyRequestError, match="4 characters"):
            FlightsByAirportRequest(
                "FRA", BEGIN, BEGIN + timedelta(days=1), AirportRequestType.ARRIVAL
            )

    def test_by_airport_interval(self):
        with pytest.raises(OpenSkyRequestError, match="7 days"):
            FlightsByAirportRequest(
                "EDDF", BEGIN, BEGIN + timedelta(days=8), AirportRequestType.ARRIVAL
            )

    def test_by_airport_request_type(self):
        with pytest.raises(OpenSkyRequestError):
            FlightsByAirportRequest("EDDF", BEGIN, BEGIN + timedelta(days=1), "arrival")

    def test_by_aircraft(self):
        request = FlightsByAircraftRequest("3c66e5", BEGIN, BEGIN + timedelta(days=30))
        assert request.endpoint == Endpoints.FLIGHTS_BY_AIRCRAFT
        assert request.params[0] == ("icao24", "3c66e5")

    @pytest.mark.parametrize("icao24", ["3c66e", "3c66e5f", ""])
    def test_by_aircraft_icao24_length(self, icao24):
        with pytest.raises(OpenSkyRequestError, match="exactly 6"):
            FlightsByAircraftRequest(icao24, BEGIN, BEGIN + timedelta(days=1))

    def test_by_aircraft_interval(self):
        with pytest.raises(OpenSkyRequestError):
            FlightsByAircraftRequest("3c66e5", BEGIN, BEGIN + timedelta(days=31))


class TestStartAndEndOfDay:
    """Test the day boundary helper."""

    def test_boundaries(self):
        begin, end = get_start_and_end_of_day(
            datetime(2023, 11, 14, 17, 45, 3, tzinfo=timezone.utc)
        )
        assert begin == BEGIN
        assert end == BEGIN + timedelta(days=1)

    def test_other_timezone_converted_to_utc(self):
        tz = timezone(timedelta(hours=2))
        begin, _ = get_start_and_end_of_day(datetime(2023, 11, 15, 1, 0, tzinfo=tz))
        assert begin == BEGIN

    def test_day_fits_airport_limit(self):
        begin, end = get_start_and_end_of_day(BEGIN)
        FlightsByAirportRequest("EDDF", begin, end, AirportRequestType.DEPARTURE)
