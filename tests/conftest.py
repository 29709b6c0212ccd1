"""
Shared fixtures for openskypy tests.
"""

import json

import pytest


def _base_record():
    record = [
        "3c6444",  # 0 icao24
        "DLH9LF  ",  # 1 callsign
        "Germany",  # 2 origin_country
        1700000000,  # 3 time_position
        1700000002,  # 4 last_contact
        8.5622,  # 5 longitude
        50.0379,  # 6 latitude
        1234.5,  # 7 baro_altitude
        False,  # 8 on_ground
        180.2,  # 9 velocity
        92.5,  # 10 true_track
        -3.25,  # 11 vertical_rate
        None,  # 12 sensors
        1300.0,  # 13 geo_altitude
        "1000",  # 14 squawk
        False,  # 15 spi
        0,  # 16 position_source
        6,  # 17 category
    ]
    return record


@pytest.fixture
def make_record():
    """Factory for 18-slot records with some slots replaced by index."""

    def _make(overrides=None):
        record = _base_record()
        for slot, value in (overrides or {}).items():
            record[slot] = value
        return record

    return _make


@pytest.fixture
def record(make_record):
    """A fully populated state vector record."""
    return make_record()


@pytest.fixture
def sparse_record():
    """A record as sent for an aircraft without position or callsign."""
    return [
        "4b1814",
        None,
        "Switzerland",
        None,
        1700000100,
        None,
        None,
        None,
        True,
        None,
        None,
        None,
        None,
        None,
        None,
        False,
        0,
        0,
    ]


@pytest.fixture
def state_response_body(record, sparse_record):
    """Raw bytes of a states/all response with two records."""
    return json.dumps({"time": 1700000000, "states": [record, sparse_record]}).encode()


@pytest.fixture
def flight_data():
    """A single flight object as returned by the flights endpoints."""
    return {
        "icao24": "3c66e5",
        "firstSeen": 1699990000,
        "estDepartureAirport": "EDDF",
        "lastSeen": 1699999000,
        "estArrivalAirport": "LEMD",
        "callsign": "DLH1114 ",
        "estDepartureAirportHorizDistance": 1234,
        "estDepartureAirportVertDistance": 56,
        "estArrivalAirportHorizDistance": 789,
        "estArrivalAirportVertDistance": 10,
        "departureAirportCandidatesCount": 1,
        "arrivalAirportCandidatesCount": 2,
    }
