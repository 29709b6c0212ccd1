#!/usr/bin/env python3
"""
Print today's flights of one aircraft.

Usage:
    python scripts/flights_by_aircraft.py 3c66e5
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

# Add src to path for imports
sys.path.insert(0, "src")

from openskypy import OpenSkyError, get_flights_by_aircraft_sync, get_start_and_end_of_day

logger = logging.getLogger("flights_by_aircraft")


def _clock(ts) -> str:
    return f"{ts.as_datetime:%H:%M}" if ts.is_set else "--:--"


def main() -> int:
    parser = argparse.ArgumentParser(description="Print today's flights of one aircraft.")
    parser.add_argument("icao24", help="6 character transponder address")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    begin, end = get_start_and_end_of_day(datetime.now(timezone.utc))
    try:
        flights = get_flights_by_aircraft_sync(args.icao24, begin, end)
    except OpenSkyError as e:
        logger.error(f"Request failed: {e}")
        return 1

    for flight in flights:
        print(
            f"{flight.callsign.strip():8} {flight.est_departure_airport or '----'} "
            f"{_clock(flight.first_seen)} -> "
            f"{flight.est_arrival_airport or '----'} {_clock(flight.last_seen)}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
