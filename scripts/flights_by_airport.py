#!/usr/bin/env python3
"""
Print today's arrivals and departures at an airport.

Usage:
    python scripts/flights_by_airport.py EDDF
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

# Add src to path for imports
sys.path.insert(0, "src")

from openskypy import (
    AirportRequestType,
    OpenSkyError,
    get_flights_by_airport_sync,
    get_start_and_end_of_day,
)

logger = logging.getLogger("flights_by_airport")


def main() -> int:
    parser = argparse.ArgumentParser(description="Print today's flights at an airport.")
    parser.add_argument("airport", help="4 character ICAO airport code")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    begin, end = get_start_and_end_of_day(datetime.now(timezone.utc))
    for request_type in (AirportRequestType.ARRIVAL, AirportRequestType.DEPARTURE):
        try:
            flights = get_flights_by_airport_sync(args.airport, begin, end, request_type)
        except OpenSkyError as e:
            logger.error(f"{request_type.value} request failed: {e}")
            continue

        print(f"{request_type.value.title()}s ({len(flights)})")
        for flight in flights:
            print(
                f"  {flight.icao24} {flight.callsign.strip():8} "
                f"{flight.est_departure_airport or '----'} -> "
                f"{flight.est_arrival_airport or '----'}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
