#!/usr/bin/env python3
"""
Print current state vectors, optionally limited to a bounding box.

Usage:
    python scripts/state_vectors.py
    python scripts/state_vectors.py --bbox 49.967 50.252 19.505 20.372
"""

import argparse
import logging
import sys

# Add src to path for imports
sys.path.insert(0, "src")

from openskypy import BoundingBox, OpenSkyError, get_state_vectors_sync

logger = logging.getLogger("state_vectors")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--bbox",
        nargs=4,
        type=float,
        metavar=("LAT_MIN", "LAT_MAX", "LON_MIN", "LON_MAX"),
    )
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        response = get_state_vectors_sync(
            bounding_box=BoundingBox(*args.bbox) if args.bbox else None,
            include_category=True,
        )
    except OpenSkyError as e:
        logger.error(f"Request failed: {e}")
        return 1

    logger.info(f"{len(response)} vectors received at {response.server_time}")
    for state in response.states[: args.limit]:
        altitude = (
            f"{state.geo_altitude.to_feet():.0f} ft" if state.geo_altitude.value else "n/a"
        )
        print(
            f"{state.icao24:6} {state.callsign.strip():8} {state.origin_country:20} "
            f"{altitude:>10} {state.position_source_label:8} {state.category_label}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
