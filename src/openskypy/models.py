"""
Data models for OpenSky state vectors and flights.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, List, Tuple

from .enums import Category, PositionSource
from .timestamp import Timestamp
from .units import Altitude, Angle, Speed


@dataclass(frozen=True)
class StateVector:
    """Snapshot of one aircraft's (or vehicle's) state."""

    icao24: str
    callsign: str
    origin_country: str
    time_position: Timestamp
    last_contact: Timestamp
    longitude: Angle
    latitude: Angle
    baro_altitude: Altitude
    on_ground: bool
    velocity: Speed
    true_track: Angle
    vertical_rate: Speed
    sensors: Tuple[int, ...]
    geo_altitude: Altitude
    squawk: str
    spi: bool
    position_source: int  # raw value, may be outside PositionSource
    category: int  # raw value, may be outside Category

    @property
    def position_source_label(self) -> str:
        return PositionSource.label(self.position_source)

    @property
    def category_label(self) -> str:
        return Category.label(self.category)

    def to_record(self) -> Dict[str, Any]:
        """Flatten into a dictionary of plain Python values."""
        return {
            "icao24": self.icao24,
            "callsign": self.callsign,
            "origin_country": self.origin_country,
            "time_position": self.time_position.as_datetime,
            "last_contact": self.last_contact.as_datetime,
            "longitude": self.longitude.value,
            "latitude": self.latitude.value,
            "baro_altitude": self.baro_altitude.value,
            "on_ground": self.on_ground,
            "velocity": self.velocity.value,
            "true_track": self.true_track.value,
            "vertical_rate": self.vertical_rate.value,
            "sensors": list(self.sensors),
            "geo_altitude": self.geo_altitude.value,
            "squawk": self.squawk,
            "spi": self.spi,
            "position_source": self.position_source,
            "category": self.category,
        }


@dataclass(frozen=True)
class StateVectorResponse:
    """Server time plus the state vectors valid at that time, in wire order."""

    time: int
    states: Tuple[StateVector, ...] = field(default_factory=tuple)

    @property
    def server_time(self) -> Timestamp:
        return Timestamp.from_epoch(self.time)

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[StateVector]:
        return iter(self.states)

    def to_records(self) -> List[Dict[str, Any]]:
        return [state.to_record() for state in self.states]

    def to_pandas(self) -> Any:
        """Convert the state vectors to a pandas DataFrame, one row per aircraft."""
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for DataFrame conversion. Install with: pip install pandas"
            ) from None

        columns = [f.name for f in fields(StateVector)]
        df = pd.DataFrame(self.to_records(), columns=columns)
        if not df.empty:
            for col_name in ("time_position", "last_contact"):
                df[col_name] = pd.to_datetime(df[col_name], utc=True, errors="coerce")
        return df


@dataclass(frozen=True)
class Flight:
    """A flight as estimated by OpenSky from its state vector history."""

    icao24: str
    first_seen: Timestamp
    est_departure_airport: str
    last_seen: Timestamp
    est_arrival_airport: str
    callsign: str
    est_departure_airport_horiz_distance: int
    est_departure_airport_vert_distance: int
    est_arrival_airport_horiz_distance: int
    est_arrival_airport_vert_distance: int
    departure_airport_candidates_count: int
    arrival_airport_candidates_count: int

    def to_record(self) -> Dict[str, Any]:
        record = {f.name: getattr(self, f.name) for f in fields(self)}
        record["first_seen"] = self.first_seen.as_datetime
        record["last_seen"] = self.last_seen.as_datetime
        return record


FlightsResponse = List[Flight]
