"""
Decoding of OpenSky JSON responses into domain objects.

State vectors arrive as positional JSON arrays rather than keyed objects, so
each record is mapped slot by slot. Decoded JSON values are first classified
into a ``JsonKind`` and every slot handles exactly the kinds it accepts:

    =====  ==================  ==============================================
    slot   field               handling
    =====  ==================  ==============================================
    0      icao24              string, "" otherwise
    1      callsign            string, "" otherwise
    2      origin_country      string, required
    3      time_position       number -> epoch seconds, null -> unset
    4      last_contact        number, required
    5      longitude           number, zero value otherwise
    6      latitude            number, zero value otherwise
    7      baro_altitude       when not null, taken from slot 6 (see below)
    8      on_ground           bool, required
    9      velocity            number, zero value otherwise
    10     true_track          number, zero value otherwise
    11     vertical_rate       number, zero value otherwise
    12     sensors             list of integers or null
    13     geo_altitude        number, zero value otherwise
    14     squawk              string or null
    15     spi                 bool, required
    16     position_source     number, required, not range checked
    17     category            number, required, not range checked
    =====  ==================  ==============================================

Barometric altitude reads slot 6 whenever slot 7 is not null. Existing
consumers depend on this value, so it is kept; ``BARO_ALTITUDE_SOURCE_SLOT``
names the slot that is read.

Nothing in this module logs. Every failure raises an ``OpenSkyDecodeError``
(``StateVectorDecodeError`` for record-level failures) and aborts the decode.
"""

import json
import math
from enum import Enum
from typing import Any, Dict, List, Tuple, Type, TypeVar, Union

from .exceptions import OpenSkyDecodeError, StateVectorDecodeError
from .models import Flight, StateVector, StateVectorResponse
from .timestamp import Timestamp
from .units import Altitude, Angle, Speed, _UnitValue

STATE_VECTOR_LENGTH = 18
BARO_ALTITUDE_SOURCE_SLOT = 6

SLOT_FIELDS = (
    "icao24",
    "callsign",
    "origin_country",
    "time_position",
    "last_contact",
    "longitude",
    "latitude",
    "baro_altitude",
    "on_ground",
    "velocity",
    "true_track",
    "vertical_rate",
    "sensors",
    "geo_altitude",
    "squawk",
    "spi",
    "position_source",
    "category",
)

RawPayload = Union[bytes, bytearray, str, Dict[str, Any], List[Any]]
W = TypeVar("W", bound=_UnitValue)


class JsonKind(Enum):
    """Shape of a value produced by ``json.loads``."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_kind(value: Any) -> JsonKind:
    """Classify a decoded JSON value. Booleans are never numbers."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise OpenSkyDecodeError(f"Not a JSON value: {type(value).__name__}")


def _is_finite(value: Any) -> bool:
    # ints never overflow here; math.isfinite would for huge ones
    return isinstance(value, int) or math.isfinite(value)


def _is_integral(value: Any) -> bool:
    if json_kind(value) is not JsonKind.NUMBER:
        return False
    return isinstance(value, int) or value.is_integer()


def _slot_error(slot: int, expected: str, value: Any) -> StateVectorDecodeError:
    return StateVectorDecodeError(
        f"expected {expected}, got {json_kind(value).value}",
        slot=slot,
        field=SLOT_FIELDS[slot],
    )


def _string_or_empty(record: List[Any], slot: int) -> str:
    value = record[slot]
    return value if json_kind(value) is JsonKind.STRING else ""


def _required_string(record: List[Any], slot: int) -> str:
    value = record[slot]
    if json_kind(value) is not JsonKind.STRING:
        raise _slot_error(slot, "string", value)
    return value


def _nullable_string(record: List[Any], slot: int) -> str:
    value = record[slot]
    kind = json_kind(value)
    if kind is JsonKind.NULL:
        return ""
    if kind is not JsonKind.STRING:
        raise _slot_error(slot, "string or null", value)
    return value


def _required_bool(record: List[Any], slot: int) -> bool:
    value = record[slot]
    if json_kind(value) is not JsonKind.BOOL:
        raise _slot_error(slot, "bool", value)
    return value


def _required_int(record: List[Any], slot: int) -> int:
    value = record[slot]
    if json_kind(value) is not JsonKind.NUMBER or not _is_finite(value):
        raise _slot_error(slot, "number", value)
    return int(value)


def _epoch_timestamp(record: List[Any], slot: int) -> Timestamp:
    value = record[slot]
    try:
        return Timestamp.from_epoch(int(value))
    except (OverflowError, ValueError) as e:
        raise StateVectorDecodeError(
            f"epoch seconds out of range: {value!r}",
            slot=slot,
            field=SLOT_FIELDS[slot],
        ) from e


def _required_timestamp(record: List[Any], slot: int) -> Timestamp:
    value = record[slot]
    if json_kind(value) is not JsonKind.NUMBER or not _is_finite(value):
        raise _slot_error(slot, "number", value)
    return _epoch_timestamp(record, slot)


def _nullable_timestamp(record: List[Any], slot: int) -> Timestamp:
    value = record[slot]
    kind = json_kind(value)
    if kind is JsonKind.NULL:
        return Timestamp()
    if kind is not JsonKind.NUMBER or not _is_finite(value):
        raise _slot_error(slot, "number or null", value)
    return _epoch_timestamp(record, slot)


def _unit_or_zero(record: List[Any], slot: int, unit: Type[W]) -> W:
    # Null and non-numbers leave the zero value, not the sentinel.
    value = record[slot]
    if json_kind(value) is JsonKind.NUMBER:
        try:
            return unit(float(value))
        except OverflowError:
            return unit()
    return unit()


def _baro_altitude(record: List[Any]) -> Altitude:
    if json_kind(record[7]) is JsonKind.NULL:
        return Altitude()
    return _unit_or_zero(record, BARO_ALTITUDE_SOURCE_SLOT, Altitude)


def _sensors(record: List[Any], slot: int) -> Tuple[int, ...]:
    value = record[slot]
    kind = json_kind(value)
    if kind is JsonKind.NULL:
        return ()
    if kind is not JsonKind.ARRAY:
        raise _slot_error(slot, "array of integers or null", value)
    serials = []
    for item in value:
        if not _is_integral(item):
            raise _slot_error(slot, "array of integers or null", item)
        serials.append(int(item))
    return tuple(serials)


def decode_state_vector(record: Any) -> StateVector:
    """
    Decode one positional state vector record.

    Args:
        record: A decoded JSON array of exactly 18 elements

    Returns:
        StateVector populated from the record

    Raises:
        StateVectorDecodeError: If the record is not an 18-element array or
            a required slot has the wrong type
    """
    if json_kind(record) is not JsonKind.ARRAY:
        raise StateVectorDecodeError(
            f"state vector must be an array, got {json_kind(record).value}"
        )
    if len(record) < STATE_VECTOR_LENGTH:
        # first slot that is missing
        raise StateVectorDecodeError(
            f"state vector must have {STATE_VECTOR_LENGTH} elements, got {len(record)}",
            slot=len(record),
            field=SLOT_FIELDS[len(record)],
        )
    if len(record) > STATE_VECTOR_LENGTH:
        raise StateVectorDecodeError(
            f"state vector must have {STATE_VECTOR_LENGTH} elements, got {len(record)}"
        )

    return StateVector(
        icao24=_string_or_empty(record, 0),
        callsign=_string_or_empty(record, 1),
        origin_country=_required_string(record, 2),
        time_position=_nullable_timestamp(record, 3),
        last_contact=_required_timestamp(record, 4),
        longitude=_unit_or_zero(record, 5, Angle),
        latitude=_unit_or_zero(record, 6, Angle),
        baro_altitude=_baro_altitude(record),
        on_ground=_required_bool(record, 8),
        velocity=_unit_or_zero(record, 9, Speed),
        true_track=_unit_or_zero(record, 10, Angle),
        vertical_rate=_unit_or_zero(record, 11, Speed),
        sensors=_sensors(record, 12),
        geo_altitude=_unit_or_zero(record, 13, Altitude),
        squawk=_nullable_string(record, 14),
        spi=_required_bool(record, 15),
        position_source=_required_int(record, 16),
        category=_required_int(record, 17),
    )


def load_json(payload: RawPayload) -> Any:
    """Parse a raw response body; already-parsed values are returned as-is."""
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            return json.loads(payload)
        except ValueError as e:
            raise OpenSkyDecodeError(f"Invalid JSON response: {e}") from e
    return payload


def decode_state_vector_response(payload: RawPayload) -> StateVectorResponse:
    """
    Decode the response of the ``states/all`` and ``states/own`` endpoints.

    Args:
        payload: Raw response body, or the already-parsed JSON object

    Returns:
        StateVectorResponse with records in wire order

    Raises:
        OpenSkyDecodeError: On malformed JSON, a missing or non-integer
            ``time``, a non-array ``states``, or any record failing to decode
    """
    data = load_json(payload)
    if json_kind(data) is not JsonKind.OBJECT:
        raise OpenSkyDecodeError(
            f"State vector response must be an object, got {json_kind(data).value}"
        )

    server_time = data.get("time")
    if not _is_integral(server_time):
        raise OpenSkyDecodeError(f"Response 'time' must be an integer, got {server_time!r}")
    try:
        Timestamp.from_epoch(int(server_time))
    except ValueError as e:
        raise OpenSkyDecodeError(
            f"Response 'time' is out of range, got {server_time!r}"
        ) from e

    raw_states = data.get("states")
    if json_kind(raw_states) is JsonKind.NULL:
        return StateVectorResponse(time=int(server_time), states=())
    if json_kind(raw_states) is not JsonKind.ARRAY:
        raise OpenSkyDecodeError(
            f"Response 'states' must be an array, got {json_kind(raw_states).value}"
        )

    states = []
    for index, record in enumerate(raw_states):
        try:
            states.append(decode_state_vector(record))
        except StateVectorDecodeError as e:
            raise StateVectorDecodeError(
                e.reason, slot=e.slot, field=e.field, record_index=index
            ) from e
    return StateVectorResponse(time=int(server_time), states=tuple(states))


def _flight_string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    kind = json_kind(value)
    if kind is JsonKind.NULL:
        return ""
    if kind is not JsonKind.STRING:
        raise OpenSkyDecodeError(f"Flight '{key}' must be a string, got {kind.value}")
    return value


def _flight_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    kind = json_kind(value)
    if kind is JsonKind.NULL:
        return 0
    if kind is not JsonKind.NUMBER or not _is_finite(value):
        raise OpenSkyDecodeError(f"Flight '{key}' must be a number, got {kind.value}")
    return int(value)


def decode_flight(data: Any) -> Flight:
    """Decode one keyed flight object; missing or null keys get zero values."""
    if json_kind(data) is not JsonKind.OBJECT:
        raise OpenSkyDecodeError(f"Flight must be an object, got {json_kind(data).value}")
    return Flight(
        icao24=_flight_string(data, "icao24"),
        first_seen=Timestamp.from_json(data.get("firstSeen")),
        est_departure_airport=_flight_string(data, "estDepartureAirport"),
        last_seen=Timestamp.from_json(data.get("lastSeen")),
        est_arrival_airport=_flight_string(data, "estArrivalAirport"),
        callsign=_flight_string(data, "callsign"),
        est_departure_airport_horiz_distance=_flight_int(
            data, "estDepartureAirportHorizDistance"
        ),
        est_departure_airport_vert_distance=_flight_int(
            data, "estDepartureAirportVertDistance"
        ),
        est_arrival_airport_horiz_distance=_flight_int(
            data, "estArrivalAirportHorizDistance"
        ),
        est_arrival_airport_vert_distance=_flight_int(
            data, "estArrivalAirportVertDistance"
        ),
        departure_airport_candidates_count=_flight_int(
            data, "departureAirportCandidatesCount"
        ),
        arrival_airport_candidates_count=_flight_int(
            data, "arrivalAirportCandidatesCount"
        ),
    )


def decode_flights(payload: RawPayload) -> List[Flight]:
    """Decode the array returned by the ``flights/*`` endpoints, keeping order."""
    data = load_json(payload)
    kind = json_kind(data)
    if kind is JsonKind.NULL:
        return []
    if kind is not JsonKind.ARRAY:
        raise OpenSkyDecodeError(f"Flights response must be an array, got {kind.value}")
    return [decode_flight(item) for item in data]
