"""
Exceptions for OpenSky operations.
"""

from typing import Optional


class OpenSkyError(Exception):
    """Base exception for OpenSky-related errors."""

    pass


class OpenSkyConnectionError(OpenSkyError):
    """Error connecting to the OpenSky API."""

    pass


class OpenSkyAuthenticationError(OpenSkyConnectionError):
    """Request rejected because it needs (valid) username and password."""

    pass


class OpenSkyQueryError(OpenSkyError):
    """Error in an OpenSky query or its response."""

    pass


class OpenSkyDecodeError(OpenSkyQueryError):
    """Response body could not be decoded into domain objects."""

    pass


class StateVectorDecodeError(OpenSkyDecodeError):
    """A positional state vector record violated its slot layout.

    Attributes:
        reason: Description of the violation without location prefix
        slot: Index into the 18-element record that failed, if known
        field: Name of the field mapped to that slot, if known
        record_index: Position of the record within the response, if known
    """

    def __init__(
        self,
        reason: str,
        slot: Optional[int] = None,
        field: Optional[str] = None,
        record_index: Optional[int] = None,
    ):
        self.reason = reason
        self.slot = slot
        self.field = field
        self.record_index = record_index

        message = reason
        if slot is not None:
            message = f"slot {slot} ({field}): {message}"
        if record_index is not None:
            message = f"record {record_index}, {message}"
        super().__init__(message)


class OpenSkyRequestError(OpenSkyError, ValueError):
    """Invalid request parameters (interval limits, ICAO code lengths)."""

    pass
