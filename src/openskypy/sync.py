"""
Synchronous wrapper functions and utilities for openskypy.

This module provides synchronous versions of the async convenience functions
for users who prefer blocking calls or cannot use async/await syntax. Under
the hood, these functions use asyncio to run the async code.

Usage:
    # Instead of this async code:
    async with OpenSkyClient() as client:
        response = await client.request_state_vectors()

    # Use this sync code:
    from openskypy.sync import get_state_vectors_sync
    response = get_state_vectors_sync()
"""

import asyncio
import inspect
from datetime import datetime
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    List,
    Optional,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

if TYPE_CHECKING:
    from .client import OpenSkyClient
    from .models import Flight, StateVectorResponse
    from .query import AirportRequestType, BoundingBox

R = TypeVar("R")


class AsyncSyncBridge:
    """Runs async functions to completion from synchronous code."""

    @staticmethod
    def run_async(
        async_fn: Callable[..., Awaitable[R]],
        args: tuple = (),
        kwargs: Optional[dict] = None,
        client_class: Optional[type] = None,
    ) -> R:
        """Run an async function synchronously.

        Args:
            async_fn: Async function to run
            args: Positional arguments for the function
            kwargs: Keyword arguments for the function
            client_class: Client class used to create a temporary client when
                no ``client`` keyword is given. The client is created inside
                the new event loop, preferring ``client_class.from_env()``,
                and closed afterwards.

        Returns:
            Result of running the async function

        Raises:
            RuntimeError: If called from within an existing event loop
        """
        if kwargs is None:
            kwargs = {}

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "Cannot use sync version from within an existing asyncio event loop. "
                "Use the async version instead."
            )

        async def _call() -> R:
            if client_class is None or kwargs.get("client") is not None:
                return await async_fn(*args, **kwargs)

            factory = getattr(client_class, "from_env", client_class)
            temp_client = factory()
            try:
                return await async_fn(*args, **{**kwargs, "client": temp_client})
            finally:
                await temp_client.close()

        return asyncio.run(_call())

    @staticmethod
    def extract_client_class(annotation: Any) -> Optional[type]:
        """Extract the client class from a ``client`` parameter annotation.

        Handles ``Optional[...]``, ``Union[...]`` and plain class annotations;
        anything else (including a missing annotation) gives None.
        """
        if get_origin(annotation) is Union:
            for arg in get_args(annotation):
                if arg is not type(None) and isinstance(arg, type):
                    return arg
            return None
        if isinstance(annotation, type) and annotation is not inspect.Parameter.empty:
            return annotation
        return None


# Sync versions of convenience functions


def get_state_vectors_sync(
    bounding_box: Optional["BoundingBox"] = None,
    icao24: Optional[List[str]] = None,
    time: Optional[datetime] = None,
    include_category: bool = False,
    client: Optional["OpenSkyClient"] = None,
) -> "StateVectorResponse":
    """Synchronous version of get_state_vectors.

    Examples:
        >>> response = get_state_vectors_sync(include_category=True)
        >>> df = response.to_pandas()
    """
    from .convenience import get_state_vectors

    return AsyncSyncBridge.run_async(
        get_state_vectors,
        kwargs={
            "bounding_box": bounding_box,
            "icao24": icao24,
            "time": time,
            "include_category": include_category,
            "client": client,
        },
    )


def get_own_state_vectors_sync(
    serials: Optional[List[int]] = None,
    icao24: Optional[List[str]] = None,
    time: Optional[datetime] = None,
    client: Optional["OpenSkyClient"] = None,
) -> "StateVectorResponse":
    """Synchronous version of get_own_state_vectors.

    Without an explicit client, credentials are read from the environment.
    """
    from .convenience import get_own_state_vectors

    return AsyncSyncBridge.run_async(
        get_own_state_vectors,
        kwargs={"serials": serials, "icao24": icao24, "time": time, "client": client},
    )


def get_flights_by_aircraft_sync(
    icao24: str,
    begin: datetime,
    end: datetime,
    client: Optional["OpenSkyClient"] = None,
) -> List["Flight"]:
    """Synchronous version of get_flights_by_aircraft."""
    from .convenience import get_flights_by_aircraft

    return AsyncSyncBridge.run_async(
        get_flights_by_aircraft, args=(icao24, begin, end), kwargs={"client": client}
    )


def get_flights_by_airport_sync(
    airport: str,
    begin: datetime,
    end: datetime,
    request_type: "AirportRequestType",
    client: Optional["OpenSkyClient"] = None,
) -> List["Flight"]:
    """Synchronous version of get_flights_by_airport."""
    from .convenience import get_flights_by_airport

    return AsyncSyncBridge.run_async(
        get_flights_by_airport,
        args=(airport, begin, end, request_type),
        kwargs={"client": client},
    )


def get_flights_within_interval_sync(
    begin: datetime,
    end: datetime,
    client: Optional["OpenSkyClient"] = None,
) -> List["Flight"]:
    """Synchronous version of get_flights_within_interval."""
    from .convenience import get_flights_within_interval

    return AsyncSyncBridge.run_async(
        get_flights_within_interval, args=(begin, end), kwargs={"client": client}
    )
