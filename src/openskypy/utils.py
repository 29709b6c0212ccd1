"""
Internal utility functions for openskypy.
"""

import inspect
from datetime import datetime, timedelta, timezone
from typing import (
    Any,
    Awaitable,
    Callable,
    Tuple,
    TypeVar,
)

R = TypeVar("R")


def get_start_and_end_of_day(dt: datetime) -> Tuple[datetime, datetime]:
    """
    UTC midnight of the day containing ``dt`` and the following midnight.

    Naive datetimes are taken as UTC. Handy for building day-long flight
    queries:

        >>> begin, end = get_start_and_end_of_day(datetime.now(timezone.utc))
        >>> request = FlightsByAircraftRequest("3c66e5", begin, end)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    begin = dt.astimezone(timezone.utc).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return begin, begin + timedelta(days=1)


def add_sync_version(
    async_fn: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    A decorator that adds a .sync attribute to an async function, allowing it
    to be called synchronously.

    The .sync version runs the async function in a new asyncio event loop.
    When the function takes a ``client`` parameter and the caller does not
    pass one, a client of the annotated class is created inside that loop
    and closed once the call returns.

    Example:
        >>> @add_sync_version
        ... async def my_async_func(x):
        ...     return x * 2

        >>> # Async usage
        >>> result = await my_async_func(5)

        >>> # Sync usage
        >>> result = my_async_func.sync(5)
    """
    # Import here to avoid circular imports
    from .sync import AsyncSyncBridge

    signature = inspect.signature(async_fn)
    client_param = signature.parameters.get("client")

    def sync_wrapper(*args: Any, **kwargs: Any) -> R:
        """Synchronous wrapper for the async function."""
        client_class = None
        if client_param is not None:
            passed = signature.bind_partial(*args, **kwargs).arguments
            # a positional client cannot be swapped out by keyword
            if "client" not in passed or "client" in kwargs:
                client_class = AsyncSyncBridge.extract_client_class(
                    client_param.annotation
                )
        return AsyncSyncBridge.run_async(
            async_fn, args=args, kwargs=kwargs, client_class=client_class
        )

    # Attach the synchronous wrapper to the original async function
    async_fn.sync = sync_wrapper  # type: ignore
    return async_fn
