"""
Record exceptions instead of raising them.

These helpers keep failing calls inside the "act" step of an
arrange-act-assert test::

    error = record_error(parse, "not a number")
    assert isinstance(error, ValueError)
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any


def record_error(invocation: Callable[..., Any], *args: Any, **kwargs: Any) -> BaseException | None:
    """
    Call ``invocation`` and return what it raised.

    Returns:
        The raised exception, or None if the call returned normally
    """
    try:
        invocation(*args, **kwargs)
    except Exception as e:
        return e
    return None


async def record_error_async(awaitable: Awaitable[Any]) -> BaseException | None:
    """
    Await ``awaitable`` and return what it raised.

    Returns:
        The raised exception, or None if it completed normally

    Raises:
        TypeError: If ``awaitable`` cannot be awaited
    """
    if not inspect.isawaitable(awaitable):
        raise TypeError("Value passed to record_error_async must be awaitable.")

    try:
        await awaitable
    except Exception as e:
        return e
    return None
