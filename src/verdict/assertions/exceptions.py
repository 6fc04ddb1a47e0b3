"""Checks on whether a callable (or awaitable) raises."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from verdict.assertions.base import AssertionFailedError
from verdict.assertions.rendering import stringify

logger = logging.getLogger(__name__)


def _matches(raised: BaseException, exception: str | type[BaseException] | None) -> bool:
    if exception is None:
        return True
    if isinstance(exception, str):
        return stringify(raised) == exception
    return isinstance(raised, exception)


def _passes_through(raised: BaseException, exception: str | type[BaseException] | None) -> bool:
    """Interrupts, exits and cancellation escape unless a class matcher asked for them."""
    if isinstance(raised, Exception):
        return False
    return not (isinstance(exception, type) and isinstance(raised, exception))


def does_not_throw(method: Callable[[], Any]) -> None:
    try:
        method()
    except Exception as e:
        logger.debug(f"does_not_throw: method raised {type(e).__name__}")
        raise AssertionFailedError(f"Expected method not to throw, threw:\n{stringify(e)}") from e


def throws(method: Callable[[], Any], exception: str | type[BaseException] | None = None) -> None:
    """Check that calling *method* raises.

    *exception* narrows what counts: a string must equal the raised error's
    text, a class must be a base of the raised error. With no matcher any
    exception passes. ``SystemExit``, ``KeyboardInterrupt`` and other
    non-``Exception`` errors only count when a matching class is given;
    otherwise they propagate.
    """
    thrown: BaseException | None = None

    try:
        method()
    except BaseException as e:
        if _passes_through(e, exception):
            raise
        thrown = e
        if _matches(e, exception):
            return

    message = "Expected method to throw"
    if exception is not None:
        message += f' "{stringify(exception)}", threw "{stringify(thrown)}"'
    raise AssertionFailedError(message)


async def does_not_throw_async(method: Callable[[], Awaitable[Any]]) -> None:
    try:
        await method()
    except Exception as e:
        logger.debug(f"does_not_throw_async: awaitable raised {type(e).__name__}")
        raise AssertionFailedError(f"Expected async method not to throw, threw:\n{stringify(e)}") from e


async def throws_async(
    method: Callable[[], Awaitable[Any]], exception: str | type[BaseException] | None = None
) -> None:
    """Await *method()* and check that it raises.

    Matching follows ``throws``. The failure message lays the matcher and
    the raised error out as Expected/Actual lines, unlike ``throws``.
    """
    thrown: BaseException | None = None

    try:
        await method()
    except BaseException as e:
        if _passes_through(e, exception):
            raise
        thrown = e
        if _matches(e, exception):
            return

    message = "Expected async method to throw"
    if exception is not None:
        message += f"\nExpected: {stringify(exception)}\nActual: {stringify(thrown)}"
    raise AssertionFailedError(message)
