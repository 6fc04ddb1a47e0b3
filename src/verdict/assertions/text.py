"""String prefix/suffix checks and numeric range checks."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from verdict.assertions.base import AssertionFailedError

logger = logging.getLogger(__name__)


@runtime_checkable
class RangeLike(Protocol):
    """Anything that can tell whether a number lies within it.

    ``str()`` of the range is used as the expected side of a failure.
    """

    def is_number_within(self, number: float) -> bool: ...


def starts_with(string: str, substring: str) -> None:
    if string.startswith(substring):
        return
    raise AssertionFailedError(f'Expected string "{string}" to start with substring "{substring}"')


def ends_with(string: str, substring: str) -> None:
    if string.endswith(substring):
        return
    raise AssertionFailedError(f'Expected string "{string}" to end with substring "{substring}"')


def in_range(number: float, minimum: float | RangeLike, maximum: float | None = None) -> None:
    """Check that *number* lies within a range.

    in_range(number, minimum, maximum)  -> inclusive bounds
    in_range(number, range)             -> ``range.is_number_within(number)``
    """
    if not isinstance(minimum, RangeLike):
        if maximum is None:
            raise TypeError("in_range() with a numeric minimum requires a maximum")
        if minimum <= number <= maximum:
            return
        logger.debug(f"in_range failed: {number} outside {minimum}-{maximum}")
        raise AssertionFailedError(f"{minimum}-{maximum}", number)

    if minimum.is_number_within(number):
        return
    logger.debug(f"in_range failed: {number} outside {minimum}")
    raise AssertionFailedError(minimum, number)
