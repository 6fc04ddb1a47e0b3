"""Collection checks (membership, emptiness, per-element predicates)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Iterable, Sized

from verdict.assertions.base import AssertionFailedError
from verdict.assertions.rendering import stringify

logger = logging.getLogger(__name__)


def empty(array: Sized) -> None:
    if len(array) == 0:
        return
    raise AssertionFailedError("Expected array to be empty")


def does_not_contain(element: Any, array: Collection[Any]) -> None:
    if element not in array:
        return
    raise AssertionFailedError(f'Expected array to not contain element "{stringify(element)}"')


def contains(first: Any, second: Any) -> None:
    """Check membership in one of two calling conventions.

    contains(element, array)    -> ``element in array``
    contains(array, predicate)  -> at least one element satisfies ``predicate``

    The convention is picked by whether the second argument is callable.
    """
    if callable(second):
        if any(second(element) for element in first):
            return
        raise AssertionFailedError("Expected array to contain elements matching the predicate")

    if first in second:
        return
    raise AssertionFailedError(f'Expected array to contain element "{stringify(first)}"')


def all_pass(array: Iterable[Any], predicate: Callable[[Any], Any]) -> None:
    """Run *predicate* against every element and report all failures at once.

    Iteration never stops early. Each element whose predicate raises is
    recorded with its position, and a single composite failure is raised
    after the last element. The item total is the number of elements
    visited, so generators are counted correctly.
    """
    errors: list[tuple[int, str, str]] = []
    index = 0

    for element in array:
        try:
            predicate(element)
        except Exception as e:
            errors.append((index, stringify(element), stringify(e)))
        index += 1

    if errors:
        logger.debug(f"all_pass: {len(errors)} of {index} items failed")
        raise AssertionFailedError.multiple_failures(index, errors)
