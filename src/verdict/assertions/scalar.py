"""Scalar and structural checks (equality, None, object properties)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from verdict.assertions.base import AssertionFailedError
from verdict.assertions.rendering import stringify

logger = logging.getLogger(__name__)


def _read_property(obj: Any, prop: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(prop)
    return getattr(obj, prop, None)


def equal(expected: Any, actual: Any) -> None:
    """Check that *actual* equals *expected* under ``==``."""
    if expected == actual:
        return
    logger.debug(f"equal failed: expected={stringify(expected)} actual={stringify(actual)}")
    raise AssertionFailedError(expected, actual)


def not_equal(expected: Any, actual: Any) -> None:
    """Check that *actual* does not equal *expected*."""
    if not expected == actual:
        return
    logger.debug(f"not_equal failed: both values are {stringify(actual)}")
    raise AssertionFailedError("Expected values to be inequal")


def is_true(value: Any) -> None:
    equal(True, value)


def is_false(value: Any) -> None:
    equal(False, value)


def is_none(value: Any) -> None:
    equal(None, value)


def is_not_none(value: Any) -> None:
    if value is not None:
        return
    raise AssertionFailedError("Expected value to not be undefined")


def property_equal(obj: Any, prop: str, expected_value: Any) -> None:
    """Check that ``obj.prop`` (or ``obj[prop]`` for mappings) equals *expected_value*.

    A missing property reads as ``None``.
    """
    value = _read_property(obj, prop)
    if value == expected_value:
        return
    logger.debug(f"property_equal failed: {prop}={stringify(value)}")
    raise AssertionFailedError(
        f'Expected object property "{prop}" to be {stringify(expected_value)}, got {stringify(value)}'
    )


def has_property(obj: Any, prop: str) -> None:
    """Check that *obj* has *prop* as a key (mappings) or attribute, inherited included."""
    present = prop in obj if isinstance(obj, Mapping) else hasattr(obj, prop)
    if present:
        return
    raise AssertionFailedError(f'Expected object to have property "{prop}"')
