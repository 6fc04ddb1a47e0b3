"""Type checks driven by guards, type names, or classes."""

from __future__ import annotations

from typing import Any, Callable

from verdict.assertions.base import AssertionFailedError

_PRIMITIVES = (bool, int, float, complex, str, bytes, type(None))


def type_tag(value: Any) -> str:
    """Return the runtime type name of *value* (``int``, ``str``, ``NoneType``...)."""
    return type(value).__name__


def is_type(value: Any, guard: Callable[[Any], bool] | None = None) -> None:
    """Check *value* against a caller-supplied type guard.

    A missing guard always fails.
    """
    matches = guard(value) if guard is not None else False
    if matches:
        return

    # TODO: name the guard and the value's type once guards carry a description
    raise AssertionFailedError("Type did not pass the type guard")


def is_checkable_type(value: Any, expected_type: str | type) -> None:
    """Check the type of *value*.

    A string *expected_type* is compared with the value's type name; a class
    is checked with ``isinstance``.
    """
    if isinstance(expected_type, str):
        actual_type = type_tag(value)
        if actual_type == expected_type:
            return
        raise AssertionFailedError(f"Expected type: {expected_type}\nActual type: {actual_type}")

    if isinstance(value, expected_type):
        return
    actual = type_tag(value) if isinstance(value, _PRIMITIVES) else type(value).__qualname__
    raise AssertionFailedError(
        f"Expected class type: {expected_type.__qualname__}\nActual class type: {actual}"
    )
