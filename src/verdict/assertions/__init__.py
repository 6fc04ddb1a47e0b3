"""Assertion checks that pass silently or raise ``AssertionFailedError``."""

from verdict.assertions.base import AssertionFailedError, CheckResult
from verdict.assertions.declarative import evaluate_check
from verdict.assertions.exceptions import (
    does_not_throw,
    does_not_throw_async,
    throws,
    throws_async,
)
from verdict.assertions.iterables import all_pass, contains, does_not_contain, empty
from verdict.assertions.rendering import stringify
from verdict.assertions.scalar import (
    equal,
    has_property,
    is_false,
    is_none,
    is_not_none,
    is_true,
    not_equal,
    property_equal,
)
from verdict.assertions.text import RangeLike, ends_with, in_range, starts_with
from verdict.assertions.typechecks import is_checkable_type, is_type

__all__ = [
    "AssertionFailedError",
    "CheckResult",
    "RangeLike",
    "all_pass",
    "contains",
    "does_not_contain",
    "does_not_throw",
    "does_not_throw_async",
    "evaluate_check",
    "empty",
    "ends_with",
    "equal",
    "has_property",
    "in_range",
    "is_checkable_type",
    "is_false",
    "is_none",
    "is_not_none",
    "is_true",
    "is_type",
    "not_equal",
    "property_equal",
    "starts_with",
    "stringify",
    "throws",
    "throws_async",
]
