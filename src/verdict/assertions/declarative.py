"""Evaluate checks described as data (dicts or config models)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from verdict.assertions import iterables, scalar, text, typechecks
from verdict.assertions.base import AssertionFailedError, CheckResult


def _run(kind: str, value: Any) -> None:
    if kind == "equal":
        scalar.equal(value["expected"], value["actual"])
    elif kind == "not_equal":
        scalar.not_equal(value["expected"], value["actual"])
    elif kind == "is_true":
        scalar.is_true(value)
    elif kind == "is_false":
        scalar.is_false(value)
    elif kind == "is_none":
        scalar.is_none(value)
    elif kind == "is_not_none":
        scalar.is_not_none(value)
    elif kind == "contains":
        iterables.contains(value["element"], value["array"])
    elif kind == "does_not_contain":
        iterables.does_not_contain(value["element"], value["array"])
    elif kind == "empty":
        iterables.empty(value)
    elif kind == "starts_with":
        text.starts_with(value["string"], value["prefix"])
    elif kind == "ends_with":
        text.ends_with(value["string"], value["suffix"])
    elif kind == "in_range":
        text.in_range(value["number"], value["minimum"], value["maximum"])
    elif kind == "is_checkable_type":
        typechecks.is_checkable_type(value["value"], value["type"])
    elif kind == "has_property":
        scalar.has_property(value["object"], value["property"])
    elif kind == "property_equal":
        scalar.property_equal(value["object"], value["property"], value["expected"])
    else:
        raise ValueError(f"Unknown check type: '{kind}'")


def evaluate_check(
    check: dict[str, Any] | BaseModel,
    *,
    logger: logging.Logger | None = None,
) -> CheckResult:
    """Dispatch a check dict to the matching assertion and capture the outcome.

    Supported formats:
        {"equal": {"expected": 1, "actual": 1}}
        {"contains": {"element": "a", "array": ["a", "b"]}}
        {"in_range": {"number": 5, "minimum": 1, "maximum": 10}}
        {"is_checkable_type": {"value": "x", "type": "str"}}
        {"empty": []}

    Only ``AssertionFailedError`` turns into a failed result; anything else
    the assertion raises propagates. Raises ValueError for unknown check types.
    """
    if not check:
        raise ValueError("Empty check dict")

    if isinstance(check, BaseModel):
        check = check.model_dump(by_alias=True)

    if logger is None:
        logger = logging.getLogger(__name__)

    kind = next(iter(check))
    logger.info(f"Evaluating check: {kind}")

    try:
        _run(kind, check[kind])
    except AssertionFailedError as e:
        logger.info(f"Check {kind} failed: {e.message}")
        return CheckResult(name=kind, passed=False, message=e.message)

    logger.info(f"Check {kind} passed")
    return CheckResult(name=kind, passed=True)
