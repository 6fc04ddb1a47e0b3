"""Tests for AssertionFailedError construction and rendering."""

import pytest

from verdict.assertions.base import AssertionFailedError, CheckResult
from verdict.assertions.rendering import stringify


# --- construction ---


def test_free_text_message_is_kept_verbatim():
    err = AssertionFailedError("something went wrong")
    assert err.message == "something went wrong"


def test_expected_actual_template():
    err = AssertionFailedError(1, 2)
    assert err.message == "Expected: 1\nActual: 2"


def test_expected_actual_template_with_none_actual():
    err = AssertionFailedError("x", None)
    assert err.message == "Expected: x\nActual: None"


def test_str_prefixes_test_failed():
    err = AssertionFailedError("nope")
    assert str(err) == "Test failed!\nnope"


def test_message_is_read_only():
    err = AssertionFailedError("fixed")
    with pytest.raises(AttributeError):
        err.message = "changed"
    assert err.message == "fixed"


def test_is_an_assertion_error():
    with pytest.raises(AssertionError):
        raise AssertionFailedError("boom")


# --- multiple_failures ---


def test_multiple_failures_header_and_layout():
    err = AssertionFailedError.multiple_failures(13, [(0, "1", "boom"), (12, "x", "line1\nline2")])
    assert err.message == (
        "Assert.all() failure: 2 of 13 items in the collection did not pass\n"
        "0     1\n"
        "       boom\n"
        "12     x\n"
        "         line1\n"
        "  line2"
    )


def test_multiple_failures_returns_instance_without_raising():
    err = AssertionFailedError.multiple_failures(1, [(0, "a", "b")])
    assert isinstance(err, AssertionFailedError)
    assert err.message.startswith("Assert.all() failure: 1 of 1 items")


# --- stringify ---


class _Unprintable:
    def __str__(self):
        raise RuntimeError("no text for you")


def test_stringify_primitives():
    assert stringify(5) == "5"
    assert stringify(None) == "None"
    assert stringify([1, "a"]) == "[1, 'a']"


def test_stringify_class_uses_name():
    assert stringify(ValueError) == "ValueError"


def test_stringify_never_raises():
    text = stringify(_Unprintable())
    assert "_Unprintable object at" in text


def test_check_result_defaults():
    result = CheckResult(name="equal", passed=True)
    assert result.message == ""
