"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from verdict.assertions.rendering import stringify

_MISSING: Any = object()


class AssertionFailedError(AssertionError):
    """Raised by a check that did not pass.

    Two construction shapes:
        AssertionFailedError("free text")       -> message is used verbatim
        AssertionFailedError(expected, actual)  -> "Expected: ...\\nActual: ..."

    The rendered ``message`` is fixed at construction; ``str()`` of the error
    prefixes it with ``Test failed!``.
    """

    def __init__(self, expected_or_message: Any, actual: Any = _MISSING):
        if actual is _MISSING:
            message = stringify(expected_or_message)
        else:
            message = f"Expected: {stringify(expected_or_message)}\nActual: {stringify(actual)}"
        self._message = message
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    @classmethod
    def multiple_failures(
        cls, total_items: int, errors: Sequence[tuple[int, str, str]]
    ) -> AssertionFailedError:
        """Build the composite failure reported by ``all_pass``.

        Every line of a nested message is indented by the width of its index
        so continuation lines sit under the index column.
        """
        entries = []
        for index, element, error in errors:
            pad = " " * len(str(index))
            nested = "\n".join(pad + line for line in error.split("\n"))
            entries.append(f"{index}     {element}\n{pad}     {nested}")

        message = (
            f"Assert.all() failure: {len(errors)} of {total_items} items in the collection did not pass\n"
            + "\n".join(entries)
        )
        return cls(message)

    def __str__(self) -> str:
        return f"Test failed!\n{self._message}"


@dataclass
class CheckResult:
    """Result of evaluating a single declarative check.

    Attributes:
        name: Identifier for the check (e.g. "equal" or "in_range").
        passed: Whether the check passed.
        message: Raw failure message, empty when the check passed.
    """

    name: str
    passed: bool
    message: str = ""
