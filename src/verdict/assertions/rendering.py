"""Render arbitrary values as display text for failure messages."""

from __future__ import annotations

from typing import Any


def stringify(value: Any) -> str:
    """Return display text for *value*; never raises.

    Classes render as their qualified name so matchers like ``ValueError``
    read naturally inside messages.
    """
    if isinstance(value, type):
        return value.__qualname__
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
