"""Turning a tuple of optional values into an optional tuple."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def transpose(options: Iterable[Any]) -> tuple[Any, ...] | None:
    """Return the values as a tuple, or None if any of them is None."""
    values = tuple(options)
    if any(value is None for value in values):
        return None
    return values