"""Small helpers over byte strings and sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def xor(a: bytes | bytearray | Sequence[int], b: bytes | bytearray | Sequence[int]) -> bytes:
    """Return the byte-wise XOR of two byte strings of equal length.

    Raises ValueError if the lengths differ.
    """
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def choose(items: Sequence[Sequence[T]], choice: Sequence[bool]) -> list[T]:
    """From each pair in ``items`` take the element selected by the matching ``choice``.

    A false choice selects the first element, a true one the second.
    Raises ValueError if the sequences differ in length.
    """
    if len(items) != len(choice):
        raise ValueError("arrays are different length")
    return [pair[1 if bit else 0] for pair, bit in zip(items, choice)]


def pick(items: Sequence[T], idx: Iterable[int]) -> list[T]:
    """Return the items at the given positions, in the order given.

    Raises IndexError if a position is negative or out of bounds.
    """
    result: list[T] = []
    for i in idx:
        if i < 0 or i >= len(items):
            raise IndexError(f"index {i} out of bounds for length {len(items)}")
        result.append(items[i])
    return result


def contains_dups(items: Iterable[Hashable]) -> bool:
    """Return True if any item occurs more than once."""
    seen: set[Hashable] = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)
    return False


def contains_dups_by(items: Iterable[Any], key: Callable[[Any], Hashable]) -> bool:
    """Return True if ``key`` gives the same value for two items."""
    return contains_dups(key(item) for item in items)