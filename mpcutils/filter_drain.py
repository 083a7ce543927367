"""Remove and yield, lazily, the items of a list that match a predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class FilterDrain(Iterator[T], Generic[T]):
    """Iterator that removes matching items from a list as it yields them.

    Items for which ``predicate`` returns false stay in the list, in their
    original order. Items not yet inspected also stay in the list, so an
    iterator that is abandoned early, or whose predicate raises, leaves
    every item it has not yielded in place.
    """

    __slots__ = ("_items", "_predicate", "_idx")

    def __init__(self, items: list[T], predicate: Callable[[T], bool]) -> None:
        self._items = items
        self._predicate = predicate
        self._idx = 0

    def __iter__(self) -> FilterDrain[T]:
        return self

    def __next__(self) -> T:
        items = self._items
        while self._idx < len(items):
            item = items[self._idx]
            if self._predicate(item):
                del items[self._idx]
                return item
            self._idx += 1
        raise StopIteration

    def size_hint(self) -> tuple[int, int]:
        """Return the lower and upper bound on the number of items still to come."""
        return 0, max(len(self._items) - self._idx, 0)


def filter_drain(items: list[T], predicate: Callable[[T], bool]) -> FilterDrain[T]:
    """Return an iterator that removes from ``items`` and yields those matching ``predicate``."""
    return FilterDrain(items, predicate)