"""Sets of integers stored as sorted, disjoint, non-adjacent half-open ranges."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Union

RangeLike = Union[range, "RangeSet"]


def _is_empty(r: range) -> bool:
    return r.start >= r.stop


def _check_range(r: object) -> range:
    if not isinstance(r, range):
        raise TypeError(f"expected a range, got {type(r).__name__}")
    if r.step != 1:
        raise ValueError(f"ranges must have a step of 1, got {r!r}")
    return r


def range_is_disjoint(a: range, b: RangeLike) -> bool:
    """Return True if range ``a`` shares no value with ``b`` (a range or a RangeSet)."""
    if isinstance(b, RangeSet):
        return all(range_is_disjoint(a, r) for r in b._ranges)
    return a.start >= b.stop or a.stop <= b.start


def range_is_subset(a: range, b: RangeLike) -> bool:
    """Return True if range ``a`` is a subset of ``b`` (a range or a RangeSet)."""
    if isinstance(b, RangeSet):
        if _is_empty(a):
            return True
        if not b._ranges:
            return False
        for r in b._ranges:
            if a.start >= r.stop:
                continue
            return range_is_subset(a, r)
        return False
    return a.start >= b.start and a.stop <= b.stop


def to_range_set(value: RangeLike) -> RangeSet:
    """Return a new RangeSet holding the values of a range or RangeSet."""
    if isinstance(value, (range, RangeSet)):
        return RangeSet(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a RangeSet")


class RangeSet:
    """A set of integers represented by ranges.

    The ranges are always sorted, non-adjacent, non-intersecting and non-empty.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: RangeLike | Iterable[range] = ()) -> None:
        self._ranges: list[range] = []
        if isinstance(ranges, RangeSet):
            self._ranges = list(ranges._ranges)
            return
        if isinstance(ranges, range):
            ranges = (ranges,)
        for r in ranges:
            self._insert(_check_range(r))

    @classmethod
    def _from_normalized(cls, ranges: Iterable[range]) -> RangeSet:
        result = cls()
        result._ranges = list(ranges)
        return result

    def _insert(self, other: range) -> None:
        if _is_empty(other):
            return
        start, stop = other.start, other.stop
        before: list[range] = []
        after: list[range] = []
        for r in self._ranges:
            if r.stop < start:
                before.append(r)
            elif r.start > stop:
                after.append(r)
            else:
                start = min(start, r.start)
                stop = max(stop, r.stop)
        self._ranges = [*before, range(start, stop), *after]

    @property
    def ranges(self) -> list[range]:
        """The ranges of the set, as a new list."""
        return list(self._ranges)

    def __iter__(self) -> Iterator[int]:
        return chain.from_iterable(self._ranges)

    def iter_ranges(self) -> Iterator[range]:
        """Iterate over the ranges of the set."""
        return iter(tuple(self._ranges))

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        i = bisect_right(self._ranges, value, key=lambda r: r.start) - 1
        return i >= 0 and value < self._ranges[i].stop

    def __len__(self) -> int:
        return sum(len(r) for r in self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def len_ranges(self) -> int:
        """Return the number of ranges in the set."""
        return len(self._ranges)

    def min(self) -> int | None:
        """Return the smallest value, or None if the set is empty."""
        return self._ranges[0].start if self._ranges else None

    def max(self) -> int | None:
        """Return the largest value, or None if the set is empty."""
        return self._ranges[-1].stop - 1 if self._ranges else None

    def end(self) -> int | None:
        """Return the exclusive end of the last range, or None if the set is empty."""
        return self._ranges[-1].stop if self._ranges else None

    def clear(self) -> None:
        """Remove every range from the set."""
        self._ranges.clear()

    def split_off(self, at: int) -> RangeSet:
        """Split the set at ``at``.

        Returns the values ``>= at`` as a new set and keeps the values ``< at``.
        Raises ValueError if ``at`` is not in the set.
        """
        idx = next((i for i, r in enumerate(self._ranges) if at in r), None)
        if idx is None:
            raise ValueError(f"{at!r} is not in the set")
        tail = self._ranges[idx:]
        self._ranges = self._ranges[:idx]
        first = tail[0]
        if at > first.start:
            self._ranges.append(range(first.start, at))
            tail[0] = range(at, first.stop)
        return RangeSet._from_normalized(tail)

    def shift_left(self, offset: int) -> None:
        """Shift every range to the left by ``offset``."""
        self._ranges = [range(r.start - offset, r.stop - offset) for r in self._ranges]

    def shift_right(self, offset: int) -> None:
        """Shift every range to the right by ``offset``."""
        self._ranges = [range(r.start + offset, r.stop + offset) for r in self._ranges]

    def to_range(self) -> range:
        """Return the single range of the set; raise ValueError if there is not exactly one."""
        if len(self._ranges) != 1:
            raise ValueError(
                f"set holds {len(self._ranges)} ranges, expected exactly one"
            )
        return self._ranges[0]

    def is_subset(self, other: RangeLike) -> bool:
        """Return True if every value of the set is in ``other``."""
        if isinstance(other, range):
            if not self._ranges:
                return True
            return self._ranges[0].start >= other.start and self._ranges[-1].stop <= other.stop
        if not self._ranges:
            return True
        if not other._ranges:
            return False
        i = j = 0
        while i < len(self._ranges) and j < len(other._ranges):
            a, b = self._ranges[i], other._ranges[j]
            if a.start >= b.stop:
                j += 1
            elif range_is_subset(a, b):
                i += 1
            else:
                return False
        return i == len(self._ranges)

    def is_disjoint(self, other: RangeLike) -> bool:
        """Return True if the set shares no value with ``other``."""
        if isinstance(other, range):
            return range_is_disjoint(other, self)
        return all(range_is_disjoint(r, other) for r in self._ranges)

    def __or__(self, other: object) -> RangeSet:
        if not isinstance(other, (range, RangeSet)):
            return NotImplemented
        result = RangeSet(self)
        result |= other
        return result

    __ror__ = __or__

    def __ior__(self, other: object) -> RangeSet:
        if isinstance(other, range):
            self._insert(_check_range(other))
        elif isinstance(other, RangeSet):
            for r in other._ranges:
                self._insert(r)
        else:
            return NotImplemented
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RangeSet):
            return self._ranges == other._ranges
        if isinstance(other, range):
            return (
                len(self._ranges) == 1
                and self._ranges[0].start == other.start
                and self._ranges[0].stop == other.stop
                and other.step == 1
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RangeSet({self._ranges!r})"