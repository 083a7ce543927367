"""Set difference of ranges and range sets."""

from __future__ import annotations

from collections.abc import Iterable

from mpcutils.rangeset import RangeLike, RangeSet


def _checked(value: object) -> RangeLike:
    if isinstance(value, RangeSet):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise ValueError(f"ranges must have a step of 1, got {value!r}")
        return value
    raise TypeError(f"expected a range or RangeSet, got {type(value).__name__}")


def _subtract(ranges: Iterable[range], other: range) -> list[range]:
    """Remove ``other`` from normalized ``ranges``, keeping them normalized."""
    if other.start >= other.stop:
        return list(ranges)
    result: list[range] = []
    for r in ranges:
        if r.stop <= other.start or r.start >= other.stop:
            result.append(r)
            continue
        if r.start < other.start:
            result.append(range(r.start, other.start))
        if r.stop > other.stop:
            result.append(range(other.stop, r.stop))
    return result


def difference(a: RangeLike, b: RangeLike) -> RangeSet:
    """Return the values of ``a`` that are not in ``b`` as a new RangeSet.

    Either operand may be a ``range`` or a ``RangeSet``; neither is modified.
    """
    a = _checked(a)
    b = _checked(b)
    ranges = RangeSet(a).ranges
    subtrahends = [b] if isinstance(b, range) else b.iter_ranges()
    for other in subtrahends:
        if not ranges:
            break
        ranges = _subtract(ranges, other)
    return RangeSet(ranges)