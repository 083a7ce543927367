"""Set union of ranges and range sets."""

from __future__ import annotations

from mpcutils.rangeset import RangeLike, RangeSet


def _checked(value: object) -> RangeLike:
    if isinstance(value, RangeSet):
        return value
    if isinstance(value, range):
        if value.step != 1:
            raise ValueError(f"ranges must have a step of 1, got {value!r}")
        return value
    raise TypeError(f"expected a range or RangeSet, got {type(value).__name__}")


def union(a: RangeLike, b: RangeLike) -> RangeSet:
    """Return the union of ``a`` and ``b`` as a new RangeSet.

    Either operand may be a ``range`` or a ``RangeSet``; neither is modified.
    """
    result = RangeSet(_checked(a))
    result |= _checked(b)
    return result