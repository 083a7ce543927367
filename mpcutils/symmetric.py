"""Symmetric difference of range sets."""

from __future__ import annotations

from mpcutils.difference import difference
from mpcutils.intersection import intersection
from mpcutils.rangeset import RangeLike, RangeSet
from mpcutils.union import union


def symmetric_difference(a: RangeLike, b: RangeLike) -> RangeSet:
    """Return the values in exactly one of ``a`` and ``b`` as a new RangeSet.

    Either operand may be a ``range`` or a ``RangeSet``; neither is modified.
    """
    common = intersection(a, b)
    combined = union(a, b)
    if common is None:
        return combined
    return difference(combined, common)