"""Set intersection of ranges and range sets."""

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


def _range_and_range(a: range, b: range) -> range | None:
    start = max(a.start, b.start)
    stop = min(a.stop, b.stop)
    return range(start, stop) if start < stop else None


def _range_and_set(r: range, s: RangeSet) -> RangeSet:
    parts: list[range] = []
    for other in s.iter_ranges():
        if r.stop <= other.start:
            # every later range lies further to the right
            break
        overlap = _range_and_range(r, other)
        if overlap is not None:
            parts.append(overlap)
    return RangeSet(parts)


def _set_and_set(a: RangeSet, b: RangeSet) -> RangeSet:
    parts: list[range] = []
    left = a.iter_ranges()
    right = b.iter_ranges()
    x = next(left, None)
    y = next(right, None)
    while x is not None and y is not None:
        if x.stop <= y.start:
            x = next(left, None)
        elif y.stop <= x.start:
            y = next(right, None)
        else:
            parts.append(range(max(x.start, y.start), min(x.stop, y.stop)))
            advance_x = x.stop <= y.stop
            advance_y = y.stop <= x.stop
            if advance_x:
                x = next(left, None)
            if advance_y:
                y = next(right, None)
    return RangeSet(parts)


def intersection(a: RangeLike, b: RangeLike) -> range | RangeSet | None:
    """Return the intersection of ``a`` and ``b``.

    Two ranges give a ``range``, or ``None`` when they share no value.
    Any combination involving a ``RangeSet`` gives a new ``RangeSet``.
    """
    a = _checked(a)
    b = _checked(b)
    if isinstance(a, range) and isinstance(b, range):
        return _range_and_range(a, b)
    if isinstance(a, range):
        return _range_and_set(a, b)
    if isinstance(b, range):
        return _range_and_set(b, a)
    return _set_and_set(a, b)