"""Indexing sequences by range sets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mpcutils.rangeset import RangeLike, RangeSet


def index_ranges(data: Sequence[Any] | str | bytes, ranges: RangeLike) -> Any:
    """Collect the items of ``data`` at the positions in ``ranges``.

    Returns a ``str`` for a string, ``bytes`` for bytes-like data and a
    ``list`` otherwise. Raises IndexError if any position is out of bounds.
    """
    index = ranges if isinstance(ranges, RangeSet) else RangeSet(ranges)
    end = index.end()
    if end is not None and end > len(data):
        raise IndexError(
            f"range end {end} out of bounds for data of length {len(data)}"
        )
    pieces = [data[r.start : r.stop] for r in index.iter_ranges()]
    if isinstance(data, str):
        return "".join(pieces)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return b"".join(bytes(p) for p in pieces)
    return [item for piece in pieces for item in piece]