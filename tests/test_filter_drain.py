import pytest

from mpcutils.filter_drain import FilterDrain, filter_drain


def test_filter_drain_empty():
    items: list[int] = []
    it = filter_drain(items, lambda _: True)
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None
    assert it.size_hint() == (0, 0)
    assert items == []


def test_filter_drain_zst():
    items = [None] * 5
    initial_len = len(items)
    count = 0
    it = filter_drain(items, lambda _: True)
    assert it.size_hint() == (0, initial_len)
    for _ in it:
        count += 1
        assert it.size_hint() == (0, initial_len - count)
    assert it.size_hint() == (0, 0)
    assert next(it, "done") == "done"
    assert it.size_hint() == (0, 0)
    assert count == initial_len
    assert items == []


def test_filter_drain_false():
    items = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    initial_len = len(items)
    it = filter_drain(items, lambda _: False)
    assert it.size_hint() == (0, initial_len)
    count = sum(1 for _ in it)
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None
    assert it.size_hint() == (0, 0)
    assert count == 0
    assert items == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_filter_drain_true():
    items = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    initial_len = len(items)
    count = 0
    it = filter_drain(items, lambda _: True)
    assert it.size_hint() == (0, initial_len)
    for _ in it:
        count += 1
        assert it.size_hint() == (0, initial_len - count)
    assert it.size_hint() == (0, 0)
    assert next(it, None) is None
    assert count == initial_len
    assert items == []


@pytest.mark.parametrize(
    ("items", "removed", "kept"),
    [
        (
            [1, 2, 4, 6, 7, 9, 11, 13, 15, 17, 18, 20, 22, 24, 26, 27, 29, 31, 33, 34, 35, 36, 37, 39],
            [2, 4, 6, 18, 20, 22, 24, 26, 34, 36],
            [1, 7, 9, 11, 13, 15, 17, 27, 29, 31, 33, 35, 37, 39],
        ),
        (
            [2, 4, 6, 7, 9, 11, 13, 15, 17, 18, 20, 22, 24, 26, 27, 29, 31, 33, 34, 35, 36, 37, 39],
            [2, 4, 6, 18, 20, 22, 24, 26, 34, 36],
            [7, 9, 11, 13, 15, 17, 27, 29, 31, 33, 35, 37, 39],
        ),
        (
            [2, 4, 6, 7, 9, 11, 13, 15, 17, 18, 20, 22, 24, 26, 27, 29, 31, 33, 34, 35, 36],
            [2, 4, 6, 18, 20, 22, 24, 26, 34, 36],
            [7, 9, 11, 13, 15, 17, 27, 29, 31, 33, 35],
        ),
        (
            [2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19],
            [2, 4, 6, 8, 10, 12, 14, 16, 18, 20],
            [1, 3, 5, 7, 9, 11, 13, 15, 17, 19],
        ),
        (
            [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20],
            [2, 4, 6, 8, 10, 12, 14, 16, 18, 20],
            [1, 3, 5, 7, 9, 11, 13, 15, 17, 19],
        ),
    ],
)
def test_filter_drain_complex(items, removed, kept):
    drained = list(filter_drain(items, lambda x: x % 2 == 0))
    assert len(drained) == 10
    assert drained == removed
    assert len(items) == len(kept)
    assert items == kept


def _panicking_filter(index: int) -> bool:
    if index in (2, 4):
        raise RuntimeError(f"panic at index: {index}")
    return index < 6


def test_filter_drain_consumed_panic():
    data = list(range(10))
    drained: list[int] = []
    with pytest.raises(RuntimeError, match="panic at index: 2"):
        for item in filter_drain(data, _panicking_filter):
            drained.append(item)
    assert drained == [0, 1]
    assert data == [2, 3, 4, 5, 6, 7, 8, 9]
    assert sorted(drained + data) == list(range(10))


def test_filter_drain_unconsumed_panic():
    data = list(range(10))
    it = filter_drain(data, _panicking_filter)
    assert isinstance(it, FilterDrain)
    assert data == list(range(10))


def test_filter_drain_unconsumed():
    items = [1, 2, 3, 4]
    it = filter_drain(items, lambda x: x % 2 != 0)
    del it
    assert items == [1, 2, 3, 4]


def test_filter_drain_partially_consumed_keeps_rest():
    items = [1, 2, 3, 4, 5]
    it = filter_drain(items, lambda x: x % 2 != 0)
    assert next(it) == 1
    assert items == [2, 3, 4, 5]
    assert it.size_hint() == (0, 4)
    assert list(it) == [3, 5]
    assert items == [2, 4]