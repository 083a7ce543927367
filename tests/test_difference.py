from itertools import product

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mpcutils.difference import difference
from mpcutils.rangeset import RangeSet


def assert_invariants(s: RangeSet) -> None:
    rs = s.ranges
    assert all(r.start < r.stop for r in rs)
    assert all(x.start < y.start and x.stop < y.start for x, y in zip(rs, rs[1:]))


small_ranges = st.builds(range, st.integers(0, 40), st.integers(0, 40))
small_sets = st.lists(small_ranges, max_size=8).map(RangeSet)


def test_range_difference():
    a = range(10, 20)
    assert difference(a, range(15, 25)) == RangeSet([range(10, 15)])
    assert difference(a, range(20, 25)) == RangeSet([range(10, 20)])
    assert difference(a, range(19, 25)) == RangeSet([range(10, 19)])
    assert difference(a, range(25, 30)) == RangeSet([range(10, 20)])
    assert difference(a, range(5, 15)) == RangeSet([range(15, 20)])
    assert difference(a, range(5, 10)) == RangeSet([range(10, 20)])
    assert difference(a, range(5, 11)) == RangeSet([range(11, 20)])
    assert difference(a, range(0, 5)) == RangeSet([range(10, 20)])
    assert difference(a, range(5, 25)) == RangeSet()
    assert difference(a, range(14, 16)) == RangeSet([range(10, 14), range(16, 20)])
    assert difference(a, range(10, 20)) == RangeSet()


def test_range_diff_set():
    a = range(10, 20)
    assert difference(a, RangeSet([range(15, 25)])) == RangeSet([range(10, 15)])
    assert difference(a, RangeSet([range(5, 15)])) == RangeSet([range(15, 20)])
    assert difference(a, RangeSet([range(12, 15)])) == RangeSet(
        [range(10, 12), range(15, 20)]
    )
    assert difference(a, RangeSet([range(11, 13), range(15, 18)])) == RangeSet(
        [range(10, 11), range(13, 15), range(18, 20)]
    )
    assert difference(
        a, RangeSet([range(11, 12), range(13, 15), range(17, 19)])
    ) == RangeSet([range(10, 11), range(12, 13), range(15, 17), range(19, 20)])


def test_set_diff_range():
    a = RangeSet([range(10, 20), range(30, 40), range(50, 60)])
    assert difference(a, range(15, 35)) == RangeSet(
        [range(10, 15), range(35, 40), range(50, 60)]
    )
    assert difference(a, range(5, 15)) == RangeSet(
        [range(15, 20), range(30, 40), range(50, 60)]
    )
    assert difference(a, range(12, 15)) == RangeSet(
        [range(10, 12), range(15, 20), range(30, 40), range(50, 60)]
    )
    assert difference(a, range(35, 38)) == RangeSet(
        [range(10, 20), range(30, 35), range(38, 40), range(50, 60)]
    )
    assert difference(a, range(5, 25)) == RangeSet([range(30, 40), range(50, 60)])
    assert difference(a, range(5, 45)) == RangeSet([range(50, 60)])
    assert difference(a, range(5, 65)) == RangeSet()
    assert difference(a, range(0, 5)) == a
    assert difference(a, range(65, 70)) == a
    assert difference(a, range(25, 28)) == RangeSet(
        [range(10, 20), range(30, 40), range(50, 60)]
    )
    assert difference(a, range(0, 0)) == a


def test_operands_not_modified():
    a = RangeSet([range(10, 20), range(30, 40)])
    b = RangeSet([range(15, 35)])
    difference(a, b)
    assert a == RangeSet([range(10, 20), range(30, 40)])
    assert b == RangeSet([range(15, 35)])


def test_empty_left_operand():
    assert difference(range(5, 5), range(0, 10)) == RangeSet()
    assert difference(RangeSet(), RangeSet([range(0, 3)])) == RangeSet()


def test_rejects_bad_operands():
    with pytest.raises(TypeError):
        difference([1, 2], range(0, 1))
    with pytest.raises(ValueError):
        difference(range(0, 10, 2), range(0, 1))


def test_prove_range_diff_range_small():
    for xs, xe, ys, ye in product(range(8), repeat=4):
        x, y = range(xs, xe), range(ys, ye)
        result = difference(x, y)
        assert list(result) == [v for v in x if v not in y]
        assert_invariants(result)


@given(small_ranges, small_sets)
def test_range_diff_set_matches_builtin_sets(r, s):
    result = difference(r, s)
    assert list(result) == [v for v in r if v not in s]
    assert_invariants(result)


@given(small_sets, small_ranges)
def test_set_diff_range_matches_builtin_sets(s, r):
    result = difference(s, r)
    assert list(result) == [v for v in s if v not in r]
    assert_invariants(result)


@given(small_sets, small_sets)
def test_set_diff_set_matches_builtin_sets(s1, s2):
    result = difference(s1, s2)
    assert list(result) == [v for v in s1 if v not in s2]
    assert_invariants(result)