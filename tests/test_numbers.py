from math import factorial

import pytest

from cfsolvers.numbers import (
    count_pair_arrangements,
    floor_ceil_extremes,
    mex_operations,
    min_coin_moves,
)

XS = [0, 1, 12, 1023, 10**18]
TIMES = [0, 1, 5, 70]


@pytest.mark.parametrize("x", XS)
@pytest.mark.parametrize("times", TIMES)
def test_floor_halvings_only_match_shift(x, times):
    result = floor_ceil_extremes(x, times, 0)
    assert result.minimum == x >> times
    assert result.maximum == x >> times


@pytest.mark.parametrize("x", XS)
@pytest.mark.parametrize("times", TIMES)
def test_ceil_halvings_only_match_ceiling_division(x, times):
    result = floor_ceil_extremes(x, 0, times)
    expected = -(-x // 2**times)
    assert result.minimum == expected
    assert result.maximum == expected


def test_minimum_never_exceeds_maximum():
    for x in XS:
        for floors in TIMES:
            for ceils in TIMES:
                low, high = floor_ceil_extremes(x, floors, ceils)
                assert low <= high


def test_huge_counts_finish_quickly():
    assert floor_ceil_extremes(12, 10**9, 0) == (12 >> 64, 12 >> 64)
    assert floor_ceil_extremes(12, 0, 10**9) == (-(-12 // 2**64),) * 2


@pytest.mark.parametrize("args", [(-1, 0, 0), (5, -1, 0), (5, 0, -1)])
def test_negative_arguments_rejected(args):
    with pytest.raises(ValueError):
        floor_ceil_extremes(*args)


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5],
        [0, 0, 0, 0],
        [0, 1, 2, 3, 4, 5, 6],
        [3, 1, 0, 2, 7, 8],
        [5, 5, 5, 5, 5, 5, 5, 5],
    ],
)
def test_mex_operations_shape(values):
    original = list(values)
    operations = mex_operations(values)
    n = len(values)
    head = [(1, n - 3), (1, 4)] if n > 4 else [(1, 4)]
    assert operations[: len(head)] == head
    tail = operations[len(head):]
    assert all(operation == (1, 1) for operation in tail)
    assert len(tail) <= 1
    assert values == original


def test_mex_operations_single_step_when_mex_is_zero():
    values = [1, 2, 3, 4]
    assert mex_operations(values) == [(1, len(values))]


def test_mex_operations_needs_four_values():
    with pytest.raises(ValueError):
        mex_operations([0, 1, 2])


def test_min_coin_moves_example():
    assert min_coin_moves([1, 2, 3]) == 3


@pytest.mark.parametrize("chests", [[1], [1, 2], [1, 2, 3, 4]])
def test_min_coin_moves_impossible(chests):
    with pytest.raises(ValueError):
        min_coin_moves(chests)


@pytest.mark.parametrize(
    "chests",
    [[1, 2, 3], [5, 0, 0], [0, 0, 7], [2, 3, 1, 4, 1], [1, 1, 1, 1, 1, 1, 1]],
)
def test_min_coin_moves_bounds(chests):
    moves = min_coin_moves(chests)
    assert max(chests) <= moves
    assert moves <= sum(chests)


def test_count_pair_arrangements_examples():
    assert count_pair_arrangements([1], [2], 7) == 1
    assert count_pair_arrangements([1, 2], [2, 3], 11) == 2


@pytest.mark.parametrize("modulus", [2, 3, 5, 97])
def test_count_pair_arrangements_below_modulus(modulus):
    result = count_pair_arrangements([1, 1, 2, 3], [2, 1, 1, 4], modulus)
    assert 0 <= result < modulus


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_count_pair_arrangements_identical_points(n):
    modulus = 10**9 + 7
    result = count_pair_arrangements([5] * n, [5] * n, modulus)
    assert result == factorial(2 * n) // 2**n % modulus


def test_count_pair_arrangements_length_mismatch():
    with pytest.raises(ValueError):
        count_pair_arrangements([1, 2], [1], 7)


def test_count_pair_arrangements_bad_modulus():
    with pytest.raises(ValueError):
        count_pair_arrangements([1], [2], 0)