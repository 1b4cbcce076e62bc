"""Solvers for number and counting puzzles."""

from __future__ import annotations

from collections import Counter
from itertools import count
from typing import Iterable, NamedTuple, Sequence


class RoundingExtremes(NamedTuple):
    """Smallest and largest values reachable by ordering the halvings."""

    minimum: int
    maximum: int


def _floor_halvings(x: int, times: int) -> int:
    for _ in range(times):
        if x == 0:
            break
        x >>= 1
    return x


def _ceil_halvings(x: int, times: int) -> int:
    for _ in range(times):
        if x <= 1:
            break
        x = (x + 1) >> 1
    return x


def floor_ceil_extremes(x: int, floors: int, ceils: int) -> RoundingExtremes:
    """Extremes of x after `floors` floor-halvings and `ceils` ceil-halvings in any order."""
    if x < 0 or floors < 0 or ceils < 0:
        raise ValueError("x and the operation counts must be non-negative")
    return RoundingExtremes(
        _floor_halvings(_ceil_halvings(x, ceils), floors),
        _ceil_halvings(_floor_halvings(x, floors), ceils),
    )


def _mex(values: Iterable[int]) -> int:
    present = set(values)
    return next(candidate for candidate in count() if candidate not in present)


def mex_operations(values: Sequence[int]) -> list[tuple[int, int]]:
    """Operations (1-based l, r) collapsing the array to a single zero.

    Each operation replaces the span l..r with the mex of the whole current array.
    """
    array = list(values)
    n = len(array)
    if n < 4:
        raise ValueError("at least four values are required")
    operations: list[tuple[int, int]] = []

    def collapse(left: int, right: int) -> None:
        array[left:right + 1] = [_mex(array)]
        operations.append((left + 1, right + 1))

    if n > 4:
        collapse(0, n - 4)
    collapse(0, 3)
    while array[0] != 0:
        collapse(0, 0)
    return operations


def min_coin_moves(chests: Sequence[int]) -> int:
    """Fewest moves emptying all chests, each move taking a coin from x, 2x and 2x+1."""
    n = len(chests)
    if n <= 2 or n % 2 == 0:
        raise ValueError("impossible: the number of chests must be odd and at least 3")
    coins = [0, *chests]
    moves = 0
    for chest in range(n, 0, -1):
        taken = coins[chest]
        if taken <= 0:
            continue
        sibling = chest - 1 if chest % 2 else chest + 1
        if sibling <= n:
            coins[sibling] -= taken
        if chest // 2 >= 1:
            coins[chest // 2] -= taken
        moves += taken
        coins[chest] = 0
    return moves


def count_pair_arrangements(
    first: Sequence[int], second: Sequence[int], modulus: int
) -> int:
    """Distinct orderings of the points of both sequences by x, modulo the modulus."""
    first, second = list(first), list(second)
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    multiplicity = Counter(first) + Counter(second)
    halvings = sum(a == b for a, b in zip(first, second))
    result = 1
    for value in sorted(multiplicity):
        for factor in range(1, multiplicity[value] + 1):
            while factor % 2 == 0 and halvings:
                factor >>= 1
                halvings -= 1
            result = result * factor % modulus
    return result