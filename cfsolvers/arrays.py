"""Solvers for array and counting puzzles."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import accumulate
from typing import Iterable, NamedTuple, Sequence


def max_firecrackers(
    n: int, hooligan: int, guard: int, fuse_times: Iterable[int]
) -> int:
    """Most firecrackers that explode before the guard catches the hooligan."""
    if hooligan == guard:
        raise ValueError("hooligan and guard must start in different cells")
    fuses = sorted(fuse_times)
    time_left = guard - 1 if hooligan < guard else n - guard
    usable = min(len(fuses), abs(hooligan - guard) - 1)
    exploded = 0
    for fuse in reversed(fuses[:usable]):
        if fuse < time_left:
            time_left -= 1
            exploded += 1
    return exploded


def count_exhibition_positions(points: Iterable[tuple[int, int]]) -> int:
    """Integer points minimising the total Manhattan distance to all points."""
    points = list(points)
    if not points:
        raise ValueError("at least one point is required")
    xs = sorted(x for x, _ in points)
    ys = sorted(y for _, y in points)
    n = len(points)
    width = xs[n // 2] - xs[(n - 1) // 2] + 1
    height = ys[n // 2] - ys[(n - 1) // 2] + 1
    return width * height


def _median_at_least(values: Sequence[int], threshold: int, k: int) -> bool:
    prefix = [0, *accumulate(1 if v >= threshold else -1 for v in values)]
    lowest = 0
    for current, trailing in zip(prefix[k:], prefix):
        lowest = min(lowest, trailing)
        if current > lowest:
            return True
    return False


def max_median(values: Sequence[int], k: int) -> int:
    """Largest median of any contiguous subarray of length at least k."""
    values = list(values)
    if not 1 <= k <= len(values):
        raise ValueError("k must be between 1 and the number of values")
    candidates = sorted(set(values))
    left, right = 0, len(candidates) - 1
    while left < right:
        mid = (left + right + 1) // 2
        if _median_at_least(values, candidates[mid], k):
            left = mid
        else:
            right = mid - 1
    return candidates[left]


def count_interesting_pairs(values: Iterable[int], x: int, y: int) -> int:
    """Pairs whose removal leaves a sum between x and y inclusive."""
    ordered = sorted(values)
    total = sum(ordered)
    low_sum, high_sum = total - y, total - x
    count = 0
    for i, value in enumerate(ordered):
        low = bisect_left(ordered, low_sum - value, i + 1)
        high = bisect_right(ordered, high_sum - value, i + 1)
        count += high - low
    return count


def min_replants(species: Iterable[int]) -> int:
    """Plants to move so the species appear in non-decreasing order."""
    tails: list[int] = []
    total = 0
    for kind in species:
        total += 1
        slot = bisect_right(tails, kind)
        if slot == len(tails):
            tails.append(kind)
        else:
            tails[slot] = kind
    return total - len(tails)


def min_moves_to_sort(permutation: Sequence[int]) -> int:
    """Moves to the front or back needed to sort a permutation of 1..n."""
    n = len(permutation)
    if n == 0 or sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("expected a non-empty permutation of 1..n")
    position = {value: index for index, value in enumerate(permutation)}
    best = run = 1
    for value in range(2, n + 1):
        run = run + 1 if position[value] > position[value - 1] else 1
        best = max(best, run)
    return n - best


class OnesSegment(NamedTuple):
    """Length of the longest run of ones and the array with it filled in."""

    length: int
    values: list[int]


def longest_ones_segment(values: Sequence[int], k: int) -> OnesSegment:
    """Longest run of ones after turning at most k zeros into ones."""
    values = list(values)
    left = 0
    zeros = 0
    best = 0
    best_left = 0
    for right, value in enumerate(values):
        if value == 0:
            zeros += 1
        while zeros > k:
            if values[left] == 0:
                zeros -= 1
            left += 1
        if right - left + 1 > best:
            best = right - left + 1
            best_left = left
    filled = values[:best_left] + [1] * best + values[best_left + best:]
    return OnesSegment(best, filled)


def max_stolen_diamonds(cells: Sequence[int], moves: int, minutes: int) -> int:
    """Diamonds a thief can take without the security check noticing."""
    n = len(cells)
    if n % 2 == 0:
        return 0
    need = n // 2 + 1
    if need > moves:
        return 0
    return min(min(cells[::2]), (moves // need) * minutes)


def can_equalize(values: Sequence[int], x: int) -> bool:
    """Whether the values average exactly x."""
    return sum(values) == len(values) * x