"""Solvers for plane geometry puzzles."""

from __future__ import annotations

from math import isqrt
from typing import Iterable, Sequence

Point = tuple[int, int]


def _squared_distance(p: Point, q: Point) -> int:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def min_fountain_cover(flowers: Iterable[Point], first: Point, second: Point) -> int:
    """Smallest r1^2 + r2^2 so that the two fountains water every flower."""
    flowers = list(flowers)
    to_first = [_squared_distance(flower, first) for flower in flowers]
    to_second = [_squared_distance(flower, second) for flower in flowers]
    candidates = sorted({0, *to_first, *to_second})
    return min(
        radius
        + max(
            (far for near, far in zip(to_first, to_second) if near > radius),
            default=0,
        )
        for radius in candidates
    )


def min_polyline_segments(points: Sequence[Point]) -> int:
    """Fewest axis-parallel segments of a simple polyline through three points."""
    if len(points) != 3:
        raise ValueError("exactly three points are required")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    if len(set(xs)) == 1 or len(set(ys)) == 1:
        return 1

    def reachable(i: int, j: int, k: int) -> bool:
        shares_x = xs[k] in (xs[i], xs[j]) and min(ys[i], ys[j]) <= ys[k] <= max(ys[i], ys[j])
        shares_y = ys[k] in (ys[i], ys[j]) and min(xs[i], xs[j]) <= xs[k] <= max(xs[i], xs[j])
        return shares_x or shares_y

    if any(reachable(i, j, k) for i, j, k in ((0, 1, 2), (0, 2, 1), (1, 2, 0))):
        return 2
    return 3


def count_circle_points(centers: Sequence[int], radii: Sequence[int]) -> int:
    """Integer points inside or on at least one circle centred on the x axis."""
    if len(centers) != len(radii):
        raise ValueError("expected one radius per centre")
    if any(radius < 0 for radius in radii):
        raise ValueError("radii must be non-negative")
    tallest: dict[int, int] = {}
    for centre, radius in zip(centers, radii):
        for x in range(centre - radius, centre + radius + 1):
            column = 2 * isqrt(radius * radius - (x - centre) ** 2) + 1
            if column > tallest.get(x, 0):
                tallest[x] = column
    return sum(tallest.values())