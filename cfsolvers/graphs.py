"""Solvers for graph and tree puzzles."""

from __future__ import annotations

from collections import deque
from functools import lru_cache
from heapq import heappop, heappush
from itertools import combinations
from typing import Iterable, Sequence

MODULUS = 32768


@lru_cache(maxsize=1)
def _distance_table() -> tuple[int, ...]:
    """Fewest operations (+1 or *2, both mod 32768) taking each value to zero."""
    distance = [-1] * MODULUS
    distance[0] = 0
    queue = deque([0])
    while queue:
        current = queue.popleft()
        predecessors = [(current - 1) % MODULUS]
        if current % 2 == 0:
            predecessors.extend((current // 2, (current + MODULUS) // 2))
        for value in predecessors:
            if distance[value] == -1:
                distance[value] = distance[current] + 1
                queue.append(value)
    return tuple(distance)


def min_operations_to_zero(values: Iterable[int]) -> list[int]:
    """Fewest increments or doublings modulo 32768 that turn each value into zero."""
    table = _distance_table()
    result = []
    for value in values:
        if not 0 <= value < MODULUS:
            raise ValueError(f"value {value} is outside 0..{MODULUS - 1}")
        result.append(table[value])
    return result


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{n}")
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    return adjacency


def _bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    distance = [-1] * len(adjacency)
    distance[start] = 0
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if distance[neighbour] == -1:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
    return distance


def _check_vertex(n: int, vertex: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside 1..{n}")


def tag_game_moves(n: int, start: int, edges: Iterable[tuple[int, int]]) -> int:
    """Total moves in the tag game on a tree rooted at vertex 1, Bob starting at start."""
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n-1 edges")
    _check_vertex(n, start)
    adjacency = _adjacency(n, edges)
    from_root = _bfs(adjacency, 0)
    if -1 in from_root:
        raise ValueError("the edges do not form a tree")
    from_bob = _bfs(adjacency, start - 1)
    return max(
        (2 * alice for alice, bob in zip(from_root, from_bob) if bob < alice),
        default=0,
    )


def evacuation_days(
    priorities: Sequence[int], roads: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Day on which each city's group reaches the capital (city 1).

    Every day each city sends at most the road's capacity of waiting groups
    towards the capital, lowest priority value first.
    """
    n = len(priorities)
    roads = list(roads)
    if n == 0:
        raise ValueError("at least one city is required")
    if len(roads) != n - 1:
        raise ValueError("a tree on n cities has n-1 roads")
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, capacity in roads:
        _check_vertex(n, u)
        _check_vertex(n, v)
        if capacity < 1:
            raise ValueError("road capacities must be positive")
        neighbours[u - 1].append((v - 1, capacity))
        neighbours[v - 1].append((u - 1, capacity))

    parent = [0] * n
    capacity_up = [0] * n
    seen = [False] * n
    seen[0] = True
    queue = deque([0])
    while queue:
        city = queue.popleft()
        for other, capacity in neighbours[city]:
            if not seen[other]:
                seen[other] = True
                parent[other] = city
                capacity_up[other] = capacity
                queue.append(other)
    if not all(seen):
        raise ValueError("the roads do not connect every city")

    waiting: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for city in range(1, n):
        heappush(waiting[city], (priorities[city], city))
    arriving: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    days = [0] * n
    remaining = n - 1
    day = 0
    while remaining:
        for city, group in enumerate(arriving):
            for entry in group:
                if city == 0:
                    days[entry[1]] = day
                    remaining -= 1
                else:
                    heappush(waiting[city], entry)
            group.clear()
        if not remaining:
            break
        for queue_, up, capacity in zip(waiting[1:], parent[1:], capacity_up[1:]):
            for _ in range(min(len(queue_), capacity)):
                arriving[up].append(heappop(queue_))
        day += 1
    return days


def count_safe_roads(
    n: int, edges: Iterable[tuple[int, int]], source: int, target: int
) -> int:
    """Non-adjacent vertex pairs whose new road keeps the source-target distance."""
    edges = list(edges)
    _check_vertex(n, source)
    _check_vertex(n, target)
    adjacency = _adjacency(n, edges)
    existing = {frozenset((u - 1, v - 1)) for u, v in edges}
    from_source = _bfs(adjacency, source - 1)
    from_target = _bfs(adjacency, target - 1)
    if -1 in from_source:
        raise ValueError("the graph must be connected")
    shortest = from_source[target - 1]
    return sum(
        1
        for u, v in combinations(range(n), 2)
        if frozenset((u, v)) not in existing
        and from_source[u] + from_target[v] + 1 >= shortest
        and from_target[u] + from_source[v] + 1 >= shortest
    )