import random
from collections import deque

import pytest

from cfsolvers.graphs import (
    MODULUS,
    count_safe_roads,
    evacuation_days,
    min_operations_to_zero,
    tag_game_moves,
)


def test_zero_needs_no_operations():
    assert min_operations_to_zero([0]) == [0]


def test_distance_table_is_consistent_with_operations():
    distance = min_operations_to_zero(range(MODULUS))
    assert distance[0] == 0
    for value in range(1, MODULUS):
        step_up = distance[(value + 1) % MODULUS]
        step_double = distance[(2 * value) % MODULUS]
        assert distance[value] == 1 + min(step_up, step_double)


def test_distances_are_bounded_by_fifteen():
    assert max(min_operations_to_zero(range(MODULUS))) <= 15


def test_results_follow_input_order():
    single = min_operations_to_zero([5])[0]
    assert min_operations_to_zero([5, 0, 5]) == [single, 0, single]


@pytest.mark.parametrize("value", [-1, MODULUS])
def test_out_of_range_value_raises(value):
    with pytest.raises(ValueError):
        min_operations_to_zero([value])


def test_tag_game_on_path_from_far_end():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    assert tag_game_moves(n, n, edges) == 2 * (n - 1)


def test_tag_game_bob_at_root_gives_nothing():
    assert tag_game_moves(3, 1, [(1, 2), (2, 3)]) == 0


def test_tag_game_is_even_and_edge_order_independent():
    edges = [(1, 2), (2, 3), (2, 4), (4, 5), (1, 6)]
    forward = tag_game_moves(6, 4, edges)
    backward = tag_game_moves(6, 4, [(v, u) for u, v in reversed(edges)])
    assert forward == backward
    assert forward % 2 == 0
    assert forward >= 2 * 2


def test_tag_game_wrong_edge_count_raises():
    with pytest.raises(ValueError):
        tag_game_moves(3, 2, [(1, 2)])


def test_tag_game_disconnected_raises():
    with pytest.raises(ValueError):
        tag_game_moves(3, 2, [(1, 2), (1, 2)])


def test_evacuation_single_city():
    assert evacuation_days([4], []) == [0]


def test_evacuation_chain_with_wide_roads():
    n = 5
    roads = [(i, i + 1, 10) for i in range(1, n)]
    assert evacuation_days([1] * n, roads) == list(range(n))


def test_evacuation_lower_priority_goes_first():
    roads = [(1, 2, 1), (2, 3, 1), (2, 4, 1)]
    days = evacuation_days([1, 10, 5, 3], roads)
    assert days[3] < days[2]
    swapped = evacuation_days([1, 10, 3, 5], roads)
    assert swapped[2] < swapped[3]
    assert sorted(days) == sorted(swapped)


def _depths(n, roads):
    adjacency = [[] for _ in range(n)]
    for u, v, _ in roads:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    depth = [-1] * n
    depth[0] = 0
    queue = deque([0])
    while queue:
        city = queue.popleft()
        for other in adjacency[city]:
            if depth[other] == -1:
                depth[other] = depth[city] + 1
                queue.append(other)
    return depth


def test_evacuation_never_beats_distance():
    rng = random.Random(7)
    n = 30
    roads = [(rng.randint(1, i - 1), i, rng.randint(1, 3)) for i in range(2, n + 1)]
    priorities = rng.sample(range(1, 100), n)
    days = evacuation_days(priorities, roads)
    depth = _depths(n, roads)
    assert days[0] == 0
    assert all(day >= d for day, d in zip(days, depth))
    assert all(day >= 1 for day in days[1:])


def test_evacuation_zero_capacity_raises():
    with pytest.raises(ValueError):
        evacuation_days([1, 2], [(1, 2, 0)])


def test_evacuation_wrong_road_count_raises():
    with pytest.raises(ValueError):
        evacuation_days([1, 2, 3], [(1, 2, 1)])


def test_safe_roads_complete_graph_has_none():
    n = 4
    edges = [(u, v) for u in range(1, n + 1) for v in range(u + 1, n + 1)]
    result = count_safe_roads(n, edges, 1, 4)
    assert 0 <= result <= n * (n - 1) // 2 - len(edges)


def test_safe_roads_same_endpoints_all_safe():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    assert count_safe_roads(n, edges, 3, 3) == n * (n - 1) // 2 - len(edges)


def test_safe_roads_path_end_to_end_none_safe():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    result = count_safe_roads(n, edges, 1, n)
    assert result <= count_safe_roads(n, edges, 3, n)
    assert not result


def test_safe_roads_symmetric_in_endpoints():
    edges = [(1, 2), (1, 3), (1, 4), (4, 5), (3, 5), (2, 5)]
    assert count_safe_roads(5, edges, 1, 5) == count_safe_roads(5, edges, 5, 1)


def test_safe_roads_disconnected_raises():
    with pytest.raises(ValueError):
        count_safe_roads(4, [(1, 2), (3, 4)], 1, 2)