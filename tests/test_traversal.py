import math

import pytest

from graphwork.graph import Graph
from graphwork.traversal import (
    breadth_first,
    connected_components,
    has_path,
    is_bipartite,
    is_connected,
    is_cyclic,
    iterative_dfs,
    perfect_friend_pairs,
    spread_of_infection,
)


def build(n, edges):
    g = Graph(n)
    for src, nbr in edges:
        g.add_edge(src, nbr, 1)
    return g


SAMPLE_EDGES = [(0, 1), (0, 3), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (4, 6)]
FRIENDS_EDGES = [(0, 1), (2, 3), (4, 5), (5, 6), (4, 6)]


@pytest.fixture
def sample():
    return build(7, SAMPLE_EDGES)


@pytest.fixture
def friends():
    return build(7, FRIENDS_EDGES)


def adjacent(g, a, b):
    return any(e.nbr == b for e in g.neighbours(a))


@pytest.mark.parametrize("walk", [breadth_first, iterative_dfs])
def test_walk_starts_at_source_and_visits_each_vertex_once(sample, walk):
    result = list(walk(sample, 2))
    assert result[0] == (2, "2")
    vertices = [v for v, _ in result]
    assert sorted(vertices) == list(range(len(sample)))


@pytest.mark.parametrize("walk", [breadth_first, iterative_dfs])
def test_walk_paths_follow_edges(sample, walk):
    for vertex, path in walk(sample, 0):
        assert path[0] == "0"
        assert path[-1] == str(vertex)
        steps = [int(ch) for ch in path]
        for a, b in zip(steps, steps[1:]):
            assert adjacent(sample, a, b)


def test_breadth_first_paths_never_shrink(sample):
    lengths = [len(path) for _, path in breadth_first(sample, 0)]
    assert lengths == sorted(lengths)


@pytest.mark.parametrize("walk", [breadth_first, iterative_dfs])
def test_walk_stays_in_component(friends, walk):
    reached = {v for v, _ in walk(friends, 4)}
    component = next(c for c in connected_components(friends) if 4 in c)
    assert reached == set(component)


def test_has_path_within_and_across_components(friends):
    assert has_path(friends, 4, 6)
    assert has_path(friends, 0, 1)
    assert not has_path(friends, 0, 6)
    assert has_path(friends, 3, 3)


def test_has_path_agrees_with_components(friends):
    for component in connected_components(friends):
        for vertex in range(len(friends)):
            assert has_path(friends, component[0], vertex) == (vertex in component)


def test_connected_components_worked_example(friends):
    assert connected_components(friends) == [[0, 1], [2, 3], [4, 5, 6]]


def test_components_partition_vertices(sample, friends):
    for g in (sample, friends):
        comps = connected_components(g)
        flat = [v for c in comps for v in c]
        assert sorted(flat) == list(range(len(g)))
        firsts = [c[0] for c in comps]
        assert firsts == sorted(firsts)
        assert all(c[0] == min(c) for c in comps)


def test_components_of_isolated_vertices():
    g = Graph(4)
    assert connected_components(g) == [[v] for v in range(4)]
    assert connected_components(Graph(0)) == []


def test_is_connected(sample, friends):
    assert is_connected(sample)
    assert not is_connected(friends)
    assert is_connected(Graph(1))
    assert is_connected(Graph(0))


def test_is_cyclic(sample):
    assert is_cyclic(sample)
    assert not is_cyclic(build(5, [(0, 1), (1, 2), (1, 3), (3, 4)]))
    assert not is_cyclic(Graph(3))


def test_cycle_in_later_component_is_found():
    assert is_cyclic(build(6, [(0, 1), (3, 4), (4, 5), (5, 3)]))


def test_is_bipartite_even_and_odd_cycles():
    assert is_bipartite(build(4, [(0, 1), (1, 2), (2, 3), (3, 0)]))
    assert not is_bipartite(build(3, [(0, 1), (1, 2), (2, 0)]))


def test_sample_with_triangle_is_not_bipartite(sample):
    assert not is_bipartite(sample)


def test_odd_cycle_in_later_component_breaks_bipartiteness():
    g = build(6, [(0, 1), (1, 2), (3, 4), (4, 5), (5, 3)])
    assert not is_bipartite(g)
    assert is_bipartite(build(3, [(0, 1), (1, 2)]))


def test_forest_is_bipartite_and_acyclic():
    g = build(6, [(0, 1), (0, 2), (2, 3), (4, 5)])
    assert is_bipartite(g)
    assert not is_cyclic(g)


def test_spread_first_steps(sample):
    assert spread_of_infection(sample, 6, 1) == len([6])
    direct = {e.nbr for e in sample.neighbours(6)}
    assert spread_of_infection(sample, 6, 2) == 1 + len(direct)


def test_spread_is_monotone_and_bounded(sample):
    counts = [spread_of_infection(sample, 6, t) for t in range(10)]
    assert counts == sorted(counts)
    assert counts[-1] == len(sample)


def test_spread_limited_to_component(friends):
    component = next(c for c in connected_components(friends) if 2 in c)
    assert spread_of_infection(friends, 2, 50) == len(component)


def test_spread_matches_breadth_first_levels(sample):
    levels = {v: len(p) for v, p in breadth_first(sample, 0)}
    for t in range(1, 6):
        expected = sum(1 for depth in levels.values() if depth <= t)
        assert spread_of_infection(sample, 0, t) == expected


def test_perfect_friends_worked_example(friends):
    assert perfect_friend_pairs(friends) == 16


def test_perfect_friends_all_strangers():
    for n in range(1, 6):
        assert perfect_friend_pairs(Graph(n)) == math.comb(n, 2)


def test_perfect_friends_single_group(sample):
    assert perfect_friend_pairs(sample) == 0
    assert perfect_friend_pairs(Graph(0)) == 0


def test_perfect_friends_counts_cross_pairs(friends):
    comps = connected_components(friends)
    n = len(friends)
    within = sum(math.comb(len(c), 2) for c in comps)
    assert perfect_friend_pairs(friends) == math.comb(n, 2) - within