"""Traversals and connectivity questions on undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from graphwork.graph import Graph


def breadth_first(graph: Graph, src: int) -> Iterator[tuple[int, str]]:
    """Yield each vertex reachable from ``src`` with its path, level by level.

    The path is the concatenation of the vertex numbers along the way.
    """
    visited: set[int] = set()
    queue = deque([(src, str(src))])
    while queue:
        vertex, path = queue.popleft()
        if vertex in visited:
            continue
        visited.add(vertex)
        yield vertex, path
        queue.extend(
            (e.nbr, path + str(e.nbr))
            for e in graph.neighbours(vertex)
            if e.nbr not in visited
        )


def iterative_dfs(graph: Graph, src: int) -> Iterator[tuple[int, str]]:
    """Yield each vertex reachable from ``src`` with its path, using a stack."""
    visited: set[int] = set()
    stack = [(src, str(src))]
    while stack:
        vertex, path = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        yield vertex, path
        stack.extend(
            (e.nbr, path + str(e.nbr))
            for e in graph.neighbours(vertex)
            if e.nbr not in visited
        )


def _preorder(graph: Graph, start: int, visited: set[int]) -> Iterator[int]:
    """Depth-first preorder from ``start``, following neighbour order."""
    visited.add(start)
    yield start
    stack = [iter(graph.neighbours(start))]
    while stack:
        for edge in stack[-1]:
            if edge.nbr not in visited:
                visited.add(edge.nbr)
                yield edge.nbr
                stack.append(iter(graph.neighbours(edge.nbr)))
                break
        else:
            stack.pop()


def has_path(graph: Graph, src: int, dest: int) -> bool:
    """Whether ``dest`` can be reached from ``src``."""
    if src == dest:
        return True
    return any(v == dest for v in _preorder(graph, src, set()))


def connected_components(graph: Graph) -> list[list[int]]:
    """The components, each in depth-first order from its smallest vertex."""
    visited: set[int] = set()
    return [
        list(_preorder(graph, vertex, visited))
        for vertex in range(len(graph))
        if vertex not in visited
    ]


def is_connected(graph: Graph) -> bool:
    """Whether the graph has at most one component."""
    return len(connected_components(graph)) <= 1


def is_cyclic(graph: Graph) -> bool:
    """Whether any component contains a cycle."""
    visited: set[int] = set()
    for start in range(len(graph)):
        if start in visited:
            continue
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            if vertex in visited:
                return True
            visited.add(vertex)
            queue.extend(
                e.nbr for e in graph.neighbours(vertex) if e.nbr not in visited
            )
    return False


def is_bipartite(graph: Graph) -> bool:
    """Whether no vertex is reached by breadth-first search at two levels."""
    levels: dict[int, int] = {}
    for start in range(len(graph)):
        if start in levels:
            continue
        queue = deque([(start, 0)])
        while queue:
            vertex, level = queue.popleft()
            if vertex in levels:
                if levels[vertex] != level:
                    return False
                continue
            levels[vertex] = level
            queue.extend(
                (e.nbr, level + 1)
                for e in graph.neighbours(vertex)
                if e.nbr not in levels
            )
    return True


def spread_of_infection(graph: Graph, src: int, time: int) -> int:
    """How many vertices are infected after ``time`` steps starting at ``src``.

    The source is infected at step 1 and each step reaches one edge further.
    """
    visited: set[int] = set()
    queue = deque([(src, 1)])
    count = 0
    while queue:
        vertex, step = queue.popleft()
        if vertex in visited:
            continue
        visited.add(vertex)
        if step > time:
            return count
        count += 1
        queue.extend(
            (e.nbr, step + 1) for e in graph.neighbours(vertex) if e.nbr not in visited
        )
    return count


def perfect_friend_pairs(graph: Graph) -> int:
    """The number of vertex pairs whose members lie in different components."""
    pairs = 0
    seen = 0
    for component in connected_components(graph):
        pairs += seen * len(component)
        seen += len(component)
    return pairs