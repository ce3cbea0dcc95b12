"""Path enumeration, shortest paths, spanning trees and topological order."""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from itertools import count

from graphwork.graph import Graph


def hamiltonian_paths(graph: Graph, src: int) -> Iterator[str]:
    """Yield every path from ``src`` that visits each vertex exactly once.

    A path is the concatenation of its vertex numbers, followed by ``*`` when
    its last vertex is adjacent to ``src`` (it closes a cycle) and ``.``
    otherwise.
    """
    graph.neighbours(src)
    vertex_count = len(graph)
    visited: set[int] = set()

    def walk(vertex: int, path: str) -> Iterator[str]:
        if len(visited) == vertex_count - 1:
            closes = any(e.nbr == vertex for e in graph.neighbours(src))
            yield path + ("*" if closes else ".")
            return
        visited.add(vertex)
        for edge in graph.neighbours(vertex):
            if edge.nbr not in visited:
                yield from walk(edge.nbr, path + str(edge.nbr))
        visited.discard(vertex)

    yield from walk(src, str(src))


def shortest_paths(graph: Graph, src: int) -> Iterator[tuple[int, str, int]]:
    """Yield ``(vertex, path, weight)`` for each vertex reachable from ``src``.

    Vertices come out in order of increasing total weight; equal weights go
    to the smaller vertex first, then to the longer path.
    """
    graph.neighbours(src)
    visited: set[int] = set()
    order = count()
    start = str(src)
    heap = [(0, src, -len(start), next(order), start)]
    while heap:
        weight, vertex, _, _, path = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        yield vertex, path, weight
        for edge in graph.neighbours(vertex):
            if edge.nbr not in visited:
                next_path = path + str(edge.nbr)
                heapq.heappush(
                    heap,
                    (weight + edge.wt, edge.nbr, -len(next_path), next(order), next_path),
                )


def minimum_spanning_edges(graph: Graph) -> Iterator[tuple[int, int, int]]:
    """Yield ``(vertex, parent, weight)`` for the edges Prim's algorithm picks.

    The tree grows from vertex 0 and covers the component holding it.
    """
    if len(graph) == 0:
        return
    visited: set[int] = set()
    order = count()
    heap = [(0, next(order), 0, -1)]
    while heap:
        weight, _, vertex, parent = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        if parent != -1:
            yield vertex, parent, weight
        for edge in graph.neighbours(vertex):
            if edge.nbr not in visited:
                heapq.heappush(heap, (edge.wt, next(order), edge.nbr, edge.src))


def topological_order(graph: Graph) -> list[int]:
    """Vertices in reverse depth-first postorder, starting from 0 upwards."""
    postorder: list[int] = []
    visited: set[int] = set()
    for start in range(len(graph)):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter(graph.neighbours(start)))]
        while stack:
            vertex, edges = stack[-1]
            for edge in edges:
                if edge.nbr not in visited:
                    visited.add(edge.nbr)
                    stack.append((edge.nbr, iter(graph.neighbours(edge.nbr))))
                    break
            else:
                stack.pop()
                postorder.append(vertex)
    postorder.reverse()
    return postorder