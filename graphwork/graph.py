"""Adjacency-list graphs with integer vertices and weighted edges."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An edge leaving ``src`` towards ``nbr`` with weight ``wt``."""

    src: int
    nbr: int
    wt: int = 0


class Graph:
    """A graph on the vertices ``0 .. vertex_count - 1``.

    Neighbours are kept in the order their edges were added.
    """

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self.directed = directed
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(
                f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}"
            )

    def add_edge(self, src: int, nbr: int, wt: int = 0) -> None:
        """Add an edge; an undirected graph also gets the reverse edge."""
        self._check(src)
        self._check(nbr)
        self._adjacency[src].append(Edge(src, nbr, wt))
        if not self.directed:
            self._adjacency[nbr].append(Edge(nbr, src, wt))

    def neighbours(self, vertex: int) -> tuple[Edge, ...]:
        """The edges leaving ``vertex``, in insertion order."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])


def _next_int(tokens: Iterator, what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except (TypeError, ValueError):
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def read_graph(
    tokens: Iterable, weighted: bool = True, directed: bool = False
) -> Graph:
    """Read a vertex count, an edge count and the edges from ``tokens``.

    Each edge is ``src nbr wt`` when ``weighted`` and ``src nbr`` otherwise.
    Pass an iterator to go on reading whatever follows the edges.
    """
    it = iter(tokens)
    graph = Graph(_next_int(it, "the vertex count"), directed)
    edge_count = _next_int(it, "the edge count")
    if edge_count < 0:
        raise ValueError(f"edge count must not be negative, got {edge_count}")
    for _ in range(edge_count):
        src = _next_int(it, "an edge source")
        nbr = _next_int(it, "an edge target")
        wt = _next_int(it, "an edge weight") if weighted else 0
        graph.add_edge(src, nbr, wt)
    return graph