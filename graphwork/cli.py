"""Command-line front end: reads a problem from standard input, prints the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from graphwork.graph import Graph, read_graph
from graphwork.grid import count_islands, format_board, knights_tours
from graphwork.paths import (
    hamiltonian_paths,
    minimum_spanning_edges,
    shortest_paths,
    topological_order,
)
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

_VERDICT = {True: "true\n", False: "false\n"}


def _read_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def _lines(items: Iterable[object]) -> str:
    return "".join(f"{item}\n" for item in items)


def _bfs(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    return _lines(f"{v}@{p}" for v, p in breadth_first(graph, src))


def _dfs(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    return _lines(f"{v}@{p}" for v, p in iterative_dfs(graph, src))


def _has_path(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    dest = _read_int(tokens, "the destination")
    graph.neighbours(dest)
    return _VERDICT[bool(has_path(graph, src, dest))]


def _components(tokens: Iterator[str]) -> str:
    return str(connected_components(read_graph(tokens)))


def _connected(tokens: Iterator[str]) -> str:
    return _VERDICT[bool(is_connected(read_graph(tokens)))]


def _cyclic(tokens: Iterator[str]) -> str:
    return _VERDICT[bool(is_cyclic(read_graph(tokens)))]


def _bipartite(tokens: Iterator[str]) -> str:
    return _VERDICT[bool(is_bipartite(read_graph(tokens)))]


def _infection(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    time = _read_int(tokens, "the time")
    graph.neighbours(src)
    return f"{spread_of_infection(graph, src, time)}\n"


def _friends(tokens: Iterator[str]) -> str:
    return f"{perfect_friend_pairs(read_graph(tokens, weighted=False))}\n"


def _hamiltonian(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    return _lines(hamiltonian_paths(graph, src))


def _dijkstra(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    src = _read_int(tokens, "the source")
    return _lines(f"{v} via {p} @ {w}" for v, p, w in shortest_paths(graph, src))


def _prims(tokens: Iterator[str]) -> str:
    graph = read_graph(tokens)
    return _lines(f"[{v}-{p}@{w}]" for v, p, w in minimum_spanning_edges(graph))


def _topo(tokens: Iterator[str]) -> str:
    graph: Graph = read_graph(tokens, weighted=False, directed=True)
    return _lines(topological_order(graph))


def _knights(tokens: Iterator[str]) -> str:
    n = _read_int(tokens, "the board size")
    row = _read_int(tokens, "the start row")
    col = _read_int(tokens, "the start column")
    return "".join(format_board(board) for board in knights_tours(n, row, col))


def _islands(tokens: Iterator[str]) -> str:
    rows = _read_int(tokens, "the row count")
    cols = _read_int(tokens, "the column count")
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    grid = [[_read_int(tokens, "a grid cell") for _ in range(cols)] for _ in range(rows)]
    return f"{count_islands(grid)}\n"


_COMMANDS: dict[str, tuple[Callable[[Iterator[str]], str], str]] = {
    "bfs": (_bfs, "breadth-first order with paths"),
    "dfs": (_dfs, "stack-based depth-first order with paths"),
    "has-path": (_has_path, "whether a destination is reachable"),
    "components": (_components, "connected components"),
    "connected": (_connected, "whether the graph is connected"),
    "cyclic": (_cyclic, "whether the graph has a cycle"),
    "bipartite": (_bipartite, "whether the graph is bipartite"),
    "infection": (_infection, "vertices infected after a given time"),
    "friends": (_friends, "pairs of people from different clubs"),
    "hamiltonian": (_hamiltonian, "Hamiltonian paths and cycles"),
    "dijkstra": (_dijkstra, "shortest paths by weight"),
    "prims": (_prims, "minimum spanning tree edges"),
    "topo": (_topo, "topological order of a directed graph"),
    "knights": (_knights, "all knight's tours from a square"),
    "islands": (_islands, "number of islands in a grid"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphwork",
        description="Solve a graph problem read from standard input.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        sub.add_parser(name, help=summary)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command on whitespace-separated integers from standard input."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    tokens = iter(sys.stdin.read().split())
    try:
        output = handler(tokens)
    except ValueError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())