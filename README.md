# graphwork

Classic graph and grid algorithms in plain Python, with no third-party
dependencies, plus a `graphwork` command that solves one problem read from
standard input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `graphwork.graph`

- `Edge(src, nbr, wt=0)`: a frozen record of an edge leaving `src`
  towards `nbr` with weight `wt`.
- `Graph(vertex_count, directed=False)`: an adjacency-list graph on the
  vertices `0 .. vertex_count - 1`.
  - `add_edge(src, nbr, wt=0)` adds an edge; an undirected graph also gets
    the reverse edge.
  - `neighbours(vertex)` returns the edges leaving `vertex`, in the order
    they were added.
  - `len(graph)` is the number of vertices.
  - A negative vertex count, or a vertex outside the range, raises
    `ValueError`.
- `read_graph(tokens, weighted=True, directed=False)`: reads a vertex
  count, an edge count and then `src nbr wt` (or `src nbr` when not
  weighted) for each edge. Pass an iterator to keep reading what follows
  the edges. Missing or non-integer tokens raise `ValueError`.

### `graphwork.traversal`

- `breadth_first(graph, src)` and `iterative_dfs(graph, src)` yield
  `(vertex, path)` for every vertex reachable from `src`, in breadth-first
  order or in stack-based depth-first order. The path is the vertex
  numbers along the way written one after another (`"012"`).
- `has_path(graph, src, dest)`: whether `dest` is reachable from `src`.
- `connected_components(graph)`: a list of components, each in depth-first
  order from its smallest vertex.
- `is_connected(graph)`: whether there is at most one component.
- `is_cyclic(graph)`: whether any component contains a cycle.
- `is_bipartite(graph)`: whether the graph can be two-coloured.
- `spread_of_infection(graph, src, time)`: how many vertices are infected
  after `time` steps, the source being infected at step 1 and each step
  reaching one edge further.
- `perfect_friend_pairs(graph)`: how many pairs of vertices lie in
  different components.

### `graphwork.paths`

- `hamiltonian_paths(graph, src)` yields every path from `src` that visits
  each vertex exactly once, as its vertex numbers followed by `*` when the
  last vertex is adjacent to `src` (a cycle) and `.` otherwise.
- `shortest_paths(graph, src)` yields `(vertex, path, weight)` in order of
  increasing total weight (Dijkstra); ties go to the smaller vertex, then
  to the longer path.
- `minimum_spanning_edges(graph)` yields `(vertex, parent, weight)` for the
  edges Prim's algorithm picks, growing from vertex 0 over its component.
- `topological_order(graph)`: the vertices in reverse depth-first
  postorder, starting searches from vertex 0 upwards.

### `graphwork.grid`

- `knights_tours(n, row, col)` yields every knight's tour of an `n` by `n`
  board from `(row, col)`, each as a tuple of rows holding the step number
  (1 to `n * n`) at which the knight lands on each square.
- `format_board(board)` renders a board one row per line, every value
  followed by a space, with a blank line after the board.
- `count_islands(grid)` counts the 4-connected regions of cells holding `0`.

## Using it from Python

```python
from graphwork.graph import Graph
from graphwork.traversal import connected_components, has_path
from graphwork.paths import shortest_paths

graph = Graph(4, False)
graph.add_edge(0, 1, 10)
graph.add_edge(1, 2, 5)

print(has_path(graph, 0, 2))        # True
print(connected_components(graph))  # [[0, 1, 2], [3]]
for vertex, path, weight in shortest_paths(graph, 0):
    print(vertex, path, weight)
```

Grid problems take plain nested lists:

```python
from graphwork.grid import count_islands

grid = [
    [0, 1, 0],
    [1, 1, 0],
    [0, 1, 1],
]
print(count_islands(grid))  # 3
```

## Command line

```
graphwork COMMAND < input.txt
```

The input is whitespace-separated integers. Most commands start with a
graph: the vertex count, the edge count, then `src nbr wt` for each edge.
Invalid input prints an error to standard error and exits with status 1.

| Command       | Input after the graph      | Output                                  |
|---------------|----------------------------|-----------------------------------------|
| `bfs`         | source                     | one `vertex@path` line per vertex        |
| `dfs`         | source                     | one `vertex@path` line per vertex        |
| `has-path`    | source, destination        | `true` or `false`                        |
| `components`  | nothing                    | the components as a list, e.g. `[[0, 1], [2, 3]]` |
| `connected`   | nothing                    | `true` or `false`                        |
| `cyclic`      | nothing                    | `true` or `false`                        |
| `bipartite`   | nothing                    | `true` or `false`                        |
| `infection`   | source, time               | the number of infected vertices          |
| `hamiltonian` | source                     | one path per line, ending in `*` or `.`  |
| `dijkstra`    | source                     | `vertex via path @ weight` lines         |
| `prims`       | nothing                    | `[vertex-parent@weight]` lines           |

Three commands read their graph without weights (`src nbr` per edge):

- `friends`: an undirected graph; prints the number of pairs in different
  components.
- `topo`: a directed graph; prints one vertex per line in topological order.

Two commands read no graph:

- `knights`: board size, start row, start column; prints every tour.
- `islands`: row count, column count, then the cells row by row; prints
  the number of islands.

Example:

```
$ echo "3 2  0 1 10  1 2 10  0" | graphwork bfs
0@0
1@01
2@012
```

Run `graphwork --help` for the list of commands.

## Limits

- Vertices are always the integers `0 .. n - 1`; there are no named
  vertices and no storage of graphs beyond memory.
- Paths are written as vertex numbers with no separator, so they are
  ambiguous once a graph has ten or more vertices.
- Hamiltonian paths and knight's tours are found by exhaustive search and
  grow very slowly with size.