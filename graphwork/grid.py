"""Searches on square boards and rectangular grids."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Board = tuple[tuple[int, ...], ...]

_KNIGHT_MOVES = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)


def knights_tours(n: int, row: int, col: int) -> Iterator[Board]:
    """Yield every knight's tour of an ``n`` by ``n`` board from ``(row, col)``.

    Each board holds the step number, from 1 to ``n * n``, at which the
    knight lands on each square.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    board = [[0] * n for _ in range(n)]
    last = n * n

    def place(r: int, c: int, step: int) -> Iterator[Board]:
        if not (0 <= r < n and 0 <= c < n) or board[r][c]:
            return
        board[r][c] = step
        if step == last:
            yield tuple(tuple(line) for line in board)
        else:
            for dr, dc in _KNIGHT_MOVES:
                yield from place(r + dr, c + dc, step + 1)
        board[r][c] = 0

    yield from place(row, col, 1)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board one row per line, each value followed by a space."""
    rows = ("".join(f"{value} " for value in line) + "\n" for line in board)
    return "".join(rows) + "\n"


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count the 4-connected regions of cells holding 0."""
    seen: set[tuple[int, int]] = set()

    def is_land(r: int, c: int) -> bool:
        return 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == 0

    islands = 0
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value != 0 or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for nr, nc in ((cr - 1, cc), (cr, cc + 1), (cr + 1, cc), (cr, cc - 1)):
                    if (nr, nc) not in seen and is_land(nr, nc):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return islands