"""Backtracking searches: Hamiltonian cycles, N queens and the rat in a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

BLOCKED = "X"


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every Hamiltonian cycle from ``start`` in an adjacency matrix.

    Each cycle lists vertex indices and begins and ends with ``start``.
    Neighbours are tried in ascending index order.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("the adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is outside 0..{size - 1}")
    visited = [False] * size
    visited[start] = True
    path = [start]

    def extend(vertex: int) -> Iterator[list[int]]:
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected != 1:
                continue
            if neighbour == start and len(path) == size:
                yield [*path, start]
            elif not visited[neighbour]:
                visited[neighbour] = True
                path.append(neighbour)
                yield from extend(neighbour)
                path.pop()
                visited[neighbour] = False

    yield from extend(start)


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """First placement of ``n`` non-attacking queens, column by column.

    Returns a board of 0s and 1s, or None when no placement exists.
    """
    if n < 0:
        raise ValueError("the board size must not be negative")
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row + col in rising or row - col in falling:
                continue
            board[row][col] = 1
            rows.add(row)
            rising.add(row + col)
            falling.add(row - col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            rising.discard(row + col)
            falling.discard(row - col)
        return False

    return board if place(0) else None


def rat_in_maze_paths(maze: Sequence[str]) -> Iterator[list[list[int]]]:
    """Yield every right/down path from the top-left to the bottom-right cell.

    Cells marked ``X`` are blocked, except that reaching the destination cell
    always ends a path. Each path is a grid with 1 on the cells it uses.
    """
    if not maze or not maze[0]:
        raise ValueError("the maze must have at least one cell")
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("every maze row must have the same length")
    last_row = len(maze) - 1
    last_col = width - 1
    solution = [[0] * width for _ in maze]

    def walk(row: int, col: int) -> Iterator[list[list[int]]]:
        if row == last_row and col == last_col:
            solution[row][col] = 1
            yield [line[:] for line in solution]
            solution[row][col] = 0
            return
        if row > last_row or col > last_col or maze[row][col] == BLOCKED:
            return
        solution[row][col] = 1
        yield from walk(row, col + 1)
        yield from walk(row + 1, col)
        solution[row][col] = 0

    yield from walk(0, 0)