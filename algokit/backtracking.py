"""Backtracking solvers: sudoku, N queens and the rat in a maze."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

Grid = list[list[int]]


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Return whether ``num`` may go at ``(row, col)`` of a 9x9 sudoku board."""
    if num in board[row]:
        return False
    if any(line[col] == num for line in board):
        return False
    top, left = row - row % 3, col - col % 3
    return all(
        board[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
    )


def _check_sudoku(board: Sequence[Sequence[int]]) -> Grid:
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9x9")
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("sudoku cells must be 0 (empty) to 9")
    return grid


def _fill(grid: Grid) -> bool:
    cell = next(((r, c) for r in range(9) for c in range(9) if grid[r][c] == 0), None)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, 10):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid):
                return True
            grid[row][col] = 0
    return False


def solve_sudoku(board: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Return a solved copy of a sudoku board (0 marks empty), or None."""
    grid = _check_sudoku(board)
    return grid if _fill(grid) else None


def solve_n_queens(n: int) -> Optional[Grid]:
    """Place ``n`` non-attacking queens; return the 0/1 board, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            board[row][col] = 1
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            board[row][col] = 0
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    return board if place(0) else None


def solve_rat_maze(maze: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Find a path moving down or right from the top-left to the bottom-right.

    Open cells hold 1. The returned grid marks the path with 1; None if no
    path exists. Reaching the bottom-right cell ends the search.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    solution = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            solution[x][y] = 1
            return True
        if x < n and y < n and grid[x][y] == 1:
            solution[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None