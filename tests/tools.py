"""Shared fixtures for the test suite."""
from typing import List

from sudokugen.common.grid import Grid

# A classic puzzle with exactly one solution
UNIQUE_PUZZLE: List[List[int]] = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

UNIQUE_SOLUTION: List[List[int]] = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# UNIQUE_SOLUTION with the 1/3 rectangle at rows 3-4, columns 5 and 8 removed.
# Swapping the two values keeps every row, column and box valid.
TWO_SOLUTION_PUZZLE: List[List[int]] = [row[:] for row in UNIQUE_SOLUTION]
for _r, _c in [(3, 5), (3, 8), (4, 5), (4, 8)]:
    TWO_SOLUTION_PUZZLE[_r][_c] = 0

TWO_SOLUTION_ALTERNATIVE: List[List[int]] = [row[:] for row in UNIQUE_SOLUTION]
TWO_SOLUTION_ALTERNATIVE[3][5], TWO_SOLUTION_ALTERNATIVE[3][8] = 3, 1
TWO_SOLUTION_ALTERNATIVE[4][5], TWO_SOLUTION_ALTERNATIVE[4][8] = 1, 3


def solved_grid(rows: List[List[int]]) -> Grid:
    """Wrap fully filled rows as a solved grid, without propagation."""
    size = len(rows)
    return Grid(size, [(v,) for row in rows for v in row])


def full_grid(size: int, overrides=None) -> Grid:
    """An unconstrained grid with some cells replaced by explicit candidates."""
    cells = [tuple(range(1, size + 1))] * (size * size)
    for cell, cands in (overrides or {}).items():
        cells[cell] = cands
    return Grid(size, cells)
