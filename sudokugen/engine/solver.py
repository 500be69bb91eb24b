# -*- coding: utf-8 -*-
"""Backtracking search over candidate grids."""
from typing import Callable, List, Optional

from sudokugen.common.constants import SearchSignal
from sudokugen.common.grid import Grid
from sudokugen.common.peers import PeerIndex
from sudokugen.engine.propagation import place

SolutionCallback = Callable[[Grid], SearchSignal]


def find_working_cell(grid: Grid) -> Optional[int]:
    """Return the undetermined cell with the fewest candidates (lowest index on ties)."""
    best_cell, best_count = None, None
    for i, cands in enumerate(grid.cells):
        n = len(cands)
        if n < 2:
            continue
        if best_count is None or n < best_count:
            best_cell, best_count = i, n
            if n == 2:
                break
    return best_cell


def solve(
    grid: Grid,
    on_solution: Optional[SolutionCallback] = None,
    peer_index: Optional[PeerIndex] = None,
) -> Optional[Grid]:
    """
    Search for a completion of `grid`, most constrained cell first.

    Without a callback the first solution found is returned. With a callback
    every solution is handed to it: `SearchSignal.CONTINUE` resumes the
    search, `SearchSignal.STOP` ends it and returns that solution.

    Args:
        grid (`Grid`): A propagated grid. Not modified.
        on_solution (`Callable[[Grid], SearchSignal]`): Optional solution handler.
        peer_index (`PeerIndex`): Peer lookup to use. Defaults to the shared one.

    Returns:
        `Optional[Grid]`: The solution the search stopped on, or None when
        the search space was exhausted.
    """
    cell = find_working_cell(grid)
    if cell is None:
        if on_solution is None:
            return grid
        return grid if on_solution(grid) is SearchSignal.STOP else None

    for guess in grid.cells[cell]:
        trial = place(grid, cell, guess, peer_index)
        if trial is None:
            continue
        found = solve(trial, on_solution, peer_index)
        if found is not None:
            return found
    return None


def collect_solutions(
    grid: Grid, max_count: Optional[int] = None, peer_index: Optional[PeerIndex] = None
) -> List[Grid]:
    """
    Collect up to `max_count` distinct solutions of `grid`.

    The search stops as soon as `max_count` solutions are found, so
    `max_count=2` is enough to tell a unique puzzle from an ambiguous one.
    With `max_count=None` every solution is enumerated.
    """
    if max_count is not None and max_count <= 0:
        raise ValueError(f"max_count must be positive, got {max_count}")
    solutions: List[Grid] = []

    def _accumulate(solution: Grid) -> SearchSignal:
        solutions.append(solution)
        if max_count is None or len(solutions) < max_count:
            return SearchSignal.CONTINUE
        return SearchSignal.STOP

    solve(grid, _accumulate, peer_index)
    return solutions


def count_solutions(
    grid: Grid, max_count: Optional[int] = None, peer_index: Optional[PeerIndex] = None
) -> int:
    return len(collect_solutions(grid, max_count, peer_index))
