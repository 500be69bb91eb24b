# -*- coding: utf-8 -*-
"""Constraint propagation and value placement.

Both operations return a new grid and leave their input untouched. A
contradiction (some cell left without candidates) is reported as `None`:
it is the normal way a search branch dies, not an error.
"""
from typing import Optional, Sequence

from sudokugen.common.grid import Grid
from sudokugen.common.peers import PeerIndex, get_peer_index
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


class InvalidPlacementError(ValueError):
    """Raised when a placement names a cell or value outside the grid."""


def _check_placement(grid: Grid, cell: int, value: int) -> None:
    if not 0 <= cell < grid.cell_count:
        raise InvalidPlacementError(f"Cell {cell} out of range for a {grid.size}x{grid.size} grid")
    if not 1 <= value <= grid.size:
        raise InvalidPlacementError(f"Value {value} out of range 1..{grid.size}")


def apply_value(
    grid: Grid, cell: int, value: int, peer_index: Optional[PeerIndex] = None
) -> Optional[Grid]:
    """
    Commit `value` to `cell` and strike it from every peer.

    Args:
        grid (`Grid`): The grid to start from. Not modified.
        cell (`int`): Row-major cell index.
        value (`int`): Value to commit; the caller checks it is a candidate.
        peer_index (`PeerIndex`): Peer lookup to use. Defaults to the shared one.

    Returns:
        `Optional[Grid]`: The propagated clone, or None if a peer ran out of
        candidates.
    """
    if peer_index is None:
        peer_index = get_peer_index()
    result = grid.clone()
    cells = result.cells
    cells[cell] = (value,)
    for peer in peer_index.peers(grid.size, cell):
        cands = cells[peer]
        if value not in cands:
            continue
        if len(cands) == 1:
            return None
        cells[peer] = tuple(v for v in cands if v != value)
    return result


def place(
    grid: Grid, cell: int, value: int, peer_index: Optional[PeerIndex] = None
) -> Optional[Grid]:
    """
    Place `value` at `cell`, propagate, and cascade into forced singles.

    Every peer that was undetermined before the placement and is left with a
    single candidate afterwards is placed in turn, so its own peers lose that
    value too.

    Returns:
        `Optional[Grid]`: The fully propagated grid, or None on contradiction,
        including when `value` is not a candidate of `cell`.

    Raises:
        InvalidPlacementError: If `cell` or `value` lies outside the grid.
    """
    _check_placement(grid, cell, value)
    if value not in grid.cells[cell]:
        return None
    if peer_index is None:
        peer_index = get_peer_index()

    result = apply_value(grid, cell, value, peer_index)
    if result is None:
        return None

    singularized = [
        peer
        for peer in peer_index.peers(grid.size, cell)
        if len(grid.cells[peer]) > 1 and len(result.cells[peer]) == 1
    ]
    for peer in singularized:
        result = place(result, peer, result.cells[peer][0], peer_index)
        if result is None:
            return None
    return result


def grid_from_rows(
    rows: Sequence[Sequence[int]], peer_index: Optional[PeerIndex] = None
) -> Optional[Grid]:
    """
    Build a propagated grid from clue rows, 0 marking an empty cell.

    Returns None if the clues contradict each other.
    """
    size = len(rows)
    grid: Optional[Grid] = Grid.empty(size)
    for r, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"Row {r} has {len(row)} entries, expected {size}")
        for c, value in enumerate(row):
            if value == 0:
                continue
            grid = place(grid, r * size + c, value, peer_index)
            if grid is None:
                logger.debug(f"Clue {value} at ({r}, {c}) contradicts earlier clues")
                return None
    return grid


def replay(
    size: int, placements: Sequence[Sequence[int]], peer_index: Optional[PeerIndex] = None
) -> Optional[Grid]:
    """Apply `(cell, value)` placements in order to an empty grid."""
    grid: Optional[Grid] = Grid.empty(size)
    for cell, value in placements:
        grid = place(grid, cell, value, peer_index)
        if grid is None:
            return None
    return grid
