# -*- coding: utf-8 -*-
"""The candidate-set grid that the search engine branches on."""
import math
from typing import List, Optional, Sequence, Tuple

Candidates = Tuple[int, ...]


class InvalidSizeError(ValueError):
    """Raised when a grid size is not a positive perfect square."""


def box_size_of(size: int) -> int:
    """Return the box side length for `size`, validating it on the way."""
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise InvalidSizeError(f"Grid size must be a positive integer, got {size!r}")
    box = math.isqrt(size)
    if box * box != size:
        raise InvalidSizeError(f"Grid size must be a perfect square, got {size}")
    return box


class Grid:
    """
    An N x N board of candidate sets, stored row-major.

    Each cell holds an ascending tuple of the values still possible there.
    Tuples are immutable, so a clone only needs a fresh cell list and never
    shares mutable storage with the grid it was taken from.
    """

    __slots__ = ("size", "box_size", "cells")

    def __init__(self, size: int, cells: Sequence[Sequence[int]]):
        self.size = size
        self.box_size = box_size_of(size)
        if len(cells) != size * size:
            raise ValueError(f"Expected {size * size} cells for size {size}, got {len(cells)}")
        self.cells: List[Candidates] = [tuple(sorted(set(c))) for c in cells]
        for i, cands in enumerate(self.cells):
            if not cands or cands[0] < 1 or cands[-1] > size:
                raise ValueError(f"Cell {i} must hold values in 1..{size}, got {cands}")

    @classmethod
    def empty(cls, size: int) -> "Grid":
        """Create a fully unconstrained grid."""
        full = tuple(range(1, size + 1))
        grid = cls.__new__(cls)
        grid.size = size
        grid.box_size = box_size_of(size)
        grid.cells = [full] * (size * size)
        return grid

    def clone(self) -> "Grid":
        grid = Grid.__new__(Grid)
        grid.size = self.size
        grid.box_size = self.box_size
        grid.cells = list(self.cells)
        return grid

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def candidates(self, cell: int) -> Candidates:
        return self.cells[cell]

    def is_determined(self, cell: int) -> bool:
        return len(self.cells[cell]) == 1

    def is_solved(self) -> bool:
        return all(len(c) == 1 for c in self.cells)

    def undetermined_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if len(c) >= 2]

    def value(self, cell: int) -> Optional[int]:
        """The digit of a determined cell, or None."""
        cands = self.cells[cell]
        return cands[0] if len(cands) == 1 else None

    def to_rows(self) -> List[List[int]]:
        """Render as N lists of ints, using 0 for undetermined cells."""
        values = [c[0] if len(c) == 1 else 0 for c in self.cells]
        return [values[r * self.size : (r + 1) * self.size] for r in range(self.size)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self) -> int:
        return hash((self.size, tuple(self.cells)))

    def __repr__(self) -> str:
        solved = self.cell_count - len(self.undetermined_cells())
        return f"Grid(size={self.size}, determined={solved}/{self.cell_count})"
