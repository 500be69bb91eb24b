# -*- coding: utf-8 -*-
"""Random puzzle generation with a uniqueness check after every clue."""
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from sudokugen.common.constants import DEFAULT_SIZE, UNIQUENESS_PROBE_LIMIT
from sudokugen.common.grid import Grid, box_size_of
from sudokugen.common.peers import PeerIndex, get_peer_index
from sudokugen.engine.propagation import place
from sudokugen.engine.solver import collect_solutions
from sudokugen.utils.log import get_logger


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    solution: Grid
    # (cell, value) placements; replaying them through `place` gives a grid
    # whose only completion is `solution`
    clues: List[Tuple[int, int]] = field(default_factory=list)
    attempts: int = 0
    rejected: int = 0

    def puzzle_rows(self) -> List[List[int]]:
        """The clue board, 0 marking a cell without a clue."""
        size = self.solution.size
        rows = [[0] * size for _ in range(size)]
        for cell, value in self.clues:
            r, c = divmod(cell, size)
            rows[r][c] = value
        return rows


class PuzzleGenerator:
    """
    Sudoku generator that adds random clues until the solution is unique.

    Each round picks an undetermined cell and one of its candidates at
    random, places it, and counts solutions of the result with a cap of two:

    - no solution: the clue is dropped and the round is retried;
    - one solution: that solution is returned;
    - two: the clue is kept and another round starts.

    Checking after every clue keeps each search shallow. There is no cap on
    the number of rounds; a size with very expensive searches simply takes
    long to return.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        peer_index: Optional[PeerIndex] = None,
    ):
        """
        Args:
            size (int): Side length of the grid, a perfect square (9 for 9x9).
            seed (int): Seed for a private random generator. Ignored if `rng` is given.
            rng (random.Random): Random generator to draw cells and values from.
            peer_index (PeerIndex): Peer lookup. Defaults to the shared one.
        """
        box_size_of(size)
        self.size = size
        self.rng = rng or random.Random(seed)
        self.peer_index = get_peer_index() if peer_index is None else peer_index
        self.logger = get_logger(__name__)

    def generate(self) -> GenerationResult:
        """
        Generate a solved grid together with the clues that pin it down.

        Returns:
            GenerationResult: the unique solution and the accepted clues.
        """
        grid = Grid.empty(self.size)
        clues: List[Tuple[int, int]] = []
        attempts = rejected = 0

        while True:
            open_cells = grid.undetermined_cells()
            if not open_cells:
                solution = grid
                break

            cell = self.rng.choice(open_cells)
            value = self.rng.choice(grid.cells[cell])
            attempts += 1

            trial = place(grid, cell, value, self.peer_index)
            if trial is None:
                rejected += 1
                continue

            solutions = collect_solutions(trial, UNIQUENESS_PROBE_LIMIT, self.peer_index)
            if not solutions:
                rejected += 1
                self.logger.debug(f"Clue {value}@{cell} leaves no solution, retrying")
                continue

            clues.append((cell, value))
            if len(solutions) == 1:
                solution = solutions[0]
                break
            grid = trial
            self.logger.debug(
                f"Clue {value}@{cell} accepted, {len(grid.undetermined_cells())} cells open"
            )

        self.logger.info(
            f"Generated {self.size}x{self.size} grid with {len(clues)} clues "
            f"({attempts} attempts, {rejected} rejected)"
        )
        return GenerationResult(
            solution=solution, clues=clues, attempts=attempts, rejected=rejected
        )


def generate_puzzle(size: int = DEFAULT_SIZE, seed: Optional[int] = None) -> Grid:
    """Generate a solved grid that is the unique completion of random clues."""
    return PuzzleGenerator(size=size, seed=seed).generate().solution
