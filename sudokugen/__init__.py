# -*- coding: utf-8 -*-
"""Unique-solution Sudoku generator."""
__version__ = "0.1.0"

from sudokugen.common.grid import Grid, InvalidSizeError
from sudokugen.common.peers import PeerIndex, get_peer_index
from sudokugen.engine.generator import GenerationResult, PuzzleGenerator, generate_puzzle
from sudokugen.engine.propagation import InvalidPlacementError, apply_value, place
from sudokugen.engine.solver import collect_solutions, count_solutions, solve

__all__ = [
    "Grid",
    "InvalidSizeError",
    "PeerIndex",
    "get_peer_index",
    "GenerationResult",
    "PuzzleGenerator",
    "generate_puzzle",
    "InvalidPlacementError",
    "apply_value",
    "place",
    "collect_solutions",
    "count_solutions",
    "solve",
]
