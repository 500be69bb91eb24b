# -*- coding: utf-8 -*-
"""Presentation of a solved grid: masking and rendering.

Nothing here feeds back into generation; the grid passed in is already the
unique solution and masking only hides cells for display.
"""
import json
import math
import random
from typing import List, Optional

from sudokugen.common.constants import DEFAULT_BLANK_COUNT, DEFAULT_PLACEHOLDER
from sudokugen.common.grid import Grid


def choose_blank_cells(size: int, blank_count: int, rng: Optional[random.Random] = None) -> List[int]:
    """Sample `blank_count` distinct cells uniformly, returned in ascending order."""
    total = size * size
    if not 0 <= blank_count <= total:
        raise ValueError(f"blank_count must be within 0..{total}, got {blank_count}")
    rng = rng or random.Random()
    return sorted(rng.sample(range(total), blank_count))


def mask_grid(
    grid: Grid,
    blank_count: int = DEFAULT_BLANK_COUNT,
    placeholder: str = DEFAULT_PLACEHOLDER,
    rng: Optional[random.Random] = None,
) -> List[List[str]]:
    """
    Render a solved grid as rows of strings with some cells hidden.

    Args:
        grid (`Grid`): A solved grid.
        blank_count (`int`): How many cells to replace with `placeholder`.
        placeholder (`str`): Glyph shown in hidden cells.
        rng (`random.Random`): Source of randomness for picking hidden cells.

    Returns:
        `List[List[str]]`: N rows of N cell strings.
    """
    if not grid.is_solved():
        raise ValueError("Only a solved grid can be masked for display")
    blanks = set(choose_blank_cells(grid.size, blank_count, rng))
    cells = [
        placeholder if i in blanks else str(cands[0]) for i, cands in enumerate(grid.cells)
    ]
    return [cells[r * grid.size : (r + 1) * grid.size] for r in range(grid.size)]


def to_json(rows: List[List[str]]) -> str:
    return json.dumps({"puzzle": rows})


def to_text(rows: List[List[str]]) -> str:
    """Space separated rows, with a rule between bands of boxes."""
    size = len(rows)
    box = max(math.isqrt(size), 1)
    width = max((len(cell) for row in rows for cell in row), default=1)
    lines = []
    for r, row in enumerate(rows):
        groups = [
            " ".join(cell.rjust(width) for cell in row[c : c + box]) for c in range(0, size, box)
        ]
        lines.append(" | ".join(groups))
        if (r + 1) % box == 0 and r + 1 < size:
            lines.append("-+-".join("-" * len(g) for g in groups))
    return "\n".join(lines)
