# -*- coding: utf-8 -*-
"""Memoized peer lookup: which cells share a row, column or box."""
import threading
from typing import Dict, Tuple

from sudokugen.common.grid import box_size_of


class PeerIndex:
    """
    Cache of peer sets keyed by `(size, cell)`.

    Peer sets depend only on geometry, so one index can serve every grid and
    every generation run in the process. Writes are serialized; when two
    threads miss on the same key the first stored result wins.
    """

    def __init__(self):
        self._cache: Dict[Tuple[int, int], Tuple[int, ...]] = {}
        self._lock = threading.Lock()
        self.compute_count = 0

    @staticmethod
    def is_peer(size: int, c1: int, c2: int) -> bool:
        """Whether two distinct cells share a row, column or box."""
        if c1 == c2:
            return False
        box = box_size_of(size)
        r1, col1 = divmod(c1, size)
        r2, col2 = divmod(c2, size)
        return (
            r1 == r2
            or col1 == col2
            or (r1 // box == r2 // box and col1 // box == col2 // box)
        )

    def peers(self, size: int, cell: int) -> Tuple[int, ...]:
        """
        Get the peers of `cell` in a grid of side `size`.

        Args:
            size (`int`): Grid side length, a perfect square.
            cell (`int`): Row-major cell index.

        Returns:
            `Tuple[int, ...]`: Ascending indices of every other cell in the
            same row, column or box.
        """
        key = (size, cell)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        if not 0 <= cell < size * size:
            raise IndexError(f"Cell {cell} out of range for size {size}")
        computed = tuple(c for c in range(size * size) if self.is_peer(size, cell, c))
        with self._lock:
            self.compute_count += 1
            return self._cache.setdefault(key, computed)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self.compute_count = 0

    def __len__(self) -> int:
        return len(self._cache)


_default_index = PeerIndex()


def get_peer_index() -> PeerIndex:
    """Return the process-wide shared peer index."""
    return _default_index
