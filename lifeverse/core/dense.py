"""
Dense Double-Buffered Universe

Stores every cell of the grid in two numpy boolean buffers. advance() reads
only the current buffer, writes the next generation into the other one and
then flips which buffer is current. Nothing is copied or reallocated per
generation.

Unlike the sparse universes, advance() does not call neighbor_positions()
per cell. It adds one shifted slice of the grid per entry of
NEIGHBOR_OFFSETS, and clipping each slice to the grid truncates neighbors
at the boundary exactly as neighbor_positions() does. The per-cell helper
is still used by count_alive_neighbors().
"""

import numpy as np
from typing import List, Tuple
import logging

from .cell import Cell
from .rules import NEIGHBOR_OFFSETS
from .universe import Universe, Position

logger = logging.getLogger(__name__)


def _shift_slices(offset: int, size: int) -> Tuple[slice, slice]:
    """Target and source slices for adding a neighbor offset along one axis.

    Cells whose neighbor would fall outside [0, size) are excluded, which is
    the same boundary truncation as rules.neighbor_positions.
    """
    target = slice(max(0, -offset), size - max(0, offset))
    source = slice(max(0, offset), size + min(0, offset))
    return target, source


class DenseUniverse(Universe):
    """Universe storing every cell, O(rows x cols) memory.

    Attributes:
        generation: Number of advance() calls since construction or load
    """

    def __init__(self, rows: int, cols: int):
        """Allocate both buffers, all cells dead.

        Args:
            rows: Row count
            cols: Column count
        """
        super().__init__(rows, cols)

        shape = (self._rows, self._cols)
        self._buffers = (np.zeros(shape, dtype=bool), np.zeros(shape, dtype=bool))
        self._current = 0

        # Scratch space reused by every advance()
        self._counts = np.zeros(shape, dtype=np.uint8)
        self._scratch = np.zeros(shape, dtype=bool)

        # (target, source) slice pairs for each neighbor offset
        self._shifts = []
        for dr, dc in NEIGHBOR_OFFSETS:
            row_target, row_source = _shift_slices(dr, self._rows)
            col_target, col_source = _shift_slices(dc, self._cols)
            self._shifts.append(((row_target, col_target), (row_source, col_source)))

        logger.debug(f"Created dense universe {self._rows}x{self._cols}")

    @property
    def _grid(self) -> np.ndarray:
        return self._buffers[self._current]

    def advance(self) -> None:
        """Apply one generation of Conway's rules to the whole grid."""
        current = self._buffers[self._current]
        nxt = self._buffers[1 - self._current]
        counts = self._counts
        scratch = self._scratch

        counts.fill(0)
        for target, source in self._shifts:
            counts[target] += current[source]

        # Birth or survival with 3 neighbors
        np.equal(counts, 3, out=nxt)
        # Survival with 2 neighbors
        np.equal(counts, 2, out=scratch)
        np.logical_and(scratch, current, out=scratch)
        np.logical_or(nxt, scratch, out=nxt)

        self._current = 1 - self._current
        self.generation += 1

    def cell(self, row: int, col: int) -> Cell:
        """Snapshot of the cell at (row, col) in the current generation."""
        self._check_bounds(row, col)
        return Cell(row, col, self.flat_pos(row, col), bool(self._grid[row, col]))

    def is_cell_alive(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self._grid[row, col])

    def make_cell_alive(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._grid[row, col] = True

    def make_cell_dead(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._grid[row, col] = False

    def get_alive_cells_pos(self) -> List[Position]:
        """Alive positions in row-major order."""
        alive_rows, alive_cols = np.nonzero(self._grid)
        return list(zip(alive_rows.tolist(), alive_cols.tolist()))

    def alive_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def to_array(self) -> np.ndarray:
        """Copy of the current generation as a boolean array."""
        return self._grid.copy()

    def _replace_alive_cells(self, positions: List[Position]) -> None:
        self._grid.fill(False)
        self.seed(positions)
