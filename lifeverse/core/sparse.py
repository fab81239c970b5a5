"""
Sparse Frontier-Tracking Universes

Only alive cells are stored, keyed by flat position. Each generation scans
the alive cells and their immediate dead neighbors (the frontier); nothing
else can change state. A dead cell with exactly 3 alive neighbors is seen
exactly 3 times while scanning, once from each of those neighbors.

Two stores are provided:
- OrderedCellStore: SortedDict keyed by flat position, O(log n)
- HashCellStore: dict keyed by flat position, O(1) average
"""

import logging
from collections import Counter
from typing import Iterable, Iterator, List, Type

from sortedcontainers import SortedDict

from .cell import Cell
from .rules import neighbor_positions, next_state, unflatten
from .universe import Universe, Position

logger = logging.getLogger(__name__)


class OrderedCellStore:
    """Alive cells in a SortedDict keyed by flat position.

    Lookup, insert and erase are O(log n); iteration is ascending by flat
    position.
    """

    def __init__(self):
        self._cells: SortedDict = SortedDict()

    def __contains__(self, flat_pos: int) -> bool:
        return flat_pos in self._cells

    def add(self, cell: Cell) -> None:
        """Insert cell unless its position is already present."""
        self._cells.setdefault(cell.flat_pos, cell)

    def discard(self, flat_pos: int) -> None:
        self._cells.pop(flat_pos, None)

    def bulk_load(self, cells: List[Cell]) -> None:
        """Add many cells in one update; positions already present are kept."""
        new_cells = {}
        for cell in cells:
            if cell.flat_pos not in self._cells:
                new_cells.setdefault(cell.flat_pos, cell)
        self._cells.update(new_cells)

    def clear(self) -> None:
        self._cells.clear()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)


class HashCellStore:
    """Alive cells in a dict keyed by flat position (insertion ordered)."""

    def __init__(self):
        self._cells: dict[int, Cell] = {}

    def __contains__(self, flat_pos: int) -> bool:
        return flat_pos in self._cells

    def add(self, cell: Cell) -> None:
        self._cells.setdefault(cell.flat_pos, cell)

    def discard(self, flat_pos: int) -> None:
        self._cells.pop(flat_pos, None)

    def bulk_load(self, cells: List[Cell]) -> None:
        for cell in cells:
            self._cells.setdefault(cell.flat_pos, cell)

    def clear(self) -> None:
        self._cells.clear()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)


class SparseUniverse(Universe):
    """Universe storing only alive cells, memory proportional to population.

    Subclasses pick the alive-cell store through ``store_class``.
    """

    store_class: Type = HashCellStore

    def __init__(self, rows: int, cols: int):
        super().__init__(rows, cols)
        self._cells = self.store_class()
        self._next = self.store_class()  # vacated store, reused every generation
        logger.debug(f"Created {type(self).__name__} {self._rows}x{self._cols}")

    def advance(self) -> None:
        """Apply one generation by scanning alive cells and their frontier."""
        rows, cols = self._rows, self._cols
        current = self._cells
        frontier: Counter = Counter()  # dead flat position -> alive neighbor hits
        next_cells = []

        for cell in current:
            alive_neighbors = 0
            for nr, nc in neighbor_positions(cell.row, cell.col, rows, cols):
                flat_pos = nr * cols + nc
                if flat_pos in current:
                    alive_neighbors += 1
                else:
                    frontier[flat_pos] += 1
            if next_state(True, alive_neighbors):
                next_cells.append(cell)

        for flat_pos, hits in frontier.items():
            if next_state(False, hits):
                row, col = unflatten(flat_pos, cols)
                next_cells.append(Cell(row, col, flat_pos, True))

        self._next.bulk_load(next_cells)
        self._cells, self._next = self._next, self._cells
        self._next.clear()
        self.generation += 1

    def is_cell_alive(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return self.flat_pos(row, col) in self._cells

    def make_cell_alive(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._cells.add(Cell(row, col, self.flat_pos(row, col), True))

    def make_cell_dead(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._cells.discard(self.flat_pos(row, col))

    def get_alive_cells_pos(self) -> List[Position]:
        return [cell.pos for cell in self._cells]

    def alive_count(self) -> int:
        return len(self._cells)

    def seed(self, positions: Iterable[Position]) -> None:
        """Make every (row, col) in positions alive.

        All positions are bounds-checked before the store is touched.
        """
        cells = []
        for row, col in positions:
            self._check_bounds(row, col)
            cells.append(Cell(row, col, self.flat_pos(row, col), True))
        self._cells.bulk_load(cells)

    def _replace_alive_cells(self, positions: List[Position]) -> None:
        self._cells.clear()
        self.seed(positions)


class OrderedSparseUniverse(SparseUniverse):
    """Sparse universe over sorted flat positions; alive cells reported in
    ascending flat-position order."""

    store_class = OrderedCellStore


class HashSparseUniverse(SparseUniverse):
    """Sparse universe over a hash map; alive cells reported in insertion
    order."""

    store_class = HashCellStore
