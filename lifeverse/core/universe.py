"""Universe interface shared by every grid representation.

A universe is a bounded rows x cols field of cells evolving under the
standard B3/S23 rule. Concrete representations trade memory for lookup
speed: ``DenseUniverse`` stores every cell, the sparse universes store only
alive cells. All of them enumerate neighbors through ``rules.neighbor_positions``
so that they agree cell for cell on every generation.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .errors import CellOutOfBoundsError, UniverseSizeMismatchError
from .rules import neighbor_positions, validate_dimensions, flat_position
from .univ_file import read_universe_file, write_universe_file

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Universe(ABC):
    """Abstract universe of cells.

    Only (rows, cols) and the generation counter live here; storage is
    entirely up to the subclass.

    Attributes:
        generation: Number of advance() calls since construction or load
    """

    def __init__(self, rows: int, cols: int):
        """Initialize universe dimensions.

        Args:
            rows: Row count (1 to 2**32)
            cols: Column count (1 to 2**32)

        Raises:
            UniverseTooLargeError: If either dimension exceeds 2**32
            ValueError: If dimensions are not positive integers
        """
        validate_dimensions(rows, cols)
        self._rows = int(rows)
        self._cols = int(cols)
        self.generation = 0

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Universe':
        """Create a universe sized and seeded from a .univ file.

        Args:
            path: Universe file path (must end in .univ)

        Returns:
            New universe of this class with the file's dimensions
        """
        data = read_universe_file(path)
        universe = cls(data.rows, data.cols)
        universe.seed(data.alive_cells_pos)
        logger.debug(f"Created {cls.__name__} {data.rows}x{data.cols} from {path}")
        return universe

    # -- representation specific -------------------------------------------

    @abstractmethod
    def advance(self) -> None:
        """Compute and commit the next generation."""

    @abstractmethod
    def is_cell_alive(self, row: int, col: int) -> bool:
        """Whether the cell at (row, col) is alive."""

    @abstractmethod
    def make_cell_alive(self, row: int, col: int) -> None:
        """Make the cell at (row, col) alive (no-op if already alive)."""

    @abstractmethod
    def make_cell_dead(self, row: int, col: int) -> None:
        """Make the cell at (row, col) dead (no-op if already dead)."""

    @abstractmethod
    def get_alive_cells_pos(self) -> List[Position]:
        """All alive (row, col) positions in representation order."""

    @abstractmethod
    def _replace_alive_cells(self, positions: List[Position]) -> None:
        """Drop every alive cell and make exactly ``positions`` alive."""

    # -- shared -----------------------------------------------------------

    def row_count(self) -> int:
        return self._rows

    def col_count(self) -> int:
        return self._cols

    def alive_count(self) -> int:
        """Number of alive cells."""
        return len(self.get_alive_cells_pos())

    def flat_pos(self, row: int, col: int) -> int:
        """Row-major flat position of (row, col) in this universe."""
        return flat_position(row, col, self._cols)

    def neighbor_positions(self, row: int, col: int) -> List[Position]:
        """In-bounds neighbors of (row, col): 3 at a corner, 5 on an edge, 8 inside."""
        return neighbor_positions(row, col, self._rows, self._cols)

    def count_alive_neighbors(self, row: int, col: int) -> int:
        """Count alive cells among the neighbors of (row, col)."""
        self._check_bounds(row, col)
        return sum(1 for nr, nc in self.neighbor_positions(row, col)
                   if self.is_cell_alive(nr, nc))

    def step(self, generations: int = 1) -> int:
        """Advance several generations.

        Args:
            generations: Number of advance() calls

        Returns:
            Alive cell count after the last generation
        """
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.advance()
        return self.alive_count()

    def seed(self, positions: Iterable[Position]) -> None:
        """Make every (row, col) in positions alive.

        All positions are bounds-checked before any cell changes.
        """
        positions = list(positions)
        for row, col in positions:
            self._check_bounds(row, col)
        for row, col in positions:
            self.make_cell_alive(row, col)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the current alive cells to a .univ file.

        Args:
            path: Destination; the .univ extension is appended if missing

        Returns:
            Path of the written file
        """
        return write_universe_file(path, self._rows, self._cols,
                                   self.get_alive_cells_pos())

    def load(self, path: Union[str, Path]) -> None:
        """Replace the alive cells with those stored in a .univ file.

        The file is fully parsed and validated before any state changes, so
        a failed load leaves the universe untouched. A live universe is never
        resized.

        Raises:
            UniverseFileError: If the file is malformed
            UniverseSizeMismatchError: If the file's dimensions differ
        """
        data = read_universe_file(path)
        if (data.rows, data.cols) != (self._rows, self._cols):
            raise UniverseSizeMismatchError(
                f"Universe file {path} is {data.rows}x{data.cols}, "
                f"expected {self._rows}x{self._cols}")

        self._replace_alive_cells(data.alive_cells_pos)
        self.generation = 0
        logger.debug(f"Loaded {len(data.alive_cells_pos)} alive cells into "
                     f"{type(self).__name__} from {path}")

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise CellOutOfBoundsError(
                f"Coordinates ({row}, {col}) out of bounds for {self._rows}x{self._cols} universe")

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(rows={self._rows}, cols={self._cols}, "
                f"generation={self.generation})")
