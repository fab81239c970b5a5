"""Single addressable grid position and its liveness state."""


class Cell:
    """One cell of a universe.

    Position fields are fixed at construction. ``flat_pos`` is supplied by
    the owning universe (``row * col_count + col``) and is used as the cell's
    ordering and hashing key.

    Attributes:
        row: Row index
        col: Column index
        flat_pos: Row-major flat position
    """

    __slots__ = ('_row', '_col', '_flat_pos', '_alive')

    def __init__(self, row: int, col: int, flat_pos: int, alive: bool = False):
        self._row = row
        self._col = col
        self._flat_pos = flat_pos
        self._alive = alive

    @classmethod
    def at(cls, row: int, col: int, col_count: int, alive: bool = False) -> 'Cell':
        """Create a cell, deriving its flat position from the column count."""
        return cls(row, col, row * col_count + col, alive)

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def flat_pos(self) -> int:
        return self._flat_pos

    @property
    def pos(self) -> tuple[int, int]:
        """(row, col) pair."""
        return (self._row, self._col)

    def is_alive(self) -> bool:
        return self._alive

    def make_alive(self) -> None:
        self._alive = True

    def make_dead(self) -> None:
        self._alive = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (self._row, self._col, self._flat_pos, self._alive) == \
            (other._row, other._col, other._flat_pos, other._alive)

    def __hash__(self) -> int:
        return hash(self._flat_pos)

    def __repr__(self) -> str:
        return (f"Cell(row={self._row}, col={self._col}, "
                f"flat_pos={self._flat_pos}, alive={self._alive})")
