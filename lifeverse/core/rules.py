"""
Standard Life Rules and Neighborhood Enumeration

B3/S23 rules plus the bounded Moore neighborhood shared by every universe
representation. Cells outside the grid do not exist (no wraparound), so edge
cells have 5 neighbors and corner cells have 3.
"""

from numbers import Integral
from typing import Set, List, Tuple

from .errors import UniverseTooLargeError


# Keeps row * cols + col within 64 bits
MAX_DIMENSION = 2 ** 32

# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

# Moore neighborhood, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
)


def next_state(alive: bool, live_neighbors: int) -> bool:
    """B3/S23: survive on SURVIVAL_SET counts, be born on BIRTH_SET counts.

    live_neighbors is the boundary-truncated count, so an edge cell never
    sees more than 5.
    """
    return live_neighbors in (SURVIVAL_SET if alive else BIRTH_SET)


def neighbor_positions(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """List the in-bounds neighbor positions of (row, col).

    Args:
        row: Cell row
        col: Cell column
        rows: Universe row count
        cols: Universe column count

    Returns:
        Up to 8 (row, col) pairs, truncated at the grid boundary
    """
    positions = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            positions.append((nr, nc))
    return positions


def validate_dimensions(rows: int, cols: int) -> None:
    """Check universe dimensions before anything is allocated.

    Raises:
        UniverseTooLargeError: If rows or cols exceed MAX_DIMENSION
        ValueError: If dimensions are not positive integers
    """
    if isinstance(rows, bool) or isinstance(cols, bool) \
            or not isinstance(rows, Integral) or not isinstance(cols, Integral):
        raise ValueError(f"Universe dimensions must be integers, got ({rows!r}, {cols!r})")
    if rows > MAX_DIMENSION or cols > MAX_DIMENSION:
        raise UniverseTooLargeError(
            f"Universe {rows}x{cols} exceeds maximum dimension {MAX_DIMENSION}")
    if rows < 1 or cols < 1:
        raise ValueError(f"Universe dimensions must be positive, got {rows}x{cols}")


def flat_position(row: int, col: int, cols: int) -> int:
    """Row-major flat index of (row, col)."""
    return row * cols + col


def unflatten(flat_pos: int, cols: int) -> Tuple[int, int]:
    """Inverse of flat_position."""
    return divmod(flat_pos, cols)
