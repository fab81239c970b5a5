"""Classic seed patterns for Conway's Game of Life.

Patterns are 2D boolean numpy arrays (row-major, True = alive). They are
placed into a universe with place_pattern(), which seeds the alive cells
through the universe's regular make_cell_alive interface.
"""

import numpy as np
from typing import Callable, Dict, Iterator, List, Tuple
import logging

logger = logging.getLogger(__name__)


def _pattern_from_positions(shape: Tuple[int, int], positions: List[Tuple[int, int]]) -> np.ndarray:
    pattern = np.zeros(shape, dtype=bool)
    for row, col in positions:
        pattern[row, col] = True
    return pattern


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def create_toad_pattern() -> np.ndarray:
    """Create toad oscillator (period 2)."""
    return np.array([
        [False, True, True, True],
        [True, True, True, False]
    ], dtype=bool)


def create_beehive_pattern() -> np.ndarray:
    """Create beehive still life."""
    return np.array([
        [False, True, True, False],
        [True, False, False, True],
        [False, True, True, False]
    ], dtype=bool)


def create_glider_pattern() -> np.ndarray:
    """Create classic glider moving toward increasing row and column."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def create_gosper_glider_gun_pattern() -> np.ndarray:
    """Create Gosper's glider gun (emits a glider every 30 generations)."""
    return _pattern_from_positions((9, 36), [
        (0, 24),
        (1, 22), (1, 24),
        (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
        (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
        (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
        (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
        (6, 10), (6, 16), (6, 24),
        (7, 11), (7, 15),
        (8, 12), (8, 13),
    ])


PATTERNS: Dict[str, Callable[[], np.ndarray]] = {
    "block": create_block_pattern,
    "blinker": create_blinker_pattern,
    "toad": create_toad_pattern,
    "beehive": create_beehive_pattern,
    "glider": create_glider_pattern,
    "gosper_glider_gun": create_gosper_glider_gun_pattern,
}


def get_pattern(name: str) -> np.ndarray:
    """Look up a pattern by name.

    Raises:
        ValueError: If no pattern has that name
    """
    if name not in PATTERNS:
        raise ValueError(f"Unknown pattern {name!r}, expected one of {sorted(PATTERNS)}")
    return PATTERNS[name]()


def pattern_positions(pattern: np.ndarray, row: int = 0, col: int = 0) -> Iterator[Tuple[int, int]]:
    """Yield alive positions of pattern with its top-left corner at (row, col)."""
    for pattern_row, pattern_col in np.argwhere(pattern):
        yield (row + int(pattern_row), col + int(pattern_col))


def place_pattern(universe, pattern: np.ndarray, row: int = 0, col: int = 0) -> int:
    """Seed a pattern into a universe.

    Args:
        universe: Any Universe representation
        pattern: 2D boolean array
        row: Top-left row for placement
        col: Top-left column for placement

    Returns:
        Number of cells made alive

    Raises:
        CellOutOfBoundsError: If the pattern does not fit (no wrapping)
    """
    positions = list(pattern_positions(pattern, row, col))
    universe.seed(positions)
    logger.debug(f"Placed {len(positions)}-cell pattern at ({row}, {col})")
    return len(positions)
