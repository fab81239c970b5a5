"""
Universe representations for Conway's Game of Life.

DenseUniverse keeps every cell in double-buffered numpy arrays; the sparse
universes keep only alive cells and scan their frontier each generation.
All representations agree on every generation.
"""

from .cell import Cell
from .dense import DenseUniverse
from .errors import (
    UniverseError, UniverseTooLargeError, UniverseSizeMismatchError,
    UniverseFileError, CellOutOfBoundsError
)
from .factory import UNIVERSE_KINDS, create_universe, load_universe, get_universe_class
from .sparse import SparseUniverse, OrderedSparseUniverse, HashSparseUniverse
from .universe import Universe

__all__ = [
    'Cell',
    'Universe',
    'DenseUniverse',
    'SparseUniverse',
    'OrderedSparseUniverse',
    'HashSparseUniverse',
    'UNIVERSE_KINDS',
    'create_universe',
    'load_universe',
    'get_universe_class',
    'UniverseError',
    'UniverseTooLargeError',
    'UniverseSizeMismatchError',
    'UniverseFileError',
    'CellOutOfBoundsError',
]
