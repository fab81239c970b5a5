"""
lifeverse: Conway's Game of Life over interchangeable universe representations.

Dense universes store every cell in double-buffered arrays; sparse universes
store only alive cells and scan their frontier. Universes can be saved to and
loaded from the plain-text .univ format and animated in a terminal.
"""

from .core import (
    Cell, Universe, DenseUniverse, SparseUniverse, OrderedSparseUniverse,
    HashSparseUniverse, UNIVERSE_KINDS, create_universe, load_universe,
    UniverseError, UniverseTooLargeError, UniverseSizeMismatchError,
    UniverseFileError, CellOutOfBoundsError
)

__version__ = "0.1.0"

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
    'UniverseError',
    'UniverseTooLargeError',
    'UniverseSizeMismatchError',
    'UniverseFileError',
    'CellOutOfBoundsError',
]
