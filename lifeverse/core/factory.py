"""Select a universe representation by name."""

from pathlib import Path
from typing import Dict, Type, Union

from .dense import DenseUniverse
from .sparse import HashSparseUniverse, OrderedSparseUniverse
from .universe import Universe


UNIVERSE_KINDS: Dict[str, Type[Universe]] = {
    "dense": DenseUniverse,
    "sparse": HashSparseUniverse,
    "ordered": OrderedSparseUniverse,
}


def get_universe_class(kind: str) -> Type[Universe]:
    """Look up a representation class.

    Raises:
        ValueError: If kind is not one of UNIVERSE_KINDS
    """
    try:
        return UNIVERSE_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown universe kind {kind!r}, expected one of {sorted(UNIVERSE_KINDS)}") from None


def create_universe(kind: str, rows: int, cols: int) -> Universe:
    """Factory function for an empty universe of the given kind."""
    return get_universe_class(kind)(rows, cols)


def load_universe(kind: str, path: Union[str, Path]) -> Universe:
    """Factory function for a universe of the given kind built from a .univ file."""
    return get_universe_class(kind).from_file(path)
