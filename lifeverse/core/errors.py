"""Exceptions raised by universe construction, queries and persistence.

Each error also derives from the builtin the rest of the code base would
naturally raise (ValueError / IndexError) so callers can catch either.
"""


class UniverseError(Exception):
    """Base class for all universe errors."""


class UniverseTooLargeError(UniverseError, ValueError):
    """Rows or columns exceed the supported maximum."""


class UniverseSizeMismatchError(UniverseError, ValueError):
    """A universe file's dimensions differ from the live instance."""


class UniverseFileError(UniverseError, ValueError):
    """A universe file is malformed or has the wrong extension."""


class CellOutOfBoundsError(UniverseError, IndexError):
    """A coordinate lies outside [0, rows) x [0, cols)."""
