"""Reading and writing the ``.univ`` universe snapshot format.

Format::

    GameOfLifeUniverse
    <rows>
    <cols>
    <alive_count>
    <row>,<col>
    ...

Positions are written in the order the universe reports them, so the file
is deterministic for a given representation but not necessarily sorted.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .errors import UniverseFileError
from .rules import validate_dimensions

logger = logging.getLogger(__name__)

UNIVERSE_FILE_HEADER = "GameOfLifeUniverse"
UNIVERSE_FILE_SUFFIX = ".univ"

_POSITION_RE = re.compile(r"^([0-9]+),([0-9]+)$")
_COUNT_RE = re.compile(r"^[0-9]+$")

PathLike = Union[str, Path]


@dataclass
class UniverseFileData:
    """Parsed contents of a universe file (transient, load-time only)."""
    rows: int
    cols: int
    alive_cells_pos: List[Tuple[int, int]] = field(default_factory=list)


def with_univ_suffix(path: PathLike) -> Path:
    """Append the .univ extension unless the path already has it."""
    path = Path(path)
    if path.suffix == UNIVERSE_FILE_SUFFIX:
        return path
    return path.with_name(path.name + UNIVERSE_FILE_SUFFIX)


def write_universe_file(path: PathLike, rows: int, cols: int,
                        alive_cells_pos: Iterable[Tuple[int, int]]) -> Path:
    """Write a universe snapshot.

    Args:
        path: Destination; ``.univ`` is appended if missing
        rows: Universe row count
        cols: Universe column count
        alive_cells_pos: Alive (row, col) positions in output order

    Returns:
        The path actually written
    """
    path = with_univ_suffix(path)
    positions = list(alive_cells_pos)

    lines = [UNIVERSE_FILE_HEADER, str(rows), str(cols), str(len(positions))]
    lines.extend(f"{row},{col}" for row, col in positions)

    with open(path, 'w', encoding='ascii') as f:
        f.write("\n".join(lines) + "\n")

    logger.debug(f"Saved {rows}x{cols} universe with {len(positions)} alive cells to {path}")
    return path


def _parse_int(value: str, path: Path, line_no: int, what: str) -> int:
    if not _COUNT_RE.match(value):
        raise UniverseFileError(f"{path}:{line_no}: invalid {what} {value!r}")
    return int(value)


def read_universe_file(path: PathLike) -> UniverseFileData:
    """Parse and validate a universe snapshot.

    Args:
        path: File to read; must carry the ``.univ`` extension

    Returns:
        UniverseFileData with the declared dimensions and alive positions

    Raises:
        UniverseFileError: If the extension, header, counts or any position
            line are invalid
        UniverseTooLargeError: If the declared dimensions are too large
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if path.suffix != UNIVERSE_FILE_SUFFIX:
        raise UniverseFileError(
            f"Universe file {path} must have the {UNIVERSE_FILE_SUFFIX} extension")

    try:
        with open(path, 'r', encoding='ascii') as f:
            lines = f.read().splitlines()
    except UnicodeDecodeError as e:
        raise UniverseFileError(
            f"{path}: not a text universe file (byte {e.start} is not ASCII)") from None

    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 4:
        raise UniverseFileError(f"{path}: truncated header ({len(lines)} lines)")

    if lines[0].strip() != UNIVERSE_FILE_HEADER:
        raise UniverseFileError(
            f"{path}:1: expected header {UNIVERSE_FILE_HEADER!r}, got {lines[0]!r}")

    rows = _parse_int(lines[1].strip(), path, 2, "row count")
    cols = _parse_int(lines[2].strip(), path, 3, "column count")
    alive_count = _parse_int(lines[3].strip(), path, 4, "alive cell count")

    if rows < 1 or cols < 1:
        raise UniverseFileError(f"{path}: universe dimensions must be positive, got {rows}x{cols}")
    validate_dimensions(rows, cols)

    position_lines = lines[4:]
    if len(position_lines) != alive_count:
        raise UniverseFileError(
            f"{path}: declared {alive_count} alive cells but found {len(position_lines)}")

    positions = []
    for line_no, line in enumerate(position_lines, start=5):
        match = _POSITION_RE.match(line)
        if match is None:
            raise UniverseFileError(f"{path}:{line_no}: malformed position line {line!r}")
        row, col = int(match.group(1)), int(match.group(2))
        if row >= rows or col >= cols:
            raise UniverseFileError(
                f"{path}:{line_no}: position ({row}, {col}) outside {rows}x{cols} universe")
        positions.append((row, col))

    logger.debug(f"Read {rows}x{cols} universe with {len(positions)} alive cells from {path}")
    return UniverseFileData(rows, cols, positions)
