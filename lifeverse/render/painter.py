"""ANSI terminal painter used by the animators."""

import sys
from enum import Enum
from typing import TextIO, Optional


class Color(Enum):
    """ANSI foreground color codes."""
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34


ESC = "\x1b["
RESET_STYLE = "\x1b[0m"
CELL_CHAR = "█"  # full block


class GridPainter:
    """Paints characters at (row, col) terminal positions.

    Rows and columns are zero-based here and converted to the terminal's
    one-based coordinates when the cursor is moved.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def hide_cursor(self) -> None:
        self._write(f"{ESC}?25l")

    def show_cursor(self) -> None:
        self._write(f"{ESC}?25h")

    def clear(self) -> None:
        """Clear from the cursor to the top of the screen."""
        self._write(f"{ESC}1J")

    def shift_cursor(self, row: int, col: int) -> None:
        self._write(f"{ESC}{row + 1};{col + 1}H")

    def paint(self, row: int, col: int, char: str = CELL_CHAR, color: Color = Color.GREEN) -> None:
        self.shift_cursor(row, col)
        self._write(f"{ESC}{color.value}m{char}{RESET_STYLE}")

    def __enter__(self) -> 'GridPainter':
        self.hide_cursor()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.show_cursor()
