"""Terminal animators that paint a universe generation by generation.

Each frame queries get_alive_cells_pos() first and only then calls
advance(), so the painted frame always matches the generation it shows.
Margins are red where the viewport touches the universe edge and blue
where more universe lies beyond.
"""

import time
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from .painter import GridPainter, Color

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

MARGIN_THICKNESS = 1


class Animator(ABC):
    """Base animator: frame loop, margins and offset labels.

    Attributes:
        refresh_period: Seconds to wait between frames
        painter: Painter receiving all output
    """

    def __init__(self, refresh_period: float,
                 painter: Optional[GridPainter] = None,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize animator.

        Args:
            refresh_period: Seconds between frames (non-negative)
            painter: Painter to draw with (stdout painter if None)
            sleep: Sleep function, replaceable for tests
        """
        if refresh_period < 0:
            raise ValueError("Refresh period must be non-negative")
        self.refresh_period = refresh_period
        self.painter = painter if painter is not None else GridPainter()
        self._sleep = sleep

    @abstractmethod
    def draw_frame(self, universe, alive_cells_pos: List[Position]) -> Tuple[int, int]:
        """Paint one frame.

        Returns:
            (rows, cols) extent of what was painted, used to clear it
        """

    def animate(self, universe, time_steps: int) -> int:
        """Paint and advance the universe time_steps times.

        Returns:
            Number of frames painted
        """
        extent = (0, 0)
        self.painter.clear()
        for _ in range(time_steps):
            alive_cells_pos = universe.get_alive_cells_pos()
            extent = self.draw_frame(universe, alive_cells_pos)
            self._sleep(self.refresh_period)
            universe.advance()
            self.painter.shift_cursor(*extent)
            self.painter.clear()
        self.painter.shift_cursor(extent[0] + 1, 0)
        logger.debug(f"{type(self).__name__} painted {time_steps} frames")
        return time_steps

    def print_row_offset(self, offset: int, color: Color = Color.YELLOW) -> None:
        for i, digit in enumerate(str(offset)):
            self.painter.paint(i + 1, 0, digit, color)

    def print_col_offset(self, offset: int, color: Color = Color.YELLOW) -> None:
        for i, digit in enumerate(str(offset)):
            self.painter.paint(0, i + 1, digit, color)

    def paint_left_margin(self, row_count: int, color: Color,
                          thickness: int = MARGIN_THICKNESS) -> None:
        for row in range(row_count):
            for col in range(thickness):
                self.painter.paint(row, col, color=color)

    def paint_top_margin(self, col_count: int, color: Color,
                         thickness: int = MARGIN_THICKNESS) -> None:
        for col in range(col_count):
            for row in range(thickness):
                self.painter.paint(row, col, color=color)

    def paint_right_margin(self, start_col: int, row_count: int, color: Color,
                           thickness: int = MARGIN_THICKNESS) -> None:
        for row in range(row_count):
            for col in range(start_col, start_col + thickness):
                self.painter.paint(row, col, color=color)

    def paint_bottom_margin(self, start_row: int, col_count: int, color: Color,
                            thickness: int = MARGIN_THICKNESS) -> None:
        for col in range(col_count):
            for row in range(start_row, start_row + thickness):
                self.painter.paint(row, col, color=color)


class FullViewAnimator(Animator):
    """Paints the universe from its origin out to the furthest alive cell."""

    def draw_frame(self, universe, alive_cells_pos: List[Position]) -> Tuple[int, int]:
        max_row = max((row for row, _ in alive_cells_pos), default=0)
        max_col = max((col for _, col in alive_cells_pos), default=0)

        self.paint_left_margin(max_row + 1 + MARGIN_THICKNESS, Color.RED)
        self.paint_top_margin(max_col + 1 + MARGIN_THICKNESS, Color.RED)
        self.print_row_offset(0)
        self.print_col_offset(0)
        for row, col in alive_cells_pos:
            self.painter.paint(row + MARGIN_THICKNESS, col + MARGIN_THICKNESS)

        return (max_row + MARGIN_THICKNESS, max_col + MARGIN_THICKNESS)


class AutoPanAnimator(Animator):
    """Translates the bounding box of alive cells to the top-left corner."""

    def draw_frame(self, universe, alive_cells_pos: List[Position]) -> Tuple[int, int]:
        if alive_cells_pos:
            min_row = min(row for row, _ in alive_cells_pos)
            max_row = max(row for row, _ in alive_cells_pos)
            min_col = min(col for _, col in alive_cells_pos)
            max_col = max(col for _, col in alive_cells_pos)
        else:
            min_row = max_row = min_col = max_col = 0

        self.paint_left_margin(max_row - min_row + 1 + MARGIN_THICKNESS,
                               Color.RED if min_col == 0 else Color.BLUE)
        self.paint_top_margin(max_col - min_col + 1 + MARGIN_THICKNESS,
                              Color.RED if min_row == 0 else Color.BLUE)
        self.print_row_offset(min_row)
        self.print_col_offset(min_col)
        for row, col in alive_cells_pos:
            self.painter.paint(row - min_row + MARGIN_THICKNESS, col - min_col + MARGIN_THICKNESS)

        return (max_row - min_row + MARGIN_THICKNESS, max_col - min_col + MARGIN_THICKNESS)


class CenterAutoPanAnimator(Animator):
    """Centres a fixed-size viewport on the centroid of alive cells."""

    def __init__(self, refresh_period: float,
                 painter: Optional[GridPainter] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 viewport_rows: int = 40,
                 viewport_cols: int = 40):
        super().__init__(refresh_period, painter, sleep)
        if viewport_rows < 1 or viewport_cols < 1:
            raise ValueError("Viewport dimensions must be positive")
        self.viewport_rows = viewport_rows
        self.viewport_cols = viewport_cols

    def viewport(self, universe, alive_cells_pos: List[Position]) -> Tuple[int, int, int, int]:
        """Viewport bounds (top_row, bottom_row, left_col, right_col), inclusive."""
        if alive_cells_pos:
            mid_row = sum(row for row, _ in alive_cells_pos) / len(alive_cells_pos)
            mid_col = sum(col for _, col in alive_cells_pos) / len(alive_cells_pos)
        else:
            mid_row = mid_col = 0.0

        top_row = int(max(0.0, mid_row - self.viewport_rows / 2))
        bottom_row = int(min(universe.row_count() - 1, mid_row + self.viewport_rows / 2))
        left_col = int(max(0.0, mid_col - self.viewport_cols / 2))
        right_col = int(min(universe.col_count() - 1, mid_col + self.viewport_cols / 2))
        return top_row, bottom_row, left_col, right_col

    def draw_frame(self, universe, alive_cells_pos: List[Position]) -> Tuple[int, int]:
        top_row, bottom_row, left_col, right_col = self.viewport(universe, alive_cells_pos)
        width = self.viewport_cols + 2 * MARGIN_THICKNESS

        self.paint_left_margin(self.viewport_rows + MARGIN_THICKNESS,
                               Color.RED if left_col == 0 else Color.BLUE)
        self.paint_top_margin(width, Color.RED if top_row == 0 else Color.BLUE)
        self.paint_right_margin(self.viewport_cols + MARGIN_THICKNESS,
                                self.viewport_rows + 2 * MARGIN_THICKNESS,
                                Color.RED if right_col == universe.col_count() - 1 else Color.BLUE)
        self.paint_bottom_margin(self.viewport_rows + MARGIN_THICKNESS, width,
                                 Color.RED if bottom_row == universe.row_count() - 1 else Color.BLUE)
        self.print_row_offset(top_row)
        self.print_col_offset(left_col)

        for row, col in alive_cells_pos:
            if not (top_row <= row <= bottom_row and left_col <= col <= right_col):
                continue
            self.painter.paint(row - top_row + MARGIN_THICKNESS, col - left_col + MARGIN_THICKNESS)

        return (self.viewport_rows + MARGIN_THICKNESS, self.viewport_cols + MARGIN_THICKNESS)


ANIMATORS = {
    "full": FullViewAnimator,
    "pan": AutoPanAnimator,
    "center": CenterAutoPanAnimator,
}
