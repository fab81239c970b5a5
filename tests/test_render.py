"""Tests for the ANSI painter and the animators."""

import io

import pytest
from lifeverse.core.sparse import HashSparseUniverse
from lifeverse.patterns.library import create_blinker_pattern, create_glider_pattern, place_pattern
from lifeverse.render.animator import (
    ANIMATORS, FullViewAnimator, AutoPanAnimator, CenterAutoPanAnimator
)
from lifeverse.render.painter import GridPainter, Color, CELL_CHAR


class RecordingPainter(GridPainter):
    """Painter that records paint calls instead of only writing escapes."""

    def __init__(self):
        super().__init__(io.StringIO())
        self.painted = []

    def paint(self, row, col, char=CELL_CHAR, color=Color.GREEN):
        self.painted.append((row, col, char, color))
        super().paint(row, col, char, color)

    def cells(self):
        return {(row, col) for row, col, char, color in self.painted
                if color is Color.GREEN and char == CELL_CHAR}

    def colored(self, color):
        return {(row, col) for row, col, char, c in self.painted if c is color and char == CELL_CHAR}


class CallLog(HashSparseUniverse):
    """Universe recording the order of queries and advances."""

    def __init__(self, rows, cols):
        super().__init__(rows, cols)
        self.calls = []

    def get_alive_cells_pos(self):
        self.calls.append("query")
        return super().get_alive_cells_pos()

    def advance(self):
        self.calls.append("advance")
        super().advance()


class TestGridPainter:
    """Test escape sequences written by the painter."""

    def test_paint_writes_position_and_color(self):
        stream = io.StringIO()
        GridPainter(stream).paint(0, 0, "x", Color.RED)
        assert stream.getvalue() == "\x1b[1;1H\x1b[31mx\x1b[0m"

    def test_shift_cursor_is_one_based(self):
        stream = io.StringIO()
        GridPainter(stream).shift_cursor(4, 9)
        assert stream.getvalue() == "\x1b[5;10H"

    def test_clear(self):
        stream = io.StringIO()
        GridPainter(stream).clear()
        assert stream.getvalue() == "\x1b[1J"

    def test_context_manager_hides_and_restores_cursor(self):
        stream = io.StringIO()
        with GridPainter(stream):
            assert stream.getvalue() == "\x1b[?25l"
        assert stream.getvalue().endswith("\x1b[?25h")


class TestAnimators:
    """Test frame layout and the query-then-advance loop."""

    def test_query_before_advance(self):
        universe = CallLog(5, 5)
        place_pattern(universe, create_blinker_pattern(), 2, 1)
        universe.calls.clear()
        sleeps = []

        animator = AutoPanAnimator(0.0, painter=RecordingPainter(), sleep=sleeps.append)
        frames = animator.animate(universe, 3)

        assert frames == 3
        assert universe.calls == ["query", "advance"] * 3
        assert sleeps == [0.0, 0.0, 0.0]
        assert universe.generation == 3

    def test_full_view_frame(self):
        painter = RecordingPainter()
        universe = HashSparseUniverse(10, 10)
        universe.seed([(2, 3), (0, 0)])

        extent = FullViewAnimator(0.0, painter=painter).draw_frame(universe, universe.get_alive_cells_pos())
        assert extent == (3, 4)
        assert painter.cells() == {(3, 4), (1, 1)}
        assert painter.colored(Color.RED)

    def test_auto_pan_translates_to_corner(self):
        painter = RecordingPainter()
        universe = HashSparseUniverse(30, 30)
        place_pattern(universe, create_glider_pattern(), 10, 10)

        extent = AutoPanAnimator(0.0, painter=painter).draw_frame(universe, universe.get_alive_cells_pos())
        assert extent == (3, 3)
        assert painter.cells() == {(1, 2), (2, 3), (3, 1), (3, 2), (3, 3)}
        # Not touching the universe edge
        assert painter.colored(Color.BLUE)
        assert not painter.colored(Color.RED)
        # Row and column offset labels
        labels = [(row, col, char) for row, col, char, color in painter.painted if color is Color.YELLOW]
        assert (1, 0, "1") in labels and (2, 0, "0") in labels
        assert (0, 1, "1") in labels and (0, 2, "0") in labels

    def test_auto_pan_touching_edge_is_red(self):
        painter = RecordingPainter()
        universe = HashSparseUniverse(10, 10)
        universe.seed([(0, 0), (1, 1)])

        AutoPanAnimator(0.0, painter=painter).draw_frame(universe, universe.get_alive_cells_pos())
        assert painter.colored(Color.RED)
        assert not painter.colored(Color.BLUE)

    def test_center_viewport(self):
        universe = HashSparseUniverse(100, 100)
        animator = CenterAutoPanAnimator(0.0, painter=RecordingPainter())

        assert animator.viewport(universe, [(50, 50)]) == (30, 70, 30, 70)
        assert animator.viewport(universe, []) == (0, 20, 0, 20)
        assert animator.viewport(universe, [(99, 99)]) == (79, 99, 79, 99)

    def test_center_frame_clips_to_viewport(self):
        painter = RecordingPainter()
        universe = HashSparseUniverse(100, 100)
        animator = CenterAutoPanAnimator(0.0, painter=painter)
        alive = [(20, 20), (20, 21), (21, 20), (21, 21), (90, 90)]

        # Centroid (34.4, 34.4) gives a viewport spanning rows and cols 14-54
        assert animator.viewport(universe, alive) == (14, 54, 14, 54)
        extent = animator.draw_frame(universe, alive)
        assert extent == (41, 41)
        assert painter.cells() == {(7, 7), (7, 8), (8, 7), (8, 8)}

    def test_empty_universe_paints_only_margins(self):
        painter = RecordingPainter()
        universe = HashSparseUniverse(5, 5)
        FullViewAnimator(0.0, painter=painter, sleep=lambda _: None).animate(universe, 2)
        assert painter.cells() == set()
        assert painter.colored(Color.RED)

    def test_negative_refresh_rejected(self):
        with pytest.raises(ValueError):
            FullViewAnimator(-1.0, painter=RecordingPainter())

    def test_animator_registry(self):
        assert ANIMATORS == {
            "full": FullViewAnimator,
            "pan": AutoPanAnimator,
            "center": CenterAutoPanAnimator,
        }
