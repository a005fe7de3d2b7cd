"""Tests for shapes, text and blits."""

import pytest
from conftest import CapturedScreen, csi, px

from ansi_draw.core.errors import CoordinateError, NonOrthogonalError
from ansi_draw.draw.painter import BoxChars, translate_box_chars


def pixels(cells: list[tuple[int, int]], c: str = "#") -> str:
    return "".join(px(c, x, y) for x, y in cells)


class TestPixel:
    """Tests for single cells and orthogonal lines."""

    def test_pixel(self, screen: CapturedScreen) -> None:
        screen.pixel("@", 0, 0)
        screen.pixel("@", 9, 4)
        assert screen.output() == "\x1b[1;1H@\x1b[5;10H@"

    def test_orth_line_horizontal(self, screen: CapturedScreen) -> None:
        screen.orth_line("#", 3, 1, 1, 1)
        assert screen.output() == pixels([(1, 1), (2, 1), (3, 1)])

    def test_orth_line_rejects_diagonal_without_output(self, screen: CapturedScreen) -> None:
        with pytest.raises(NonOrthogonalError) as info:
            screen.orth_line("#", 0, 0, 2, 2)
        assert info.value.endpoints == ((0, 0), (2, 2))
        assert screen.output() == ""

    @pytest.mark.parametrize("x1, y1, x2, y2", [
        (0, 0, 4, 0),
        (4, 2, 0, 2),
        (3, 0, 3, 5),
        (3, 5, 3, 0),
        (1, 1, 1, 1),
    ])
    def test_line_matches_orth_line(
        self, screen: CapturedScreen, x1: int, y1: int, x2: int, y2: int
    ) -> None:
        screen.line("#", x1, y1, x2, y2)
        via_line = screen.take()
        screen.orth_line("#", x1, y1, x2, y2)
        assert via_line == screen.take()

    def test_diagonal_line(self, screen: CapturedScreen) -> None:
        screen.line("*", 0, 0, 3, 3)
        assert screen.output() == pixels([(0, 0), (1, 1), (2, 2), (3, 3)], "*")

    @pytest.mark.parametrize("draw", [
        lambda s: s.pixel("x", -1, -1),
        lambda s: s.orth_line("-", 0, 0, -3, 0),
        lambda s: s.line("*", 2, 2, 0, -2),
        lambda s: s.text("ab", 0, -1),
    ])
    def test_negative_cells_rejected_without_output(self, screen: CapturedScreen, draw) -> None:
        with pytest.raises(CoordinateError):
            draw(screen)
        assert screen.output() == ""


class TestRectangles:
    """Tests for rectangle outlines and fills."""

    def test_rect_outline(self, screen: CapturedScreen) -> None:
        screen.rect("#", 0, 0, 2, 1)
        expected = pixels(
            [(0, 0), (0, 1)]                 # left edge
            + [(0, 1), (1, 1), (2, 1)]       # bottom edge
            + [(2, 0), (2, 1)]               # right edge
            + [(0, 0), (1, 0), (2, 0)]       # top edge
        )
        assert screen.output() == expected

    def test_rect_with_distinct_corners_succeeds(self, screen: CapturedScreen) -> None:
        screen.rect("#", 5, 2, 1, 7)
        cells = {(x, y) for x in range(1, 6) for y in (2, 7)} | {
            (x, y) for x in (1, 5) for y in range(2, 8)
        }
        for x, y in cells:
            assert px("#", x, y) in screen.output()

    def test_orth_polygon_stops_at_first_bad_edge(self, screen: CapturedScreen) -> None:
        corners = [(0, 0), (0, 2), (3, 4), (3, 0)]
        with pytest.raises(NonOrthogonalError) as info:
            screen.painter.orth_polygon("#", corners)
        assert info.value.endpoints == ((0, 2), (3, 4))
        # Only the first edge was drawn
        assert screen.output() == pixels([(0, 0), (0, 1), (0, 2)])

    def test_orth_polygon_empty(self, screen: CapturedScreen) -> None:
        screen.painter.orth_polygon("#", [])
        assert screen.output() == ""

    def test_rect_with_chars(self, screen: CapturedScreen) -> None:
        screen.painter.rect_with(BoxChars("-", "|", "+"), 0, 0, 2, 2)
        out = screen.output()
        assert out.endswith(px("+", 0, 0) + px("+", 0, 2) + px("+", 2, 0) + px("+", 2, 2))
        assert px("-", 1, 0) in out
        assert px("|", 0, 1) in out

    def test_rect_fill_excludes_y2(self, screen: CapturedScreen) -> None:
        screen.rect_fill(".", 0, 0, 1, 2)
        assert screen.output() == pixels([(0, 0), (1, 0), (0, 1), (1, 1)], ".")

    def test_rect_fill_empty_when_y2_not_above_y1(self, screen: CapturedScreen) -> None:
        screen.rect_fill(".", 0, 3, 4, 3)
        screen.rect_fill(".", 0, 5, 4, 1)
        assert screen.output() == ""

    def test_clear_rect_is_inclusive(self, screen: CapturedScreen) -> None:
        screen.painter.clear_rect(0, 1, 1, 0)
        assert screen.output() == pixels([(0, 0), (1, 0), (0, 1), (1, 1)], " ")


class TestBoxes:
    """Tests for box drawing characters."""

    def test_ascii_box(self, screen: CapturedScreen) -> None:
        screen.painter.ascii_box(0, 0, 3, 2)
        out = screen.output()
        assert px("═", 1, 0) in out and px("═", 2, 2) in out
        assert px("║", 0, 1) in out and px("║", 3, 1) in out
        assert out.endswith(
            px("╔", 0, 0) + px("╗", 3, 0) + px("╚", 0, 2) + px("╝", 3, 2)
        )

    def test_ascii_box_minimal(self, screen: CapturedScreen) -> None:
        screen.painter.ascii_box(0, 0, 1, 1)
        assert screen.output() == px("╔", 0, 0) + px("╗", 1, 0) + px("╚", 0, 1) + px("╝", 1, 1)

    def test_translate_box_chars(self) -> None:
        assert translate_box_chars("r-v-7") == "┌─┬─┐"
        assert translate_box_chars(">+<|") == "├┼┤│"
        assert translate_box_chars("L^J") == "└┴┘"
        assert translate_box_chars("\\r\\-ok") == "r-ok"
        assert translate_box_chars("x\\") == "x\\"

    def test_ascii_box_chars(self, screen: CapturedScreen) -> None:
        screen.painter.ascii_box_chars("r7\nLJ", 4, 2)
        assert screen.output() == (
            px("┌", 4, 2) + px("┐", 5, 2) + px("└", 4, 3) + px("┘", 5, 3)
        )

    def test_ascii_box_chars_skips_spaces(self, screen: CapturedScreen) -> None:
        screen.painter.ascii_box_chars("| |", 0, 0)
        assert screen.output() == px("│", 0, 0) + csi("1C") + px("│", 2, 0)


class TestTriangleAndText:
    """Tests for triangles, blits and text."""

    def test_triangle_is_three_lines(self, screen: CapturedScreen) -> None:
        screen.triangle("*", 0, 0, 4, 0, 0, 2)
        as_triangle = screen.take()
        screen.line("*", 0, 0, 4, 0)
        screen.line("*", 4, 0, 0, 2)
        screen.line("*", 0, 0, 0, 2)
        assert as_triangle == screen.take()

    def test_blit(self, screen: CapturedScreen) -> None:
        screen.blit("ab\nc", 2, 1)
        assert screen.output() == px("a", 2, 1) + px("b", 3, 1) + px("c", 2, 2)

    def test_blit_transparent(self, screen: CapturedScreen) -> None:
        screen.blit_transparent("t _", "_", 0, 0)
        assert screen.output() == px("t", 0, 0) + csi("1C") + px(" ", 2, 0)

    def test_text_handles_newlines(self, screen: CapturedScreen) -> None:
        screen.text("hi\nyo", 3, 0)
        assert screen.output() == (
            px("h", 3, 0) + px("i", 4, 0) + px("y", 3, 1) + px("o", 4, 1)
        )

    def test_println(self, screen: CapturedScreen) -> None:
        screen.println("done")
        assert screen.output() == "done" + csi("G", "1B")
