"""Shapes, text and textures drawn cell by cell with absolute positioning."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ansi_draw.codec.escape import Emitter
from ansi_draw.core.errors import NonOrthogonalError, check_cell
from ansi_draw.draw.cursor import Cursor
from ansi_draw.draw.line import is_orthogonal, orthogonal_span, rasterize


logger = logging.getLogger(__name__)


# Double-line box drawing characters
DOUBLE_HORIZONTAL = '═'
DOUBLE_VERTICAL = '║'
DOUBLE_TOP_LEFT = '╔'
DOUBLE_TOP_RIGHT = '╗'
DOUBLE_BOTTOM_LEFT = '╚'
DOUBLE_BOTTOM_RIGHT = '╝'

# Mnemonics understood by ascii_box_chars, mapped to single-line glyphs
BOX_MNEMONICS: dict[str, str] = {
    '-': '─',
    '|': '│',
    '+': '┼',
    'r': '┌',
    '7': '┐',
    'L': '└',
    'J': '┘',
    'v': '┬',
    '^': '┴',
    '>': '├',
    '<': '┤',
}

BOX_ESCAPE = '\\'


@dataclass(frozen=True)
class BoxChars:
    """Characters for rect_with. ``corner`` is used on all four corners."""
    horizontal: str = '-'
    vertical: str = '|'
    corner: str = '+'


def translate_box_chars(src: str) -> str:
    """
    Replace box mnemonics with Unicode box-drawing characters.

    A backslash keeps the following character as-is; a trailing lone
    backslash is kept literally.
    """
    out: list[str] = []
    chars = iter(src)
    for ch in chars:
        if ch == BOX_ESCAPE:
            out.append(next(chars, BOX_ESCAPE))
        else:
            out.append(BOX_MNEMONICS.get(ch, ch))
    return ''.join(out)


class Painter:
    """
    Draw onto the terminal grid.

    Every cell is placed with an absolute cursor move, so shapes do not
    depend on where the cursor was. Nothing is clipped to the terminal
    size.
    """

    def __init__(self, emitter: Emitter, cursor: Cursor):
        self._emitter = emitter
        self._cursor = cursor

    def pixel(self, c: str, x: int, y: int) -> None:
        """Draw a single character at (x, y)."""
        check_cell(x, y)
        self._emitter.emit(f"{y + 1};{x + 1}H{c}")

    def orth_line(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """
        Draw a horizontal or vertical line, both ends included.

        Raises NonOrthogonalError, without drawing, if the line is neither,
        and CoordinateError if an endpoint is off the grid.
        """
        check_cell(x1, y1)
        check_cell(x2, y2)
        try:
            cells = orthogonal_span(x1, y1, x2, y2)
        except NonOrthogonalError:
            logger.debug("rejected non-orthogonal line (%d, %d) -> (%d, %d)", x1, y1, x2, y2)
            raise
        for x, y in cells:
            self.pixel(c, x, y)

    def line(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a line between any two cells."""
        # Every rasterized cell lies between the endpoints
        check_cell(x1, y1)
        check_cell(x2, y2)
        if is_orthogonal(x1, y1, x2, y2):
            self.orth_line(c, x1, y1, x2, y2)
            return
        for x, y in rasterize(x1, y1, x2, y2):
            self.pixel(c, x, y)

    def orth_polygon(self, c: str, corners: Sequence[tuple[int, int]]) -> None:
        """
        Draw a closed outline through ``corners`` using orthogonal edges.

        Edges are drawn in order; a non-orthogonal edge raises
        NonOrthogonalError after the edges before it have been drawn.
        """
        if not corners:
            return
        for (x1, y1), (x2, y2) in _closed_edges(corners):
            self.orth_line(c, x1, y1, x2, y2)

    def rect(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a rectangle outline with a single character."""
        self.orth_polygon(c, [(x1, y1), (x1, y2), (x2, y2), (x2, y1)])

    def rect_with(self, chars: BoxChars, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a rectangle outline with separate edge and corner characters."""
        self.orth_line(chars.horizontal, x1, y1, x2, y1)
        self.orth_line(chars.horizontal, x1, y2, x2, y2)
        self.orth_line(chars.vertical, x1, y1, x1, y2)
        self.orth_line(chars.vertical, x2, y1, x2, y2)
        for x, y in ((x1, y1), (x1, y2), (x2, y1), (x2, y2)):
            self.pixel(chars.corner, x, y)

    def rect_fill(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        """
        Fill rows y1 up to, but not including, y2 between x1 and x2.

        Pass ``y2 + 1`` to include the last row.
        """
        for y in range(y1, y2):
            self.orth_line(c, x1, y, x2, y)

    def clear_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Blank the region, both corners included, in the current background."""
        self.rect_fill(' ', x1, min(y1, y2), x2, max(y1, y2) + 1)

    def ascii_box(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a box using double-line box drawing characters."""
        if x2 - x1 > 1:
            self.orth_line(DOUBLE_HORIZONTAL, x1 + 1, y1, x2 - 1, y1)
            self.orth_line(DOUBLE_HORIZONTAL, x1 + 1, y2, x2 - 1, y2)
        if y2 - y1 > 1:
            self.orth_line(DOUBLE_VERTICAL, x1, y1 + 1, x1, y2 - 1)
            self.orth_line(DOUBLE_VERTICAL, x2, y1 + 1, x2, y2 - 1)

        self.pixel(DOUBLE_TOP_LEFT, x1, y1)
        self.pixel(DOUBLE_TOP_RIGHT, x2, y1)
        self.pixel(DOUBLE_BOTTOM_LEFT, x1, y2)
        self.pixel(DOUBLE_BOTTOM_RIGHT, x2, y2)

    def ascii_box_chars(self, src: str, x: int, y: int) -> None:
        """
        Draw box art written with mnemonics (see BOX_MNEMONICS).

        Example:
            >>> painter.ascii_box_chars("r--7\\n|  |\\nL--J", 0, 0)
        """
        self.blit_transparent(translate_box_chars(src), None, x, y)

    def triangle(
        self, c: str, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int
    ) -> None:
        """Draw a triangle outline."""
        self.line(c, x1, y1, x2, y2)
        self.line(c, x2, y2, x3, y3)
        self.line(c, x1, y1, x3, y3)

    def blit(self, src: str, x: int, y: int) -> None:
        """Draw a multi-line texture with its top-left corner at (x, y)."""
        for row_y, row in enumerate(src.split('\n'), start=y):
            for col_x, ch in enumerate(row, start=x):
                self.pixel(ch, col_x, row_y)

    def blit_transparent(self, src: str, blank: str | None, x: int, y: int) -> None:
        """
        Draw a texture, leaving cells under spaces untouched.

        Spaces move the cursor one column without drawing; ``blank``
        characters draw a real space.
        """
        for row_y, row in enumerate(src.split('\n'), start=y):
            for col_x, ch in enumerate(row, start=x):
                if ch == ' ':
                    self._cursor.right(1)
                elif blank is not None and ch == blank:
                    self.pixel(' ', col_x, row_y)
                else:
                    self.pixel(ch, col_x, row_y)

    def text(self, s: str, x: int, y: int) -> None:
        """Draw text without wrapping; newlines start a new row at column x."""
        col = x
        for ch in s:
            if ch == '\n':
                col = x
                y += 1
                continue
            self.pixel(ch, col, y)
            col += 1

    def println(self, s: str = '') -> None:
        """Write text, then move to the start of the next line without a newline."""
        self._emitter.write(s)
        self._cursor.start()
        self._cursor.down(1)


def _closed_edges(
    corners: Sequence[tuple[int, int]],
) -> Iterable[tuple[tuple[int, int], tuple[int, int]]]:
    for i, start in enumerate(corners):
        yield start, corners[(i + 1) % len(corners)]
