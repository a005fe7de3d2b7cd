"""Cursor movement and screen clearing."""

from ansi_draw.codec.escape import Emitter
from ansi_draw.core.errors import check_cell


class Cursor:
    """Move the cursor with CSI sequences. Coordinates are 0-based."""

    def __init__(self, emitter: Emitter, bottom_row: int = 9998):
        self._emitter = emitter
        self.bottom_row = bottom_row

    def up(self, n: int = 1) -> None:
        if n > 0:
            self._emitter.emit(f"{n}A")

    def down(self, n: int = 1) -> None:
        if n > 0:
            self._emitter.emit(f"{n}B")

    def left(self, n: int = 1) -> None:
        if n > 0:
            self._emitter.emit(f"{n}D")

    def right(self, n: int = 1) -> None:
        if n > 0:
            self._emitter.emit(f"{n}C")

    def pos(self, x: int, y: int) -> None:
        """Move to column x, row y. Negative coordinates raise CoordinateError."""
        check_cell(x, y)
        self._emitter.emit(f"{y + 1};{x + 1}H")

    def home(self) -> None:
        self.pos(0, 0)

    def bot(self) -> None:
        """Move to the bottom-left corner; the terminal clamps the row."""
        self.pos(0, self.bottom_row)

    def start(self) -> None:
        """Move to the start of the current line."""
        self._emitter.emit("G")

    def clear_all(self) -> None:
        """Clear the whole screen (not a scroll)."""
        self._emitter.emit("2J")

    def clear_line(self) -> None:
        self._emitter.emit("2K")
