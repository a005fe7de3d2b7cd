"""Exceptions raised by ansi-draw."""


class AnsiDrawError(Exception):
    """Base class for drawing errors."""


class NonOrthogonalError(AnsiDrawError, ValueError):
    """
    A non-orthogonal line was passed to an orthogonal-only operation.

    Raised by orth_line and everything built on it (rectangles, fills,
    boxes) when the endpoints share neither a row nor a column.
    """

    def __init__(self, x1: int, y1: int, x2: int, y2: int):
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        super().__init__(
            f"line ({x1}, {y1}) -> ({x2}, {y2}) is neither horizontal nor vertical"
        )

    @property
    def endpoints(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.x1, self.y1), (self.x2, self.y2)


class CoordinateError(AnsiDrawError, ValueError):
    """A cell was addressed with a negative column or row."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"cell ({x}, {y}) is off the grid; columns and rows start at 0")


def check_cell(x: int, y: int) -> None:
    """Raise CoordinateError unless both coordinates are non-negative."""
    if x < 0 or y < 0:
        raise CoordinateError(x, y)
