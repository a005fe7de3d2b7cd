"""Line rasterization on the character grid."""

from __future__ import annotations

from typing import Iterator

from ansi_draw.core.errors import NonOrthogonalError


Point = tuple[int, int]


def is_orthogonal(x1: int, y1: int, x2: int, y2: int) -> bool:
    """True if the line is horizontal or vertical (or a single cell)."""
    return x1 == x2 or y1 == y2


def orthogonal_span(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """
    Walk a horizontal or vertical line from its low end to its high end.

    Both ends are included regardless of the order they are given in.
    Raises NonOrthogonalError before yielding anything otherwise.
    """
    if not is_orthogonal(x1, y1, x2, y2):
        raise NonOrthogonalError(x1, y1, x2, y2)
    return _span(x1, y1, x2, y2)


def _span(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    if x1 == x2:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            yield x1, y
    else:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            yield x, y1


class LineIter:
    """
    Bresenham line from (x1, y1) to (x2, y2), both endpoints included.

    Works in every octant: the longer axis is stepped once per point and
    the shorter one whenever the error term crosses zero, so the result is
    8-connected with exactly ``max(|dx|, |dy|) + 1`` points. One-shot:
    build a new LineIter to walk the same line again.
    """

    def __init__(self, x1: int, y1: int, x2: int, y2: int):
        self._x = x1
        self._y = y1

        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        self._sx = 1 if x2 >= x1 else -1
        self._sy = 1 if y2 >= y1 else -1

        # Step along y when it is the longer axis
        self._steep = dy > dx
        if self._steep:
            dx, dy = dy, dx
        self._major = dx
        self._minor = dy

        self._err = 2 * dy - dx
        self._remaining = dx + 1

    def __iter__(self) -> "LineIter":
        return self

    def __next__(self) -> Point:
        if self._remaining <= 0:
            raise StopIteration
        point = (self._x, self._y)
        self._remaining -= 1

        if self._err > 0:
            if self._steep:
                self._x += self._sx
            else:
                self._y += self._sy
            self._err -= 2 * self._major
        self._err += 2 * self._minor

        if self._steep:
            self._y += self._sy
        else:
            self._x += self._sx

        return point

    def __length_hint__(self) -> int:
        return max(self._remaining, 0)


def rasterize(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    """Cells covered by a line, using the straight walk for orthogonal input."""
    if is_orthogonal(x1, y1, x2, y2):
        return _span(x1, y1, x2, y2)
    return LineIter(x1, y1, x2, y2)
