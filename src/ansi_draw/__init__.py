"""
ansi-draw: draw on the terminal with ANSI escape sequences

Move the cursor, stack colors, toggle styles and draw lines, boxes,
triangles and text onto the character grid.

Quick Start:
    >>> import ansi_draw as draw
    >>> draw.clear_all()
    >>> draw.with_fg(draw.Color.GREEN, lambda: draw.rect('#', 2, 1, 20, 8))
    >>> draw.line('*', 0, 0, 30, 10)
    >>> draw.flush()

Module functions draw through the shared stdout screen from
``get_screen()``; build a ``Screen`` yourself for any other stream.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

__version__ = "0.1.0"

from ansi_draw.attrs.style import Style
from ansi_draw.core.color import Color, ColorLike, ColorMode
from ansi_draw.core.config import DrawConfig
from ansi_draw.core.errors import AnsiDrawError, CoordinateError, NonOrthogonalError
from ansi_draw.draw.line import LineIter, rasterize
from ansi_draw.draw.painter import BoxChars
from ansi_draw.screen import Screen, get_screen

T = TypeVar("T")


def flush() -> None:
    get_screen().flush()


def normal() -> None:
    get_screen().normal()


def pixel(c: str, x: int, y: int) -> None:
    get_screen().pixel(c, x, y)


def orth_line(c: str, x1: int, y1: int, x2: int, y2: int) -> None:
    get_screen().orth_line(c, x1, y1, x2, y2)


def line(c: str, x1: int, y1: int, x2: int, y2: int) -> None:
    get_screen().line(c, x1, y1, x2, y2)


def rect(c: str, x1: int, y1: int, x2: int, y2: int) -> None:
    get_screen().rect(c, x1, y1, x2, y2)


def rect_fill(c: str, x1: int, y1: int, x2: int, y2: int) -> None:
    get_screen().rect_fill(c, x1, y1, x2, y2)


def triangle(c: str, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> None:
    get_screen().triangle(c, x1, y1, x2, y2, x3, y3)


def blit(src: str, x: int, y: int) -> None:
    get_screen().blit(src, x, y)


def blit_transparent(src: str, blank: Optional[str], x: int, y: int) -> None:
    get_screen().blit_transparent(src, blank, x, y)


def text(s: str, x: int, y: int) -> None:
    get_screen().text(s, x, y)


def println(s: str = '') -> None:
    get_screen().println(s)


def clear_all() -> None:
    get_screen().cursor.clear_all()


def goto(x: int, y: int) -> None:
    get_screen().cursor.pos(x, y)


def push_fg(color: ColorLike) -> None:
    get_screen().colors.push_fg(color)


def push_bg(color: ColorLike) -> None:
    get_screen().colors.push_bg(color)


def push_tc_fg(r: int, g: int, b: int) -> None:
    get_screen().colors.push_tc_fg(r, g, b)


def push_tc_bg(r: int, g: int, b: int) -> None:
    get_screen().colors.push_tc_bg(r, g, b)


def pop_fg() -> Optional[Color]:
    """Restore the previous foreground color; returns the one removed."""
    return get_screen().colors.pop_fg()


def pop_bg() -> Optional[Color]:
    """Restore the previous background color; returns the one removed."""
    return get_screen().colors.pop_bg()


def decolor() -> None:
    get_screen().colors.decolor()


def enable(style: Style) -> None:
    get_screen().styles.enable(style)


def disable(style: Style) -> None:
    get_screen().styles.disable(style)


def weight_off() -> None:
    """Turn off bold and faint together."""
    get_screen().styles.weight_off()


def disable_all() -> None:
    get_screen().styles.disable_all()


def with_fg(color: ColorLike, action: Callable[[], T]) -> T:
    return get_screen().with_fg(color, action)


def with_bg(color: ColorLike, action: Callable[[], T]) -> T:
    return get_screen().with_bg(color, action)


def with_style(style: Style, action: Callable[[], T]) -> T:
    return get_screen().with_style(style, action)


__all__ = [
    "__version__",
    # Types
    "Color",
    "ColorMode",
    "Style",
    "BoxChars",
    "DrawConfig",
    "Screen",
    "LineIter",
    # Errors
    "AnsiDrawError",
    "CoordinateError",
    "NonOrthogonalError",
    # Shared screen
    "get_screen",
    "rasterize",
    "flush",
    "normal",
    "pixel",
    "orth_line",
    "line",
    "rect",
    "rect_fill",
    "triangle",
    "blit",
    "blit_transparent",
    "text",
    "println",
    "clear_all",
    "goto",
    # Attributes
    "push_fg",
    "push_bg",
    "push_tc_fg",
    "push_tc_bg",
    "pop_fg",
    "pop_bg",
    "decolor",
    "enable",
    "disable",
    "weight_off",
    "disable_all",
    "with_fg",
    "with_bg",
    "with_style",
]
