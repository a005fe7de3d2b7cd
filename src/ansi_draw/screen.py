"""Screen: one output stream with its color stacks, styles and drawing tools."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO, TypeVar

from ansi_draw.attrs.color_stack import ColorStacks
from ansi_draw.attrs.scoped import Reset, color_scope, run_scoped, style_scope
from ansi_draw.attrs.style import Style, StyleEngine
from ansi_draw.cli.core.terminal import Terminal
from ansi_draw.codec.escape import NORMAL, Emitter
from ansi_draw.core.color import Color, ColorLike
from ansi_draw.core.config import DrawConfig
from ansi_draw.draw.cursor import Cursor
from ansi_draw.draw.painter import Painter


T = TypeVar("T")


class Screen:
    """
    Handle for drawing to one terminal.

    Holds the state that outlives a single call (the color stacks and the
    active styles), so separate instances never interfere. Use
    ``get_screen()`` for the shared process-wide instance on stdout.

    Example:
        >>> screen = Screen()
        >>> screen.with_fg(Color.RED, lambda: screen.text("alert", 0, 0))
        >>> screen.flush()
    """

    def __init__(self, stream: Optional[TextIO] = None, config: Optional[DrawConfig] = None):
        self.config = config or DrawConfig()
        self.emitter = Emitter(stream, auto_flush=self.config.auto_flush)
        self.cursor = Cursor(self.emitter, bottom_row=self.config.bottom_row)
        self.painter = Painter(self.emitter, self.cursor)
        self.colors = ColorStacks(self.emitter)
        self.styles = StyleEngine(self.emitter)
        self.terminal = Terminal(self.emitter, self.config)

    # Output

    def emit(self, code: str) -> None:
        self.emitter.emit(code)

    def flush(self) -> None:
        self.emitter.flush()

    def normal(self) -> None:
        """Disable all style and color attributes (SGR 0)."""
        self.emitter.emit(NORMAL)

    # Drawing

    def pixel(self, c: str, x: int, y: int) -> None:
        self.painter.pixel(c, x, y)

    def orth_line(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        self.painter.orth_line(c, x1, y1, x2, y2)

    def line(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        self.painter.line(c, x1, y1, x2, y2)

    def rect(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        self.painter.rect(c, x1, y1, x2, y2)

    def rect_fill(self, c: str, x1: int, y1: int, x2: int, y2: int) -> None:
        self.painter.rect_fill(c, x1, y1, x2, y2)

    def triangle(self, c: str, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> None:
        self.painter.triangle(c, x1, y1, x2, y2, x3, y3)

    def blit(self, src: str, x: int, y: int) -> None:
        self.painter.blit(src, x, y)

    def blit_transparent(self, src: str, blank: Optional[str], x: int, y: int) -> None:
        self.painter.blit_transparent(src, blank, x, y)

    def text(self, s: str, x: int, y: int) -> None:
        self.painter.text(s, x, y)

    def println(self, s: str = '') -> None:
        self.painter.println(s)

    # Scoped attributes

    @contextmanager
    def fg(self, color: ColorLike) -> Iterator[None]:
        with color_scope(self.colors.fg, color):
            yield

    @contextmanager
    def bg(self, color: ColorLike) -> Iterator[None]:
        with color_scope(self.colors.bg, color):
            yield

    @contextmanager
    def style(self, style: Style) -> Iterator[None]:
        with style_scope(self.styles, style):
            yield

    def with_fg(self, color: ColorLike, action: Callable[[], T]) -> T:
        """Set the foreground color, run ``action``, then restore it."""
        return run_scoped(color_scope(self.colors.fg, color), action)

    def with_bg(self, color: ColorLike, action: Callable[[], T]) -> T:
        """Set the background color, run ``action``, then restore it."""
        return run_scoped(color_scope(self.colors.bg, color), action)

    def with_tc_fg(self, r: int, g: int, b: int, action: Callable[[], T]) -> T:
        return self.with_fg(Color.from_rgb(r, g, b), action)

    def with_tc_bg(self, r: int, g: int, b: int, action: Callable[[], T]) -> T:
        return self.with_bg(Color.from_rgb(r, g, b), action)

    def with_style(self, style: Style, action: Callable[[], T]) -> T:
        """Enable a style, run ``action``, then disable it."""
        return run_scoped(style_scope(self.styles, style), action)

    def with_bold(self, action: Callable[[], T]) -> T:
        return self.with_style(Style.BOLD, action)

    def with_faint(self, action: Callable[[], T]) -> T:
        return self.with_style(Style.FAINT, action)

    def with_italic(self, action: Callable[[], T]) -> T:
        return self.with_style(Style.ITALIC, action)

    def with_underline(self, action: Callable[[], T]) -> T:
        return self.with_style(Style.UNDERLINE, action)

    def with_strike(self, action: Callable[[], T]) -> T:
        return self.with_style(Style.STRIKE, action)

    def reset_guard(self) -> Reset:
        """Context manager that resets styles and colors on exit."""
        return Reset(self.styles, self.colors)


_default_screen: Optional[Screen] = None
_default_lock = threading.Lock()


def get_screen() -> Screen:
    """The shared Screen on stdout, created on first use."""
    global _default_screen
    if _default_screen is None:
        with _default_lock:
            if _default_screen is None:
                _default_screen = Screen(config=DrawConfig.from_env())
    return _default_screen
