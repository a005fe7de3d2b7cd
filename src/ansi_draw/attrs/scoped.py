"""Scoped attribute changes that are always undone, even on exceptions."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator, TypeVar

from ansi_draw.attrs.color_stack import ColorStack, ColorStacks
from ansi_draw.attrs.style import Style, StyleEngine
from ansi_draw.core.color import ColorLike


T = TypeVar("T")


@contextmanager
def color_scope(stack: ColorStack, color: ColorLike) -> Iterator[None]:
    """Push ``color`` for the duration of the block, then pop it."""
    stack.push(color)
    try:
        yield
    finally:
        stack.pop()


@contextmanager
def style_scope(styles: StyleEngine, style: Style) -> Iterator[None]:
    """
    Enable ``style`` for the duration of the block, then disable it.

    Styles don't nest: an inner scope of the same style (or of bold inside
    faint, and vice versa) turns it fully off on exit.
    """
    styles.enable(style)
    try:
        yield
    finally:
        styles.disable(style)


def run_scoped(scope: ContextManager[object], action: Callable[[], T]) -> T:
    """Call ``action`` once inside ``scope`` and return its result."""
    with scope:
        return action()


class Reset:
    """
    Reset styles and colors when the block exits.

    Example:
        >>> with Reset(screen.styles, screen.colors):
        ...     screen.styles.bold()
        ...     screen.colors.push_fg(1)
    """

    def __init__(self, styles: StyleEngine, colors: ColorStacks):
        self._styles = styles
        self._colors = colors

    def __enter__(self) -> "Reset":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    def reset(self) -> None:
        self._styles.disable_all()
        self._colors.decolor()
