"""
Foreground/background color stacks.

The top of each stack is the color currently shown on that channel; an
empty stack means the terminal default. Pushing emits the new color right
away, popping re-emits whatever is now on top (or the channel reset), so
nested color changes unwind to exactly the color that was active before.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from ansi_draw.codec.escape import Emitter
from ansi_draw.core.color import BG_RESET, FG_RESET, Color, ColorLike


logger = logging.getLogger(__name__)


class Channel(Enum):
    """Which half of a cell a color applies to."""
    FG = "fg"
    BG = "bg"


class ColorStack:
    """
    Stack of colors for a single channel.

    Every mutation, including the escape it writes, runs under the stack's
    lock so output order always matches push/pop order across threads.
    """

    def __init__(self, emitter: Emitter, channel: Channel):
        self._emitter = emitter
        self.channel = channel
        self._colors: list[Color] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def depth(self) -> int:
        return len(self._colors)

    @property
    def top(self) -> Optional[Color]:
        """Color currently displayed, or None for the terminal default."""
        with self._lock:
            return self._colors[-1] if self._colors else None

    def push(self, color: ColorLike) -> Color:
        """Make ``color`` the current color for this channel."""
        color = Color.coerce(color)
        with self._lock:
            self._colors.append(color)
            self._show(color)
        return color

    def pop(self) -> Optional[Color]:
        """
        Drop the current color and restore the previous one.

        Popping an empty stack is allowed: it just re-emits the channel
        reset. Returns the color that was removed, if any.
        """
        with self._lock:
            removed = self._colors.pop() if self._colors else None
            if removed is None:
                logger.debug("pop on empty %s stack", self.channel.value)
            if self._colors:
                self._show(self._colors[-1])
            else:
                self._emitter.emit(f"{self._reset_code}m")
        return removed

    def snapshot(self) -> tuple[Color, ...]:
        with self._lock:
            return tuple(self._colors)

    @property
    def _reset_code(self) -> str:
        return FG_RESET if self.channel is Channel.FG else BG_RESET

    def _show(self, color: Color) -> None:
        if self.channel is Channel.FG:
            self._emitter.emit(f"{color.to_sgr_fg()}m")
        else:
            self._emitter.emit(f"{color.to_sgr_bg()}m")


class ColorStacks:
    """Both color channels for one output stream."""

    def __init__(self, emitter: Emitter):
        self.fg = ColorStack(emitter, Channel.FG)
        self.bg = ColorStack(emitter, Channel.BG)

    def stack(self, channel: Channel) -> ColorStack:
        return self.fg if channel is Channel.FG else self.bg

    def push_fg(self, color: ColorLike) -> None:
        """Push a palette (or any) color onto the foreground stack."""
        self.fg.push(color)

    def push_bg(self, color: ColorLike) -> None:
        """Push a palette (or any) color onto the background stack."""
        self.bg.push(color)

    def push_tc_fg(self, r: int, g: int, b: int) -> None:
        """Push a true color onto the foreground stack."""
        self.fg.push(Color.from_rgb(r, g, b))

    def push_tc_bg(self, r: int, g: int, b: int) -> None:
        """Push a true color onto the background stack."""
        self.bg.push(Color.from_rgb(r, g, b))

    def pop_fg(self) -> Optional[Color]:
        return self.fg.pop()

    def pop_bg(self) -> Optional[Color]:
        return self.bg.pop()

    def decolor(self) -> None:
        """Pop the most recent color off both stacks."""
        self.fg.pop()
        self.bg.pop()
