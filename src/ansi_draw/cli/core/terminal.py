"""Low-level terminal operations: size, raw mode, screens, cursor shape."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from ansi_draw.codec.escape import Emitter
from ansi_draw.core.config import DrawConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    cols: int
    rows: int


class CursorStyle(Enum):
    """Cursor shapes (DECSCUSR parameter)."""
    DEFAULT_USER_SHAPE = 0
    BLINKING_BLOCK = 1
    STEADY_BLOCK = 2
    BLINKING_UNDERSCORE = 3
    STEADY_UNDERSCORE = 4
    BLINKING_BAR = 5
    STEADY_BAR = 6


class Terminal:
    """Terminal control that goes beyond drawing cells."""

    def __init__(self, emitter: Emitter, config: Optional[DrawConfig] = None):
        self._emitter = emitter
        self._config = config or DrawConfig()
        self._saved_mode: Optional[list] = None

    @staticmethod
    def size() -> Optional[TerminalSize]:
        """Current terminal dimensions, or None if there is no terminal."""
        try:
            size = os.get_terminal_size()
        except OSError:
            return None
        return TerminalSize(size.columns, size.lines)

    def size_or(self) -> TerminalSize:
        """Current terminal dimensions, falling back to the configured default."""
        return self.size() or TerminalSize(self._config.default_cols, self._config.default_rows)

    def secondary_screen(self) -> None:
        """Switch to the alternate screen buffer."""
        self._emitter.emit('?1049h')

    def primary_screen(self) -> None:
        """Switch back to the main screen buffer."""
        self._emitter.emit('?1049l')

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use the alternate screen buffer (preserves scrollback)."""
        self.secondary_screen()
        self._emitter.flush()
        try:
            yield
        finally:
            self.primary_screen()
            self._emitter.flush()

    def hide_cursor(self) -> None:
        self._emitter.emit('?25l')

    def show_cursor(self) -> None:
        self._emitter.emit('?25h')

    def set_cursor_style(self, style: CursorStyle) -> None:
        self._emitter.emit(f'{CursorStyle(style).value} q')

    def enable_raw_mode(self) -> None:
        """Deliver keystrokes immediately, unechoed (Unix only)."""
        import termios
        import tty

        fd = sys.stdin.fileno()
        if self._saved_mode is None:
            self._saved_mode = termios.tcgetattr(fd)
        tty.setraw(fd)
        logger.debug("raw mode enabled on fd %d", fd)

    def disable_raw_mode(self) -> None:
        """Restore the terminal mode saved by enable_raw_mode."""
        if self._saved_mode is None:
            return
        import termios

        fd = sys.stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_mode)
        self._saved_mode = None
        logger.debug("raw mode disabled on fd %d", fd)

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw terminal mode."""
        self.enable_raw_mode()
        try:
            yield
        finally:
            self.disable_raw_mode()


class RawModeGuard:
    """
    Enter raw mode on ``__enter__`` and always leave it on ``__exit__``.

    Example:
        >>> with RawModeGuard(screen.terminal):
        ...     key = reader.read_blocking()
    """

    def __init__(self, terminal: Terminal):
        self._terminal = terminal

    def __enter__(self) -> "RawModeGuard":
        self._terminal.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._terminal.disable_raw_mode()
