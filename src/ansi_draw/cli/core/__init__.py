"""Terminal I/O collaborators: size, raw mode, input."""

from ansi_draw.cli.core.terminal import CursorStyle, RawModeGuard, Terminal, TerminalSize
from ansi_draw.cli.core.input import InputReader, Key, KeyEvent, read_key, read_line

__all__ = [
    "Terminal",
    "TerminalSize",
    "CursorStyle",
    "RawModeGuard",
    "InputReader",
    "KeyEvent",
    "Key",
    "read_key",
    "read_line",
]
