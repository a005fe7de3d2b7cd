"""Key and line input for interactive drawing programs."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from ansi_draw.cli.core.terminal import Terminal


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F10 = auto()
    F12 = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press."""
    key: Optional[Key] = None   # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""               # Bytes as received

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None


# Escape sequences without the leading ESC
SEQUENCES: dict[str, Key] = {
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    '[H': Key.HOME,
    '[F': Key.END,
    '[1~': Key.HOME,
    '[4~': Key.END,
    '[5~': Key.PAGE_UP,
    '[6~': Key.PAGE_DOWN,
    '[2~': Key.INSERT,
    '[3~': Key.DELETE,
    'OP': Key.F1,
    'OQ': Key.F2,
    'OR': Key.F3,
    'OS': Key.F4,
    '[15~': Key.F5,
    '[21~': Key.F10,
    '[24~': Key.F12,
}

SIMPLE_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}

# Total wait for the rest of a split escape sequence
ESCAPE_WAIT = 0.1


class InputReader:
    """
    Decode key events from a file descriptor.

    Reads with os.read() so escape sequences are not held back by Python's
    buffering. ``feed()`` pushes text straight into the decoder.
    """

    def __init__(self, fd: Optional[int] = None):
        self._fd = fd
        self._buffer = ""

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def feed(self, data: str) -> None:
        self._buffer += data

    def pending(self) -> bool:
        return bool(self._buffer)

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Next key event, or None if nothing arrives within ``timeout``."""
        if self._buffer:
            return self.next_event()
        if not self._has_input(timeout):
            return None
        self._read_available()
        return self.next_event()

    def read_blocking(self) -> KeyEvent:
        """Block until a key event is available."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def next_event(self) -> Optional[KeyEvent]:
        """Decode one event from buffered input; None if nothing usable."""
        while self._buffer:
            head = self._buffer[0]
            if head in SIMPLE_KEYS:
                self._buffer = self._buffer[1:]
                return KeyEvent(key=SIMPLE_KEYS[head], raw=head)
            if head == '\x1b':
                return self._parse_escape_sequence()
            self._buffer = self._buffer[1:]
            if head.isprintable():
                return KeyEvent(char=head, raw=head)
            # Unknown control characters are dropped
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        rest = self._buffer[1:]
        if rest[:1] == 'O' and len(rest) >= 2:
            # SS3: 'O' plus exactly one final character
            seq = rest[:2]
            self._buffer = rest[2:]
            return KeyEvent(key=SEQUENCES.get(seq), raw='\x1b' + seq)

        # CSI parameters run up to a letter or '~'; other input is Alt+key
        start = 1 if rest[:1] == '[' else 0
        end = start
        for i, ch in enumerate(rest[start:], start=start):
            if ch == '\x1b':
                break
            end = i + 1
            if ch.isalpha() or ch == '~':
                break

        if end == 0:
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end]
        self._buffer = rest[end:]
        return KeyEvent(key=SEQUENCES.get(seq), raw='\x1b' + seq)

    def _read_available(self) -> None:
        try:
            data = os.read(self.fd, 1024)
        except (OSError, BlockingIOError):
            return
        self._buffer += data.decode('utf-8', errors='replace')
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        deadline = time.monotonic() + ESCAPE_WAIT
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if not self._has_input(min(remaining, 0.025)):
                continue
            try:
                data = os.read(self.fd, 1024)
            except (OSError, BlockingIOError):
                return
            self._buffer += data.decode('utf-8', errors='replace')
            rest = self._buffer[1:]
            if rest and rest != 'O' and (rest[-1].isalpha() or rest[-1] == '~' or rest in SEQUENCES):
                return

    def _has_input(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
        except (ValueError, OSError):
            return False
        return bool(ready)


def read_key(terminal: "Terminal", reader: Optional[InputReader] = None) -> KeyEvent:
    """Read a single key press with the terminal in raw mode."""
    reader = reader or InputReader()
    with terminal.raw_mode():
        return reader.read_blocking()


def read_line(stream: Optional[TextIO] = None) -> Optional[str]:
    """Read one line without its line ending; None at end of input."""
    line = (stream or sys.stdin).readline()
    if not line:
        return None
    return line.rstrip('\r\n')
