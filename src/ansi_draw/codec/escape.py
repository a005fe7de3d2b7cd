"""Escape Emitter: writes raw CSI sequences to an output stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


ESC = '\x1b'
CSI = f'{ESC}['

# SGR full reset
NORMAL = '0m'


class Emitter:
    """
    Write ``ESC [`` sequences and plain text to a stream.

    With no stream given, ``sys.stdout`` is looked up at every write so
    redirected or captured stdout is honored. Nothing is flushed unless
    ``auto_flush`` is set or ``flush()`` is called. Write errors propagate
    from the stream unchanged.
    """

    def __init__(self, stream: Optional[TextIO] = None, auto_flush: bool = False):
        self._stream = stream
        self.auto_flush = auto_flush

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, code: str) -> None:
        """Write ``ESC [ code`` with no trailing newline."""
        self.write(f'{CSI}{code}')

    def write(self, text: str) -> None:
        """Write text as-is."""
        stream = self.stream
        stream.write(text)
        if self.auto_flush:
            stream.flush()

    def flush(self) -> None:
        self.stream.flush()
