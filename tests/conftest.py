"""Pytest configuration: screens that write into memory."""

import io
import os

import pytest

from ansi_draw.codec.escape import CSI, Emitter
from ansi_draw.screen import Screen


class CapturedScreen(Screen):
    """A Screen writing to a StringIO, with helpers for reading it back."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        super().__init__(stream=self.buffer)

    def output(self) -> str:
        return self.buffer.getvalue()

    def take(self) -> str:
        """Return everything written so far and start over."""
        value = self.buffer.getvalue()
        self.buffer.seek(0)
        self.buffer.truncate()
        return value


def csi(*codes: str) -> str:
    """Concatenate ``ESC [ code`` for each code."""
    return "".join(f"{CSI}{code}" for code in codes)


def px(c: str, x: int, y: int) -> str:
    """Expected output for a pixel."""
    return f"{CSI}{y + 1};{x + 1}H{c}"


@pytest.fixture
def screen() -> CapturedScreen:
    return CapturedScreen()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def emitter(buffer: io.StringIO) -> Emitter:
    return Emitter(buffer)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ANSI_DRAW_* settings from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("ANSI_DRAW_"):
            monkeypatch.delenv(name)
