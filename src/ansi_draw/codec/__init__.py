"""Escape sequence output."""

from ansi_draw.codec.escape import CSI, ESC, Emitter

__all__ = ["CSI", "ESC", "Emitter"]
