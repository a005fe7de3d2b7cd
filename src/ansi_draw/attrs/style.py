"""
Text styles: bold, faint, italic, underline, strike.

Styles do not stack. Enabling one is idempotent and disabling one turns
it off outright. Bold and faint share a single reset code (SGR 22) on
real terminals, since there is no portable way to clear just one of
them; disabling either clears both, and ``weight_off`` names that
operation directly.
"""

from __future__ import annotations

from enum import Enum

from ansi_draw.codec.escape import Emitter


class Style(Enum):
    """Text style attributes."""
    BOLD = "bold"
    FAINT = "faint"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE = "strike"


WEIGHT_OFF = "22"

# (on, off) SGR codes per style
STYLE_CODES: dict[Style, tuple[str, str]] = {
    Style.BOLD: ("1", WEIGHT_OFF),
    Style.FAINT: ("2", WEIGHT_OFF),
    Style.ITALIC: ("3", "23"),
    Style.UNDERLINE: ("4", "24"),
    Style.STRIKE: ("9", "29"),
}

# Styles cleared together by one off code
WEIGHT_STYLES = frozenset({Style.BOLD, Style.FAINT})


class StyleEngine:
    """
    Emit style on/off codes and track which styles are on.

    Not thread-safe; concurrent style changes from several threads are
    unsupported.
    """

    def __init__(self, emitter: Emitter):
        self._emitter = emitter
        self._active: set[Style] = set()

    @property
    def active(self) -> frozenset[Style]:
        return frozenset(self._active)

    def is_active(self, style: Style) -> bool:
        return style in self._active

    def enable(self, style: Style) -> None:
        on, _ = STYLE_CODES[Style(style)]
        self._emitter.emit(f"{on}m")
        self._active.add(Style(style))

    def disable(self, style: Style) -> None:
        """Turn a style off. Bold and faint both clear the whole weight."""
        style = Style(style)
        if style in WEIGHT_STYLES:
            self.weight_off()
            return
        _, off = STYLE_CODES[style]
        self._emitter.emit(f"{off}m")
        self._active.discard(style)

    def weight_off(self) -> None:
        """Disable both bold and faint."""
        self._emitter.emit(f"{WEIGHT_OFF}m")
        self._active -= WEIGHT_STYLES

    def disable_all(self) -> None:
        seen: set[str] = set()
        for style, (_, off) in STYLE_CODES.items():
            if off in seen:
                continue
            seen.add(off)
            self.disable(style)

    def bold(self) -> None:
        self.enable(Style.BOLD)

    def faint(self) -> None:
        self.enable(Style.FAINT)

    def italic(self) -> None:
        self.enable(Style.ITALIC)

    def underline(self) -> None:
        self.enable(Style.UNDERLINE)

    def strike(self) -> None:
        self.enable(Style.STRIKE)
