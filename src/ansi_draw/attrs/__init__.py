"""Color and style attribute state."""

from ansi_draw.attrs.color_stack import Channel, ColorStack, ColorStacks
from ansi_draw.attrs.scoped import Reset, color_scope, run_scoped, style_scope
from ansi_draw.attrs.style import STYLE_CODES, Style, StyleEngine

__all__ = [
    "Channel",
    "ColorStack",
    "ColorStacks",
    "Style",
    "StyleEngine",
    "STYLE_CODES",
    "Reset",
    "color_scope",
    "style_scope",
    "run_scoped",
]
