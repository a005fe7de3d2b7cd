"""Cursor control, line rasterization and shape drawing."""

from ansi_draw.draw.cursor import Cursor
from ansi_draw.draw.line import LineIter, is_orthogonal, orthogonal_span, rasterize
from ansi_draw.draw.painter import BoxChars, Painter, translate_box_chars

__all__ = [
    "Cursor",
    "LineIter",
    "is_orthogonal",
    "orthogonal_span",
    "rasterize",
    "BoxChars",
    "Painter",
    "translate_box_chars",
]
