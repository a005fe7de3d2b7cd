"""Core value types, errors and settings."""

from ansi_draw.core.color import Color, ColorMode
from ansi_draw.core.config import DrawConfig
from ansi_draw.core.errors import AnsiDrawError, CoordinateError, NonOrthogonalError

__all__ = [
    "Color",
    "ColorMode",
    "DrawConfig",
    "AnsiDrawError",
    "CoordinateError",
    "NonOrthogonalError",
]
