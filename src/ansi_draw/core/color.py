"""Color representation for terminal drawing."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    INDEXED = "256"         # 8-bit palette index (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


# Channel reset codes
FG_RESET = "39"
BG_RESET = "49"


@dataclass(frozen=True)
class Color:
    """
    Represents a color value: either a palette index or an RGB triple.

    Immutable once constructed; use the classmethods to build one so
    that components are range checked.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    # Standard 16 colors (palette index 0-15)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def indexed(cls, index: int) -> "Color":
        """Create a Color from a 256-color palette index."""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index!r}")
        return cls(ColorMode.INDEXED, index)

    # Alias matching the SGR naming
    from_256 = indexed

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def coerce(cls, value: Union["Color", int, tuple[int, int, int]]) -> "Color":
        """Accept a Color, a palette index, or an (r, g, b) tuple."""
        if isinstance(value, Color):
            return value
        if isinstance(value, tuple):
            if len(value) != 3:
                raise ValueError(f"RGB tuple must have 3 components, got {value!r}")
            return cls.from_rgb(*value)
        return cls.indexed(value)

    @property
    def is_true_color(self) -> bool:
        return self.mode == ColorMode.TRUE_COLOR

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.INDEXED:
            return f"38;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.INDEXED:
            return f"48;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"48;2;{r};{g};{b}"


ColorLike = Union[Color, int, tuple[int, int, int]]


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.INDEXED, 0)
Color.RED = Color(ColorMode.INDEXED, 1)
Color.GREEN = Color(ColorMode.INDEXED, 2)
Color.YELLOW = Color(ColorMode.INDEXED, 3)
Color.BLUE = Color(ColorMode.INDEXED, 4)
Color.MAGENTA = Color(ColorMode.INDEXED, 5)
Color.CYAN = Color(ColorMode.INDEXED, 6)
Color.WHITE = Color(ColorMode.INDEXED, 7)
Color.BRIGHT_BLACK = Color(ColorMode.INDEXED, 8)
Color.BRIGHT_RED = Color(ColorMode.INDEXED, 9)
Color.BRIGHT_GREEN = Color(ColorMode.INDEXED, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.INDEXED, 11)
Color.BRIGHT_BLUE = Color(ColorMode.INDEXED, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.INDEXED, 13)
Color.BRIGHT_CYAN = Color(ColorMode.INDEXED, 14)
Color.BRIGHT_WHITE = Color(ColorMode.INDEXED, 15)
