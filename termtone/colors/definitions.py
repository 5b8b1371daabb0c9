# colors/definitions.py

import re
from dataclasses import dataclass
from typing import List, Union

from rich.color_triplet import ColorTriplet

from ..profile import Profile

@dataclass(frozen=True)
class NoColor:
    """Absence of a color. Renders no escape codes."""

    def __str__(self) -> str:
        return ''

@dataclass(frozen=True)
class ANSIColor:
    """One of the 16 standard and bright colors (0-15)."""
    index: int

    def __str__(self) -> str:
        return str(self.index)

@dataclass(frozen=True)
class ANSI256Color:
    """An entry of the xterm 256-color palette (0-255)."""
    index: int

    def __str__(self) -> str:
        return str(self.index)

@dataclass(frozen=True)
class RGBColor:
    """A 24-bit color."""
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, spec: str) -> 'Color':
        """Parse '#RGB' or '#RRGGBB'; anything else gives NoColor."""
        return hex_color(spec)

    @property
    def triplet(self) -> ColorTriplet:
        return ColorTriplet(self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def __str__(self) -> str:
        return self.hex

Color = Union[NoColor, ANSIColor, ANSI256Color, RGBColor]

# Highest profile each color kind needs to render as-is
COLOR_KINDS = {
    NoColor: Profile.ASCII,
    ANSIColor: Profile.ANSI16,
    ANSI256Color: Profile.ANSI256,
    RGBColor: Profile.TRUECOLOR,
}

ANSI_RGB = [
    (0x00, 0x00, 0x00), (0x80, 0x00, 0x00), (0x00, 0x80, 0x00), (0x80, 0x80, 0x00),
    (0x00, 0x00, 0x80), (0x80, 0x00, 0x80), (0x00, 0x80, 0x80), (0xc0, 0xc0, 0xc0),
    (0x80, 0x80, 0x80), (0xff, 0x00, 0x00), (0x00, 0xff, 0x00), (0xff, 0xff, 0x00),
    (0x00, 0x00, 0xff), (0xff, 0x00, 0xff), (0x00, 0xff, 0xff), (0xff, 0xff, 0xff),
]

CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

def _build_palette() -> List[ColorTriplet]:
    """Expand the 256-color palette into RGB triplets."""
    palette = [ColorTriplet(*rgb) for rgb in ANSI_RGB]
    for r in CUBE_LEVELS:
        for g in CUBE_LEVELS:
            for b in CUBE_LEVELS:
                palette.append(ColorTriplet(r, g, b))
    for step in range(24):
        level = 8 + 10 * step
        palette.append(ColorTriplet(level, level, level))
    return palette

PALETTE = _build_palette()

_HEX_RE = re.compile(r'#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})')

def hex_color(spec: str) -> Color:
    """
    Parse a hex color specification.

    Short forms duplicate each nibble, so '#F00' equals '#FF0000'.
    Malformed input yields NoColor.
    """
    if not isinstance(spec, str) or not _HEX_RE.fullmatch(spec):
        return NoColor()
    digits = spec[1:]
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGBColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

def parse_color(spec: str) -> Color:
    """
    Build a color from a string.

    Decimal strings below 16 give an ANSIColor, 16-255 an ANSI256Color,
    strings starting with '#' are parsed as hex. Everything else is NoColor.
    """
    if not isinstance(spec, str) or not spec:
        return NoColor()
    if spec.startswith('#'):
        return hex_color(spec)
    if spec.isascii() and spec.isdigit():
        value = int(spec)
        if value < 16:
            return ANSIColor(value)
        if value < 256:
            return ANSI256Color(value)
    return NoColor()
