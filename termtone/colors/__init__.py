# colors/__init__.py

from .definitions import (
    ANSI256Color, ANSIColor, Color, NoColor, PALETTE, RGBColor,
    hex_color, parse_color,
)
from .convert import (
    ansi256_to_ansi, degrade, luminance, rgb_to_ansi256, sequence, to_rgb,
)

# The 16 base colors by name
ANSI_BLACK = ANSIColor(0)
ANSI_RED = ANSIColor(1)
ANSI_GREEN = ANSIColor(2)
ANSI_YELLOW = ANSIColor(3)
ANSI_BLUE = ANSIColor(4)
ANSI_MAGENTA = ANSIColor(5)
ANSI_CYAN = ANSIColor(6)
ANSI_WHITE = ANSIColor(7)
ANSI_BRIGHT_BLACK = ANSIColor(8)
ANSI_BRIGHT_RED = ANSIColor(9)
ANSI_BRIGHT_GREEN = ANSIColor(10)
ANSI_BRIGHT_YELLOW = ANSIColor(11)
ANSI_BRIGHT_BLUE = ANSIColor(12)
ANSI_BRIGHT_MAGENTA = ANSIColor(13)
ANSI_BRIGHT_CYAN = ANSIColor(14)
ANSI_BRIGHT_WHITE = ANSIColor(15)

__all__ = [
    'ANSI256Color', 'ANSIColor', 'Color', 'NoColor', 'PALETTE', 'RGBColor',
    'hex_color', 'parse_color',
    'ansi256_to_ansi', 'degrade', 'luminance', 'rgb_to_ansi256', 'sequence', 'to_rgb',
    'ANSI_BLACK', 'ANSI_RED', 'ANSI_GREEN', 'ANSI_YELLOW', 'ANSI_BLUE',
    'ANSI_MAGENTA', 'ANSI_CYAN', 'ANSI_WHITE', 'ANSI_BRIGHT_BLACK',
    'ANSI_BRIGHT_RED', 'ANSI_BRIGHT_GREEN', 'ANSI_BRIGHT_YELLOW',
    'ANSI_BRIGHT_BLUE', 'ANSI_BRIGHT_MAGENTA', 'ANSI_BRIGHT_CYAN',
    'ANSI_BRIGHT_WHITE',
]
