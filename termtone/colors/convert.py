# colors/convert.py

from functools import lru_cache
from typing import List, Optional

from rich.color_triplet import ColorTriplet

from ..profile import Profile
from .definitions import (
    ANSI256Color, ANSIColor, COLOR_KINDS, Color, NoColor, PALETTE, RGBColor,
)

FOREGROUND = '38'
BACKGROUND = '48'

def _distance(a: ColorTriplet, b: ColorTriplet) -> int:
    # Squared Euclidean distance; ordering is all that matters
    return (a.red - b.red) ** 2 + (a.green - b.green) ** 2 + (a.blue - b.blue) ** 2

def _nearest(target: ColorTriplet, start: int, stop: int) -> int:
    """Index in PALETTE[start:stop] closest to target; ties go to the lowest index."""
    best, best_distance = start, None
    for index in range(start, stop):
        distance = _distance(target, PALETTE[index])
        if best_distance is None or distance < best_distance:
            best, best_distance = index, distance
    return best

def _clamp_index(index: int) -> int:
    return min(max(index, 0), len(PALETTE) - 1)

# Every palette entry pre-assigned to its nearest of the 16 base colors
ANSI256_TO_ANSI: List[int] = [_nearest(rgb, 0, 16) for rgb in PALETTE]

@lru_cache(maxsize=1024)
def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Nearest extended palette index (16-255) for an RGB value.

    Entries 0-15 are left out because their RGB values are terminal
    dependent and duplicated in the cube.
    """
    return _nearest(ColorTriplet(r, g, b), 16, len(PALETTE))

def ansi256_to_ansi(index: int) -> int:
    """Map a 256-palette index to one of the 16 base colors."""
    return ANSI256_TO_ANSI[_clamp_index(index)]

def degrade(color: Color, profile: Profile) -> Color:
    """
    Convert color to the nearest color representable at profile.

    Never upgrades and never raises; out-of-range indices are clamped
    for the palette lookup only.
    """
    if profile <= Profile.ASCII:
        return NoColor()
    kind = COLOR_KINDS.get(type(color))
    if kind is None or kind == Profile.ASCII:
        return NoColor()
    if profile >= kind:
        return color

    match color:
        case ANSI256Color(index=index):
            return ANSIColor(ansi256_to_ansi(index))
        case RGBColor(r=r, g=g, b=b):
            index = rgb_to_ansi256(r, g, b)
            if profile >= Profile.ANSI256:
                return ANSI256Color(index)
            return ANSIColor(ansi256_to_ansi(index))
        case _:
            return NoColor()

def sequence(color: Color, background: bool = False) -> str:
    """
    Return the SGR parameter fragment for a color, without ESC[ and m.

    Args:
        color: Color to encode.
        background: Encode as background instead of foreground.
    """
    match color:
        case ANSIColor(index=index):
            base = 40 if background else 30
            if index < 8:
                return str(base + index)
            return str(base + 60 + index - 8)
        case ANSI256Color(index=index):
            return f"{BACKGROUND if background else FOREGROUND};5;{index}"
        case RGBColor(r=r, g=g, b=b):
            return f"{BACKGROUND if background else FOREGROUND};2;{r};{g};{b}"
        case _:
            return ''

def to_rgb(color: Color) -> Optional[ColorTriplet]:
    """RGB value of a color, or None for NoColor."""
    match color:
        case RGBColor():
            return color.triplet
        case ANSIColor(index=index) | ANSI256Color(index=index):
            return PALETTE[_clamp_index(index)]
        case _:
            return None

def luminance(rgb: ColorTriplet) -> float:
    """Relative luminance on the 0..1 scale."""
    r, g, b = rgb.normalized
    return 0.2126 * r + 0.7152 * g + 0.0722 * b
