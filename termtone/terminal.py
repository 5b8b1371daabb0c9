# terminal.py
import os
import re
import select
import time
from typing import Optional

from prompt_toolkit.input.vt100 import raw_mode

from .colors import ANSIColor, Color, NoColor, RGBColor, luminance, to_rgb

ESC = "\033"
OSC = f"{ESC}]"
ST = f"{ESC}\\"

FOREGROUND_QUERY = f"{OSC}10;?{ST}"
BACKGROUND_QUERY = f"{OSC}11;?{ST}"

# Longest reply we are willing to buffer before giving up on a terminator
MAX_RESPONSE = 64

_XTERM_COLOR_RE = re.compile(
    r"\033\](?:10|11);rgb:"
    r"([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})/([0-9a-fA-F]{1,4})"
    r"(?:\007|\033\\)$"
)


def exchange(fd: int, request: str, timeout: float) -> Optional[str]:
    """
    Write a query to a terminal and read back one OSC reply.

    The terminal is put in raw mode for the round trip so the reply is not
    echoed. Returns None on timeout or if the descriptor is unusable.
    """
    buffer = bytearray()
    try:
        with raw_mode(fd):
            os.write(fd, request.encode())
            deadline = time.monotonic() + timeout
            while len(buffer) < MAX_RESPONSE:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                ready, _, _ = select.select([fd], [], [], remaining)
                if not ready:
                    return None
                chunk = os.read(fd, 1)
                if not chunk:
                    return None
                buffer.extend(chunk)
                if buffer.endswith(b"\007") or buffer.endswith(b"\033\\"):
                    return buffer.decode("ascii", errors="replace")
    except (OSError, ValueError):
        return None
    return None


def _scale(component: str) -> int:
    """Scale a 1-4 digit hex channel to 0..255."""
    return round(int(component, 16) * 255 / (16 ** len(component) - 1))


def parse_xterm_color(response: Optional[str]) -> Color:
    """
    Parse an OSC 10/11 reply such as ESC]11;rgb:1c1c/1c1c/1c1c ESC\\.

    Malformed replies give NoColor.
    """
    if not response:
        return NoColor()
    match = _XTERM_COLOR_RE.fullmatch(response)
    if not match:
        return NoColor()
    return RGBColor(*(_scale(part) for part in match.groups()))


def parse_colorfgbg(value: Optional[str], background: bool) -> Color:
    """Read a color index out of COLORFGBG ("fg;bg" or "fg;default;bg")."""
    if not value or ";" not in value:
        return NoColor()
    parts = value.split(";")
    part = parts[-1] if background else parts[0]
    if not (part.isascii() and part.isdigit()):
        return NoColor()
    return ANSIColor(int(part))


def is_dark(color: Color) -> bool:
    """Classify a background color; unknown colors are assumed dark."""
    rgb = to_rgb(color)
    if rgb is None:
        return True
    return luminance(rgb) < 0.5
