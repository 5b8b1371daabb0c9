# profile.py

from enum import IntEnum
from typing import Optional

class Profile(IntEnum):
    """Color capability of a sink, ordered from least to most capable."""
    ASCII = 0
    ANSI16 = 1
    ANSI256 = 2
    TRUECOLOR = 3

PROFILE_NAMES = {
    Profile.ASCII: 'Ascii',
    Profile.ANSI16: 'ANSI',
    Profile.ANSI256: 'ANSI256',
    Profile.TRUECOLOR: 'TrueColor',
}

FORCE_COLOR_LEVELS = {
    '0': Profile.ASCII,
    '1': Profile.ANSI16,
    '2': Profile.ANSI256,
    '3': Profile.TRUECOLOR,
}

TRUECOLOR_TERMS = {
    'alacritty', 'contour', 'rio', 'wezterm', 'xterm-ghostty', 'xterm-kitty',
}

def profile_name(profile: Profile) -> str:
    """Return the conventional display name of a profile."""
    return PROFILE_NAMES.get(profile, 'Unknown')

def _getenv(env, key: str) -> str:
    return env.getenv(key) or ''

def cli_color_forced(env) -> bool:
    """True when CLICOLOR_FORCE is set to anything but "0"."""
    forced = _getenv(env, 'CLICOLOR_FORCE')
    return forced != '' and forced != '0'

def _force_signal(env) -> bool:
    return cli_color_forced(env) or _getenv(env, 'FORCE_COLOR') in ('1', '2', '3')

def env_no_color(env) -> bool:
    """
    Return True when the environment explicitly disables color.

    NO_COLOR counts as soon as it is present, even with an empty value.
    CLICOLOR=0 counts unless CLICOLOR_FORCE overrides it.
    """
    if env.getenv('NO_COLOR') is not None:
        return True
    return _getenv(env, 'CLICOLOR') == '0' and not cli_color_forced(env)

def _terminal_profile(env) -> Optional[Profile]:
    """Profile implied by COLORTERM/TERM alone, or None if they say nothing."""
    term = _getenv(env, 'TERM').lower()
    colorterm = _getenv(env, 'COLORTERM').lower()

    if _getenv(env, 'GOOGLE_CLOUD_SHELL') == 'true':
        return Profile.TRUECOLOR
    if 'truecolor' in colorterm or '24bit' in colorterm:
        # screen passes 256 colors only; tmux inside a screen TERM is fine
        if term.startswith('screen') and _getenv(env, 'TERM_PROGRAM') != 'tmux':
            return Profile.ANSI256
        return Profile.TRUECOLOR
    if colorterm in ('yes', 'true'):
        return Profile.ANSI256
    if term in TRUECOLOR_TERMS:
        return Profile.TRUECOLOR
    if '256color' in term:
        return Profile.ANSI256
    return None

def _env_profile(env, tty: bool) -> Profile:
    """Environment-driven steps shared by resolve_profile and env_color_profile."""
    floor = Profile.ANSI16 if cli_color_forced(env) else Profile.ASCII

    force_color = _getenv(env, 'FORCE_COLOR')
    if force_color in FORCE_COLOR_LEVELS:
        return max(floor, FORCE_COLOR_LEVELS[force_color])

    detected = _terminal_profile(env)
    if detected is not None:
        return max(floor, detected)

    clicolor = env.getenv('CLICOLOR')
    if clicolor == '0':
        return floor
    if clicolor is not None and tty:
        return Profile.ANSI16

    return Profile.ANSI16 if tty else floor

def resolve_profile(env, is_tty: bool, profile: Optional[Profile] = None,
                    tty: Optional[bool] = None) -> Profile:
    """
    Derive the color profile for a sink.

    Args:
        env: EnvironmentSource to read variables from.
        is_tty: Whether the sink is attached to a terminal.
        profile: Explicit override; wins over everything else.
        tty: Forced TTY answer. False disables color outright.

    Returns:
        The resolved Profile. Same inputs always give the same result.
    """
    if profile is not None:
        return Profile(profile)
    if env.getenv('NO_COLOR') is not None:
        return Profile.ASCII
    if tty is False:
        return Profile.ASCII
    if tty is True:
        is_tty = True
    if not is_tty and not _force_signal(env):
        return Profile.ASCII
    return _env_profile(env, is_tty)

def env_color_profile(env) -> Profile:
    """Profile the environment variables ask for, assuming a terminal is present."""
    return _env_profile(env, tty=True)
