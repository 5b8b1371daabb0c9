# __init__.py

from .logger import Logger
from .profile import Profile, profile_name, resolve_profile
from .environment import EnvironmentSource, MappingEnvironment, ProcessEnvironment
from .colors import (
    ANSI256Color, ANSIColor, Color, NoColor, RGBColor,
    degrade, hex_color, parse_color, sequence,
)
from .style import Style
from .output import Output, default_output, reset_default_output, set_default_output

def string(*texts: str) -> Style:
    """Start a Style bound to the default output's profile."""
    return default_output().string(*texts)

def color(spec: str) -> Color:
    return default_output().color(spec)

def color_profile() -> Profile:
    return default_output().color_profile()

def env_color_profile() -> Profile:
    return default_output().env_color_profile()

def env_no_color() -> bool:
    return default_output().env_no_color()

def has_dark_background() -> bool:
    return default_output().has_dark_background()

def foreground_color() -> Color:
    return default_output().foreground_color()

def background_color() -> Color:
    return default_output().background_color()

def hyperlink(url: str, label: str) -> str:
    return default_output().hyperlink(url, label)

def notify(title: str, body: str) -> str:
    """OSC 777 desktop notification for the default output, or "" without color."""
    return default_output().notify(title, body)

__all__ = [
    "Logger", "Profile", "profile_name", "resolve_profile",
    "EnvironmentSource", "MappingEnvironment", "ProcessEnvironment",
    "ANSI256Color", "ANSIColor", "Color", "NoColor", "RGBColor",
    "degrade", "hex_color", "parse_color", "sequence",
    "Style", "Output", "default_output", "reset_default_output", "set_default_output",
    "string", "color", "color_profile", "env_color_profile", "env_no_color",
    "has_dark_background", "foreground_color", "background_color", "hyperlink", "notify",
]
