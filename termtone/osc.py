# osc.py

from .profile import Profile
from .terminal import OSC, ST

def hyperlink(url: str, label: str, profile: Profile = Profile.ANSI16) -> str:
    """
    Wrap label in an OSC 8 hyperlink pointing at url.

    Color-capable profiles get the escape sequence; at Ascii, or with an
    empty url, the label is returned as-is.
    """
    if not url or profile < Profile.ANSI16:
        return label
    return f"{OSC}8;;{url}{ST}{label}{OSC}8;;{ST}"

def notify(title: str, body: str, profile: Profile = Profile.ANSI16) -> str:
    """Build an OSC 777 desktop notification, or an empty string at Ascii."""
    if profile < Profile.ANSI16:
        return ""
    return f"{OSC}777;notify;{title};{body}{ST}"
