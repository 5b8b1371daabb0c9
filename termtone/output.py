# output.py

import sys
import threading
from typing import Callable, Dict, Optional, TextIO

from .logger import Logger
from .environment import EnvironmentSource, ProcessEnvironment
from .profile import Profile, env_color_profile, env_no_color, profile_name, resolve_profile
from .colors import Color, NoColor, RGBColor, degrade, parse_color
from .style import Style
from .terminal import (
    BACKGROUND_QUERY, FOREGROUND_QUERY, is_dark, parse_colorfgbg, parse_xterm_color,
)
from .osc import hyperlink, notify

# Multiplexers and dumb terminals swallow or mangle OSC queries
UNSAFE_TERM_PREFIXES = ('screen', 'tmux', 'dumb')

class Output:
    """
    A sink together with everything needed to style text for it.

    Args:
        sink: Stream the styled text is meant for. Defaults to sys.stdout.
        profile: Explicit color profile; skips detection entirely.
        tty: Force the TTY answer instead of asking the sink.
        environment: EnvironmentSource to read variables and the terminal from.
        color_cache: Remember the detected profile and terminal colors.
        unsafe: Query the terminal even when it cannot be confirmed safe.
        query_timeout: Seconds to wait for a terminal reply.
        logger: Logger for detection diagnostics.
    """
    def __init__(self, sink: Optional[TextIO] = None, *,
                 profile: Optional[Profile] = None,
                 tty: Optional[bool] = None,
                 environment: Optional[EnvironmentSource] = None,
                 color_cache: bool = False,
                 unsafe: bool = False,
                 query_timeout: float = 0.1,
                 logger: Optional[Logger] = None):
        self.sink = sink if sink is not None else sys.stdout
        self.environment = environment if environment is not None else ProcessEnvironment()
        self.tty = tty
        self.color_cache = color_cache
        self.unsafe = unsafe
        self.query_timeout = query_timeout
        self.logger = logger or Logger(__name__)
        self._profile = Profile(profile) if profile is not None else None
        self._cache: Dict[str, object] = {}
        self._cache_lock = threading.Lock()
        self._query_lock = threading.Lock()

    def _once(self, key: str, compute: Callable[[], object]):
        """Compute a value, memoizing it when caching is enabled."""
        if not self.color_cache:
            return compute()
        with self._cache_lock:
            if key not in self._cache:
                self._cache[key] = compute()
            return self._cache[key]

    def is_tty(self) -> bool:
        """Whether the sink should be treated as a terminal."""
        if self.tty is not None:
            return self.tty
        if self.environment.getenv('CI'):
            return False
        return self.environment.is_tty(self.sink)

    def color_profile(self) -> Profile:
        """Resolve the profile for this sink."""
        return self._once('profile', self._resolve_profile)

    def _resolve_profile(self) -> Profile:
        profile = resolve_profile(self.environment, self.is_tty(),
                                  profile=self._profile, tty=self.tty)
        self.logger.debug(f"Resolved color profile: {profile_name(profile)}")
        return profile

    @property
    def profile(self) -> Profile:
        return self.color_profile()

    def env_color_profile(self) -> Profile:
        """Profile requested by environment variables alone."""
        return env_color_profile(self.environment)

    def env_no_color(self) -> bool:
        """Whether environment variables explicitly disable color."""
        return env_no_color(self.environment)

    def color(self, spec: str) -> Color:
        """Parse a color spec and degrade it to this output's profile."""
        return degrade(parse_color(spec), self.profile)

    def string(self, *texts: str) -> Style:
        """Start a Style for the given text, joined by spaces."""
        return Style(' '.join(texts), self.profile)

    def hyperlink(self, url: str, label: str) -> str:
        return hyperlink(url, label, self.profile)

    def notify(self, title: str, body: str) -> str:
        return notify(title, body, self.profile)

    def _queries_allowed(self) -> bool:
        if self.tty is False:
            return False
        if self.unsafe:
            return True
        if not self.is_tty():
            return False
        term = self.environment.getenv('TERM') or ''
        return not term.startswith(UNSAFE_TERM_PREFIXES)

    def _query(self, request: str) -> Optional[str]:
        """Single round trip with the terminal; one at a time per output."""
        with self._query_lock:
            response = self.environment.query_terminal(self.sink, request, self.query_timeout)
        if response is None:
            self.logger.debug("Terminal query got no reply")
        return response

    def _terminal_color(self, request: str, background: bool) -> Color:
        if self.tty is False or not (self.unsafe or self.is_tty()):
            return NoColor()
        if self._queries_allowed():
            color = parse_xterm_color(self._query(request))
            if isinstance(color, RGBColor):
                return color
        return parse_colorfgbg(self.environment.getenv('COLORFGBG'), background)

    def foreground_color(self) -> Color:
        """The terminal's default foreground color, or NoColor."""
        return self._once('foreground',
                          lambda: self._terminal_color(FOREGROUND_QUERY, background=False))

    def background_color(self) -> Color:
        """The terminal's default background color, or NoColor."""
        return self._once('background',
                          lambda: self._terminal_color(BACKGROUND_QUERY, background=True))

    def has_dark_background(self) -> bool:
        """Whether the terminal background is dark. Assumed dark when unknown."""
        dark = is_dark(self.background_color())
        self.logger.debug(f"Background classified as {'dark' if dark else 'light'}")
        return dark

_default_output: Optional[Output] = None
_default_lock = threading.Lock()

def default_output() -> Output:
    """Process-wide output for sys.stdout, created on first use."""
    global _default_output
    with _default_lock:
        if _default_output is None:
            environment = ProcessEnvironment()
            logger = Logger(__name__, logging_enabled=bool(environment.getenv('TERMTONE_DEBUG')),
                            log_file='-')
            _default_output = Output(sys.stdout, environment=environment, logger=logger)
        return _default_output

def set_default_output(output: Optional[Output]) -> None:
    global _default_output
    with _default_lock:
        _default_output = output

def reset_default_output() -> None:
    """Drop the default output so the next use detects afresh."""
    set_default_output(None)
