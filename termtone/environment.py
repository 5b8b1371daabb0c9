# environment.py

import os
from typing import Dict, List, Mapping, Optional, Protocol, TextIO

from .terminal import exchange

class EnvironmentSource(Protocol):
    """
    Read-only view of the process environment plus the terminal channel
    behind a sink. Everything that touches os.environ or a file descriptor
    goes through one of these so tests can swap in a synthetic one.
    """
    def getenv(self, key: str) -> Optional[str]: ...
    def environ(self) -> Dict[str, str]: ...
    def is_tty(self, sink: Optional[TextIO]) -> bool: ...
    def query_terminal(self, sink: Optional[TextIO], request: str,
                       timeout: float) -> Optional[str]: ...

class ProcessEnvironment:
    """Environment source backed by os.environ and real file descriptors."""

    def getenv(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def environ(self) -> Dict[str, str]:
        return dict(os.environ)

    def is_tty(self, sink: Optional[TextIO]) -> bool:
        if sink is None:
            return False
        try:
            return sink.isatty()
        except (AttributeError, ValueError, OSError):
            # Closed or detached streams count as "not a terminal"
            return False

    def query_terminal(self, sink: Optional[TextIO], request: str,
                       timeout: float) -> Optional[str]:
        if not self.is_tty(sink):
            return None
        try:
            fd = sink.fileno()
        except (AttributeError, ValueError, OSError):
            return None
        return exchange(fd, request, timeout)

class MappingEnvironment:
    """
    Environment source over a plain mapping.

    Args:
        variables: Environment variables visible to the resolver.
        tty: Answer returned by is_tty() for every sink.
        responses: Canned terminal replies keyed by the request sequence.
    """
    def __init__(self, variables: Optional[Mapping[str, str]] = None,
                 tty: bool = False,
                 responses: Optional[Mapping[str, str]] = None):
        self._variables = dict(variables or {})
        self._tty = tty
        self._responses = dict(responses or {})
        self.queries: List[str] = []

    def getenv(self, key: str) -> Optional[str]:
        return self._variables.get(key)

    def environ(self) -> Dict[str, str]:
        return dict(self._variables)

    def is_tty(self, sink: Optional[TextIO]) -> bool:
        return self._tty

    def query_terminal(self, sink: Optional[TextIO], request: str,
                       timeout: float) -> Optional[str]:
        self.queries.append(request)
        return self._responses.get(request)
