# style/__init__.py

from .definitions import ATTRIBUTES, RESET
from .engine import Style

__all__ = ['ATTRIBUTES', 'RESET', 'Style']
