# style/engine.py

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional

from ..colors import Color, degrade, sequence
from ..profile import Profile
from .definitions import ATTRIBUTES, CSI, RESET

@dataclass(frozen=True)
class Style:
    """
    A span of text with attributes and colors, bound to a profile.

    Styles are values: every mutator returns a new Style and leaves the
    original untouched, so one base style can be branched freely.
    """
    text: str = ''
    profile: Profile = Profile.ANSI16
    attributes: FrozenSet[str] = field(default_factory=frozenset)
    fg: Optional[Color] = None
    bg: Optional[Color] = None

    def _with(self, name: str) -> 'Style':
        return replace(self, attributes=self.attributes | {name})

    def bold(self) -> 'Style':
        return self._with('bold')

    def faint(self) -> 'Style':
        return self._with('faint')

    def italic(self) -> 'Style':
        return self._with('italic')

    def underline(self) -> 'Style':
        return self._with('underline')

    def overline(self) -> 'Style':
        return self._with('overline')

    def blink(self) -> 'Style':
        return self._with('blink')

    def reverse(self) -> 'Style':
        return self._with('reverse')

    def crossout(self) -> 'Style':
        return self._with('crossout')

    def foreground(self, color: Optional[Color]) -> 'Style':
        """Set the foreground color; None clears it."""
        return replace(self, fg=color)

    def background(self, color: Optional[Color]) -> 'Style':
        """Set the background color; None clears it."""
        return replace(self, bg=color)

    def codes(self) -> List[str]:
        """SGR parameters for this style, independent of the order they were applied in."""
        if self.profile <= Profile.ASCII:
            return []
        codes = [code for name, code in ATTRIBUTES.items() if name in self.attributes]
        for color, is_bg in ((self.fg, False), (self.bg, True)):
            if color is None:
                continue
            fragment = sequence(degrade(color, self.profile), is_bg)
            if fragment:
                codes.append(fragment)
        return codes

    def styled(self, text: str) -> str:
        """Render text with this style's attributes and colors."""
        codes = self.codes()
        if not codes:
            return text
        return f"{CSI}{';'.join(codes)}m{text}{RESET}"

    def render(self) -> str:
        """Render the style's own text."""
        return self.styled(self.text)

    def __str__(self) -> str:
        return self.render()
