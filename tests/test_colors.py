# test_colors.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termtone.colors import (
    ANSI256Color, ANSIColor, NoColor, PALETTE, RGBColor,
    ansi256_to_ansi, degrade, hex_color, parse_color, rgb_to_ansi256, sequence, to_rgb,
)
from termtone.profile import Profile

SAMPLE_COLORS = [
    NoColor(),
    ANSIColor(0), ANSIColor(9), ANSIColor(15), ANSIColor(-1), ANSIColor(999),
    ANSI256Color(16), ANSI256Color(196), ANSI256Color(244), ANSI256Color(-5), ANSI256Color(300),
    RGBColor(255, 0, 0), RGBColor(18, 52, 86), RGBColor(128, 128, 128), RGBColor(250, 250, 250),
]


class TestHexParsing:
    """Hex specs parse to RGB or quietly fall back to NoColor."""

    def test_short_and_long_forms_match(self):
        assert hex_color("#F00") == hex_color("#FF0000") == RGBColor(255, 0, 0)

    def test_case_insensitive(self):
        assert hex_color("#abcdef") == hex_color("#ABCDEF") == RGBColor(0xab, 0xcd, 0xef)

    def test_from_hex(self):
        assert RGBColor.from_hex("#0f8") == RGBColor(0x00, 0xff, 0x88)

    @pytest.mark.parametrize("spec", ["invalid", "#ZZZZZZ", "", "#12345", "#1234567", "#", " ", "FF0000"])
    def test_invalid_specs(self, spec):
        assert hex_color(spec) == NoColor()

    def test_hex_property(self):
        assert RGBColor(255, 0, 16).hex == "#ff0010"
        assert str(RGBColor(255, 0, 16)) == "#ff0010"


class TestParseColor:
    """Dispatch constructor for color specs."""

    def test_ansi(self):
        assert parse_color("0") == ANSIColor(0)
        assert parse_color("15") == ANSIColor(15)

    def test_ansi256(self):
        assert parse_color("16") == ANSI256Color(16)
        assert parse_color("255") == ANSI256Color(255)

    def test_hex(self):
        assert parse_color("#FF0000") == RGBColor(255, 0, 0)

    @pytest.mark.parametrize("spec", ["", "red", "256", "-1", " 5", "1.5", "#GGG"])
    def test_unrecognized(self, spec):
        assert parse_color(spec) == NoColor()


class TestPalette:
    """The expanded 256-color palette."""

    def test_size(self):
        assert len(PALETTE) == 256

    def test_cube_and_gray_entries(self):
        assert tuple(PALETTE[16]) == (0, 0, 0)
        assert tuple(PALETTE[196]) == (255, 0, 0)
        assert tuple(PALETTE[231]) == (255, 255, 255)
        assert tuple(PALETTE[232]) == (8, 8, 8)
        assert tuple(PALETTE[255]) == (238, 238, 238)

    def test_base_colors_map_to_themselves(self):
        assert [ansi256_to_ansi(i) for i in range(16)] == list(range(16))

    def test_lookup_clamps_out_of_range(self):
        assert ansi256_to_ansi(-5) == 0
        assert ansi256_to_ansi(300) == ansi256_to_ansi(255) == 15


class TestDegrade:
    """Conversion of colors down to a profile."""

    def test_red_to_ansi256(self):
        assert degrade(RGBColor(255, 0, 0), Profile.ANSI256) == ANSI256Color(196)

    def test_red_to_ansi16(self):
        assert degrade(RGBColor(255, 0, 0), Profile.ANSI16) == ANSIColor(9)

    def test_blue(self):
        assert degrade(RGBColor(0, 0, 255), Profile.ANSI256) == ANSI256Color(21)
        assert degrade(RGBColor(0, 0, 255), Profile.ANSI16) == ANSIColor(12)

    def test_gray_prefers_ramp(self):
        assert rgb_to_ansi256(128, 128, 128) == 244
        assert degrade(ANSI256Color(244), Profile.ANSI16) == ANSIColor(8)

    def test_ansi256_to_ansi16(self):
        assert degrade(ANSI256Color(196), Profile.ANSI16) == ANSIColor(9)
        assert degrade(ANSI256Color(16), Profile.ANSI16) == ANSIColor(0)

    def test_ascii_drops_everything(self):
        for color in SAMPLE_COLORS:
            assert degrade(color, Profile.ASCII) == NoColor()

    def test_never_upgrades(self):
        assert degrade(ANSIColor(3), Profile.TRUECOLOR) == ANSIColor(3)
        assert degrade(ANSI256Color(100), Profile.TRUECOLOR) == ANSI256Color(100)
        assert degrade(NoColor(), Profile.TRUECOLOR) == NoColor()

    def test_out_of_range_passes_through(self):
        assert degrade(ANSIColor(999), Profile.ANSI16) == ANSIColor(999)
        assert degrade(ANSI256Color(-5), Profile.ANSI256) == ANSI256Color(-5)

    def test_out_of_range_is_clamped_on_lookup(self):
        assert degrade(ANSI256Color(-5), Profile.ANSI16) == ANSIColor(0)
        assert degrade(ANSI256Color(300), Profile.ANSI16) == ANSIColor(15)

    @pytest.mark.parametrize("profile", list(Profile))
    def test_idempotent(self, profile):
        for color in SAMPLE_COLORS:
            once = degrade(color, profile)
            assert degrade(once, profile) == once

    def test_stepwise_matches_direct(self):
        for color in SAMPLE_COLORS:
            for target in Profile:
                stepped = color
                for profile in sorted(Profile, reverse=True):
                    if profile < target:
                        break
                    stepped = degrade(stepped, profile)
                assert stepped == degrade(color, target)


class TestSequence:
    """SGR fragments for each color kind."""

    def test_ansi_foreground(self):
        assert sequence(ANSIColor(1)) == "31"
        assert sequence(ANSIColor(9)) == "91"

    def test_ansi_background(self):
        assert sequence(ANSIColor(1), background=True) == "41"
        assert sequence(ANSIColor(9), background=True) == "101"

    def test_ansi256(self):
        assert sequence(ANSI256Color(196)) == "38;5;196"
        assert sequence(ANSI256Color(196), background=True) == "48;5;196"

    def test_rgb(self):
        assert sequence(RGBColor(255, 102, 0)) == "38;2;255;102;0"
        assert sequence(RGBColor(255, 102, 0), background=True) == "48;2;255;102;0"

    def test_no_color(self):
        assert sequence(NoColor()) == ""

    def test_out_of_range_passes_through(self):
        assert sequence(ANSI256Color(999)) == "38;5;999"
        assert sequence(ANSIColor(16)) == "98"


class TestToRgb:

    def test_values(self):
        assert to_rgb(NoColor()) is None
        assert tuple(to_rgb(ANSIColor(9))) == (255, 0, 0)
        assert tuple(to_rgb(ANSI256Color(232))) == (8, 8, 8)
        assert tuple(to_rgb(RGBColor(1, 2, 3))) == (1, 2, 3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
