"""
Luxafor Flag — RGB values, the eight-color palette, and color string parsing.
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum

from luxafor.exceptions import InvalidHexColor, InvalidNumericColor, UnknownColorName

_LOGGER = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def _check_u8(name, value):
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value} (must be 0-255)")


@dataclass(frozen=True)
class RgbColor:
    """One 24-bit color. Immutable; compares by value."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        _check_u8("r", self.r)
        _check_u8("g", self.g)
        _check_u8("b", self.b)

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def hex(self):
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# ── Palette ──────────────────────────────────────────────────────────────
class SimpleColor(Enum):
    """Colors the firmware knows by name (see the simple-color command)."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    WHITE = "white"
    OFF = "off"


# Wire byte for the simple-color command: the color's ASCII initial.
SIMPLE_COLOR_CODES = {
    SimpleColor.RED:     ord("R"),
    SimpleColor.GREEN:   ord("G"),
    SimpleColor.BLUE:    ord("B"),
    SimpleColor.CYAN:    ord("C"),
    SimpleColor.MAGENTA: ord("M"),
    SimpleColor.YELLOW:  ord("Y"),
    SimpleColor.WHITE:   ord("W"),
    SimpleColor.OFF:     ord("O"),
}

PALETTE = {
    SimpleColor.RED:     RgbColor(255, 0, 0),
    SimpleColor.GREEN:   RgbColor(0, 255, 0),
    SimpleColor.BLUE:    RgbColor(0, 0, 255),
    SimpleColor.CYAN:    RgbColor(0, 255, 255),
    SimpleColor.MAGENTA: RgbColor(255, 0, 255),
    SimpleColor.YELLOW:  RgbColor(255, 255, 0),
    SimpleColor.WHITE:   RgbColor(255, 255, 255),
    SimpleColor.OFF:     RgbColor(0, 0, 0),
}

COLOR_NAMES = [c.value for c in SimpleColor]


def simple_color(name):
    """Look up a palette entry by (case-insensitive) name."""
    try:
        return SimpleColor(name.lower())
    except ValueError:
        raise UnknownColorName(f"Unrecognized color name \"{name}\"") from None


def named_color(name):
    """Return the RgbColor for a palette name (case-insensitive)."""
    return PALETTE[simple_color(name)]


# ── Color parsing ────────────────────────────────────────────────────────
def _from_hex(digits, text):
    if not digits or not all(c in _HEX_DIGITS for c in digits):
        raise InvalidHexColor(f"Invalid hex digits \"{digits}\" in \"{text}\"")
    return int(digits, 16)


def _from_dec(part, text):
    s = part.strip()
    digits = s[1:] if s.startswith("+") else s
    # ASCII 0-9 only, optional leading plus
    if not digits or not all(c in string.digits for c in digits):
        raise InvalidNumericColor(f"\"{part}\" in \"{text}\" is not an integer")
    value = int(digits)
    if value > 0xFF:
        raise InvalidNumericColor(f"{value} in \"{text}\" is over 255")
    return value


def parse_color(text):
    """Parse '#RGB', '#RRGGBB', or 'R,G,B' into an RgbColor.

    '#RGB' expands like CSS shorthand: '#b0b' == '#bb00bb'.

    Raises:
        InvalidHexColor:     '#' form with a bad length or non-hex digits.
        InvalidNumericColor: decimal form with != 3 parts or a bad part.
    """
    _LOGGER.debug("attempting to parse \"%s\" to RGB color", text)

    if text.startswith("#"):
        if len(text) == 4:
            r, g, b = (_from_hex(d, text) * 17 for d in text[1:4])
        elif len(text) == 7:
            r = _from_hex(text[1:3], text)
            g = _from_hex(text[3:5], text)
            b = _from_hex(text[5:7], text)
        else:
            raise InvalidHexColor(f"Invalid length for a hex color ({len(text)})")
    else:
        parts = text.split(",")
        if len(parts) != 3:
            which = "not enough" if len(parts) < 3 else "too many"
            raise InvalidNumericColor(f"{which} parts ({len(parts)})")
        r, g, b = (_from_dec(p, text) for p in parts)

    color = RgbColor(r, g, b)
    _LOGGER.debug("parsed \"%s\" to %s", text, color)
    return color


def parse_color_spec(text):
    """Named palette color first, then the numeric forms.

    Used wherever a command takes "a named or numeric color".
    """
    if not text:
        raise InvalidNumericColor("empty color")
    if text.lower() in COLOR_NAMES:
        return named_color(text)
    return parse_color(text)
