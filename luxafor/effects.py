"""
Luxafor Flag — built-in wave and pattern effects.
"""

from enum import Enum

from luxafor.exceptions import LuxaforError


class WaveType(Enum):
    SHORT = "short"
    LONG = "long"
    OVERLAPPING_SHORT = "overlapping-short"
    OVERLAPPING_LONG = "overlapping-long"


class PatternType(Enum):
    LUXAFOR = "luxafor"
    RANDOM1 = "random1"
    RANDOM2 = "random2"
    RANDOM3 = "random3"
    POLICE = "police"
    RANDOM4 = "random4"
    RANDOM5 = "random5"
    RAINBOW_WAVE = "rainbow-wave"


WAVE_TYPE_CODES = {
    WaveType.SHORT:             1,
    WaveType.LONG:              2,
    WaveType.OVERLAPPING_SHORT: 3,
    WaveType.OVERLAPPING_LONG:  4,
}

PATTERN_CODES = {
    PatternType.LUXAFOR:      1,
    PatternType.RANDOM1:      2,
    PatternType.RANDOM2:      3,
    PatternType.RANDOM3:      4,
    PatternType.POLICE:       5,
    PatternType.RANDOM4:      6,
    PatternType.RANDOM5:      7,
    PatternType.RAINBOW_WAVE: 8,
}

WAVES = {
    1: {"type": WaveType.SHORT,
        "desc": "fade from off to the color, one LED at a time"},
    2: {"type": WaveType.LONG,
        "desc": "fade from off to the color, a whole side at a time"},
    3: {"type": WaveType.OVERLAPPING_SHORT,
        "desc": "fade from the previous color, one LED at a time"},
    4: {"type": WaveType.OVERLAPPING_LONG,
        "desc": "fade from the previous color, a whole side at a time"},
}

PATTERN_ALIASES = {"rainbow": PatternType.RAINBOW_WAVE}

PATTERN_CHOICES = ([p.value for p in PatternType] + list(PATTERN_ALIASES)
                   + [str(n) for n in sorted(PATTERN_CODES.values())])


def wave_type(number):
    """Wave type for its number (1-4)."""
    try:
        return WAVES[int(number)]["type"]
    except (KeyError, ValueError):
        raise LuxaforError(f"Unknown wave type {number}. Valid: 1-4.") from None


def pattern_type(name):
    """Pattern for a number (1-8) or name, case-insensitive."""
    key = str(name).strip().lower()
    for pattern, code in PATTERN_CODES.items():
        if key in (pattern.value, str(code)):
            return pattern
    if key in PATTERN_ALIASES:
        return PATTERN_ALIASES[key]
    raise LuxaforError(f"An invalid pattern type {name} was specified.")
