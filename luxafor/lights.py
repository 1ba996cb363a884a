"""
Luxafor Flag — LED names, groups, and hardware target resolution.

The flag has six LEDs: three on the tab ("flag") and three on the back.
Commands address them through target codes; the firmware only accepts
compound codes for all six, the flag triple, and the back triple.
"""

import logging
from enum import Enum, IntFlag

_LOGGER = logging.getLogger(__name__)


class Lights(IntFlag):
    FLAG_BOTTOM = 0b000001
    FLAG_MIDDLE = 0b000010
    FLAG_TOP    = 0b000100
    BACK_BOTTOM = 0b001000
    BACK_MIDDLE = 0b010000
    BACK_TOP    = 0b100000

    NONE = 0
    FLAG = FLAG_BOTTOM | FLAG_MIDDLE | FLAG_TOP
    BACK = BACK_BOTTOM | BACK_MIDDLE | BACK_TOP
    ALL  = FLAG | BACK


class Target(Enum):
    ALL = "all"
    FLAG = "flag"
    BACK = "back"
    FLAG_BOTTOM = "flag-bottom"
    FLAG_MIDDLE = "flag-middle"
    FLAG_TOP = "flag-top"
    BACK_BOTTOM = "back-bottom"
    BACK_MIDDLE = "back-middle"
    BACK_TOP = "back-top"


# ── Target → wire byte ───────────────────────────────────────────────────
TARGET_CODES = {
    Target.ALL:         0xFF,
    Target.FLAG:        ord("A"),
    Target.BACK:        ord("B"),
    Target.FLAG_BOTTOM: 1,
    Target.FLAG_MIDDLE: 2,
    Target.FLAG_TOP:    3,
    Target.BACK_BOTTOM: 4,
    Target.BACK_MIDDLE: 5,
    Target.BACK_TOP:    6,
}

# Canonical order for per-LED expansion.
_LED_TARGETS = [
    (Lights.FLAG_BOTTOM, Target.FLAG_BOTTOM),
    (Lights.FLAG_MIDDLE, Target.FLAG_MIDDLE),
    (Lights.FLAG_TOP,    Target.FLAG_TOP),
    (Lights.BACK_BOTTOM, Target.BACK_BOTTOM),
    (Lights.BACK_MIDDLE, Target.BACK_MIDDLE),
    (Lights.BACK_TOP,    Target.BACK_TOP),
]

# ── Light name → LEDs ────────────────────────────────────────────────────
LIGHT_NAMES = {
    "flag-bottom": Lights.FLAG_BOTTOM, "1": Lights.FLAG_BOTTOM,
    "flag-middle": Lights.FLAG_MIDDLE, "2": Lights.FLAG_MIDDLE,
    "flag-top":    Lights.FLAG_TOP,    "3": Lights.FLAG_TOP,
    "back-bottom": Lights.BACK_BOTTOM, "4": Lights.BACK_BOTTOM,
    "back-middle": Lights.BACK_MIDDLE, "5": Lights.BACK_MIDDLE,
    "back-top":    Lights.BACK_TOP,    "6": Lights.BACK_TOP,
}

# ── Group aliases ────────────────────────────────────────────────────────
LIGHT_GROUPS = {
    "all":  Lights.ALL,
    "flag": Lights.FLAG, "f": Lights.FLAG,
    "back": Lights.BACK, "b": Lights.BACK,
}

LIGHT_CHOICES = ["all", "flag", "f", "back", "b", "flag-bottom", "flag-middle", "flag-top",
                 "back-bottom", "back-middle", "back-top", "1", "2", "3", "4", "5", "6"]


def parse_lights(tokens, default=Lights.ALL):
    """Combine light names into a Lights mask.

    Args:
        tokens:  Iterable of names (case-insensitive), or None.
        default: Returned when no tokens were given at all.

    Returns:
        Lights. 'all' anywhere wins outright. Unknown names are skipped, so
        a selection of only unknown names is Lights.NONE, not the default.
    """
    names = [t.strip().lower() for t in tokens or []]
    if not names:
        return default
    if "all" in names:
        return Lights.ALL

    lights = Lights.NONE
    for name in names:
        if name in LIGHT_GROUPS:
            lights |= LIGHT_GROUPS[name]
        elif name in LIGHT_NAMES:
            lights |= LIGHT_NAMES[name]
        else:
            _LOGGER.debug("ignoring unknown light \"%s\"", name)
    return lights


def lights_to_targets(lights):
    """Map a Lights mask to the targets that must each receive a command.

    Returns:
        list of Target — [] for no lights, a single compound target for
        all / flag / back, otherwise one per LED in canonical order.
    """
    lights = Lights(lights) & Lights.ALL
    if lights == Lights.NONE:
        return []
    if lights == Lights.ALL:
        return [Target.ALL]
    if lights == Lights.BACK:
        return [Target.BACK]
    if lights == Lights.FLAG:
        return [Target.FLAG]
    return [target for bit, target in _LED_TARGETS if lights & bit]
