"""
Luxafor Flag HID Protocol — constants, wire-code tables, and report builders.
"""

from luxafor.colors import SIMPLE_COLOR_CODES
from luxafor.effects import PATTERN_CODES, WAVE_TYPE_CODES
from luxafor.lights import TARGET_CODES

# ── USB Identifiers ──────────────────────────────────────────────────────
LUXAFOR_VID = 0x04D8
LUXAFOR_PID = 0xF372

PRODUCT_MARKER = "luxafor"

# ── Report / command bytes ───────────────────────────────────────────────
REPORT_ID = 0x00

CMD_SIMPLE_COLOR = 0x00
CMD_RGB_COLOR    = 0x01
CMD_FADE         = 0x02
CMD_STROBE       = 0x03
CMD_WAVE         = 0x04
CMD_PATTERN      = 0x06
CMD_STATUS       = 0x80

STATUS_REPORT_LEN = 8


def _byte(value):
    return int(value) & 0xFF


# ── Report builders ──────────────────────────────────────────────────────
def build_simple_color(color):
    """[0, 0, code] — palette color on every LED. Code is the color's initial."""
    return bytes([REPORT_ID, CMD_SIMPLE_COLOR, SIMPLE_COLOR_CODES[color]])


def build_rgb_color(rgb, target):
    """[0, 1, target, R, G, B]"""
    return bytes([REPORT_ID, CMD_RGB_COLOR, TARGET_CODES[target],
                  rgb.r, rgb.g, rgb.b])


def build_fade(rgb, target, fade_time):
    """Build a fade-to-color report.

    Args:
        rgb:       Destination RgbColor.
        target:    Resolved Target.
        fade_time: 0 (instant) .. 255 (slow). Real duration is up to the firmware.

    Returns:
        bytes: [0, 2, target, R, G, B, fade_time]
    """
    return bytes([REPORT_ID, CMD_FADE, TARGET_CODES[target],
                  rgb.r, rgb.g, rgb.b, _byte(fade_time)])


def build_strobe(rgb, target, speed, repeat):
    """Build a strobe report.

    Byte 7 is reserved and always 0.

    Returns:
        bytes: [0, 3, target, R, G, B, speed, 0, repeat]
    """
    return bytes([REPORT_ID, CMD_STROBE, TARGET_CODES[target],
                  rgb.r, rgb.g, rgb.b, _byte(speed), 0x00, _byte(repeat)])


def build_wave(rgb, wave_type, speed, repeat):
    """Build a wave report. Waves always run on the whole device.

    Note the order of the tail: reserved, repeat, then speed.

    Returns:
        bytes: [0, 4, wave, R, G, B, 0, repeat, speed]
    """
    return bytes([REPORT_ID, CMD_WAVE, WAVE_TYPE_CODES[wave_type],
                  rgb.r, rgb.g, rgb.b, 0x00, _byte(repeat), _byte(speed)])


def build_pattern(pattern, repeat):
    """[0, 6, pattern, repeat]"""
    return bytes([REPORT_ID, CMD_PATTERN, PATTERN_CODES[pattern], _byte(repeat)])


def build_status_query():
    """[0x80, 0 × 7]

    Observed hardware never answers this as documented; nothing should
    depend on the reply.
    """
    return bytes([CMD_STATUS] + [0x00] * (STATUS_REPORT_LEN - 1))
