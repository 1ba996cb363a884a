"""
Luxafor Flag — CLI entry point (argparse).
"""

import argparse
import logging

from luxafor.colors import COLOR_NAMES
from luxafor.effects import PATTERN_CHOICES
from luxafor.lights import LIGHT_CHOICES

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _u8(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError("Value was out of range (0-255).")
    return value


def _positive(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' is not an integer") from None
    if value < 1:
        raise argparse.ArgumentTypeError("Value must be at least 1.")
    return value


def _lower(text):
    return text.lower()


def _add_lights(p, help_text):
    p.add_argument("-l", "--light", dest="lights", action="append", type=_lower,
                   choices=LIGHT_CHOICES, metavar="LIGHT", help=help_text)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="luxafor-flag",
        description="Luxafor Flag Controller — USB HID light control",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v info, -vv debug)")
    sub = parser.add_subparsers(dest="command")

    # scan / info / list
    sub.add_parser("scan", help="Scan for connected Luxafor flags")
    sub.add_parser("info", help="Show the device's manufacturer, product and serial")
    sub.add_parser("list", help="List wave types, patterns and colors")

    # color
    p_col = sub.add_parser("color", help="Set the color of the flag")
    which = p_col.add_mutually_exclusive_group()
    which.add_argument("name", nargs="?", type=_lower, choices=COLOR_NAMES,
                       metavar="COLOR", help="One of: " + ", ".join(COLOR_NAMES))
    which.add_argument("-r", "--rgb", "--rgb-color", dest="rgb",
                       help="R,G,B decimal, #RRGGBB, or #RGB (#b0b => #bb00bb)")
    p_col.add_argument("-f", "--fade", type=_u8, metavar="DURATION",
                       help="Fade duration 0-255 (0 is instant, the default)")
    _add_lights(p_col, "Light(s) to set; repeat for several. Defaults to all.")

    # off
    sub.add_parser("off", help="Shorthand for `color off`")

    # strobe
    p_str = sub.add_parser("strobe", help="Strobe lights")
    p_str.add_argument("color", help="Named color or R,G,B / #RRGGBB / #RGB")
    p_str.add_argument("-r", "--repeat", type=_u8, default=3,
                       help="Number of flashes (0-255)")
    p_str.add_argument("-s", "--speed", type=_u8, default=31,
                       help="Flash rate (0-255). Smaller is faster.")
    _add_lights(p_str, "Light(s) to strobe. Defaults to all.")

    # wave
    p_wav = sub.add_parser("wave", help="Animate lights in a wave pattern")
    p_wav.add_argument("wave_type", type=int, choices=range(1, 5), metavar="WAVE-TYPE",
                       help="Wave type (1-4), see 'list'")
    p_wav.add_argument("color", help="Named color or R,G,B / #RRGGBB / #RGB")
    p_wav.add_argument("-r", "--repeat", type=_u8, default=3,
                       help="Number of times to repeat the wave (0-255)")
    p_wav.add_argument("-s", "--speed", type=_u8, default=31,
                       help="Animation speed (0-255). Smaller is faster.")

    # pattern
    p_pat = sub.add_parser("pattern", help="Play one of the built-in patterns")
    p_pat.add_argument("pattern", type=_lower, choices=PATTERN_CHOICES, metavar="PATTERN",
                       help="1-8 or a name (see 'list')")
    p_pat.add_argument("repeat", nargs="?", type=_u8, default=3,
                       help="Number of repeats (0-255)")

    # morse
    p_mor = sub.add_parser("morse", help="Signal a message in Morse code")
    p_mor.add_argument("-m", "--message", required=True, help="Your message")
    p_mor.add_argument("-c", "--color", default="white",
                       help="Named color or R,G,B / #RRGGBB / #RGB (default: white)")
    p_mor.add_argument("-s", "--speed", type=_positive, default=10,
                       help="Words per minute; 1 dot = 1200/SPEED ms (default: 10)")
    p_mor.add_argument("-q", "--quiet", action="store_true",
                       help="Don't echo the code to the terminal")

    # status
    sub.add_parser("status", help="Send the status query and print the raw reply")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    from luxafor.commands import (cmd_scan, cmd_info, cmd_list, cmd_color, cmd_off,
                                  cmd_strobe, cmd_wave, cmd_pattern, cmd_morse,
                                  cmd_status)

    if args.command == "scan":
        return cmd_scan()
    elif args.command == "info":
        return cmd_info()
    elif args.command == "list":
        return cmd_list()
    elif args.command == "color":
        if args.name is None and args.rgb is None:
            print("Provide a COLOR or --rgb <RGB>.")
            return 1
        return cmd_color(args.name, rgb=args.rgb, fade=args.fade, lights=args.lights)
    elif args.command == "off":
        return cmd_off()
    elif args.command == "strobe":
        return cmd_strobe(args.color, repeat=args.repeat, speed=args.speed,
                          lights=args.lights)
    elif args.command == "wave":
        return cmd_wave(args.wave_type, args.color, repeat=args.repeat, speed=args.speed)
    elif args.command == "pattern":
        return cmd_pattern(args.pattern, repeat=args.repeat)
    elif args.command == "morse":
        return cmd_morse(args.message, color_spec=args.color, wpm=args.speed,
                         quiet=args.quiet)
    elif args.command == "status":
        return cmd_status()

    return 0
