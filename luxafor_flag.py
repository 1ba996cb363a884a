#!/usr/bin/env python3
# /// script
# dependencies = ["hidapi>=0.14"]
# ///
"""
Luxafor Flag Controller - Python CLI

Control the six LEDs of a Luxafor Flag over USB HID.

Usage:
    uv run luxafor_flag.py [-v] <command>

Commands:
    scan                          Show matching HID interfaces
    info                          Show device manufacturer / product / serial
    list                          Show wave types, patterns and colors
    color <name> | --rgb <rgb>    Set a color (-f fade, -l light ...)
    off                           Turn all lights off
    strobe <color>                Flash lights (-r repeat, -s speed, -l light)
    wave <1-4> <color>            Wave animation (-r repeat, -s speed)
    pattern <name|1-8> [repeat]   Built-in pattern
    morse -m <message>            Signal a message in Morse code
    status                        Send the status query, print the raw reply
"""

import sys
from luxafor.cli import main

if __name__ == "__main__":
    sys.exit(main())
