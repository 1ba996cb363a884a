import signal
import sys
import threading

from luxafor.colors import COLOR_NAMES, parse_color, parse_color_spec, simple_color
from luxafor.device import Luxafor
from luxafor.effects import PATTERN_CODES, WAVES, pattern_type, wave_type
from luxafor.exceptions import DeviceOpenError, LuxaforError
from luxafor.lights import Lights, lights_to_targets, parse_lights
from luxafor.morse import DEFAULT_WPM, PULSE_GLYPHS, SignalPlayer, encode_morse
from luxafor.protocol import LUXAFOR_PID, LUXAFOR_VID

DEFAULT_REPEAT = 3
DEFAULT_SPEED = 31


def _open_device():
    try:
        lux = Luxafor.open()
    except DeviceOpenError as e:
        print(f"Luxafor not available: {e}")
        return None
    return lux


def _targets_desc(lights):
    return ", ".join(t.value for t in lights_to_targets(lights)) or "(none)"


def cmd_scan():
    print("Scanning for Luxafor Flag...")
    print("=" * 60)
    import hid
    devs = hid.enumerate(LUXAFOR_VID, LUXAFOR_PID)
    if not devs:
        print("  No Luxafor found.")
        return 1
    print(f"\n  0x{LUXAFOR_VID:04X}:0x{LUXAFOR_PID:04X} - {len(devs)} interface(s):")
    for d in devs:
        print(f"    iface={d['interface_number']}  page=0x{d['usage_page']:04X}"
              f"  product={d.get('product_string') or '?'}")
    if len(devs) > 1:
        print("\n  Note: only the first match is ever used.")
    return 0


def cmd_info():
    lux = _open_device()
    if not lux:
        return 1
    with lux:
        print(lux.describe())
    return 0


def cmd_list():
    print("Wave types")
    print("=" * 60)
    for n, w in WAVES.items():
        print(f"{n:<4} {w['type'].value:<20} {w['desc']}")
    print("\nPatterns")
    print("=" * 60)
    for p, code in sorted(PATTERN_CODES.items(), key=lambda x: x[1]):
        print(f"{code:<4} {p.value}")
    print("\nColors: " + ", ".join(COLOR_NAMES))
    print("\nUsage:")
    print("  color red                      # palette color, all lights")
    print("  color --rgb '#b0b' -l flag     # magenta-ish on the flag side")
    print("  wave 2 cyan -r 5               # long wave, 5 times")
    print("  pattern police 2               # police pattern twice")
    print("  morse -m 'SOS' -c red -s 15    # SOS in red at 15 wpm")
    return 0


def cmd_color(name=None, rgb=None, fade=None, lights=None):
    """Set a color.

    A palette name alone uses the simple-color command (all lights, instant).
    An RGB value, a fade duration, or a light selection switches to the
    fade command, defaulting to all lights and fade 0.
    """
    if name is not None and rgb is not None:
        print("Give either a COLOR or --rgb, not both.")
        return 1
    try:
        if name is not None and rgb is None and fade is None and not lights:
            color = simple_color(name)
            rgb_color = None
        elif rgb is not None:
            rgb_color = parse_color(rgb)
        else:
            rgb_color = parse_color_spec(name)
    except LuxaforError as e:
        print(f"Bad color: {e}")
        return 1

    selection = parse_lights(lights, default=Lights.ALL)

    lux = _open_device()
    if not lux:
        return 1
    with lux:
        if rgb_color is None:
            print(f"Setting {color.value} (simple color)")
            lux.set_simple_color(color)
        else:
            fade_time = fade or 0
            print(f"Fading to {rgb_color.hex()} on {_targets_desc(selection)}"
                  f"  fade={fade_time}")
            lux.fade_to_color(rgb_color, selection, fade_time)
    return 0


def cmd_off():
    lux = _open_device()
    if not lux:
        return 1
    with lux:
        lux.off()
    return 0


def cmd_strobe(color_spec, repeat=DEFAULT_REPEAT, speed=DEFAULT_SPEED, lights=None):
    try:
        rgb = parse_color_spec(color_spec)
    except LuxaforError as e:
        print(f"Bad color in '{color_spec}': {e}")
        return 1
    selection = parse_lights(lights, default=Lights.ALL)

    lux = _open_device()
    if not lux:
        return 1
    with lux:
        print(f"Strobing {rgb.hex()} on {_targets_desc(selection)}"
              f"  speed={speed} repeat={repeat}")
        lux.strobe(rgb, selection, speed, repeat)
    return 0


def cmd_wave(wave_num, color_spec, repeat=DEFAULT_REPEAT, speed=DEFAULT_SPEED):
    try:
        wt = wave_type(wave_num)
        rgb = parse_color_spec(color_spec)
    except LuxaforError as e:
        print(e)
        return 1

    lux = _open_device()
    if not lux:
        return 1
    with lux:
        print(f"Wave #{wave_num} ({wt.value}) {rgb.hex()}  speed={speed} repeat={repeat}")
        lux.wave(rgb, wt, speed, repeat)
    return 0


def cmd_pattern(name, repeat=DEFAULT_REPEAT):
    try:
        pattern = pattern_type(name)
    except LuxaforError as e:
        print(e)
        return 1

    lux = _open_device()
    if not lux:
        return 1
    with lux:
        print(f"Pattern {pattern.value}  repeat={repeat}")
        lux.pattern(pattern, repeat)
    return 0


def cmd_morse(message, color_spec="white", wpm=DEFAULT_WPM, quiet=False):
    """Signal a message in Morse code. Ctrl-C stops and turns the light off."""
    if not message:
        print("A message was not provided.")
        return 1
    try:
        rgb = parse_color_spec(color_spec)
    except LuxaforError as e:
        print(f"Bad color: {e}")
        return 1
    if wpm <= 0:
        print(f"Invalid speed {wpm}. Must be at least 1 wpm.")
        return 1

    quiet = quiet or not sys.stdout.isatty()

    def echo(pulse):
        print(PULSE_GLYPHS[pulse], end="", flush=True)

    lux = _open_device()
    if not lux:
        return 1

    cancel = threading.Event()
    previous = signal.signal(signal.SIGINT, lambda signum, frame: cancel.set())
    try:
        with lux:
            player = SignalPlayer(lux, rgb, wpm=wpm)
            done = player.play(encode_morse(message), cancel=cancel,
                               on_pulse=None if quiet else echo)
    finally:
        signal.signal(signal.SIGINT, previous)
    if not quiet:
        print()
    if not done:
        print("Interrupted.")
        return 130
    return 0


def cmd_status():
    """Send the status query and dump whatever comes back."""
    lux = _open_device()
    if not lux:
        return 1
    with lux:
        data = lux.query_status()
    print(f"RX: {data.hex() if data else '(no response)'}")
    return 0
