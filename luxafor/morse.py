"""
Luxafor Flag — Morse code encoding and real-time playback.

Timing follows the usual PARIS convention: one unit is 1200 ms / WPM; a dot
and the gap between the marks of one character last one unit, a dash and
the gap between characters three, the gap between words seven.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum

from luxafor.lights import Lights

_LOGGER = logging.getLogger(__name__)

DEFAULT_WPM = 10


class Mark(Enum):
    DOT = "."
    DASH = "-"


class GapType(Enum):
    SYMBOL = "symbol"
    LETTER = "letter"
    WORD = "word"


@dataclass(frozen=True)
class Gap:
    kind: GapType


DOT = Mark.DOT
DASH = Mark.DASH
SYMBOL_GAP = Gap(GapType.SYMBOL)
LETTER_GAP = Gap(GapType.LETTER)
WORD_GAP = Gap(GapType.WORD)

# Duration of each pulse in dot units.
PULSE_UNITS = {
    DOT: 1,
    DASH: 3,
    SYMBOL_GAP: 1,
    LETTER_GAP: 3,
    WORD_GAP: 7,
}

# Terminal echo while signalling.
PULSE_GLYPHS = {
    DOT: "•",
    DASH: "-",
    SYMBOL_GAP: "",
    LETTER_GAP: " ",
    WORD_GAP: " / ",
}

# ── Morse code table ─────────────────────────────────────────────────────
MORSE_TABLE = {
    "A": ".-",     "B": "-...",   "C": "-.-.",   "D": "-..",
    "E": ".",      "F": "..-.",   "G": "--.",    "H": "....",
    "I": "..",     "J": ".---",   "K": "-.-",    "L": ".-..",
    "M": "--",     "N": "-.",     "O": "---",    "P": ".--.",
    "Q": "--.-",   "R": ".-.",    "S": "...",    "T": "-",
    "U": "..-",    "V": "...-",   "W": ".--",    "X": "-..-",
    "Y": "-.--",   "Z": "--..",
    "0": "-----",  "1": ".----",  "2": "..---",  "3": "...--",
    "4": "....-",  "5": ".....",  "6": "-....",  "7": "--...",
    "8": "---..",  "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "\\": ".----.",
    "!": "-.-.--", "(": "-.--.",  ")": "-.--.-", "&": ".-...",
    ":": "---...", ";": "-.-.-.", "=": "-...-",  "+": ".-.-.",
    "-": "-....-", "_": "..--.-", '"': ".-..-.", "$": "...-..-",
    "@": ".--.-.",
}


# ── Encoding ─────────────────────────────────────────────────────────────
def _char_pulses(code):
    for i, mark in enumerate(code):
        if i:
            yield SYMBOL_GAP
        yield Mark(mark)


def _word_pulses(word):
    first = True
    for ch in word.upper():
        code = MORSE_TABLE.get(ch)
        if code is None:
            continue
        if not first:
            yield LETTER_GAP
        first = False
        yield from _char_pulses(code)


def encode_morse(text):
    """Lazily turn text into pulses.

    Words are split on whitespace and separated by a word gap, even a word
    whose characters are all missing from MORSE_TABLE (those are dropped).
    No gap follows the last character. The generator is single-pass: call
    again to replay.

    Yields:
        DOT, DASH, or a Gap.
    """
    for i, word in enumerate(text.split()):
        if i:
            yield WORD_GAP
        yield from _word_pulses(word)


def to_text(pulses):
    """Render pulses the way they're echoed during playback ('... --- ...')."""
    return "".join(PULSE_GLYPHS[p] for p in pulses)


# ── Playback ─────────────────────────────────────────────────────────────
def dot_duration(wpm):
    """Seconds per dot unit at the given words per minute, whole milliseconds."""
    if isinstance(wpm, bool) or not isinstance(wpm, int) or wpm <= 0:
        raise ValueError(f"speed must be a positive integer, got {wpm!r}")
    return (1200 // wpm) / 1000


def pulse_duration(pulse, dot):
    return PULSE_UNITS[pulse] * dot


class SignalPlayer:
    """Flash pulses on a Luxafor in real time.

    Marks light every LED with the configured color; gaps send the simple
    'off' color. Playback is synchronous and blocks for the whole message.
    """

    def __init__(self, device, color, wpm=DEFAULT_WPM, logger=None, sleep=time.sleep):
        self.device = device
        self.color = color
        self.wpm = wpm
        self.dot = dot_duration(wpm)
        self.log = logger or _LOGGER
        self._sleep = sleep

    def _wait(self, seconds, cancel):
        """Sleep; True if cancelled meanwhile."""
        if cancel is None:
            self._sleep(seconds)
            return False
        return cancel.wait(seconds)

    def play(self, pulses, cancel=None, on_pulse=None):
        """Play pulses in order, then switch the light off.

        Args:
            pulses:   Iterable of pulses, e.g. encode_morse(text).
            cancel:   Optional threading.Event; checked between pulses and
                      interrupts the current wait when set.
            on_pulse: Optional callback, called with each pulse before it
                      is sent.

        Returns:
            True if every pulse was played, False if cancelled.
        """
        self.log.info("speed is %d wpm -- 1 dot = %.0f ms", self.wpm, self.dot * 1000)
        completed = True
        try:
            for pulse in pulses:
                if cancel is not None and cancel.is_set():
                    completed = False
                    break
                if on_pulse is not None:
                    on_pulse(pulse)
                if isinstance(pulse, Mark):
                    self.device.set_rgb_color(self.color, Lights.ALL)
                else:
                    self.device.off()
                if self._wait(pulse_duration(pulse, self.dot), cancel):
                    completed = False
                    break
        finally:
            self.device.off()
        if not completed:
            self.log.info("playback cancelled")
        return completed


def play_morse(device, pulses, color, wpm=DEFAULT_WPM, cancel=None, on_pulse=None,
               logger=None):
    """Flash pulses on the device. A plain string is encoded first."""
    if isinstance(pulses, str):
        pulses = encode_morse(pulses)
    player = SignalPlayer(device, color, wpm=wpm, logger=logger)
    return player.play(pulses, cancel=cancel, on_pulse=on_pulse)
