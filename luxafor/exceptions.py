"""
Luxafor Flag — exception hierarchy.

Everything derives from LuxaforError so the CLI can catch broadly.
Parse errors are also ValueErrors.
"""


class LuxaforError(Exception):
    """Base exception for all Luxafor errors."""


class ColorParseError(LuxaforError, ValueError):
    """A textual color specification could not be parsed."""


class InvalidHexColor(ColorParseError):
    """'#RGB' / '#RRGGBB' with the wrong length or non-hex digits."""


class InvalidNumericColor(ColorParseError):
    """'R,G,B' with the wrong number of parts or a part outside 0-255."""


class UnknownColorName(LuxaforError, ValueError):
    """Name not in the eight-color palette."""


class DeviceOpenError(LuxaforError):
    """No matching device, hidapi failure, or an unexpected product string."""


class TransportError(LuxaforError):
    """A write or read against an already-open device failed."""
