"""
Luxafor Flag — HID device access and command transactions.
"""

import logging
from typing import Optional, Protocol

from luxafor.colors import SimpleColor
from luxafor.exceptions import DeviceOpenError, TransportError
from luxafor.lights import Lights, Target, lights_to_targets
from luxafor.protocol import (LUXAFOR_PID, LUXAFOR_VID, PRODUCT_MARKER,
                              STATUS_REPORT_LEN, build_fade, build_pattern,
                              build_rgb_color, build_simple_color,
                              build_status_query, build_strobe, build_wave)

_LOGGER = logging.getLogger(__name__)

RESPONSE_SIZE = 8
RESPONSE_TIMEOUT_MS = 0  # non-blocking; the flag doesn't answer as documented


class DeviceChannel(Protocol):
    """Raw HID transport the Luxafor talks through."""

    def write(self, data: bytes) -> int: ...

    def read_timeout(self, size: int, timeout_ms: int) -> bytes: ...

    @property
    def manufacturer(self) -> Optional[str]: ...

    @property
    def product(self) -> Optional[str]: ...

    @property
    def serial(self) -> Optional[str]: ...

    def close(self) -> None: ...


class HidChannel:
    """DeviceChannel over a hidapi handle."""

    def __init__(self, dev):
        self._dev = dev

    @classmethod
    def open(cls, vid=LUXAFOR_VID, pid=LUXAFOR_PID):
        """Open the first HID device matching vid:pid.

        Raises:
            DeviceOpenError: hidapi missing, no device, or open failed.
        """
        try:
            import hid
        except ImportError as e:
            raise DeviceOpenError(f"Cannot initialize hidapi: {e}") from e

        if not hid.enumerate(vid, pid):
            raise DeviceOpenError(f"No Luxafor found (0x{vid:04X}:0x{pid:04X})")

        dev = hid.device()
        try:
            dev.open(vid, pid)
        except (OSError, ValueError) as e:
            raise DeviceOpenError(
                f"Cannot open HID device 0x{vid:04X}:0x{pid:04X}: {e}\n"
                "  On Linux, check the udev rules / hidraw permissions."
            ) from e
        return cls(dev)

    def write(self, data):
        try:
            n = self._dev.write(list(data))
        except (OSError, ValueError) as e:
            raise TransportError(str(e)) from e
        if n < 0:
            raise TransportError(self._dev.error() or "write failed")
        return n

    def read_timeout(self, size, timeout_ms):
        try:
            data = self._dev.read(size, timeout_ms)
        except (OSError, ValueError) as e:
            raise TransportError(str(e)) from e
        return bytes(data) if data else b""

    def _string(self, getter):
        try:
            return getter() or None
        except (OSError, ValueError):
            return None

    @property
    def manufacturer(self):
        return self._string(self._dev.get_manufacturer_string)

    @property
    def product(self):
        return self._string(self._dev.get_product_string)

    @property
    def serial(self):
        return self._string(self._dev.get_serial_number_string)

    def close(self):
        self._dev.close()


class Luxafor:
    """A Luxafor Flag behind a DeviceChannel.

    Transport failures are logged and skipped: a multi-target command keeps
    going after a failed write, and nothing waits on a reply.
    """

    def __init__(self, channel, logger=None):
        self.channel = channel
        self.log = logger or _LOGGER
        self._check_product()

    @classmethod
    def open(cls, logger=None):
        """Open the attached flag. First match wins if several are plugged in."""
        channel = HidChannel.open()
        try:
            return cls(channel, logger=logger)
        except DeviceOpenError:
            channel.close()
            raise

    def _check_product(self):
        product = self.channel.product
        if product is not None and PRODUCT_MARKER not in product.lower():
            raise DeviceOpenError(f"Unexpected product string: {product}")

    def describe(self):
        """Manufacturer, product and serial for display."""
        mfr = self.channel.manufacturer
        prod = self.channel.product
        ser = self.channel.serial
        parts = ["Luxafor device"]
        parts.append(f"manufacturer \"{mfr}\"" if mfr else "<manufacturer unknown>")
        parts.append(f"product \"{prod}\"" if prod else "<product unknown>")
        parts.append(f"s/n: {ser}" if ser else "<serial number unknown>")
        return ", ".join(parts)

    def close(self):
        self.channel.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ── Transactions ─────────────────────────────────────────────────────
    def _tx(self, report):
        """Write one report and drain whatever comes back.

        Returns:
            bytes read (usually empty), or None if the write failed.
        """
        try:
            n = self.channel.write(report)
        except (TransportError, OSError) as e:
            self.log.warning("Error writing command: %s", e)
            return None
        self.log.debug("wrote %d bytes: %s", n, report.hex())

        try:
            data = self.channel.read_timeout(RESPONSE_SIZE, RESPONSE_TIMEOUT_MS)
        except (TransportError, OSError) as e:
            self.log.warning("Error reading response: %s", e)
            return b""
        self.log.debug("read %d bytes: %s", len(data), data.hex())
        return data

    def _tx_targets(self, lights, build):
        targets = lights_to_targets(lights)
        self.log.debug("mapped %r to targets %s", Lights(lights),
                       [t.value for t in targets])
        for target in targets:
            self._tx(build(target))
        return targets

    # ── Operations ───────────────────────────────────────────────────────
    def set_simple_color(self, color):
        """One of the eight palette colors on every LED."""
        self.log.info("sending 'set simple color' %s", color.value)
        self._tx(build_simple_color(color))

    def off(self):
        self.set_simple_color(SimpleColor.OFF)

    def set_rgb_color(self, rgb, lights=Lights.ALL):
        """Arbitrary color on the given lights, one report per target."""
        self.log.info("sending 'set RGB color' %s %r", rgb.hex(), Lights(lights))
        return self._tx_targets(lights, lambda t: build_rgb_color(rgb, t))

    def fade_to_color(self, rgb, lights=Lights.ALL, fade_time=0):
        """Fade from the current color to rgb.

        fade_time runs from 0 (instant) to 255 (very slow); the real duration
        is set by the firmware and depends on the start and end colors.
        """
        self.log.info("sending 'fade to color' %s %r fade_time %d",
                      rgb.hex(), Lights(lights), fade_time)
        return self._tx_targets(lights, lambda t: build_fade(rgb, t, fade_time))

    def strobe(self, rgb, lights=Lights.ALL, speed=31, repeat=3):
        """Flash the lights. speed: 0 fast .. 255 slow."""
        self.log.info("sending 'strobe' %s %r speed %d repeat %d",
                      rgb.hex(), Lights(lights), speed, repeat)
        return self._tx_targets(lights, lambda t: build_strobe(rgb, t, speed, repeat))

    def wave(self, rgb, wave_type, speed=31, repeat=3):
        """One of the four wave animations, always on the whole device."""
        self.log.info("sending 'wave' %s type %s speed %d repeat %d",
                      rgb.hex(), wave_type.value, speed, repeat)
        self._tx(build_wave(rgb, wave_type, speed, repeat))
        return [Target.ALL]

    def pattern(self, pattern, repeat=3):
        """One of the built-in patterns."""
        self.log.info("sending 'pattern' %s repeat %d", pattern.value, repeat)
        self._tx(build_pattern(pattern, repeat))

    def query_status(self):
        """Send the status query and return the raw reply.

        The reply is informational only; the hardware does not reliably
        produce one.
        """
        self.log.info("sending 'get status'")
        report = build_status_query()
        try:
            self.channel.write(report)
        except (TransportError, OSError) as e:
            self.log.warning("Error writing command: %s", e)
            return b""
        try:
            return self.channel.read_timeout(STATUS_REPORT_LEN, RESPONSE_TIMEOUT_MS)
        except (TransportError, OSError) as e:
            self.log.warning("Error reading response: %s", e)
            return b""
