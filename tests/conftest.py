import pytest

from luxafor.device import Luxafor


class FakeChannel:
    """In-memory DeviceChannel that records every report written."""

    def __init__(self, product="LUXAFOR FLAG", manufacturer="Microchip Technology Inc.",
                 serial=None, responses=None, fail_writes=(), fail_reads=False):
        self.product = product
        self.manufacturer = manufacturer
        self.serial = serial
        self.written = []
        self.reads = []
        self.closed = False
        self._responses = list(responses or [])
        self._fail_writes = set(fail_writes)
        self._fail_reads = fail_reads
        self._writes = 0

    def write(self, data):
        index = self._writes
        self._writes += 1
        if index in self._fail_writes:
            raise OSError("write error")
        self.written.append(bytes(data))
        return len(data)

    def read_timeout(self, size, timeout_ms):
        self.reads.append((size, timeout_ms))
        if self._fail_reads:
            raise OSError("read error")
        return self._responses.pop(0) if self._responses else b""

    def close(self):
        self.closed = True


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def lux(channel):
    return Luxafor(channel)
