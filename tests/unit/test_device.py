"""Luxafor facade over a fake DeviceChannel."""

import logging

import pytest

from conftest import FakeChannel
from luxafor.colors import RgbColor, SimpleColor
from luxafor.device import Luxafor
from luxafor.effects import PatternType, WaveType
from luxafor.exceptions import DeviceOpenError
from luxafor.lights import Lights, Target


class TestOpen:
    """Product-string check at construction."""

    def test_accepts_luxafor_product(self):
        Luxafor(FakeChannel(product="LUXAFOR FLAG"))

    def test_accepts_missing_product(self):
        Luxafor(FakeChannel(product=None))

    def test_rejects_other_product(self):
        with pytest.raises(DeviceOpenError, match="Unexpected product string: Gadget"):
            Luxafor(FakeChannel(product="Gadget"))

    def test_describe(self):
        lux = Luxafor(FakeChannel(product="Luxafor Flag", manufacturer="ACME", serial="42"))
        assert lux.describe() == ('Luxafor device, manufacturer "ACME", '
                                  'product "Luxafor Flag", s/n: 42')

    def test_describe_unknowns(self):
        lux = Luxafor(FakeChannel(product=None, manufacturer=None))
        assert "<manufacturer unknown>" in lux.describe()
        assert "<product unknown>" in lux.describe()
        assert "<serial number unknown>" in lux.describe()

    def test_context_manager_closes(self, channel):
        with Luxafor(channel):
            pass
        assert channel.closed


class TestOperations:
    """Reports written for each operation."""

    def test_simple_color(self, lux, channel):
        lux.set_simple_color(SimpleColor.GREEN)
        assert channel.written == [b"\x00\x00G"]

    def test_off(self, lux, channel):
        lux.off()
        assert channel.written == [b"\x00\x00O"]

    def test_rgb_all_lights_is_one_report(self, lux, channel):
        lux.set_rgb_color(RgbColor(1, 2, 3), Lights.ALL)
        assert channel.written == [bytes([0, 1, 0xFF, 1, 2, 3])]

    def test_rgb_subset_is_one_report_per_led(self, lux, channel):
        targets = lux.set_rgb_color(RgbColor(1, 2, 3), Lights.FLAG_BOTTOM | Lights.BACK_TOP)
        assert targets == [Target.FLAG_BOTTOM, Target.BACK_TOP]
        assert channel.written == [bytes([0, 1, 1, 1, 2, 3]), bytes([0, 1, 6, 1, 2, 3])]

    def test_no_lights_sends_nothing(self, lux, channel):
        assert lux.set_rgb_color(RgbColor(1, 2, 3), Lights.NONE) == []
        assert channel.written == []

    def test_fade_flag_is_single_group_command(self, lux, channel):
        targets = lux.fade_to_color(RgbColor(0, 255, 0), Lights.FLAG, 0)
        assert targets == [Target.FLAG]
        assert channel.written == [bytes([0, 2, ord("A"), 0, 255, 0, 0])]

    def test_strobe_back(self, lux, channel):
        lux.strobe(RgbColor(255, 0, 0), Lights.BACK, speed=10, repeat=4)
        assert channel.written == [bytes([0, 3, ord("B"), 255, 0, 0, 10, 0, 4])]

    def test_wave(self, lux, channel):
        lux.wave(RgbColor(0, 0, 255), WaveType.LONG, speed=31, repeat=3)
        assert channel.written == [bytes([0, 4, 2, 0, 0, 255, 0, 3, 31])]

    def test_pattern(self, lux, channel):
        lux.pattern(PatternType.RAINBOW_WAVE, 2)
        assert channel.written == [bytes([0, 6, 8, 2])]

    def test_each_write_is_followed_by_a_read(self, lux, channel):
        lux.set_rgb_color(RgbColor(1, 1, 1), Lights.FLAG_TOP | Lights.BACK_BOTTOM)
        assert len(channel.reads) == 2

    def test_status_query_returns_raw_reply(self):
        channel = FakeChannel(responses=[b"\x80\x01"])
        assert Luxafor(channel).query_status() == b"\x80\x01"
        assert channel.written == [bytes([0x80] + [0] * 7)]


class TestTransportFailures:
    """Write/read errors are logged and never abort the sequence."""

    def test_failed_write_continues_with_next_target(self, caplog):
        channel = FakeChannel(fail_writes={0})
        lux = Luxafor(channel)
        with caplog.at_level(logging.WARNING):
            lux.set_rgb_color(RgbColor(1, 2, 3), Lights.FLAG_BOTTOM | Lights.FLAG_MIDDLE)
        assert channel.written == [bytes([0, 1, 2, 1, 2, 3])]
        assert "Error writing command" in caplog.text

    def test_failed_read_is_only_a_warning(self, caplog):
        channel = FakeChannel(fail_reads=True)
        lux = Luxafor(channel)
        with caplog.at_level(logging.WARNING):
            lux.set_rgb_color(RgbColor(1, 2, 3), Lights.FLAG_BOTTOM | Lights.BACK_BOTTOM)
        assert len(channel.written) == 2
        assert caplog.text.count("Error reading response") == 2

    def test_injected_logger(self, caplog):
        logger = logging.getLogger("test.luxafor.injected")
        lux = Luxafor(FakeChannel(fail_writes={0}), logger=logger)
        with caplog.at_level(logging.WARNING, logger="test.luxafor.injected"):
            lux.off()
        assert [r.name for r in caplog.records] == ["test.luxafor.injected"]

    def test_status_query_survives_failures(self):
        assert Luxafor(FakeChannel(fail_reads=True)).query_status() == b""
        assert Luxafor(FakeChannel(fail_writes={0})).query_status() == b""
