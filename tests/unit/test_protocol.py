from luxafor.colors import RgbColor, SimpleColor
from luxafor.effects import PATTERN_CODES, WAVE_TYPE_CODES, PatternType, WaveType
from luxafor.lights import Target
from luxafor.protocol import (CMD_FADE, CMD_PATTERN, CMD_RGB_COLOR, CMD_SIMPLE_COLOR,
                              CMD_STATUS, CMD_STROBE, CMD_WAVE, LUXAFOR_PID, LUXAFOR_VID,
                              build_fade, build_pattern, build_rgb_color, build_simple_color,
                              build_status_query, build_strobe, build_wave)


class TestReportBuilders:
    """Byte-exact reports for each device operation."""

    def test_simple_color(self):
        assert build_simple_color(SimpleColor.RED) == bytes([0, 0, ord("R")])
        assert build_simple_color(SimpleColor.OFF) == b"\x00\x00O"

    def test_simple_color_codes(self):
        codes = {c: build_simple_color(c)[2] for c in SimpleColor}
        assert bytes(codes.values()) == b"RGBCMYWO"

    def test_rgb_color_all(self):
        assert build_rgb_color(RgbColor(1, 2, 3), Target.ALL) == bytes([0, 1, 0xFF, 1, 2, 3])

    def test_rgb_color_single_led(self):
        report = build_rgb_color(RgbColor(9, 8, 7), Target.BACK_MIDDLE)
        assert report == bytes([0, 1, 5, 9, 8, 7])

    def test_fade(self):
        report = build_fade(RgbColor(0, 255, 0), Target.FLAG, 40)
        assert report == bytes([0, 2, 0x41, 0, 255, 0, 40])
        assert len(report) == 7

    def test_strobe_reserved_byte(self):
        report = build_strobe(RgbColor(10, 20, 30), Target.BACK, speed=31, repeat=3)
        assert report == bytes([0, 3, 0x42, 10, 20, 30, 31, 0, 3])

    def test_wave_tail_order(self):
        report = build_wave(RgbColor(10, 20, 30), WaveType.OVERLAPPING_SHORT, speed=50, repeat=2)
        assert report == bytes([0, 4, 3, 10, 20, 30, 0, 2, 50])

    def test_pattern(self):
        assert build_pattern(PatternType.POLICE, 5) == bytes([0, 6, 5, 5])
        assert build_pattern(PatternType.RAINBOW_WAVE, 0) == bytes([0, 6, 8, 0])

    def test_status_query(self):
        assert build_status_query() == bytes([0x80, 0, 0, 0, 0, 0, 0, 0])

    def test_lengths(self):
        rgb = RgbColor(1, 1, 1)
        assert [len(r) for r in (
            build_simple_color(SimpleColor.RED),
            build_rgb_color(rgb, Target.ALL),
            build_fade(rgb, Target.ALL, 0),
            build_strobe(rgb, Target.ALL, 0, 0),
            build_wave(rgb, WaveType.SHORT, 0, 0),
            build_pattern(PatternType.LUXAFOR, 0),
            build_status_query(),
        )] == [3, 6, 7, 9, 9, 4, 8]

    def test_returns_fresh_bytes(self):
        a = build_rgb_color(RgbColor(1, 2, 3), Target.ALL)
        b = build_rgb_color(RgbColor(1, 2, 3), Target.ALL)
        assert isinstance(a, bytes)
        assert a == b


class TestConstants:
    """Opcodes, identifiers and effect codes."""

    def test_opcodes(self):
        assert (CMD_SIMPLE_COLOR, CMD_RGB_COLOR, CMD_FADE, CMD_STROBE,
                CMD_WAVE, CMD_PATTERN, CMD_STATUS) == (0, 1, 2, 3, 4, 6, 0x80)

    def test_usb_ids(self):
        assert (LUXAFOR_VID, LUXAFOR_PID) == (0x04D8, 0xF372)

    def test_wave_codes(self):
        assert [WAVE_TYPE_CODES[w] for w in WaveType] == [1, 2, 3, 4]

    def test_pattern_codes(self):
        assert PATTERN_CODES[PatternType.LUXAFOR] == 1
        assert PATTERN_CODES[PatternType.POLICE] == 5
        assert sorted(PATTERN_CODES.values()) == list(range(1, 9))
