"""
Tests for tinylog.channels — per-channel colors and sinks, channel
spec parsing and the channel listing.
"""

import io

import pytest

from tinylog import (
    Channel, ChannelConfig, Color, Sink, disable_color, format_channel_list,
    parse_channel_spec,
)
from tinylog.channels import (
    CHANNEL_DESCRIPTIONS, DEFAULT_COLORS, STDERR_SINK, STDOUT_SINK, reset_channels,
)


# =============================================================================
# Enumeration
# =============================================================================

class TestChannelEnum:

    def test_order(self):
        assert [ch.display_name for ch in Channel] == [
            "CRITICAL", "ERROR", "WARNING", "NOTICE", "INFO", "DEBUG", "TRACE",
        ]

    @pytest.mark.parametrize("name", ["info", "INFO", " Info "])
    def test_parse(self, name):
        assert Channel.parse(name) is Channel.INFO

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown channel 'verbose'"):
            Channel.parse("verbose")

    def test_every_channel_described(self):
        assert set(CHANNEL_DESCRIPTIONS) == set(Channel)
        assert Channel.TRACE.description == CHANNEL_DESCRIPTIONS[Channel.TRACE]


# =============================================================================
# Colors
# =============================================================================

class TestChannelColors:

    def test_defaults(self):
        assert Channel.CRITICAL.get_color() is Color.RED
        assert Channel.ERROR.get_color() is Color.BRIGHT_RED
        assert Channel.WARNING.get_color() is Color.YELLOW
        assert Channel.NOTICE.get_color() is Color.BLUE
        assert Channel.INFO.get_color() is Color.GREEN
        assert Channel.DEBUG.get_color() is Color.BRIGHT_BLACK
        assert Channel.TRACE.get_color() is Color.CYAN

    def test_defaults_distinct(self):
        assert len(set(DEFAULT_COLORS.values())) == len(Channel)

    def test_set_color(self):
        Channel.INFO.set_color(Color.MAGENTA)
        assert Channel.INFO.get_color() is Color.MAGENTA

    def test_set_color_by_name(self):
        Channel.NOTICE.set_color("bright-cyan")
        assert Channel.NOTICE.get_color() is Color.BRIGHT_CYAN

    def test_set_color_bad_name_keeps_old(self):
        with pytest.raises(ValueError):
            Channel.NOTICE.set_color("puce")
        assert Channel.NOTICE.get_color() is Color.BLUE

    def test_set_color_affects_only_that_channel(self):
        Channel.INFO.set_color(Color.WHITE)
        assert Channel.DEBUG.get_color() is Color.BRIGHT_BLACK

    def test_painted_name(self):
        assert Channel.WARNING.painted_name() == Color.YELLOW.paint("WARNING")

    def test_painted_name_plain_when_disabled(self):
        disable_color()
        assert Channel.WARNING.painted_name() == "WARNING"

    def test_disable_keeps_channel_color(self):
        Channel.WARNING.set_color(Color.WHITE)
        disable_color()
        assert Channel.WARNING.get_color() is Color.WHITE


# =============================================================================
# Sinks
# =============================================================================

class TestChannelSinks:

    def test_default_is_one_shared_stdout_sink(self):
        sinks = {id(ch.get_sink()) for ch in Channel}
        assert sinks == {id(STDOUT_SINK)}

    def test_set_sink_with_sink(self):
        sink = Sink(io.BytesIO())
        Channel.INFO.set_sink(sink)
        assert Channel.INFO.get_sink() is sink

    def test_set_sink_with_stream_wraps(self):
        buf = io.BytesIO()
        Channel.INFO.set_sink(buf)
        assert Channel.INFO.get_sink().stream is buf

    def test_same_stream_shares_wrapper(self):
        buf = io.BytesIO()
        Channel.INFO.set_sink(buf)
        Channel.ERROR.set_sink(buf)
        assert Channel.INFO.get_sink() is Channel.ERROR.get_sink()

    def test_set_sink_is_per_channel(self):
        Channel.INFO.set_sink(io.BytesIO())
        assert Channel.DEBUG.get_sink() is STDOUT_SINK

    def test_set_sink_rejects_non_writable(self):
        with pytest.raises(TypeError):
            Channel.INFO.set_sink("not a stream")
        assert Channel.INFO.get_sink() is STDOUT_SINK

    def test_reset_channels(self):
        Channel.INFO.set_sink(io.BytesIO())
        Channel.INFO.set_color(Color.WHITE)
        reset_channels()
        assert Channel.INFO.get_sink() is STDOUT_SINK
        assert Channel.INFO.get_color() is Color.GREEN


# =============================================================================
# Channel Spec Parsing
# =============================================================================

class TestParseChannelSpec:

    def test_name_only(self):
        cfg = parse_channel_spec("warning")
        assert cfg == ChannelConfig(channel=Channel.WARNING)

    def test_destination(self):
        cfg = parse_channel_spec("warning:stderr")
        assert cfg.channel is Channel.WARNING
        assert cfg.destination == "stderr"
        assert cfg.color is None

    def test_empty_destination_slot(self):
        cfg = parse_channel_spec("debug::gray")
        assert cfg.destination is None
        assert cfg.color is Color.BRIGHT_BLACK

    def test_all_slots(self):
        cfg = parse_channel_spec("ERROR:STDOUT:bright-red")
        assert cfg == ChannelConfig(Channel.ERROR, "stdout", Color.BRIGHT_RED)

    def test_unknown_channel(self):
        with pytest.raises(ValueError, match="Unknown channel"):
            parse_channel_spec("loud:stderr")

    def test_unknown_destination(self):
        with pytest.raises(ValueError, match="Unknown destination 'file'"):
            parse_channel_spec("info:file")

    def test_too_many_fields(self):
        with pytest.raises(ValueError, match="Too many fields"):
            parse_channel_spec("info:stdout:red:extra")

    def test_apply(self):
        parse_channel_spec("warning:stderr:magenta").apply()
        assert Channel.WARNING.get_sink() is STDERR_SINK
        assert Channel.WARNING.get_color() is Color.MAGENTA

    def test_apply_empty_slots_leave_settings(self):
        sink = Sink(io.BytesIO())
        Channel.INFO.set_sink(sink)
        parse_channel_spec("info").apply()
        assert Channel.INFO.get_sink() is sink
        assert Channel.INFO.get_color() is Color.GREEN


# =============================================================================
# Channel Listing
# =============================================================================

class TestFormatChannelList:

    def test_lists_every_channel_in_order(self):
        disable_color()
        lines = format_channel_list().splitlines()
        assert lines[0] == "Available channels:"
        assert [line.split()[0] for line in lines[1:]] == [ch.display_name for ch in Channel]

    def test_shows_current_color(self):
        disable_color()
        Channel.NOTICE.set_color(Color.WHITE)
        notice = [line for line in format_channel_list().splitlines() if "NOTICE" in line][0]
        assert "white" in notice
        assert CHANNEL_DESCRIPTIONS[Channel.NOTICE] in notice

    def test_no_escapes_when_color_disabled(self):
        disable_color()
        assert "\x1b" not in format_channel_list()

    def test_labels_painted_when_enabled(self):
        assert Color.YELLOW.code in format_channel_list()
