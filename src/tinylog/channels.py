"""
Channels and their per-channel configuration.

Channels are named output categories. Each channel has its own label
color and its own sink, both changeable at any time from any thread.
Channel order (Critical first, Trace last) is documentation only: whether
a message is shown depends on its numeric level alone.

Channel spec syntax (compact, positional):
    CHANNEL:DEST:COLOR

    Examples:
        warning                 # Nothing changed (validates the name)
        warning:stderr          # Warnings go to stderr
        debug::gray             # Default destination, gray label
        error:stderr:bright-red
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from .colors import Color
from .levels import color_is_enabled
from .sinks import Sink, as_sink


class Channel(Enum):
    """Channels to which a log entry can be published."""
    CRITICAL = 'critical'
    ERROR = 'error'
    WARNING = 'warning'
    NOTICE = 'notice'
    INFO = 'info'
    DEBUG = 'debug'
    TRACE = 'trace'

    @property
    def display_name(self) -> str:
        """Label printed in front of every message, e.g. 'WARNING'."""
        return self.name

    @property
    def description(self) -> str:
        return CHANNEL_DESCRIPTIONS.get(self, '')

    def get_color(self) -> Color:
        """Fetch the current color for the label of this channel."""
        return _STATE[self].get_color()

    def set_color(self, color: Union[Color, str]) -> None:
        """Set the color for the label of this channel.

        Accepts a Color or a color name ('red', 'bright-black', 'gray').
        """
        _STATE[self].set_color(Color.parse(color))

    def get_sink(self) -> Sink:
        """Return the sink this channel currently writes to."""
        return _STATE[self].get_sink()

    def set_sink(self, sink: Any) -> None:
        """Set a new sink for this channel.

        A raw stream is adapted with as_sink(), so passing the same stream
        to several channels makes them share one lock.
        """
        _STATE[self].set_sink(as_sink(sink))

    def painted_name(self) -> str:
        """The display name in the channel color, or plain when color is off."""
        if color_is_enabled():
            return self.get_color().paint(self.display_name)
        return self.display_name

    def log(self, level: int, message: str) -> None:
        """Shorthand for tinylog.log(self, level, message)."""
        # Lazy import to avoid circular dependency
        from .manager import log
        log(self, level, message)

    @classmethod
    def parse(cls, value: Union['Channel', str]) -> 'Channel':
        """Look up a channel by name, case-insensitively.

        Raises:
            ValueError: If no channel has that name.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ', '.join(c.value for c in cls)
            raise ValueError(f"Unknown channel {value!r} (expected one of: {names})") from None


# Channel descriptions for format_channel_list()
CHANNEL_DESCRIPTIONS = {
    Channel.CRITICAL: 'Failures that stop the program',
    Channel.ERROR:    'Errors the program may recover from',
    Channel.WARNING:  'Suspicious conditions worth a look',
    Channel.NOTICE:   'Significant but normal events',
    Channel.INFO:     'General progress information',
    Channel.DEBUG:    'Internal state for developers',
    Channel.TRACE:    'Function call tracing (@trace)',
}

DEFAULT_COLORS = {
    Channel.CRITICAL: Color.RED,
    Channel.ERROR:    Color.BRIGHT_RED,
    Channel.WARNING:  Color.YELLOW,
    Channel.NOTICE:   Color.BLUE,
    Channel.INFO:     Color.GREEN,
    Channel.DEBUG:    Color.BRIGHT_BLACK,
    Channel.TRACE:    Color.CYAN,
}

# One stdout sink shared by every channel by default
STDOUT_SINK = Sink.stdout()
STDERR_SINK = Sink.stderr()

DESTINATIONS = {
    'stdout': STDOUT_SINK,
    'stderr': STDERR_SINK,
}


class _ChannelState:
    """Color and sink of one channel, under that channel's own lock."""

    def __init__(self, color: Color, sink: Sink):
        self._lock = threading.Lock()
        self._color = color
        self._sink = sink

    def get_color(self) -> Color:
        with self._lock:
            return self._color

    def set_color(self, color: Color) -> None:
        with self._lock:
            self._color = color

    def get_sink(self) -> Sink:
        with self._lock:
            return self._sink

    def set_sink(self, sink: Sink) -> None:
        with self._lock:
            self._sink = sink


_STATE: Dict[Channel, _ChannelState] = {
    ch: _ChannelState(DEFAULT_COLORS[ch], STDOUT_SINK) for ch in Channel
}


def reset_channels() -> None:
    """Restore every channel's default color and the shared stdout sink."""
    for ch in Channel:
        _STATE[ch].set_color(DEFAULT_COLORS[ch])
        _STATE[ch].set_sink(STDOUT_SINK)


@dataclass
class ChannelConfig:
    """Configuration for a single channel parsed from a channel spec.

    Empty slots are None and leave the channel's current setting alone.
    """
    channel: Channel
    destination: Optional[str] = None    # 'stdout', 'stderr'
    color: Optional[Color] = None

    def apply(self) -> None:
        """Push this configuration onto the channel."""
        if self.destination is not None:
            self.channel.set_sink(DESTINATIONS[self.destination])
        if self.color is not None:
            self.channel.set_color(self.color)


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Handles the compact positional syntax:
        CHANNEL:DEST:COLOR

    Empty slots use :: (empty between colons).

    Args:
        spec: Channel spec string like "warning:stderr" or "debug::gray"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: On an unknown channel, destination or color, or
            more than three slots.
    """
    parts = spec.split(':')
    if len(parts) > 3:
        raise ValueError(f"Too many fields in channel spec {spec!r} (CHANNEL:DEST:COLOR)")

    channel = Channel.parse(parts[0])
    dest = color = None

    if len(parts) > 1 and parts[1]:
        dest = parts[1].strip().lower()
        if dest not in DESTINATIONS:
            raise ValueError(
                f"Unknown destination {parts[1]!r} in channel spec {spec!r} "
                f"(expected one of: {', '.join(sorted(DESTINATIONS))})"
            )
    if len(parts) > 2 and parts[2]:
        color = Color.parse(parts[2])

    return ChannelConfig(channel=channel, destination=dest, color=color)


def format_channel_list() -> str:
    """Format the list of channels for display.

    Returns:
        Formatted string listing all channels, in channel order, with
        their current label color and description.
    """
    lines = ["Available channels:"]
    max_name = max(len(ch.display_name) for ch in Channel)
    max_color = max(len(c.name) for c in Color)
    for ch in Channel:
        # Pad before painting so escape codes don't break alignment
        label = f"{ch.display_name:<{max_name}}"
        if color_is_enabled():
            label = ch.get_color().paint(label)
        color_name = ch.get_color().name.lower()
        lines.append(f"  {label}  {color_name:<{max_color}}  {ch.description}")
    return "\n".join(lines)
