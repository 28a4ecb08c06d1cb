"""
Dispatch — the single entry point every message goes through.

The emit rule is: message shows when level <= verbosity. The verbosity is
one global integer shared by all channels; the channel only decides the
label color and the sink.

Formatted line:

    <LABEL>: <message>\\n

Only the label is colored, and only while color is globally enabled.

Writing is best-effort. A sink that raises never breaks the caller: the
failure is reported on the interpreter's original stderr and the message
is dropped. The report path never goes back through log().
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

import colorama

from .channels import Channel, parse_channel_spec, reset_channels
from .colors import Color
from .levels import (
    DEFAULT_VERBOSITY, color_is_enabled, disable_color, enable_color,
    get_verbosity, set_verbosity,
)

# Environment overrides read by init_logging()
ENV_VERBOSITY = 'TINYLOG_VERBOSITY'
ENV_NO_COLOR = 'NO_COLOR'


def would_emit(level: int) -> bool:
    """Return True if a message at this level would currently be shown.

    Used by callers to skip building expensive messages.
    """
    return level <= get_verbosity()


def format_line(channel: Channel, message: str) -> bytes:
    """Build the encoded output line for a message on a channel."""
    return f"{channel.painted_name()}: {message}\n".encode('utf-8', errors='replace')


def log(channel: Channel, level: int, message: str) -> None:
    """Log a message to the given channel at the given verbosity level.

    Only emits the message if the global verbosity is at least level.
    Never raises because of the sink.

    Args:
        channel: Channel to publish on
        level: Message level (higher = more verbose)
        message: Text to print after the channel label
    """
    if level > get_verbosity():
        return
    data = format_line(channel, str(message))
    sink = channel.get_sink()
    try:
        sink.write_line(data)
    except Exception as e:
        _report_sink_error(channel, sink, e)


def _report_sink_error(channel, sink, exc) -> None:
    """Tell the interpreter's stderr that a sink failed. Never raises."""
    try:
        stream = sys.__stderr__
        if stream is None:
            return
        stream.write(f"tinylog: {channel.display_name} sink {sink!r} failed: "
                     f"{type(exc).__name__}: {exc}\n")
        stream.flush()
    except Exception:
        pass


@dataclass
class LoggingConfig:
    """Snapshot of the global logging configuration."""
    verbosity: int
    color: bool
    colors: Dict[Channel, Color] = field(default_factory=dict)


def current_config() -> LoggingConfig:
    """Return a snapshot of verbosity, color switch and channel colors."""
    return LoggingConfig(
        verbosity=get_verbosity(),
        color=color_is_enabled(),
        colors={ch: ch.get_color() for ch in Channel},
    )


def _env_verbosity() -> Optional[int]:
    raw = os.environ.get(ENV_VERBOSITY, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def init_logging(verbosity: Optional[int] = None,
                 color: Optional[bool] = None,
                 channels: Optional[Iterable[str]] = None) -> LoggingConfig:
    """Configure global logging state in one call.

    Call once at program startup after parsing CLI arguments.
    Each setting resolves as: explicit argument, then environment,
    then the current value.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet).
            Falls back to $TINYLOG_VERBOSITY when it holds an integer.
        color: Force colored labels on or off. When None, a non-empty
            $NO_COLOR disables color.
        channels: Channel spec strings (e.g. ['warning:stderr', 'debug::gray'])

    Returns:
        The resulting LoggingConfig

    Raises:
        ValueError: If a channel spec is malformed. Nothing is changed then.
    """
    # Parse everything up front so a bad spec leaves state untouched
    configs = [parse_channel_spec(spec) for spec in (channels or ())]

    if verbosity is None:
        verbosity = _env_verbosity()
    if verbosity is not None:
        set_verbosity(verbosity)

    if color is None and os.environ.get(ENV_NO_COLOR):
        color = False
    if color is True:
        enable_color()
    elif color is False:
        disable_color()
    if color_is_enabled():
        colorama.just_fix_windows_console()

    for cfg in configs:
        cfg.apply()

    return current_config()


def reset() -> None:
    """Restore default verbosity, color switch, channel colors and sinks."""
    set_verbosity(DEFAULT_VERBOSITY)
    enable_color()
    reset_channels()
