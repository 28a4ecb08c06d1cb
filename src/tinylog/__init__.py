"""
tinylog — process-wide logging with channels and THAC0 verbosity.

A message is logged on a channel at a numeric level and is shown when
level <= the global verbosity. Each channel has its own label color and
its own sink; sinks may be shared between channels.

    import tinylog
    from tinylog import Channel, log

    tinylog.set_verbosity(1)
    log(Channel.CRITICAL, 3, "A critical error occurred!")   # Not emitted
    log(Channel.INFO, 1, "Processing started.")              # Emitted
    log(Channel.DEBUG, 0, "Variable values are correct.")    # Emitted

Public API:
    log, would_emit        — dispatch and the emit decision
    set_verbosity, get_verbosity
    enable_color, disable_color, color_is_enabled
    Channel                — channel enum with get/set_color, set_sink
    Color                  — label colors
    Sink, as_sink          — shared, lock-guarded destinations
    init_logging, reset    — startup configuration and defaults
    ChannelConfig, parse_channel_spec, format_channel_list
    trace                  — function tracing decorator
"""

from tinylog._version import __version__, __app_name__
from .levels import (
    set_verbosity, get_verbosity, enable_color, disable_color, color_is_enabled,
)
from .colors import Color
from .sinks import Sink, as_sink
from .channels import (
    Channel, ChannelConfig, parse_channel_spec, format_channel_list,
    CHANNEL_DESCRIPTIONS,
)
from .manager import (
    log, would_emit, init_logging, reset, current_config, LoggingConfig,
)
from .trace import trace

__all__ = [
    '__version__', '__app_name__',
    'log', 'would_emit', 'init_logging', 'reset', 'current_config', 'LoggingConfig',
    'set_verbosity', 'get_verbosity',
    'enable_color', 'disable_color', 'color_is_enabled',
    'Channel', 'Color', 'Sink', 'as_sink',
    'ChannelConfig', 'parse_channel_spec', 'format_channel_list',
    'CHANNEL_DESCRIPTIONS',
    'trace',
]
