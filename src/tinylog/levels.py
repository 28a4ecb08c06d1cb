"""
THAC0 verbosity levels and the global logging switches.

The emit rule is simple:

    message.level <= verbosity  →  message is shown

There is one process-wide verbosity shared by every channel, and one
process-wide switch for colored labels. Both are lock-protected cells.

The level constants below are informational. The system compares raw
integers and any int is a legal level or verbosity.

Level assignments:
    ←── quieter ────────── default ────────── louder ──→
    -4       -3     -2      -1      0       1      2       3     4
    critical error  warning minimal default detail verbose debug trace
"""

import threading


# Positive levels (chattier output, shown once verbosity is raised)
TRACE = 4          # Function call tracing (@trace)
DEBUG = 3          # Internal state
VERBOSE = 2        # Configuration, decisions taken
DETAIL = 1         # Progress, timing, summary info
DEFAULT = 0        # Shown at the default verbosity

# Negative levels (survive a lowered verbosity)
MINIMAL = -1       # Hidden by the first step down
WARNING = -2
ERROR = -3
CRITICAL = -4

DEFAULT_VERBOSITY = DEFAULT


class _Cell:
    """A single value guarded by a lock."""

    def __init__(self, value):
        self._value = value
        self._lock = threading.Lock()

    def get(self):
        with self._lock:
            return self._value

    def set(self, value):
        with self._lock:
            self._value = value


_verbosity = _Cell(DEFAULT_VERBOSITY)
_color_enabled = _Cell(True)


def set_verbosity(level: int) -> None:
    """Set the global verbosity threshold.

    Affects every later log() call on every thread. Calls already past
    their threshold check are not affected.
    """
    _verbosity.set(int(level))


def get_verbosity() -> int:
    """Return the global verbosity threshold."""
    return _verbosity.get()


def enable_color() -> None:
    """Enable colored channel labels globally. This is the default."""
    _color_enabled.set(True)


def disable_color() -> None:
    """Disable all color/styling globally. Use this when logging to a file.

    Per-channel colors are kept, so enable_color() restores them.
    """
    _color_enabled.set(False)


def color_is_enabled() -> bool:
    """Return True if colored labels are enabled globally."""
    return _color_enabled.get()
