"""
Version information for tinylog.

This file is the canonical source for version numbers.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.1.0-alpha
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", etc.

__version__ = "0.1.0-alpha"
__app_name__ = "tinylog"


def get_version():
    """Return the full version string."""
    return __version__


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    - 0.1.0-alpha -> 0.1.0a0
    - 0.1.0-beta  -> 0.1.0b0
    - 0.1.0       -> 0.1.0
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


VERSION = get_version()
PIP_VERSION = get_pip_version()
