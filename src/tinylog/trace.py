"""
Function tracing decorator.

Routes trace output through log() at level TRACE on the TRACE channel,
so it follows the global verbosity like every other message.
"""

import functools
import inspect
from pathlib import Path

from .channels import Channel
from .levels import TRACE
from .manager import log, would_emit


def _short_repr(value):
    """repr() that keeps long strings and lists readable."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls on the TRACE channel.

    Shows function entry/exit with arguments and return values when
    the verbosity is at least TRACE (4). Otherwise the function is
    called with no extra work.
    """
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    qualname = f"{module_name}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not would_emit(TRACE):
            return func(*args, **kwargs)

        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        log(Channel.TRACE, TRACE, f">> {qualname}({', '.join(args_repr)})")

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log(Channel.TRACE, TRACE, f"!! {qualname} raised: {type(e).__name__}: {e}")
            raise

        if result is not None:
            log(Channel.TRACE, TRACE, f"<< {qualname} returned: {_short_repr(result)}")
        return result

    return wrapper
