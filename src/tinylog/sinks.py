"""
Output sinks.

A Sink is a byte-writable destination guarded by its own lock. Several
channels may hold the same Sink; their lines are then serialized by that
Sink's lock and by nothing else. There is no logger-wide lock.

Any object with a ``write`` method can be adapted with as_sink(). Binary
streams receive bytes. Text streams receive the decoded line: anything
derived from io.TextIOBase, and anything exposing an ``encoding``
attribute (text-mode tempfiles, colorama's StreamWrapper on sys.stdout).
The standard streams are resolved at write time, so redirecting
sys.stdout after import (pytest capture, contextlib.redirect_stdout) is
honored. There is exactly one stdout Sink and one stderr Sink.
"""

import io
import sys
import threading
import weakref
from typing import Any, Callable, Optional


ENCODING = 'utf-8'


class Sink:
    """Shared, mutually-exclusive handle on a writable destination.

    Usage::

        buf = io.BytesIO()
        sink = Sink(buf)
        Channel.INFO.set_sink(sink)
        Channel.DEBUG.set_sink(sink)   # same lock, lines never interleave
    """

    def __init__(self, stream: Any = None, *,
                 resolver: Optional[Callable[[], Any]] = None,
                 name: Optional[str] = None):
        if stream is None and resolver is None:
            raise TypeError("Sink needs a stream or a resolver")
        if stream is not None and not callable(getattr(stream, 'write', None)):
            raise TypeError(f"{type(stream).__name__} object has no write() method")
        self._stream = stream
        self._resolver = resolver
        self._lock = threading.Lock()
        self.name = name or f"<{type(stream).__name__}>"

    @classmethod
    def stdout(cls) -> 'Sink':
        """The shared Sink writing to whatever sys.stdout is at write time."""
        return _STDOUT

    @classmethod
    def stderr(cls) -> 'Sink':
        """The shared Sink writing to whatever sys.stderr is at write time."""
        return _STDERR

    @property
    def stream(self) -> Any:
        """The underlying destination (resolved now for standard streams)."""
        if self._resolver is not None:
            return self._resolver()
        return self._stream

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def write_line(self, data: bytes) -> None:
        """Write one complete line and flush, holding the lock throughout.

        Errors from the destination propagate to the caller.
        """
        with self._lock:
            stream = self.stream
            if _is_text(stream):
                stream.write(data.decode(ENCODING, errors='replace'))
            else:
                stream.write(data)
            flush = getattr(stream, 'flush', None)
            if flush is not None:
                flush()

    def __repr__(self):
        return f"Sink({self.name})"


_STDOUT = Sink(resolver=lambda: sys.stdout, name='<stdout>')
_STDERR = Sink(resolver=lambda: sys.stderr, name='<stderr>')


def _is_text(stream: Any) -> bool:
    """True if stream takes str rather than bytes.

    Binary buffered and raw IO objects have no ``encoding``; text wrappers
    that are not TextIOBase subclasses forward it. A binary ``mode`` wins
    over a stray ``encoding`` (SpooledTemporaryFile reports one in 'w+b').
    """
    if isinstance(stream, io.TextIOBase):
        return True
    if not hasattr(stream, 'encoding'):
        return False
    return 'b' not in str(getattr(stream, 'mode', ''))


# Live wrappers keyed by id() of the wrapped stream. A wrapper keeps its
# stream alive, so an id is never reused while its entry exists.
_WRAPPERS: 'weakref.WeakValueDictionary[int, Sink]' = weakref.WeakValueDictionary()
_WRAPPERS_LOCK = threading.Lock()


def as_sink(obj: Any) -> Sink:
    """Adapt obj to a Sink.

    A Sink is returned unchanged. A stream is wrapped, and the same wrapper
    is returned every time the same stream object is adapted while that
    wrapper is still in use, so channels given the same stream share one
    lock. The current sys.stdout and sys.stderr map to the shared standard
    stream Sinks.

    Raises:
        TypeError: If obj has no callable write().
    """
    if isinstance(obj, Sink):
        return obj
    if not callable(getattr(obj, 'write', None)):
        raise TypeError(f"{type(obj).__name__} object has no write() method")
    if obj is sys.stdout:
        return _STDOUT
    if obj is sys.stderr:
        return _STDERR
    with _WRAPPERS_LOCK:
        sink = _WRAPPERS.get(id(obj))
        if sink is None or sink._stream is not obj:
            sink = Sink(obj)
            _WRAPPERS[id(obj)] = sink
        return sink
