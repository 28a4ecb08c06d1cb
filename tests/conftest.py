"""Shared test fixtures for the tinylog test suite."""

import io

import pytest

import tinylog


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: multi-threaded stress tests")


# ---------------------------------------------------------------------------
# Global state
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    """Give every test default verbosity, colors and sinks.

    tinylog state is process-wide, so a test that changes it would
    otherwise leak into the next one.
    """
    monkeypatch.delenv("TINYLOG_VERBOSITY", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    tinylog.reset()
    yield
    tinylog.reset()


# ---------------------------------------------------------------------------
# Buffers
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A BytesIO buffer for capturing raw output."""
    return io.BytesIO()


@pytest.fixture
def text_buf():
    """A StringIO buffer for capturing text output."""
    return io.StringIO()


@pytest.fixture
def all_to(buf):
    """Point every channel at one shared buffer with color off."""
    sink = tinylog.Sink(buf)
    for ch in tinylog.Channel:
        ch.set_sink(sink)
    tinylog.disable_color()
    return buf
