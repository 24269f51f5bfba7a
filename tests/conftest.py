"""Shared test fixtures for the histconsole test suite."""

import io

import pytest

from histconsole import state
from histconsole.facade import HistoricalConsole
from histconsole.lib.log_lib import OutputManager
from histconsole.lib.log_lib import channels as _channels_mod
from histconsole.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: starts a Python subprocess")


# ---------------------------------------------------------------------------
# Fake backends
# ---------------------------------------------------------------------------
class RecordingBackend:
    """Backend that accepts every method kind and remembers each call.

    ``calls`` holds (kind, args) tuples in call order, with 'assert_'
    reported as 'assert'.
    """

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        kind = name[:-1] if name.endswith("_") else name

        def method(*args):
            self.calls.append((kind, args))
        return method

    def kinds(self):
        return [kind for kind, _ in self.calls]


class LogOnlyBackend:
    """Backend exposing only the generic log() method."""

    def __init__(self):
        self.calls = []

    def log(self, *args):
        self.calls.append(args)


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_global_state():
    """Save and restore every process-wide slot a test might touch."""
    saved = (
        state._active_console,
        state._uncaught_handler,
        _manager_mod._manager,
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
        _channels_mod.CHANNEL_DEFAULT_LEVELS,
    )
    yield
    (state._active_console,
     state._uncaught_handler,
     _manager_mod._manager,
     _channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS,
     _channels_mod.CHANNEL_DEFAULT_LEVELS) = saved


# ---------------------------------------------------------------------------
# Common fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def backend():
    """A RecordingBackend."""
    return RecordingBackend()


@pytest.fixture
def log_only_backend():
    """A LogOnlyBackend."""
    return LogOnlyBackend()


@pytest.fixture
def console(backend):
    """A HistoricalConsole forwarding to a RecordingBackend."""
    return HistoricalConsole(backend=backend)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)

