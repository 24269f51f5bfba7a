"""histconsole: keep a replayable history of console calls.

Wrap a program in a recording console and every console call it makes is
forwarded to the real console and stored, together with the function that
made it, so recent diagnostic activity can be attached to error reports::

    from histconsole import historical_console

    def main(console):
        console.debug('loading', path)
        ...

    run = historical_console(main)
    run()
    run.console.history   # [['debug', 'loading', '/tmp/x', 'caller:main'], ...]
"""

from histconsole._version import __version__, __app_name__
from histconsole.capture import HistoryHandler, capture_logging
from histconsole.errors import (
    CallerUnavailableError, HistoricalConsoleError, MissingArgumentError,
)
from histconsole.facade import HistoricalConsole
from histconsole.history import HistoryLog
from histconsole.native import LoggerConsole, NativeConsole
from histconsole.session import historical_console
from histconsole.state import (
    console, get_console, get_uncaught_handler, install_console,
    restore_console, set_uncaught_handler,
)

__all__ = [
    "__version__", "__app_name__",
    "historical_console", "HistoricalConsole", "HistoryLog",
    "NativeConsole", "LoggerConsole",
    "HistoryHandler", "capture_logging",
    "console", "get_console", "install_console", "restore_console",
    "get_uncaught_handler", "set_uncaught_handler",
    "HistoricalConsoleError", "MissingArgumentError", "CallerUnavailableError",
]
