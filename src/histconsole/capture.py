"""Bridge from the stdlib logging module into a console history.

Code that logs through ``logging`` rather than a console can still be
recorded: while capture_logging() is active, every record reaching the
chosen logger is appended to the console's history as if it had been a
console call::

    with capture_logging(console):
        logging.getLogger(__name__).warning("disk at %d%%", 91)

    console.history[-1]   # ['warn', 'disk at 91%', 'caller:check_disk']

The bridge only records; output still goes through the logger's own
handlers.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from histconsole.caller import NO_CALLER
from histconsole.history import CALLER_PREFIX


def kind_for(record: logging.LogRecord) -> str:
    """Console method kind matching a log record."""
    if record.exc_info and record.exc_info[0] is not None:
        return 'exception'
    if record.levelno >= logging.ERROR:
        return 'error'
    if record.levelno >= logging.WARNING:
        return 'warn'
    if record.levelno >= logging.INFO:
        return 'info'
    return 'debug'


class HistoryHandler(logging.Handler):
    """logging.Handler that appends records to a console's history."""

    def __init__(self, console, level: int = logging.NOTSET):
        super().__init__(level)
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = [kind_for(record), record.getMessage()]
            if self.console.options.get('add_caller'):
                name = record.funcName
                label = NO_CALLER if name in (None, '<module>') else name
                entry.append(CALLER_PREFIX + label)
            self.console.history.append(entry)
        except Exception:
            self.handleError(record)


@contextmanager
def capture_logging(console, logger: Optional[logging.Logger] = None,
                    level: int = logging.NOTSET) -> Iterator[HistoryHandler]:
    """Record log records from `logger` (default: root) in `console`.

    Args:
        console: HistoricalConsole whose history receives the records
        logger: Logger to attach to; the root logger by default
        level: When set, the logger's level is lowered to it for the
            duration so less severe records are captured too

    Yields:
        The attached HistoryHandler.
    """
    target = logger if logger is not None else logging.getLogger()
    handler = HistoryHandler(console)
    saved_level = target.level
    if level and level < target.getEffectiveLevel():
        target.setLevel(level)
    target.addHandler(handler)
    try:
        yield handler
    finally:
        target.removeHandler(handler)
        target.setLevel(saved_level)
