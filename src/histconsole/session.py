"""Scoped sessions: run a callback with a recording console installed.

    def main(console):
        console.debug('starting')
        ...

    run = historical_console(main)
    run()
    run.console.history     # [['debug', 'starting', 'caller:main'], ...]

While the callback runs, the facade is also the active console, so code
that logs through ``histconsole.console`` is recorded too. The previous
console is put back on every exit path.
"""

import functools
import inspect
from typing import Any, Callable, Optional

from histconsole import state
from histconsole.facade import HistoricalConsole


USAGE_MESSAGE = (
    "historical_console expects one function argument like this: "
    "historical_console(lambda console: main(console))"
)

UNCAUGHT_HANDLER_WARNING = (
    "You should register an uncaught exception handler with "
    "histconsole.set_uncaught_handler() so exceptions from the session "
    "are reported together with the console history"
)


def takes_one_argument(fn: Any) -> bool:
    """True if `fn` is callable with exactly one positional parameter.

    Extra parameters must not be required; ``*args``/``**kwargs`` do not
    count towards the single parameter.
    """
    if not callable(fn):
        return False
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in signature.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
        elif param.kind is param.KEYWORD_ONLY and param.default is param.empty:
            return False
    return positional == 1


def _usage_error_console() -> HistoricalConsole:
    """Facade that records a usage error made without an explicit console.

    The active console when it is a HistoricalConsole, so the error lands in
    a history someone can read; a fresh facade otherwise.
    """
    active = state.get_console()
    if isinstance(active, HistoricalConsole):
        return active
    return HistoricalConsole()


def historical_console(*args: Any, console: HistoricalConsole = None
                       ) -> Optional[Callable[[], Any]]:
    """Wrap a one-argument callback in a recording console session.

    Args:
        *args: Exactly one callable taking the console as its only parameter
        console: Facade to use; a fresh HistoricalConsole by default

    Returns:
        A zero-argument invoker (with the facade as its ``console``
        attribute), or None when the arguments are invalid. Invalid
        arguments are reported through the backend's alert sink and an
        'error' history record instead of an exception. Without `console`
        the record goes to the active HistoricalConsole, if there is one.
    """
    if len(args) != 1 or not takes_one_argument(args[0]):
        target = console if console is not None else _usage_error_console()
        target.alert_user(USAGE_MESSAGE)
        target.error(USAGE_MESSAGE + " You passed in these arguments: ", args)
        return None

    facade = console if console is not None else HistoricalConsole()
    callback = args[0]

    @functools.wraps(callback)
    def invoker():
        previous = state.install_console(facade)
        try:
            return callback(facade)
        except Exception as e:
            handler = state.get_uncaught_handler()
            if handler is None:
                facade.warn(UNCAUGHT_HANDLER_WARNING)
                raise
            handler(e)
            return None
        finally:
            state.restore_console(previous)

    invoker.console = facade
    return invoker
