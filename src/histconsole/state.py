"""Process-wide console slots.

Two pieces of global state, each with an explicit install/restore pair:

- the active console, which ``histconsole.console`` forwards to; a session
  installs its facade here and puts the previous console back on exit
- the uncaught-exception handler that receives exceptions escaping a
  session callback

Installs and restores must be strictly paired; nested sessions restore in
reverse order.
"""

from typing import Any, Callable, Optional


_active_console: Any = None
_uncaught_handler: Optional[Callable[[BaseException], Any]] = None


def get_console():
    """Return the active console, creating a NativeConsole if needed."""
    global _active_console
    if _active_console is None:
        # Lazy import to avoid circular dependency
        from histconsole.native import NativeConsole
        _active_console = NativeConsole()
    return _active_console


def install_console(console) -> Any:
    """Make `console` the active console.

    Returns:
        The previously installed value, to hand back to restore_console().
    """
    global _active_console
    previous = _active_console
    _active_console = console
    return previous


def restore_console(previous) -> None:
    """Put back a value returned by install_console()."""
    global _active_console
    _active_console = previous


def get_uncaught_handler() -> Optional[Callable[[BaseException], Any]]:
    return _uncaught_handler


def set_uncaught_handler(handler: Optional[Callable[[BaseException], Any]]):
    """Register (or clear, with None) the uncaught-exception handler.

    Returns:
        The previously registered handler.
    """
    global _uncaught_handler
    previous = _uncaught_handler
    _uncaught_handler = handler
    return previous


class ConsoleProxy:
    """Forwards attribute access to whichever console is active.

    Code that writes ``from histconsole import console`` keeps working
    unchanged, and its calls are recorded while a session is running.
    """

    def __getattr__(self, name: str):
        return getattr(get_console(), name)

    def __repr__(self) -> str:
        return f"<ConsoleProxy for {get_console()!r}>"


console = ConsoleProxy()
