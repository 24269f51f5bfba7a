"""Exceptions raised by histconsole."""


class HistoricalConsoleError(Exception):
    """Base class for histconsole errors."""


class MissingArgumentError(HistoricalConsoleError, TypeError):
    """A console method was called without an argument it cannot work without.

    Raised synchronously from the intercepted call, e.g. ``console.time()``
    with no timer name.
    """


class CallerUnavailableError(HistoricalConsoleError):
    """Frame introspection is not available on this interpreter."""
