"""HistoricalConsole: the recording facade substituted for the real console.

Usage::

    console = HistoricalConsole()
    console.debug('loaded', 3)
    console.count('retries')
    console.history
    # [['debug', 'loaded', 3, 'caller:main'],
    #  ['count', 'retries 1', 'caller:main']]

Every method kind in histconsole.channels.METHOD_KINDS is an attribute
('assert_' for assert) and also reachable as ``console['assert']``. The
set of methods is fixed once the facade is built.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Set

from histconsole.channels import METHOD_KINDS, attr_name
from histconsole.history import HistoryLog
from histconsole.hooks import SaveHooks
from histconsole.interceptor import MethodInterceptor
from histconsole.options import OptionStore
from histconsole.state import get_console


def backend_method(backend, kind: str) -> Optional[Callable[..., Any]]:
    """Backend callable for `kind`, falling back to the backend's log()."""
    method = getattr(backend, attr_name(kind), None)
    if callable(method):
        return method
    fallback = getattr(backend, 'log', None)
    return fallback if callable(fallback) else None


class HistoricalConsole:
    """Console facade that records every call in ``history``.

    Args:
        backend: Sink receiving the raw calls. None means the console that
            is active when the facade is built (see histconsole.state).
        options: Initial option values, e.g. {'add_caller': False}
        clock: Millisecond clock used by the time/time_end/time_stamp hooks
        rng: Random source for untitled count() calls
    """

    def __init__(self, backend=None, options: Dict[str, Any] = None,
                 clock: Callable[[], int] = None, rng=None):
        self.backend = backend if backend is not None else get_console()
        self.history = HistoryLog()
        self.hooks = SaveHooks(clock=clock, rng=rng)
        self._warned: Set[str] = set()

        methods = {
            kind: MethodInterceptor(kind, backend_method(self.backend, kind),
                                    self.hooks.get(kind), self)
            for kind in METHOD_KINDS
        }
        self.methods = MappingProxyType(methods)
        for kind, method in methods.items():
            setattr(self, attr_name(kind), method)

        self.options = OptionStore(warn=methods['warn'])
        for name, value in (options or {}).items():
            self.options.set(name, value)
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise AttributeError(
                f"{type(self).__name__} is frozen; cannot set {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"{type(self).__name__} is frozen; cannot delete {name!r}")

    def __getitem__(self, kind: str) -> MethodInterceptor:
        return self.methods[kind]

    def warn_once(self, key: str, message: str) -> None:
        """Warn through this console, at most once per `key`."""
        if key in self._warned:
            return
        self._warned.add(key)
        self.warn(message)

    def alert_user(self, message: str) -> None:
        """Show `message` through the backend's alert sink without recording it."""
        sink = self.methods['alert'].sink
        if sink is not None:
            sink(message)

    def __repr__(self) -> str:
        return (f"<HistoricalConsole backend={self.backend!r} "
                f"records={len(self.history)}>")
