"""Runtime options for a console facade.

Two options tune interception:

    add_caller               append a 'caller:<label>' element to records
    function_snippet_length  source characters used to label unnamed callers

Each option is read and written through a combined accessor::

    console.options.add_caller()        # -> True
    console.options.add_caller(False)   # set

Setting a value of a different type than the current one is allowed but
warned about. Every effective change is announced after the current turn
to subscribed listeners and on the 'options' output channel.
"""

import asyncio
import threading
from typing import Any, Callable, Dict, List, Optional

from histconsole.lib.log_lib import get_output
from histconsole.lib.log_lib import levels


DEFAULT_OPTIONS = {
    'add_caller': True,
    'function_snippet_length': 40,
}

_UNSET = object()


def schedule(callback: Callable, *args: Any) -> None:
    """Run callback(*args) after the current turn, without waiting for it.

    Uses the running asyncio loop when there is one, otherwise a
    zero-delay daemon timer thread.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        timer = threading.Timer(0, callback, args)
        timer.daemon = True
        timer.start()
    else:
        loop.call_soon(callback, *args)


class OptionStore:
    """Typed get/set store for interception options.

    Args:
        warn: Callable receiving warning messages (usually the facade's warn)
        values: Initial overrides applied on top of DEFAULT_OPTIONS
    """

    def __init__(self, warn: Callable[..., Any] = None,
                 values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(DEFAULT_OPTIONS)
        self._warn = warn
        self._listeners: List[Callable[[Dict[str, Any]], Any]] = []
        for name, value in (values or {}).items():
            self.set(name, value)

    def _check(self, name: str) -> str:
        if name not in self._values:
            raise KeyError(f"Unknown console option: {name!r}")
        return name

    def get(self, name: str) -> Any:
        return self._values[self._check(name)]

    def set(self, name: str, value: Any) -> bool:
        """Store `value` for option `name`.

        Returns:
            True if the value changed (and a notification was scheduled).
        """
        current = self._values[self._check(name)]
        if type(value) is type(current) and value == current:
            return False
        if type(value) is not type(current) and self._warn is not None:
            self._warn(
                f"console.options.{name} is currently type "
                f"{type(current).__name__} and you're setting it to a "
                f"{type(value).__name__} {value!r}"
            )
        self._values[name] = value
        schedule(self._notify, {name: value})
        return True

    def add_caller(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self.get('add_caller')
        self.set('add_caller', value)

    def function_snippet_length(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return self.get('function_snippet_length')
        self.set('function_snippet_length', value)

    def subscribe(self, listener: Callable[[Dict[str, Any]], Any]) -> None:
        """Call `listener({name: value})` after each effective change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[Dict[str, Any]], Any]) -> None:
        self._listeners.remove(listener)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def _notify(self, change: Dict[str, Any]) -> None:
        out = get_output()
        for name, value in change.items():
            out.emit(levels.DETAIL, "[options] {name} = {value!r}",
                     channel='options', name=name, value=value)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                out.error(f"Option listener {listener!r} failed: "
                          f"{type(e).__name__}: {e}")

    def __repr__(self) -> str:
        return f"OptionStore({self._values!r})"
