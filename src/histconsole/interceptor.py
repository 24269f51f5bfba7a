"""MethodInterceptor: one recording entry point per console method kind."""

from typing import Any, Callable, Optional

from histconsole.caller import caller_frame, outside_package, resolve_caller
from histconsole.history import CALLER_PREFIX
from histconsole.errors import CallerUnavailableError


CALLER_UNAVAILABLE_WARNING = (
    "Frame introspection is unavailable on this interpreter; "
    "histconsole cannot include the caller of console calls"
)


class MethodInterceptor:
    """Callable that forwards a console call and records it in history.

    On each call:
      1. forwards the raw arguments to the backend sink
      2. copies the arguments and applies the kind's save hook
      3. prepends the kind tag
      4. appends 'caller:<label>' when the add_caller option is on; the caller
         is the nearest frame outside histconsole itself
      5. appends the record to the console's history

    Save hook errors (e.g. console.time() without a name) propagate to the
    caller after the backend has been called.
    """

    def __init__(self, kind: str, sink: Optional[Callable[..., Any]],
                 save_hook: Optional[Callable[..., list]], console):
        self.kind = kind
        self.sink = sink
        self.save_hook = save_hook
        self.console = console

    def __call__(self, *args: Any) -> None:
        if self.sink is not None:
            self.sink(*args)

        values = list(args)
        if self.save_hook is not None:
            values = list(self.save_hook(*values))
        record = [self.kind, *values]

        options = self.console.options
        if options.get('add_caller'):
            try:
                frame = outside_package(caller_frame())
            except CallerUnavailableError:
                self.console.warn_once('caller.unavailable',
                                       CALLER_UNAVAILABLE_WARNING)
            else:
                try:
                    label = resolve_caller(
                        frame, options.get('function_snippet_length'))
                finally:
                    del frame
                record.append(CALLER_PREFIX + label)

        self.console.history.append(record)

    def __repr__(self) -> str:
        return f"<MethodInterceptor {self.kind!r}>"
