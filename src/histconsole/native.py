"""Console backends: the real sinks a facade forwards to.

NativeConsole renders console calls as text through the log_lib
OutputManager, so each method kind is a verbosity-gated channel.
LoggerConsole hands them to a stdlib ``logging.Logger`` instead.

A backend is any object with methods named after the method kinds
('assert_' for assert). The facade falls back to ``log`` for kinds a
backend does not implement.
"""

import logging
import pprint
import sys
import time
import traceback
from typing import Any, Dict, List, Optional

from histconsole.caller import in_package
from histconsole.channels import KIND_LEVELS
from histconsole.lib.log_lib import OutputManager, get_output


def format_args(args) -> str:
    """Join console arguments the way print() would."""
    return " ".join(str(a) for a in args)


def format_table(data: Any, columns: Optional[List[str]] = None) -> str:
    """Render a mapping or sequence as an aligned text table.

    Rows whose values are mappings contribute one column per key; any
    other row value lands in a 'Values' column.
    """
    if isinstance(data, dict):
        rows = list(data.items())
    elif isinstance(data, (list, tuple)):
        rows = list(enumerate(data))
    else:
        return repr(data)

    headers: List[str] = []
    cells: List[Dict[str, str]] = []
    for index, value in rows:
        if isinstance(value, dict):
            row = {str(k): repr(v) for k, v in value.items()}
        else:
            row = {'Values': repr(value)}
        for key in row:
            if key not in headers:
                headers.append(key)
        cells.append({'(index)': str(index), **row})
    if columns is not None:
        headers = [str(c) for c in columns]
    headers = ['(index)'] + headers

    widths = {h: max([len(h)] + [len(r.get(h, '')) for r in cells])
              for h in headers}
    lines = [" | ".join(h.ljust(widths[h]) for h in headers)]
    lines.append("-+-".join("-" * widths[h] for h in headers))
    for r in cells:
        lines.append(" | ".join(r.get(h, '').ljust(widths[h]) for h in headers))
    return "\n".join(lines)


def _user_stack() -> str:
    frames = [f for f in traceback.extract_stack()
              if not in_package(f.filename)]
    return "".join(traceback.format_list(frames)).rstrip("\n")


class NativeConsole:
    """Console backend that writes through an OutputManager.

    Args:
        out: OutputManager to write to. None means the log_lib singleton,
            looked up on every call so init_output() takes effect.
    """

    def __init__(self, out: OutputManager = None):
        self._out = out
        self._counters: Dict[str, int] = {}
        self._timers: Dict[str, float] = {}

    @property
    def out(self) -> OutputManager:
        return self._out if self._out is not None else get_output()

    def _emit(self, kind: str, text: str) -> None:
        self.out.emit(KIND_LEVELS[kind], text, channel=kind)

    def log(self, *args: Any) -> None:
        self._emit('log', format_args(args))

    def info(self, *args: Any) -> None:
        self._emit('info', format_args(args))

    def debug(self, *args: Any) -> None:
        self._emit('debug', format_args(args))

    def warn(self, *args: Any) -> None:
        self._emit('warn', format_args(args))

    def error(self, *args: Any) -> None:
        self._emit('error', format_args(args))

    def exception(self, *args: Any) -> None:
        text = format_args(args)
        if sys.exc_info()[0] is not None:
            text = f"{text}\n{traceback.format_exc().rstrip()}"
        self._emit('exception', text)

    def assert_(self, is_ok: Any = None, *args: Any) -> None:
        if is_ok:
            return
        message = format_args(args)
        self._emit('assert', f"Assertion failed: {message}" if message
                   else "Assertion failed")

    def alert(self, *args: Any) -> None:
        self._emit('alert', f"[ALERT] {format_args(args)}")

    def clear(self) -> None:
        self.out.depth = 0

    def count(self, label: Any = 'default', *_: Any) -> None:
        label = str(label)
        self._counters[label] = self._counters.get(label, 0) + 1
        self._emit('count', f"{label}: {self._counters[label]}")

    def dir(self, *objs: Any) -> None:
        for obj in objs:
            self._emit('dir', pprint.pformat(obj))

    def dirxml(self, *objs: Any) -> None:
        for obj in objs:
            self._emit('dirxml', pprint.pformat(obj))

    def group(self, *label: Any) -> None:
        if label:
            self._emit('group', format_args(label))
        self.out.indent()

    def group_collapsed(self, *label: Any) -> None:
        if label:
            self._emit('group_collapsed', format_args(label))
        self.out.indent()

    def group_end(self) -> None:
        self.out.dedent()

    def profile(self, name: Any = None, *_: Any) -> None:
        self._emit('profile', f"Profile '{name or ''}' started.")

    def profile_end(self, name: Any = None, *_: Any) -> None:
        self._emit('profile_end', f"Profile '{name or ''}' finished.")

    def table(self, data: Any = None, columns: Optional[List[str]] = None) -> None:
        self._emit('table', format_table(data, columns))

    def time(self, label: Any = 'default', *_: Any) -> None:
        self._timers[str(label)] = time.perf_counter()

    def time_end(self, label: Any = 'default', *_: Any) -> None:
        start = self._timers.pop(str(label), None)
        if start is None:
            self._emit('warn', f"Timer '{label}' does not exist")
            return
        elapsed = (time.perf_counter() - start) * 1000
        self._emit('time_end', f"{label}: {elapsed:.3f}ms")

    def time_stamp(self, label: Any = None, *_: Any) -> None:
        stamp = int(time.time() * 1000)
        self._emit('time_stamp', f"Timestamp {stamp}" + (f" {label}" if label else ""))

    def trace(self, *args: Any) -> None:
        if not self.out.channel_active('trace', KIND_LEVELS['trace']):
            return
        head = "Trace: " + format_args(args) if args else "Trace"
        self._emit('trace', f"{head}\n{_user_stack()}")


class LoggerConsole:
    """Console backend that forwards to a stdlib logger.

    Only kinds with an obvious logging level get their own method; every
    other kind reaches ``log`` through the facade's fallback.

    Args:
        logger: Target logger (default: 'histconsole.console')
        stacklevel: Passed to the logger so records point at the code that
            called the console method through a facade
    """

    def __init__(self, logger: logging.Logger = None, stacklevel: int = 3):
        self.logger = logger or logging.getLogger('histconsole.console')
        self.stacklevel = stacklevel

    def _log(self, level: int, args, **kwargs: Any) -> None:
        self.logger.log(level, format_args(args),
                        stacklevel=self.stacklevel + 1, **kwargs)

    def log(self, *args: Any) -> None:
        self._log(logging.INFO, args)

    def info(self, *args: Any) -> None:
        self._log(logging.INFO, args)

    def debug(self, *args: Any) -> None:
        self._log(logging.DEBUG, args)

    def warn(self, *args: Any) -> None:
        self._log(logging.WARNING, args)

    def error(self, *args: Any) -> None:
        self._log(logging.ERROR, args)

    def exception(self, *args: Any) -> None:
        self._log(logging.ERROR, args, exc_info=sys.exc_info()[0] is not None)

    def assert_(self, is_ok: Any = None, *args: Any) -> None:
        if not is_ok:
            self._log(logging.ERROR, ("Assertion failed:",) + args)

    def alert(self, *args: Any) -> None:
        self._log(logging.CRITICAL, args)
