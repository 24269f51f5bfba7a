"""Save hooks: per-kind transforms applied before a call is stored.

A save hook receives the raw arguments of a console call and returns the
list stored in history after the kind tag. The backend still receives the
raw arguments. Kinds with no hook are stored verbatim.

Counter and timer state live on the SaveHooks instance, so every console
facade starts with fresh counters and timers.
"""

import random
import time
import traceback
from typing import Callable, Dict, List, Optional

from histconsole.caller import in_package
from histconsole.errors import MissingArgumentError


TRACE_UNSUPPORTED = 'stack traces not supported'

# Synthesized counter titles are drawn from 1..COUNTER_TITLE_RANGE
COUNTER_TITLE_RANGE = 100000


def now_millis() -> int:
    """Wall-clock time in integer milliseconds."""
    return int(time.time() * 1000)


class SaveHooks:
    """Registry of save hooks for one console facade.

    Args:
        clock: Zero-argument callable returning integer milliseconds
        rng: random.Random-compatible source for untitled counters
    """

    def __init__(self, clock: Callable[[], int] = None,
                 rng: random.Random = None):
        self.clock = clock or now_millis
        self.rng = rng or random.Random()
        self.counters: Dict[str, int] = {}
        self.start_times: Dict[str, int] = {}
        self._hooks = {
            'assert': self.assert_,
            'count': self.count,
            'time': self.time,
            'time_end': self.time_end,
            'time_stamp': self.time_stamp,
            'trace': self.trace,
        }

    def get(self, kind: str) -> Optional[Callable[..., List]]:
        """Hook for `kind`, or None when the kind stores raw arguments."""
        return self._hooks.get(kind)

    def __contains__(self, kind: str) -> bool:
        return kind in self._hooks

    def assert_(self, is_ok=None, message=None, *_) -> List:
        outcome = 'successful' if is_ok else 'failed'
        return [f"Assertion {outcome}: {message}"]

    def count(self, title=None, *_) -> List:
        """Increment the counter for `title`.

        Untitled calls get a synthesized numeric title that is not already
        in use, so each one starts its own counter at 1.
        """
        if not title:
            title = self._new_counter_title()
        title = str(title)
        self.counters[title] = self.counters.get(title, 0) + 1
        return [f"{title} {self.counters[title]}"]

    def _new_counter_title(self) -> str:
        # Redraw on collision; falls back to a counter-sized suffix when the
        # random range is exhausted.
        for _ in range(COUNTER_TITLE_RANGE):
            title = str(self.rng.randint(1, COUNTER_TITLE_RANGE))
            if title not in self.counters:
                return title
        return str(COUNTER_TITLE_RANGE + len(self.counters) + 1)

    def time(self, name=None, *_) -> List:
        if name is None:
            raise MissingArgumentError(
                "console.time needs a title for your timing like "
                "console.time('lookup')"
            )
        self.start_times[str(name)] = self.clock()
        return [name]

    def time_end(self, name=None, *_) -> List:
        """Elapsed milliseconds since time(name).

        Timers are keyed by str(name), so any name works. A timer that was
        never started reports NaN rather than raising.
        """
        start = self.start_times.get(str(name))
        elapsed = self.clock() - start if start is not None else float('nan')
        return [f"{name}: {elapsed}ms"]

    def time_stamp(self, label=None, *_) -> List:
        return [self.clock(), label]

    def trace(self, *_) -> List:
        try:
            frames = [
                f for f in traceback.extract_stack()
                if not in_package(f.filename)
            ]
        except (AttributeError, ValueError):
            return [TRACE_UNSUPPORTED]
        if not frames:
            return [TRACE_UNSUPPORTED]
        return ["console.trace()\n" + "".join(traceback.format_list(frames))]
