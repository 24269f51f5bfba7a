"""
OutputManager: the THAC0 verbosity system core.

Central coordinator for verbosity-gated output with per-channel overrides.
The emit rule is: message shows when message.level <= threshold.
The threshold is either a per-channel override or the global verbosity.

THAC0 axis:
    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1      0        1        2       3
    wall  errors warnings minimal default  verbose  detail  debug

    -v increments, -Q decrements. They compose: -vv -Q = 1

The manager also carries an indentation depth so console.group() style
nesting is reflected in everything it writes.
"""

import sys
from typing import Any, Dict, Optional, Set, TextIO

from .hints import get_hint
from . import channels as _channels


INDENT = "  "


class OutputManager:
    """Central coordinator for THAC0 verbosity-gated output.

    All output is written to the configured file handle (default: stderr).
    The manager tracks which hints have been shown to avoid repetition
    within a single session.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(0, "Loaded {count} items", channel='log', count=42)
        out.hint('run.output')
        out.error("Something went wrong")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self._file = file
        self.depth = 0
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> bool:
        """Emit a message if level <= threshold for that channel.

        At threshold -4 (hard wall), nothing is emitted regardless of level.
        Multi-line messages are indented line by line at the current depth.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders

        Returns:
            True if the message was written.
        """
        threshold = self.threshold(channel)
        if threshold <= -4 or level > threshold:
            return False
        text = message.format(**kwargs) if kwargs else message
        if self.depth:
            pad = INDENT * self.depth
            text = "\n".join(pad + line for line in text.split("\n"))
        print(text, file=self.file)
        return True

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a hint if appropriate for context, level, and not yet shown.

        Args:
            hint_id: Registry key for the hint
            context: Current context ('error', 'result', 'verbose')
            **kwargs: Values for template placeholders in hint message
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return
        text = h.message.format(**kwargs) if kwargs else h.message
        if self.emit(h.min_level, text, channel='hint'):
            self._shown_hints.add(hint_id)

    def warning(self, message: str) -> None:
        """Emit a warning (level -2)."""
        self.emit(-2, message, channel='error')

    def error(self, message: str) -> None:
        """Emit an error message (level -3, shown unless at hard wall)."""
        self.emit(-3, message, channel='error')

    def indent(self) -> None:
        """Increase the nesting depth by one level."""
        self.depth += 1

    def dedent(self) -> None:
        """Decrease the nesting depth, never below zero."""
        self.depth = max(0, self.depth - 1)

    def channel_active(self, channel: str, level: int = 0) -> bool:
        """Check whether a message at `level` on `channel` would be shown.

        Used by callers to skip expensive formatting (e.g., stack capture).
        """
        threshold = self.threshold(channel)
        return threshold > -4 and level <= threshold

    @property
    def file(self) -> TextIO:
        """Destination stream; sys.stderr is looked up at write time."""
        return self._file if self._file is not None else sys.stderr

    @property
    def quiet(self) -> bool:
        """True when verbosity is negative."""
        return self.verbosity < 0

    @property
    def shown_hints(self) -> Set[str]:
        """Set of hint IDs that have been displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity level (0=default, positive=verbose, negative=quiet)
        channels: List of channel spec strings (e.g., ['trace:2', 'debug'])
        file: Destination stream (default: stderr)

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    # Opt-in channels stay off unless explicitly enabled
    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or ():
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
