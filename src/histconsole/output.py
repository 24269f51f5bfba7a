"""Output formatting utilities for the histconsole CLI.

Consistent message formatting across commands. The print_*() helpers
respect the THAC0 quiet axis at its extreme levels (-QQQ, -QQQQ).

Also re-exports the log_lib public API for convenience imports.
"""

import sys

# Re-export log_lib public API: one-stop import for commands
from histconsole.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
)


def _should_print():
    """Check if user-facing print_*() calls should display.

    These behave like level -2 (WARNING) messages: shown at verbosity -2
    and above, suppressed at -3 (errors only) and -4 (hard wall).
    """
    out = get_output()
    return -2 <= out.verbosity


def print_ok(msg):
    """Print a success message to stderr."""
    if _should_print():
        print(f"  [OK] {msg}", file=sys.stderr)


def print_warn(msg):
    """Print a warning message to stderr."""
    if _should_print():
        print(f"  [WARN] {msg}", file=sys.stderr)


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error() which emits at level -3.
    Shown at all verbosity levels except hard wall (-QQQQ / -4).
    """
    get_output().error(f"  ERROR: {msg}")
