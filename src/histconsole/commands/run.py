"""histconsole run: execute a Python script inside a recording session.

The script runs as ``__main__`` with a HistoricalConsole installed as the
active console, so every call it makes through ``histconsole.console`` is
recorded. When the script finishes (or raises) the history is written as
JSON to --output, or printed to stdout.

Example::

    # app.py
    from histconsole import console

    def load():
        console.time('load')
        ...
        console.time_end('load')

    load()

    $ histconsole run --output history.json app.py
"""

import argparse
import runpy
import sys
import traceback
from contextlib import ExitStack
from pathlib import Path

from histconsole.capture import capture_logging
from histconsole.config import option_values, resolve_config
from histconsole.facade import HistoricalConsole
from histconsole.lib.log_lib.levels import VERBOSE
from histconsole.session import historical_console
from histconsole.state import set_uncaught_handler
from histconsole.output import get_output, print_error, print_ok, print_warn


def register(subparsers, parents):
    """Register the 'run' subcommand."""
    p = subparsers.add_parser(
        "run",
        parents=parents,
        help="Run a Python script and record its console history",
        description=(
            "Run a Python script with a recording console installed and\n"
            "write the resulting history as JSON. Options for this command\n"
            "go before the script path; everything after it is passed to\n"
            "the script."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--output", "-o", metavar="PATH", default=None,
                   help="Write the history to PATH instead of stdout")
    p.add_argument("--no-caller", dest="add_caller", action="store_const",
                   const=False, default=None,
                   help="Do not record caller labels")
    p.add_argument("--snippet-length", dest="function_snippet_length",
                   type=int, metavar="N", default=None,
                   help="Source characters used to label unnamed callers")
    p.add_argument("--capture-logging", action="store_const", const=True,
                   default=None,
                   help="Also record stdlib logging records")
    p.add_argument("script", help="Path to the Python script")
    p.add_argument("script_args", nargs=argparse.REMAINDER,
                   help="Arguments passed to the script")
    p.set_defaults(func=run)


def _exec_script(script, script_args):
    """Run `script` as __main__ with sys.argv set for it.

    Returns:
        The script's SystemExit code, or None when it ran to the end.
    """
    saved_argv = sys.argv
    sys.argv = [str(script)] + list(script_args)
    try:
        runpy.run_path(str(script), run_name="__main__")
    except SystemExit as e:
        return e.code
    finally:
        sys.argv = saved_argv
    return None


def run(args):
    """Execute the run command."""
    script = Path(args.script)
    if not script.is_file():
        print_error(f"Script not found: {script}")
        return 2

    resolved = resolve_config(args)
    console = HistoricalConsole(options=option_values(resolved))
    get_output().emit(VERBOSE, "Console options: {options}",
                      options=console.options.as_dict())
    failures = []
    exit_codes = []

    def on_uncaught(exc):
        failures.append(exc)
        print_error("Script raised an exception:\n" + "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ).rstrip())

    def session(console):
        with ExitStack() as stack:
            if resolved["capture_logging"]:
                stack.enter_context(capture_logging(console))
            exit_codes.append(_exec_script(script, args.script_args or []))

    previous = set_uncaught_handler(on_uncaught)
    try:
        historical_console(session, console=console)()
    finally:
        set_uncaught_handler(previous)

    out = get_output()
    output = resolved["output"]
    if output:
        try:
            path = console.history.save(output)
        except OSError as e:
            print_error(f"Could not write history to {output}: {e}")
            return 1
        print_ok(f"Saved {len(console.history)} records to {path}")
        out.hint('run.show', path=path)
    else:
        print(console.history.dumps(indent=2))
        out.hint('run.output')
    out.hint('run.caller', context='verbose')

    if failures:
        return 1
    code = exit_codes[0] if exit_codes else None
    if code is None or code == 0:
        return 0
    print_warn(f"Script exited with code {code}")
    return code if isinstance(code, int) else 1
