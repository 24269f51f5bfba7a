"""Main CLI entry point for histconsole.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  histconsole -v run app.py          # works
  histconsole run app.py -v          # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from histconsole._version import VERSION, __app_name__


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.histconsole/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in histconsole.commands must export:
      register(subparsers, parents): add itself to the subparser
      run(args): execute the command and return an exit code
    """
    from histconsole.commands import run, show
    return [run, show]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="histconsole: record a replayable history of console calls",
        epilog=(
            "Run 'histconsole <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"{__app_name__} {VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the histconsole CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from histconsole.channels import configure_channels
    from histconsole.lib.log_lib import format_channel_list, init_output
    configure_channels()

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    # Initialize THAC0 output system
    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return 2
    import histconsole.hints  # noqa: F401  register CLI hints

    # Pass 2: parse subcommand args
    parser = _build_parser(_discover_commands())

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
