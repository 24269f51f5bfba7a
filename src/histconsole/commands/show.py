"""histconsole show: pretty-print a saved console history."""

import argparse

from histconsole.history import (
    HistoryLog, record_args, record_caller, record_kind,
)
from histconsole.output import get_output, print_error


def register(subparsers, parents):
    """Register the 'show' subcommand."""
    p = subparsers.add_parser(
        "show",
        parents=parents,
        help="Pretty-print a saved history file",
        description="Print the records of a history file written by 'histconsole run'.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("path", help="History JSON file")
    p.add_argument("--kind", action="append", metavar="KIND", default=None,
                   help="Only show records of this method kind (repeatable)")
    p.set_defaults(func=run)


def format_record(index, record):
    """One display line for a history record."""
    args = " ".join(a if isinstance(a, str) else repr(a)
                    for a in record_args(record))
    line = f"{index:>4}  {record_kind(record):<15} {args}"
    caller = record_caller(record)
    if caller is not None:
        line += f"  [{caller}]"
    return line


def run(args):
    """Execute the show command."""
    try:
        history = HistoryLog.load(args.path)
    except (OSError, ValueError) as e:
        print_error(f"Could not read history from {args.path}: {e}")
        return 1

    kinds = set(args.kind) if args.kind else None
    for index, record in enumerate(history):
        if kinds is None or record_kind(record) in kinds:
            print(format_record(index, record))

    if kinds is None:
        get_output().hint('show.kind')
    return 0
