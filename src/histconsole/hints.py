"""histconsole CLI hints for the THAC0 verbosity system.

Hints are contextual tips shown after commands complete. Each hint shows
at most once per session.

Import this module to register all histconsole hints with the global
registry.
"""

from histconsole.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='run.output',
        message='  Tip: Use --output PATH to save the history instead of printing it.',
        context={'result'},
        min_level=0,
        category='run',
    ),
    Hint(
        id='run.show',
        message="  Tip: Inspect a saved history with 'histconsole show {path}'.",
        context={'result'},
        min_level=0,
        category='run',
    ),
    Hint(
        id='run.caller',
        message=('  Note: caller:null marks console calls made at module level, '
                 'outside any function.'),
        context={'verbose'},
        min_level=1,
        category='run',
    ),
    Hint(
        id='show.kind',
        message='  Tip: Filter records by method with --kind, e.g. --kind error.',
        context={'result'},
        min_level=1,
        category='show',
    ),
)
