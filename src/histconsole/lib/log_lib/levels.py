"""
THAC0 verbosity level constants.

The emit rule is unchanged from the rest of log_lib:

    message.level <= threshold  ->  message is shown

Console method kinds are mapped onto this axis by the project-level
channel table (histconsole.channels.KIND_LEVELS), so `-v` reveals
debug/count/time output and `-Q` hides everything but warnings and errors.

Level assignments:
    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1      0        1        2       3
    wall  errors warnings minimal default  verbose  detail  debug
"""

# Positive levels (verbose output, shown with -v/-vv/-vvv)
DEBUG = 3          # Internal bookkeeping of the interceptor itself
DETAIL = 2         # Option changes, stack traces
VERBOSE = 1        # console.debug, counters, timers, profiles
DEFAULT = 0        # console.log/info/dir/table/group output

# Negative levels (quiet suppression, activated with -Q/-QQ/-QQQ/-QQQQ)
MINIMAL = -1       # Suppress hints
WARNING = -2       # console.warn
ERROR = -3         # console.error/exception/assert failures/alert
NOTHING = -4       # Hard wall: exit code only (CI/headless)
