"""Console method kinds and their THAC0 channel definitions.

Every console method kind doubles as a log_lib output channel, so
``--show debug`` or ``--show warn:-4`` tunes one kind at a time. A bare
``--show KIND`` opens the channel to the level its messages are emitted at.
This file is the project-level configuration that keeps log_lib generic.

Usage:
    from histconsole.channels import METHOD_KINDS, KIND_LEVELS, attr_name
    from histconsole.channels import configure_channels
"""

import keyword

from histconsole.lib.log_lib import channels as _ch
from histconsole.lib.log_lib import levels


# Closed set of intercepted method kinds, in facade declaration order
METHOD_KINDS = (
    'assert', 'clear', 'count', 'debug', 'dir', 'dirxml', 'error',
    'exception', 'group', 'group_collapsed', 'group_end', 'info', 'log',
    'profile', 'profile_end', 'table', 'time', 'time_end',
    'time_stamp', 'trace', 'warn', 'alert',
)

# Level at which the native backend renders each kind
KIND_LEVELS = {
    'alert':           levels.ERROR,
    'assert':          levels.ERROR,
    'error':           levels.ERROR,
    'exception':       levels.ERROR,
    'warn':            levels.WARNING,
    'clear':           levels.DEFAULT,
    'dir':             levels.DEFAULT,
    'dirxml':          levels.DEFAULT,
    'group':           levels.DEFAULT,
    'group_collapsed': levels.DEFAULT,
    'group_end':       levels.DEFAULT,
    'info':            levels.DEFAULT,
    'log':             levels.DEFAULT,
    'table':           levels.DEFAULT,
    'count':           levels.VERBOSE,
    'debug':           levels.VERBOSE,
    'profile':         levels.VERBOSE,
    'profile_end':     levels.VERBOSE,
    'time':            levels.VERBOSE,
    'time_end':        levels.VERBOSE,
    'time_stamp':      levels.VERBOSE,
    'trace':           levels.DETAIL,
}

HC_CHANNELS = set(METHOD_KINDS) | {
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Library error messages
    'options',      # Option change notifications
}

HC_CHANNEL_DESCRIPTIONS = {
    'alert':           'User-facing alerts',
    'assert':          'Failed assertions',
    'clear':           'Console clears',
    'count':           'Counter output',
    'debug':           'console.debug output',
    'dir':             'Object listings (repr)',
    'dirxml':          'Object listings (repr)',
    'error':           'console.error output and library errors',
    'exception':       'console.exception output',
    'group':           'Group headers',
    'group_collapsed': 'Collapsed group headers',
    'group_end':       'Group terminators',
    'info':            'console.info output',
    'log':             'console.log output',
    'profile':         'Profile start markers',
    'profile_end':     'Profile end markers',
    'table':           'Tabular output',
    'time':            'Timer start markers',
    'time_end':        'Timer results',
    'time_stamp':      'Timestamps',
    'trace':           'Stack traces',
    'warn':            'console.warn output',
    'general':         'General output',
    'hint':            'Contextual tips and suggestions',
    'options':         'Option change notifications',
}

# Threshold a bare --show CHANNEL opens each channel to, so every message
# the channel carries is shown
HC_CHANNEL_LEVELS = {
    **{kind: max(levels.DEFAULT, level) for kind, level in KIND_LEVELS.items()},
    'options': levels.DETAIL,
}

HC_OPT_IN_CHANNELS = {
    'options',      # Option change notifications, off unless --show options
}


def attr_name(kind):
    """Python attribute name for a method kind ('assert' -> 'assert_')."""
    return f"{kind}_" if keyword.iskeyword(kind) else kind


def configure_channels():
    """Override log_lib's default channels with the console channel set.

    Call once at startup before init_output().
    """
    _ch.KNOWN_CHANNELS = HC_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = HC_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = HC_OPT_IN_CHANNELS
    _ch.CHANNEL_DEFAULT_LEVELS = HC_CHANNEL_LEVELS
