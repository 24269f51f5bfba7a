"""
Channel registry and parsing for the THAC0 verbosity system.

Channels are named output categories. Each channel can carry its own
verbosity threshold that overrides the global level. The registry here is
generic; projects replace it at startup (see histconsole.channels).

A bare CHANNEL spec opens the channel to the level registered for it in
CHANNEL_DEFAULT_LEVELS, so channels whose messages are emitted above the
default verbosity become visible without spelling out a level.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        debug          # Open debug to its registered level (0 if none)
        trace:2        # Pin trace output to threshold 2
        warn:-4        # Silence the warn channel entirely
"""

from dataclasses import dataclass
from typing import Dict, Set


KNOWN_CHANNELS: Set[str] = {
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
}

CHANNEL_DESCRIPTIONS: Dict[str, str] = {
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
}

# Threshold a bare "--show CHANNEL" sets; channels not listed get 0.
CHANNEL_DEFAULT_LEVELS: Dict[str, int] = {}

# Channels that are OFF by default (require explicit --show to activate).
OPT_IN_CHANNELS: Set[str] = set()


@dataclass
class ChannelConfig:
    """Parsed form of a CHANNEL[:LEVEL] spec."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Args:
        spec: Channel spec like "trace" or "trace:2"; a bare name takes
            the level from CHANNEL_DEFAULT_LEVELS

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: If the channel name is empty or the level is not an integer
    """
    name, _, level = spec.strip().partition(':')
    if not name:
        raise ValueError(f"Empty channel name in spec {spec!r}")
    if not level:
        return ChannelConfig(name=name,
                             level=CHANNEL_DEFAULT_LEVELS.get(name, 0))
    try:
        return ChannelConfig(name=name, level=int(level))
    except ValueError:
        raise ValueError(
            f"Channel level must be an integer, got {level!r} in {spec!r}"
        ) from None


def format_channel_list() -> str:
    """Format the list of known channels for display.

    Returns:
        Formatted string listing all channels with descriptions.
    """
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
