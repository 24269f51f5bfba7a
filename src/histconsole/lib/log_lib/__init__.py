"""
log_lib: THAC0 verbosity system with named channels.

Output management used by histconsole's native console backend and CLI:
- Single-axis THAC0 verbosity (level <= threshold)
- Named output channels with per-channel overrides
- Hint registry with context filtering and dedup
- Group-style indentation

Public API:
    OutputManager      - central coordinator
    init_output        - singleton initialization
    get_output         - access singleton
    Hint               - hint dataclass
    register_hint      - register a hint
    register_hints     - register multiple hints
    get_hint           - look up hint by ID
    ChannelConfig      - parsed channel spec
    parse_channel_spec - parse CLI channel spec
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint,
)
from .channels import (
    ChannelConfig, parse_channel_spec, format_channel_list,
)

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint',
    'ChannelConfig', 'parse_channel_spec', 'format_channel_list',
]
