"""
Hint dataclass and global registry.

Hints are one-line tips keyed by a dot-namespaced id. Domain modules
register them at import time; OutputManager.hint() shows each one at most
once per manager.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templatized hint that can be shown in specific contexts.

    Attributes:
        id: Unique dot-namespaced identifier (e.g., 'run.output')
        message: Template string with {var} placeholders for str.format()
        context: Set of contexts where this hint applies:
            'error'   - shown alongside error messages
            'result'  - shown after successful results
            'verbose' - shown only when verbosity >= min_level
        min_level: Minimum verbosity level for display
        category: Grouping key (e.g., 'run', 'session')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint in the global registry.

    Duplicate IDs overwrite the previous entry.
    """
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register multiple hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)
