"""
Version information for histconsole.

This file is the canonical source for version numbers; setup.py reads
PIP_VERSION from here.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 0.1.0-alpha
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "histconsole"


def get_version():
    """Return the display version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    return f"{base}-{PHASE}" if PHASE else base


def get_pip_version():
    """
    Return the PEP 440 form of the version for pip/setuptools.

    0.1.0-alpha -> 0.1.0a0, 0.1.0-beta -> 0.1.0b0, 0.1.0-rc1 -> 0.1.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_version()
VERSION = __version__
PIP_VERSION = get_pip_version()
