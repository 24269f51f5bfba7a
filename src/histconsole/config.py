"""Configuration management for histconsole.

Three-layer config resolution (highest priority wins):
  1. CLI flags: explicit on the command line
  2. Project config: .histconsole.json in the working directory or a parent
  3. Global config: ~/.histconsole/config.json (or --config PATH)

Recognized keys:
  add_caller               bool, append caller labels to records
  function_snippet_length  int, source characters for unnamed callers
  output                   str, where `histconsole run` writes the history
  capture_logging          bool, also record stdlib logging records
"""

import json
import os
from pathlib import Path

from histconsole.options import DEFAULT_OPTIONS


PROJECT_CONFIG_NAME = ".histconsole.json"

CONFIG_KEYS = ["add_caller", "function_snippet_length", "output",
               "capture_logging"]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.histconsole/)."""
    return Path.home() / ".histconsole"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .histconsole.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config file)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .histconsole.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def _lookup(cfg, key):
    value = cfg.get(key)
    if value is None:
        value = cfg.get(key.replace("_", "-"))
    return value


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace; None means "not given")
      2. Project .histconsole.json
      3. Global config (args.config when set, else ~/.histconsole/config.json)

    JSON files may spell keys with hyphens or underscores.

    Returns a dict with resolved values (None when no layer sets a key).
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in keys:
        for value in (getattr(args, key, None),
                      _lookup(project_cfg, key),
                      _lookup(global_cfg, key)):
            if value is not None:
                resolved[key] = value
                break
        else:
            resolved[key] = None
    return resolved


def option_values(resolved):
    """Pick the console option entries out of a resolved config dict."""
    return {key: resolved[key] for key in DEFAULT_OPTIONS
            if resolved.get(key) is not None}

