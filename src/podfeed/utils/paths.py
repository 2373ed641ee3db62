"""Filesystem locations used by podfeed."""

import os
from pathlib import Path

APP_NAME = "podfeed"


def get_config_dir() -> Path:
    """Get the podfeed config directory.

    Honors ``XDG_CONFIG_HOME`` and falls back to ``~/.config``.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def get_config_file() -> Path:
    """Get the path of config.yaml."""
    return get_config_dir() / "config.yaml"
