"""
Path helpers for Launchify's own data (config and logs).
"""

import os
from pathlib import Path


def get_launchify_config_dir() -> Path:
    """Return ~/.config/launchify, honouring XDG_CONFIG_HOME."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(base) / "launchify"


def get_launchify_data_dir() -> Path:
    """Return ~/.local/share/launchify, honouring XDG_DATA_HOME."""
    base = os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    return Path(base) / "launchify"


def get_launchify_logs_dir() -> Path:
    return get_launchify_data_dir() / "logs"
