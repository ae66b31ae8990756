"""XDG-compliant path management for fskit.

The only persisted artifact is the user settings file, stored under
the XDG configuration directory (~/.config/fskit/ by default).
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fskit"

SETTINGS_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fskit/ (or XDG_CONFIG_HOME/fskit/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/fskit/config.toml.
    """
    return get_config_dir() / SETTINGS_FILENAME
