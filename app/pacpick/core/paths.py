"""XDG-compliant path management for pacpick.

pacpick keeps no state between runs; the only on-disk locations it
reads are the user's configuration files:

- Config: ~/.config/pacpick/config.toml
- Theme:  ~/.config/pacpick/theme.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pacpick"

# Environment variable naming the scratch state file shared with fzf hooks
STATE_ENV_VAR = "PACPICK_STATE"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pacpick/ (or XDG_CONFIG_HOME/pacpick/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the user configuration file path.

    Returns:
        Path to ~/.config/pacpick/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/pacpick/theme.toml.
    """
    return get_config_dir() / "theme.toml"
