"""User configuration for pacpick.

Configuration is stored in ~/.config/pacpick/config.toml. Every key is
optional; a missing file means all defaults.

Example:
    native_command = "pacman"
    aur_helper = "paru"
    height = "100%"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pacpick.core.paths import get_config_path

logger = logging.getLogger(__name__)

# Command names must be bare executables looked up in PATH
_COMMAND_PATTERN = r"^[A-Za-z0-9._+-]+$"


class PacpickConfig(BaseModel):
    """Configuration for the interactive session.

    Attributes:
        native_command: Package manager for native packages.
        aur_helper: AUR helper for foreign packages.
        selector: Fuzzy selector executable.
        elevation_command: Command used to validate cached credentials.
        height: Selector height passed to fzf --height.
        preview_window: Preview layout passed to fzf --preview-window.
        persistent: Return to the list after each action instead of exiting.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    native_command: Annotated[
        str,
        Field(pattern=_COMMAND_PATTERN, description="Native package manager"),
    ] = "pacman"
    aur_helper: Annotated[
        str,
        Field(pattern=_COMMAND_PATTERN, description="AUR helper (yay, paru, ...)"),
    ] = "yay"
    selector: Annotated[
        str,
        Field(pattern=_COMMAND_PATTERN, description="Fuzzy selector executable"),
    ] = "fzf"
    elevation_command: Annotated[
        str,
        Field(pattern=_COMMAND_PATTERN, description="Privilege elevation command"),
    ] = "sudo"
    height: Annotated[
        str,
        Field(min_length=1, description="Selector height"),
    ] = "90%"
    preview_window: Annotated[
        str,
        Field(min_length=1, description="Preview window layout"),
    ] = "right:50%:border-left"
    persistent: Annotated[
        bool,
        Field(description="Loop back to the list after each action"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


def load_config(path: Path | None = None) -> PacpickConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PacpickConfig; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return PacpickConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return PacpickConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def dump_config(config: PacpickConfig) -> str:
    """Render a configuration as TOML text.

    Args:
        config: The configuration to render.

    Returns:
        TOML document with every setting.
    """
    return tomli_w.dumps(config.model_dump())
