"""Configuration file management for pennybook."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_DATA_FILE = "data.csv"
DEFAULT_LOG_LEVEL = "WARNING"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pennybook" / "config.toml"


def default_config() -> dict[str, Any]:
    """Get the settings written by a fresh init."""
    return {
        "data_file": DEFAULT_DATA_FILE,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_setting(key: str, default: Any = None, config_path: Path | None = None) -> Any:
    """Get a single setting, falling back to a default.

    A missing config file is not an error; pennybook works without one.

    Args:
        key: Setting name.
        default: Value returned if the file or key is absent.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Setting value or default.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return default
    return config.get(key, default)
