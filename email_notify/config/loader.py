"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any

from email_notify.exceptions import ConfigurationError

CONFIG_DIR_ENV = "EMAIL_NOTIFY_CONFIG_DIR"
ENVIRONMENT_ENV = "EMAIL_NOTIFY_ENV"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    The config directory can be overridden with EMAIL_NOTIFY_CONFIG_DIR.
    Defaults to 'config/' in the current directory or one of its parents.
    """
    config_dir_env = os.environ.get(CONFIG_DIR_ENV)
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.is_dir():
            raise ConfigurationError(f"Config directory not found: {config_dir_env}")
        return path

    current = Path.cwd()
    for _ in range(5):
        config_path = current / "config"
        if config_path.is_dir():
            return config_path
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Get the current environment from EMAIL_NOTIFY_ENV (default 'development')."""
    return os.environ.get(ENVIRONMENT_ENV, "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Loading order:
    1. config/default.toml (optional; the plug-in ships working defaults)
    2. config/{EMAIL_NOTIFY_ENV}.toml (optional)

    Returns:
        Merged configuration dictionary
    """
    config_dir = get_config_dir()
    env = get_environment()

    config: dict[str, Any] = {}

    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = load_toml(default_path)

    env_path = config_dir / f"{env}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
