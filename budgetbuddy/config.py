"""Configuration file management for budgetbuddy."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from budgetbuddy.dates import current_month, parse_month
from budgetbuddy.domain.models import Month
from budgetbuddy.store.schema import get_db_path

DEFAULT_CONFIG: dict[str, Any] = {
    "currency": "$",
    "log_level": "WARNING",
}


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
    return get_xdg_config_home() / "budgetbuddy" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(DEFAULT_CONFIG, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, merged over the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary. A missing file yields the defaults.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_CONFIG)
    if config_path.exists():
        with open(config_path, "rb") as f:
            config.update(tomllib.load(f))
    return config


def database_path(config: dict[str, Any]) -> Path:
    """Resolve the database location, honouring a ``db_path`` override."""
    configured = config.get("db_path")
    if configured:
        return Path(configured).expanduser()
    return get_db_path()


def start_month(config: dict[str, Any]) -> Month:
    """Initial month cursor: ``start_month`` from config, else the current month.

    Raises:
        ValueError: If the configured month is invalid.
    """
    configured = config.get("start_month")
    if configured:
        return parse_month(configured)
    return current_month()
