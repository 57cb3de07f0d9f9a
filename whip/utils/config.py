"""
Configuration utilities for the whip CLI.

Settings live in a YAML file (``~/.whip_config`` by default). Its keys provide
defaults for CLI options such as ``input`` and ``format``.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from ..schedule_api.exceptions import ConfigError
from .logger import get_logger

log = get_logger(__name__)

CONFIG_ENV_VAR = "WHIP_CONFIG"
ENV_FILE_NAME = ".whip.env"

TRUE_VALUES = ("true", "yes")
FALSE_VALUES = ("false", "no")
UNSET_VALUE = "undefined"


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .whip.env in the current directory
    2. .whip.env in the user's home directory
    """
    # Load from current directory
    if os.path.exists(ENV_FILE_NAME):
        load_dotenv(ENV_FILE_NAME)

    # Load from home directory
    home_env = Path.home() / ENV_FILE_NAME
    if home_env.exists():
        load_dotenv(home_env)


def default_config_path() -> Path:
    """Config path from $WHIP_CONFIG, falling back to ~/.whip_config."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".whip_config"


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load the config mapping, creating an empty config file if none exists."""
    path = Path(path).expanduser()
    if not path.exists():
        log.info(f"Initializing config file at {path}")
        save_config({}, path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as cf:
            config = yaml.safe_load(cf)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse config file {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return config


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """Write the config mapping back to its YAML file."""
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as cf:
        yaml.safe_dump(config, cf, sort_keys=False, allow_unicode=True)


def coerce_config_value(value: str) -> Any:
    """Turn CLI strings like "yes"/"no" into booleans; anything else is kept."""
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return value


def set_config_value(config: Dict[str, Any], key: str, value: str) -> Dict[str, Any]:
    """Return a copy of `config` with `key` set, or removed when value is "undefined"."""
    updated = dict(config)
    if value == UNSET_VALUE:
        updated.pop(key, None)
    else:
        updated[key] = coerce_config_value(value)
    return updated


def resolve_option(cli_value: Optional[Any], config: Dict[str, Any], key: str, default: Any = None) -> Any:
    """An explicit CLI value wins over the config file, which wins over `default`."""
    if cli_value is not None:
        return cli_value
    return config.get(key, default)
