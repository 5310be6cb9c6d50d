import os
from dataclasses import fields, replace
from typing import Any, Optional

import yaml
from rich.console import Console

from txleg_core.exceptions import ConfigError
from txleg_core.parsers.config import DEFAULT_PARSER_CONFIG, ParserConfig

console = Console()

DEFAULT_DB_PATH = "txleg_parse.db"

DEFAULT_CONFIG: dict[str, Any] = {
    "parser": {},
    "storage": {"enabled": False, "db_path": DEFAULT_DB_PATH},
    "logging": {"level": "WARNING", "buffer_capacity": 1000},
}


def load_config(config_path: str = "config.yaml") -> dict[str, Any]:
    """
    From config.yaml

    Args:
        config_path: Path to config file (default: config.yaml)

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or DEFAULT_CONFIG
    except FileNotFoundError:
        console.print(f"[red]Error: {config_path} not found. Using default config.[/red]")
        return DEFAULT_CONFIG
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e


def parser_config_from_dict(values: Optional[dict[str, Any]]) -> ParserConfig:
    """
    Build a ParserConfig from the `parser:` block of config.yaml.

    Keys are matched case-insensitively against ParserConfig field names,
    so `action_window_after: 150` overrides ACTION_WINDOW_AFTER.

    Raises:
        ConfigError: Unknown key, or a value that is not a non-negative int
    """
    if not values:
        return DEFAULT_PARSER_CONFIG
    if not isinstance(values, dict):
        raise ConfigError(f"parser config must be a mapping, got {type(values).__name__}")

    known = {f.name for f in fields(ParserConfig)}
    overrides = {}
    for key, value in values.items():
        name = str(key).upper()
        if name not in known:
            raise ConfigError(f"Unknown parser setting: {key}")
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"Parser setting {key} must be a non-negative integer, got {value!r}")
        overrides[name] = value

    return replace(DEFAULT_PARSER_CONFIG, **overrides)


def get_db_path(config: Optional[dict[str, Any]] = None) -> str:
    """TXLEG_DB_PATH wins over config.yaml storage.db_path."""
    env_path = os.getenv("TXLEG_DB_PATH", "")
    if env_path:
        return env_path
    storage = (config or {}).get("storage") or {}
    return storage.get("db_path", DEFAULT_DB_PATH)
