"""Configuration loading utilities."""

import json
import os
import threading
from pathlib import Path
from typing import Any

from randomorg.config.schema import Config

# Older setups export the key under this name instead of RANDOM_ORG_API_KEY.
LEGACY_API_KEY_ENV = "RANDOM_ORG_API"

_config_lock = threading.Lock()
_loaded: Config | None = None


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".randomorg" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, falling back to environment and defaults.

    Values in the file take precedence over ``RANDOM_ORG_*`` environment
    variables; fields missing from the file are read from the environment.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must be a JSON object")
            cfg = Config(**convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to regenerate defaults."
            ) from e
    else:
        cfg = Config()

    _apply_legacy_api_key_env(cfg)
    return cfg


def get_config(*, force_reload: bool = False) -> Config:
    """Return the config at the default path, loading it once per process."""
    global _loaded
    with _config_lock:
        if _loaded is None or force_reload:
            _loaded = load_config()
        return _loaded


def clear_config_cache() -> None:
    """Forget the loaded config so the next ``get_config`` reads it again."""
    global _loaded
    with _config_lock:
        _loaded = None


def _apply_legacy_api_key_env(cfg: Config) -> None:
    """Fill api_key from RANDOM_ORG_API when nothing else set it."""
    if cfg.api_key:
        return
    legacy = os.environ.get(LEGACY_API_KEY_ENV, "").strip()
    if legacy:
        cfg.api_key = legacy


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Only values that differ from the defaults are written, so an unset API
    key never shadows the environment on the next load.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(exclude_defaults=True)
    data = convert_to_camel(data)

    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    if path == get_config_path():
        clear_config_cache()


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
